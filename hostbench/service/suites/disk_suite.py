from pathlib import Path
from typing import List, Optional, Tuple

from hostbench.consts.labels import FILE_CLEANUP, READ, WRITE
from hostbench.service.harness.operation import Operation

DEFAULT_FILE_SIZE = 1024 * 1024


class DiskFixture:
    """Buffer and temp file shared by the write, read and cleanup steps."""

    def __init__(self, path: Path, size: int = DEFAULT_FILE_SIZE, fill_char: str = "x"):
        self.path = Path(path)
        self.data = fill_char * size
        self.read_back: Optional[str] = None

    def write(self) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(self.data)

    def read(self) -> None:
        with open(self.path, 'r', encoding='utf-8') as f:
            self.read_back = f.read()

    def cleanup(self) -> None:
        self.path.unlink()


def disk_operations(path: Path, size: int = DEFAULT_FILE_SIZE, fill_char: str = "x") -> Tuple[DiskFixture, List[Operation]]:
    fixture = DiskFixture(path, size=size, fill_char=fill_char)
    return fixture, [
        Operation(WRITE, fixture.write),
        Operation(READ, fixture.read),
        Operation(FILE_CLEANUP, fixture.cleanup),
    ]
