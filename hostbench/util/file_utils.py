import tempfile
from pathlib import Path
from typing import List, Optional

QUERIES_DIR = Path(__file__).resolve().parent.parent / "queries"


def temp_path(file_name: str, temp_dir: Optional[str] = None) -> Path:
    """
    Build a path for a benchmark artifact inside the temporary directory.

    Args:
        file_name: Base name of the artifact
        temp_dir: Directory to use; the platform temp directory when empty

    Returns:
        Path of the artifact (not created)
    """
    base = Path(temp_dir) if temp_dir else Path(tempfile.gettempdir())
    return base / file_name


def resolve_sql_file(sql_file: str) -> Path:
    """
    Resolve a SQL file name from the config against the packaged queries directory.

    Absolute paths and paths relative to the working directory are used as-is
    when they exist.
    """
    p = Path(sql_file)
    if p.is_file():
        return p.resolve()
    packaged = QUERIES_DIR / sql_file
    if packaged.is_file():
        return packaged
    raise FileNotFoundError(f"SQL file not found: {sql_file}")


def read_sql_file(sql_file: Path) -> str:
    with open(sql_file, 'r', encoding='utf-8') as f:
        return f.read()


def split_statements(script: str) -> List[str]:
    """
    Split a SQL script into individual statements on semicolons.

    Full-line ``--`` comments are removed first. The fixed scripts never carry
    a semicolon inside a string literal.
    """
    lines = [line for line in script.split('\n') if not line.strip().startswith('--')]
    statements = []
    for chunk in '\n'.join(lines).split(';'):
        stmt = chunk.strip()
        if stmt:
            statements.append(stmt)
    return statements
