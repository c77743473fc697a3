from typing import Dict, List

from hostbench.config.query_group import QueryGroup
from hostbench.config.schema_files import SchemaFiles
from hostbench.consts.EngineType import EngineType


class BenchConfig:
    engine: EngineType
    repeat: int
    suites: List[str]
    sqrt_iterations: int
    file_size_bytes: int
    fill_char: str
    test_file_name: str
    temp_dir: str
    db_file_names: Dict[str, str]
    track_memory: bool
    output_dir: str
    log_file: str
    log_level: str
    schema: SchemaFiles
    query_groups: List[QueryGroup]

    @property
    def db_file_name(self) -> str:
        return self.db_file_names[self.engine.value]

    def __str__(self):
        return (f"BenchConfig(\n"
                f"  engine={self.engine.value},\n"
                f"  repeat={self.repeat},\n"
                f"  suites={self.suites},\n"
                f"  sqrt_iterations={self.sqrt_iterations},\n"
                f"  file_size_bytes={self.file_size_bytes},\n"
                f"  temp_dir={self.temp_dir or '<system>'},\n"
                f"  db_file_name={self.db_file_name},\n"
                f"  track_memory={self.track_memory},\n"
                f"  query_groups={[qg.id for qg in self.query_groups]}\n"
                f")")
