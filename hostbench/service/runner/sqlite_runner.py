import sqlite3
from pathlib import Path
from typing import List

from .runner import Runner


class SQLiteRunner(Runner):

    engine_name = "sqlite"

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_file))

    def _table_names_sql(self) -> str:
        return "SELECT name FROM sqlite_master WHERE type = 'table'"

    def _sidecar_files(self) -> List[Path]:
        return [Path(f"{self.db_file}-journal"), Path(f"{self.db_file}-wal"), Path(f"{self.db_file}-shm")]
