from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List

from hostbench.util.file_utils import split_statements
from hostbench.util.log_config import setup_logger

logger = setup_logger(__name__)


class Runner(ABC):
    """Abstract base Runner around one embedded database file.

    Subclasses implement _connect. The connection object they return must
    offer execute(sql) returning a cursor with fetchall(), commit() and
    close(), which both sqlite3 and duckdb connections do.
    """

    engine_name = "base"

    def __init__(self, db_file: Path) -> None:
        self.db_file = Path(db_file)
        self.connection = None

    @abstractmethod
    def _connect(self) -> Any:
        """Open the database file and return the connection."""
        pass

    @property
    def is_open(self) -> bool:
        return self.connection is not None

    def open(self) -> None:
        self.connection = self._connect()
        logger.debug(f"Opened {self.engine_name} database: {self.db_file}")

    def _require_open(self):
        if self.connection is None:
            raise RuntimeError(f"{self.engine_name} database is not open: {self.db_file}")
        return self.connection

    def execute_script(self, script: str) -> int:
        """
        Execute every statement of a batch script in order and commit.

        Returns:
            Number of statements executed
        """
        con = self._require_open()
        statements = split_statements(script)
        for stmt in statements:
            con.execute(stmt)
        self._commit(con)
        return len(statements)

    def _commit(self, con) -> None:
        con.commit()

    def fetch_all(self, sql: str) -> List[tuple]:
        con = self._require_open()
        return con.execute(sql).fetchall()

    def table_names(self) -> List[str]:
        return sorted(row[0] for row in self.fetch_all(self._table_names_sql()))

    @abstractmethod
    def _table_names_sql(self) -> str:
        pass

    def close(self) -> None:
        con = self._require_open()
        con.close()
        self.connection = None
        logger.debug(f"Closed {self.engine_name} database: {self.db_file}")

    def delete_db_file(self) -> None:
        """Remove the database file and any sidecar files the engine left next to it."""
        for path in [self.db_file] + self._sidecar_files():
            if path.exists():
                path.unlink()
                logger.debug(f"Deleted {path}")

    def _sidecar_files(self) -> List[Path]:
        return []
