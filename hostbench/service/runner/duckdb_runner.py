from pathlib import Path
from typing import List

import duckdb

from .runner import Runner


class DuckdbRunner(Runner):

    engine_name = "duckdb"

    def _connect(self) -> duckdb.DuckDBPyConnection:
        return duckdb.connect(str(self.db_file))

    def _commit(self, con) -> None:
        # Each statement already ran in its own auto-committed transaction
        pass

    def _table_names_sql(self) -> str:
        return "SELECT table_name FROM information_schema.tables WHERE table_schema = 'main'"

    def _sidecar_files(self) -> List[Path]:
        return [Path(f"{self.db_file}.wal")]
