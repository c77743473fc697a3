"""
SQL suite: schema, fixtures and four fixed queries against one embedded database.

Steps run as separate harness operations so each gets its own timing line.
Nothing here closes or deletes the database if an earlier step raises.
"""
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from hostbench.consts.labels import DB_CLOSE, DB_OPEN, INSERT, SCHEMA
from hostbench.service.harness.operation import Operation
from hostbench.service.runner.runner import Runner
from hostbench.util.file_utils import read_sql_file
from hostbench.util.log_config import setup_logger

logger = setup_logger(__name__)

TABLES = ("customers", "categories", "products", "orders", "order_items")


class SqlFixture:
    """
    Holds the runner and the fixed SQL text for one pass of the suite.

    Query results are kept in `results`, keyed by operation label.
    """

    def __init__(self, runner: Runner, drop_sql: str, create_sql: str, fixture_sql: str,
                 queries: Sequence[Tuple[str, str]]):
        self.runner = runner
        self.drop_sql = drop_sql
        self.create_sql = create_sql
        self.fixture_sql = fixture_sql
        self.queries = list(queries)
        self.results: Dict[str, List[tuple]] = {}

    @classmethod
    def from_files(cls, runner: Runner, schema_files: Sequence[Path],
                   query_files: Sequence[Tuple[str, Path]]) -> "SqlFixture":
        """Build from (drop, create, fixture) script paths and (label, sql file) query pairs."""
        drop_file, create_file, fixture_file = schema_files
        return cls(
            runner,
            drop_sql=read_sql_file(drop_file),
            create_sql=read_sql_file(create_file),
            fixture_sql=read_sql_file(fixture_file),
            queries=[(label, read_sql_file(sql_file)) for label, sql_file in query_files],
        )

    def open(self) -> None:
        self.runner.open()

    def create_schema(self) -> None:
        self.runner.execute_script(self.drop_sql)
        self.runner.execute_script(self.create_sql)

    def insert_data(self) -> None:
        self.runner.execute_script(self.fixture_sql)

    def query(self, label: str, sql: str) -> None:
        self.results[label] = self.runner.fetch_all(sql)
        logger.debug(f"{label}: {len(self.results[label])} rows")

    def row_counts(self) -> Dict[str, int]:
        return {table: self.runner.fetch_all(f"SELECT COUNT(*) FROM {table}")[0][0] for table in TABLES}

    def close(self) -> None:
        self.runner.close()
        self.runner.delete_db_file()


def sql_operations(fixture: SqlFixture) -> List[Operation]:
    operations = [
        Operation(DB_OPEN, fixture.open),
        Operation(SCHEMA, fixture.create_schema),
        Operation(INSERT, fixture.insert_data),
    ]
    for label, sql in fixture.queries:
        # Bind per iteration
        operations.append(Operation(label, lambda label=label, sql=sql: fixture.query(label, sql)))
    operations.append(Operation(DB_CLOSE, fixture.close))
    return operations
