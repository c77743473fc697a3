from dataclasses import dataclass
from typing import Optional


@dataclass
class SchemaFiles:

    sqlite_drop_sql: Optional[str] = None
    sqlite_create_sql: Optional[str] = None
    sqlite_fixture_sql: Optional[str] = None
    duckdb_drop_sql: Optional[str] = None
    duckdb_create_sql: Optional[str] = None
    duckdb_fixture_sql: Optional[str] = None
