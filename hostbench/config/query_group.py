"""
Query group configuration data class.

This module provides the QueryGroup class for representing a timed query
with SQL file paths for different engines.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class QueryGroup:

    id: str
    label: str
    sqlite_sql: Optional[str] = None
    duckdb_sql: Optional[str] = None
