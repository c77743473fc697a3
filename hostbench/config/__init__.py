"""Configuration module for benchmark runs."""

from .bench_config import BenchConfig
from .query_group import QueryGroup
from .schema_files import SchemaFiles

__all__ = ["BenchConfig", "QueryGroup", "SchemaFiles"]
