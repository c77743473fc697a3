"""Embedded database runners."""

from hostbench.consts.EngineType import EngineType

from .duckdb_runner import DuckdbRunner
from .runner import Runner
from .sqlite_runner import SQLiteRunner


def build_runner(engine: EngineType, db_file) -> Runner:
    if engine == EngineType.SQLITE:
        return SQLiteRunner(db_file=db_file)
    elif engine == EngineType.DUCKDB:
        return DuckdbRunner(db_file=db_file)

    raise ValueError(f"Unsupported engine type: {engine}")


__all__ = ["DuckdbRunner", "Runner", "SQLiteRunner", "build_runner"]
