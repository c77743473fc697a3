"""Fixed benchmark suites and the full operation sequence."""

from typing import List

from hostbench.config.config_loader import ConfigLoader
from hostbench.service.harness.operation import Operation
from hostbench.service.runner import build_runner
from hostbench.util.file_utils import temp_path

from .cpu_suite import cpu_operations
from .disk_suite import DiskFixture, disk_operations
from .sql_suite import SqlFixture, sql_operations


def build_operations(loader: ConfigLoader) -> List[Operation]:
    """
    Concatenate the configured suites into one ordered operation list.

    Fresh fixtures are built on every call so repeated runs do not share state.
    """
    config = loader.config_data
    operations: List[Operation] = []
    for suite in config.suites:
        if suite == "cpu":
            operations += cpu_operations(config.sqrt_iterations)
        elif suite == "disk":
            _, ops = disk_operations(
                temp_path(config.test_file_name, config.temp_dir),
                size=config.file_size_bytes,
                fill_char=config.fill_char,
            )
            operations += ops
        elif suite == "sql":
            runner = build_runner(config.engine, temp_path(config.db_file_name, config.temp_dir))
            fixture = SqlFixture.from_files(runner, loader.schema_sql_files(), loader.query_sql_files())
            operations += sql_operations(fixture)
    return operations


__all__ = ["DiskFixture", "SqlFixture", "build_operations", "cpu_operations", "disk_operations", "sql_operations"]
