"""
Configuration manager for benchmark runs.

This module provides the ConfigLoader class for loading and validating
benchmark configuration from YAML files.
"""
from pathlib import Path
from typing import List, Optional

import yaml

from hostbench.config.bench_config import BenchConfig
from hostbench.config.query_group import QueryGroup
from hostbench.config.schema_files import SchemaFiles
from hostbench.consts.EngineType import EngineType
from hostbench.util.file_utils import resolve_sql_file

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config_yaml"
KNOWN_SUITES = ("cpu", "disk", "sql")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoader:

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH, env: Optional[str] = None):
        self.config_path = Path(config_path)
        self.env = env
        self.config_data = self._load_config()

    def _load_config(self) -> BenchConfig:
        """
        Load and parse benchmark configuration from YAML file.
        Supports environment-specific overrides via config_<env>.yaml

        Returns:
            BenchConfig: Configured benchmark configuration instance
        """
        base_config_file = self.config_path / "config.yaml"
        with open(base_config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if self.env:
            env_config_file = self.config_path / f"config_{self.env}.yaml"
            with open(env_config_file, "r", encoding="utf-8") as f:
                env_data = yaml.safe_load(f) or {}
                # Top-level keys in the env file replace the base ones
                data.update(env_data)

        config = BenchConfig()

        config.engine = EngineType(data["engine"])
        config.repeat = int(data.get("repeat", 1))
        config.suites = list(data.get("suites", KNOWN_SUITES))
        config.sqrt_iterations = int(data["sqrt_iterations"])
        config.file_size_bytes = int(data["file_size_bytes"])
        config.fill_char = str(data.get("fill_char", "x"))
        config.test_file_name = data["test_file_name"]
        config.temp_dir = data.get("temp_dir") or ""
        config.db_file_names = data["db_file_names"]
        config.track_memory = bool(data.get("track_memory", False))
        config.output_dir = data.get("output_dir") or ""
        config.log_file = data.get("log_file") or ""
        config.log_level = str(data.get("log_level", "INFO")).upper()

        config.schema = SchemaFiles(**data["schema"])
        config.query_groups = [QueryGroup(**qg) for qg in data["query_groups"]]

        validate_config(config)
        return config

    def schema_sql_files(self) -> List[Path]:
        """Drop, create and fixture scripts for the configured engine, in execution order."""
        engine = self.config_data.engine.value
        schema = self.config_data.schema
        names = [getattr(schema, f"{engine}_{kind}_sql") for kind in ("drop", "create", "fixture")]
        return [resolve_sql_file(name) for name in names]

    def query_sql_files(self) -> List[tuple]:
        """(label, sql file) pairs for every query group the configured engine supports."""
        engine = self.config_data.engine.value
        pairs = []
        for query_group in self.config_data.query_groups:
            sql_file = getattr(query_group, f"{engine}_sql")
            if sql_file:
                pairs.append((query_group.label, resolve_sql_file(sql_file)))
        return pairs


def validate_config(config: BenchConfig) -> None:
    if config.repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {config.repeat}")
    if config.sqrt_iterations < 0:
        raise ValueError(f"sqrt_iterations must not be negative, got {config.sqrt_iterations}")
    if config.file_size_bytes < 0:
        raise ValueError(f"file_size_bytes must not be negative, got {config.file_size_bytes}")
    if len(config.fill_char) != 1:
        raise ValueError(f"fill_char must be a single character, got {config.fill_char!r}")
    unknown = [s for s in config.suites if s not in KNOWN_SUITES]
    if unknown:
        raise ValueError(f"Unknown suites: {unknown}. Use any of {list(KNOWN_SUITES)}")
    if config.engine.value not in config.db_file_names:
        raise ValueError(f"No database file name configured for engine '{config.engine.value}'")
    if config.log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log_level '{config.log_level}'. Use one of {list(LOG_LEVELS)}")


if __name__ == "__main__":

    # python3 -m hostbench.config.config_loader

    loader = ConfigLoader(env="dev")
    print(loader.config_data)
    for label, sql_file in loader.query_sql_files():
        print(f"{label}: {sql_file}")
