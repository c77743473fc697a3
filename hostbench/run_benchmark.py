#!/usr/bin/env python3
"""
Host benchmark runner.

Runs the CPU, disk and SQL suites as one timed sequence and prints one line
per operation plus a total line to stdout. Any failing step aborts the run
with its original exception.
"""
import logging
from pathlib import Path
from typing import Optional, Sequence

from tabulate import tabulate

from hostbench.cli.cli import parse_benchmark_args
from hostbench.config.config_loader import DEFAULT_CONFIG_PATH, ConfigLoader, validate_config
from hostbench.consts.EngineType import EngineType
from hostbench.models.run_result import BenchmarkReport
from hostbench.service.harness.harness import MeasurementHarness
from hostbench.service.suites import build_operations
from hostbench.util.cal_utils import summary_table_rows
from hostbench.util.log_config import configure_package_logging, setup_logger

logger = setup_logger(__name__)


def load_config(args) -> ConfigLoader:
    """Load YAML config and apply command-line overrides on top."""
    config_path = Path(args.config_dir) if args.config_dir else DEFAULT_CONFIG_PATH
    loader = ConfigLoader(config_path, env=args.env)
    config = loader.config_data

    if args.engine:
        config.engine = EngineType(args.engine)
    if args.repeat is not None:
        config.repeat = args.repeat
    if args.temp_dir:
        config.temp_dir = args.temp_dir
    if args.out:
        config.output_dir = args.out
    if args.log_file:
        config.log_file = args.log_file
    if args.verbose:
        config.log_level = "DEBUG"

    validate_config(config)
    return loader


def print_summary(report: BenchmarkReport) -> None:
    """Log a per-label summary table in nanoseconds."""
    headers = ["Operation", "min", "p50", "p95", "max", "avg"]
    table = tabulate(summary_table_rows(report.summaries()), headers=headers,
                     tablefmt="github", stralign="left", numalign="right")
    logger.info(f"Summary over {len(report.runs)} runs (nanoseconds):\n{table}")


def run(loader: ConfigLoader, harness: Optional[MeasurementHarness] = None) -> BenchmarkReport:
    config = loader.config_data
    harness = harness or MeasurementHarness(track_memory=config.track_memory)
    report = BenchmarkReport(engine=config.engine.value)

    for i in range(config.repeat):
        logger.debug(f"Run {i + 1}/{config.repeat}")
        report.add_run(harness.run(build_operations(loader)))

    if config.repeat > 1:
        print_summary(report)

    if config.output_dir:
        for path in report.export(Path(config.output_dir)):
            logger.info(f"✓ Exported: {path.resolve()}")

    return report


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_benchmark_args(argv, "Time CPU, disk and embedded SQL operations in nanoseconds")
    loader = load_config(args)
    config = loader.config_data

    configure_package_logging(
        level=getattr(logging, config.log_level),
        log_file=Path(config.log_file) if config.log_file else None,
    )
    logger.debug(str(config))

    run(loader)


if __name__ == "__main__":
    main()
