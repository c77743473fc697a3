#!/usr/bin/env python3
"""
Command-line interface for the benchmark entry point.

Every option is optional; with no arguments the packaged defaults run.
"""
import argparse
import os
import sys
from typing import Optional, Sequence

from hostbench.consts.EngineType import EngineType


def build_benchmark_parser(description: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Create an ArgumentParser with the common --env option and run overrides.

    Args:
        description: Optional parser description shown in CLI help.

    Returns:
        argparse.ArgumentParser: parser preconfigured with all benchmark options.
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'dev'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    parser.add_argument("--config-dir", type=str, default="",
                        help="Directory holding config.yaml (default: packaged config)")
    parser.add_argument("--engine", choices=[e.value for e in EngineType], default=None,
                        help="Embedded database engine for the SQL suite")
    parser.add_argument("--repeat", type=int, default=None,
                        help="Number of passes over the full sequence")
    parser.add_argument("--out", type=str, default="",
                        help="If set, write summary.json and raw_data.json to this directory")
    parser.add_argument("--temp-dir", type=str, default="",
                        help="Directory for the temporary file and database (default: system temp)")
    parser.add_argument("--log-file", type=str, default="",
                        help="Also write detailed logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log at DEBUG level")
    return parser


def validate_benchmark_args(args: argparse.Namespace):
    if args.repeat is not None and args.repeat < 1:
        print(f"Error: --repeat must be at least 1, got {args.repeat}", file=sys.stderr)
        sys.exit(1)

    if args.config_dir and not os.path.isfile(os.path.join(args.config_dir, "config.yaml")):
        print(f"Error: config.yaml not found in: {args.config_dir}", file=sys.stderr)
        sys.exit(1)

    if args.temp_dir and not os.path.isdir(args.temp_dir):
        print(f"Error: Temp directory not found: {args.temp_dir}", file=sys.stderr)
        sys.exit(1)


def parse_benchmark_args(argv: Optional[Sequence[str]] = None, description: Optional[str] = None) -> argparse.Namespace:
    args = build_benchmark_parser(description).parse_args(argv)
    validate_benchmark_args(args)
    return args
