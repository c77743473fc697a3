"""
Logging configuration for the benchmark tool.

Provides centralized logging setup with clean, concise terminal output.
Console records go to stderr; stdout is reserved for the timing lines.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: INFO)
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    # Clean format: [LEVEL] message
    console_formatter = logging.Formatter(
        fmt='[%(levelname)s] %(message)s'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        logger.addHandler(_file_handler(log_file))

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def _file_handler(log_file: Path) -> logging.FileHandler:
    """File handler with a more detailed format, always at DEBUG."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)

    file_formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)
    return file_handler


def configure_package_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> None:
    """
    Apply a run-wide level, and optionally a log file, to every hostbench logger
    created so far. Console handlers are kept; only their level changes.

    All loggers share one file handler per log file, so calling this again with
    the same file adds nothing.
    """
    loggers = [
        logger for name, logger in list(logging.root.manager.loggerDict.items())
        if isinstance(logger, logging.Logger) and name.startswith("hostbench")
    ]

    file_handler = None
    if log_file:
        target = os.path.abspath(log_file)
        file_handler = next(
            (h for logger in loggers for h in logger.handlers
             if isinstance(h, logging.FileHandler) and h.baseFilename == target),
            None,
        )
        if file_handler is None:
            file_handler = _file_handler(Path(log_file))

    for logger in loggers:
        logger.setLevel(min(level, logging.DEBUG) if file_handler is not None else level)
        for handler in logger.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
        if file_handler is not None and file_handler not in logger.handlers:
            logger.addHandler(file_handler)
