"""Logging initialization utilities using loguru.

The package logger is disabled on import (see ``splitconfig/__init__.py``);
applications opt in with `init_logging`.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

PACKAGE = "splitconfig"


def get_log_directory() -> str:
    """Get the default log directory path."""
    return str(Path.home() / ".splitconfig" / "logs")


def init_logging(log_dir: str | None = None, level: str = "INFO") -> int:
    """Enable package logging with a rotating file sink under `log_dir`.

    Returns the loguru handler id so callers can remove the sink again.
    """
    if log_dir is None:
        log_dir = get_log_directory()
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.enable(PACKAGE)
    return logger.add(
        str(log_path / "splitconfig_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        enqueue=True,
        backtrace=False,
        diagnose=False,
        level=level,
        filter=PACKAGE,
    )
