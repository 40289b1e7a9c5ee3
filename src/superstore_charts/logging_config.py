"""Utilities to configure consistent logging for the CLI and the dashboard.

Handlers are installed on the root logger; the verbosity chosen in `Settings`
(`LOG_LEVEL`) applies to the `superstore_charts` package logger, so per-record
DEBUG notes from the pipeline can be switched on without also enabling DEBUG
output from pandas, Altair or Streamlit.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "superstore_charts"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(level: int | str) -> int:
    """Return the numeric logging level for `level` (e.g. "debug", "WARNING", 20).

    Raises:
        ValueError: if `level` names no known logging level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {level!r}")
    return value


def configure_logging(log_path: Path | None = None, level: int | str = logging.INFO) -> None:
    """Configure root logging handlers and the package log level.

    Args:
        log_path: Optional path to a file where logs will be written.
        level: Level for the `superstore_charts` loggers (defaults to INFO).
            Other libraries stay at INFO or above.
    """
    numeric = resolve_level(level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=max(numeric, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric)
