"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the dataset location and column options from the environment (after
loading the project `.env`).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")


@dataclass(frozen=True)
class Settings:
    """Container for configuration read from the environment.

    Attributes:
        data_path: CSV file holding the transactions table.
        region_column: Column used as the chart's category axis.
        log_path: File that receives a copy of the log output.
        log_level: Level name for the package loggers (e.g. "DEBUG").
    """
    data_path: Path
    region_column: str
    log_path: Path
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `REGION_COLUMN` is set but blank or `LOG_LEVEL` is
            not a logging level name.
    """
    data_path = Path(os.getenv("SUPERSTORE_CSV", "data/superstore.csv"))
    region_column = os.getenv("REGION_COLUMN", "Region").strip()
    log_path = Path(os.getenv("LOG_PATH", "logs/superstore_charts.log"))
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    if not region_column:
        raise RuntimeError(
            "REGION_COLUMN must not be blank. Unset it to use 'Region' "
            "(example: REGION_COLUMN=State for the original Superstore export)."
        )
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"LOG_LEVEL {log_level!r} is not a logging level (example: LOG_LEVEL=DEBUG).")

    return Settings(
        data_path=data_path,
        region_column=region_column,
        log_path=log_path,
        log_level=log_level,
    )
