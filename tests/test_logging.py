from __future__ import annotations

import logging
from pathlib import Path

import pytest

from superstore_charts.logging_config import configure_logging, resolve_level


def test_configure_logging_adds_stream_handler() -> None:
    # Ensure configuring logging doesn't raise and attaches a StreamHandler
    configure_logging(None)
    root = logging.getLogger()
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)


def test_configure_logging_creates_log_directory(tmp_path: Path) -> None:
    configure_logging(tmp_path / "logs" / "app.log")
    assert (tmp_path / "logs").is_dir()


def test_configure_logging_sets_package_level() -> None:
    configure_logging(None, "debug")
    assert logging.getLogger("superstore_charts").level == logging.DEBUG
    configure_logging(None, logging.INFO)
    assert logging.getLogger("superstore_charts").level == logging.INFO


def test_resolve_level_rejects_unknown_name() -> None:
    with pytest.raises(ValueError):
        resolve_level("chatty")
