from __future__ import annotations

from pathlib import Path

import pytest

from superstore_charts.config import get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SUPERSTORE_CSV", "REGION_COLUMN", "LOG_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.data_path == Path("data/superstore.csv")
    assert s.region_column == "Region"
    assert s.log_level == "INFO"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SUPERSTORE_CSV", str(tmp_path / "s.csv"))
    monkeypatch.setenv("REGION_COLUMN", " State ")
    s = get_settings()
    assert s.data_path == tmp_path / "s.csv"
    assert s.region_column == "State"


def test_blank_region_column_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGION_COLUMN", "   ")
    with pytest.raises(RuntimeError):
        get_settings()


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_settings().log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError):
        get_settings()
