"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from networth_dashboard.infrastructure import settings as settings_module
from networth_dashboard.infrastructure.settings import DashboardSettings


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    for name in (
        "NET_WORTH_CSV",
        "CASHFLOW_CSV",
        "RUNWAY_MAX_INCOME_STREAMS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_resolves_configured_paths(monkeypatch, tmp_path: Path):
    """Configured paths resolve to absolute Path instances."""
    export = tmp_path / "balances.csv"
    export.write_text("Account\n")
    monkeypatch.setenv("NET_WORTH_CSV", str(export))
    monkeypatch.setenv("CASHFLOW_CSV", str(tmp_path / "missing.csv"))

    settings = DashboardSettings.from_env()

    assert settings.net_worth_file == export.resolve()
    assert settings.cashflow_file == (tmp_path / "missing.csv").resolve()


def test_from_env_falls_back_to_data_directory(tmp_path: Path):
    """Default exports under data/ are used when present."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "sample-data.csv").write_text("Account\n")

    settings = DashboardSettings.from_env()

    assert settings.net_worth_file == (data_dir / "sample-data.csv").resolve()
    assert settings.cashflow_file is None
    assert settings.max_income_streams == 16


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("5", 5), ("abc", 16), ("0", 16), ("-3", 16)],
)
def test_from_env_parses_stream_limit(monkeypatch, raw, expected):
    """Invalid limits fall back to the default."""
    monkeypatch.setenv("RUNWAY_MAX_INCOME_STREAMS", raw)

    assert DashboardSettings.from_env().max_income_streams == expected
