"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.domain.models import BalanceRules
from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep .env files and the real data/ folder out of the tests."""
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: False)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    for name in (
        "LEGACY_CREDIT_FALLBACK",
        "LEDGER_SNAPSHOT_FILE",
        "LEDGER_CURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_logger(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    return logger


def test_from_env_defaults(fake_logger) -> None:
    """Without configuration the strict credit rule and EUR are used."""
    settings = LedgerSettings.from_env()

    assert settings.legacy_credit_fallback is False
    assert settings.snapshot_file is None
    assert settings.currency == "EUR"
    assert settings.balance_rules == BalanceRules()


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_from_env_enables_legacy_fallback(monkeypatch, fake_logger, raw):
    monkeypatch.setenv("LEGACY_CREDIT_FALLBACK", raw)

    settings = LedgerSettings.from_env()

    assert settings.balance_rules.legacy_credit_fallback is True


def test_from_env_uses_file_path(monkeypatch, fake_logger, tmp_path) -> None:
    """File paths should resolve to absolute Path instances."""
    snapshot = tmp_path / "ledger.json"
    snapshot.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("LEDGER_SNAPSHOT_FILE", str(snapshot))
    monkeypatch.setenv("LEDGER_CURRENCY", "chf")

    settings = LedgerSettings.from_env()

    assert isinstance(settings.snapshot_file, Path)
    assert settings.snapshot_file == snapshot.resolve()
    assert settings.currency == "CHF"
    fake_logger.warning.assert_not_called()


def test_from_env_accepts_file_uri(monkeypatch, fake_logger, tmp_path) -> None:
    snapshot = tmp_path / "ledger.json"
    snapshot.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("LEDGER_SNAPSHOT_FILE", snapshot.resolve().as_uri())

    settings = LedgerSettings.from_env()

    assert settings.snapshot_file == snapshot.resolve()


def test_from_env_warns_on_missing_snapshot(
    monkeypatch, fake_logger, tmp_path
) -> None:
    monkeypatch.setenv("LEDGER_SNAPSHOT_FILE", str(tmp_path / "missing.json"))

    settings = LedgerSettings.from_env()

    assert settings.snapshot_file == (tmp_path / "missing.json").resolve()
    fake_logger.warning.assert_called_once()


def test_default_snapshot_is_single_json_in_data(fake_logger, tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "export.json").write_text("{}", encoding="utf-8")

    settings = LedgerSettings.from_env()

    assert settings.snapshot_file == (data_dir / "export.json").resolve()


def test_default_snapshot_is_ambiguous_with_many_files(fake_logger, tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "a.json").write_text("{}", encoding="utf-8")
    (data_dir / "b.json").write_text("{}", encoding="utf-8")

    settings = LedgerSettings.from_env()

    assert settings.snapshot_file is None
    fake_logger.warning.assert_called_once()
