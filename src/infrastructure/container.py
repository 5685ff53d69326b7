"""Composition root for wiring infrastructure adapters."""

from src.application.ports.csv_rows import CsvRowsSourcePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.infrastructure.csv_rows_source import PandasCsvRowsSource
from src.infrastructure.json_ledger_repository import JsonLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_settings() -> LedgerSettings:
    """Return settings sourced from the environment."""
    return LedgerSettings.from_env()


def build_ledger_repository(
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return the configured ledger repository."""
    resolved = settings or build_settings()
    if resolved.snapshot_file is None:
        raise RuntimeError(
            "No ledger snapshot configured. Set LEDGER_SNAPSHOT_FILE."
        )
    return JsonLedgerRepository(
        resolved.snapshot_file,
        logger=get_app_logger(),
    )


def build_csv_rows_source() -> CsvRowsSourcePort:
    """Return the delimited file reader used by import use cases."""
    return PandasCsvRowsSource()


__all__ = [
    "build_settings",
    "build_ledger_repository",
    "build_csv_rows_source",
]
