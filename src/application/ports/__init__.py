"""Application ports package."""

from .csv_rows import CsvRowsSourcePort
from .ledger_repository import LedgerRepositoryPort

__all__ = ["CsvRowsSourcePort", "LedgerRepositoryPort"]
