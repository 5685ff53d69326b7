"""Application port for ledger data access."""

from typing import Protocol

from src.domain.models import (
    BeverageConsumption,
    Due,
    DuePayment,
    Fine,
    Payment,
    Player,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to decoded ledger collections."""

    def fetch_players(self) -> list[Player]:
        """Return all player summary records."""

    def fetch_payments(self) -> list[Payment]:
        """Return all payment records."""

    def fetch_fines(self) -> list[Fine]:
        """Return all fines, regular and beverage kinds alike."""

    def fetch_dues(self) -> list[Due]:
        """Return all due definitions."""

    def fetch_due_payments(self) -> list[DuePayment]:
        """Return all per-player due obligations."""

    def fetch_beverage_consumptions(self) -> list[BeverageConsumption]:
        """Return beverage charges stored as a separate collection."""


__all__ = ["LedgerRepositoryPort"]
