"""Use case to find players whose stored balance is out of date."""

from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import BalanceDiscrepancy, BalanceRules
from src.domain.services import (
    compare_stored_balances,
    compute_balance_breakdowns,
)
from src.infrastructure.logging.logger import get_app_logger


class CheckBalancesUseCase:
    """Compare denormalized player balances with computed ones."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        rules: BalanceRules | None = None,
        logger=None,
        tolerance: Decimal = Decimal("0.01"),
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing decoded ledger collections.
            rules: Credit counting rules used for the computed side.
            logger: Optional logger compatible with logging.Logger-like API.
            tolerance: Largest difference not reported as a discrepancy.
        """
        self._ledger_repository = ledger_repository
        self._rules = rules or BalanceRules()
        self._logger = logger or get_app_logger()
        self._tolerance = tolerance

    def execute(self) -> list[BalanceDiscrepancy]:
        """Return the players whose stored balance drifted."""
        players = self._ledger_repository.fetch_players()
        breakdowns = compute_balance_breakdowns(
            self._ledger_repository.fetch_payments(),
            self._ledger_repository.fetch_fines(),
            self._ledger_repository.fetch_due_payments(),
            self._ledger_repository.fetch_beverage_consumptions(),
            self._ledger_repository.fetch_dues(),
            rules=self._rules,
        )
        discrepancies = compare_stored_balances(
            players,
            breakdowns,
            tolerance=self._tolerance,
        )
        for item in discrepancies:
            self._logger.warning(
                f"Balance mismatch for {item.player_name} ({item.player_id}): "
                f"stored={item.stored_balance}, "
                f"computed={item.computed_balance}"
            )
        self._logger.info(
            f"Checked {len(players)} players, "
            f"{len(discrepancies)} discrepancies"
        )
        return discrepancies


__all__ = ["CheckBalancesUseCase"]
