"""Use case to compute every player's balance breakdown."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import BalanceBreakdown, BalanceRules
from src.domain.services import breakdown_for, compute_balance_breakdowns
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import ZERO


@dataclass(frozen=True)
class PlayerBalance:
    """Breakdown of one player for reporting."""

    player_id: str
    player_name: str
    breakdown: BalanceBreakdown


@dataclass(frozen=True)
class PlayerBalancesView:
    """Balances of all players plus team totals."""

    players: list[PlayerBalance]
    total_credits: Decimal
    total_liabilities: Decimal

    @property
    def net_balance(self) -> Decimal:
        """Return team credits minus team liabilities."""
        return self.total_credits - self.total_liabilities


class GetPlayerBalancesUseCase:
    """Compute balance breakdowns from the ledger repository."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        rules: BalanceRules | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing decoded ledger collections.
            rules: Credit counting rules; defaults to the open-credit rule.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._rules = rules or BalanceRules()
        self._logger = logger or get_app_logger()

    def execute(self) -> PlayerBalancesView:
        """Return the breakdown of every known player.

        Players without any record get a zero breakdown. Records owned by
        ids missing from the player list are reported under their id.

        Returns:
            PlayerBalancesView: Per-player breakdowns sorted by name.
        """
        players = self._ledger_repository.fetch_players()
        breakdowns = compute_balance_breakdowns(
            self._ledger_repository.fetch_payments(),
            self._ledger_repository.fetch_fines(),
            self._ledger_repository.fetch_due_payments(),
            self._ledger_repository.fetch_beverage_consumptions(),
            self._ledger_repository.fetch_dues(),
            rules=self._rules,
            logger=self._logger,
        )

        entries = [
            PlayerBalance(
                player_id=player.id,
                player_name=player.name,
                breakdown=breakdown_for(breakdowns, player.id),
            )
            for player in players
        ]
        known_ids = {player.id for player in players}
        orphan_ids = sorted(set(breakdowns) - known_ids)
        if orphan_ids:
            self._logger.warning(
                f"Records reference {len(orphan_ids)} unknown player ids: "
                f"{', '.join(orphan_ids)}"
            )
        entries.extend(
            PlayerBalance(
                player_id=entity_id,
                player_name=entity_id,
                breakdown=breakdowns[entity_id],
            )
            for entity_id in orphan_ids
        )
        entries.sort(key=lambda entry: (entry.player_name.lower(), entry.player_id))

        total_credits = sum(
            (entry.breakdown.total_credits for entry in entries), ZERO
        )
        total_liabilities = sum(
            (entry.breakdown.total_liabilities for entry in entries), ZERO
        )
        self._logger.info(
            f"Balances computed for {len(entries)} players: "
            f"credits={total_credits}, liabilities={total_liabilities}"
        )
        return PlayerBalancesView(
            players=entries,
            total_credits=total_credits,
            total_liabilities=total_liabilities,
        )


__all__ = ["GetPlayerBalancesUseCase", "PlayerBalance", "PlayerBalancesView"]
