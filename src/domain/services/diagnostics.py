"""Consistency checks between stored and computed balances."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from src.domain.models import BalanceBreakdown, BalanceDiscrepancy, Player
from src.domain.services.balance import breakdown_for
from src.utils.decimal_utils import coerce_decimal


def compare_stored_balances(
    players: Iterable[Player],
    breakdowns: Mapping[str, BalanceBreakdown],
    *,
    tolerance: Decimal = Decimal("0.01"),
) -> list[BalanceDiscrepancy]:
    """List players whose stored balance drifted from the computed one.

    Args:
        players: Player records carrying a denormalized balance.
        breakdowns: Computed breakdowns keyed by entity id.
        tolerance: Largest absolute difference still considered equal.

    Returns:
        list[BalanceDiscrepancy]: Drifted players, largest drift first.
    """
    discrepancies = []
    for player in players:
        stored = coerce_decimal(player.balance)
        computed = breakdown_for(breakdowns, player.id).balance
        if abs(computed - stored) > tolerance:
            discrepancies.append(
                BalanceDiscrepancy(
                    player_id=player.id,
                    player_name=player.name,
                    stored_balance=stored,
                    computed_balance=computed,
                )
            )
    return sorted(
        discrepancies,
        key=lambda item: (-abs(item.delta), item.player_id),
    )


__all__ = ["compare_stored_balances"]
