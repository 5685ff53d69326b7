"""CLI adapter printing every player's balance breakdown."""

from src.adapters.formatting import format_amount
from src.application.use_cases.get_player_balances import (
    GetPlayerBalancesUseCase,
)
from src.infrastructure.container import build_ledger_repository
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings


def main() -> None:
    """Compute balances from the configured snapshot and print them."""
    logger = get_app_logger()
    get_usage_logger().info("player_balances_cli started")
    settings = LedgerSettings.from_env()
    if settings.snapshot_file is None:
        logger.warning(
            "LEDGER_SNAPSHOT_FILE is required to compute balances."
        )
        return

    repository = build_ledger_repository(settings)
    use_case = GetPlayerBalancesUseCase(
        ledger_repository=repository,
        rules=settings.balance_rules,
        logger=logger,
    )
    view = use_case.execute()

    currency = settings.currency
    rule = "legacy" if settings.legacy_credit_fallback else "open-credit"
    print(f"Player balances (currency={currency}, credit rule={rule})")
    for entry in view.players:
        item = entry.breakdown
        print(
            f"{entry.player_name}: "
            f"balance={format_amount(item.balance, currency)}, "
            f"guthaben={format_amount(item.guthaben, currency)}, "
            f"guthaben_rest={format_amount(item.guthaben_rest, currency)}, "
            f"fines={format_amount(item.fines, currency)}, "
            f"dues={format_amount(item.dues, currency)}, "
            f"beverages={format_amount(item.beverages, currency)}"
        )
    print(
        "Team totals: "
        f"credits={format_amount(view.total_credits, currency)}, "
        f"liabilities={format_amount(view.total_liabilities, currency)}, "
        f"net={format_amount(view.net_balance, currency)}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
