"""CLI adapter reporting players whose stored balance drifted."""

from src.adapters.formatting import format_amount
from src.application.use_cases.check_balances import CheckBalancesUseCase
from src.infrastructure.container import build_ledger_repository
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings


def main() -> None:
    """Compare stored and computed balances and print the mismatches."""
    logger = get_app_logger()
    get_usage_logger().info("check_balances_cli started")
    settings = LedgerSettings.from_env()
    if settings.snapshot_file is None:
        logger.warning(
            "LEDGER_SNAPSHOT_FILE is required to check balances."
        )
        return

    use_case = CheckBalancesUseCase(
        ledger_repository=build_ledger_repository(settings),
        rules=settings.balance_rules,
        logger=logger,
    )
    discrepancies = use_case.execute()

    currency = settings.currency
    if not discrepancies:
        print("All stored balances match the computed balances.")
        return
    print(f"{len(discrepancies)} balance discrepancies found:")
    for item in discrepancies:
        print(
            f"{item.player_name} ({item.player_id}): "
            f"stored={format_amount(item.stored_balance, currency)}, "
            f"computed={format_amount(item.computed_balance, currency)}, "
            f"delta={format_amount(item.delta, currency)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
