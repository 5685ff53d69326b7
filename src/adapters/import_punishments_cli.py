"""CLI adapter classifying a punishment CSV export.

The export location is read from ``PUNISHMENTS_CSV``. Nothing is written:
the command prints what an import would create.
"""

import os

from src.adapters.formatting import format_amount
from src.application.use_cases.import_punishments import (
    ImportPunishmentsUseCase,
)
from src.domain.models import TransactionKind
from src.infrastructure.container import build_csv_rows_source
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings
from src.utils.decimal_utils import ZERO


def main() -> None:
    """Parse the configured punishment export and print a summary."""
    logger = get_app_logger()
    get_usage_logger().info("import_punishments_cli started")
    path = os.getenv("PUNISHMENTS_CSV")
    if not path:
        logger.warning("PUNISHMENTS_CSV is required to import punishments.")
        return
    settings = LedgerSettings.from_env()

    use_case = ImportPunishmentsUseCase(
        rows_source=build_csv_rows_source(),
        logger=logger,
    )
    result = use_case.execute(path)

    currency = settings.currency
    print(
        f"Punishment import preview ({result.total_rows_processed} rows)"
    )
    for kind in TransactionKind:
        rows = [row for row in result.rows if row.kind is kind]
        total = sum((row.amount for row in rows), ZERO)
        print(
            f"{kind.value}: count={len(rows)}, "
            f"total={format_amount(total, currency)}"
        )
    categories: dict[str, int] = {}
    for row in result.rows:
        if row.beverage_category:
            categories[row.beverage_category] = (
                categories.get(row.beverage_category, 0) + 1
            )
    for category, count in sorted(categories.items()):
        print(f"  {category}: {count}")
    for warning in result.warnings:
        print(f"warning: {warning}")
    for error in result.errors:
        print(f"error: {error}")


if __name__ == "__main__":  # pragma: no cover
    main()
