"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger


def validate_liability_amounts(
    record_id: str,
    amount: Decimal,
    amount_paid: Decimal,
    logger: Logger | None,
) -> None:
    """Warn when a liability carries out-of-contract amounts.

    Args:
        record_id: Identifier of the record being aggregated.
        amount: Total amount of the record.
        amount_paid: Partial payments recorded so far.
        logger: Logger used for warnings, or None to stay silent.
    """
    if logger is None:
        return
    if amount < 0:
        logger.warning(
            f"Negative amount on record_id={record_id}: {amount}"
        )
    if amount_paid > amount:
        logger.warning(
            f"amount_paid exceeds amount on record_id={record_id}: "
            f"{amount_paid} > {amount}"
        )


def validate_credit_amount(
    record_id: str,
    amount: Decimal,
    logger: Logger | None,
) -> None:
    """Warn when a credit carries a negative amount.

    Args:
        record_id: Identifier of the payment.
        amount: Payment amount.
        logger: Logger used for warnings, or None to stay silent.
    """
    if logger is not None and amount < 0:
        logger.warning(
            f"Negative payment amount on record_id={record_id}: {amount}"
        )


__all__ = ["validate_liability_amounts", "validate_credit_amount"]
