"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Missing values and values that cannot be read as a number are treated as
    zero so that optional amount fields never interrupt an aggregation.

    Args:
        value: Raw numeric value from a decoded record or adapter.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        return ZERO
    return result if result.is_finite() else ZERO


def remaining_amount(amount, amount_paid=None) -> Decimal:
    """Return the open part of a liability, floored at zero.

    Args:
        amount: Total amount of the liability.
        amount_paid: Partial payments made so far, None when unset.

    Returns:
        Decimal: ``max(0, amount - amount_paid)``.
    """
    return max(ZERO, coerce_decimal(amount) - coerce_decimal(amount_paid))


def cents_to_units(value) -> Decimal | None:
    """Convert a minor-unit amount string such as ``"1.234"`` to units.

    Dots and spaces are thousand separators, a comma is the decimal mark.

    Args:
        value: Raw amount in cents.

    Returns:
        Decimal | None: Amount in currency units, or None when unreadable.
    """
    if value is None:
        return None
    cleaned = str(value).strip()
    if not cleaned or cleaned == "-":
        return None
    negative = cleaned.startswith("-")
    if negative:
        cleaned = cleaned[1:]
    cleaned = cleaned.replace(".", "").replace(" ", "").replace(",", ".")
    try:
        cents = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not cents.is_finite():
        return None
    units = cents / Decimal("100")
    return -units if negative else units


__all__ = ["ZERO", "coerce_decimal", "remaining_amount", "cents_to_units"]
