"""Plain-text amount formatting for CLI reports."""

from decimal import ROUND_HALF_UP, Decimal


def format_amount(amount: Decimal, currency: str) -> str:
    """Return ``amount`` rounded to cents followed by the currency code."""
    rounded = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{rounded:,.2f} {currency}"


__all__ = ["format_amount"]
