"""Domain models for payment statistics."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DayPoint:
    """Value aggregated for one calendar day (``YYYY-MM-DD``)."""

    date: str
    value: Decimal


@dataclass(frozen=True)
class MonthlyCohortPoint:
    """First payers and revenue for one month (``YYYY-MM``)."""

    month: str
    first_payers: int
    revenue: Decimal
    cumulative_revenue: Decimal


__all__ = ["DayPoint", "MonthlyCohortPoint"]
