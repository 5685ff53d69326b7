"""Payment statistics for dashboards and reports.

Records whose date cannot be parsed are skipped, never fatal. Day keys are
``YYYY-MM-DD`` and month keys ``YYYY-MM`` in UTC.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pandas as pd

from src.domain.models import DayPoint, Fine, MonthlyCohortPoint, Payment
from src.utils.decimal_utils import ZERO, coerce_decimal, remaining_amount


def _payments_frame(payments: Iterable[Payment]) -> pd.DataFrame:
    records = [
        {
            "entity_id": payment.entity_id,
            "date": payment.date,
            "amount": coerce_decimal(payment.amount),
        }
        for payment in payments
    ]
    df = pd.DataFrame(records, columns=["entity_id", "date", "amount"])
    df["ts"] = pd.to_datetime(
        df["date"], errors="coerce", utc=True, format="ISO8601"
    )
    return df.dropna(subset=["ts"])


def _sum_amounts(series: pd.Series) -> Decimal:
    return sum(series.tolist(), ZERO)


def _as_utc(value: datetime | None) -> pd.Timestamp | None:
    if value is None:
        return None
    ts = pd.Timestamp(value)
    return ts.tz_localize("UTC") if ts.tzinfo is None else ts.tz_convert("UTC")


def group_payments_by_day(
    payments: Iterable[Payment],
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[DayPoint]:
    """Sum payment amounts per day, oldest day first.

    Args:
        payments: Payment records.
        start: Optional inclusive lower bound.
        end: Optional inclusive upper bound.

    Returns:
        list[DayPoint]: One point per day that has payments.
    """
    df = _payments_frame(payments)
    start_ts = _as_utc(start)
    end_ts = _as_utc(end)
    if start_ts is not None:
        df = df[df["ts"] >= start_ts]
    if end_ts is not None:
        df = df[df["ts"] <= end_ts]
    if df.empty:
        return []
    df = df.assign(day=df["ts"].dt.strftime("%Y-%m-%d"))
    grouped = df.groupby("day", sort=True)["amount"].agg(_sum_amounts)
    return [DayPoint(date=day, value=value) for day, value in grouped.items()]


def sum_payments_in_last_days(
    payments: Iterable[Payment],
    days: int,
    now: datetime | None = None,
) -> Decimal:
    """Sum payments dated within the last ``days`` calendar days."""
    end = _as_utc(now or datetime.now(timezone.utc))
    start = (end - timedelta(days=days - 1)).normalize()
    df = _payments_frame(payments)
    window = df[(df["ts"] >= start) & (df["ts"] <= end)]
    return _sum_amounts(window["amount"])


def sum_payments_today(
    payments: Iterable[Payment],
    now: datetime | None = None,
) -> Decimal:
    """Sum payments dated on the current UTC day."""
    today = _as_utc(now or datetime.now(timezone.utc)).strftime("%Y-%m-%d")
    df = _payments_frame(payments)
    todays = df[df["ts"].dt.strftime("%Y-%m-%d") == today]
    return _sum_amounts(todays["amount"])


def compute_arppu(
    payments: Iterable[Payment],
    days: int,
    now: datetime | None = None,
) -> Decimal:
    """Return average revenue per paying player over the last days."""
    end = _as_utc(now or datetime.now(timezone.utc))
    start = (end - timedelta(days=days - 1)).normalize()
    df = _payments_frame(payments)
    window = df[(df["ts"] >= start) & (df["ts"] <= end)]
    revenue = _sum_amounts(window["amount"])
    payers = window.loc[window["entity_id"] != "", "entity_id"].nunique()
    return revenue / max(1, int(payers))


def compute_open_fines_total(fines: Iterable[Fine]) -> Decimal:
    """Sum the remaining amount of every unpaid fine."""
    return sum(
        (
            remaining_amount(fine.amount, fine.amount_paid)
            for fine in fines
            if not fine.paid
        ),
        ZERO,
    )


def moving_average(series: list[DayPoint], window: int) -> list[DayPoint]:
    """Return the trailing moving average of a day series.

    The first points average over the values available so far.
    """
    if not series or window <= 1:
        return list(series)
    averages = []
    total = ZERO
    for index, point in enumerate(series):
        total += point.value
        if index >= window:
            total -= series[index - window].value
        count = min(index + 1, window)
        averages.append(DayPoint(date=point.date, value=total / count))
    return averages


def max_date_from_collections(collections: Iterable[Iterable]) -> str | None:
    """Return the latest ``date``/``created_at`` across collections.

    Args:
        collections: Iterables of records carrying ``date`` or
            ``created_at`` attributes.

    Returns:
        str | None: ISO timestamp of the latest parseable date.
    """
    raw_dates = []
    for collection in collections:
        for item in collection:
            value = getattr(item, "date", None) or getattr(
                item, "created_at", None
            )
            if value:
                raw_dates.append(value)
    parsed = pd.to_datetime(
        pd.Series(raw_dates, dtype=object),
        errors="coerce",
        utc=True,
        format="ISO8601",
    ).dropna()
    if parsed.empty:
        return None
    return parsed.max().isoformat()


def build_first_payers_and_cumulative_revenue_by_month(
    payments: Iterable[Payment],
) -> list[MonthlyCohortPoint]:
    """Count first-time payers and revenue per month.

    Returns:
        list[MonthlyCohortPoint]: Months in ascending order with running
        revenue totals.
    """
    df = _payments_frame(payments)
    if df.empty:
        return []
    df = df.assign(month=df["ts"].dt.strftime("%Y-%m"))
    revenue = df.groupby("month")["amount"].agg(_sum_amounts)

    payers = df[df["entity_id"] != ""]
    first_months = (
        payers.sort_values("ts")
        .groupby("entity_id")["month"]
        .first()
        .value_counts()
    )

    months = sorted(set(revenue.index) | set(first_months.index))
    points = []
    cumulative = ZERO
    for month in months:
        month_revenue = revenue.get(month, ZERO)
        cumulative += month_revenue
        points.append(
            MonthlyCohortPoint(
                month=month,
                first_payers=int(first_months.get(month, 0)),
                revenue=month_revenue,
                cumulative_revenue=cumulative,
            )
        )
    return points


__all__ = [
    "group_payments_by_day",
    "sum_payments_in_last_days",
    "sum_payments_today",
    "compute_arppu",
    "compute_open_fines_total",
    "moving_average",
    "max_date_from_collections",
    "build_first_payers_and_cumulative_revenue_by_month",
]
