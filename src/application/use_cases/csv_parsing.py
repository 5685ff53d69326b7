"""Shared parsing helpers for CSV import use cases."""

from dataclasses import dataclass
from datetime import datetime, timezone
import re

_DMY = re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{4})$")
_YMD = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")

_PAID_VALUES = ("yes", "y", "true", "paid", "status_paid", "status-paid")
_UNPAID_VALUES = (
    "no",
    "n",
    "false",
    "unpaid",
    "status_unpaid",
    "status-unpaid",
)


@dataclass(frozen=True)
class PaidStatus:
    """Paid flag and optional settlement timestamp of an import row."""

    paid: bool
    paid_at: str | None = None


def parse_german_date(value: str | None) -> str | None:
    """Parse ``DD-MM-YYYY`` (or ``YYYY-MM-DD``) into an ISO timestamp.

    Dots and slashes are accepted as separators. The timestamp is set to
    noon UTC so that the calendar day survives any local time zone.

    Args:
        value: Raw date string.

    Returns:
        str | None: ISO-8601 timestamp, or None when the date is invalid.
    """
    if not value or not isinstance(value, str):
        return None
    normalized = re.sub(r"[./]", "-", value.strip())
    match = _DMY.match(normalized)
    if match:
        day, month, year = (int(part) for part in match.groups())
    else:
        match = _YMD.match(normalized)
        if not match:
            return None
        year, month, day = (int(part) for part in match.groups())
    try:
        parsed = datetime(year, month, day, 12, tzinfo=timezone.utc)
    except ValueError:
        return None
    return parsed.isoformat()


def parse_paid_status(raw) -> PaidStatus:
    """Interpret a paid column that holds a status word or a date.

    Args:
        raw: Raw cell value.

    Returns:
        PaidStatus: Unknown content is treated as unpaid.
    """
    value = "" if raw is None else str(raw).strip()
    if not value:
        return PaidStatus(paid=False)
    lowered = value.lower()
    if lowered in _PAID_VALUES:
        return PaidStatus(paid=True)
    if lowered in _UNPAID_VALUES:
        return PaidStatus(paid=False)
    paid_at = parse_german_date(value)
    if paid_at is not None:
        return PaidStatus(paid=True, paid_at=paid_at)
    return PaidStatus(paid=False)


def cell(row: dict, key: str) -> str:
    """Return a trimmed cell value, empty when missing."""
    value = row.get(key)
    if value is None:
        return ""
    return str(value).strip()


__all__ = ["PaidStatus", "parse_german_date", "parse_paid_status", "cell"]
