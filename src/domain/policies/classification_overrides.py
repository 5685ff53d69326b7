"""Phrases that force a reason to classify as a fine.

Some penalties mention a drink but oblige the offender to buy for the whole
team ("Kasten Bier", "Runde ausgeben"). They are fines, not consumption.
"""

from dataclasses import dataclass

from src.domain.models import TransactionKind


@dataclass(frozen=True)
class ClassificationOverride:
    """Substring that pins a reason to a transaction kind."""

    phrase: str
    kind: TransactionKind
    description: str


FINE_OVERRIDES = (
    ClassificationOverride(
        phrase="kasten",
        kind=TransactionKind.FINE,
        description="Crate purchased for the team",
    ),
    ClassificationOverride(
        phrase="runde",
        kind=TransactionKind.FINE,
        description="Round bought for the team",
    ),
    ClassificationOverride(
        phrase="round of",
        kind=TransactionKind.FINE,
        description="Round bought for the team",
    ),
)


def find_override(
    normalized_reason: str,
    overrides: tuple[ClassificationOverride, ...] = FINE_OVERRIDES,
) -> ClassificationOverride | None:
    """Return the first override whose phrase occurs in the reason.

    Args:
        normalized_reason: Lower-cased, trimmed reason text.
        overrides: Override table to consult.

    Returns:
        ClassificationOverride | None: Matching override, if any.
    """
    for override in overrides:
        if override.phrase in normalized_reason:
            return override
    return None


__all__ = ["ClassificationOverride", "FINE_OVERRIDES", "find_override"]
