"""Classification of punishment reasons.

Reasons are matched by case-insensitive substring containment against fixed
keyword tables. Every function here is total: ambiguous input degrades to
the safest answer (a fine, or the generic beverage bucket).
"""

from src.domain.constants import (
    APPLER_KEYWORDS,
    BEER_LEMONADE_KEYWORDS,
    BEVERAGE_CATEGORY_APPLER,
    BEVERAGE_CATEGORY_BEER_LEMONADE,
    BEVERAGE_CATEGORY_DEFAULT,
    CREDIT_MARKER,
    CREDIT_REST_MARKER,
    DEPOSIT_PREFIX,
    DRINK_KEYWORDS,
)
from src.domain.models import CreditBucket, TransactionKind
from src.domain.policies import find_override
from src.domain.services.normalization import normalize_reason


def classify(reason: str | None) -> TransactionKind:
    """Decide whether a reason is a fine or a drink.

    Args:
        reason: Free-text punishment reason.

    Returns:
        TransactionKind: ``DRINK`` when a drink keyword matches and no
        override phrase applies, ``FINE`` otherwise.
    """
    normalized = normalize_reason(reason)
    if not normalized:
        return TransactionKind.FINE
    override = find_override(normalized)
    if override is not None:
        return override.kind
    if _contains_any(normalized, DRINK_KEYWORDS):
        return TransactionKind.DRINK
    return TransactionKind.FINE


def map_beverage_category(reason: str | None) -> str:
    """Map a drink reason to one of the canonical beverage categories.

    Args:
        reason: Free-text beverage name or reason.

    Returns:
        str: ``"Appler"``, ``"Beer/Lemonade"`` or ``"Beverages"``.
    """
    normalized = normalize_reason(reason)
    if not normalized:
        return BEVERAGE_CATEGORY_DEFAULT
    if _contains_any(normalized, APPLER_KEYWORDS):
        return BEVERAGE_CATEGORY_APPLER
    if _contains_any(normalized, BEER_LEMONADE_KEYWORDS):
        return BEVERAGE_CATEGORY_BEER_LEMONADE
    return BEVERAGE_CATEGORY_DEFAULT


def credit_bucket_for_reason(reason: str | None) -> CreditBucket | None:
    """Return the credit bucket a legacy payment reason denotes.

    Args:
        reason: Payment or punishment reason text.

    Returns:
        CreditBucket | None: None when the reason is not a credit.
    """
    normalized = normalize_reason(reason)
    if not normalized:
        return None
    if CREDIT_REST_MARKER in normalized:
        return CreditBucket.GUTHABEN_REST
    if CREDIT_MARKER in normalized or normalized.startswith(DEPOSIT_PREFIX):
        return CreditBucket.GUTHABEN
    return None


def is_credit_reason(reason: str | None) -> bool:
    """Return True when the reason denotes a credit top-up."""
    return credit_bucket_for_reason(reason) is not None


def classify_punishment_with_subject(
    reason: str | None,
    subject: str | None = None,
) -> TransactionKind:
    """Classify a punishment row, rerouting credit top-ups to payments.

    The subject column is consulted only when the reason itself gives no
    signal: no drink keyword and no override phrase.

    Args:
        reason: Punishment reason text.
        subject: Optional subject column of the same row.

    Returns:
        TransactionKind: ``PAYMENT`` for credits, else ``DRINK`` or ``FINE``.
    """
    if is_credit_reason(reason):
        return TransactionKind.PAYMENT
    kind = classify(reason)
    if kind is TransactionKind.DRINK:
        return kind
    normalized = normalize_reason(reason)
    if normalized and find_override(normalized) is not None:
        return kind
    return classify(subject)


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


__all__ = [
    "classify",
    "map_beverage_category",
    "credit_bucket_for_reason",
    "is_credit_reason",
    "classify_punishment_with_subject",
]
