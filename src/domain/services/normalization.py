"""Domain normalization helpers."""


def normalize_reason(reason: str | None) -> str:
    """Normalize free-text reasons for keyword matching.

    Args:
        reason: Raw reason or subject text, possibly None.

    Returns:
        str: Trimmed, lower-cased text; empty string for missing input.
    """
    if not reason or not isinstance(reason, str):
        return ""
    return reason.strip().lower()


__all__ = ["normalize_reason"]
