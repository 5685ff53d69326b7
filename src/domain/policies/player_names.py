"""Player name acceptance rules for imports."""

from src.domain.constants import INVALID_PLAYER_NAMES


def is_valid_player_name(name: str | None) -> bool:
    """Return True when the name identifies a real player.

    Args:
        name: Player name from an import row.

    Returns:
        bool: False for empty names and placeholder names.
    """
    candidate = (name or "").strip().lower()
    if not candidate:
        return False
    return candidate not in INVALID_PLAYER_NAMES
