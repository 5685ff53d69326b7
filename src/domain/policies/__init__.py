"""Domain policies package."""

from .classification_overrides import (
    FINE_OVERRIDES,
    ClassificationOverride,
    find_override,
)
from .player_names import is_valid_player_name

__all__ = [
    "FINE_OVERRIDES",
    "ClassificationOverride",
    "find_override",
    "is_valid_player_name",
]
