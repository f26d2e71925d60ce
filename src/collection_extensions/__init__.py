"""
collection_extensions

Argument guards and lockstep iteration helpers.
"""

from .guard import (
    ArgumentError,
    NullArgumentError,
    InvalidArgumentError,
    ArgumentOutOfRangeError,
    require_not_none,
    require_positive,
    require_not_none_or_contains_none,
    require_not_none_or_empty,
    require_positive_id,
    require_max_length,
    require_max_count,
)
from .iterate import iterate_multiple, iterate_multiple_and_select, is_empty

__all__ = [
    "ArgumentError",
    "NullArgumentError",
    "InvalidArgumentError",
    "ArgumentOutOfRangeError",
    "require_not_none",
    "require_positive",
    "require_not_none_or_contains_none",
    "require_not_none_or_empty",
    "require_positive_id",
    "require_max_length",
    "require_max_count",
    "iterate_multiple",
    "iterate_multiple_and_select",
    "is_empty",
]
