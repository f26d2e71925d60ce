"""
Argument guards

Stateless checks that reject invalid arguments at the API boundary with a
categorized ArgumentError.
"""

from .errors import (
    ArgumentError,
    NullArgumentError,
    InvalidArgumentError,
    ArgumentOutOfRangeError,
)
from .checks import (
    require_not_none,
    require_positive,
    require_not_none_or_contains_none,
    require_not_none_or_empty,
    require_positive_id,
    require_max_length,
    require_max_count,
)

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
]
