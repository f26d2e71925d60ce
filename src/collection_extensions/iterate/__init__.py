"""Lockstep iteration over several iterables, truncated to the shortest."""

from .multiple import iterate_multiple, iterate_multiple_and_select, is_empty

__all__ = [
    "iterate_multiple",
    "iterate_multiple_and_select",
    "is_empty",
]
