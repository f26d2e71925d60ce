"""
Walk two to five iterables side by side.

Iteration stops as soon as any iterable is exhausted, so the number of
aligned tuples equals the length of the shortest input. Elements are pulled
left to right, one from each iterable per step.
"""

from contextlib import ExitStack
from typing import Any, Callable, Iterable, List, TypeVar, overload

from .._iterators import has_elements, open_iterator
from ..guard import InvalidArgumentError, require_not_none
from ..logging import get_logger

logger = get_logger(__name__)

T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
T5 = TypeVar("T5")
R = TypeVar("R")

MAX_SEQUENCES = 5
SEQUENCE_NAMES = ("first", "second", "third", "fourth", "fifth")


def _validate(callback: Any, callback_name: str, sequences: tuple) -> None:
    require_not_none(callback, callback_name)
    if len(sequences) > MAX_SEQUENCES:
        raise InvalidArgumentError(
            "sequences",
            f"At most {MAX_SEQUENCES} sequences can be iterated together, got {len(sequences)}.",
        )
    for name, sequence in zip(SEQUENCE_NAMES, sequences):
        require_not_none(sequence, name)


def _walk(sequences: tuple, action: Callable[..., Any]) -> int:
    steps = 0
    with ExitStack() as stack:
        iterators = [open_iterator(stack, sequence) for sequence in sequences]
        for row in zip(*iterators):
            action(*row)
            steps += 1
    return steps


@overload
def iterate_multiple(
    first: Iterable[T1], second: Iterable[T2], *, action: Callable[[T1, T2], Any]
) -> None: ...
@overload
def iterate_multiple(
    first: Iterable[T1], second: Iterable[T2], third: Iterable[T3],
    *, action: Callable[[T1, T2, T3], Any]
) -> None: ...
@overload
def iterate_multiple(
    first: Iterable[T1], second: Iterable[T2], third: Iterable[T3], fourth: Iterable[T4],
    *, action: Callable[[T1, T2, T3, T4], Any]
) -> None: ...
@overload
def iterate_multiple(
    first: Iterable[T1], second: Iterable[T2], third: Iterable[T3], fourth: Iterable[T4],
    fifth: Iterable[T5], *, action: Callable[[T1, T2, T3, T4, T5], Any]
) -> None: ...
def iterate_multiple(first, second, *rest, action):
    """
    Call action once per aligned tuple of elements.

    Args:
        first: First iterable
        second: Second iterable
        *rest: Up to three more iterables
        action: Callable taking one element from each iterable

    Raises:
        NullArgumentError: If action or any iterable is None
        InvalidArgumentError: If more than five iterables are given
    """
    sequences = (first, second) + rest
    _validate(action, "action", sequences)

    steps = _walk(sequences, action)
    logger.debug(f"Iterated {steps} aligned tuples across {len(sequences)} sequences")


@overload
def iterate_multiple_and_select(
    first: Iterable[T1], second: Iterable[T2], *, selector: Callable[[T1, T2], R]
) -> List[R]: ...
@overload
def iterate_multiple_and_select(
    first: Iterable[T1], second: Iterable[T2], third: Iterable[T3],
    *, selector: Callable[[T1, T2, T3], R]
) -> List[R]: ...
@overload
def iterate_multiple_and_select(
    first: Iterable[T1], second: Iterable[T2], third: Iterable[T3], fourth: Iterable[T4],
    *, selector: Callable[[T1, T2, T3, T4], R]
) -> List[R]: ...
@overload
def iterate_multiple_and_select(
    first: Iterable[T1], second: Iterable[T2], third: Iterable[T3], fourth: Iterable[T4],
    fifth: Iterable[T5], *, selector: Callable[[T1, T2, T3, T4, T5], R]
) -> List[R]: ...
def iterate_multiple_and_select(first, second, *rest, selector):
    """
    Collect selector results for each aligned tuple, in input order.

    Delegates to iterate_multiple, so truncation and ordering match it.

    Returns:
        New list with one selector result per aligned tuple
    """
    sequences = (first, second) + rest
    _validate(selector, "selector", sequences)

    result = []
    iterate_multiple(*sequences, action=lambda *row: result.append(selector(*row)))
    return result


def is_empty(iterable: Iterable[Any]) -> bool:
    """Return True if iterable yields no elements."""
    require_not_none(iterable, "iterable")

    return not has_elements(iterable)
