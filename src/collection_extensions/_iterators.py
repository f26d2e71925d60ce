"""Iterator acquisition shared by the guards and the iteration helpers."""

from collections.abc import Sized
from contextlib import ExitStack
from typing import Any, Iterable, Iterator


def open_iterator(stack: ExitStack, iterable: Iterable[Any]) -> Iterator[Any]:
    """Start iterating, registering close() on the stack when the iterator has one."""
    iterator = iter(iterable)
    close = getattr(iterator, "close", None)
    if close is not None:
        stack.callback(close)
    return iterator


def has_elements(iterable: Iterable[Any]) -> bool:
    """
    Report whether an iterable yields at least one element.

    Sized values are measured directly. Anything else has its first element
    pulled and is then closed, so one-shot iterators lose that element.
    """
    if isinstance(iterable, Sized):
        return len(iterable) > 0

    with ExitStack() as stack:
        for _ in open_iterator(stack, iterable):
            return True
    return False
