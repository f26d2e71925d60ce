"""
Guard functions for validating method and constructor arguments.

Every guard either returns None or raises an ArgumentError subclass. Labels
(the argument name and optional description) are validated before the value
itself, so a malformed label is always reported first.
"""

from collections.abc import Sized
from typing import Any, Iterable, NoReturn, Optional

from .errors import (
    ArgumentError,
    ArgumentOutOfRangeError,
    InvalidArgumentError,
    NullArgumentError,
)
from .._iterators import has_elements
from ..logging import get_logger

logger = get_logger(__name__)

# Marks a description the caller left out, as opposed to an explicit None
_DEFAULT = object()


def _reject(error: ArgumentError) -> NoReturn:
    logger.debug(f"Rejected argument {error.argument_name!r}: {error.message}")
    raise error


def _verify_label(label: Optional[str], label_name: str) -> None:
    if label is None:
        _reject(NullArgumentError(label_name, f"{label_name} cannot be null."))
    if len(label) == 0:
        _reject(InvalidArgumentError(label_name, f"{label_name} cannot be empty."))


def _verify_labels(argument_name: Optional[str], argument_description: Optional[str]) -> None:
    _verify_label(argument_name, "argument_name")
    _verify_label(argument_description, "argument_description")


def require_not_none(value: Any, argument_name: str, argument_description: Optional[str] = _DEFAULT) -> None:
    """
    Raise NullArgumentError if value is None.

    Args:
        value: The argument to be checked
        argument_name: Name of the argument, reported on the error
        argument_description: Text used in the message, defaults to the name

    Raises:
        NullArgumentError: If value or one of the labels is None
        InvalidArgumentError: If one of the labels is empty
    """
    if argument_description is _DEFAULT:
        argument_description = argument_name
    _verify_labels(argument_name, argument_description)

    if value is None:
        _reject(NullArgumentError(argument_name, f"{argument_description} cannot be null."))


def require_positive(value: int, argument_name: str) -> None:
    """Raise InvalidArgumentError unless value is greater than zero."""
    _verify_labels(argument_name, argument_name)

    if value is None:
        _reject(NullArgumentError(argument_name, f"{argument_name} cannot be null."))
    if value <= 0:
        _reject(InvalidArgumentError(
            argument_name, f"{argument_name} cannot be less than 1. Value {value}."
        ))


def require_not_none_or_contains_none(values: Iterable[Any], argument_name: str) -> None:
    """Raise NullArgumentError if values is None or holds a None element."""
    require_not_none(values, argument_name)

    for item in values:
        require_not_none(item, argument_name)


def require_not_none_or_empty(
    value: Any,
    argument_name: str,
    argument_description: Optional[str] = _DEFAULT,
) -> None:
    """
    Raise if a string or iterable argument is None or empty.

    Strings are reported using the description; any other iterable is
    reported as a list.

    Args:
        value: String or iterable to be checked
        argument_name: Name of the argument, reported on the error
        argument_description: Text used in string messages, defaults to the name

    Raises:
        NullArgumentError: If value is None
        InvalidArgumentError: If value has no characters or elements
    """
    if argument_description is _DEFAULT:
        argument_description = argument_name
    _verify_labels(argument_name, argument_description)

    if value is None:
        _reject(NullArgumentError(argument_name, f"{argument_description} cannot be null."))

    if isinstance(value, str):
        if len(value) == 0:
            _reject(InvalidArgumentError(argument_name, f"{argument_description} cannot be empty."))
        return

    if not has_elements(value):
        _reject(InvalidArgumentError(argument_name, "The list cannot be empty."))


def require_positive_id(value: int, argument_name: str, argument_description: Optional[str] = _DEFAULT) -> None:
    """
    Raise ArgumentOutOfRangeError if an identifier is less than 1.

    Args:
        value: Identifier to be checked
        argument_name: Name of the identifier parameter
        argument_description: Text used in the message, defaults to the name

    Raises:
        ArgumentOutOfRangeError: If value is less than 1
    """
    if argument_description is _DEFAULT:
        argument_description = argument_name
    _verify_labels(argument_name, argument_description)

    if value is None:
        _reject(NullArgumentError(argument_name, f"{argument_description} cannot be null."))
    if value < 1:
        _reject(ArgumentOutOfRangeError(
            argument_name, value, f"{argument_description} must be at least 1."
        ))


def require_max_length(value: str, argument_name: str, max_length: int) -> None:
    """Raise if value is None or longer than max_length characters."""
    require_not_none(value, argument_name)

    if len(value) > max_length:
        _reject(InvalidArgumentError(
            argument_name, f"The length of {argument_name} exceeds {max_length} characters"
        ))


def require_max_count(values: Iterable[Any], argument_name: str, max_count: int) -> None:
    """
    Raise if values is None, empty, or holds more than max_count elements.

    A string is checked for emptiness and then measured in characters.
    Iterables without a length are read into a list once before checking.

    Raises:
        NullArgumentError: If values is None
        InvalidArgumentError: If values is empty or too long
    """
    _verify_labels(argument_name, argument_name)

    if isinstance(values, str):
        require_not_none_or_empty(values, argument_name)
        require_max_length(values, argument_name, max_length=max_count)
        return

    if values is not None and not isinstance(values, Sized):
        values = list(values)
    require_not_none_or_empty(values, argument_name)

    if len(values) > max_count:
        _reject(InvalidArgumentError(
            argument_name, f"The length of {argument_name} exceeds {max_count}"
        ))
