"""Error types raised by the argument guards."""

from typing import Any


class ArgumentError(ValueError):
    """
    Base class for rejected arguments.

    Attributes:
        argument_name: Label of the parameter that was rejected
        message: Human readable description of the problem
    """

    def __init__(self, argument_name: str, message: str):
        super().__init__(argument_name, message)
        self.argument_name = argument_name
        self.message = message

    def __str__(self) -> str:
        return f"{self.message} (Parameter '{self.argument_name}')"


class NullArgumentError(ArgumentError):
    """Raised when a required value, element or label is None."""


class InvalidArgumentError(ArgumentError):
    """Raised when a value is empty, not positive, or exceeds a maximum."""


class ArgumentOutOfRangeError(ArgumentError):
    """Raised when an identifier falls outside its valid domain."""

    def __init__(self, argument_name: str, actual_value: Any, message: str):
        super().__init__(argument_name, message)
        self.args = (argument_name, actual_value, message)
        self.actual_value = actual_value

    def __str__(self) -> str:
        return f"{super().__str__()} Actual value was {self.actual_value}."
