"""Tests for guard error types."""

import pickle

import pytest

from collection_extensions.guard.errors import (
    ArgumentError,
    ArgumentOutOfRangeError,
    InvalidArgumentError,
    NullArgumentError,
)


class TestArgumentError:
    def test_carries_name_and_message(self):
        error = NullArgumentError("user", "user cannot be null.")
        assert error.argument_name == "user"
        assert error.message == "user cannot be null."

    def test_string_form_names_parameter(self):
        error = InvalidArgumentError("tags", "The list cannot be empty.")
        assert str(error) == "The list cannot be empty. (Parameter 'tags')"

    @pytest.mark.parametrize("error_type", [NullArgumentError, InvalidArgumentError])
    def test_hierarchy(self, error_type):
        """All guard errors can be caught as ArgumentError or ValueError."""
        with pytest.raises(ValueError):
            raise error_type("x", "bad")
        assert issubclass(error_type, ArgumentError)

    def test_pickle_round_trip(self):
        error = NullArgumentError("user", "user cannot be null.")
        restored = pickle.loads(pickle.dumps(error))
        assert restored.argument_name == "user"
        assert restored.message == error.message


class TestArgumentOutOfRangeError:
    def test_carries_actual_value(self):
        error = ArgumentOutOfRangeError("order_id", 0, "order id must be at least 1.")
        assert error.actual_value == 0
        assert isinstance(error, ArgumentError)

    def test_string_form_reports_value(self):
        error = ArgumentOutOfRangeError("order_id", -3, "order id must be at least 1.")
        assert str(error) == (
            "order id must be at least 1. (Parameter 'order_id') Actual value was -3."
        )

    def test_pickle_round_trip(self):
        error = ArgumentOutOfRangeError("order_id", -3, "order id must be at least 1.")
        restored = pickle.loads(pickle.dumps(error))
        assert restored.actual_value == -3
        assert str(restored) == str(error)
