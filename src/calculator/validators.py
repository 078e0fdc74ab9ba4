"""Argument checks shared by the calculator operations."""

import logging
from typing import TypeVar

from calculator.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)


def _reject(value: object, reason: str, name: str) -> InvalidArgumentError:
    logger.debug("Rejected argument %s=%r: %s", name, value, reason)
    return InvalidArgumentError(value, reason, argument=name)


def validate_integer(value: int, name: str = "value") -> int:
    """
    Validate that a value is an integer.

    Args:
        value: The value to validate
        name: Parameter name reported in the error

    Returns:
        The validated value

    Raises:
        InvalidArgumentError: If value is not an int
    """
    if not isinstance(value, int):
        raise _reject(value, f"Expected integer, got {type(value).__name__}", name)

    return value


def validate_number(value: T, name: str = "value") -> T:
    """
    Validate that a value is a real number.

    NaN and infinities are accepted; operations taking floats propagate
    them the way IEEE-754 arithmetic does.

    Raises:
        InvalidArgumentError: If value is not an int or float
    """
    if not isinstance(value, (int, float)):
        raise _reject(value, f"Expected number, got {type(value).__name__}", name)

    return value


def validate_non_zero(value: T, name: str = "value", reason: str = "Value must not be zero") -> T:
    """Validate that a number is not zero."""
    validate_number(value, name)

    if value == 0:
        raise _reject(value, reason, name)

    return value


def validate_non_negative(value: T, name: str = "value", reason: str = "Value must be non-negative") -> T:
    """Validate that a number is zero or greater."""
    validate_number(value, name)

    if value < 0:
        raise _reject(value, reason, name)

    return value
