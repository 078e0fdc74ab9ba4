"""Errors raised by the calculator operations."""

from typing import Any


class CalculatorError(Exception):
    """
    Base exception for the calculator package.

    Operations raise only :class:`InvalidArgumentError`; the base exists so
    callers can catch everything the package raises in one clause.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value

    def __str__(self) -> str:
        if self.value is None:
            return self.message
        return f"{self.message}: {self.value!r}"


class InvalidArgumentError(CalculatorError, ValueError):
    """Raised when a caller-supplied value violates a precondition."""

    def __init__(self, value: Any, reason: str = "invalid argument", argument: str | None = None) -> None:
        super().__init__(reason, value)
        self.reason = reason
        self.argument = argument
