"""
Calculator module with arithmetic and number-theory operations.

Every operation is a pure function over built-in numbers, available both
as a module-level function and as a method on :class:`Calculator`.
Precondition violations raise :class:`InvalidArgumentError`.
"""

from calculator.core import Calculator
from calculator.exceptions import CalculatorError, InvalidArgumentError
from calculator.operations import (
    add,
    divide,
    factorial,
    gcd,
    is_prime,
    multiply,
    power,
    sqrt,
    subtract,
)
from calculator.validators import (
    validate_integer,
    validate_non_negative,
    validate_non_zero,
    validate_number,
)

__all__ = [
    "Calculator",
    "CalculatorError",
    "InvalidArgumentError",
    "add",
    "divide",
    "factorial",
    "gcd",
    "is_prime",
    "multiply",
    "power",
    "sqrt",
    "subtract",
    "validate_integer",
    "validate_non_negative",
    "validate_non_zero",
    "validate_number",
]

__version__ = "0.1.0"
