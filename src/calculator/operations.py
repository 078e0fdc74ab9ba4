"""Core arithmetic and number-theory operations."""

import math

from calculator.validators import (
    validate_integer,
    validate_non_negative,
    validate_non_zero,
    validate_number,
)

# Signed 64-bit integer range used for factorial wraparound
INT64_BITS = 64
INT64_MIN = -(1 << (INT64_BITS - 1))
INT64_MASK = (1 << INT64_BITS) - 1


def add(a: int, b: int) -> int:
    """
    Add two integers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a
    """
    validate_integer(a, "a")
    validate_integer(b, "b")
    return a + b


def subtract(a: int, b: int) -> int:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0
    """
    validate_integer(a, "a")
    validate_integer(b, "b")
    return a - b


def multiply(a: int, b: int) -> int:
    """
    Multiply two integers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Zero: multiply(a, 0) == 0
    """
    validate_integer(a, "a")
    validate_integer(b, "b")
    return a * b


def divide(a: int, b: int) -> float:
    """
    Divide a by b.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b, always a float. A quotient beyond the float
        range is a signed infinity.

    Raises:
        InvalidArgumentError: If b is zero
    """
    validate_integer(a, "a")
    validate_integer(b, "b")
    validate_non_zero(b, "b", "Division by zero is not allowed")

    try:
        return a / b
    except OverflowError:
        return math.inf if (a > 0) == (b > 0) else -math.inf


def _to_float(value: float) -> float:
    """Convert to float; ints beyond the float range become a signed infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and math.fmod(value, 2.0) != 0.0


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent with IEEE-754 pow semantics.

    Undefined combinations yield NaN or an infinity instead of raising:
    a zero base with a negative exponent is infinite, a negative base with
    a non-integer exponent is NaN, and overflow saturates to infinity.
    Integer arguments too large for a float are treated as infinite.

    Args:
        base: The base number
        exponent: The exponent

    Returns:
        base raised to the power of exponent
    """
    validate_number(base, "base")
    validate_number(exponent, "exponent")
    base = _to_float(base)
    exponent = _to_float(exponent)

    try:
        return math.pow(base, exponent)
    except OverflowError:
        if _is_odd_integer(exponent):
            return math.copysign(math.inf, base)
        return math.inf
    except ValueError:
        # math.pow reports these as domain errors
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def sqrt(x: float) -> float:
    """
    Calculate the square root of x.

    An integer too large for a float has an infinite root.

    Raises:
        InvalidArgumentError: If x is negative
    """
    validate_non_negative(x, "x", "Cannot calculate square root of negative number")
    return math.sqrt(_to_float(x))


def _wrap_int64(value: int) -> int:
    value &= INT64_MASK
    if value >= -INT64_MIN:
        value -= 1 << INT64_BITS
    return value


def factorial(n: int) -> int:
    """
    Calculate n! as a signed 64-bit integer.

    Products beyond the 64-bit range wrap around the way native ``long``
    arithmetic does; the result is only meaningful for n <= 20.

    Args:
        n: Input number

    Returns:
        Factorial of n

    Raises:
        InvalidArgumentError: If n is negative
    """
    validate_integer(n, "n")
    validate_non_negative(n, "n", "Factorial is not defined for negative numbers")

    if n in (0, 1):
        return 1

    result = 1
    for i in range(2, n + 1):
        result = _wrap_int64(result * i)
    return result


def is_prime(n: int) -> bool:
    """Check primality by trial division with 2, 3 and 6k +/- 1 candidates."""
    validate_integer(n, "n")

    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of a and b via the Euclidean algorithm.

    Properties:
        - Sign-insensitive: gcd(a, b) == gcd(abs(a), abs(b))
        - Zero: gcd(a, 0) == abs(a)
        - Non-negative result
    """
    validate_integer(a, "a")
    validate_integer(b, "b")

    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a
