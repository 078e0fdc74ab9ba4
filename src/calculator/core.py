"""Calculator class exposing the stateless operations as methods."""

from calculator import operations


class Calculator:
    """
    A stateless calculator.

    Every method is a pure function of its arguments and delegates to the
    function of the same name in :mod:`calculator.operations`. Instances
    carry no state, so they are interchangeable and safe to share between
    threads.

    Example:
        >>> calc = Calculator()
        >>> calc.add(calc.multiply(2, 3), int(calc.divide(8, 2)))
        10
        >>> calc.gcd(-8, 12)
        4
    """

    __slots__ = ()

    def add(self, a: int, b: int) -> int:
        """Sum of a and b."""
        return operations.add(a, b)

    def subtract(self, a: int, b: int) -> int:
        """Difference of a and b."""
        return operations.subtract(a, b)

    def multiply(self, a: int, b: int) -> int:
        """Product of a and b."""
        return operations.multiply(a, b)

    def divide(self, a: int, b: int) -> float:
        """Quotient of a and b; raises InvalidArgumentError when b is zero."""
        return operations.divide(a, b)

    def power(self, base: float, exponent: float) -> float:
        """base raised to exponent with IEEE-754 semantics."""
        return operations.power(base, exponent)

    def sqrt(self, x: float) -> float:
        """Square root of x; raises InvalidArgumentError when x is negative."""
        return operations.sqrt(x)

    def factorial(self, n: int) -> int:
        """Factorial of n; raises InvalidArgumentError when n is negative."""
        return operations.factorial(n)

    def is_prime(self, n: int) -> bool:
        """Whether n is prime; False for n <= 1."""
        return operations.is_prime(n)

    def gcd(self, a: int, b: int) -> int:
        """Non-negative greatest common divisor of a and b."""
        return operations.gcd(a, b)

    def __repr__(self) -> str:
        return "Calculator()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calculator):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Calculator)
