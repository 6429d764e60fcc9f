"""Integer calculator operations."""

import math
from collections.abc import Iterable

__all__ = ["add", "subtract", "multiply", "divide", "square", "square_root"]


def add(numbers: Iterable[int]) -> int:
    """Return the sum of ``numbers``."""
    total = 0
    for number in numbers:
        total += number
    return total


def subtract(a: int, b: int) -> int:
    """Return ``a - b``."""
    return a - b


def multiply(a: int, b: int) -> int:
    """Return ``a * b``."""
    return a * b


def divide(a: int, b: int) -> int:
    """Return ``a / b`` truncated toward zero.

    Raises ZeroDivisionError when ``b`` is zero.
    """
    if b == 0:
        raise ZeroDivisionError("Divisor cannot be zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def square(n: int) -> int:
    """Return ``n`` squared."""
    return n * n


def square_root(n: int) -> float:
    """Return the square root of ``n``; NaN for negative numbers."""
    if n < 0:
        return math.nan
    return math.sqrt(n)