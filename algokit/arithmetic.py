"""Integer and numeric exercises: factorials, Fibonacci, digits and roots."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

EVEN_FIBONACCI_LIMIT = 40_000_000
ROOT_TOLERANCE = 0.0001
_MAX_ROOT_ITERATIONS = 10_000


def factorial(n: int) -> int:
    """Return ``n!``; factorials of negative numbers are undefined."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting fib(0) = 0, fib(1) = 1."""
    if n < 0:
        raise ValueError("Fibonacci numbers are defined for n >= 0")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def even_fibonacci_sum(limit: int = EVEN_FIBONACCI_LIMIT) -> int:
    """Sum the even Fibonacci terms, stopping after the first term above ``limit``.

    The term that first exceeds ``limit`` is still counted when it is even.
    """
    previous, current = 0, 1
    total = 0
    while True:
        term = previous + current
        if term % 2 == 0:
            total += term
        if term > limit:
            return total
        previous, current = current, term


def series_sum(n: int) -> int:
    """Return 1 - 2*2 + 3*3 - 4*4 + ... up to the ``n``-th term."""
    return sum(i * i if i % 2 else -i * i for i in range(1, n + 1))


def is_armstrong(n: int) -> bool:
    """Return True when ``n`` equals the sum of the cubes of its digits."""
    if n < 0:
        return False
    return n == sum(int(digit) ** 3 for digit in str(n)) if n > 0 else True


def average(values: Iterable[int]) -> int:
    """Return the integer mean of ``values``, truncated toward zero."""
    numbers = list(values)
    if not numbers:
        raise ValueError("cannot average an empty collection")
    total = sum(numbers)
    quotient = abs(total) // len(numbers)
    return quotient if total >= 0 else -quotient


def to_binary(n: int) -> str:
    """Return the binary digits of the non-negative integer ``n``."""
    if n < 0:
        raise ValueError("only non-negative numbers can be converted")
    return format(n, "b")


def _initial_guess(k: float, n: int) -> float:
    power, p = 0.0, 0
    while power < k:
        p += 1
        power = float(p) ** n
    return p - 0.5


def nth_root(k: float, n: int) -> float:
    """Approximate the ``n``-th root of ``k`` by Newton-Raphson iteration.

    Iteration stops once ``x**n`` is within 0.0001 of ``k``.
    """
    if n < 1:
        raise ValueError("the root degree must be at least 1")
    if k < 0 and n % 2 == 0:
        raise ValueError("an even root of a negative number is not real")
    x = _initial_guess(k, n)
    for _ in range(_MAX_ROOT_ITERATIONS):
        if abs(k - x**n) < ROOT_TOLERANCE:
            return x
        slope = n * x ** (n - 1)
        if slope == 0:
            raise ArithmeticError("Newton iteration reached a zero derivative")
        x -= (x**n - k) / slope
    raise ArithmeticError("Newton iteration did not converge")


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of the positive integer ``n``."""
    if n < 1:
        raise ValueError("expected a positive number")
    return sum(int(digit) for digit in str(n))


def swap(a: Any, b: Any) -> tuple[Any, Any]:
    """Return the two values in the opposite order."""
    return b, a