"""Small geometry helpers."""

from __future__ import annotations

import math

PI = 3.14


def hypotenuse(a: float, b: float) -> float:
    """Return the hypotenuse of a right triangle with legs ``a`` and ``b``."""
    return math.sqrt(a * a + b * b)


def square_or_circle_area(n: int) -> float:
    """Return ``n*n`` when ``n`` is a multiple of 5, else the area of a circle of radius ``n``.

    The circle's area uses pi as 3.14.
    """
    if n % 5 == 0:
        return n * n
    return PI * n * n