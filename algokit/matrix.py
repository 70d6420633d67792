"""Matrix multiplication and concentric-rectangle patterns."""

from __future__ import annotations

from collections.abc import Sequence


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix product of ``a`` and ``b``."""
    if not a or not b:
        raise ValueError("matrices must not be empty")
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of the first matrix must equal rows of the second")
    width = len(b[0])
    if any(len(row) != width for row in b):
        raise ValueError("rows of the second matrix differ in length")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def concentric_rectangles(n: int) -> list[list[int]]:
    """Return the (2n-1) square grid of rectangles counting down from ``n`` to 1."""
    size = 2 * n - 1
    if size <= 0:
        return []
    return [
        [n - min(i, j, size - 1 - i, size - 1 - j) for j in range(size)]
        for i in range(size)
    ]