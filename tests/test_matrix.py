import random

import pytest

from algokit.matrix import concentric_rectangles, multiply


def _identity(n):
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def _random_matrix(rng, rows, cols):
    return [[rng.randint(-9, 9) for _ in range(cols)] for _ in range(rows)]


def test_identity_is_neutral():
    rng = random.Random(1)
    m = _random_matrix(rng, 3, 3)
    assert multiply(m, _identity(3)) == m
    assert multiply(_identity(3), m) == m


def test_rectangular_shapes():
    rng = random.Random(2)
    a = _random_matrix(rng, 2, 4)
    b = _random_matrix(rng, 4, 3)
    product = multiply(a, b)
    assert len(product) == 2
    assert all(len(row) == 3 for row in product)


def test_associativity():
    rng = random.Random(3)
    a = _random_matrix(rng, 2, 3)
    b = _random_matrix(rng, 3, 4)
    c = _random_matrix(rng, 4, 2)
    assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))


def test_mismatched_dimensions_raise():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])
    with pytest.raises(ValueError):
        multiply([], [[1]])


def test_concentric_sample():
    assert concentric_rectangles(3) == [
        [3, 3, 3, 3, 3],
        [3, 2, 2, 2, 3],
        [3, 2, 1, 2, 3],
        [3, 2, 2, 2, 3],
        [3, 3, 3, 3, 3],
    ]


@pytest.mark.parametrize("n", [1, 2, 4, 6])
def test_concentric_invariants(n):
    grid = concentric_rectangles(n)
    size = 2 * n - 1
    assert len(grid) == size
    assert all(len(row) == size for row in grid)
    assert grid[n - 1][n - 1] == 1
    assert all(value == n for value in grid[0])
    assert grid == [list(row) for row in zip(*grid)]
    assert grid == grid[::-1]


def test_concentric_non_positive_is_empty():
    assert concentric_rectangles(0) == []
    assert concentric_rectangles(-2) == []