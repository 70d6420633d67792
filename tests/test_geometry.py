import math

import pytest

from algokit.geometry import hypotenuse, square_or_circle_area


def test_hypotenuse_worked_example():
    assert hypotenuse(3, 4) == 5.0


def test_hypotenuse_is_symmetric():
    assert hypotenuse(5.5, 2.25) == hypotenuse(2.25, 5.5)


def test_hypotenuse_with_zero_leg():
    assert hypotenuse(0, 7) == 7.0


def test_hypotenuse_ignores_sign():
    assert hypotenuse(-3, 4) == hypotenuse(3, 4)


@pytest.mark.parametrize("a,b", [(1.0, 1.0), (6.0, 8.0), (0.5, 1.2)])
def test_hypotenuse_satisfies_pythagoras(a, b):
    c = hypotenuse(a, b)
    assert math.isclose(c * c, a * a + b * b)
    assert c >= max(a, b)


def test_square_area_worked_example():
    assert square_or_circle_area(10) == 100


def test_circle_area_worked_example():
    assert f"{square_or_circle_area(3):.2f}" == "28.26"


@pytest.mark.parametrize("n", [0, 5, 15, -20])
def test_multiples_of_five_give_square(n):
    assert square_or_circle_area(n) == n * n


@pytest.mark.parametrize("n", [1, 2, 7, 11])
def test_others_give_circle_scaled_by_pi_approximation(n):
    assert math.isclose(square_or_circle_area(n) / (n * n), 3.14)