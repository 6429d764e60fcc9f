import math

import pytest

from pocket_tools.calculator import add, divide, multiply, square, square_root, subtract


def test_add_empty_is_zero():
    assert add([]) == 0


@pytest.mark.parametrize("xs, ys", [([1, 2], [3]), ([-5, 10], [7, -2, 4]), ([], [9])])
def test_add_splits(xs, ys):
    assert add(xs + ys) == add(xs) + add(ys)


def test_add_accepts_generator():
    assert add(x for x in [4, 5]) == add([4, 5])


@pytest.mark.parametrize("a, b", [(10, 3), (-4, 9), (0, 0), (100, -100)])
def test_subtract_inverts_addition(a, b):
    assert subtract(a, b) + b == a
    assert subtract(a, b) == -subtract(b, a)


@pytest.mark.parametrize("a, b", [(3, 4), (-6, 7), (0, 12), (-2, -9)])
def test_multiply_properties(a, b):
    assert multiply(a, b) == multiply(b, a)
    assert multiply(a, 1) == a
    assert multiply(a, 0) == 0


def test_divide_truncates_toward_zero():
    assert divide(7, 2) == 3
    assert divide(-7, 2) == -3
    assert divide(7, -2) == -3


@pytest.mark.parametrize("a, b", [(17, 5), (-17, 5), (17, -5), (-17, -5), (4, 9), (12, 4)])
def test_divide_bounds(a, b):
    q = divide(a, b)
    assert abs(q * b) <= abs(a)
    assert abs(a) - abs(q * b) < abs(b)
    assert divide(-a, b) == -q


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        divide(5, 0)


@pytest.mark.parametrize("n", [0, 3, -3, 12, -100])
def test_square_matches_multiply(n):
    assert square(n) == multiply(n, n)
    assert square(n) == square(-n)


@pytest.mark.parametrize("n", [0, 1, 4, 9, 12, 30])
def test_square_root_of_square(n):
    assert square_root(square(n)) == pytest.approx(n)


def test_square_root_of_negative_is_nan():
    result = square_root(-1)
    assert str(abs(result)) == "nan"
    assert math.isnan(result)