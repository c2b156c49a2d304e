import pytest

from trendfit.polynomial import add, degree, evaluate, format_polynomial, multiply


def test_multiply_documented_example():
    assert multiply([1, 2], [3, 4]) == [3, 10, 8]


def test_add_documented_example():
    assert add([1, 2], [3, 4]) == [4, 6]


def test_add_pads_shorter_polynomial():
    assert add([1.0], [0.0, 5.0, 7.0]) == [1.0, 5.0, 7.0]


def test_multiply_with_empty_is_empty():
    assert multiply([], [1.0, 2.0]) == []


@pytest.mark.parametrize("x", [-3.0, -0.5, 0.0, 1.25, 4.0])
def test_multiply_matches_product_of_values(x):
    a = [1.5, -2.0, 0.25]
    b = [-1.0, 3.0]
    assert evaluate(multiply(a, b), x) == pytest.approx(evaluate(a, x) * evaluate(b, x))


@pytest.mark.parametrize("x", [-2.0, 0.0, 3.5])
def test_add_matches_sum_of_values(x):
    a = [2.0, 1.0]
    b = [0.5, -4.0, 1.0]
    assert evaluate(add(a, b), x) == pytest.approx(evaluate(a, x) + evaluate(b, x))


def test_degree_ignores_tiny_trailing_terms():
    assert degree([1.0, 2.0, 3e-11]) == 1


def test_degree_of_zero_polynomial():
    assert degree([0.0, 0.0, 0.0]) == 0
    assert degree([]) == 0


def test_evaluate_constant():
    assert evaluate([7.5], 123.0) == 7.5


def test_format_zero():
    assert format_polynomial([0.0, 0.0]) == "P(x) = 0"


def test_format_unit_coefficients_and_sign():
    assert format_polynomial([-1.0, 0.0, 1.0]) == "P(x) = x^2 - 1.000000"


def test_format_leading_negative_linear():
    assert format_polynomial([0.0, -1.0]) == "P(x) = -x"


def test_format_skips_negligible_terms():
    text = format_polynomial([2.0, 1e-12, 3.0])
    assert "x^1" not in text and text.startswith("P(x) = 3.000000x^2")