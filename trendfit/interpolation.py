"""Lagrange interpolation, both as a polynomial and as a point value."""

from __future__ import annotations

from collections.abc import Sequence

from trendfit.polynomial import add, multiply


def _check_distinct(xs: Sequence[float]) -> None:
    if len(set(xs)) != len(xs):
        raise ValueError("interpolation nodes must be distinct")


def lagrange_basis(index: int, xs: Sequence[float]) -> list[float]:
    """Return the coefficients of the basis polynomial L_index."""
    _check_distinct(xs)
    xi = xs[index]
    basis = [1.0]
    for j, xj in enumerate(xs):
        if j == index:
            continue
        denom = xi - xj
        basis = multiply(basis, [-xj / denom, 1.0 / denom])
    return basis


def lagrange_polynomial(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """Return the coefficients of the interpolating polynomial through the points."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    result: list[float] = [0.0] * len(xs)
    for index, yi in enumerate(ys):
        scaled = [coeff * yi for coeff in lagrange_basis(index, xs)]
        result = add(result, scaled)
    return result


def lagrange_value(xs: Sequence[float], ys: Sequence[float], target: float) -> float:
    """Evaluate the interpolating polynomial at ``target`` directly."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    _check_distinct(xs)
    result = 0.0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        term = yi
        for j, xj in enumerate(xs):
            if i != j:
                term *= (target - xj) / (xi - xj)
        result += term
    return result