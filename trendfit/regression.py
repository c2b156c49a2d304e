"""Least-squares fits and the logistic growth curve."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

CUBIC_ORDER = 3


@dataclass(frozen=True)
class LinearFit:
    """A straight line ``y = slope * x + intercept``."""

    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def _check_lengths(x: Sequence[float], y: Sequence[float]) -> None:
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")


def linear_regression(x: Sequence[float], y: Sequence[float]) -> LinearFit:
    """Fit a line by ordinary least squares.

    A degenerate input (all x equal, or no points) yields a zero line.
    """
    _check_lengths(x, y)
    n = len(x)
    sum_x = sum_y = sum_xy = sum_xx = 0.0
    for xv, yv in zip(x, y):
        sum_x += xv
        sum_y += yv
        sum_xy += xv * yv
        sum_xx += xv * xv

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return LinearFit(0.0, 0.0)
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return LinearFit(slope, intercept)


def cubic_regression(x: Sequence[float], y: Sequence[float]) -> tuple[float, float, float, float]:
    """Fit a third-order polynomial; return coefficients lowest power first.

    Solves the normal equations by Gaussian elimination without pivoting.
    """
    _check_lengths(x, y)
    size = CUBIC_ORDER + 1

    rhs = [0.0] * size
    for xv, yv in zip(x, y):
        power = 1.0
        for p in range(size):
            rhs[p] += yv * power
            power *= xv

    matrix = [
        [sum(xv ** (i + j) for xv in x) for j in range(size)] + [rhs[i]]
        for i in range(size)
    ]

    for i, pivot_row in enumerate(matrix):
        pivot = pivot_row[i]
        if pivot == 0:
            raise ValueError("normal equations are singular")
        for row in matrix[i + 1:]:
            ratio = row[i] / pivot
            row[:] = [value - ratio * p for value, p in zip(row, pivot_row)]

    coefficients = [0.0] * size
    for i in reversed(range(size)):
        row = matrix[i]
        value = row[size]
        for j in range(i + 1, size):
            value -= row[j] * coefficients[j]
        coefficients[i] = value / row[i]
    return tuple(coefficients)  # type: ignore[return-value]


def logistic(t: float, limit: float, rate: float, midpoint: float) -> float:
    """Logistic curve ``limit / (1 + exp(-rate * (t - midpoint)))``."""
    return limit / (1 + math.exp(-rate * (t - midpoint)))