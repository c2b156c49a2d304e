"""Dense polynomials stored as coefficient lists, lowest power first."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import zip_longest

EPSILON = 1e-10


def multiply(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the product of two polynomials."""
    if not a or not b:
        return []
    result = [0.0] * (len(a) + len(b) - 1)
    for i, ca in enumerate(a):
        for j, cb in enumerate(b):
            result[i + j] += ca * cb
    return result


def add(a: Iterable[float], b: Iterable[float]) -> list[float]:
    """Return the sum of two polynomials."""
    return [ca + cb for ca, cb in zip_longest(a, b, fillvalue=0.0)]


def degree(coefficients: Sequence[float]) -> int:
    """Return the highest power whose coefficient is not negligibly small."""
    return max(
        (power for power, coeff in enumerate(coefficients) if abs(coeff) > EPSILON),
        default=0,
    )


def evaluate(coefficients: Sequence[float], x: float) -> float:
    """Evaluate the polynomial at ``x`` using Horner's rule."""
    result = 0.0
    for coeff in reversed(coefficients):
        result = result * x + coeff
    return result


def _term(abs_coeff: float, power: int) -> str:
    if power == 0:
        return f"{abs_coeff:.6f}"
    variable = "x" if power == 1 else f"x^{power}"
    if abs_coeff == 1.0:
        return variable
    return f"{abs_coeff:.6f}{variable}"


def format_polynomial(coefficients: Sequence[float]) -> str:
    """Render the polynomial as ``P(x) = ...`` with the highest power first."""
    coeffs = list(coefficients) or [0.0]
    pieces: list[str] = []
    for power in range(degree(coeffs), -1, -1):
        coeff = coeffs[power]
        if abs(coeff) < EPSILON:
            continue
        if pieces:
            pieces.append(" + " if coeff >= 0 else " - ")
        elif coeff < 0:
            pieces.append("-")
        pieces.append(_term(abs(coeff), power))
    return "P(x) = " + ("".join(pieces) if pieces else "0")