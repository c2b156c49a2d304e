"""Regression, logistic curves and Lagrange interpolation for yearly data series."""

__version__ = "0.1.0"

__all__ = ["cli", "dataset", "interpolation", "polynomial", "regression"]