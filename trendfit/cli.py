"""Command-line reports: cubic estimates, interpolation, linear trend, forecast."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from trendfit.dataset import read_csv_data
from trendfit.interpolation import lagrange_polynomial, lagrange_value
from trendfit.polynomial import format_polynomial
from trendfit.regression import cubic_regression, linear_regression, logistic

DEFAULT_DATA = "../Data Tugas Pemrograman A.csv"
INTERPOLATION_SKIP = 34
INTERPOLATION_LIMIT = 25

_ESTIMATE_YEARS = [2000, 2001, 2002, 2003, 2004, 2007, 2008, 2009, 2010, 2011, 2012, 2013, 2014, 2017, 2018]
_ESTIMATE_POPULATION = [
    211540000, 214880000, 218030000, 221100000, 224100000, 230000000, 234000000, 237000000,
    240000000, 243000000, 246000000, 249000000, 252000000, 258000000, 261000000,
]
_ESTIMATE_INTERNET = [0.9, 1.1, 1.3, 1.5, 1.8, 3.5, 4.2, 5.0, 6.0, 8.0, 10.5, 15.0, 19.8, 40.0, 47.0]
_MISSING_YEARS = [2005, 2006, 2015, 2016]

_FORECAST_YEARS = [2000, 2010, 2020, 2023]
_FORECAST_POPULATION = [216077790, 246305322, 274814866, 281190067]


def _cubic_at(coefficients: Sequence[float], year: int) -> float:
    return sum(coeff * float(year) ** power for power, coeff in enumerate(coefficients))


def run_estimate() -> str:
    """Fit cubic trends to the built-in series and estimate the missing years."""
    years = [float(y) for y in _ESTIMATE_YEARS]
    population = cubic_regression(years, [float(v) for v in _ESTIMATE_POPULATION])
    internet = cubic_regression(years, _ESTIMATE_INTERNET)

    lines = ["=== Koefisien Regresi Populasi ==="]
    lines += [f"a{i} = {coeff:.5f}" for i, coeff in enumerate(population)]
    lines += ["", "=== Koefisien Regresi Persentase Pengguna Internet ==="]
    lines += [f"b{i} = {coeff:.5f}" for i, coeff in enumerate(internet)]
    lines += ["", "=== Estimasi Tahun yang Hilang ==="]
    for year in _MISSING_YEARS:
        lines.append(f"Tahun {year}:")
        lines.append(f"  Populasi = {int(_cubic_at(population, year))}")
        lines.append(f"  % Pengguna Internet = {_cubic_at(internet, year):.5f}%")
    return "\n".join(lines) + "\n"


def run_interpolate(path: str | os.PathLike[str] = DEFAULT_DATA) -> str:
    """Interpolate usage and population against year from a CSV file."""
    data = read_csv_data(path, skip=INTERPOLATION_SKIP, limit=INTERPOLATION_LIMIT)
    lines = [f"Using {len(data)} data points:"]
    lines += [
        f"Year: {year:.0f} | Internet Users: {percent:.6f}% | Population: {people:.0f}"
        for year, percent, people in zip(data.year, data.percentage, data.population)
    ]
    lines += ["", "--- Interpolating: Percentage of Internet Users vs Year ---", ""]
    lines.append("Interpolated Polynomial for Internet Usage (%):")
    lines.append(format_polynomial(lagrange_polynomial(data.year, data.percentage)))
    lines += ["", "--- Interpolating: Population vs Year ---", ""]
    lines.append("Interpolated Polynomial for Population:")
    lines.append(format_polynomial(lagrange_polynomial(data.year, data.population)))
    return "\n".join(lines) + "\n"


def run_linear(path: str | os.PathLike[str] = DEFAULT_DATA) -> str:
    """Fit straight lines to a CSV file and predict the year 2025."""
    data = read_csv_data(path)
    usage = linear_regression(data.year, data.percentage)
    people = linear_regression(data.year, data.population)
    predict_year = 2025.0
    lines = [
        f"Loaded {len(data)} data points.",
        "",
        "Regression Model: Internet Usage (%) vs Year",
        f"y = {usage.slope:.6f} * x + {usage.intercept:.6f}",
        "",
        "Regression Model: Population vs Year",
        f"y = {people.slope:.2f} * x + {people.intercept:.2f}",
        "",
        f"Predicted Internet Usage in {predict_year:.0f}: {usage.predict(predict_year):.2f}%",
        f"Predicted Population in {predict_year:.0f}: {people.predict(predict_year):.0f}",
    ]
    return "\n".join(lines) + "\n"


def run_forecast() -> str:
    """Forecast population and internet users with interpolation and a logistic curve."""
    population_year = 2030
    population = lagrange_value(_FORECAST_YEARS, _FORECAST_POPULATION, population_year)
    internet_year = 2035
    percent = logistic(internet_year, 100.0, 0.2, 2015)
    population_2035 = lagrange_value(_FORECAST_YEARS, _FORECAST_POPULATION, 2035)
    users = (percent / 100.0) * population_2035
    lines = [
        f"Estimasi populasi di {population_year}: {population:.6f}",
        f"Estimasi persen pengguna internet di {internet_year}: {percent:.6f}%",
        f"Estimasi pengguna internet di tahun {internet_year}: {users:.6f}",
    ]
    return "\n".join(lines) + "\n"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trendfit", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("estimate", help="cubic fit of the built-in series")
    for name, text in (("interpolate", "Lagrange interpolation"), ("linear", "linear regression")):
        sub = commands.add_parser(name, help=f"{text} of a CSV file")
        sub.add_argument("path", nargs="?", default=DEFAULT_DATA)
    commands.add_parser("forecast", help="population and internet-user forecast")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "estimate":
            report = run_estimate()
        elif args.command == "interpolate":
            report = run_interpolate(args.path)
        elif args.command == "linear":
            report = run_linear(args.path)
        else:
            report = run_forecast()
    except (OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        print("Failed to load data.")
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())