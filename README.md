# trendfit

Small numerical tools for fitting and extrapolating yearly data series, such
as population counts or the share of internet users:

- least-squares **linear regression** and **cubic polynomial regression**,
- a **logistic (sigmoid) curve** for quantities that saturate,
- **Lagrange interpolation**, either as a value at one point or as an
  explicit polynomial,
- helpers for polynomials stored as coefficient lists,
- a reader for the `Year,Percentage_Internet_User,Population` CSV layout.

No third-party dependencies are needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `trendfit` command with four
sub-commands:

| Sub-command | What it prints |
|---|---|
| `trendfit estimate` | Cubic-regression coefficients of a built-in population series and a built-in internet-usage series (2000–2018 with gaps), and estimates for the missing years 2005, 2006, 2015 and 2016. |
| `trendfit interpolate [PATH]` | Reads the CSV file, skipping 34 rows after the header and taking at most 25 rows, lists the points and prints the Lagrange interpolating polynomials of internet usage and of population against year. |
| `trendfit linear [PATH]` | Reads up to 60 rows of the CSV file, prints straight-line fits of internet usage and of population against year, and their predictions for 2025. |
| `trendfit forecast` | Extrapolates a built-in population series (2000, 2010, 2020, 2023) to 2030 and 2035 with Lagrange interpolation, evaluates a logistic curve (limit 100, rate 0.2, midpoint 2015) for 2035, and combines them into an estimate of internet users in 2035. |

`PATH` defaults to `../Data Tugas Pemrograman A.csv`, relative to the current
directory. If the file cannot be opened or yields no rows, the error is
written to standard error, `Failed to load data.` is printed and the command
exits with status 1.

```
trendfit --help
```

shows the sub-commands and their options.

## Library

### Polynomials

Polynomials are lists of coefficients in ascending order of power, so
`[3.0, 10.0, 8.0]` means `3 + 10x + 8x²`.

```python
from trendfit.polynomial import multiply, add, degree, evaluate, format_polynomial

p = multiply([1.0, 2.0], [3.0, 4.0])   # [3.0, 10.0, 8.0]
q = add([1.0, 2.0], [3.0, 4.0])        # [4.0, 6.0]
degree(p)                              # 2
evaluate(p, 2.0)                       # 55.0
print(format_polynomial(p))            # P(x) = 8.000000x^2 + 10.000000x + 3.000000
```

`add` pads the shorter polynomial with zeros. Coefficients whose magnitude is
below `1e-10` are treated as zero when the degree is determined and when the
polynomial is formatted; a polynomial with no remaining terms formats as
`P(x) = 0`. Coefficients of exactly 1 are written without a number (`x^2`).

### Regression

```python
from trendfit.regression import linear_regression, cubic_regression, logistic

fit = linear_regression([2000, 2001, 2002], [1.0, 1.5, 2.0])
fit.slope, fit.intercept
fit.predict(2025)

a0, a1, a2, a3 = cubic_regression(years, values)

logistic(2035, 100.0, 0.2, 2015)   # limit / (1 + exp(-rate * (t - midpoint)))
```

`linear_regression` returns a frozen `LinearFit` holding `slope` and
`intercept`; when all x values are equal, or there are no points, both are
zero. `cubic_regression` solves the normal equations of a third-order fit by
Gaussian elimination without pivoting and returns a tuple of four
coefficients, lowest power first. Both raise `ValueError` when x and y differ
in length; `cubic_regression` also raises it when a zero pivot is met.

### Interpolation

```python
from trendfit.interpolation import lagrange_basis, lagrange_polynomial, lagrange_value

years = [2000, 2010, 2020, 2023]
population = [216077790, 246305322, 274814866, 281190067]

lagrange_value(years, population, 2030)          # value at one point
poly = lagrange_polynomial(years, population)    # coefficient list
basis = lagrange_basis(0, years)                 # L_0(x)
```

All three raise `ValueError` when the x values are not distinct, and the two
taking y values also when the lengths differ. Interpolating many points with a
single polynomial oscillates strongly between and beyond the data (Runge's
phenomenon); keep the number of points small.

### Reading data

```python
from trendfit.dataset import read_csv_data

data = read_csv_data("data.csv", 34, 25)
len(data)
data.year, data.percentage, data.population
```

The file starts with a header line, followed by rows of
`Year,Percentage_Internet_User,Population`. `skip` lines after the header are
ignored (default 0) and at most `limit` rows are read (default 60). Rows with
fewer than three non-empty fields are ignored; a field that does not start
with a number reads as 0. The result is a `DataSet` of three parallel lists.
`ValueError` is raised when no row was read.

## Limitations

- No data file is included; `interpolate` and `linear` need a CSV file of
  the layout above.
- Results are only printed as text; there is no plotting and no output file.
- The built-in series and the logistic parameters used by `estimate` and
  `forecast` are fixed and cannot be changed from the command line.