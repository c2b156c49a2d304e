[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trendfit"
version = "0.1.0"
description = "Polynomial regression, linear regression, logistic curves and Lagrange interpolation for small yearly data series"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "regression",
    "interpolation",
    "lagrange",
    "polynomial",
    "logistic",
    "forecast",
    "numerical-methods",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trendfit = "trendfit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["trendfit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
