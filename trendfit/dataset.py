"""Reading year / internet-usage / population series from CSV files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from itertools import islice

MAX_ENTRIES = 60

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _to_float(text: str) -> float:
    """Parse the leading number of ``text``; 0.0 when there is none."""
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


@dataclass
class DataSet:
    """Parallel columns of years, internet usage percentages and populations."""

    year: list[float] = field(default_factory=list)
    percentage: list[float] = field(default_factory=list)
    population: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.year)


def read_csv_data(
    path: str | os.PathLike[str], skip: int = 0, limit: int = MAX_ENTRIES
) -> DataSet:
    """Read up to ``limit`` rows after the header and ``skip`` further lines.

    Columns are year, internet-user percentage and population. Rows with
    fewer than three fields are ignored. Raises ValueError if no row was read.
    """
    data = DataSet()
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for _ in islice(handle, skip):
            pass
        for line in handle:
            if len(data) >= limit:
                break
            fields = [part for part in line.rstrip("\r\n").split(",") if part]
            if len(fields) < 3:
                continue
            data.year.append(_to_float(fields[0]))
            data.percentage.append(_to_float(fields[1]))
            data.population.append(_to_float(fields[2]))

    if not data.year:
        raise ValueError("no data was read")
    return data