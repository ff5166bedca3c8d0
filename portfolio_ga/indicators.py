"""Reading price tables and computing per-asset indicators."""

from __future__ import annotations

import math
import os
from typing import Iterable, Sequence

from .asset import Asset

TRADING_DAYS = 252


def _split_fields(line: str) -> list[str]:
    """Split a line on commas; a trailing comma yields no empty field."""
    line = line.rstrip("\r\n")
    if not line:
        return []
    fields = line.split(",")
    if fields[-1] == "":
        fields.pop()
    return fields


def parse_price_table(lines: Iterable[str]) -> list[list[str]]:
    """Split comma-separated lines into rows of fields."""
    return [_split_fields(line) for line in lines]


def read_price_table(path: str | os.PathLike[str]) -> list[list[str]]:
    """Read a comma-separated price file into rows of fields."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_price_table(handle)


def format_price_table(table: Sequence[Sequence[str]]) -> str:
    """Render rows with each field followed by a space, one row per line."""
    return "".join("".join(f"{field} " for field in row) + "\n" for row in table)


def _divide(numerator: float, denominator: float) -> float:
    """Divide with floating-point semantics for a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _prices(table: Sequence[Sequence[str]], width: int) -> list[list[float]]:
    rows = []
    for number, row in enumerate(table[1:], start=1):
        if len(row) < width:
            raise ValueError(f"row {number} has {len(row)} fields, expected {width}")
        try:
            values = [float(field) for field in row[:width]]
        except ValueError as exc:
            raise ValueError(f"row {number} holds a non-numeric price") from exc
        if any(value <= 0.0 for value in values):
            raise ValueError(f"row {number} holds a non-positive price")
        rows.append(values)
    return rows


def calculate_indicators(
    table: Sequence[Sequence[str]], risk_free: float
) -> list[Asset]:
    """Compute return, volatility, Sharpe ratio and beta for each asset.

    The first row names the columns; the remaining rows hold prices.  The
    first column is the benchmark against which beta is measured and is not
    itself reported.  Returns are annualised log returns in percent;
    volatility is the standard deviation of price.
    """
    if len(table) < 3:
        raise ValueError("price table needs a header and at least two price rows")
    header = list(table[0])
    width = len(header)
    prices = _prices(table, width)
    periods = len(prices) - 1

    current = prices[1:]
    returns = [
        [math.log(now / before) for now, before in zip(row, previous)]
        for row, previous in zip(current, prices)
    ]
    columns = list(zip(*current))
    return_columns = list(zip(*returns))

    annual_return = [
        sum(col) / periods * TRADING_DAYS * 100 for col in return_columns
    ]
    mean_price = [sum(p / periods for p in col) for col in columns]
    risk = [
        math.sqrt(sum((p - mean) ** 2 for p in col) / periods)
        for col, mean in zip(columns, mean_price)
    ]
    benchmark_dev = [r - annual_return[0] for r in return_columns[0]]

    assets = []
    for name, col_returns, ret, vol in zip(
        header[1:], return_columns[1:], annual_return[1:], risk[1:]
    ):
        covariance = (
            sum(b * (r - ret) for b, r in zip(benchmark_dev, col_returns)) / periods
        )
        beta = _divide(covariance, risk[0])
        sharpe = _divide(ret - risk_free * 100, vol)
        assets.append(Asset(name, ret, vol, sharpe, beta))
    return assets