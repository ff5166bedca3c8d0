"""A collection of assets, with table output and a plain-text reader."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

from .asset import Asset

_HEADER = "Name|\tReturn|\tVolatility|\tSharpe_ratio|\tBeta|\t"
_FIELDS_PER_ASSET = 5


@dataclass(frozen=True)
class Portfolio:
    """An ordered, immutable collection of assets."""

    assets: tuple[Asset, ...]

    def __init__(self, assets: Iterable[Asset]) -> None:
        object.__setattr__(self, "assets", tuple(assets))

    def __len__(self) -> int:
        return len(self.assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self.assets)

    def format_table(self) -> str:
        """Return the header line followed by one block per asset."""
        parts = [_HEADER + "\n"]
        parts.extend(asset.format_row() + "\n \n" for asset in self.assets)
        return "".join(parts)

    def display(self, stream: TextIO | None = None) -> None:
        """Write the table to ``stream`` (standard output by default)."""
        out = sys.stdout if stream is None else stream
        out.write(self.format_table())


def parse_asset_table(lines: Iterable[str]) -> Portfolio:
    """Build a portfolio from whitespace-separated asset records.

    The first line is a header and is skipped.  Each record holds a name
    followed by return, volatility, Sharpe ratio and beta.
    """
    line_iter = iter(lines)
    next(line_iter, None)
    tokens = [token for line in line_iter for token in line.split()]
    if len(tokens) % _FIELDS_PER_ASSET:
        raise ValueError(
            f"incomplete asset record: {len(tokens)} fields is not a multiple "
            f"of {_FIELDS_PER_ASSET}"
        )
    assets = []
    for start in range(0, len(tokens), _FIELDS_PER_ASSET):
        name, *numbers = tokens[start:start + _FIELDS_PER_ASSET]
        try:
            ret, volatility, sharpe, beta = (float(n) for n in numbers)
        except ValueError as exc:
            raise ValueError(f"invalid number in record for {name!r}") from exc
        assets.append(Asset(name, ret, volatility, sharpe, beta))
    return Portfolio(assets)


def read_asset_table(path: str | os.PathLike[str]) -> Portfolio:
    """Read a portfolio from a whitespace-separated asset file."""
    with open(path, encoding="utf-8") as handle:
        return parse_asset_table(handle)