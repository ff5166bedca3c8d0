"""A single asset and its performance indicators."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO


def _fmt(value: float) -> str:
    """Format a number the way a default-configured text stream does."""
    return format(value, "g")


@dataclass(frozen=True)
class Asset:
    """An asset with its annualised return, volatility, Sharpe ratio and beta."""

    name: str
    ret: float
    volatility: float
    sharpe_ratio: float
    beta: float

    def format_row(self) -> str:
        """Return the asset as one table row, columns ending in '|\\t'."""
        cells = (
            self.name,
            _fmt(self.ret),
            _fmt(self.volatility),
            _fmt(self.sharpe_ratio),
            _fmt(self.beta),
        )
        return "".join(f"{cell}|\t" for cell in cells)

    def display(self, stream: TextIO | None = None) -> None:
        """Write the row and a newline to ``stream`` (standard output by default)."""
        out = sys.stdout if stream is None else stream
        out.write(self.format_row() + "\n")