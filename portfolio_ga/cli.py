"""Command line: compute indicators from a price file and optimise weights."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence

from .genetic import GeneticAlgorithm
from .indicators import calculate_indicators, read_price_table
from .portfolio import Portfolio


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-ga",
        description="Optimise portfolio weights with a genetic algorithm.",
    )
    parser.add_argument("data", nargs="?", default="Data.csv",
                        help="comma-separated price file (default: Data.csv)")
    parser.add_argument("--risk-free", type=float, default=0.01)
    parser.add_argument("--population", type=int, default=500)
    parser.add_argument("--generations", type=int, default=100)
    parser.add_argument("--crossover-rate", type=float, default=0.8)
    parser.add_argument("--mutation-rate", type=float, default=0.1)
    parser.add_argument("--elite-rate", type=float, default=0.2)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the optimisation and return an exit status."""
    args = _parser().parse_args(argv)
    try:
        table = read_price_table(args.data)
    except OSError:
        print("Could not open the file", file=sys.stderr)
        return 1
    try:
        portfolio = Portfolio(calculate_indicators(table, args.risk_free))
        portfolio.display()
        ga = GeneticAlgorithm(
            portfolio,
            args.population,
            args.generations,
            args.crossover_rate,
            args.mutation_rate,
            args.elite_rate,
            args.risk_free,
            rng=random.Random(args.seed),
        )
        ga.optimise_weights()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())