# portfolio_ga

Turn a table of daily closing prices into per-asset indicators, then search
for portfolio weights with a genetic algorithm.

Only the Python standard library is needed (Python 3.10 or newer).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input format

The price table is a comma-separated file:

- The first row holds the column names. The first column is the benchmark.
- Each following row holds one day's prices, one column per asset. Every
  price must be a positive number.
- A trailing comma on a line is ignored.

At least two price rows are needed. Indicators are reported for every column
after the first; the benchmark column itself is not reported. A table that is
too short, has short rows, or holds non-numeric or non-positive prices raises
`ValueError`.

## Indicators

`portfolio_ga.indicators.calculate_indicators(table, risk_free)` returns one
`Asset` per non-benchmark column:

- **ret**: the mean daily log return, multiplied by 252 trading days and by
  100 (percent).
- **volatility**: the standard deviation of the asset's prices, taken over
  every price row except the first.
- **sharpe_ratio**: `(ret - risk_free * 100) / volatility`.
- **beta**: the mean product of the benchmark's and the asset's daily log
  returns, each taken as a deviation from its own annualised return, divided
  by the benchmark's volatility.

A zero denominator gives an infinite or NaN value rather than an error.

## Command line

```
portfolio-ga [DATA] [options]
```

`DATA` is the price file and defaults to `Data.csv` in the current directory.
The command computes the indicators, prints the asset table, runs the genetic
algorithm, prints the rounded average fitness of each generation, and finally
prints the best weight found for each asset.

| Option | Default |
| --- | --- |
| `--risk-free` | 0.01 |
| `--population` | 500 |
| `--generations` | 100 |
| `--crossover-rate` | 0.8 |
| `--mutation-rate` | 0.1 |
| `--elite-rate` | 0.2 |
| `--seed` | none (unseeded) |

If the file cannot be opened, or the data or settings are invalid, a message
goes to standard error and the exit status is 1.

## Library use

```python
import random
import sys

from portfolio_ga.genetic import GeneticAlgorithm
from portfolio_ga.indicators import calculate_indicators, read_price_table
from portfolio_ga.portfolio import Portfolio

table = read_price_table("Data.csv")
portfolio = Portfolio(calculate_indicators(table, 0.01))
portfolio.display(sys.stdout)

ga = GeneticAlgorithm(
    portfolio,
    population=500,
    generations=100,
    crossover_rate=0.8,
    mutation_rate=0.1,
    elite_rate=0.2,
    risk_free_rate=0.01,
    rng=random.Random(42),
)
result = ga.optimise_weights(report=print)
print(result.allocation, result.fitness)
```

`optimise_weights` passes each progress line to `report`, or prints it if
`report` is omitted. It returns an `OptimisationResult` with `names`,
`weights`, `fitness`, `average_fitness` (one rounded value per generation)
and an `allocation` mapping of name to weight. Pass a seeded `random.Random`
as `rng` for reproducible runs. A population of zero or less, or an empty
portfolio, raises `ValueError`.

Each generation ranks the chromosomes by fitness. It sets aside the fittest
`elite_rate` share and picks chromosomes from the rest by roulette wheel. It
then applies uniform crossover to consecutive pairs of picks: a gene is
swapped when a random draw exceeds `crossover_rate`. Finally it shrinks
randomly chosen genes of the picks by a random factor. Weights are
renormalised to sum to 1 after every change.

`GeneticAlgorithm.fitness(weights)` scores one weight vector:

```
exp_ret - 0.5 * sharpe - 0.25 * beta - 0.25 * volatility + 0.25 * treynor
```

Here `exp_ret`, `sharpe` and `beta` are weighted sums over the assets, and
`volatility` is the square root of the sum of `(weight * asset volatility)²`.
`treynor` is `exp_ret / beta`, or 0 when `exp_ret` is 0.

Other building blocks:

- `Asset.format_row()` and `Portfolio.format_table()` return the
  pipe-separated text that `display()` writes.
- `parse_price_table(lines)` and `format_price_table(table)` split and render
  comma-separated rows.
- `normalize()` and `normalized_cumsum()` rescale a sequence to sum to 1, and
  give its running totals. They raise `ValueError` for a sequence summing to
  zero.
- `read_asset_table(path)` and `parse_asset_table(lines)` load assets whose
  indicators are already computed. They expect a header line, then
  whitespace-separated records of name, return, volatility, Sharpe ratio and
  beta.

## What it does not do

The package does not fetch prices; it reads them from a local file. It does
not save results. The command only prints them, and the library returns them
as Python objects.