"""Genetic search for portfolio weights that maximise a composite fitness score."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Callable, Sequence

from .portfolio import Portfolio


def normalize(values: Sequence[float]) -> list[float]:
    """Scale ``values`` so that they sum to one."""
    total = sum(values)
    if total == 0:
        raise ValueError("cannot normalise values that sum to zero")
    return [value / total for value in values]


def normalized_cumsum(values: Sequence[float]) -> list[float]:
    """Return the running total of ``values`` after normalising them."""
    result = []
    running = 0.0
    for value in normalize(values):
        running += value
        result.append(running)
    return result


def _divide(numerator: float, denominator: float) -> float:
    """Divide with floating-point semantics for a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _round_cents(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) * 100 + 0.5), value) / 100


@dataclass(frozen=True)
class OptimisationResult:
    """The best chromosome of the final population."""

    names: tuple[str, ...]
    weights: tuple[float, ...]
    fitness: float
    average_fitness: tuple[float, ...]

    @property
    def allocation(self) -> dict[str, float]:
        """Map each asset name to its weight."""
        return dict(zip(self.names, self.weights))


class GeneticAlgorithm:
    """Evolves a population of weight vectors over the assets of a portfolio."""

    def __init__(
        self,
        portfolio: Portfolio,
        population: int,
        generations: int,
        crossover_rate: float,
        mutation_rate: float,
        elite_rate: float,
        risk_free_rate: float,
        rng: random.Random | None = None,
    ) -> None:
        if population <= 0 or len(portfolio) <= 0:
            raise ValueError("Invalid population or n_assets values.")
        self.portfolio = portfolio
        self.population = population
        self.generations = generations
        self.crossover_rate = crossover_rate
        self.mutation_rate = mutation_rate
        self.elite_rate = elite_rate
        self.risk_free_rate = risk_free_rate
        self.rng = rng if rng is not None else random.Random()

    @property
    def n_assets(self) -> int:
        return len(self.portfolio)

    def fitness(self, weights: Sequence[float]) -> float:
        """Score one weight vector; higher is better."""
        if len(weights) != self.n_assets:
            raise ValueError(
                f"expected {self.n_assets} weights, got {len(weights)}"
            )
        exp_ret = exp_beta = sharpe = variance = 0.0
        for weight, asset in zip(weights, self.portfolio):
            exp_ret += weight * asset.ret
            exp_beta += weight * asset.beta
            variance += (weight * asset.volatility) ** 2
            sharpe += weight * asset.sharpe_ratio
        treynor = _divide(exp_ret, exp_beta) if exp_ret != 0.0 else 0.0
        volatility = math.sqrt(variance)
        return (
            exp_ret
            - 0.5 * sharpe
            - 0.25 * exp_beta
            - 0.25 * volatility
            + 0.25 * treynor
        )

    def optimise_weights(
        self, report: Callable[[str], object] | None = None
    ) -> OptimisationResult:
        """Run the evolution and return the fittest chromosome.

        Progress lines are passed to ``report`` (printed by default).
        """
        emit = print if report is None else report
        population = [
            normalize([self.rng.random() for _ in range(self.n_assets)])
            for _ in range(self.population)
        ]
        averages = []
        for generation in range(self.generations):
            scores = [self.fitness(weights) for weights in population]
            non_elite = self._non_elite(scores)
            picks = self._select([scores[i] for i in non_elite])
            self._crossover(population, picks)
            self._mutate(population, picks)
            average = _round_cents(sum(scores) / len(scores))
            averages.append(average)
            emit(
                f"Generation {generation}: Average fitness score of {average:g} "
                f"from {len(population)} chromosomes"
            )

        scores = [self.fitness(weights) for weights in population]
        best = max(range(len(scores)), key=scores.__getitem__)
        optimal = population[best]
        emit("the optimal weights are :")
        for asset, weight in zip(self.portfolio, optimal):
            emit(f"{asset.name} : {weight:g}")
        return OptimisationResult(
            names=tuple(asset.name for asset in self.portfolio),
            weights=tuple(optimal),
            fitness=scores[best],
            average_fitness=tuple(averages),
        )

    def _non_elite(self, scores: Sequence[float]) -> list[int]:
        """Indices of all but the fittest share of the population, best first."""
        n_elite = int(len(scores) * self.elite_rate)
        ranked = sorted(range(len(scores)), key=scores.__getitem__, reverse=True)
        return ranked[n_elite:]

    def _select(self, scores: Sequence[float]) -> list[int]:
        """Roulette-wheel selection of indices for crossover."""
        n_selections = len(scores) // 2
        if n_selections == 0:
            return []
        wheel = normalized_cumsum(scores)
        picks = []
        for _ in range(n_selections):
            probability = self.rng.random()
            picks.append(
                next(
                    (i for i, level in enumerate(wheel) if level >= probability),
                    len(wheel),
                )
            )
        return picks

    def _crossover(self, population: list[list[float]], picks: Sequence[int]) -> None:
        """Uniform crossover between consecutive pairs of picked chromosomes."""
        size = len(population)
        for first, second in zip(picks[0::2], picks[1::2]):
            if first >= size or second >= size:
                continue
            a, b = population[first], population[second]
            for asset in range(self.n_assets):
                if self.rng.random() > self.crossover_rate:
                    a[asset], b[asset] = b[asset], a[asset]
            population[first] = normalize(a)
            population[second] = normalize(b)

    def _mutate(self, population: list[list[float]], picks: Sequence[int]) -> None:
        """Shrink randomly chosen genes of picked chromosomes."""
        if self.mutation_rate == 0 or not picks:
            return
        mutations = int(len(picks) * self.n_assets * self.mutation_rate)
        for _ in range(mutations):
            target = picks[self.rng.randrange(len(picks))]
            asset = self.rng.randrange(self.n_assets)
            factor = self.rng.random()
            if target >= len(population):
                continue
            chromosome = population[target]
            chromosome[asset] = abs(chromosome[asset] * factor)
            population[target] = normalize(chromosome)