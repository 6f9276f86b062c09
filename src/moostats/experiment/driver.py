"""
Minimal generational run driver.

Breeding is an external concern: the driver takes any ``breeder`` callable
that returns the next population. :class:`RandomSampler` is the bundled
stand-in (uniform sampling inside the problem bounds) used by the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from moostats.foundation.candidate import Candidate, FitnessFactory
from moostats.foundation.config import RunConfig
from moostats.foundation.fitness import ParetoFitness
from moostats.foundation.population import Population, RunState, Subpopulation
from moostats.foundation.problem.base import Evaluable, ZDTProblem
from moostats.foundation.problem.registry import make_problem
from moostats.monitoring.probes import Clock, UsageProbe
from moostats.monitoring.short_statistics import ShortStatistics
from moostats.monitoring.sink import StatisticsSink
from moostats.monitoring.statistics import Statistics

Initializer = Callable[[], Population]
Breeder = Callable[[RunState], Population]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class RandomSampler:
    """Uniform random candidates inside the problem's box bounds."""

    def __init__(
        self,
        problem: ZDTProblem,
        *,
        n_subpops: int = 1,
        pop_size: int = 100,
        fitness_factory: FitnessFactory | None = None,
        seed: int | None = None,
    ) -> None:
        self.problem = problem
        self.n_subpops = int(n_subpops)
        self.pop_size = int(pop_size)
        self.fitness_factory = fitness_factory or ParetoFitness
        self.rng = np.random.default_rng(seed)

    def sample(self, n: int) -> list[Candidate]:
        X = self.rng.uniform(self.problem.xl, self.problem.xu, size=(n, self.problem.n_var))
        return [Candidate(x=row, fitness=self.fitness_factory(self.problem.n_obj)) for row in X]

    def initialize(self) -> Population:
        return Population([Subpopulation(self.sample(self.pop_size)) for _ in range(self.n_subpops)])

    def breed(self, state: RunState) -> Population:
        return self.initialize()


def evaluate_population(problem: Evaluable, population: Population) -> int:
    """Evaluate every unevaluated candidate; returns how many were evaluated."""
    n_evaluated = 0
    for subpop in population:
        for ind in subpop.unevaluated():
            problem.evaluate(ind)
            n_evaluated += 1
    return n_evaluated


def run_generations(
    problem: Evaluable,
    statistics: Statistics,
    *,
    initializer: Initializer,
    breeder: Breeder,
    generations: int,
) -> RunState:
    """
    Drive ``generations`` generational cycles, calling statistics hooks in order.

    Evaluation of a generation is complete before ``post_evaluation`` runs.
    """
    if generations < 1:
        raise ValueError("generations must be a positive integer.")
    state = RunState()
    statistics.pre_initialization(state)
    state.population = initializer()
    statistics.post_initialization(state)

    for generation in range(generations):
        state.generation = generation
        statistics.pre_evaluation(state)
        evaluate_population(problem, state.population)
        statistics.post_evaluation(state)
        if generation == generations - 1:
            break
        statistics.pre_breeding(state)
        state.population = breeder(state)
        statistics.post_breeding(state)
    return state


@dataclass
class RunResult:
    problem: ZDTProblem
    state: RunState
    best_so_far: list[Candidate | None] = field(default_factory=list)
    pooled_best: Candidate | None = None


def run_from_config(
    cfg: RunConfig,
    *,
    sink: StatisticsSink | None = None,
    clock: Clock | None = None,
    usage: UsageProbe | None = None,
) -> RunResult:
    """Build problem, statistics and sampler from ``cfg`` and run it to completion."""
    cfg.validate()
    problem = make_problem(cfg.problem.name, n_var=cfg.problem.n_var)
    statistics = ShortStatistics(cfg.statistics, sink=sink, clock=clock, usage=usage)
    sampler = RandomSampler(
        problem,
        n_subpops=cfg.subpopulations,
        pop_size=cfg.population_size,
        seed=cfg.seed,
    )
    _logger().info(
        "Running %s (n_var=%d) for %d generation(s), %d x %d candidates",
        problem.label,
        problem.n_var,
        cfg.generations,
        cfg.subpopulations,
        cfg.population_size,
    )
    try:
        state = run_generations(
            problem,
            statistics,
            initializer=sampler.initialize,
            breeder=sampler.breed,
            generations=cfg.generations,
        )
    finally:
        statistics.close()
    _logger().info("Run finished after generation %d", state.generation)
    return RunResult(
        problem=problem,
        state=state,
        best_so_far=statistics.best_so_far(),
        pooled_best=statistics.pooled_best_so_far(),
    )


__all__ = [
    "RandomSampler",
    "RunResult",
    "evaluate_population",
    "run_generations",
    "run_from_config",
]
