"""
Population containers shared by the evaluator, the statistics and the run driver.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from moostats.foundation.candidate import Candidate


@dataclass
class Subpopulation:
    """Ordered collection of candidates sharing one set of best-so-far statistics."""

    individuals: list[Candidate] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.individuals)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.individuals)

    def unevaluated(self) -> list[Candidate]:
        return [ind for ind in self.individuals if not ind.evaluated]


@dataclass
class Population:
    """K subpopulations, indexed 0..K-1; K is fixed for a run."""

    subpops: list[Subpopulation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.subpops)

    def __iter__(self) -> Iterator[Subpopulation]:
        return iter(self.subpops)

    def candidates(self) -> Iterator[Candidate]:
        for subpop in self.subpops:
            yield from subpop.individuals


@dataclass
class RunState:
    """
    Mutable run context handed to every statistics hook.

    ``population`` is None until initialization has produced one.
    """

    generation: int = 0
    population: Population | None = None

    @property
    def n_subpops(self) -> int:
        return 0 if self.population is None else len(self.population)


__all__ = ["Subpopulation", "Population", "RunState"]
