from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from moostats.foundation.fitness import Fitness, ParetoFitness

FitnessFactory = Callable[[int], Fitness]


@dataclass
class Candidate:
    """
    One point in the search space.

    ``objectives`` is the fitness's own objective array; evaluators overwrite it
    in place. Its values are only meaningful once ``evaluated`` is True.
    """

    x: np.ndarray
    fitness: Fitness
    evaluated: bool = False

    @classmethod
    def from_vector(
        cls,
        x: np.ndarray,
        n_obj: int = 2,
        fitness_factory: FitnessFactory | None = None,
    ) -> "Candidate":
        factory = fitness_factory or ParetoFitness
        return cls(x=np.array(x, dtype=float), fitness=factory(n_obj))

    @property
    def objectives(self) -> np.ndarray:
        return self.fitness.objectives

    def size(self) -> int:
        """Size used by size statistics: the decision vector length."""
        return int(self.x.shape[0])

    def clone(self) -> "Candidate":
        """Independent deep copy; later changes to either side are not shared."""
        return Candidate(
            x=self.x.copy(),
            fitness=self.fitness.copy(),
            evaluated=self.evaluated,
        )


__all__ = ["Candidate", "FitnessFactory"]
