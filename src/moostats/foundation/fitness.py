"""
Fitness judgments: the dominance/fitness comparison attached to each candidate.

A fitness owns the candidate's objective vector and answers two questions:
``better_than(other)`` (strict improvement, used for best tracking) and
``value()`` (a scalar summary, used for mean/best fitness columns).
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class Fitness(Protocol):
    """Dominance-comparable fitness judgment."""

    objectives: np.ndarray

    def better_than(self, other: "Fitness") -> bool: ...

    def value(self) -> float: ...

    def copy(self) -> "Fitness": ...


class ParetoFitness:
    """
    Pareto dominance over the objective vector.

    ``a.better_than(b)`` holds when ``a`` is no worse than ``b`` in every
    objective and strictly better in at least one. Incomparable vectors are
    never better than each other, so ties and trade-offs keep the incumbent.
    """

    def __init__(self, n_obj: int, *, maximize: bool = False) -> None:
        if n_obj < 1:
            raise ValueError("n_obj must be a positive integer.")
        self.objectives = np.zeros(int(n_obj), dtype=float)
        self.maximize = bool(maximize)

    def better_than(self, other: Fitness) -> bool:
        mine = self.objectives
        theirs = np.asarray(other.objectives, dtype=float)
        if mine.shape != theirs.shape:
            raise ValueError(f"Cannot compare {mine.shape[0]} objectives with {theirs.shape[0]}.")
        if self.maximize:
            return bool(np.all(mine >= theirs) and np.any(mine > theirs))
        return bool(np.all(mine <= theirs) and np.any(mine < theirs))

    def value(self) -> float:
        # Best single objective in the optimization direction.
        if self.maximize:
            return float(np.max(self.objectives))
        return float(np.min(self.objectives))

    def copy(self) -> "ParetoFitness":
        clone = ParetoFitness(self.objectives.shape[0], maximize=self.maximize)
        clone.objectives[:] = self.objectives
        return clone

    def __repr__(self) -> str:
        return f"ParetoFitness({self.objectives.tolist()}, maximize={self.maximize})"


class WeightedSumFitness:
    """Weighted scalarization of the objective vector (minimized by default)."""

    def __init__(self, weights: Sequence[float], *, maximize: bool = False) -> None:
        w = np.asarray(weights, dtype=float)
        if w.ndim != 1 or w.size == 0:
            raise ValueError("weights must be a non-empty 1-D sequence.")
        self.weights = w
        self.objectives = np.zeros(w.size, dtype=float)
        self.maximize = bool(maximize)

    def value(self) -> float:
        return float(np.dot(self.weights, self.objectives))

    def better_than(self, other: Fitness) -> bool:
        if self.maximize:
            return self.value() > other.value()
        return self.value() < other.value()

    def copy(self) -> "WeightedSumFitness":
        clone = WeightedSumFitness(self.weights.copy(), maximize=self.maximize)
        clone.objectives[:] = self.objectives
        return clone

    def __repr__(self) -> str:
        return f"WeightedSumFitness({self.objectives.tolist()}, weights={self.weights.tolist()})"


class ObjectiveFitness:
    """Scalar comparison on a single objective."""

    def __init__(self, n_obj: int, index: int = 0, *, maximize: bool = False) -> None:
        if not 0 <= index < n_obj:
            raise ValueError(f"Objective index {index} out of range for {n_obj} objectives.")
        self.objectives = np.zeros(int(n_obj), dtype=float)
        self.index = int(index)
        self.maximize = bool(maximize)

    def value(self) -> float:
        return float(self.objectives[self.index])

    def better_than(self, other: Fitness) -> bool:
        if self.maximize:
            return self.value() > other.value()
        return self.value() < other.value()

    def copy(self) -> "ObjectiveFitness":
        clone = ObjectiveFitness(self.objectives.shape[0], self.index, maximize=self.maximize)
        clone.objectives[:] = self.objectives
        return clone

    def __repr__(self) -> str:
        return f"ObjectiveFitness({self.objectives.tolist()}, index={self.index})"


__all__ = ["Fitness", "ParetoFitness", "WeightedSumFitness", "ObjectiveFitness"]
