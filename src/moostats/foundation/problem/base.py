"""
Evaluation contract and the shared ZDT benchmark base.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from moostats.foundation.candidate import Candidate
from moostats.foundation.exceptions import ProblemDimensionError


@runtime_checkable
class Evaluable(Protocol):
    """Anything that can score a candidate in place and describe it."""

    def evaluate(self, candidate: Candidate) -> None: ...

    def describe(self, candidate: Candidate) -> str: ...


class ZDTProblem:
    """Base class for the bi-objective ZDT benchmarks on [0, 1]^n_var.

    Subclasses supply only :meth:`_front`, the ``h``-dependent second
    objective ``f2 = g * h(f1, g)``; ``f1 = x[0]`` and
    ``g = 1 + 9 * sum(x[1:]) / (n_var - 1)`` are shared.

    The constructor establishes the species contract (``n_var`` genes bounded
    by ``xl``/``xu`` and ``n_obj`` objectives) before anything is evaluated;
    ``n_var < 2`` is a setup-time error.
    """

    label: str = "ZDT"
    default_n_var: int = 30

    def __init__(self, n_var: int | None = None) -> None:
        n_var = self.default_n_var if n_var is None else n_var
        try:
            valid = not isinstance(n_var, bool) and int(n_var) == n_var
        except (TypeError, ValueError):
            valid = False
        if not valid:
            raise ProblemDimensionError(f"{self.label} requires an integer number of variables; got {n_var!r}.")
        if n_var < 2:
            raise ProblemDimensionError(
                f"{self.label} requires at least two decision variables; got {n_var}.",
                n_var=int(n_var),
                n_obj=2,
            )
        self.n_var = int(n_var)
        self.n_obj = 2
        self.xl = 0.0
        self.xu = 1.0

    def _front(self, f1: np.ndarray, g: np.ndarray) -> np.ndarray:
        raise NotImplementedError(f"{type(self).__name__} must implement _front(f1, g).")

    def evaluate_matrix(self, X: np.ndarray) -> np.ndarray:
        """Objective values for a batch of decision vectors, shape (N, 2)."""
        X = np.asarray(X, dtype=float)
        if X.ndim != 2 or X.shape[1] != self.n_var:
            raise ValueError(f"Expected input shape (N, {self.n_var}), got {X.shape}.")
        f1 = X[:, 0]
        g = 1.0 + 9.0 * np.sum(X[:, 1:], axis=1) / (self.n_var - 1)
        F = np.empty((X.shape[0], 2), dtype=float)
        F[:, 0] = f1
        F[:, 1] = g * self._front(f1, g)
        return F

    def evaluate(self, candidate: Candidate) -> None:
        if candidate.evaluated:
            return
        F = self.evaluate_matrix(candidate.x.reshape(1, -1))
        candidate.objectives[:] = F[0]
        candidate.evaluated = True

    def describe(self, candidate: Candidate) -> str:
        genome = " ".join(f"{v:.6g}" for v in candidate.x)
        if candidate.evaluated:
            objectives = " ".join(repr(float(v)) for v in candidate.objectives)
        else:
            objectives = "(not evaluated)"
        return "\n".join(
            [
                f"Problem: {self.label} (n_var={self.n_var})",
                f"Evaluated: {candidate.evaluated}",
                f"Objectives: {objectives}",
                f"Decision vector: {genome}",
            ]
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_var={self.n_var})"


__all__ = ["Evaluable", "ZDTProblem"]
