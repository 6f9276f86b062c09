import numpy as np

from moostats.foundation.problem.base import ZDTProblem


class ZDT1Problem(ZDTProblem):
    """Classic bi-objective benchmark with a convex Pareto front."""

    label = "ZDT1"

    def _front(self, f1: np.ndarray, g: np.ndarray) -> np.ndarray:
        return 1.0 - np.sqrt(f1 / g)
