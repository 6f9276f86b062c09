import numpy as np

from moostats.foundation.problem.base import ZDTProblem


class ZDT2Problem(ZDTProblem):
    """
    Classic bi-objective benchmark with a concave Pareto front.
    Shares structure with ZDT1 but uses a quadratic term in the second objective.
    """

    label = "ZDT2"

    def _front(self, f1: np.ndarray, g: np.ndarray) -> np.ndarray:
        return 1.0 - (f1 / g) ** 2
