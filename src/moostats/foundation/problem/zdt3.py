import numpy as np

from moostats.foundation.problem.base import ZDTProblem

TEN_PI = 10.0 * np.pi


class ZDT3Problem(ZDTProblem):
    """ZDT3 benchmark with a disconnected Pareto front.

    The front is formed with g(x) = 1 and consists of several noncontiguous
    convex parts; the sine term makes it discontinuous in objective space
    while the decision space stays continuous.

    Zitzler, E., Deb, K., and Thiele, L., 2000, Comparison of Multiobjective
    Evolutionary Algorithms: Empirical Results, Evolutionary Computation,
    Vol. 8, No. 2, pp. 173-195.
    """

    label = "ZDT3"

    def _front(self, f1: np.ndarray, g: np.ndarray) -> np.ndarray:
        # f1 >= 0 and g >= 1 on the domain, so the ratio is never negative.
        ratio = f1 / g
        return 1.0 - np.sqrt(ratio) - ratio * np.sin(TEN_PI * f1)
