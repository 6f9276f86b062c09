"""
Problem registry: specs and factories for the bundled benchmarks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from moostats.foundation.exceptions import InvalidProblemError
from moostats.foundation.problem.base import ZDTProblem
from moostats.foundation.problem.zdt1 import ZDT1Problem
from moostats.foundation.problem.zdt2 import ZDT2Problem
from moostats.foundation.problem.zdt3 import ZDT3Problem

ProblemFactory = Callable[[int], ZDTProblem]


@dataclass(frozen=True)
class ProblemSpec:
    """Metadata and factory for a benchmark problem."""

    key: str
    label: str
    default_n_var: int
    factory: ProblemFactory
    description: str = ""


SPECS: dict[str, ProblemSpec] = {
    "zdt1": ProblemSpec(
        key="zdt1",
        label="ZDT1",
        default_n_var=30,
        description="Classic bi-objective benchmark with a convex Pareto front.",
        factory=ZDT1Problem,
    ),
    "zdt2": ProblemSpec(
        key="zdt2",
        label="ZDT2",
        default_n_var=30,
        description="ZDT variant with a concave Pareto front.",
        factory=ZDT2Problem,
    ),
    "zdt3": ProblemSpec(
        key="zdt3",
        label="ZDT3",
        default_n_var=30,
        description="ZDT benchmark with a disconnected Pareto front.",
        factory=ZDT3Problem,
    ),
}


def available_problem_names() -> list[str]:
    return sorted(SPECS)


def make_problem(name: str, n_var: int | None = None) -> ZDTProblem:
    """
    Build a registered problem by (case-insensitive) name.

    Raises:
        InvalidProblemError: unknown name.
        ProblemDimensionError: invalid ``n_var``.
    """
    key = str(name).strip().lower()
    spec = SPECS.get(key)
    if spec is None:
        raise InvalidProblemError(name, available_problem_names())
    return spec.factory(spec.default_n_var if n_var is None else n_var)


__all__ = ["ProblemSpec", "SPECS", "available_problem_names", "make_problem"]
