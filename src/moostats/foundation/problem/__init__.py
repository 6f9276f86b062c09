from .base import Evaluable, ZDTProblem
from .registry import ProblemSpec, available_problem_names, make_problem
from .zdt1 import ZDT1Problem
from .zdt2 import ZDT2Problem
from .zdt3 import ZDT3Problem

__all__ = [
    "Evaluable",
    "ZDTProblem",
    "ZDT1Problem",
    "ZDT2Problem",
    "ZDT3Problem",
    "ProblemSpec",
    "available_problem_names",
    "make_problem",
]
