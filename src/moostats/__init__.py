from .foundation.candidate import Candidate
from .foundation.config import RunConfig, StatisticsConfig, ZDTConfig, config_from_mapping, load_run_config
from .foundation.exceptions import ConfigurationError, MoostatsError
from .foundation.fitness import Fitness, ObjectiveFitness, ParetoFitness, WeightedSumFitness
from .foundation.population import Population, RunState, Subpopulation
from .foundation.problem import Evaluable, ZDT1Problem, ZDT2Problem, ZDT3Problem, available_problem_names, make_problem
from .monitoring import RunningBest, ShortStatistics, Statistics, StatisticsSink
from .experiment import run_from_config, run_generations
from .foundation.version import get_version

__version__ = get_version()

__all__ = [
    "Candidate",
    "Fitness",
    "ParetoFitness",
    "WeightedSumFitness",
    "ObjectiveFitness",
    "Population",
    "Subpopulation",
    "RunState",
    "Evaluable",
    "ZDT1Problem",
    "ZDT2Problem",
    "ZDT3Problem",
    "available_problem_names",
    "make_problem",
    "RunConfig",
    "StatisticsConfig",
    "ZDTConfig",
    "config_from_mapping",
    "load_run_config",
    "MoostatsError",
    "ConfigurationError",
    "Statistics",
    "ShortStatistics",
    "RunningBest",
    "StatisticsSink",
    "run_generations",
    "run_from_config",
    "get_version",
    "__version__",
]
