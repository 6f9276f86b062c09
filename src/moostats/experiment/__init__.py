from .driver import RandomSampler, RunResult, evaluate_population, run_from_config, run_generations

__all__ = [
    "RandomSampler",
    "RunResult",
    "evaluate_population",
    "run_generations",
    "run_from_config",
]
