from __future__ import annotations

import io

import numpy as np
import pytest

from moostats.experiment.driver import RandomSampler, evaluate_population, run_from_config, run_generations
from moostats.foundation.config import RunConfig, StatisticsConfig, ZDTConfig
from moostats.foundation.exceptions import SinkOpenError
from moostats.foundation.problem import ZDT3Problem
from moostats.monitoring.sink import StatisticsSink
from moostats.monitoring.statistics import Statistics


class _HookLog(Statistics):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, int, bool]] = []

    def _record(self, name, state):
        evaluated = state.population is not None and all(c.evaluated for c in state.population.candidates())
        self.calls.append((name, state.generation, evaluated))

    def pre_initialization(self, state):
        self.calls.append(("pre_init", state.generation, state.population is not None))

    def post_initialization(self, state):
        self._record("post_init", state)

    def pre_evaluation(self, state):
        self._record("pre_eval", state)

    def post_evaluation(self, state):
        self._record("post_eval", state)

    def pre_breeding(self, state):
        self._record("pre_breed", state)

    def post_breeding(self, state):
        self._record("post_breed", state)


def test_sampler_respects_bounds_and_shape():
    problem = ZDT3Problem(6)
    sampler = RandomSampler(problem, n_subpops=2, pop_size=4, seed=1)
    population = sampler.initialize()
    assert len(population) == 2
    assert all(len(subpop) == 4 for subpop in population)
    for cand in population.candidates():
        assert cand.x.shape == (6,)
        assert np.all((cand.x >= 0.0) & (cand.x <= 1.0))
        assert not cand.evaluated
        assert cand.objectives.shape == (2,)


def test_evaluate_population_skips_evaluated():
    problem = ZDT3Problem(3)
    population = RandomSampler(problem, pop_size=5, seed=2).initialize()
    assert evaluate_population(problem, population) == 5
    assert evaluate_population(problem, population) == 0


def test_hook_order_and_evaluation_barrier():
    problem = ZDT3Problem(3)
    sampler = RandomSampler(problem, pop_size=3, seed=0)
    log = _HookLog()
    state = run_generations(problem, log, initializer=sampler.initialize, breeder=sampler.breed, generations=3)
    assert state.generation == 2
    assert log.calls == [
        ("pre_init", 0, False),
        ("post_init", 0, False),
        ("pre_eval", 0, False),
        ("post_eval", 0, True),
        ("pre_breed", 0, True),
        ("post_breed", 0, False),
        ("pre_eval", 1, False),
        ("post_eval", 1, True),
        ("pre_breed", 1, True),
        ("post_breed", 1, False),
        ("pre_eval", 2, False),
        ("post_eval", 2, True),
    ]


def test_generations_must_be_positive():
    problem = ZDT3Problem(3)
    sampler = RandomSampler(problem, pop_size=1)
    with pytest.raises(ValueError):
        run_generations(problem, Statistics(), initializer=sampler.initialize, breeder=sampler.breed, generations=0)


def test_run_from_config_writes_one_line_per_sampled_generation():
    buffer = io.StringIO()
    cfg = RunConfig(
        generations=5,
        subpopulations=2,
        population_size=8,
        problem=ZDTConfig(n_var=4),
        statistics=StatisticsConfig(modulus=2, subpops=True),
    )
    result = run_from_config(cfg, sink=StatisticsSink(stream=buffer))
    lines = buffer.getvalue().splitlines()
    assert [line.split()[0] for line in lines] == ["0", "2", "4"]
    # gen + 2 subpopulation blocks of 3 + pooled 3
    assert all(len(line.split()) == 10 for line in lines)
    assert len(result.best_so_far) == 2
    assert all(best is not None and best.evaluated for best in result.best_so_far)
    assert result.pooled_best is not None


def test_run_from_config_is_deterministic_for_a_seed():
    outputs = []
    for _ in range(2):
        buffer = io.StringIO()
        cfg = RunConfig(generations=3, population_size=10, seed=123, problem=ZDTConfig(n_var=5))
        run_from_config(cfg, sink=StatisticsSink(stream=buffer))
        outputs.append(buffer.getvalue())
    assert outputs[0] == outputs[1]


def test_run_from_config_to_gzip_file(tmp_path):
    cfg = RunConfig(
        generations=2,
        population_size=4,
        problem=ZDTConfig(n_var=3),
        statistics=StatisticsConfig(file=str(tmp_path / "stats.log"), gzip=True, full=True),
    )
    run_from_config(cfg)
    assert (tmp_path / "stats.log.gz").exists()


def test_bad_output_path_fails_before_any_generation(tmp_path):
    cfg = RunConfig(statistics=StatisticsConfig(file=str(tmp_path / "no" / "such" / "dir.log")))
    with pytest.raises(SinkOpenError):
        run_from_config(cfg)
