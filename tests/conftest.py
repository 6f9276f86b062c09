from __future__ import annotations

import io
from typing import Sequence

import numpy as np
import pytest

from moostats.foundation.candidate import Candidate
from moostats.foundation.fitness import ObjectiveFitness
from moostats.foundation.population import Population, Subpopulation
from moostats.monitoring.sink import StatisticsSink


class FakeClock:
    """Clock that advances by a fixed step on every reading."""

    def __init__(self, start: int = 0, step: int = 5) -> None:
        self.value = start
        self.step = step

    def now_ms(self) -> int:
        current = self.value
        self.value += self.step
        return current


class FakeUsage:
    """Usage probe returning a scripted series of readings (the last one repeats)."""

    def __init__(self, readings: Sequence[int] = (1000,)) -> None:
        self.readings = list(readings)

    def used_bytes(self) -> int:
        if len(self.readings) > 1:
            return self.readings.pop(0)
        return self.readings[0]


def scalar_candidate(value: float, *, evaluated: bool = True, n_var: int = 3) -> Candidate:
    """Candidate whose fitness is the first objective, minimized."""
    cand = Candidate(x=np.zeros(n_var), fitness=ObjectiveFitness(2, 0))
    cand.objectives[:] = [value, 0.0]
    cand.evaluated = evaluated
    return cand


def scalar_population(*groups: Sequence[float | None], n_var: int = 3) -> Population:
    """Population from lists of fitness values; None marks an unevaluated candidate."""
    subpops = []
    for group in groups:
        members = [
            scalar_candidate(0.0 if v is None else v, evaluated=v is not None, n_var=n_var) for v in group
        ]
        subpops.append(Subpopulation(members))
    return Population(subpops)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_usage() -> FakeUsage:
    return FakeUsage()


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def sink(buffer: io.StringIO) -> StatisticsSink:
    return StatisticsSink(stream=buffer)


@pytest.fixture
def make_population():
    return scalar_population


@pytest.fixture
def make_candidate():
    return scalar_candidate
