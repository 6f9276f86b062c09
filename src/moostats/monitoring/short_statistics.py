"""
One-line-per-generation statistics, easy to parse with awk or numpy.

Each sampled generation produces one line of space-separated numbers::

    gen [initMs initBytes]? [evalMs evalBytes]?
        {per subpopulation, if subpops:
            [meanSizeGen meanSizeSoFar]? meanFit bestFitGen bestFitSoFar [bestSizeGen bestSizeSoFar]?}*
        [meanSizeGen meanSizeSoFar]? meanFit bestFitGen bestFitSoFar [bestSizeGen bestSizeSoFar]?

Bracketed groups appear only when ``full`` is set. ``initMs initBytes`` is the
cost of initialization on generation 0 and the cost of the breeding that
produced the generation afterwards. Memory deltas are approximate and may be
negative.

Init and evaluation output happen on generations where
``generation % modulus == 0``; breeding output happens when
``generation % modulus == modulus - 1`` because it is attributed to the
generation it produces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from moostats.foundation.candidate import Candidate
from moostats.foundation.config import StatisticsConfig
from moostats.foundation.population import RunState
from moostats.monitoring.probes import Clock, ProcessUsageProbe, SystemClock, UsageProbe
from moostats.monitoring.running_best import RunningBest
from moostats.monitoring.sink import StatisticsSink
from moostats.monitoring.statistics import Statistics


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass
class GroupStats:
    """Aggregates over the evaluated candidates of one group (a subpopulation or the whole population)."""

    count: int = 0
    size_sum: int = 0
    fitness_sum: float = 0.0
    best: Candidate | None = None

    @property
    def mean_fitness(self) -> float:
        return self.fitness_sum / self.count if self.count > 0 else 0.0

    @property
    def mean_size(self) -> float:
        return self.size_sum / self.count if self.count > 0 else 0.0


@dataclass
class GenerationStats:
    """Per-generation aggregates; recomputed from scratch each generation."""

    generation: int
    subpops: list[GroupStats] = field(default_factory=list)
    pooled: GroupStats = field(default_factory=GroupStats)


def _better(candidate: Candidate | None, incumbent: Candidate | None) -> bool:
    if candidate is None:
        return False
    return incumbent is None or candidate.fitness.better_than(incumbent.fitness)


def _fitness_of(candidate: Candidate | None) -> float | None:
    return None if candidate is None else candidate.fitness.value()


def _size_of(candidate: Candidate | None) -> float | None:
    return None if candidate is None else float(candidate.size())


class ShortStatistics(Statistics):
    def __init__(
        self,
        config: StatisticsConfig | None = None,
        *,
        sink: StatisticsSink | None = None,
        clock: Clock | None = None,
        usage: UsageProbe | None = None,
        children: list[Statistics] | None = None,
    ) -> None:
        super().__init__(children)
        cfg = (config or StatisticsConfig()).validate()
        self.modulus = cfg.modulus
        self.full = cfg.full
        self.subpops = cfg.subpops
        self.sink = sink if sink is not None else StatisticsSink(cfg.file, compress=cfg.gzip)
        self.clock = clock or SystemClock()
        self.usage = usage or ProcessUsageProbe()

        self.last_generation_stats: GenerationStats | None = None
        self._best: list[RunningBest] | None = None
        self._pooled = RunningBest()
        self._last_time = 0
        self._last_usage = 0

    # ------------------------------------------------------------------
    # Sampling and instrumentation
    # ------------------------------------------------------------------

    def _samples(self, generation: int) -> bool:
        return generation % self.modulus == 0

    def _samples_breeding(self, generation: int) -> bool:
        return generation % self.modulus == self.modulus - 1

    def _mark(self) -> None:
        self._last_time = self.clock.now_ms()
        self._last_usage = self.usage.used_bytes()

    def _write_elapsed(self) -> None:
        self.sink.write_field(self.clock.now_ms() - self._last_time)
        self.sink.write_field(self.usage.used_bytes() - self._last_usage)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def pre_initialization(self, state: RunState) -> None:
        super().pre_initialization(state)
        if self._samples(state.generation) and self.full:
            self._mark()

    def post_initialization(self, state: RunState) -> None:
        super().post_initialization(state)
        output = self._samples(state.generation)

        # The number of subpopulations is only known once the population exists.
        self._best = [RunningBest() for _ in range(state.n_subpops)]
        self._pooled = RunningBest()
        _logger().debug("Allocated best-so-far slots for %d subpopulation(s)", len(self._best))

        if output:
            self.sink.write_field(state.generation)
        if output and self.full:
            self._write_elapsed()

    def pre_breeding(self, state: RunState) -> None:
        super().pre_breeding(state)
        if self._samples_breeding(state.generation) and self.full:
            self._mark()

    def post_breeding(self, state: RunState) -> None:
        super().post_breeding(state)
        output = self._samples_breeding(state.generation)
        if output:
            # Breeding output belongs to the generation it produces.
            self.sink.write_field(state.generation + 1)
        if output and self.full:
            self._write_elapsed()

    def pre_evaluation(self, state: RunState) -> None:
        super().pre_evaluation(state)
        if self._samples(state.generation) and self.full:
            self._mark()

    def post_evaluation(self, state: RunState) -> None:
        super().post_evaluation(state)
        output = self._samples(state.generation)
        if output and self.full:
            self._write_elapsed()

        stats = self._aggregate(state)
        self.last_generation_stats = stats

        if output:
            self._write_columns(stats)
            self.sink.end_line()

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    def _aggregate(self, state: RunState) -> GenerationStats:
        if self._best is None:
            raise RuntimeError("post_initialization must run before post_evaluation.")
        if state.population is None or len(state.population) != len(self._best):
            raise ValueError(
                f"Expected {len(self._best)} subpopulation(s); got {state.n_subpops}. "
                "The number of subpopulations is fixed for a run."
            )

        stats = GenerationStats(generation=state.generation)
        for index, subpop in enumerate(state.population):
            group = GroupStats()
            for ind in subpop:
                if not ind.evaluated:
                    continue
                group.size_sum += ind.size()
                group.count += 1
                if _better(ind, group.best):
                    group.best = ind
                group.fitness_sum += ind.fitness.value()

            running = self._best[index]
            running.record(group.size_sum, group.count)
            if running.offer(group.best):
                _logger().debug(
                    "Generation %d: new best so far in subpopulation %d (fitness %r)",
                    state.generation,
                    index,
                    running.best.fitness.value(),
                )
            stats.subpops.append(group)

        # Pooled figures come from the per-subpopulation results, not a rescan.
        pooled = stats.pooled
        for group, running in zip(stats.subpops, self._best):
            pooled.count += group.count
            pooled.size_sum += group.size_sum
            pooled.fitness_sum += group.fitness_sum
            if _better(group.best, pooled.best):
                pooled.best = group.best
            # Every subpopulation best is offered: under a partial order the
            # pooled incumbent may be incomparable with one and dominated by another.
            self._pooled.offer(running.best)
        self._pooled.record(pooled.size_sum, pooled.count)
        return stats

    def _write_group(self, group: GroupStats, running: RunningBest) -> None:
        if self.full:
            self.sink.write_fields(group.mean_size, running.mean_size())
        self.sink.write_fields(
            group.mean_fitness,
            _fitness_of(group.best),
            _fitness_of(running.best),
        )
        if self.full:
            self.sink.write_fields(_size_of(group.best), _size_of(running.best))

    def _write_columns(self, stats: GenerationStats) -> None:
        if self.subpops:
            for group, running in zip(stats.subpops, self._best or []):
                self._write_group(group, running)
        self._write_group(stats.pooled, self._pooled)

    # ------------------------------------------------------------------
    # Results for collaborators
    # ------------------------------------------------------------------

    def best_so_far(self) -> list[Candidate | None]:
        """Best candidate so far per subpopulation (None where nothing was evaluated yet)."""
        if self._best is None:
            return []
        return [running.best for running in self._best]

    def pooled_best_so_far(self) -> Candidate | None:
        return self._pooled.best

    def close(self) -> None:
        super().close()
        if self.sink.line_started:
            # A run stopped between the generation number and its fitness columns.
            _logger().warning("Statistics line left incomplete; the run ended before evaluation finished.")
        self.sink.close()


__all__ = ["ShortStatistics", "GenerationStats", "GroupStats"]
