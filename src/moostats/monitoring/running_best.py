from __future__ import annotations

from moostats.foundation.candidate import Candidate


class RunningBest:
    """
    Best candidate seen so far plus cumulative counters for running averages.

    The stored candidate is an owned deep copy and is only ever replaced
    wholesale, when an offered candidate is strictly better. Ties keep the
    incumbent, so the stored best never regresses.
    """

    def __init__(self) -> None:
        self.best: Candidate | None = None
        self.total_count = 0
        self.total_size = 0

    def offer(self, candidate: Candidate | None) -> bool:
        """Replace the stored best with a copy of ``candidate`` if it is strictly better."""
        if candidate is None:
            return False
        if self.best is not None and not candidate.fitness.better_than(self.best.fitness):
            return False
        self.best = candidate.clone()
        return True

    def record(self, size_sum: int, count: int) -> None:
        self.total_size += int(size_sum)
        self.total_count += int(count)

    def mean_size(self) -> float:
        return self.total_size / self.total_count if self.total_count > 0 else 0.0

    def __repr__(self) -> str:
        best = None if self.best is None else self.best.fitness
        return f"RunningBest(best={best!r}, total_count={self.total_count}, total_size={self.total_size})"


__all__ = ["RunningBest"]
