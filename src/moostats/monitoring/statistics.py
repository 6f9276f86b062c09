"""
Statistics hooks called by the run driver at generation-cycle boundaries.

The driver calls, per run::

    pre_initialization -> post_initialization
    then per generation:
        pre_evaluation -> post_evaluation
        [pre_breeding -> post_breeding]   (when another generation follows)

Statistics may have children; every hook forwards to the children before the
statistics object does its own work.
"""

from __future__ import annotations

from typing import Iterable

from moostats.foundation.population import RunState


class Statistics:
    """No-op statistics with child forwarding. Subclass and extend hooks."""

    def __init__(self, children: Iterable["Statistics"] | None = None) -> None:
        self.children: list[Statistics] = [c for c in (children or []) if c is not None]

    def pre_initialization(self, state: RunState) -> None:
        for child in self.children:
            child.pre_initialization(state)

    def post_initialization(self, state: RunState) -> None:
        for child in self.children:
            child.post_initialization(state)

    def pre_breeding(self, state: RunState) -> None:
        for child in self.children:
            child.pre_breeding(state)

    def post_breeding(self, state: RunState) -> None:
        for child in self.children:
            child.post_breeding(state)

    def pre_evaluation(self, state: RunState) -> None:
        for child in self.children:
            child.pre_evaluation(state)

    def post_evaluation(self, state: RunState) -> None:
        for child in self.children:
            child.post_evaluation(state)

    def close(self) -> None:
        for child in self.children:
            child.close()


__all__ = ["Statistics"]
