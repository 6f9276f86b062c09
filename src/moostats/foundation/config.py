"""
Run configuration: dataclasses, validation and YAML/JSON loading.

Everything here runs at setup time. Malformed or out-of-range values raise
:class:`ConfigurationError` subclasses so a run never starts with a bad
configuration.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from moostats.foundation.exceptions import ConfigurationError, InvalidParameterError, MissingConfigError

DEFAULT_PROBLEM = "zdt3"
DEFAULT_N_VAR = 30
DEFAULT_MODULUS = 1

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def _as_int(field_name: str, raw: Any, *, minimum: int | None = None) -> int:
    if isinstance(raw, bool):
        raise InvalidParameterError(field_name, raw, "an integer")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidParameterError(field_name, raw, "an integer")
        value = int(raw)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError as exc:
            raise InvalidParameterError(field_name, raw, "an integer") from exc
    if minimum is not None and value < minimum:
        raise InvalidParameterError(field_name, raw, f"an integer >= {minimum}")
    return value


def _as_bool(field_name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise InvalidParameterError(field_name, raw, "a boolean (true/false)")


@dataclass
class ZDTConfig:
    name: str = DEFAULT_PROBLEM
    n_var: int = DEFAULT_N_VAR

    def validate(self) -> "ZDTConfig":
        if self.name is None or not str(self.name).strip():
            raise MissingConfigError("problem.name", config_class="ZDTConfig")
        self.name = str(self.name).strip().lower()
        self.n_var = _as_int("problem.n_var", self.n_var, minimum=2)
        return self


@dataclass
class StatisticsConfig:
    """Sampling, detail and destination settings for :class:`ShortStatistics`."""

    modulus: int = DEFAULT_MODULUS
    full: bool = False
    subpops: bool = False
    file: str | None = None
    gzip: bool = False

    def validate(self) -> "StatisticsConfig":
        self.modulus = _as_int("statistics.modulus", self.modulus, minimum=1)
        self.full = _as_bool("statistics.full", self.full)
        self.subpops = _as_bool("statistics.subpops", self.subpops)
        self.gzip = _as_bool("statistics.gzip", self.gzip)
        if self.file is not None:
            self.file = str(self.file).strip() or None
        return self


@dataclass
class RunConfig:
    generations: int = 10
    subpopulations: int = 1
    population_size: int = 100
    seed: int = 42
    problem: ZDTConfig = field(default_factory=ZDTConfig)
    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)

    def validate(self) -> "RunConfig":
        self.generations = _as_int("run.generations", self.generations, minimum=1)
        self.subpopulations = _as_int("run.subpopulations", self.subpopulations, minimum=1)
        self.population_size = _as_int("run.population_size", self.population_size, minimum=1)
        self.seed = _as_int("run.seed", self.seed)
        self.problem.validate()
        self.statistics.validate()
        return self


def _section(data: Mapping[str, Any], key: str) -> dict[str, Any]:
    raw = data.get(key) or {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"Section '{key}' must be a mapping; got {type(raw).__name__}.")
    return dict(raw)


def _pick(section: dict[str, Any], name: str, allowed: set[str]) -> dict[str, Any]:
    unknown = sorted(set(section) - allowed)
    if unknown:
        raise ConfigurationError(
            f"Unknown key(s) in '{name}': {', '.join(unknown)}.",
            suggestion=f"Allowed keys: {', '.join(sorted(allowed))}",
        )
    return section


def config_from_mapping(data: Mapping[str, Any] | None) -> RunConfig:
    """
    Build and validate a :class:`RunConfig` from a nested mapping.

    Expected shape::

        problem: {name: zdt3, n_var: 30}
        statistics: {modulus: 1, full: false, subpops: false, file: null, gzip: false}
        run: {generations: 10, subpopulations: 1, population_size: 100, seed: 42}
    """
    data = dict(data or {})
    _pick(data, "<root>", {"problem", "statistics", "run"})
    problem = _pick(_section(data, "problem"), "problem", {"name", "n_var"})
    stats = _pick(_section(data, "statistics"), "statistics", {"modulus", "full", "subpops", "file", "gzip"})
    run = _pick(_section(data, "run"), "run", {"generations", "subpopulations", "population_size", "seed"})
    cfg = RunConfig(
        problem=ZDTConfig(**problem),
        statistics=StatisticsConfig(**stats),
        **run,
    )
    return cfg.validate()


def load_run_spec(path: str | Path) -> dict[str, Any]:
    """
    Load a YAML or JSON run specification.
    """
    spec_path = Path(path).expanduser().resolve()
    if not spec_path.exists():
        raise ConfigurationError(f"Config file '{spec_path}' does not exist.")
    suffix = spec_path.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            with spec_path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        else:
            with spec_path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Could not read config file '{spec_path}': {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file '{spec_path}' must contain a mapping at the top level.")
    return data


def load_run_config(path: str | Path) -> RunConfig:
    return config_from_mapping(load_run_spec(path))


__all__ = [
    "DEFAULT_PROBLEM",
    "DEFAULT_N_VAR",
    "DEFAULT_MODULUS",
    "ZDTConfig",
    "StatisticsConfig",
    "RunConfig",
    "config_from_mapping",
    "load_run_spec",
    "load_run_config",
]
