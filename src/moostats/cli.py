from __future__ import annotations

import argparse
import logging
from typing import Any, Sequence

from moostats.experiment.driver import run_from_config
from moostats.foundation.config import DEFAULT_MODULUS, DEFAULT_N_VAR, DEFAULT_PROBLEM, RunConfig, config_from_mapping, load_run_spec
from moostats.foundation.exceptions import MoostatsError
from moostats.foundation.logging import configure_moostats_logging
from moostats.foundation.problem.registry import SPECS, available_problem_names
from moostats.foundation.version import get_version


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _problem_help() -> str:
    choices = "; ".join(f"{spec.key} ({spec.label}): {spec.description}" for spec in SPECS.values())
    return f"Benchmark problem (default: {DEFAULT_PROBLEM}). {choices}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moostats",
        description="Evaluate a ZDT benchmark over sampled generations and log per-generation statistics.",
    )
    parser.add_argument("--config", help="YAML or JSON run specification; command-line flags override it.")
    parser.add_argument("--problem", choices=available_problem_names(), help=_problem_help())
    parser.add_argument("--n-var", type=int, help=f"Decision vector length (default: {DEFAULT_N_VAR}).")
    parser.add_argument("--generations", type=int, help="Number of generations (default: 10).")
    parser.add_argument("--subpopulations", type=int, help="Number of subpopulations (default: 1).")
    parser.add_argument("--population-size", type=int, help="Candidates per subpopulation (default: 100).")
    parser.add_argument("--seed", type=int, help="Random seed (default: 42).")
    parser.add_argument("--modulus", type=int, help=f"Emit statistics every N generations (default: {DEFAULT_MODULUS}).")
    parser.add_argument("--full", action=argparse.BooleanOptionalAction, default=None, help="Include timing, memory and size columns.")
    parser.add_argument("--subpops", action=argparse.BooleanOptionalAction, default=None, help="Include per-subpopulation columns.")
    parser.add_argument("--file", help="Statistics log path (default: stdout).")
    parser.add_argument("--gzip", action=argparse.BooleanOptionalAction, default=None, help="Compress the statistics log (.gz suffix added).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser


def _merge_overrides(spec: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    merged = {key: dict(spec.get(key) or {}) for key in ("problem", "statistics", "run")}
    overrides = {
        ("problem", "name"): args.problem,
        ("problem", "n_var"): args.n_var,
        ("run", "generations"): args.generations,
        ("run", "subpopulations"): args.subpopulations,
        ("run", "population_size"): args.population_size,
        ("run", "seed"): args.seed,
        ("statistics", "modulus"): args.modulus,
        ("statistics", "full"): args.full,
        ("statistics", "subpops"): args.subpops,
        ("statistics", "file"): args.file,
        ("statistics", "gzip"): args.gzip,
    }
    for (section, key), value in overrides.items():
        if value is not None:
            merged[section][key] = value
    return merged


def resolve_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> RunConfig:
    try:
        spec = load_run_spec(args.config) if args.config else {}
        return config_from_mapping(_merge_overrides(spec, args))
    except MoostatsError as exc:
        parser.error(exc.message)
    raise AssertionError("unreachable")  # pragma: no cover - parser.error exits


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_moostats_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    cfg = resolve_config(parser, args)

    try:
        result = run_from_config(cfg)
    except MoostatsError as exc:
        _logger().error("%s", exc)
        return 1

    for index, best in enumerate(result.best_so_far):
        if best is None:
            _logger().info("Subpopulation %d: no evaluated candidates", index)
            continue
        _logger().info("Best so far, subpopulation %d:\n%s", index, result.problem.describe(best))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
