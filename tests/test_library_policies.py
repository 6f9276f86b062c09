"""Source-level gates for the ``moostats`` package.

Library modules must not print, must not configure the root logger and must
not use bare ``except:`` handlers. Statistics lines go through
:class:`moostats.monitoring.sink.StatisticsSink`; diagnostics go through
``logging``.
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _library_modules() -> list[Path]:
    return sorted((_repo_root() / "src" / "moostats").rglob("*.py"))


def _parse(path: Path) -> ast.AST:
    rel_path = path.relative_to(_repo_root()).as_posix()
    try:
        return ast.parse(path.read_text(encoding="utf-8-sig"))
    except SyntaxError as exc:  # pragma: no cover - should not happen
        raise AssertionError(f"Failed to parse {rel_path}: {exc}") from exc


def _call_name(node: ast.Call) -> str | None:
    func = node.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        if isinstance(func.value, ast.Name):
            return f"{func.value.id}.{func.attr}"
        return func.attr
    return None


def _violations(predicate) -> list[str]:
    found: list[str] = []
    for path in _library_modules():
        rel_path = path.relative_to(_repo_root()).as_posix()
        for node in ast.walk(_parse(path)):
            label = predicate(node)
            if label:
                found.append(f"{rel_path}:{getattr(node, 'lineno', '?')}: {label}")
    return sorted(found)


def _report(title: str, violations: list[str]) -> None:
    if violations:
        msg = [title]
        msg.extend(f"- {item}" for item in violations)
        raise AssertionError("\n".join(msg))


def test_library_modules_exist() -> None:
    assert _library_modules(), "src/moostats not found"


def test_no_prints_in_library() -> None:
    def is_print(node: ast.AST) -> str | None:
        if isinstance(node, ast.Call):
            name = _call_name(node)
            if name in {"print", "pprint", "pprint.pprint"}:
                return f"{name}()"
        return None

    _report("print() is forbidden in library modules:", _violations(is_print))


def test_no_basic_config() -> None:
    def is_basic_config(node: ast.AST) -> str | None:
        if isinstance(node, ast.Call):
            name = _call_name(node)
            if name is not None and name.split(".")[-1] == "basicConfig":
                return "logging.basicConfig"
        return None

    _report("logging.basicConfig is forbidden in library modules:", _violations(is_basic_config))


@pytest.mark.parametrize("kind", ["bare", "swallow"])
def test_no_bare_or_silent_except(kind: str) -> None:
    def is_bad_handler(node: ast.AST) -> str | None:
        if not isinstance(node, ast.ExceptHandler):
            return None
        if kind == "bare" and node.type is None:
            return "bare except:"
        if kind == "swallow" and len(node.body) == 1 and isinstance(node.body[0], ast.Pass):
            return "except ...: pass"
        return None

    _report("Exception handlers must name a type and do something:", _violations(is_bad_handler))
