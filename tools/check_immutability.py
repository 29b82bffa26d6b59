#!/usr/bin/env python3
"""
Immutability audit for the state tree and action set.

Fails if any immutability bypass pattern is present in code paths, or if a
dataclass in a module that defines actions, state or error values is not
declared ``frozen=True``.

Usage:
    python -m tools.check_immutability
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

FORBIDDEN_SUBSTRINGS: dict[str, str] = {
    "object.__setattr__": "Immutability bypass using object.__setattr__",
    "__dict__[": "Immutability bypass via __dict__ mutation",
}

VARS_MUTATION_MARKERS: tuple[str, ...] = ("[", ".update", ".pop", ".setdefault")

CODE_ROOTS: tuple[Path, ...] = (
    Path("src"),
    Path("tests"),
)

# Modules whose dataclasses are values flowing through dispatch.
FROZEN_MODULES: tuple[str, ...] = (
    "src/flowredux/state.py",
    "src/flowredux/actions/*.py",
    "src/flowredux/effects/errors.py",
    "src/flowredux/effects/registry.py",
)


@dataclass(frozen=True)
class Violation:
    """Immutability violation instance."""

    path: Path
    line: int
    code: str
    message: str


def _iter_python_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Yield Python source files under provided roots."""
    for base in paths:
        yield from base.rglob("*.py")


def scan_bypasses(path: Path, source: str) -> list[Violation]:
    """Find textual immutability bypass patterns."""
    violations: list[Violation] = []
    for idx, line in enumerate(source.splitlines(), start=1):
        if "# immutability-exception:" in line:
            continue

        for pattern, message in FORBIDDEN_SUBSTRINGS.items():
            if pattern in line:
                violations.append(Violation(path=path, line=idx, code=pattern, message=message))
        if "vars(" in line and any(marker in line for marker in VARS_MUTATION_MARKERS):
            violations.append(
                Violation(
                    path=path,
                    line=idx,
                    code="vars(",
                    message="Immutability bypass via vars() mutation",
                )
            )
    return violations


def _is_dataclass_decorator(node: ast.expr) -> bool:
    target = node.func if isinstance(node, ast.Call) else node
    return (isinstance(target, ast.Name) and target.id == "dataclass") or (
        isinstance(target, ast.Attribute) and target.attr == "dataclass"
    )


def _declares_frozen(node: ast.expr) -> bool:
    if not isinstance(node, ast.Call):
        return False
    return any(
        keyword.arg == "frozen"
        and isinstance(keyword.value, ast.Constant)
        and keyword.value.value is True
        for keyword in node.keywords
    )


def scan_unfrozen_dataclasses(path: Path, source: str) -> list[Violation]:
    """Find ``@dataclass`` classes not declared ``frozen=True``."""
    violations: list[Violation] = []
    for node in ast.walk(ast.parse(source, filename=str(path))):
        if not isinstance(node, ast.ClassDef):
            continue
        for decorator in node.decorator_list:
            if _is_dataclass_decorator(decorator) and not _declares_frozen(decorator):
                violations.append(
                    Violation(
                        path=path,
                        line=node.lineno,
                        code="dataclass",
                        message=f"Dataclass {node.name} must be declared frozen=True",
                    )
                )
    return violations


def _frozen_module_paths(repo_root: Path) -> set[Path]:
    return {path for pattern in FROZEN_MODULES for path in repo_root.glob(pattern)}


def audit(repo_root: Path) -> list[Violation]:
    """Run every check below ``repo_root``."""
    roots = [repo_root / root for root in CODE_ROOTS if (repo_root / root).exists()]
    frozen_modules = _frozen_module_paths(repo_root)

    violations: list[Violation] = []
    for file_path in _iter_python_files(roots):
        source = file_path.read_text()
        violations.extend(scan_bypasses(file_path, source))
        if file_path in frozen_modules:
            violations.extend(scan_unfrozen_dataclasses(file_path, source))
    return violations


def main() -> int:
    """Run immutability audit; return non-zero if violations detected."""
    repo_root = Path(__file__).parent.parent
    violations = audit(repo_root)

    if violations:
        print("❌ Immutability violations detected:")
        for violation in violations:
            rel_path = violation.path.relative_to(repo_root)
            print(f"   {rel_path}:{violation.line}: {violation.message} [{violation.code}]")
        return 1

    print("✅ Immutability audit passed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
