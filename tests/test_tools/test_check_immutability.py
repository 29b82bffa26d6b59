# File: tests/test_tools/test_check_immutability.py
"""Tests for the immutability audit.

Covers the textual bypass patterns, the frozen-dataclass rule and a run
against the repository itself.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from tools.check_immutability import (
    audit,
    main,
    scan_bypasses,
    scan_unfrozen_dataclasses,
)


# Assembled at runtime so this file does not trip the audit itself.
SETATTR_BYPASS = "object." + "__setattr__(state, 'counter', 1)"
DICT_BYPASS = "state." + "__dict__" + "['counter'] = 1"
VARS_BYPASS = "var" + "s(state).update(counter=1)"

REPO_ROOT = Path(__file__).resolve().parents[2]


class TestScanBypasses:
    @pytest.mark.parametrize(
        ("line", "code"),
        [
            (SETATTR_BYPASS, "object." + "__setattr__"),
            (DICT_BYPASS, "__dict__" + "["),
            (VARS_BYPASS, "var" + "s("),
        ],
    )
    def test_detects_bypass(self, line: str, code: str) -> None:
        violations = scan_bypasses(Path("x.py"), f"x = 1\n{line}\n")
        assert [(v.line, v.code) for v in violations] == [(2, code)]

    def test_read_only_vars_is_allowed(self) -> None:
        source = "fields = " + "var" + "s(state)\n"
        assert scan_bypasses(Path("x.py"), source) == []

    def test_exception_marker_suppresses(self) -> None:
        source = f"{SETATTR_BYPASS}  # immutability-exception: test fixture\n"
        assert scan_bypasses(Path("x.py"), source) == []


class TestScanUnfrozenDataclasses:
    def test_plain_dataclass_flagged(self) -> None:
        source = textwrap.dedent(
            """
            from dataclasses import dataclass

            @dataclass
            class Loose:
                value: int = 0
            """
        )
        violations = scan_unfrozen_dataclasses(Path("state.py"), source)
        assert len(violations) == 1
        assert "Loose" in violations[0].message

    def test_frozen_false_flagged(self) -> None:
        source = textwrap.dedent(
            """
            import dataclasses

            @dataclasses.dataclass(frozen=False)
            class Loose:
                value: int = 0
            """
        )
        assert len(scan_unfrozen_dataclasses(Path("state.py"), source)) == 1

    def test_frozen_dataclass_passes(self) -> None:
        source = textwrap.dedent(
            """
            from dataclasses import dataclass

            @dataclass(frozen=True)
            class Tight:
                value: int = 0

            class NotADataclass:
                value = 0
            """
        )
        assert scan_unfrozen_dataclasses(Path("state.py"), source) == []


class TestAudit:
    def test_unfrozen_dataclass_only_checked_in_value_modules(self, tmp_path: Path) -> None:
        loose = "from dataclasses import dataclass\n\n@dataclass\nclass Loose:\n    x: int = 0\n"
        state_module = tmp_path / "src" / "flowredux" / "state.py"
        other_module = tmp_path / "src" / "flowredux" / "bootstrap.py"
        state_module.parent.mkdir(parents=True)
        state_module.write_text(loose)
        other_module.write_text(loose)

        violations = audit(tmp_path)

        assert [v.path for v in violations] == [state_module]

    def test_bypass_in_tests_detected(self, tmp_path: Path) -> None:
        test_file = tmp_path / "tests" / "test_bad.py"
        test_file.parent.mkdir()
        test_file.write_text(f"{DICT_BYPASS}\n")

        assert [v.code for v in audit(tmp_path)] == ["__dict__" + "["]

    def test_repository_is_clean(self) -> None:
        assert audit(REPO_ROOT) == []

    def test_main_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main() == 0
        assert "passed" in capsys.readouterr().out
