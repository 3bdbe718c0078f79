# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for hook execution and output display rules."""

from __future__ import annotations

import pytest

from quality_gate.config.models import Hook, OutputRules
from quality_gate.errors import HookFixError, MissingFixCommandError
from quality_gate.execution import HookRunner


def _hook(name: str, *, show_on: str = "", message: str = "", fix: str = "") -> Hook:
    return Hook(
        name=name,
        command=f"run {name}",
        fix_command=fix,
        output_rules=OutputRules(show_on=show_on, on_failure_message=message),
    )


def test_run_all_returns_one_result_per_hook_in_order(make_shell, reporter) -> None:
    shell = make_shell({"run b": ("boom", 1)})
    hooks = [_hook("a"), _hook("b"), _hook("c")]

    results = HookRunner(shell, reporter).run_all(hooks)

    assert [result.hook.name for result in results] == ["a", "b", "c"]
    assert [result.success for result in results] == [True, False, True]
    assert shell.commands == ["run a", "run b", "run c"]
    assert all(result.duration >= 0 for result in results)


def test_failure_with_show_on_failure_surfaces_output(make_shell, reporter) -> None:
    shell = make_shell({"run lint": ("E501 line too long", 1)})
    hook = _hook("lint", show_on="failure", message="Lint failed, run the fixer")

    (result,) = HookRunner(shell, reporter).run_all([hook])

    assert not result.success
    assert result.output == "E501 line too long"
    assert result.exit_status == 1
    assert reporter.messages("fail")[0].startswith("lint failed (")
    assert reporter.messages("info") == ["Lint failed, run the fixer"]
    assert reporter.messages("output") == ["E501 line too long"]


@pytest.mark.parametrize(
    ("show_on", "success", "shown"),
    [
        ("always", True, True),
        ("always", False, True),
        ("failure", True, False),
        ("failure", False, True),
        ("success", True, False),
        ("", False, False),
    ],
)
def test_output_display_policy(make_shell, reporter, show_on: str, success: bool, shown: bool) -> None:
    shell = make_shell({"run x": ("captured", 0 if success else 1)})

    HookRunner(shell, reporter).run_all([_hook("x", show_on=show_on)])

    assert (reporter.messages("output") == ["captured"]) is shown


def test_success_marker(make_shell, reporter) -> None:
    HookRunner(make_shell(), reporter).run_all([_hook("fmt")])

    assert reporter.messages("ok")[0].startswith("fmt passed (")
    assert reporter.messages("start") == ["Running fmt..."]


def test_run_fix_without_fix_command_raises(make_shell, reporter) -> None:
    shell = make_shell()

    with pytest.raises(MissingFixCommandError, match="no fix command defined for hook: lint"):
        HookRunner(shell, reporter).run_fix(_hook("lint"))

    assert shell.commands == []


def test_run_fix_failure_raises_with_output(make_shell, reporter) -> None:
    shell = make_shell({"fix it": ("cannot fix", 3)})

    with pytest.raises(HookFixError) as excinfo:
        HookRunner(shell, reporter).run_fix(_hook("fmt", fix="fix it"))

    assert excinfo.value.hook_name == "fmt"
    assert excinfo.value.output == "cannot fix"


def test_run_fix_success_returns_output(make_shell, reporter) -> None:
    shell = make_shell({"fix it": ("2 files reformatted", 0)})

    output = HookRunner(shell, reporter).run_fix(_hook("fmt", fix="fix it"))

    assert output == "2 files reformatted"
    assert reporter.messages("ok") == ["Fix command for fmt completed."]
