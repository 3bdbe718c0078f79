# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the subprocess shell runner."""

from __future__ import annotations

from pathlib import Path

import pytest

from quality_gate.execution import SubprocessShellRunner, preferred_shell

SH = "/bin/sh"


def test_combines_stdout_and_stderr(tmp_path: Path) -> None:
    runner = SubprocessShellRunner(cwd=tmp_path, shell=SH)

    result = runner.run("echo out; echo err 1>&2; exit 3")

    assert result.exit_status == 3
    assert "out" in result.output
    assert "err" in result.output
    assert not result.succeeded


def test_runs_in_working_directory(tmp_path: Path) -> None:
    (tmp_path / "marker.txt").write_text("x", encoding="utf-8")

    result = SubprocessShellRunner(cwd=tmp_path, shell=SH).run("ls")

    assert result.succeeded
    assert "marker.txt" in result.output


def test_timeout_reports_status_124() -> None:
    result = SubprocessShellRunner(timeout=0.2, shell=SH).run("sleep 5")

    assert result.exit_status == 124
    assert "timed out" in result.output


def test_unstartable_shell_reports_failure(tmp_path: Path) -> None:
    result = SubprocessShellRunner(shell=str(tmp_path / "no-such-shell")).run("true")

    assert result.exit_status == 127
    assert "failed to start" in result.output


def test_preferred_shell_uses_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHELL", "/opt/custom/sh")

    assert preferred_shell() == "/opt/custom/sh"


def test_preferred_shell_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SHELL", raising=False)

    assert preferred_shell() in ("/bin/zsh", "/bin/bash", "/bin/sh")


def test_command_with_nul_byte_reports_failure() -> None:
    result = SubprocessShellRunner(shell=SH).run("echo a\0b")

    assert result.exit_status == 127
    assert "null byte" in result.output
