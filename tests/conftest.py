# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from quality_gate.console import get_console_manager
from quality_gate.execution.shell import CommandResult


@dataclass
class FakeShellRunner:
    """Shell runner returning scripted results and recording each command."""

    responses: Mapping[str, CommandResult] = field(default_factory=dict)
    default: CommandResult = CommandResult(output="", exit_status=0)
    commands: list[str] = field(default_factory=list)

    def run(self, command: str) -> CommandResult:
        self.commands.append(command)
        return self.responses.get(command, self.default)


@dataclass
class RecordingReporter:
    """Reporter capturing every call as ``(kind, message)`` tuples."""

    events: list[tuple[str, str]] = field(default_factory=list)

    def start(self, message: str) -> None:
        self.events.append(("start", message))

    def stop(self) -> None:
        self.events.append(("stop", ""))

    def info(self, message: str) -> None:
        self.events.append(("info", message))

    def ok(self, message: str) -> None:
        self.events.append(("ok", message))

    def warn(self, message: str) -> None:
        self.events.append(("warn", message))

    def fail(self, message: str) -> None:
        self.events.append(("fail", message))

    def output(self, text: str) -> None:
        self.events.append(("output", text))

    def messages(self, kind: str) -> list[str]:
        return [message for event, message in self.events if event == kind]


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def make_shell() -> Callable[..., FakeShellRunner]:
    """Return a factory building a :class:`FakeShellRunner` from ``command -> (output, status)``."""

    def _factory(responses: Mapping[str, tuple[str, int]] | None = None) -> FakeShellRunner:
        scripted = {
            command: CommandResult(output=output, exit_status=status)
            for command, (output, status) in (responses or {}).items()
        }
        return FakeShellRunner(responses=scripted)

    return _factory


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing YAML text to ``quality.yml`` under ``tmp_path``."""

    def _write(text: str) -> Path:
        path = tmp_path / "quality.yml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _fresh_consoles() -> None:
    """Rebind cached rich consoles so output capture sees the current streams."""

    get_console_manager().clear()
