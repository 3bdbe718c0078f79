# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for tool installation management."""

from __future__ import annotations

import pytest

from quality_gate.config.models import Tool
from quality_gate.errors import ToolInstallationError
from quality_gate.execution import ToolInstallManager


def _tool(name: str) -> Tool:
    return Tool(name=name, check_command=f"{name} --version", install_command=f"install {name}")


def test_installed_tools_are_not_reinstalled(make_shell, reporter) -> None:
    shell = make_shell()
    manager = ToolInstallManager(shell, reporter)

    manager.ensure_installed([_tool("ruff"), _tool("black")])

    assert shell.commands == ["ruff --version", "black --version"]
    assert reporter.messages("ok")[0].startswith("ruff is already installed (")


def test_missing_tool_is_installed(make_shell, reporter) -> None:
    shell = make_shell({"ruff --version": ("not found", 127)})
    manager = ToolInstallManager(shell, reporter)

    manager.ensure_installed([_tool("ruff")])

    assert shell.commands == ["ruff --version", "install ruff"]
    assert reporter.messages("start") == ["Checking if ruff is installed...", "Installing ruff..."]
    assert reporter.messages("ok")[0].startswith("ruff installed successfully (")


def test_install_failure_stops_sequence(make_shell, reporter) -> None:
    shell = make_shell({"ruff --version": ("", 1), "install ruff": ("network down", 2)})
    manager = ToolInstallManager(shell, reporter)

    with pytest.raises(ToolInstallationError) as excinfo:
        manager.ensure_installed([_tool("ruff"), _tool("black")])

    assert excinfo.value.tool_name == "ruff"
    assert excinfo.value.output == "network down"
    assert "failed to install ruff" in str(excinfo.value)
    assert "black --version" not in shell.commands
    assert reporter.events[-1] == ("stop", "")
