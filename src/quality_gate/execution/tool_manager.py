# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ensure the tools a configuration depends on are installed."""

from __future__ import annotations

import time
from collections.abc import Iterable

from ..config.models import Tool
from ..errors import ToolInstallationError
from .reporting import NullReporter, ProgressReporter, format_duration
from .shell import CommandResult, ShellRunner


class ToolInstallManager:
    """Check each tool and install the ones whose check command fails."""

    def __init__(self, shell: ShellRunner, reporter: ProgressReporter | None = None) -> None:
        self._shell = shell
        self._reporter: ProgressReporter = reporter or NullReporter()

    def ensure_installed(self, tools: Iterable[Tool]) -> None:
        """Check and, when needed, install every tool in order.

        Args:
            tools: Tools declared by the configuration.

        Raises:
            ToolInstallationError: On the first tool whose install command
                fails; later tools are not examined.
        """

        for tool in tools:
            check, elapsed = self._timed(f"Checking if {tool.name} is installed...", tool.check_command)
            if check.succeeded:
                self._reporter.ok(f"{tool.name} is already installed ({format_duration(elapsed)})")
                continue

            install, elapsed = self._timed(f"Installing {tool.name}...", tool.install_command)
            if not install.succeeded:
                raise ToolInstallationError(tool.name, f"exit status {install.exit_status}", install.output)
            self._reporter.ok(f"{tool.name} installed successfully ({format_duration(elapsed)})")

    def _timed(self, label: str, command: str) -> tuple[CommandResult, float]:
        self._reporter.start(label)
        started = time.perf_counter()
        try:
            result = self._shell.run(command)
        finally:
            self._reporter.stop()
        return result, time.perf_counter() - started


__all__ = ["ToolInstallManager"]
