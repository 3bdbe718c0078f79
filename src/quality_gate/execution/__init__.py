# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command execution: shell runner, progress reporting, tools and hooks."""

from __future__ import annotations

from .hook_runner import HookRunner
from .models import ExecutionResult, FixReport, RunReport
from .reporting import ConsoleReporter, NullReporter, ProgressReporter, format_duration
from .shell import CommandResult, ShellRunner, SubprocessShellRunner, preferred_shell
from .tool_manager import ToolInstallManager

__all__ = [
    "CommandResult",
    "ConsoleReporter",
    "ExecutionResult",
    "FixReport",
    "HookRunner",
    "NullReporter",
    "ProgressReporter",
    "RunReport",
    "ShellRunner",
    "SubprocessShellRunner",
    "ToolInstallManager",
    "format_duration",
    "preferred_shell",
]
