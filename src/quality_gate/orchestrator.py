# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Top-level coordination of tool installation, hook runs, and fixes."""

from __future__ import annotations

from .config.models import Config
from .errors import HookExecutionError, HooksFailedError, ToolInstallationError
from .execution.hook_runner import HookRunner
from .execution.models import FixReport, RunReport
from .execution.tool_manager import ToolInstallManager


class QualityGate:
    """Run the checks or fixes configured for one hook type.

    Component failures are turned into report values here; callers decide how
    a report maps onto exit codes or rendered output.
    """

    def __init__(self, tool_manager: ToolInstallManager, hook_runner: HookRunner) -> None:
        self._tool_manager = tool_manager
        self._hook_runner = hook_runner

    def run(self, config: Config, hook_type: str) -> RunReport:
        """Ensure tools are installed, then run every hook for ``hook_type``.

        Args:
            config: Loaded configuration.
            hook_type: Hook type key such as ``"pre-commit"``.

        Returns:
            RunReport: Per-hook results. ``error`` is a
            :class:`ToolInstallationError` when installation stopped the run
            (no hooks are executed), or a :class:`HooksFailedError` naming the
            failed hooks after all hooks ran.
        """

        try:
            self._tool_manager.ensure_installed(config.tools)
        except ToolInstallationError as exc:
            return RunReport(results=[], error=exc)

        results = self._hook_runner.run_all(config.hooks_for(hook_type))
        report = RunReport(results=results)
        failed = report.failed_hooks()
        if failed:
            report.error = HooksFailedError(tuple(failed))
        return report

    def fix(self, config: Config, hook_type: str) -> FixReport:
        """Run fix commands for the hooks of ``hook_type`` that declare one.

        Args:
            config: Loaded configuration.
            hook_type: Hook type key such as ``"pre-commit"``.

        Returns:
            FixReport: Names of hooks fixed in order; ``error`` holds the
            :class:`HookExecutionError` of the first failing fix command.
        """

        report = FixReport()
        for hook in config.hooks_for(hook_type):
            if not hook.has_fix:
                continue
            try:
                self._hook_runner.run_fix(hook)
            except HookExecutionError as exc:
                report.error = exc
                break
            report.fixed.append(hook.name)
        return report


__all__ = ["QualityGate"]
