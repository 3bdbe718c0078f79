# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sequential execution of configured hooks with output-rule display."""

from __future__ import annotations

import time
from collections.abc import Iterable

from ..config.models import Hook
from ..errors import HookFixError, MissingFixCommandError
from .models import ExecutionResult
from .reporting import NullReporter, ProgressReporter, format_duration
from .shell import ShellRunner


class HookRunner:
    """Run hook commands one at a time and report each outcome."""

    def __init__(self, shell: ShellRunner, reporter: ProgressReporter | None = None) -> None:
        self._shell = shell
        self._reporter: ProgressReporter = reporter or NullReporter()

    def run_all(self, hooks: Iterable[Hook]) -> list[ExecutionResult]:
        """Run every hook and return one result per hook in input order.

        A failing hook never stops the run; failure is recorded in its result.

        Args:
            hooks: Hooks resolved for the requested hook type.

        Returns:
            list[ExecutionResult]: Results in the same order as ``hooks``.
        """

        results: list[ExecutionResult] = []
        for hook in hooks:
            result = self.run_one(hook)
            results.append(result)
            self._display(result)
        return results

    def run_one(self, hook: Hook) -> ExecutionResult:
        """Execute ``hook.command`` and capture its outcome without displaying it."""

        self._reporter.start(f"Running {hook.name}...")
        started = time.perf_counter()
        try:
            outcome = self._shell.run(hook.command)
        finally:
            self._reporter.stop()
        return ExecutionResult(
            hook=hook,
            success=outcome.succeeded,
            output=outcome.output,
            duration=time.perf_counter() - started,
            exit_status=outcome.exit_status,
        )

    def run_fix(self, hook: Hook) -> str:
        """Run the fix command declared by ``hook``.

        Args:
            hook: Hook whose ``fix_command`` should run.

        Returns:
            str: Combined output of the fix command.

        Raises:
            MissingFixCommandError: If the hook declares no fix command.
            HookFixError: If the fix command exits unsuccessfully.
        """

        if not hook.has_fix:
            raise MissingFixCommandError(hook.name)

        self._reporter.start(f"Running fix command for {hook.name}...")
        try:
            outcome = self._shell.run(hook.fix_command)
        finally:
            self._reporter.stop()

        if not outcome.succeeded:
            raise HookFixError(hook.name, f"exit status {outcome.exit_status}", outcome.output)
        self._reporter.ok(f"Fix command for {hook.name} completed.")
        return outcome.output

    def _display(self, result: ExecutionResult) -> None:
        rules = result.hook.output_rules
        elapsed = format_duration(result.duration)
        if result.success:
            self._reporter.ok(f"{result.hook.name} passed ({elapsed})")
        else:
            self._reporter.fail(f"{result.hook.name} failed ({elapsed})")
            if rules.on_failure_message:
                self._reporter.info(rules.on_failure_message)
        if rules.shows_output(success=result.success):
            self._reporter.output(result.output)


__all__ = ["HookRunner"]
