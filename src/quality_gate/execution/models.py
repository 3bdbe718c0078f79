# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Result types produced by hook execution and the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config.models import Hook


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Outcome of running a single hook command.

    ``duration`` is the elapsed wall-clock time in seconds.
    """

    hook: Hook
    success: bool
    output: str
    duration: float
    exit_status: int = 0

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serialisable representation."""

        return {
            "hook": self.hook.name,
            "success": self.success,
            "output": self.output,
            "exit_status": self.exit_status,
            "duration_ms": round(self.duration * 1000),
            "duration": f"{self.duration:.3f}s",
        }


@dataclass(slots=True)
class RunReport:
    """Results of a check run together with the run-level error, if any."""

    results: list[ExecutionResult] = field(default_factory=list)
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def failed_hooks(self) -> list[str]:
        return [result.hook.name for result in self.results if not result.success]


@dataclass(slots=True)
class FixReport:
    """Hooks whose fix commands ran successfully, plus the stopping error."""

    fixed: list[str] = field(default_factory=list)
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


__all__ = ["ExecutionResult", "FixReport", "RunReport"]
