# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shell command execution primitive used by the tool manager and hook runner."""

from __future__ import annotations

import os

# Bandit: commands come from the user's own configuration file and are meant to
# be interpreted by a shell, exactly as a git hook script would run them.
import subprocess  # nosec B404
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol

from ..constants import TIMEOUT_EXIT_STATUS

FALLBACK_SHELLS: Final[tuple[str, ...]] = ("/bin/zsh", "/bin/bash", "/bin/sh")
SPAWN_FAILURE_EXIT_STATUS: Final[int] = 127


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Combined output and exit status of one shell command."""

    output: str
    exit_status: int

    @property
    def succeeded(self) -> bool:
        return self.exit_status == 0


class ShellRunner(Protocol):
    """Protocol implemented by anything able to run a shell command string."""

    def run(self, command: str) -> CommandResult:
        """Run ``command`` and return its combined output and exit status."""
        ...


def preferred_shell() -> str:
    """Return ``$SHELL`` when set, otherwise the first existing fallback shell."""

    configured = os.environ.get("SHELL")
    if configured:
        return configured
    for candidate in FALLBACK_SHELLS:
        if Path(candidate).exists():
            return candidate
    return FALLBACK_SHELLS[-1]


class SubprocessShellRunner:
    """Run commands through ``<shell> -c`` with stdout and stderr merged."""

    def __init__(self, *, cwd: Path | None = None, timeout: float | None = None, shell: str | None = None) -> None:
        """Create a runner.

        Args:
            cwd: Working directory for spawned commands.
            timeout: Optional per-command deadline in seconds.
            shell: Shell executable; defaults to :func:`preferred_shell`.
        """

        self.cwd = cwd
        self.timeout = timeout
        self.shell = shell or preferred_shell()

    def run(self, command: str) -> CommandResult:
        """Execute ``command`` and capture its combined output.

        Args:
            command: Command string interpreted by the shell.

        Returns:
            CommandResult: Output and exit status. A command exceeding the
            deadline reports status 124; a shell that cannot be started
            reports status 127, as does a command the OS refuses to pass on.
        """

        try:
            # Bandit: argument list is fixed to ``<shell> -c <command>``.
            completed = subprocess.run(  # nosec B603
                [self.shell, "-c", command],
                cwd=str(self.cwd) if self.cwd is not None else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            output = _ensure_text(exc.output)
            timeout_msg = (
                f"Command timed out after {self.timeout:.1f}s"
                if self.timeout is not None
                else "Command timed out"
            )
            combined = f"{output}\n{timeout_msg}" if output else timeout_msg
            return CommandResult(output=combined, exit_status=TIMEOUT_EXIT_STATUS)
        except (OSError, ValueError) as exc:
            # ValueError: the command contains a NUL byte.
            return CommandResult(output=f"failed to start {self.shell}: {exc}", exit_status=SPAWN_FAILURE_EXIT_STATUS)
        return CommandResult(output=_ensure_text(completed.stdout), exit_status=completed.returncode)


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(errors="replace")


__all__ = [
    "CommandResult",
    "FALLBACK_SHELLS",
    "ShellRunner",
    "SubprocessShellRunner",
    "preferred_shell",
]
