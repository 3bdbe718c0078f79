# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the quality-gate core."""

from __future__ import annotations

from pathlib import Path


class QualityGateError(Exception):
    """Base class for every failure surfaced by the quality-gate core."""


class ConfigError(QualityGateError):
    """Raised when the configuration document cannot be parsed into a model."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration document does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found: {path}")
        self.path = path


class ConfigExistsError(ConfigError):
    """Raised when init would overwrite an existing configuration file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} already exists; use --force to overwrite it")
        self.path = path


class ToolInstallationError(QualityGateError):
    """Raised when a tool is missing and its install command fails."""

    def __init__(self, tool_name: str, cause: str, output: str) -> None:
        """Initialise the error with the failing tool and its captured output.

        Args:
            tool_name: Name of the tool that could not be installed.
            cause: Description of the underlying failure (exit status).
            output: Combined output captured from the install command.
        """

        message = f"failed to install {tool_name}: {cause}"
        if output:
            message = f"{message}\n{output}"
        super().__init__(message)
        self.tool_name = tool_name
        self.cause = cause
        self.output = output


class HookExecutionError(QualityGateError):
    """Base class for failures raised while executing a single hook."""

    def __init__(self, hook_name: str, message: str) -> None:
        super().__init__(message)
        self.hook_name = hook_name


class MissingFixCommandError(HookExecutionError):
    """Raised when a fix is requested for a hook that declares no fix command."""

    def __init__(self, hook_name: str) -> None:
        super().__init__(hook_name, f"no fix command defined for hook: {hook_name}")


class HookFixError(HookExecutionError):
    """Raised when a hook's fix command exits unsuccessfully."""

    def __init__(self, hook_name: str, cause: str, output: str) -> None:
        message = f"failed to run fix command for {hook_name}: {cause}"
        if output:
            message = f"{message}\n{output}"
        super().__init__(hook_name, message)
        self.cause = cause
        self.output = output


class HooksFailedError(QualityGateError):
    """Raised when at least one hook in a run reported failure."""

    def __init__(self, failed: tuple[str, ...]) -> None:
        super().__init__("one or more hooks failed: " + ", ".join(failed))
        self.failed = failed


__all__ = [
    "ConfigError",
    "ConfigExistsError",
    "ConfigNotFoundError",
    "HookExecutionError",
    "HookFixError",
    "HooksFailedError",
    "MissingFixCommandError",
    "QualityGateError",
    "ToolInstallationError",
]
