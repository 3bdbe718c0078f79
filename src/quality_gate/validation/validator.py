# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Structural and security validation of quality-gate configurations."""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable, Sequence
from pathlib import Path

from ..config.models import SHOW_ON_VALUES, Config, Hook, OutputRules, Tool
from ..constants import DEFAULT_CONFIG_FILE
from .models import ValidationResult
from .rules import (
    DANGEROUS_COMMAND_RULES,
    TYPO_RULES,
    UNCHECKABLE_EXECUTABLE_MARKERS,
    WELL_KNOWN_TOOLS,
    command_executable,
)
from .severity import ValidationSeverity

ExecutableLookup = Callable[[str], str | None]


class ConfigValidator:
    """Run every validation check against a configuration.

    Each check appends to a shared :class:`ValidationResult`; no check stops
    another from running, and :meth:`validate` never raises.
    """

    def __init__(
        self,
        config: Config,
        *,
        config_path: Path | None = None,
        which: ExecutableLookup = shutil.which,
    ) -> None:
        """Create a validator bound to ``config``.

        Args:
            config: Configuration to validate.
            config_path: File checked for existence and readability. Defaults
                to the path the config was loaded from, then ``quality.yml``
                in the working directory.
            which: Executable lookup used by the tool availability check.
        """

        self._config = config
        self._config_path = config_path or config.source or Path(DEFAULT_CONFIG_FILE)
        self._which = which

    def validate(self) -> ValidationResult:
        """Return the accumulated findings for the bound configuration."""

        result = ValidationResult()
        self._validate_tools(result)
        self._validate_hooks(result)
        self._validate_tool_references(result)
        self._validate_duplicate_tool_names(result)
        self._validate_duplicate_hook_groups(result)
        self._validate_essential_hooks(result)
        self._validate_file_system(result)
        return result

    # ------------------------------------------------------------------
    def _validate_tools(self, result: ValidationResult) -> None:
        if not self._config.tools:
            result.add(
                field="tools",
                value="empty",
                issue="No tools configured",
                suggestion="Add at least one tool configuration for quality checks",
                severity=ValidationSeverity.WARNING,
            )
            return

        for index, tool in enumerate(self._config.tools):
            prefix = f"tools[{index}]"
            if not tool.name.strip():
                result.add(
                    field=f"{prefix}.name",
                    value=tool.name,
                    issue="Tool name is empty",
                    suggestion="Provide a descriptive name for the tool",
                    severity=ValidationSeverity.ERROR,
                )
            if not tool.check_command.strip():
                result.add(
                    field=f"{prefix}.check_command",
                    value=tool.check_command,
                    issue="Check command is empty",
                    suggestion="Provide a command to check if the tool is installed (e.g., 'tool --version')",
                    severity=ValidationSeverity.ERROR,
                )
            else:
                self._validate_command(tool.check_command, f"{prefix}.check_command", result)
            if not tool.install_command.strip():
                result.add(
                    field=f"{prefix}.install_command",
                    value=tool.install_command,
                    issue="Install command is empty",
                    suggestion="Provide a command to install the tool",
                    severity=ValidationSeverity.WARNING,
                )
            else:
                self._validate_command(tool.install_command, f"{prefix}.install_command", result)
            self._validate_tool_availability(tool, prefix, result)

    def _validate_hooks(self, result: ValidationResult) -> None:
        if not self._config.hooks:
            result.add(
                field="hooks",
                value="empty",
                issue="No hooks configured",
                suggestion="Add at least one hook configuration (pre-commit, pre-push, etc.)",
                severity=ValidationSeverity.WARNING,
            )
            return

        for group in self._config.hooks:
            prefix = f"hooks.{group.name}"
            if not group.name.strip():
                result.add(
                    field=prefix,
                    value=group.name,
                    issue="Hook group name is empty",
                    suggestion="Use descriptive names like 'security', 'backend', 'frontend'",
                    severity=ValidationSeverity.ERROR,
                )
            for hook_type, hooks in group.entries:
                if hooks:
                    self._validate_hook_entries(hooks, f"{prefix}.{hook_type}", result)
            if not group.has_hooks():
                result.add(
                    field=prefix,
                    value="no hooks",
                    issue="No hook types configured (pre-commit, pre-push)",
                    suggestion="Add at least one hook type with commands",
                    severity=ValidationSeverity.WARNING,
                )

    def _validate_hook_entries(self, hooks: Sequence[Hook], prefix: str, result: ValidationResult) -> None:
        for index, hook in enumerate(hooks):
            hook_prefix = f"{prefix}[{index}]"
            if not hook.name.strip():
                result.add(
                    field=f"{hook_prefix}.name",
                    value=hook.name,
                    issue="Command name is empty",
                    suggestion="Provide a descriptive name with emoji (e.g., '🎨 Format Check')",
                    severity=ValidationSeverity.ERROR,
                )
            if not hook.command.strip():
                result.add(
                    field=f"{hook_prefix}.command",
                    value=hook.command,
                    issue="Command is empty",
                    suggestion="Provide the command to execute",
                    severity=ValidationSeverity.CRITICAL,
                )
            else:
                self._validate_command(hook.command, f"{hook_prefix}.command", result)
            if hook.fix_command:
                self._validate_command(hook.fix_command, f"{hook_prefix}.fix_command", result)
            self._validate_output_rules(hook.output_rules, f"{hook_prefix}.output_rules", result)

    def _validate_command(self, command: str, field: str, result: ValidationResult) -> None:
        for rule in DANGEROUS_COMMAND_RULES:
            if rule.matches(command):
                result.add(
                    field=field,
                    value=command,
                    issue=rule.issue,
                    suggestion=rule.suggestion,
                    severity=rule.severity,
                )
                break
        self._validate_command_syntax(command, field, result)

    def _validate_command_syntax(self, command: str, field: str, result: ValidationResult) -> None:
        if command.count("'") % 2:
            result.add(
                field=field,
                value=command,
                issue="Unmatched single quotes in command",
                suggestion="Ensure all single quotes are properly paired",
                severity=ValidationSeverity.ERROR,
            )
        if command.count('"') % 2:
            result.add(
                field=field,
                value=command,
                issue="Unmatched double quotes in command",
                suggestion="Ensure all double quotes are properly paired",
                severity=ValidationSeverity.ERROR,
            )
        for rule in TYPO_RULES:
            if rule.matches(command):
                result.add(
                    field=field,
                    value=command,
                    issue=rule.issue,
                    suggestion=rule.suggestion,
                    severity=rule.severity,
                )

    def _validate_output_rules(self, rules: OutputRules, field: str, result: ValidationResult) -> None:
        if rules.show_on and rules.show_on not in SHOW_ON_VALUES:
            result.add(
                field=f"{field}.show_on",
                value=rules.show_on,
                issue="Invalid show_on value",
                suggestion="Use 'always', 'failure', or 'success'",
                severity=ValidationSeverity.ERROR,
            )
        message = rules.on_failure_message
        if message and message.count("{{") != message.count("}}"):
            result.add(
                field=f"{field}.on_failure_message",
                value=message,
                issue="Unclosed template variable in message",
                suggestion="Ensure all {{ variables }} are properly closed",
                severity=ValidationSeverity.WARNING,
            )

    def _validate_tool_availability(self, tool: Tool, prefix: str, result: ValidationResult) -> None:
        parts = tool.check_command.split()
        if not parts:
            return
        executable = parts[0]
        if any(marker in executable for marker in UNCHECKABLE_EXECUTABLE_MARKERS):
            return
        if self._which(executable) is None:
            result.add(
                field=f"{prefix}.check_command",
                value=tool.check_command,
                issue=f"Tool '{executable}' not found in PATH",
                suggestion=(
                    f"Install '{tool.name}' or check the installation command: {tool.install_command}"
                ),
                severity=ValidationSeverity.WARNING,
            )

    def _validate_tool_references(self, result: ValidationResult) -> None:
        configured = {
            executable
            for tool in self._config.tools
            if (executable := command_executable(tool.check_command)) is not None
        }
        for group in self._config.hooks:
            for hook_type, hooks in group.entries:
                for index, hook in enumerate(hooks):
                    executable = command_executable(hook.command)
                    if executable is None or executable not in WELL_KNOWN_TOOLS or executable in configured:
                        continue
                    result.add(
                        field=f"hooks.{group.name}.{hook_type}[{index}].command",
                        value=hook.command,
                        issue=f"Command uses '{executable}' but no tool configuration found",
                        suggestion=f"Add a tool configuration for '{executable}' in the tools section",
                        severity=ValidationSeverity.WARNING,
                    )

    def _validate_duplicate_tool_names(self, result: ValidationResult) -> None:
        seen: dict[str, int] = {}
        for index, tool in enumerate(self._config.tools):
            if tool.name in seen:
                result.add(
                    field=f"tools[{index}].name",
                    value=tool.name,
                    issue=f"Duplicate tool name (also defined at tools[{seen[tool.name]}])",
                    suggestion="Use unique names for each tool or merge configurations",
                    severity=ValidationSeverity.ERROR,
                )
                continue
            seen[tool.name] = index

    def _validate_duplicate_hook_groups(self, result: ValidationResult) -> None:
        seen: dict[str, int] = {}
        for index, group in enumerate(self._config.hooks):
            if group.name in seen:
                result.add(
                    field=f"hooks.{group.name}",
                    value=group.name,
                    issue=f"Duplicate hook group name (also defined at hooks[{seen[group.name]}])",
                    suggestion="Merge the hook groups or give each one a unique name",
                    severity=ValidationSeverity.ERROR,
                )
                continue
            seen[group.name] = index

    def _validate_essential_hooks(self, result: ValidationResult) -> None:
        if any("security" in group.name.lower() for group in self._config.hooks):
            return
        result.add(
            field="hooks",
            value="missing security",
            issue="No security hooks configured",
            suggestion="Consider adding a security hook group with tools like gitleaks for secret detection",
            severity=ValidationSeverity.WARNING,
        )

    def _validate_file_system(self, result: ValidationResult) -> None:
        path = self._config_path
        if not path.is_file():
            result.add(
                field="file",
                value=str(path),
                issue=f"Cannot access {path.name} file",
                suggestion=f"Ensure {path.name} exists and is readable",
                severity=ValidationSeverity.CRITICAL,
            )
        elif not os.access(path, os.R_OK):
            result.add(
                field="file",
                value=str(path),
                issue=f"{path.name} is not readable",
                suggestion=f"Fix file permissions: chmod 644 {path.name}",
                severity=ValidationSeverity.ERROR,
            )


def validate_config(
    config: Config,
    *,
    config_path: Path | None = None,
    which: ExecutableLookup = shutil.which,
) -> ValidationResult:
    """Validate ``config`` and return every finding.

    Args:
        config: Configuration to validate.
        config_path: Optional override for the file checked on disk.
        which: Executable lookup used by the tool availability check.

    Returns:
        ValidationResult: Findings with the derived validity flag.
    """

    return ConfigValidator(config, config_path=config_path, which=which).validate()


__all__ = ["ConfigValidator", "ExecutableLookup", "validate_config"]
