# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models describing tools, hooks, and hook groups."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field


class ShowOn(str, Enum):
    """Enumerate the supported output display policies."""

    ALWAYS = "always"
    FAILURE = "failure"
    SUCCESS = "success"


SHOW_ON_VALUES: Final[tuple[str, ...]] = tuple(member.value for member in ShowOn)


class Tool(BaseModel):
    """External command-line utility with presence check and remediation."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    check_command: str = ""
    install_command: str = ""


class OutputRules(BaseModel):
    """Display policy applied to a hook's captured output.

    ``show_on`` is stored verbatim so that unsupported values survive loading
    and can be reported by the validator.
    """

    model_config = ConfigDict(frozen=True)

    show_on: str = ""
    on_failure_message: str = ""

    def shows_output(self, *, success: bool) -> bool:
        """Return whether captured output should be displayed for an outcome.

        Args:
            success: Outcome of the hook execution.

        Returns:
            bool: ``True`` when the policy asks for the captured output.
        """

        if success:
            return self.show_on == ShowOn.ALWAYS.value
        return self.show_on in (ShowOn.FAILURE.value, ShowOn.ALWAYS.value)


class Hook(BaseModel):
    """Named command bound to a hook type, with optional fix command."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    command: str = ""
    fix_command: str = ""
    output_rules: OutputRules = Field(default_factory=OutputRules)

    @property
    def has_fix(self) -> bool:
        """Return ``True`` when the hook declares a fix command."""

        return bool(self.fix_command.strip())


HookTypeEntry = tuple[str, tuple[Hook, ...]]


class HookGroup(BaseModel):
    """Named collection of hooks subdivided by hook type, in declaration order."""

    model_config = ConfigDict(frozen=True)

    name: str
    entries: tuple[HookTypeEntry, ...] = ()

    def hooks_for(self, hook_type: str) -> tuple[Hook, ...]:
        """Return hooks registered under ``hook_type`` preserving their order."""

        resolved: list[Hook] = []
        for entry_type, hooks in self.entries:
            if entry_type == hook_type:
                resolved.extend(hooks)
        return tuple(resolved)

    def has_hooks(self) -> bool:
        """Return ``True`` when at least one hook type carries a command."""

        return any(hooks for _, hooks in self.entries)


class Config(BaseModel):
    """In-memory representation of a quality-gate configuration document."""

    model_config = ConfigDict(frozen=True)

    tools: tuple[Tool, ...] = ()
    hooks: tuple[HookGroup, ...] = ()
    source: Path | None = None

    def hooks_for(self, hook_type: str) -> tuple[Hook, ...]:
        """Resolve every hook bound to ``hook_type`` across all groups.

        Args:
            hook_type: Exact hook-type key such as ``"pre-commit"``.

        Returns:
            tuple[Hook, ...]: Hooks in group order, then in-group order.
        """

        resolved: list[Hook] = []
        for group in self.hooks:
            resolved.extend(group.hooks_for(hook_type))
        return tuple(resolved)

    def hook_types(self) -> tuple[str, ...]:
        """Return every hook-type key used by the configuration, first-seen order."""

        seen: dict[str, None] = {}
        for group in self.hooks:
            for hook_type, _ in group.entries:
                seen.setdefault(hook_type, None)
        return tuple(seen)


__all__ = [
    "Config",
    "Hook",
    "HookGroup",
    "HookTypeEntry",
    "OutputRules",
    "SHOW_ON_VALUES",
    "ShowOn",
    "Tool",
]
