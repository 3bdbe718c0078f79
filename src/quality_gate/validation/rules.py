# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data-driven rule tables consulted by the configuration validator.

New heuristics are added here as table rows; the validator only knows how to
apply a :class:`CommandRule`, not what each rule means.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from .severity import ValidationSeverity


@dataclass(frozen=True, slots=True)
class CommandRule:
    """Pattern applied to a command string together with the finding it yields."""

    pattern: re.Pattern[str]
    severity: ValidationSeverity
    issue: str
    suggestion: str

    def matches(self, command: str) -> bool:
        """Return ``True`` when ``command`` triggers the rule."""

        return self.pattern.search(command) is not None


_REVIEW_SUGGESTION: Final[str] = "Review the command for security implications"
_RECURSIVE_FLAGS: Final[str] = r"-[a-zA-Z]*(?:rf|fr)[a-zA-Z]*"


def _dangerous(pattern: str, description: str) -> CommandRule:
    return CommandRule(
        pattern=re.compile(pattern),
        severity=ValidationSeverity.CRITICAL,
        issue=f"Potentially dangerous command detected ({description})",
        suggestion=_REVIEW_SUGGESTION,
    )


def _typo(typo: str, correct: str) -> CommandRule:
    return CommandRule(
        pattern=re.compile(rf"(?<![\w./-]){re.escape(typo)}(?![\w./-])", re.IGNORECASE),
        severity=ValidationSeverity.WARNING,
        issue=f"Possible typo: '{typo}' should be '{correct}'",
        suggestion=f"Check if you meant '{correct}' instead of '{typo}'",
    )


DANGEROUS_COMMAND_RULES: Final[tuple[CommandRule, ...]] = (
    _dangerous(
        rf"\brm\s+{_RECURSIVE_FLAGS}\s+/\.?(?:\*|[\s;&|)]|$)",
        "recursive deletion of the filesystem root",
    ),
    _dangerous(rf"\brm\s+/\.?(?:\*|[\s;&|)]|$)+{_RECURSIVE_FLAGS}\s+\*", "recursive wildcard deletion"),
    _dangerous(r"\bsudo\s+/\.?(?:\*|[\s;&|)]|$)+rm\b", "privileged deletion"),
    _dangerous(r">\s+/\.?(?:\*|[\s;&|)]|$)*/dev/sd[a-z]", "raw write to a block device"),
    _dangerous(r"\bdd\s+/\.?(?:\*|[\s;&|)]|$)+.*of=/dev/", "raw write to a block device"),
    _dangerous(r"\bcurl\b.*\|\s+/\.?(?:\*|[\s;&|)]|$)*(?:sudo\s+)?(?:ba|z)?sh\b", "remote script piped to a shell"),
    _dangerous(r"\bwget\b.*\|\s+/\.?(?:\*|[\s;&|)]|$)*(?:sudo\s+)?(?:ba|z)?sh\b", "remote script piped to a shell"),
    _dangerous(r"\beval\s+/\.?(?:\*|[\s;&|)]|$)+\"?\$\(.*\bcurl\b", "evaluation of a remote script"),
    _dangerous(r":\(\)\s+/\.?(?:\*|[\s;&|)]|$)*\{.*\}\s*;\s*:", "fork bomb"),
)

TYPO_RULES: Final[tuple[CommandRule, ...]] = (
    _typo("pretier", "prettier"),
    _typo("pretter", "prettier"),
    _typo("prettir", "prettier"),
    _typo("esslint", "eslint"),
    _typo("eslinter", "eslint"),
    _typo("py.test", "pytest"),
    _typo("pytset", "pytest"),
    _typo("ruf", "ruff"),
    _typo("blakc", "black"),
    _typo("gofmat", "gofmt"),
    _typo("golangci", "golangci-lint"),
    _typo("golangcilint", "golangci-lint"),
)

WELL_KNOWN_TOOLS: Final[frozenset[str]] = frozenset(
    {
        "prettier",
        "eslint",
        "ruff",
        "black",
        "mypy",
        "pytest",
        "gofmt",
        "golangci-lint",
        "rustfmt",
        "cargo",
        "php-cs-fixer",
        "phpstan",
        "phpunit",
        "gitleaks",
    }
)

WRAPPER_PREFIXES: Final[frozenset[str]] = frozenset({"npx", "pnpx", "bunx", "uvx", "pipx"})

UNCHECKABLE_EXECUTABLE_MARKERS: Final[tuple[str, ...]] = ("/", "|", "&")


def command_executable(command: str) -> str | None:
    """Return the executable a command invokes, looking through wrapper prefixes.

    Args:
        command: Shell command string.

    Returns:
        str | None: Leading executable, the token after a wrapper prefix such
        as ``npx``, or ``None`` for an empty command.
    """

    tokens = command.split()
    if not tokens:
        return None
    if tokens[0] in WRAPPER_PREFIXES and len(tokens) > 1:
        return tokens[1]
    return tokens[0]


__all__ = [
    "CommandRule",
    "DANGEROUS_COMMAND_RULES",
    "TYPO_RULES",
    "UNCHECKABLE_EXECUTABLE_MARKERS",
    "WELL_KNOWN_TOOLS",
    "WRAPPER_PREFIXES",
    "command_executable",
]
