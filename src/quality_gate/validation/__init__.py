# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration validation with severity-tiered findings."""

from __future__ import annotations

from .models import ValidationIssue, ValidationResult
from .rules import CommandRule, DANGEROUS_COMMAND_RULES, TYPO_RULES, WELL_KNOWN_TOOLS, command_executable
from .severity import ValidationSeverity
from .validator import ConfigValidator, validate_config

__all__ = [
    "CommandRule",
    "ConfigValidator",
    "DANGEROUS_COMMAND_RULES",
    "TYPO_RULES",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "WELL_KNOWN_TOOLS",
    "command_executable",
    "validate_config",
]
