# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity tiers attached to configuration validation findings."""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class ValidationSeverity(IntEnum):
    """Ordinal risk classification for a validation finding."""

    WARNING = 0
    ERROR = 1
    CRITICAL = 2

    @property
    def label(self) -> str:
        """Return the upper-case label used in human-readable output."""

        return self.name

    @property
    def blocking(self) -> bool:
        """Return ``True`` when findings of this severity invalidate a config."""

        return self >= ValidationSeverity.ERROR

    @property
    def icon(self) -> str:
        """Return the emoji used when listing findings of this severity."""

        return _SEVERITY_ICONS[self]


_SEVERITY_ICONS: Final[dict[ValidationSeverity, str]] = {
    ValidationSeverity.WARNING: "⚠️",
    ValidationSeverity.ERROR: "❌",
    ValidationSeverity.CRITICAL: "🚨",
}

__all__ = ["ValidationSeverity"]
