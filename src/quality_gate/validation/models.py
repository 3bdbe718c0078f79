# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dataclasses describing configuration validation findings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .severity import ValidationSeverity


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Single finding produced by a validation check."""

    field: str
    value: str
    issue: str
    suggestion: str
    severity: ValidationSeverity

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-serialisable representation of the finding."""

        return {
            "field": self.field,
            "value": self.value,
            "issue": self.issue,
            "suggestion": self.suggestion,
            "severity": self.severity.label,
        }


@dataclass(slots=True)
class ValidationResult:
    """Accumulated findings plus the derived validity flag."""

    errors: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """Return ``False`` when any ERROR or CRITICAL finding is present."""

        return not any(issue.severity.blocking for issue in self.errors)

    def add(
        self,
        *,
        field: str,
        value: str,
        issue: str,
        suggestion: str,
        severity: ValidationSeverity,
    ) -> None:
        """Append a finding built from the supplied attributes."""

        self.errors.append(
            ValidationIssue(field=field, value=value, issue=issue, suggestion=suggestion, severity=severity)
        )

    def count(self, severity: ValidationSeverity) -> int:
        """Return the number of findings at ``severity``."""

        return sum(1 for issue in self.errors if issue.severity is severity)

    def by_severity(self) -> dict[ValidationSeverity, list[ValidationIssue]]:
        """Group findings by severity, most severe first."""

        grouped: dict[ValidationSeverity, list[ValidationIssue]] = {}
        for severity in sorted(ValidationSeverity, reverse=True):
            matching = [issue for issue in self.errors if issue.severity is severity]
            if matching:
                grouped[severity] = matching
        return grouped

    def format(self) -> str:
        """Return a human-readable listing of every finding."""

        if not self.errors:
            return "✅ No validation errors found"
        lines = [f"❌ Found {len(self.errors)} validation issues:"]
        for issue in self.errors:
            lines.append(f"  {issue.severity.icon} [{issue.severity.label}] {issue.field}: {issue.issue}")
            if issue.suggestion:
                lines.append(f"     💡 {issue.suggestion}")
        return "\n".join(lines)


__all__ = ["ValidationIssue", "ValidationResult"]
