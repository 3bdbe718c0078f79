# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""JSON payloads emitted by the CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..execution.models import RunReport
from ..validation.models import ValidationResult

STATUS_SUCCESS = "success"
STATUS_FAILURE = "failure"


def run_payload(report: RunReport) -> dict[str, Any]:
    """Return the JSON document describing a check run.

    Args:
        report: Report returned by the orchestrator.

    Returns:
        dict[str, Any]: ``{"status": ..., "results": [...]}``.
    """

    return {
        "status": STATUS_SUCCESS if report.succeeded else STATUS_FAILURE,
        "results": [result.to_dict() for result in report.results],
    }


def validation_payload(result: ValidationResult) -> dict[str, Any]:
    return {
        "valid": result.valid,
        "errors": [issue.to_dict() for issue in result.errors],
    }


def init_payload(path: Path, structure: dict[str, object]) -> dict[str, Any]:
    return {"path": str(path), "structure": structure}


def version_payload(version: str) -> dict[str, Any]:
    return {"version": version}


def dumps(payload: dict[str, Any]) -> str:
    """Serialise ``payload`` with stable indentation."""

    return json.dumps(payload, indent=2, ensure_ascii=False)


__all__ = ["dumps", "init_payload", "run_payload", "validation_payload", "version_payload"]
