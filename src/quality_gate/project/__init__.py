# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project analysis, starter template generation, and the init flow."""

from __future__ import annotations

from .analyzer import ProjectAnalyzer, scan_project, should_skip_directory
from .init import InitOptions, InitResult, InitService
from .models import Language, ProjectStructure
from .templates import TemplateGenerator, generate_template

__all__ = [
    "InitOptions",
    "InitResult",
    "InitService",
    "Language",
    "ProjectAnalyzer",
    "ProjectStructure",
    "TemplateGenerator",
    "generate_template",
    "scan_project",
    "should_skip_directory",
]
