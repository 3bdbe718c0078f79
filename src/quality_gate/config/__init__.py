# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loader for quality-gate."""

from __future__ import annotations

from ..errors import ConfigError, ConfigNotFoundError
from .loader import load_config, parse_config
from .models import SHOW_ON_VALUES, Config, Hook, HookGroup, OutputRules, ShowOn, Tool

__all__ = [
    "Config",
    "ConfigError",
    "ConfigNotFoundError",
    "Hook",
    "HookGroup",
    "OutputRules",
    "SHOW_ON_VALUES",
    "ShowOn",
    "Tool",
    "load_config",
    "parse_config",
]
