# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""YAML loading for quality-gate configuration documents.

Mappings are read as ordered pairs so that declaration order is kept for hook
groups and hook types, and duplicate group names reach the validator instead
of being silently collapsed.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..errors import ConfigError, ConfigNotFoundError
from .models import Config, Hook, HookGroup, HookTypeEntry, OutputRules, Tool


class OrderedPairs(list[tuple[Any, Any]]):
    """Mapping entries in declaration order, duplicates retained."""

    def as_dict(self) -> dict[Any, Any]:
        """Return the pairs as a dictionary; later duplicates win."""

        return dict(self)


class _PairsLoader(yaml.SafeLoader):
    """Safe YAML loader that materialises mappings as :class:`OrderedPairs`."""


def _construct_pairs(loader: _PairsLoader, node: yaml.MappingNode) -> OrderedPairs:
    loader.flatten_mapping(node)
    return OrderedPairs(
        (loader.construct_object(key, deep=True), loader.construct_object(value, deep=True))
        for key, value in node.value
    )


_PairsLoader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_pairs)


def load_config(path: Path) -> Config:
    """Load and parse the configuration document stored at ``path``.

    Args:
        path: Location of the YAML configuration file.

    Returns:
        Config: Immutable configuration model.

    Raises:
        ConfigNotFoundError: When ``path`` does not exist.
        ConfigError: When the file cannot be read or has an invalid shape.
    """

    if not path.is_file():
        raise ConfigNotFoundError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    return parse_config(text, source=path)


def parse_config(text: str, *, source: Path | None = None) -> Config:
    """Parse YAML ``text`` into a :class:`Config`.

    Args:
        text: Raw YAML document.
        source: Optional path recorded on the resulting config.

    Returns:
        Config: Immutable configuration model.

    Raises:
        ConfigError: When the YAML is malformed or sections have the wrong type.
    """

    label = str(source) if source is not None else "<string>"
    try:
        document = yaml.load(text, Loader=_PairsLoader)  # nosec B506 - SafeLoader subclass
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {label}: {exc}") from exc

    if document is None:
        return Config(source=source)
    top = _require_mapping(document, "document").as_dict()
    try:
        return Config(
            tools=_parse_tools(top.get("tools")),
            hooks=_parse_hook_groups(top.get("hooks")),
            source=source,
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {label}: {exc}") from exc


def _parse_tools(raw: Any) -> tuple[Tool, ...]:
    if raw is None:
        return ()
    entries = _require_sequence(raw, "tools")
    tools: list[Tool] = []
    for index, entry in enumerate(entries):
        location = f"tools[{index}]"
        fields = _require_mapping(entry, location).as_dict()
        tools.append(
            Tool(
                name=_scalar(fields.get("name"), f"{location}.name"),
                check_command=_scalar(fields.get("check_command"), f"{location}.check_command"),
                install_command=_scalar(fields.get("install_command"), f"{location}.install_command"),
            )
        )
    return tuple(tools)


def _parse_hook_groups(raw: Any) -> tuple[HookGroup, ...]:
    if raw is None:
        return ()
    groups: list[HookGroup] = []
    for group_name, body in _require_mapping(raw, "hooks"):
        name = _scalar(group_name, "hooks")
        location = f"hooks.{name}"
        entries: list[HookTypeEntry] = []
        if body is not None:
            for hook_type, hooks in _require_mapping(body, location):
                key = _scalar(hook_type, location)
                entries.append((key, _parse_hooks(hooks, f"{location}.{key}")))
        groups.append(HookGroup(name=name, entries=tuple(entries)))
    return tuple(groups)


def _parse_hooks(raw: Any, location: str) -> tuple[Hook, ...]:
    if raw is None:
        return ()
    hooks: list[Hook] = []
    for index, entry in enumerate(_require_sequence(raw, location)):
        hook_location = f"{location}[{index}]"
        fields = _require_mapping(entry, hook_location).as_dict()
        hooks.append(
            Hook(
                name=_scalar(fields.get("name"), f"{hook_location}.name"),
                command=_scalar(fields.get("command"), f"{hook_location}.command"),
                fix_command=_scalar(fields.get("fix_command"), f"{hook_location}.fix_command"),
                output_rules=_parse_output_rules(fields.get("output_rules"), f"{hook_location}.output_rules"),
            )
        )
    return tuple(hooks)


def _parse_output_rules(raw: Any, location: str) -> OutputRules:
    if raw is None:
        return OutputRules()
    fields = _require_mapping(raw, location).as_dict()
    return OutputRules(
        show_on=_scalar(fields.get("show_on"), f"{location}.show_on"),
        on_failure_message=_scalar(fields.get("on_failure_message"), f"{location}.on_failure_message"),
    )


def _require_mapping(value: Any, location: str) -> OrderedPairs:
    if not isinstance(value, OrderedPairs):
        raise ConfigError(f"{location} must be a mapping, got {_type_label(value)}")
    return value


def _require_sequence(value: Any, location: str) -> Sequence[Any]:
    if not isinstance(value, list) or isinstance(value, OrderedPairs):
        raise ConfigError(f"{location} must be a list, got {_type_label(value)}")
    return value


def _scalar(value: Any, location: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigError(f"{location} must be a scalar value, got {_type_label(value)}")


def _type_label(value: Any) -> str:
    if isinstance(value, OrderedPairs):
        return "mapping"
    if isinstance(value, list):
        return "list"
    if value is None:
        return "null"
    return type(value).__name__


__all__ = ["OrderedPairs", "load_config", "parse_config"]
