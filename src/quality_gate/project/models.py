# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project structure inferred from static inspection of a directory tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Language(str, Enum):
    """Languages and frameworks recognised by the project analyzer."""

    GO = "go"
    NODE = "node"
    PYTHON = "python"
    RUST = "rust"
    PHP = "php"
    JAVA = "java"
    DOCKER = "docker"
    TYPESCRIPT = "typescript"
    REACT = "react"
    VUE = "vue"
    ANGULAR = "angular"
    DJANGO = "django"
    FASTAPI = "fastapi"
    FLASK = "flask"
    LARAVEL = "laravel"


@dataclass(slots=True)
class ProjectStructure:
    """Detected languages, frameworks and tool hints for one project.

    ``languages``, ``frameworks`` and ``tools`` behave as insertion-ordered
    sets; use the ``add_*`` helpers to keep them free of duplicates.
    """

    languages: list[Language] = field(default_factory=list)
    frameworks: list[Language] = field(default_factory=list)
    tools: list[str] = field(default_factory=list)
    structure: dict[str, list[Path]] = field(default_factory=dict)

    def add_language(self, language: Language) -> None:
        if language not in self.languages:
            self.languages.append(language)

    def add_framework(self, framework: Language) -> None:
        if framework not in self.frameworks:
            self.frameworks.append(framework)

    def add_tool(self, tool: str) -> None:
        if tool not in self.tools:
            self.tools.append(tool)

    def record_file(self, language: Language, path: Path) -> None:
        """Remember ``path`` as evidence for ``language``."""

        self.structure.setdefault(language.value, []).append(path)

    def has_language(self, language: Language) -> bool:
        return language in self.languages

    def has_framework(self, framework: Language) -> bool:
        return framework in self.frameworks

    def summary_lines(self, root: Path) -> list[str]:
        """Describe the detected components for verbose output.

        Args:
            root: Project root used to shorten recorded file paths.

        Returns:
            list[str]: Human-readable lines in detection order.
        """

        lines = ["🎯 Detected project components:"]
        if self.languages:
            lines.append("   Languages: " + ", ".join(language.value for language in self.languages))
        if self.frameworks:
            lines.append("   Frameworks: " + ", ".join(framework.value for framework in self.frameworks))
        if self.tools:
            lines.append("   Existing Tools: " + ", ".join(self.tools))
        for language, files in self.structure.items():
            if not files:
                continue
            lines.append(f"   {language} files: {len(files)} detected")
            shown = [_relative(path, root) for path in files]
            if len(shown) <= 3:
                lines.extend(f"     - {entry}" for entry in shown)
            else:
                lines.append(f"     - {shown[0]} (and {len(shown) - 1} more)")
        return lines

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serialisable representation."""

        return {
            "languages": [language.value for language in self.languages],
            "frameworks": [framework.value for framework in self.frameworks],
            "tools": list(self.tools),
            "structure": {key: [str(path) for path in paths] for key, paths in self.structure.items()},
        }


def _relative(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


__all__ = ["Language", "ProjectStructure"]
