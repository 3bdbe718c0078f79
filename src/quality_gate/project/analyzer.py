# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Heuristic detection of languages, frameworks, and tools in a project tree."""

from __future__ import annotations

import json
import os
import re
import tomllib
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any, Final

from ..constants import SKIP_DIRECTORIES
from .models import Language, ProjectStructure

MANIFEST_LANGUAGES: Final[dict[str, Language]] = {
    "go.mod": Language.GO,
    "go.sum": Language.GO,
    "package.json": Language.NODE,
    "package-lock.json": Language.NODE,
    "yarn.lock": Language.NODE,
    "pnpm-lock.yaml": Language.NODE,
    "requirements.txt": Language.PYTHON,
    "setup.py": Language.PYTHON,
    "pyproject.toml": Language.PYTHON,
    "Pipfile": Language.PYTHON,
    "poetry.lock": Language.PYTHON,
    "Cargo.toml": Language.RUST,
    "Cargo.lock": Language.RUST,
    "composer.json": Language.PHP,
    "composer.lock": Language.PHP,
    "pom.xml": Language.JAVA,
    "build.gradle": Language.JAVA,
    "gradle.properties": Language.JAVA,
    "Dockerfile": Language.DOCKER,
    "docker-compose.yml": Language.DOCKER,
    "docker-compose.yaml": Language.DOCKER,
}

# Lock files confirm a language but are not recorded as project files.
UNRECORDED_MANIFESTS: Final[frozenset[str]] = frozenset({"package-lock.json", "yarn.lock", "pnpm-lock.yaml"})

# Extension -> (language, stricter language that already covers the file).
EXTENSION_LANGUAGES: Final[dict[str, tuple[Language, Language | None]]] = {
    ".ts": (Language.TYPESCRIPT, None),
    ".tsx": (Language.TYPESCRIPT, None),
    ".js": (Language.NODE, Language.TYPESCRIPT),
    ".jsx": (Language.NODE, Language.TYPESCRIPT),
    ".mjs": (Language.NODE, Language.TYPESCRIPT),
    ".py": (Language.PYTHON, None),
    ".go": (Language.GO, None),
    ".rs": (Language.RUST, None),
    ".php": (Language.PHP, None),
    ".java": (Language.JAVA, None),
    ".kt": (Language.JAVA, None),
    ".scala": (Language.JAVA, None),
}

NODE_FRAMEWORKS: Final[dict[str, Language]] = {
    "react": Language.REACT,
    "vue": Language.VUE,
    "@angular/core": Language.ANGULAR,
}
NODE_TOOLS: Final[tuple[str, ...]] = ("eslint", "prettier", "jest", "vitest", "cypress", "playwright")

PYTHON_FRAMEWORKS: Final[tuple[tuple[str, Language], ...]] = (
    ("django", Language.DJANGO),
    ("fastapi", Language.FASTAPI),
    ("flask", Language.FLASK),
)
PYTHON_TOOLS: Final[tuple[str, ...]] = ("black", "ruff", "flake8", "mypy", "pytest", "isort")

PHP_FRAMEWORKS: Final[dict[str, Language]] = {"laravel/framework": Language.LARAVEL}
PHP_TOOLS: Final[dict[str, str]] = {
    "phpunit/phpunit": "phpunit",
    "squizlabs/php_codesniffer": "phpcs",
    "friendsofphp/php-cs-fixer": "php-cs-fixer",
    "phpstan/phpstan": "phpstan",
    "psalm/phar": "psalm",
}

_REQUIREMENT_NAME_SPLIT: Final[re.Pattern[str]] = re.compile(r"[=<>!~;\[\s@]")


def should_skip_directory(name: str) -> bool:
    """Return ``True`` for VCS, dependency, build, editor, and hidden directories."""

    return name in SKIP_DIRECTORIES or name.startswith(".")


class ProjectAnalyzer:
    """Scan a directory tree and infer its :class:`ProjectStructure`."""

    def __init__(self, root: Path) -> None:
        self.root = root.resolve()
        self._manifest_parsers: dict[str, Callable[[Path, ProjectStructure], None]] = {
            "package.json": self._analyze_package_json,
            "requirements.txt": self._analyze_requirements,
            "pyproject.toml": self._analyze_pyproject,
            "composer.json": self._analyze_composer_json,
        }

    def scan(self) -> ProjectStructure:
        """Walk the project once and return a freshly built structure.

        Directories are pruned before descending and entries are visited in
        sorted order, so repeated scans of an unchanged tree compare equal.

        Returns:
            ProjectStructure: Languages, frameworks, tools and evidence files.

        Raises:
            FileNotFoundError: When the root directory does not exist.
        """

        if not self.root.is_dir():
            raise FileNotFoundError(f"Project directory not found: {self.root}")

        structure = ProjectStructure()
        # Languages seen only through extensions a stricter language also covers.
        superseded: dict[Language, Language] = {}
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = sorted(name for name in dirnames if not should_skip_directory(name))
            current = Path(dirpath)
            for filename in sorted(filenames):
                self._analyze_file(current / filename, structure, superseded)
        for language, stricter in superseded.items():
            if structure.has_language(stricter):
                structure.languages.remove(language)
        return structure

    def _analyze_file(self, path: Path, structure: ProjectStructure, superseded: dict[Language, Language]) -> None:
        name = path.name
        manifest_language = MANIFEST_LANGUAGES.get(name)
        if manifest_language is not None:
            superseded.pop(manifest_language, None)
            structure.add_language(manifest_language)
            if name not in UNRECORDED_MANIFESTS:
                structure.record_file(manifest_language, path)
            parser = self._manifest_parsers.get(name)
            if parser is not None:
                parser(path, structure)

        match = EXTENSION_LANGUAGES.get(path.suffix.lower())
        if match is None:
            return
        language, superseded_by = match
        if superseded_by is None:
            superseded.pop(language, None)
        elif structure.has_language(superseded_by):
            return
        elif not structure.has_language(language):
            superseded[language] = superseded_by
        structure.add_language(language)

    # Manifest parsers -------------------------------------------------
    def _analyze_package_json(self, path: Path, structure: ProjectStructure) -> None:
        document = _read_json(path)
        if document is None:
            return
        dependencies = _merged_mapping(document.get("dependencies"), document.get("devDependencies"))
        if "typescript" in dependencies:
            structure.add_language(Language.TYPESCRIPT)
        for package, framework in NODE_FRAMEWORKS.items():
            if package in dependencies:
                structure.add_framework(framework)
        for tool in NODE_TOOLS:
            if tool in dependencies:
                structure.add_tool(tool)

    def _analyze_requirements(self, path: Path, structure: ProjectStructure) -> None:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return
        _apply_python_dependencies(content.splitlines(), structure)

    def _analyze_pyproject(self, path: Path, structure: ProjectStructure) -> None:
        try:
            document = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
            return
        _apply_python_dependencies(_pyproject_requirements(document), structure)

    def _analyze_composer_json(self, path: Path, structure: ProjectStructure) -> None:
        document = _read_json(path)
        if document is None:
            return
        dependencies = _merged_mapping(document.get("require"), document.get("require-dev"))
        for package, framework in PHP_FRAMEWORKS.items():
            if package in dependencies:
                structure.add_framework(framework)
        for package, tool in PHP_TOOLS.items():
            if package in dependencies:
                structure.add_tool(tool)


def scan_project(root: Path) -> ProjectStructure:
    """Return the :class:`ProjectStructure` detected under ``root``."""

    return ProjectAnalyzer(root).scan()


def _read_json(path: Path) -> dict[str, Any] | None:
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None
    return document if isinstance(document, dict) else None


def _merged_mapping(*sections: Any) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for section in sections:
        if isinstance(section, Mapping):
            merged.update(section)
    return merged


def _pyproject_requirements(document: Mapping[str, Any]) -> list[str]:
    requirements: list[str] = []
    project = document.get("project")
    if isinstance(project, Mapping):
        requirements.extend(_string_items(project.get("dependencies")))
        optional = project.get("optional-dependencies")
        if isinstance(optional, Mapping):
            for group in optional.values():
                requirements.extend(_string_items(group))
    tool = document.get("tool")
    poetry = tool.get("poetry") if isinstance(tool, Mapping) else None
    if isinstance(poetry, Mapping):
        for key in ("dependencies", "dev-dependencies"):
            section = poetry.get(key)
            if isinstance(section, Mapping):
                requirements.extend(str(name) for name in section)
    return requirements


def _string_items(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _apply_python_dependencies(lines: Iterable[str], structure: ProjectStructure) -> None:
    for raw in lines:
        line = raw.strip().lower()
        if not line or line.startswith("#"):
            continue
        package = _REQUIREMENT_NAME_SPLIT.split(line, maxsplit=1)[0].strip()
        if not package:
            continue
        for marker, framework in PYTHON_FRAMEWORKS:
            if marker in package:
                structure.add_framework(framework)
                break
        for tool in PYTHON_TOOLS:
            if tool in package:
                structure.add_tool(tool)


__all__ = [
    "EXTENSION_LANGUAGES",
    "MANIFEST_LANGUAGES",
    "ProjectAnalyzer",
    "scan_project",
    "should_skip_directory",
]
