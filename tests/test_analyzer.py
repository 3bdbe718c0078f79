# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for project structure detection."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from quality_gate.project import Language, ProjectAnalyzer, scan_project, should_skip_directory


def _write(root: Path, relative: str, content: str = "") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_python_project_detects_frameworks_and_tools(tmp_path: Path) -> None:
    _write(tmp_path, "requirements.txt", "Django>=4.2\nruff==0.5\n# comment\npytest\n")
    _write(tmp_path, "app/views.py", "print('hi')\n")

    structure = scan_project(tmp_path)

    assert structure.languages == [Language.PYTHON]
    assert structure.frameworks == [Language.DJANGO]
    assert structure.tools == ["ruff", "pytest"]
    assert structure.structure["python"] == [tmp_path.resolve() / "requirements.txt"]


def test_pyproject_dependencies_are_parsed(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "pyproject.toml",
        '[project]\nname = "demo"\ndependencies = ["fastapi>=0.110"]\n'
        '[project.optional-dependencies]\ntest = ["pytest", "mypy"]\n',
    )

    structure = scan_project(tmp_path)

    assert structure.frameworks == [Language.FASTAPI]
    assert structure.tools == ["pytest", "mypy"]


def test_package_json_typescript_react_and_tools(tmp_path: Path) -> None:
    manifest = {
        "dependencies": {"react": "^18.0.0"},
        "devDependencies": {"typescript": "^5.0.0", "eslint": "^9.0.0", "jest": "^29.0.0"},
    }
    _write(tmp_path, "package.json", json.dumps(manifest))
    _write(tmp_path, "package-lock.json", "{}")

    structure = scan_project(tmp_path)

    assert structure.languages == [Language.NODE, Language.TYPESCRIPT]
    assert structure.frameworks == [Language.REACT]
    assert structure.tools == ["eslint", "jest"]
    assert structure.structure["node"] == [tmp_path.resolve() / "package.json"]


def test_composer_json_detects_laravel(tmp_path: Path) -> None:
    manifest = {"require": {"laravel/framework": "^11.0"}, "require-dev": {"phpstan/phpstan": "^1.0"}}
    _write(tmp_path, "composer.json", json.dumps(manifest))

    structure = scan_project(tmp_path)

    assert structure.languages == [Language.PHP]
    assert structure.frameworks == [Language.LARAVEL]
    assert structure.tools == ["phpstan"]


def test_invalid_manifest_is_ignored(tmp_path: Path) -> None:
    _write(tmp_path, "package.json", "{ not json")

    structure = scan_project(tmp_path)

    assert structure.languages == [Language.NODE]
    assert structure.frameworks == []


def test_javascript_is_not_added_once_typescript_is_known(tmp_path: Path) -> None:
    _write(tmp_path, "a/index.ts")
    _write(tmp_path, "b/legacy.js")

    structure = scan_project(tmp_path)

    assert structure.languages == [Language.TYPESCRIPT]


def test_typescript_covers_javascript_visited_earlier(tmp_path: Path) -> None:
    _write(tmp_path, "app.js")
    _write(tmp_path, "src/index.ts")

    structure = scan_project(tmp_path)

    assert structure.languages == [Language.TYPESCRIPT]


def test_node_manifest_keeps_node_alongside_typescript(tmp_path: Path) -> None:
    _write(tmp_path, "app.js")
    _write(tmp_path, "package.json", "{}")
    _write(tmp_path, "src/index.ts")

    structure = scan_project(tmp_path)

    assert structure.languages == [Language.NODE, Language.TYPESCRIPT]


@pytest.mark.parametrize("directory", ["node_modules", ".git", "vendor", "build", ".cache"])
def test_skipped_directories_are_not_scanned(tmp_path: Path, directory: str) -> None:
    _write(tmp_path, f"{directory}/main.go", "package main\n")

    structure = scan_project(tmp_path)

    assert should_skip_directory(directory)
    assert structure.languages == []


def test_docker_and_java_manifests(tmp_path: Path) -> None:
    _write(tmp_path, "Dockerfile", "FROM scratch\n")
    _write(tmp_path, "pom.xml", "<project/>")

    structure = scan_project(tmp_path)

    assert structure.languages == [Language.DOCKER, Language.JAVA]


def test_scan_is_idempotent(tmp_path: Path) -> None:
    _write(tmp_path, "go.mod", "module demo\n")
    _write(tmp_path, "cmd/main.go", "package main\n")
    _write(tmp_path, "web/package.json", json.dumps({"devDependencies": {"prettier": "^3"}}))
    _write(tmp_path, "web/src/app.tsx")
    analyzer = ProjectAnalyzer(tmp_path)

    first = analyzer.scan()
    second = analyzer.scan()

    assert first == second
    assert first is not second


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        scan_project(tmp_path / "missing")


def test_summary_lines_describe_components(tmp_path: Path) -> None:
    for index in range(5):
        _write(tmp_path, f"pkg{index}/requirements.txt", "flask\n")

    structure = scan_project(tmp_path)
    lines = structure.summary_lines(tmp_path.resolve())

    assert lines[0] == "🎯 Detected project components:"
    assert "   Languages: python" in lines
    assert "   Frameworks: flask" in lines
    assert "   python files: 5 detected" in lines
    assert any("(and 4 more)" in line for line in lines)
