# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for starter configuration generation."""

from __future__ import annotations

from pathlib import Path

import pytest

from quality_gate.config import load_config, parse_config
from quality_gate.project import Language, ProjectStructure, TemplateGenerator, generate_template
from quality_gate.validation import ValidationSeverity, validate_config


def _structure(*languages: Language, frameworks: tuple[Language, ...] = ()) -> ProjectStructure:
    structure = ProjectStructure()
    for language in languages:
        structure.add_language(language)
    for framework in frameworks:
        structure.add_framework(framework)
    return structure


def test_python_structure_produces_python_group_and_security_baseline() -> None:
    config = parse_config(generate_template(_structure(Language.PYTHON)))

    assert [group.name for group in config.hooks] == ["security", "python-backend"]
    python_group = config.hooks[1]
    names = [hook.name for hook in python_group.hooks_for("pre-commit")]
    assert len(names) == 3
    assert "Format" in names[0]
    assert "Lint" in names[1]
    assert "Tests" in names[2]
    assert python_group.hooks_for("pre-commit")[0].has_fix
    assert [tool.name for tool in config.tools][0] == "Gitleaks"
    assert any("gitleaks" in hook.command for hook in config.hooks[0].hooks_for("pre-commit"))


def test_generation_is_deterministic() -> None:
    structure = _structure(Language.GO, Language.TYPESCRIPT, Language.PYTHON, frameworks=(Language.REACT,))

    first = TemplateGenerator().generate(structure)
    second = TemplateGenerator().generate(_structure(Language.GO, Language.TYPESCRIPT, Language.PYTHON, frameworks=(Language.REACT,)))

    assert first == second
    assert first.endswith("\n")


def test_empty_structure_still_has_baseline() -> None:
    config = parse_config(generate_template(ProjectStructure()))

    assert [tool.name for tool in config.tools] == ["Gitleaks"]
    assert [group.name for group in config.hooks] == ["security"]


def test_node_and_typescript_share_one_group() -> None:
    config = parse_config(generate_template(_structure(Language.NODE, Language.TYPESCRIPT, frameworks=(Language.REACT,))))

    group_names = [group.name for group in config.hooks]
    assert group_names == ["security", "typescript-frontend", "react-frontend"]
    prettier = config.hooks[1].hooks_for("pre-commit")[0]
    assert "'**/*.ts'" in prettier.command
    assert "'**/*.jsx'" in prettier.command
    tool_names = [tool.name.lower() for tool in config.tools]
    assert len(tool_names) == len(set(tool_names))


def test_plain_node_group_name() -> None:
    config = parse_config(generate_template(_structure(Language.NODE)))

    assert [group.name for group in config.hooks] == ["security", "node-frontend"]
    assert "'**/*.ts'" not in config.hooks[1].hooks_for("pre-commit")[0].command


def test_framework_groups_follow_languages() -> None:
    structure = _structure(Language.PYTHON, Language.PHP, frameworks=(Language.DJANGO, Language.LARAVEL, Language.FLASK))

    config = parse_config(generate_template(structure))

    assert [group.name for group in config.hooks] == [
        "security",
        "python-backend",
        "php-backend",
        "django-backend",
        "laravel-backend",
    ]


def test_docker_contributes_no_group() -> None:
    config = parse_config(generate_template(_structure(Language.DOCKER)))

    assert [group.name for group in config.hooks] == ["security"]


@pytest.mark.parametrize(
    "languages",
    [
        (Language.PYTHON,),
        (Language.GO,),
        (Language.NODE, Language.TYPESCRIPT),
        (Language.RUST,),
        (Language.PHP,),
        (Language.JAVA,),
    ],
)
def test_generated_config_loads_and_validates(tmp_path: Path, languages: tuple[Language, ...]) -> None:
    frameworks = (Language.REACT, Language.DJANGO, Language.LARAVEL)
    path = tmp_path / "quality.yml"
    path.write_text(generate_template(_structure(*languages, frameworks=frameworks)), encoding="utf-8")

    config = load_config(path)
    result = validate_config(config, which=lambda name: f"/usr/bin/{name}")

    blocking = [issue for issue in result.errors if issue.severity is not ValidationSeverity.WARNING]
    assert blocking == []
    assert result.valid
