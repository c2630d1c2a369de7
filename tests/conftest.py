"""Shared pytest fixtures for the Clarion scaffolder test suite.

Provides reusable fixtures for:
- The canonical user input and its derived names
- A template renderer and a rendered output plan
- A generator pointed at a temporary output directory
"""

from __future__ import annotations

from pathlib import Path

import pytest

from clarion_scaffold.config import GeneratorConfig
from clarion_scaffold.scaffolder.generator import ProjectGenerator, render
from clarion_scaffold.scaffolder.models import OutputNode, UserInput
from clarion_scaffold.scaffolder.names import DerivedNames, derive
from clarion_scaffold.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Inputs & derived names
# ---------------------------------------------------------------------------


@pytest.fixture
def user_input() -> UserInput:
    """Ada's answers for a two-segment application name."""
    return UserInput(
        user_name="Ada",
        user_email="ada@example.com",
        full_app_name="@acme/billing-core",
    )


@pytest.fixture
def names(user_input: UserInput) -> DerivedNames:
    return derive(user_input.full_app_name)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def config(tmp_path: Path) -> GeneratorConfig:
    """Config writing into an empty temporary directory."""
    return GeneratorConfig(output_dir=tmp_path)


@pytest.fixture
def plan(
    user_input: UserInput,
    names: DerivedNames,
    config: GeneratorConfig,
    renderer: TemplateRenderer,
) -> list[OutputNode]:
    return render(user_input, names, config, renderer)


@pytest.fixture
def files_by_path(plan: list[OutputNode]) -> dict[str, str]:
    """Rendered file contents keyed by relative path."""
    return {node.path: node.content for node in plan if not node.is_directory}


@pytest.fixture
def generator(config: GeneratorConfig) -> ProjectGenerator:
    return ProjectGenerator(config)
