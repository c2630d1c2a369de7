"""Clarion scaffolder -- plans and writes the backend + frontend archetype.

Quick usage::

    from clarion_scaffold.scaffolder import ProjectGenerator, UserInput

    user_input = UserInput(
        user_name="Ada",
        user_email="ada@example.com",
        full_app_name="@acme/billing-core",
    )
    project_root = ProjectGenerator().generate(user_input)
"""

from clarion_scaffold.scaffolder.generator import ProjectGenerator, render
from clarion_scaffold.scaffolder.models import OutputNode, UserInput
from clarion_scaffold.scaffolder.names import DerivedNames, derive
from clarion_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "DerivedNames",
    "OutputNode",
    "ProjectGenerator",
    "TemplateRenderer",
    "UserInput",
    "derive",
    "render",
]
