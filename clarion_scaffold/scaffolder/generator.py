"""Main scaffolding orchestrator.

Takes the three values collected from the user and produces the fixed
Clarion archetype: a root manifest, a backend package skeleton and a
frontend package skeleton wired to a ``messages`` REST resource.

Planning (:func:`render`, :meth:`ProjectGenerator.plan`) is pure and never
touches the file system; only :meth:`ProjectGenerator.generate` writes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from clarion_scaffold.config import GeneratorConfig

from .backend_gen import BackendGenerator
from .frontend_gen import FrontendGenerator
from .models import OutputNode, UserInput, directory, file
from .names import DerivedNames, derive
from .templates import TemplateRenderer, render_json
from .writer import write_nodes


# ---------------------------------------------------------------------------
# Pure planning
# ---------------------------------------------------------------------------


def manifest(user_input: UserInput) -> dict[str, Any]:
    """Root ``manifest.json`` document, echoing the raw user input."""
    return {
        "name": user_input.full_app_name,
        "user": user_input.user_name,
        "email": user_input.user_email,
    }


def render(
    user_input: UserInput,
    names: DerivedNames,
    config: GeneratorConfig | None = None,
    renderer: TemplateRenderer | None = None,
) -> list[OutputNode]:
    """Compute the complete, ordered output plan.

    Args:
        user_input: The raw values collected from the user.
        names: Names derived from ``user_input.full_app_name``.
        config: Run settings; only ``backend_url`` affects content.
        renderer: Template renderer to reuse; a default one is built if omitted.

    Returns:
        Output nodes relative to the output directory, root manifest first.
        Every directory node precedes the files inside it.
    """
    config = config or GeneratorConfig()
    renderer = renderer or TemplateRenderer()

    nodes = [
        directory(names.application),
        file(f"{names.application}/manifest.json", render_json(manifest(user_input))),
    ]
    nodes.extend(BackendGenerator(renderer).nodes(user_input, names))
    nodes.extend(FrontendGenerator(renderer, config).nodes(user_input, names))
    return nodes


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Plans and writes one Clarion project.

    Given a ``GeneratorConfig``, generates under ``config.output_dir``::

        <application>/
            manifest.json
            <application>-backend/   (service provider, routes, composer.json)
            <application>-frontend/  (package.json, tsconfig.json, src/*)
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = TemplateRenderer()

    def plan(self, user_input: UserInput) -> tuple[DerivedNames, list[OutputNode]]:
        """Derive names and render the output plan without writing anything.

        Raises:
            InvalidAppNameError: If ``user_input.full_app_name`` is malformed.
        """
        names = derive(user_input.full_app_name)
        return names, render(user_input, names, self.config, self.renderer)

    def generate(self, user_input: UserInput) -> Path:
        """Generate the project and return its root directory.

        Files already inside the generated tree are overwritten; nothing
        outside it is touched.  On an I/O error the exception propagates and
        any files written so far are left in place.
        """
        names, nodes = self.plan(user_input)
        write_nodes(nodes, self.config.output_dir)
        return self.config.project_root(names.application)
