"""Backend package skeleton generation.

Plans the ``<application>-backend`` tree: a Laravel-style service provider,
an empty authenticated route group, a Composer manifest wired to the Clarion
backend packages, and a README.
"""

from __future__ import annotations

from typing import Any

from .models import OutputNode, UserInput, directory, file
from .names import DerivedNames
from .templates import TemplateRenderer, render_json

BACKEND_EXT = ".php"

# Composer requirements every generated backend starts with
COMPOSER_REQUIRE: dict[str, str] = {
    "clarion-app/eloquent-multichain-bridge": "dev-main",
    "clarion-app/backend": "dev-main",
}

BACKEND_DIRECTORIES: tuple[str, ...] = (
    "database/migrations",
    "routes",
    "src/Controllers",
    "src/Models",
)


class BackendGenerator:
    """Produces the output nodes for the backend package."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def nodes(self, user_input: UserInput, names: DerivedNames) -> list[OutputNode]:
        """Return the backend directories and files, directories first.

        Args:
            user_input: The raw values collected from the user.
            names: Names derived from ``user_input.full_app_name``.

        Returns:
            Ordered output nodes rooted at ``<application>/<application>-backend``.
        """
        base = backend_dir(names)
        context = _context(user_input, names)

        nodes = [directory(base)]
        nodes.extend(directory(f"{base}/{d}") for d in BACKEND_DIRECTORIES)
        nodes.extend([
            file(
                f"{base}/src/{names.provider_class}{BACKEND_EXT}",
                self.renderer.render("backend/src/ServiceProvider.php.j2", context),
            ),
            file(
                f"{base}/routes/api{BACKEND_EXT}",
                self.renderer.render("backend/routes/api.php.j2", context),
            ),
            file(f"{base}/composer.json", render_json(composer_manifest(user_input, names))),
            file(f"{base}/README.md", self.renderer.render("backend/README.md.j2", context)),
        ])
        return nodes


def backend_dir(names: DerivedNames) -> str:
    return f"{names.application}/{names.application}-backend"


def composer_manifest(user_input: UserInput, names: DerivedNames) -> dict[str, Any]:
    """Build the ``composer.json`` document for the backend package."""
    return {
        "name": f"{names.organization}/{names.application}-backend",
        "description": "Describe your package",
        "type": "library",
        "license": "MIT",
        "autoload": {
            "psr-4": {
                f"{names.php_namespace}\\": "src/",
            },
        },
        "authors": [
            {
                "name": user_input.user_name,
                "email": user_input.user_email,
            },
        ],
        "require": dict(COMPOSER_REQUIRE),
        "extra": {
            "laravel": {
                "providers": [f"{names.php_namespace}\\{names.provider_class}"],
            },
            "clarion": {
                "app-name": user_input.full_app_name,
                "description": "Provides operations to implement {user fills this in later}.",
            },
        },
        "minimum-stability": "dev",
    }


def _context(user_input: UserInput, names: DerivedNames) -> dict[str, Any]:
    return {"user": user_input, "names": names}
