"""Frontend package skeleton generation.

Plans the ``<application>-frontend`` tree: npm and TypeScript manifests plus
a small React + RTK Query module set for the ``messages`` resource.  The
generated ``index.ts`` owns a mutable ``backend`` config object that the
host application updates through ``updateFrontend``; that object exists only
in the generated code.
"""

from __future__ import annotations

from typing import Any

from clarion_scaffold.config import GeneratorConfig

from .models import OutputNode, UserInput, directory, file
from .names import DerivedNames
from .templates import TemplateRenderer, render_json

MODULE_EXT = ".ts"
COMPONENT_EXT = ".tsx"

NPM_DEPENDENCIES: dict[str, str] = {
    "@clarion-app/types": "^1.6.0",
    "@reduxjs/toolkit": "^1.9.5",
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
    "react-redux": "^8.0.5",
    "react-router-dom": "^6.4.1",
    "typescript": "^4.8.4",
}

NPM_DEV_DEPENDENCIES: dict[str, str] = {
    "@types/react": "^18.0.21",
    "@types/react-dom": "^18.0.6",
}

TS_COMPILER_OPTIONS: dict[str, Any] = {
    "module": "esnext",
    "jsx": "react-jsx",
    "esModuleInterop": True,
    "target": "es6",
    "moduleResolution": "node",
    "sourceMap": True,
    "outDir": "dist",
    "declaration": True,
    "lib": ["es2017", "dom"],
    "resolveJsonModule": True,
    "allowJs": True,
    "skipLibCheck": True,
    "allowSyntheticDefaultImports": True,
    "strict": True,
    "forceConsistentCasingInFileNames": True,
    "noFallthroughCasesInSwitch": True,
    "isolatedModules": True,
}


class FrontendGenerator:
    """Produces the output nodes for the frontend package."""

    def __init__(self, renderer: TemplateRenderer, config: GeneratorConfig) -> None:
        self.renderer = renderer
        self.config = config

    def nodes(self, user_input: UserInput, names: DerivedNames) -> list[OutputNode]:
        """Return the frontend directories and files, directories first.

        Args:
            user_input: The raw values collected from the user.
            names: Names derived from ``user_input.full_app_name``.

        Returns:
            Ordered output nodes rooted at ``<application>/<application>-frontend``.
        """
        base = frontend_dir(names)
        context = {
            "user": user_input,
            "names": names,
            "backend_url": self.config.backend_url,
        }

        nodes = [
            directory(base),
            directory(f"{base}/src"),
            file(f"{base}/package.json", render_json(package_manifest(user_input, names))),
            file(f"{base}/tsconfig.json", render_json(tsconfig())),
        ]
        # (template, output file name) pairs rendered into <frontend>/src
        sources = [
            ("frontend/src/index.ts.j2", f"index{MODULE_EXT}"),
            ("frontend/src/baseQuery.ts.j2", f"baseQuery{MODULE_EXT}"),
            ("frontend/src/api.ts.j2", names.api_file_name),
            ("frontend/src/Message.tsx.j2", f"Message{COMPONENT_EXT}"),
            ("frontend/src/Messages.tsx.j2", f"Messages{COMPONENT_EXT}"),
        ]
        for template_name, output_name in sources:
            nodes.append(
                file(f"{base}/src/{output_name}", self.renderer.render(template_name, context))
            )
        return nodes


def frontend_dir(names: DerivedNames) -> str:
    return f"{names.application}/{names.application}-frontend"


def package_manifest(user_input: UserInput, names: DerivedNames) -> dict[str, Any]:
    """Build the ``package.json`` document for the frontend package.

    The ``customFields.clarion`` block tells the Clarion host which API slice
    to register, which routes to mount and what to show in its menu.
    """
    messages_path = f"{names.frontend_route_base}/messages"
    return {
        "name": f"@{names.organization}/{names.application}-frontend",
        "version": "1.0.0",
        "description": "Describe your package",
        "main": "dist/index.js",
        "scripts": {
            "build": "rm -rf dist && tsc",
        },
        "author": f"{user_input.user_name} <{user_input.user_email}>",
        "license": "MIT",
        "dependencies": dict(NPM_DEPENDENCIES),
        "devDependencies": dict(NPM_DEV_DEPENDENCIES),
        "customFields": {
            "clarion": {
                "api": [names.camel_api_name],
                "routes": [
                    {"path": messages_path, "element": "<Messages />"},
                    {"path": f"{messages_path}/:id", "element": "<Message />"},
                ],
                "menu": {
                    "name": f"{names.pascal_application} Application",
                    "entries": [
                        {"name": "Messages", "path": messages_path},
                    ],
                },
            },
        },
    }


def tsconfig() -> dict[str, Any]:
    """Build the static ``tsconfig.json`` document."""
    return {
        "compilerOptions": dict(TS_COMPILER_OPTIONS),
        "include": ["./src/**/*"],
    }
