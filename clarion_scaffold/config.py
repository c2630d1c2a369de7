"""Clarion scaffolder configuration.

Typed settings for a single generation run. The CLI builds one
``GeneratorConfig`` per invocation and hands it to the generator explicitly;
nothing here is read from the environment.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class GeneratorConfig(BaseModel):
    """Settings shared by every sub-generator during one run."""

    model_config = ConfigDict(frozen=True)

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory; the project folder is created inside it",
    )
    backend_url: str = Field(
        default="http://localhost:8000",
        description="Initial backend URL baked into the generated frontend config object",
    )

    def project_root(self, application: str) -> Path:
        """Return the directory the generated project is written to."""
        return self.output_dir / application
