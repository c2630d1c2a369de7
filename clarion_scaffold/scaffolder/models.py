"""Immutable data models passed between the deriver, renderer and writer."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class UserInput(BaseModel):
    """The three values collected from the user, kept exactly as typed."""

    model_config = ConfigDict(frozen=True)

    user_name: str = Field(..., description="Free-form display name")
    user_email: str = Field(..., description="Email address (not validated)")
    full_app_name: str = Field(..., description="Identifier such as @acme/test-app")


class OutputNode(BaseModel):
    """One planned directory or file, relative to the output directory."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Relative POSIX path")
    kind: Literal["directory", "file"] = "file"
    content: str = ""

    @property
    def is_directory(self) -> bool:
        return self.kind == "directory"


def directory(path: str) -> OutputNode:
    """Shorthand for a directory node."""
    return OutputNode(path=path, kind="directory")


def file(path: str, content: str) -> OutputNode:
    """Shorthand for a file node."""
    return OutputNode(path=path, kind="file", content=content)
