"""Exceptions raised by the Clarion scaffolder."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for every error the generator raises on purpose."""


class InvalidAppNameError(ScaffoldError, ValueError):
    """Raised when an application identifier is not ``@organization/application``."""

    def __init__(self, full_app_name: str, reason: str) -> None:
        self.full_app_name = full_app_name
        self.reason = reason
        super().__init__(
            f"Invalid application name {full_app_name!r}: {reason} "
            "(expected format: @organization-name/app-name)"
        )
