"""Name derivation for Clarion application identifiers.

Turns a raw identifier such as ``@acme/test-app`` into the organization and
application parts plus the case variants used throughout the generated
files::

    derive("@acme/test-app").pascal_application  -> "TestApp"
    derive("@acme/test-app").camel_api_name      -> "testAppApi"

Case conversion uses Python's own ``str.upper``/``str.lower``; no Unicode
normalization is attempted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from clarion_scaffold.errors import InvalidAppNameError

API_SUFFIX = "Api"
API_FILE_EXT = ".ts"

# The application name becomes a directory name under the output directory
_RELATIVE_SEGMENTS = frozenset({".", ".."})


class DerivedNames(BaseModel):
    """Every identifier variant computed from one ``full_app_name``."""

    model_config = ConfigDict(frozen=True)

    organization: str
    application: str
    pascal_organization: str
    pascal_application: str
    camel_api_name: str
    api_file_name: str

    @property
    def php_namespace(self) -> str:
        """PSR-4 namespace, e.g. ``Acme\\TestApp``."""
        return f"{self.pascal_organization}\\{self.pascal_application}"

    @property
    def provider_class(self) -> str:
        return f"{self.pascal_application}ServiceProvider"

    @property
    def route_prefix(self) -> str:
        """Backend API prefix used by the generated base query."""
        return f"/api/{self.organization}/{self.application}"

    @property
    def frontend_route_base(self) -> str:
        return f"/{self.organization}/{self.application}"


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------


def _capitalize(segment: str) -> str:
    return segment[:1].upper() + segment[1:].lower()


def to_pascal_case(value: str) -> str:
    """Convert ``test-app`` to ``TestApp``.

    Empty segments (from leading, trailing or doubled hyphens) contribute
    nothing.
    """
    return "".join(_capitalize(part) for part in value.split("-") if part)


def to_camel_api_name(value: str) -> str:
    """Convert ``test-app`` to ``testAppApi``."""
    first, *rest = value.split("-")
    return first.lower() + "".join(_capitalize(part) for part in rest if part) + API_SUFFIX


# ---------------------------------------------------------------------------
# Identifier splitting
# ---------------------------------------------------------------------------


def split_app_name(full_app_name: str) -> tuple[str, str]:
    """Split ``@organization/application`` into its two parts.

    At most one leading ``@`` is stripped. The remainder must hold exactly
    one ``/`` with text on both sides, neither side may be ``.`` or ``..``,
    and the application may not contain a backslash.

    Raises:
        InvalidAppNameError: If the identifier does not have that shape.
    """
    trimmed = full_app_name.strip()
    if trimmed.startswith("@"):
        trimmed = trimmed[1:]

    organization, sep, application = trimmed.partition("/")
    if not sep:
        raise InvalidAppNameError(full_app_name, "missing '/' separator")
    if "/" in application:
        raise InvalidAppNameError(full_app_name, "more than one '/' separator")
    if not organization:
        raise InvalidAppNameError(full_app_name, "organization name is empty")
    if not application:
        raise InvalidAppNameError(full_app_name, "application name is empty")
    if organization in _RELATIVE_SEGMENTS:
        raise InvalidAppNameError(full_app_name, f"organization name cannot be {organization!r}")
    if application in _RELATIVE_SEGMENTS:
        raise InvalidAppNameError(full_app_name, f"application name cannot be {application!r}")
    if "\\" in application:
        raise InvalidAppNameError(full_app_name, "application name cannot contain a backslash")
    return organization, application


def derive(full_app_name: str) -> DerivedNames:
    """Compute every derived name for *full_app_name*.

    Deterministic: depends on nothing but the argument.
    """
    organization, application = split_app_name(full_app_name)
    camel_api_name = to_camel_api_name(application)
    return DerivedNames(
        organization=organization,
        application=application,
        pascal_organization=to_pascal_case(organization),
        pascal_application=to_pascal_case(application),
        camel_api_name=camel_api_name,
        api_file_name=f"{camel_api_name}{API_FILE_EXT}",
    )
