"""Exception hierarchy for cobrascaffold.

Filesystem failures are not wrapped: they surface as the ``OSError``
subclasses raised by the standard library.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error raised by the scaffolder itself."""


class TemplateRenderError(ScaffoldError):
    """Raised when a template cannot be parsed or references a missing field."""

    def __init__(self, template_name: str, message: str) -> None:
        self.template_name = template_name
        super().__init__(f"Template {template_name!r}: {message}")


class ProjectNotInitializedError(ScaffoldError):
    """Raised when a command is added before the root file was generated."""

    def __init__(self, root_path: Path) -> None:
        self.root_path = root_path
        super().__init__(
            f"Root command file not found at {root_path}; "
            "run 'cobra-scaffold init' first"
        )


class UnknownLicenseError(ScaffoldError):
    """Raised when a license name matches nothing in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown license: {name!r}")


class InvalidNameError(ScaffoldError, ValueError):
    """Raised for application or command names that are not identifier-safe."""
