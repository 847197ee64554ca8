"""Pydantic models describing what gets scaffolded.

A ``Project`` is built once per invocation and never mutated; the files it
produces on disk are its only durable form.  A ``Command`` borrows its
``Project`` for the duration of a single ``add`` request.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .templates import title_case

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

ROOT_FILE = "root.go"
MAIN_FILE = "main.go"
LICENSE_FILE = "LICENSE"
COMMANDS_PACKAGE = "commands"
SOURCE_EXT = ".go"


def _check_identifier(value: str, what: str) -> str:
    if not _IDENTIFIER_RE.fullmatch(value):
        raise ValueError(f"{what} {value!r} is not a valid identifier")
    return value


class License(BaseModel):
    """A license: the LICENSE file template plus a source-file header."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name, e.g. 'MIT License'")
    possible_matches: list[str] = Field(
        default_factory=list,
        description="Lower-case aliases accepted by the registry lookup",
    )
    header: str = Field(default="", description="Snippet for generated source comments")
    text: str = Field(default="", description="Jinja2 template for the LICENSE file")


class Project(BaseModel):
    """The Go project being scaffolded."""

    model_config = ConfigDict(frozen=True)

    pkg_name: str = Field(..., min_length=1, description="Go module import path")
    copyright: str = Field(default="", description="Copyright line for file headers")
    absolute_path: Path = Field(..., description="Project root directory")
    legal: License = Field(default_factory=lambda: License(name="None"))
    viper: bool = Field(default=False, description="Wire in viper config-file support")
    app_name: str = Field(..., description="Application and Go package name")

    @field_validator("app_name")
    @classmethod
    def _app_name_is_identifier(cls, value: str) -> str:
        return _check_identifier(value, "application name")

    @field_validator("absolute_path")
    @classmethod
    def _path_is_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"project path {str(value)!r} must be absolute")
        return value

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def cmd_app_dir(self) -> Path:
        """``<root>/cmd/<app>``"""
        return self.absolute_path / "cmd" / self.app_name

    @property
    def main_path(self) -> Path:
        return self.cmd_app_dir / MAIN_FILE

    @property
    def pkg_app_dir(self) -> Path:
        """``<root>/pkg/<app>``"""
        return self.absolute_path / "pkg" / self.app_name

    @property
    def root_path(self) -> Path:
        """The root command file that ``add`` rewrites in place."""
        return self.pkg_app_dir / ROOT_FILE

    @property
    def commands_dir(self) -> Path:
        return self.pkg_app_dir / COMMANDS_PACKAGE

    @property
    def license_path(self) -> Path:
        return self.absolute_path / LICENSE_FILE

    @property
    def commands_import_path(self) -> str:
        """Go import path of the shared commands package."""
        return f"{self.pkg_name}/pkg/{self.app_name}/{COMMANDS_PACKAGE}"

    def template_context(self) -> dict[str, Any]:
        """Variables visible to the main and root templates."""
        return self.model_dump()


class Command(BaseModel):
    """One subcommand to add to an initialized project."""

    model_config = ConfigDict(frozen=True)

    cmd_name: str = Field(..., description="Subcommand name")
    # Reserved for nested commands; nothing consumes it yet.
    cmd_parent: str = Field(default="")
    project: Project

    @field_validator("cmd_name")
    @classmethod
    def _cmd_name_is_identifier(cls, value: str) -> str:
        return _check_identifier(value, "command name")

    @property
    def builder_name(self) -> str:
        """Go function that builds this command, e.g. ``BuildServeCmd``."""
        return f"Build{title_case(self.cmd_name)}Cmd"

    @property
    def path(self) -> Path:
        return self.project.commands_dir / f"{self.cmd_name}{SOURCE_EXT}"

    def template_context(self) -> dict[str, Any]:
        """Variables visible to the command template."""
        return {
            "cmd_name": self.cmd_name,
            "cmd_parent": self.cmd_parent,
            "project": self.project.model_dump(),
        }
