"""cobrascaffold configuration.

User-level defaults for scaffolding (author, license, viper support).  Uses a
Pydantic v2 model so values are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from cobrascaffold.scaffolder.licenses import DEFAULT_LICENSE, custom_license, find_license
from cobrascaffold.scaffolder.models import License

DEFAULT_CONFIG_PATH = Path.home() / ".cobra-scaffold.json"

CUSTOM_LICENSE = "custom"

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """User defaults applied to every generated project.

    Instances are typically created once by the CLI entry point with
    :meth:`resolve` and then used to build a ``Project``.
    """

    author: str = Field(default="", description="Name used in the copyright line")
    year: str = Field(default="", description="Copyright year; empty means the current year")
    license: str = Field(default=DEFAULT_LICENSE, description="License registry name or 'custom'")
    use_viper: bool = Field(default=False, description="Generate viper config-file support")
    license_header: str = Field(default="", description="Header for a custom license")
    license_text: str = Field(default="", description="LICENSE template for a custom license")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def copyright_line(self) -> str:
        """Return ``"Copyright © <year> <author>"``."""
        year = self.year or str(date.today().year)
        return f"Copyright © {year} {self.author}".rstrip()

    def get_license(self) -> License:
        """Resolve the configured license.

        Raises:
            UnknownLicenseError: If ``license`` is not in the registry.
        """
        if self.license.strip().lower() == CUSTOM_LICENSE:
            return custom_license(self.license_header, self.license_text)
        return find_license(self.license)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``~/.cobra-scaffold.json``.

        Returns:
            The path where the file was written.
        """
        target = path or DEFAULT_CONFIG_PATH
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def env_overrides(cls) -> dict[str, Any]:
        """Collect overrides from environment variables.

        Recognised variables (all optional):
            COBRA_SCAFFOLD_AUTHOR, COBRA_SCAFFOLD_YEAR,
            COBRA_SCAFFOLD_LICENSE, COBRA_SCAFFOLD_VIPER.
        """
        overrides: dict[str, Any] = {}
        if os.environ.get("COBRA_SCAFFOLD_AUTHOR"):
            overrides["author"] = os.environ["COBRA_SCAFFOLD_AUTHOR"]
        if os.environ.get("COBRA_SCAFFOLD_YEAR"):
            overrides["year"] = os.environ["COBRA_SCAFFOLD_YEAR"]
        if os.environ.get("COBRA_SCAFFOLD_LICENSE"):
            overrides["license"] = os.environ["COBRA_SCAFFOLD_LICENSE"]
        if os.environ.get("COBRA_SCAFFOLD_VIPER"):
            overrides["use_viper"] = os.environ["COBRA_SCAFFOLD_VIPER"].strip().lower() in _TRUTHY
        return overrides

    @classmethod
    def resolve(cls, path: Path | None = None) -> "Config":
        """Load the config file (if any) and apply environment overrides.

        An explicit *path* must exist; the default path is optional.
        """
        if path is not None:
            base = cls.load(path)
        elif DEFAULT_CONFIG_PATH.is_file():
            base = cls.load(DEFAULT_CONFIG_PATH)
        else:
            base = cls()
        overrides = cls.env_overrides()
        if not overrides:
            return base
        return base.model_copy(update=overrides)
