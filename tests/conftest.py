"""Shared pytest fixtures for the cobrascaffold test suite.

Provides reusable fixtures for:
- Temporary project directories
- Sample licenses, projects and commands
- An already-initialized project on disk
- Isolation from the user's config file and environment
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cobrascaffold.scaffolder import Command, License, Project, ProjectGenerator


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config path into tmp and clear COBRA_SCAFFOLD_* vars."""
    config_path = tmp_path / "home" / ".cobra-scaffold.json"
    monkeypatch.setattr("cobrascaffold.config.DEFAULT_CONFIG_PATH", config_path)
    for var in (
        "COBRA_SCAFFOLD_AUTHOR",
        "COBRA_SCAFFOLD_YEAR",
        "COBRA_SCAFFOLD_LICENSE",
        "COBRA_SCAFFOLD_VIPER",
    ):
        monkeypatch.delenv(var, raising=False)
    return config_path


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary directory for a generated project (not created yet)."""
    return tmp_path / "demo"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_license() -> License:
    """A small license with a header and a copyright placeholder."""
    return License(
        name="Test License",
        possible_matches=["test"],
        header="Licensed for testing only.",
        text="Test License\n\n{{ copyright }}\n",
    )


@pytest.fixture
def demo_project(tmp_project_dir: Path, sample_license: License) -> Project:
    """The ``demo`` project from the reference scenario."""
    return Project(
        pkg_name="example.com/demo",
        copyright="Copyright © 2024 Jane Doe",
        absolute_path=tmp_project_dir,
        legal=sample_license,
        viper=False,
        app_name="demo",
    )


@pytest.fixture
def viper_project(tmp_project_dir: Path, sample_license: License) -> Project:
    """Same as ``demo_project`` with viper support switched on."""
    return Project(
        pkg_name="example.com/demo",
        copyright="Copyright © 2024 Jane Doe",
        absolute_path=tmp_project_dir,
        legal=sample_license,
        viper=True,
        app_name="demo",
    )


@pytest.fixture
def initialized_project(demo_project: Project) -> Project:
    """``demo_project`` with its skeleton already written to disk."""
    ProjectGenerator(demo_project).initialize()
    return demo_project


@pytest.fixture
def make_command(demo_project: Project):
    """Factory building a Command for ``demo_project``."""

    def _make(name: str, parent: str = "") -> Command:
        return Command(cmd_name=name, cmd_parent=parent, project=demo_project)

    return _make
