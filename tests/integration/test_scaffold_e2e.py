"""Integration tests for the init-then-add workflow.

These tests run the real generator and injector against a temporary
directory and check the resulting Go source tree as a whole.  No Go
toolchain is required.
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from cobrascaffold.scaffolder import Command, CommandInjector, Project, ProjectGenerator
from cobrascaffold.scaffolder.licenses import find_license

pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def scenario_project(tmp_path: Path) -> Project:
    return Project(
        pkg_name="example.com/demo",
        copyright="Copyright © 2024 Jane Doe",
        absolute_path=tmp_path / "demo",
        legal=find_license("apache"),
        viper=True,
        app_name="demo",
    )


@pytest.fixture
def scaffolded(scenario_project: Project) -> Project:
    """Initialize the project, then add ``serve`` and ``status``."""
    ProjectGenerator(scenario_project).initialize()
    injector = CommandInjector()
    for name in ("serve", "status"):
        injector.add_command(Command(cmd_name=name, project=scenario_project))
    return scenario_project


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestDemoScenario:
    def test_all_files_exist(self, scaffolded):
        root = scaffolded.absolute_path
        for rel in (
            "cmd/demo/main.go",
            "pkg/demo/root.go",
            "pkg/demo/commands/serve.go",
            "pkg/demo/commands/status.go",
            "LICENSE",
        ):
            assert (root / rel).is_file(), rel

    def test_single_commands_import(self, scaffolded):
        root_go = scaffolded.root_path.read_text(encoding="utf-8")
        assert root_go.count('"example.com/demo/pkg/demo/commands"') == 1
        assert "//+cobra:commandsImport" not in root_go

    def test_registrations_above_single_marker(self, scaffolded):
        root_go = scaffolded.root_path.read_text(encoding="utf-8")
        assert (
            "\trootCmd.AddCommand(commands.BuildServeCmd())\n"
            "\trootCmd.AddCommand(commands.BuildStatusCmd())\n"
            "\t//+cobra:subcommands\n"
        ) in root_go
        assert root_go.count("//+cobra:subcommands") == 1

    def test_every_registration_has_a_builder(self, scaffolded):
        root_go = scaffolded.root_path.read_text(encoding="utf-8")
        registered = re.findall(r"commands\.(Build\w+Cmd)\(\)", root_go)
        defined = []
        for path in sorted(scaffolded.commands_dir.glob("*.go")):
            defined += re.findall(r"^func (Build\w+Cmd)\(\)", path.read_text(encoding="utf-8"), re.M)
        assert sorted(registered) == sorted(defined) == ["BuildServeCmd", "BuildStatusCmd"]

    def test_reinit_preserves_registrations(self, scaffolded):
        before = scaffolded.root_path.read_bytes()
        ProjectGenerator(scaffolded).initialize()
        assert scaffolded.root_path.read_bytes() == before

    def test_license_header_everywhere(self, scaffolded):
        header_line = "Licensed under the Apache License, Version 2.0"
        for path in (
            scaffolded.main_path,
            scaffolded.root_path,
            scaffolded.commands_dir / "serve.go",
        ):
            assert header_line in path.read_text(encoding="utf-8"), path

    def test_adding_more_after_reinit(self, scaffolded):
        ProjectGenerator(scaffolded).initialize()
        CommandInjector().add_command(Command(cmd_name="version", project=scaffolded))

        root_go = scaffolded.root_path.read_text(encoding="utf-8")
        serve = root_go.index("BuildServeCmd")
        status = root_go.index("BuildStatusCmd")
        version = root_go.index("BuildVersionCmd")
        assert serve < status < version < root_go.index("//+cobra:subcommands")
