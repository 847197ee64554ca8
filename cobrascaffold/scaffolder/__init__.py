"""cobrascaffold scaffolder -- generates and grows cobra application sources.

``ProjectGenerator`` writes the initial skeleton for a ``Project``;
``CommandInjector`` then adds subcommands one at a time, wiring each into
the generated ``root.go`` through comment markers.

Quick usage::

    from pathlib import Path
    from cobrascaffold.scaffolder import Command, CommandInjector, Project, ProjectGenerator

    project = Project(
        pkg_name="example.com/demo",
        absolute_path=Path("/tmp/demo"),
        app_name="demo",
    )
    ProjectGenerator(project).initialize()
    CommandInjector().add_command(Command(cmd_name="serve", project=project))
"""

from cobrascaffold.scaffolder.generator import InitResult, ProjectGenerator
from cobrascaffold.scaffolder.injector import AddResult, CommandInjector
from cobrascaffold.scaffolder.licenses import find_license
from cobrascaffold.scaffolder.models import Command, License, Project
from cobrascaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "AddResult",
    "Command",
    "CommandInjector",
    "InitResult",
    "License",
    "Project",
    "ProjectGenerator",
    "TemplateRenderer",
    "find_license",
]
