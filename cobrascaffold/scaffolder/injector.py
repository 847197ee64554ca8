"""Subcommand generation and marker-based injection into ``root.go``.

The root command file is treated as opaque bytes containing two sentinel
comments:

``//+cobra:commandsImport``
    Replaced by the import of the shared commands package the first time a
    subcommand is added.  Once consumed it is gone, and later replacements
    are no-ops: every subcommand lives in the same package, so one import
    line is all the file ever needs.

``//+cobra:subcommands``
    Replaced by a registration statement followed by the marker itself, so
    it is still there for the next subcommand.  Registrations pile up
    directly above it in the order they were added.

No locking is done.  Two ``add`` runs racing on the same project both read
the old file and the later write wins, dropping the other registration.
The scaffolder is meant for a single developer running one command at a
time.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..errors import ProjectNotInitializedError
from .files import WritePolicy, ensure_dir, replace_file, write_file
from .models import Command, Project
from .templates import COMMAND_TEMPLATE, TemplateRenderer

IMPORT_MARKER = b"//+cobra:commandsImport"
SUBCOMMANDS_MARKER = b"//+cobra:subcommands"


@dataclass
class AddResult:
    """Outcome of :meth:`CommandInjector.add_command`."""

    command_path: Path
    root_path: Path
    import_injected: bool


# ---------------------------------------------------------------------------
# Pure injection helpers
# ---------------------------------------------------------------------------


def inject_import(content: bytes, project: Project) -> bytes:
    """Replace the first import marker with the commands package import.

    Content without the marker is returned unchanged.
    """
    import_line = f'"{project.commands_import_path}"'.encode("utf-8")
    return content.replace(IMPORT_MARKER, import_line, 1)


def registration_statement(command: Command) -> bytes:
    """Go statement that registers *command* with the root command."""
    return f"rootCmd.AddCommand(commands.{command.builder_name}())".encode("utf-8")


def inject_registration(content: bytes, command: Command) -> bytes:
    """Insert the registration for *command* directly above the marker.

    The marker is re-emitted after the statement, keeping it available for
    the next call.
    """
    replacement = registration_statement(command) + b"\n\t" + SUBCOMMANDS_MARKER
    return content.replace(SUBCOMMANDS_MARKER, replacement, 1)


# ---------------------------------------------------------------------------
# CommandInjector
# ---------------------------------------------------------------------------


class CommandInjector:
    """Adds subcommands to a project created by ``ProjectGenerator``."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def add_command(self, command: Command) -> AddResult:
        """Generate ``commands/<name>.go`` and register it in ``root.go``.

        Args:
            command: The subcommand to add, referencing its project.

        Returns:
            An :class:`AddResult` describing what was written.

        Raises:
            ProjectNotInitializedError: If ``root.go`` does not exist.  Nothing
                is written in that case.
            TemplateRenderError: If the command template fails to render.
        """
        project = command.project
        root_path = project.root_path

        try:
            root_content = root_path.read_bytes()
        except FileNotFoundError as exc:
            raise ProjectNotInitializedError(root_path) from exc

        ensure_dir(project.commands_dir)

        rendered = self.renderer.render_bytes(COMMAND_TEMPLATE, command.template_context())
        write_file(command.path, rendered, WritePolicy.TRUNCATE)

        updated = inject_import(root_content, project)
        import_injected = updated != root_content
        updated = inject_registration(updated, command)

        replace_file(root_path, updated)
        return AddResult(
            command_path=command.path,
            root_path=root_path,
            import_injected=import_injected,
        )
