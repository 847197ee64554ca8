"""Project skeleton generation.

Takes a ``Project`` and renders the initial Go source tree: the entry point
under ``cmd/<app>/``, the root command under ``pkg/<app>/`` and the
``LICENSE`` file at the project root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .files import WritePolicy, ensure_dir, write_file
from .models import Project
from .templates import MAIN_TEMPLATE, ROOT_TEMPLATE, TemplateRenderer


@dataclass
class InitResult:
    """Paths touched by :meth:`ProjectGenerator.initialize`."""

    project_root: Path
    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


class ProjectGenerator:
    """Bootstraps a cobra application skeleton.

    Re-running :meth:`initialize` regenerates ``main.go`` and ``LICENSE``
    but leaves an existing ``root.go`` alone, since that file accumulates
    subcommand registrations over time.
    """

    def __init__(self, project: Project, renderer: TemplateRenderer | None = None) -> None:
        self.project = project
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def initialize(self) -> InitResult:
        """Generate the project skeleton.

        Each step renders its template fully before the target file is
        opened.  A failure aborts the remaining steps; files written by the
        earlier steps stay on disk.

        Returns:
            An :class:`InitResult` listing written and skipped files.
        """
        project = self.project
        result = InitResult(project_root=project.absolute_path)
        context = project.template_context()

        # 1. Project root
        ensure_dir(project.absolute_path)

        # 2. cmd/<app>/main.go
        ensure_dir(project.cmd_app_dir)
        content = self.renderer.render_bytes(MAIN_TEMPLATE, context)
        result.written.append(write_file(project.main_path, content, WritePolicy.TRUNCATE))

        # 3. pkg/<app>/root.go, only when absent
        ensure_dir(project.pkg_app_dir)
        if project.root_path.exists():
            result.skipped.append(project.root_path)
        else:
            content = self.renderer.render_bytes(ROOT_TEMPLATE, context)
            result.written.append(
                write_file(project.root_path, content, WritePolicy.CREATE_ONLY)
            )

        # 4. LICENSE
        result.written.append(self._create_license_file())

        return result

    # -- Helpers -----------------------------------------------------------

    def _create_license_file(self) -> Path:
        """Render the license text with the project's copyright line."""
        data = {"copyright": self.project.copyright}
        content = self.renderer.render_string_bytes(
            "license", self.project.legal.text, data
        )
        return write_file(self.project.license_path, content, WritePolicy.TRUNCATE)
