"""Command-line entry point for cobrascaffold.

Two subcommands:

``init``
    Create the skeleton of a cobra application (``main.go``, ``root.go``,
    ``LICENSE``).
``add``
    Generate a subcommand under ``pkg/<app>/commands/`` and register it in
    ``root.go``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from cobrascaffold import __version__
from cobrascaffold.config import Config
from cobrascaffold.errors import ScaffoldError
from cobrascaffold.scaffolder import Command, CommandInjector, Project, ProjectGenerator
from cobrascaffold.scaffolder.licenses import license_names
from cobrascaffold.utils import (
    app_name_from_pkg,
    print_error,
    print_files_table,
    print_success,
    print_warning,
    read_module_path,
    validate_cmd_name,
)


# ---------------------------------------------------------------------------
# Project construction
# ---------------------------------------------------------------------------


def _load_config(args: argparse.Namespace) -> Config:
    """Resolve config file + environment, then apply CLI flags on top."""
    config = Config.resolve(Path(args.config) if args.config else None)
    overrides: dict[str, object] = {}
    if getattr(args, "author", None):
        overrides["author"] = args.author
    if getattr(args, "license", None):
        overrides["license"] = args.license
    if getattr(args, "viper", None) is not None:
        overrides["use_viper"] = args.viper
    return config.model_copy(update=overrides) if overrides else config


def _build_project(args: argparse.Namespace, project_dir: Path, config: Config) -> Project:

    pkg_name = args.pkg_name or read_module_path(project_dir)
    if not pkg_name:
        raise ScaffoldError(
            f"No --pkg-name given and no go.mod module found in {project_dir}"
        )
    app_name = args.app_name or app_name_from_pkg(pkg_name)

    return Project(
        pkg_name=pkg_name,
        copyright=config.copyright_line(),
        absolute_path=project_dir,
        legal=config.get_license(),
        viper=config.use_viper,
        app_name=app_name,
    )


def _relative(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def init_cmd(args: argparse.Namespace) -> None:
    project_dir = Path(args.path).resolve()
    config = _load_config(args)
    project = _build_project(args, project_dir, config)

    result = ProjectGenerator(project).initialize()

    rows = [("written", _relative(p, project_dir)) for p in result.written]
    rows += [("kept", _relative(p, project_dir)) for p in result.skipped]
    print_files_table(rows, title=f"{project.app_name} ({project.pkg_name})")
    for path in result.skipped:
        print_warning(f"{_relative(path, project_dir)} already exists, left unchanged")

    if args.save_config:
        saved = config.save(Path(args.config) if args.config else None)
        print_success(f"Saved configuration to {saved}")
    print_success(f"Your cobra application is ready at {project_dir}")


def add_cmd(args: argparse.Namespace) -> None:
    project_dir = Path(args.path).resolve()
    project = _build_project(args, project_dir, _load_config(args))

    cmd_name = validate_cmd_name(args.name)
    parent = validate_cmd_name(args.parent) if args.parent else ""
    command = Command(cmd_name=cmd_name, cmd_parent=parent, project=project)

    result = CommandInjector().add_command(command)

    rows = [
        ("written", _relative(result.command_path, project_dir)),
        ("updated", _relative(result.root_path, project_dir)),
    ]
    print_files_table(rows, title=f"{cmd_name} command")
    print_success(f"{cmd_name} created at {result.command_path}")


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _add_project_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--pkg-name",
        default=None,
        help="Go module import path (default: module line of go.mod)",
    )
    parser.add_argument(
        "--app-name",
        default=None,
        help="Application package name (default: last segment of the module path)",
    )
    parser.add_argument(
        "--author", "-a",
        default=None,
        help="Author name for the copyright line",
    )
    parser.add_argument(
        "--license", "-l",
        default=None,
        help=f"License to use ({', '.join(license_names())} or custom)",
    )
    parser.add_argument(
        "--viper",
        dest="viper",
        action="store_true",
        default=None,
        help="Use viper for configuration",
    )
    parser.add_argument(
        "--no-viper",
        dest="viper",
        action="store_false",
        help="Do not use viper for configuration",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config file (default: ~/.cobra-scaffold.json)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cobra-scaffold",
        description="Scaffold cobra applications and their subcommands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  cobra-scaffold init ./demo --pkg-name example.com/demo\n"
            "  cobra-scaffold add serve --path ./demo --pkg-name example.com/demo\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init", help="Initialize a cobra application")
    init.add_argument("path", nargs="?", default=".", help="Project directory (default: .)")
    _add_project_args(init)
    init.add_argument(
        "--save-config",
        action="store_true",
        help="Write the resolved author/license/viper settings to the config file",
    )
    init.set_defaults(func=init_cmd)

    add = sub.add_parser("add", help="Add a command to a cobra application")
    add.add_argument("name", help="Command name")
    add.add_argument("--parent", "-p", default="", help="Parent command name (reserved)")
    add.add_argument("--path", default=".", help="Project directory (default: .)")
    _add_project_args(add)
    add.set_defaults(func=add_cmd)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``cobra-scaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.func(args)
    except ValidationError as exc:
        print_error(str(exc))
        sys.exit(1)
    except (ScaffoldError, OSError) as exc:
        print_error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
