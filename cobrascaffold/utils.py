"""Shared utility functions for cobrascaffold.

Provides name normalisation for commands and applications, ``go.mod``
discovery, and Rich-based console reporting used by the CLI.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cobrascaffold.errors import InvalidNameError

console = Console()
err_console = Console(stderr=True)

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_MODULE_RE = re.compile(r"^\s*module\s+(\S+)")

# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def validate_cmd_name(name: str) -> str:
    """Normalise a command name to camelCase and check it is an identifier.

    Dashes and underscores act as word separators and are dropped; the
    letter following them is upper-cased.  The first word is kept as is.

    Examples::

        validate_cmd_name("serve")        -> "serve"
        validate_cmd_name("add-user")     -> "addUser"
        validate_cmd_name("add__user_")   -> "addUser"

    Raises:
        InvalidNameError: If the normalised name is not a valid identifier.
    """
    parts = re.split(r"[-_]+", name.strip())
    result = parts[0] + "".join(p[:1].upper() + p[1:] for p in parts[1:])
    if not _IDENTIFIER_RE.fullmatch(result):
        raise InvalidNameError(f"Invalid command name: {name!r}")
    return result


def app_name_from_pkg(pkg_name: str) -> str:
    """Derive a Go package name from the last segment of an import path.

    ``"example.com/My-App"`` -> ``"myapp"``.

    Raises:
        InvalidNameError: If nothing usable is left.
    """
    segment = pkg_name.rstrip("/").rsplit("/", 1)[-1]
    name = re.sub(r"[^a-z0-9_]", "", segment.lower())
    if not _IDENTIFIER_RE.fullmatch(name):
        raise InvalidNameError(f"Cannot derive an application name from {pkg_name!r}")
    return name


def read_module_path(project_dir: str | Path) -> str | None:
    """Return the module path declared in ``<project_dir>/go.mod``.

    Returns ``None`` if there is no ``go.mod`` or it has no module line.
    """
    go_mod = Path(project_dir) / "go.mod"
    if not go_mod.is_file():
        return None
    for line in go_mod.read_text(encoding="utf-8").splitlines():
        match = _MODULE_RE.match(line.split("//", 1)[0])
        if match:
            return match.group(1).strip('"`')
    return None


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_files_table(rows: list[tuple[str, str]], title: str = "Files") -> None:
    """Print a two-column status/path table.

    Args:
        rows: ``(status, path)`` pairs, e.g. ``("written", "pkg/demo/root.go")``.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Status", style="dim", no_wrap=True)
    table.add_column("Path")

    for status, path in rows:
        table.add_row(status, path)

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
