"""Jinja2 template rendering for Go source scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``cobrascaffold/scaffolder/templates/`` directory and renders them with
project or command data.  Templates can also be supplied inline as strings,
which is how license texts are rendered.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)

from ..errors import TemplateRenderError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

MAIN_TEMPLATE = "main.go.j2"
ROOT_TEMPLATE = "root.go.j2"
COMMAND_TEMPLATE = "command.go.j2"


# ---------------------------------------------------------------------------
# Template function table
# ---------------------------------------------------------------------------


def title_case(value: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched.

    A word starts after any character that is neither alphanumeric nor an
    underscore.  Unlike Jinja2's builtin ``title`` filter the remaining
    letters keep their case, so ``"fooBar"`` becomes ``"FooBar"``.

    Examples::

        title_case("serve")      -> "Serve"
        title_case("fooBar")     -> "FooBar"
        title_case("foo-bar")    -> "Foo-Bar"
        title_case("foo_bar")    -> "Foo_bar"
    """
    chars: list[str] = []
    prev_is_sep = True
    for ch in value:
        chars.append(ch.upper() if prev_is_sep else ch)
        prev_is_sep = not (ch.isalnum() or ch == "_")
    return "".join(chars)


TEMPLATE_FUNCS: dict[str, Callable[[str], str]] = {
    "title": title_case,
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for Go project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Every referenced variable must be present in the
    context: a missing field raises :class:`TemplateRenderError` instead of
    rendering as an empty string.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        funcs: dict[str, Callable[[str], str]] | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters.update(TEMPLATE_FUNCS if funcs is None else funcs)

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template file with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"root.go.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.

        Raises:
            TemplateRenderError: If the template is missing, malformed, or
                references a field absent from *context*.
        """
        try:
            template = self.env.get_template(template_path)
            return template.render(**context)
        except TemplateNotFound as exc:
            raise TemplateRenderError(template_path, f"not found ({exc})") from exc
        except TemplateSyntaxError as exc:
            raise TemplateRenderError(
                template_path, f"syntax error on line {exc.lineno}: {exc.message}"
            ) from exc
        except TemplateError as exc:
            raise TemplateRenderError(template_path, str(exc)) from exc

    def render_string(
        self, template_name: str, template_string: str, context: dict[str, Any]
    ) -> str:
        """Render an inline template string with the provided context.

        *template_name* only labels error messages.
        """
        try:
            template = self.env.from_string(template_string)
            return template.render(**context)
        except TemplateSyntaxError as exc:
            raise TemplateRenderError(
                template_name, f"syntax error on line {exc.lineno}: {exc.message}"
            ) from exc
        except TemplateError as exc:
            raise TemplateRenderError(template_name, str(exc)) from exc

    def render_bytes(self, template_path: str, context: dict[str, Any]) -> bytes:
        """Like :meth:`render`, encoded as UTF-8."""
        return self.render(template_path, context).encode("utf-8")

    def render_string_bytes(
        self, template_name: str, template_string: str, context: dict[str, Any]
    ) -> bytes:
        """Like :meth:`render_string`, encoded as UTF-8."""
        return self.render_string(template_name, template_string, context).encode("utf-8")
