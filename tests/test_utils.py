"""Unit tests for utility functions (cobrascaffold.utils).

Tests cover:
- validate_cmd_name (camelCase normalisation, invalid names)
- app_name_from_pkg
- read_module_path (go.mod parsing)
- Rich output helpers
"""

from __future__ import annotations

import pytest

from cobrascaffold.errors import InvalidNameError
from cobrascaffold.utils import (
    app_name_from_pkg,
    print_error,
    print_files_table,
    print_success,
    print_warning,
    read_module_path,
    validate_cmd_name,
)


class TestValidateCmdName:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("serve", "serve"),
            ("add-user", "addUser"),
            ("add_user", "addUser"),
            ("add__user", "addUser"),
            ("add-user-", "addUser"),
            ("-user", "User"),
            ("fooBar", "fooBar"),
            ("  serve\n", "serve"),
        ],
    )
    def test_normalises(self, raw, expected):
        assert validate_cmd_name(raw) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["", "1cmd", "with space", "a.b", "---", "ser\nve"])
    def test_rejects(self, raw):
        with pytest.raises(InvalidNameError):
            validate_cmd_name(raw)

    @pytest.mark.unit
    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_cmd_name("bad name")


class TestAppNameFromPkg:
    @pytest.mark.unit
    def test_last_segment(self):
        assert app_name_from_pkg("example.com/demo") == "demo"

    @pytest.mark.unit
    def test_strips_invalid_chars(self):
        assert app_name_from_pkg("github.com/acme/My-App") == "myapp"

    @pytest.mark.unit
    def test_trailing_slash(self):
        assert app_name_from_pkg("example.com/demo/") == "demo"

    @pytest.mark.unit
    def test_single_segment(self):
        assert app_name_from_pkg("demo") == "demo"

    @pytest.mark.unit
    def test_unusable(self):
        with pytest.raises(InvalidNameError):
            app_name_from_pkg("example.com/123")


class TestReadModulePath:
    @pytest.mark.unit
    def test_reads_module(self, tmp_path):
        (tmp_path / "go.mod").write_text(
            "module example.com/demo\n\ngo 1.21\n", encoding="utf-8"
        )
        assert read_module_path(tmp_path) == "example.com/demo"

    @pytest.mark.unit
    def test_quoted_with_comment(self, tmp_path):
        (tmp_path / "go.mod").write_text(
            '// header comment\nmodule "example.com/q" // trailing\n', encoding="utf-8"
        )
        assert read_module_path(tmp_path) == "example.com/q"

    @pytest.mark.unit
    def test_missing_go_mod(self, tmp_path):
        assert read_module_path(tmp_path) is None

    @pytest.mark.unit
    def test_no_module_line(self, tmp_path):
        (tmp_path / "go.mod").write_text("go 1.21\n", encoding="utf-8")
        assert read_module_path(tmp_path) is None


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_files_table(self, capsys):
        print_files_table([("written", "pkg/demo/root.go")], title="demo")
        out = capsys.readouterr().out
        assert "pkg/demo/root.go" in out
        assert "written" in out

    @pytest.mark.unit
    def test_print_success(self, capsys):
        print_success("done")
        assert "done" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_warning(self, capsys):
        print_warning("careful")
        assert "careful" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_error_goes_to_stderr(self, capsys):
        print_error("[Errno 2] missing [bold]file[/bold]")
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "[bold]file[/bold]" in captured.err
        assert captured.out == ""
