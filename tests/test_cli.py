"""Tests for the CLI commands and renderers (cli/app.py, cli/render.py).

Coverage:
* JSON output on stdout, table output on stderr
* ``--balanced`` and ``--strict`` mapping to ParseOptions
* Reading names from stdin via ``-``
* The ``cli()`` error boundary and its exit codes
* ``--verbose`` logging setup
"""

from __future__ import annotations

import io
import json
import logging

import pytest

from typename_describe.cli import exit_codes
from typename_describe.cli.app import cli, describe_names, main
from typename_describe.cli.render import description_to_dict, render_json
from typename_describe.core.models import ParseOptions
from typename_describe.core.parser import parse_type_name


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _run_json(argv: list[str], capsys: pytest.CaptureFixture[str]) -> list[dict[str, object]]:
    code = main(["--json", *argv])
    assert code == exit_codes.SUCCESS
    return json.loads(capsys.readouterr().out)


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------

class TestJsonOutput:
    def test_single_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        payload = _run_json(["Dictionary<String, (Int, String)>"], capsys)
        assert payload == [
            {
                "type_name": "Dictionary<String, (Int, String)>",
                "root": "Dictionary",
                "parameters": ["String", "(Int, String)"],
                "is_generic": True,
            }
        ]

    def test_order_is_preserved(self, capsys: pytest.CaptureFixture[str]) -> None:
        payload = _run_json(["B<X>", "A", "C<>"], capsys)
        assert [entry["root"] for entry in payload] == ["B", "A", "C"]
        assert payload[2]["parameters"] == []
        assert payload[2]["is_generic"] is True

    def test_balanced_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        payload = _run_json(["--balanced", "A<B>.C<D>"], capsys)
        assert payload[0]["parameters"] == ["B"]

    def test_stdin_marker(
        self,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("Array<Int>\n\n  Plain  \n"))
        payload = _run_json(["-"], capsys)
        assert [entry["type_name"] for entry in payload] == ["Array<Int>", "Plain"]

    def test_render_json_to_stream(self) -> None:
        stream = io.StringIO()
        render_json([parse_type_name("Foo<A>")], stream)
        assert json.loads(stream.getvalue())[0]["parameters"] == ["A"]

    def test_description_to_dict(self) -> None:
        assert description_to_dict(parse_type_name("Plain")) == {
            "type_name": "Plain",
            "root": "Plain",
            "parameters": [],
            "is_generic": False,
        }


# ---------------------------------------------------------------------------
# Table output
# ---------------------------------------------------------------------------

class TestTableOutput:
    def test_table_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["GenericStruct<Int, String>"])
        captured = capsys.readouterr()
        assert code == exit_codes.SUCCESS
        assert captured.out == ""
        assert "GenericStruct" in captured.err

    def test_bracketed_names_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["list[int]"])
        assert "list[int]" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# describe_names
# ---------------------------------------------------------------------------

class TestDescribeNames:
    def test_applies_options(self) -> None:
        result = describe_names(["A<B>.C<D>"], ParseOptions(balanced=True))
        assert result[0].parameters == ("B",)

    def test_empty_input(self) -> None:
        assert describe_names([], ParseOptions()) == []


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_strict_failure_exits_general_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.argv", ["typename-describe", "--strict", "Foo<Bar"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "Hint:" in err

    def test_success_exits_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["typename-describe", "--json", "Foo<A>"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from typename_describe.cli import app as app_module

        def _interrupt(argv: list[str] | None = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from typename_describe.cli import app as app_module

        def _explode(argv: list[str] | None = None) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr(app_module, "main", _explode)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestVerbose:
    def test_verbose_enables_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            main(["--verbose", "--json", "Foo<A>"])
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
