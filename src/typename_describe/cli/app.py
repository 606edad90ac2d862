"""CLI application entry point for typename-describe.

This module is the **sole error boundary** for the application.  It
catches :class:`~typename_describe.exceptions.TypeNameError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Usage::

    typename-describe "Dictionary<String, Array<Int>>"
    typename-describe --json "Foo<A, (B, C)>" "Bar"
    printf 'A<B>\\nC\\n' | typename-describe -
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator

from typename_describe.cli import exit_codes
from typename_describe.cli.console import configure_logging, console
from typename_describe.core.models import ParseOptions, TypeNameDescription
from typename_describe.core.parser import parse_with_options
from typename_describe.exceptions import TypeNameError
from typename_describe.version import __version__

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="typename-describe",
        description="Split formatted type names into root name and generic parameters.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help="Formatted type names, e.g. 'Array<Int>'. Use '-' to read one per line from stdin.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON array to stdout instead of a table.",
    )
    parser.add_argument(
        "--balanced",
        action="store_true",
        help="End the generic span at the '>' matching the first '<' "
        "instead of the last '>' in the name.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unbalanced brackets instead of returning a best-effort split.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


# ---------------------------------------------------------------------------
# Input collection
# ---------------------------------------------------------------------------

def _iter_names(names: Iterable[str]) -> Iterator[str]:
    """Expand the stdin marker into the non-blank lines of stdin."""
    for name in names:
        if name != STDIN_MARKER:
            yield name
            continue
        for line in sys.stdin:
            stripped = line.strip()
            if stripped:
                yield stripped


def describe_names(names: Iterable[str], options: ParseOptions) -> list[TypeNameDescription]:
    """Parse every name with *options*, in input order."""
    descriptions = []
    for name in _iter_names(names):
        logger.debug("Describing %r", name)
        descriptions.append(parse_with_options(name, options))
    return descriptions


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the typename-describe CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.names:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.verbose:
        configure_logging(verbose=True)

    options = ParseOptions(balanced=args.balanced, strict=args.strict)
    descriptions = describe_names(args.names, options)

    from typename_describe.cli.render import render_json, render_table

    if args.json:
        render_json(descriptions)
    else:
        render_table(descriptions)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TypeNameError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
