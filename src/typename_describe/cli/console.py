"""CLI console and logging helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``, ``--json``) keep working when Rich is not
installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from typename_describe.exceptions import EnvironmentError

_LOG_FORMAT = "%(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def rich_available() -> bool:
    try:
        _load_rich_console_class()
    except EnvironmentError:
        return False
    return True


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def configure_logging(verbose: bool) -> None:
    """Route library log records to stderr.

    ``verbose`` lowers the threshold to DEBUG.  Rich's handler is used
    when available, a plain stream handler otherwise.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(f"%(levelname)s {_LOG_FORMAT}"))
    else:
        handler = RichHandler(
            console=get_rich_console(),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    logging.basicConfig(level=level, handlers=[handler], force=True)
