"""Output renderers for ``typename-describe``.

Tables go to stderr through Rich (plain-text fallback when Rich is
missing); ``--json`` output goes to stdout so it can be piped.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from typename_describe.cli.console import console, rich_available
from typename_describe.core.models import TypeNameDescription


def description_to_dict(description: TypeNameDescription) -> dict[str, Any]:
    """JSON-ready mapping for one description."""
    return {
        "type_name": description.type_name,
        "root": description.root,
        "parameters": list(description.parameters),
        "is_generic": description.is_generic,
    }


def render_json(
    descriptions: Sequence[TypeNameDescription],
    stream: TextIO | None = None,
) -> None:
    """Write *descriptions* as a JSON array to *stream* (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    json.dump([description_to_dict(d) for d in descriptions], out, indent=2)
    out.write("\n")


def _parameters_cell(description: TypeNameDescription) -> str:
    if description.parameters:
        return "\n".join(description.parameters)
    return "-"


def _print_plain_table(descriptions: Sequence[TypeNameDescription]) -> None:
    """Render the table without Rich."""
    print(f"{'Type name':<40} {'Root':<20} Parameters", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for description in descriptions:
        params = ", ".join(f"[{p}]" for p in description.parameters) or "-"
        print(f"{description.type_name:<40} {description.root:<20} {params}", file=sys.stderr)


def render_table(descriptions: Sequence[TypeNameDescription]) -> None:
    """Render *descriptions* as a summary table on stderr."""
    if not rich_available():
        _print_plain_table(descriptions)
        return

    from rich.markup import escape
    from rich.table import Table

    table = Table(
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Type name", style="bold")
    table.add_column("Root")
    table.add_column("Parameters")
    table.add_column("Generic", justify="center")

    for description in descriptions:
        generic = "[green]yes[/green]" if description.is_generic else "[dim]no[/dim]"
        table.add_row(
            escape(description.type_name),
            escape(description.root),
            escape(_parameters_cell(description)),
            generic,
        )

    console.print(table)
