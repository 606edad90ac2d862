"""Allow ``python -m typename_describe`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m typename_describe`` behaves identically to the
``typename-describe`` console script.
"""

from __future__ import annotations

from typename_describe.cli.app import cli

if __name__ == "__main__":
    cli()
