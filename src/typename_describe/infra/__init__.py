"""Infrastructure layer — Python runtime integration.

This layer turns live Python objects into formatted type-name strings.
It is the only place that imports ``typing`` introspection helpers.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Must satisfy the protocols defined in ``core.protocols``.
"""

from typename_describe.infra.python_formatter import (
    PythonTypeFormatter,
    default_formatter,
    format_type_name,
)

__all__: list[str] = [
    "PythonTypeFormatter",
    "default_formatter",
    "format_type_name",
]
