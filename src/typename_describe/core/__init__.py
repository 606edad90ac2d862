"""Core layer — pure type-name parsing and orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from typename_describe.core.describe_service import TypeNameService
from typename_describe.core.models import ParseOptions, TypeNameDescription
from typename_describe.core.parser import (
    find_generic_span,
    generic_parameter_names,
    has_generic_marker,
    has_generic_parameters,
    parse_type_name,
    parse_with_options,
    root_type_name,
)
from typename_describe.core.protocols import SupportsTypeName, TypeNameFormatter
from typename_describe.core.splitter import split_parameters

__all__: list[str] = [
    "ParseOptions",
    "SupportsTypeName",
    "TypeNameDescription",
    "TypeNameFormatter",
    "TypeNameService",
    "find_generic_span",
    "generic_parameter_names",
    "has_generic_marker",
    "has_generic_parameters",
    "parse_type_name",
    "parse_with_options",
    "root_type_name",
    "split_parameters",
]
