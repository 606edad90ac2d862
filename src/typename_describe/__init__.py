"""typename-describe — root names and generic parameters of formatted type names.

Splits strings such as ``Dictionary<String, Array<Int>>`` into a root
name and an ordered list of top-level generic parameters, with an
optional Python formatter that produces such strings from live types.
"""

from typename_describe.core import (
    ParseOptions,
    TypeNameDescription,
    TypeNameFormatter,
    TypeNameService,
    generic_parameter_names,
    has_generic_marker,
    has_generic_parameters,
    parse_type_name,
    root_type_name,
    split_parameters,
)
from typename_describe.describable import TypeNameDescribable
from typename_describe.infra import PythonTypeFormatter, format_type_name
from typename_describe.version import __version__

__all__: list[str] = [
    "ParseOptions",
    "PythonTypeFormatter",
    "TypeNameDescribable",
    "TypeNameDescription",
    "TypeNameFormatter",
    "TypeNameService",
    "__version__",
    "format_type_name",
    "generic_parameter_names",
    "has_generic_marker",
    "has_generic_parameters",
    "parse_type_name",
    "root_type_name",
    "split_parameters",
]
