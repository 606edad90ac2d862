"""Root-name and generic-parameter extraction from formatted type names.

Every function here is **pure**: the input is treated as an opaque
string, nothing is cached, and the default mode never raises.

Span selection
--------------
By default the generic span runs from the *first* ``<`` to the *last*
``>`` in the string.  That captures the full nested span of the
top-level type for names such as ``Dictionary<String, Array<Int>>``.
With ``balanced=True`` the span instead ends at the ``>`` that closes
the first ``<``, which only matters when the name carries more than one
top-level bracket group (``Outer<A>.Inner<B>``).
"""

from __future__ import annotations

import logging

from typename_describe.core.models import ParseOptions, TypeNameDescription
from typename_describe.core.splitter import split_parameters
from typename_describe.exceptions import STRICT_MODE_HINT, MalformedTypeNameError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Span selection
# ---------------------------------------------------------------------------

def _balanced_close(type_name: str, start: int) -> int | None:
    """Return the index of the ``>`` closing the ``<`` at *start*."""
    depth = 0
    for index in range(start, len(type_name)):
        char = type_name[index]
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth == 0:
                return index
    return None


def find_generic_span(type_name: str, *, balanced: bool = False) -> tuple[int, int] | None:
    """Return ``(open_index, close_index)`` of the generic span, or ``None``.

    ``None`` means "no generics": either bracket is missing, the first
    ``<`` sits after the last ``>``, or (balanced mode) the first ``<``
    is never closed.
    """
    start = type_name.find("<")
    if start == -1:
        return None

    if balanced:
        end = _balanced_close(type_name, start)
    else:
        last = type_name.rfind(">")
        end = last if last > start else None

    if end is None:
        logger.debug("No generic span in %r", type_name)
        return None
    return start, end


def _malformed(type_name: str, message: str, position: int | None) -> MalformedTypeNameError:
    logger.debug("Strict parse rejected %r: %s", type_name, message)
    return MalformedTypeNameError(
        message,
        type_name=type_name,
        position=position,
        hint=STRICT_MODE_HINT,
    )


def _validate(type_name: str, span: tuple[int, int] | None) -> None:
    """Strict-mode checks that do not depend on the interior split.

    The whole string must balance, and no angle bracket may follow the
    generic span.
    """
    split_parameters(type_name, strict=True)
    if span is None:
        return

    tail = type_name[span[1] + 1:]
    for offset, char in enumerate(tail):
        if char in "<>":
            raise _malformed(
                type_name,
                "Angle bracket after the end of the generic span.",
                span[1] + 1 + offset,
            )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_type_name(
    type_name: str,
    *,
    balanced: bool = False,
    strict: bool = False,
) -> TypeNameDescription:
    """Split *type_name* into its root name and top-level generic parameters.

    Examples
    --------
    >>> parse_type_name("Dictionary<String, (Int, String)>").as_tuple()
    ('Dictionary', ['String', '(Int, String)'])
    >>> parse_type_name("TestClass").as_tuple()
    ('TestClass', [])

    Raises
    ------
    MalformedTypeNameError
        Only when *strict* is set and the brackets do not balance.
    """
    span = find_generic_span(type_name, balanced=balanced)
    if strict:
        _validate(type_name, span)

    if span is None:
        return TypeNameDescription(type_name=type_name, root=type_name)

    start, end = span
    root = type_name[:start]
    interior = type_name[start + 1:end]
    if not interior.strip():
        return TypeNameDescription(type_name=type_name, root=root)

    try:
        parameters = split_parameters(interior, strict=strict)
    except MalformedTypeNameError as exc:
        # Re-anchor the error on the full name rather than the interior.
        position = None if exc.position is None else exc.position + start + 1
        raise _malformed(type_name, str(exc), position) from exc

    return TypeNameDescription(
        type_name=type_name,
        root=root,
        parameters=tuple(parameters),
    )


def parse_with_options(type_name: str, options: ParseOptions) -> TypeNameDescription:
    """:func:`parse_type_name` driven by a :class:`ParseOptions` value."""
    return parse_type_name(type_name, balanced=options.balanced, strict=options.strict)


def root_type_name(type_name: str) -> str:
    """Return *type_name* up to (excluding) its first ``<``.

    The whole string is returned when it has no ``<``.
    """
    start = type_name.find("<")
    return type_name if start == -1 else type_name[:start]


def generic_parameter_names(
    type_name: str,
    *,
    balanced: bool = False,
    strict: bool = False,
) -> list[str]:
    """Return the top-level generic parameters of *type_name*.

    >>> generic_parameter_names("Array<Array<String>>")
    ['Array<String>']
    """
    return list(parse_type_name(type_name, balanced=balanced, strict=strict).parameters)


def has_generic_marker(type_name: str) -> bool:
    """``True`` when *type_name* contains ``<`` anywhere."""
    return "<" in type_name


def has_generic_parameters(
    type_name: str,
    *,
    balanced: bool = False,
) -> bool:
    """``True`` when at least one generic parameter can be extracted."""
    return parse_type_name(type_name, balanced=balanced).has_parameters
