"""Depth-aware splitting of a generic parameter list.

:func:`split_parameters` is a **pure** single-pass scan — no recursion,
no state beyond the call.  A comma splits the input only when it sits
outside every ``<...>`` and ``(...)`` pair::

    >>> split_parameters("String, Dictionary<String, Int>, (Int, String)")
    ['String', 'Dictionary<String, Int>', '(Int, String)']

Angle and parenthesis depth are tracked by two independent counters.
In the default mode the counters may go negative on unbalanced input
and the scan carries on; ``strict=True`` turns that into a
:class:`~typename_describe.exceptions.MalformedTypeNameError`.
"""

from __future__ import annotations

import logging

from typename_describe.exceptions import STRICT_MODE_HINT, MalformedTypeNameError

logger = logging.getLogger(__name__)

_ANGLE_DELTA: dict[str, int] = {"<": 1, ">": -1}
_PAREN_DELTA: dict[str, int] = {"(": 1, ")": -1}


def _flush(buffer: list[str], result: list[str]) -> None:
    """Append the trimmed buffer to *result* if non-empty, then clear it."""
    parameter = "".join(buffer).strip()
    if parameter:
        result.append(parameter)
    buffer.clear()


def _unbalanced(content: str, message: str, position: int) -> MalformedTypeNameError:
    logger.debug("Strict split rejected %r at offset %d: %s", content, position, message)
    return MalformedTypeNameError(
        message,
        type_name=content,
        position=position,
        hint=STRICT_MODE_HINT,
    )


def split_parameters(content: str, *, strict: bool = False) -> list[str]:
    """Split *content* on top-level commas.

    Parameters
    ----------
    content:
        The text between the outer generic brackets, e.g.
        ``"String, Array<Int>"``.  May be empty.
    strict:
        When ``True``, raise on a closing bracket without a matching
        opener and on openers still unclosed at end of input.

    Returns
    -------
    list[str]
        Parameters trimmed of surrounding whitespace.  Empty pieces
        (``"A,,B"``, trailing commas, blank input) are dropped.

    Raises
    ------
    MalformedTypeNameError
        Only when *strict* is set and the brackets do not balance.
    """
    result: list[str] = []
    buffer: list[str] = []
    angle_depth = 0
    paren_depth = 0

    for position, char in enumerate(content):
        if char == "," and angle_depth == 0 and paren_depth == 0:
            _flush(buffer, result)
            continue

        if char in _ANGLE_DELTA:
            angle_depth += _ANGLE_DELTA[char]
        elif char in _PAREN_DELTA:
            paren_depth += _PAREN_DELTA[char]

        if strict and (angle_depth < 0 or paren_depth < 0):
            raise _unbalanced(content, f"Unexpected {char!r} without a matching opener.", position)

        buffer.append(char)

    if strict and (angle_depth or paren_depth):
        raise _unbalanced(
            content,
            f"Unclosed brackets at end of input (angle={angle_depth}, paren={paren_depth}).",
            len(content),
        )

    _flush(buffer, result)
    return result
