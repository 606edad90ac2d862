"""Protocols (interfaces) consumed by the core layer.

The parser never produces type names itself: it consumes strings from
whatever satisfies :class:`TypeNameFormatter`.  Core code depends ONLY
on these protocols — never on a concrete formatter.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class TypeNameFormatter(Protocol):
    """Contract for "describe type as string" backends.

    Any object that implements :meth:`format` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def format(self, subject: object) -> str:
        """Return a deterministic type name for *subject*.

        Nested generic parameters must be rendered in
        ``Name<P1, P2>`` form and tuples as ``(A, B)``.  Whether
        *subject* is a class, an alias or an instance is up to the
        implementation.
        """
        ...  # pragma: no cover


@runtime_checkable
class SupportsTypeName(Protocol):
    """Anything exposing a pre-formatted ``type_name`` string."""

    @property
    def type_name(self) -> str:
        ...  # pragma: no cover
