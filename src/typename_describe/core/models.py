"""Domain models for typename-describe.

All models are **frozen** dataclasses — immutable value objects derived
per call.  They carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Parse configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Knobs controlling how a formatted type name is parsed.

    The defaults reproduce the permissive behaviour: first ``<`` / last
    ``>`` span selection and no validation.
    """

    balanced: bool = False
    """Close the generic span at the ``>`` that balances the first ``<``."""

    strict: bool = False
    """Raise :class:`~typename_describe.exceptions.MalformedTypeNameError`
    instead of returning a best-effort result for unbalanced input."""


# ---------------------------------------------------------------------------
# Parse result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TypeNameDescription:
    """The decomposition of one formatted type name.

    ``parameters`` is a tuple so the description stays immutable.  The
    length and truth value of a description are those of its parameter
    list.
    """

    type_name: str
    """The raw input string, unchanged."""

    root: str
    """Type name with the generic-parameter notation removed."""

    parameters: tuple[str, ...] = ()
    """Top-level generic parameters in left-to-right order."""

    @property
    def is_generic(self) -> bool:
        """``True`` when the raw name contains ``<`` at all.

        ``Foo<>`` is generic by this test even though it has no
        parameters; see :attr:`has_parameters` for the other reading.
        """
        return "<" in self.type_name

    @property
    def has_parameters(self) -> bool:
        """``True`` when at least one generic parameter was extracted."""
        return len(self.parameters) > 0

    def as_tuple(self) -> tuple[str, list[str]]:
        """Return ``(root, parameters)`` with the parameters as a list."""
        return self.root, list(self.parameters)

    def __len__(self) -> int:
        return len(self.parameters)

    def __bool__(self) -> bool:
        return len(self.parameters) > 0
