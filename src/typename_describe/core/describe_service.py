"""Core describe service — orchestrates formatting and parsing.

:class:`TypeNameService` depends on a
:class:`~typename_describe.core.protocols.TypeNameFormatter` injected at
construction time (dependency inversion), keeping the core free of any
runtime-introspection imports.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* Only :class:`~typename_describe.exceptions.TypeNameError` subclasses
  escape.
* Parsing is deterministic and stateless; the service holds nothing
  but its formatter and options.
"""

from __future__ import annotations

import logging

from typename_describe.core.models import ParseOptions, TypeNameDescription
from typename_describe.core.parser import parse_with_options
from typename_describe.core.protocols import SupportsTypeName, TypeNameFormatter
from typename_describe.exceptions import TypeFormattingError, TypeNameError

logger = logging.getLogger(__name__)


class TypeNameService:
    """Describe arbitrary subjects through an injected formatter.

    Parameters
    ----------
    formatter:
        Any object satisfying the :class:`TypeNameFormatter` protocol.
    options:
        Parse configuration applied to every formatted name.
    """

    def __init__(
        self,
        formatter: TypeNameFormatter,
        options: ParseOptions | None = None,
    ) -> None:
        self._formatter: TypeNameFormatter = formatter
        self._options: ParseOptions = options if options is not None else ParseOptions()

    @property
    def options(self) -> ParseOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def type_name(self, subject: object) -> str:
        """Return the formatted type name of *subject*.

        Instances that already carry a ``type_name`` string (see
        :class:`~typename_describe.core.protocols.SupportsTypeName`)
        are taken at their word; everything else goes through the
        formatter.

        Raises
        ------
        TypeFormattingError
            If the formatter fails or returns something other than a
            string.
        """
        name = self._format(subject)

        if not isinstance(name, str):
            raise TypeFormattingError(
                f"Formatter returned {type(name).__name__}, expected str.",
                hint="A TypeNameFormatter must return the formatted name as a string.",
            )
        return name

    def describe(self, subject: object) -> TypeNameDescription:
        """Format *subject* and split the result into root and parameters."""
        return self.describe_name(self.type_name(subject))

    def describe_name(self, type_name: str) -> TypeNameDescription:
        """Parse an already formatted *type_name* with this service's options.

        Raises
        ------
        MalformedTypeNameError
            Only when the service was configured with ``strict=True``.
        """
        return parse_with_options(type_name, self._options)

    def root_type_name(self, subject: object) -> str:
        return self.describe(subject).root

    def generic_type_names(self, subject: object) -> list[str]:
        return list(self.describe(subject).parameters)

    def is_generic_type(self, subject: object) -> bool:
        """``True`` when the formatted name contains ``<``."""
        return "<" in self.type_name(subject)

    # ------------------------------------------------------------------
    # Formatter delegation (safe boundary)
    # ------------------------------------------------------------------

    def _format(self, subject: object) -> object:
        """Read or produce the name and ensure only our exceptions escape."""
        try:
            if not isinstance(subject, type) and isinstance(subject, SupportsTypeName):
                return subject.type_name
            return self._formatter.format(subject)
        except TypeNameError:
            # Already one of ours — let it propagate unchanged.
            raise
        except Exception as exc:
            logger.debug("Formatter %r failed on %r", self._formatter, subject, exc_info=True)
            raise TypeFormattingError(
                f"Could not format type name: {exc}",
            ) from exc
