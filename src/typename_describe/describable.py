"""Opt-in mixin giving a class introspectable type names.

Nothing is attached to builtins or third-party classes: only classes
that inherit from :class:`TypeNameDescribable` gain the properties.
For everything else use
:func:`~typename_describe.infra.python_formatter.format_type_name` and
the parser functions directly.

Example::

    class Box(TypeNameDescribable, Generic[T]):
        ...

    box = Box[str]()
    box.type_name            # "Box<str>"
    box.root_type_name       # "Box"
    box.generic_type_names   # ["str"]
    Box.class_type_name()    # "Box"
"""

from __future__ import annotations

from typing import ClassVar

from typename_describe.core.models import TypeNameDescription
from typename_describe.core.parser import has_generic_marker, parse_type_name, root_type_name
from typename_describe.core.protocols import TypeNameFormatter
from typename_describe.infra.python_formatter import default_formatter


class TypeNameDescribable:
    """Mixin exposing the formatted type name of an instance and its class.

    Override :attr:`type_name_formatter` on a subclass to change how
    names are produced (for example a qualified
    :class:`~typename_describe.infra.python_formatter.PythonTypeFormatter`).
    """

    __slots__ = ()

    type_name_formatter: ClassVar[TypeNameFormatter] = default_formatter()

    @classmethod
    def class_type_name(cls) -> str:
        """Type name of the class itself, without instance parameters."""
        return cls.type_name_formatter.format(cls)

    @property
    def type_name(self) -> str:
        return type(self).type_name_formatter.format(self)

    @property
    def type_name_description(self) -> TypeNameDescription:
        return parse_type_name(self.type_name)

    @property
    def root_type_name(self) -> str:
        """Type name without generic parameters (``Box<str>`` → ``Box``)."""
        return root_type_name(self.type_name)

    @property
    def generic_type_names(self) -> list[str]:
        """Top-level generic parameters; empty for non-generic instances."""
        return list(self.type_name_description.parameters)

    @property
    def is_generic_type(self) -> bool:
        """``True`` when the type name contains ``<`` at all."""
        return has_generic_marker(self.type_name)

    @property
    def has_generic_parameters(self) -> bool:
        return self.type_name_description.has_parameters
