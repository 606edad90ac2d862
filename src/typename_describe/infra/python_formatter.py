"""Python runtime adapter for the :class:`TypeNameFormatter` protocol.

Renders Python classes, ``typing`` constructs and instances in the
``Name<P1, P2>`` notation the parser consumes::

    >>> format_type_name(dict[str, list[int]])
    'dict<str, list<int>>'
    >>> format_type_name(tuple[int, str])
    '(int, str)'
    >>> format_type_name(int | None)
    'Optional<int>'

Everything that touches ``typing`` introspection lives here so the core
layer stays a pure string parser.
"""

from __future__ import annotations

import types
import typing
from collections.abc import Callable, Iterable
from typing import Any


_UNION_TYPES: tuple[Any, ...] = (typing.Union, types.UnionType)
_CONTAINER_TYPES: tuple[type, ...] = (list, set, frozenset, dict, tuple)


class PythonTypeFormatter:
    """Format Python types and values as generic type-name strings.

    Parameters
    ----------
    qualified:
        Render classes as ``module.QualName`` instead of the bare
        ``__name__``.  Builtins are never qualified.
    infer_containers:
        For ``list``/``set``/``frozenset``/``dict``/``tuple``
        *instances*, derive the parameters from the elements
        (``[1, 2]`` → ``list<int>``).  Off by default, so a bare
        instance formats as its class name.
    """

    def __init__(self, *, qualified: bool = False, infer_containers: bool = False) -> None:
        self._qualified: bool = qualified
        self._infer_containers: bool = infer_containers

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(qualified={self._qualified!r}, "
            f"infer_containers={self._infer_containers!r})"
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def format(self, subject: object) -> str:
        """Return the formatted type name of *subject*."""
        return self._format_value(subject, set())

    def _format_value(self, subject: object, active: set[int]) -> str:
        if _is_type_expression(subject):
            return self._format_annotation(subject)

        alias = getattr(subject, "__orig_class__", None)
        if alias is not None:
            return self._format_annotation(alias)

        if self._infer_containers and isinstance(subject, _CONTAINER_TYPES):
            return self._format_container(subject, active)

        return self._format_class(type(subject))

    # ------------------------------------------------------------------
    # Annotations
    # ------------------------------------------------------------------

    def _format_annotation(self, annotation: Any) -> str:
        if annotation is None or annotation is type(None):
            return "None"
        if annotation is Ellipsis:
            return "..."
        if annotation is Any:
            return "Any"
        if isinstance(annotation, (typing.TypeVar, typing.ParamSpec)):
            return annotation.__name__
        if isinstance(annotation, str):
            return annotation
        if isinstance(annotation, typing.ForwardRef):
            return annotation.__forward_arg__
        if isinstance(annotation, list):
            # Callable argument list: Callable[[int, str], bool]
            return self._join_tuple(annotation)

        origin = typing.get_origin(annotation)
        if origin is None:
            if isinstance(annotation, type):
                return self._format_class(annotation)
            return getattr(annotation, "__name__", None) or repr(annotation)

        args = typing.get_args(annotation)
        if origin in _UNION_TYPES:
            return self._format_union(args)
        if origin is typing.Literal:
            return self._generic("Literal", [repr(arg) for arg in args])
        if origin is tuple:
            # tuple[()] reports ((),) on older interpreters.
            return self._join_tuple(() if args == ((),) else args)
        if origin is Callable:
            if not args:
                return "Callable"
            return self._generic(
                "Callable",
                [self._format_annotation(args[0]), self._format_annotation(args[1])],
            )

        return self._generic(
            self._origin_name(annotation, origin),
            [self._format_annotation(arg) for arg in args],
        )

    def _format_union(self, args: tuple[Any, ...]) -> str:
        members = [arg for arg in args if arg is not type(None)]
        if len(members) == 1 and len(args) == 2:
            return self._generic("Optional", [self._format_annotation(members[0])])
        return self._generic("Union", [self._format_annotation(arg) for arg in args])

    def _origin_name(self, annotation: Any, origin: Any) -> str:
        # typing.Dict[...] reports origin ``dict``; keep the alias's own name.
        name = getattr(annotation, "_name", None)
        if name and getattr(annotation, "__module__", None) == "typing":
            return name
        if isinstance(origin, type):
            return self._format_class(origin)
        return getattr(origin, "__name__", None) or repr(origin)

    def _format_class(self, cls: type) -> str:
        if not self._qualified or cls.__module__ == "builtins":
            return cls.__name__
        return f"{cls.__module__}.{cls.__qualname__}"

    # ------------------------------------------------------------------
    # Container inference
    # ------------------------------------------------------------------

    def _format_container(self, value: Any, active: set[int]) -> str:
        """Render *value* with its element types.

        *active* holds the ids of containers currently being rendered; a
        container met again inside itself renders as its bare class name.
        """
        name = self._format_class(type(value))
        if not value or id(value) in active:
            return name

        active.add(id(value))
        try:
            if isinstance(value, tuple):
                return self._join_tuple(self._format_value(item, active) for item in value)
            if isinstance(value, dict):
                return self._generic(
                    name,
                    [
                        self._element_type(value.keys(), active),
                        self._element_type(value.values(), active),
                    ],
                )
            return self._generic(name, [self._element_type(value, active)])
        finally:
            active.discard(id(value))

    def _element_type(self, items: Iterable[object], active: set[int]) -> str:
        names = sorted({self._format_value(item, active) for item in items})
        if len(names) == 1:
            return names[0]
        return self._generic("Union", names)

    # ------------------------------------------------------------------
    # Notation
    # ------------------------------------------------------------------

    @staticmethod
    def _generic(name: str, params: list[str]) -> str:
        if not params:
            return name
        return f"{name}<{', '.join(params)}>"

    def _join_tuple(self, items: Iterable[Any]) -> str:
        rendered = [self._format_annotation(item) for item in items]
        return f"({', '.join(rendered)})"


def _is_type_expression(subject: object) -> bool:
    """``True`` for classes, aliases and other typing constructs."""
    if isinstance(subject, type) or subject is None or subject is Any:
        return True
    if isinstance(subject, (typing.TypeVar, typing.ParamSpec)):
        return True
    return typing.get_origin(subject) is not None


_DEFAULT_FORMATTER = PythonTypeFormatter()


def format_type_name(
    subject: object,
    *,
    qualified: bool = False,
    infer_containers: bool = False,
) -> str:
    """Format *subject* without constructing a formatter by hand.

    Usable on any class, alias or value — no mixin required.
    """
    if not qualified and not infer_containers:
        return _DEFAULT_FORMATTER.format(subject)
    formatter = PythonTypeFormatter(qualified=qualified, infer_containers=infer_containers)
    return formatter.format(subject)


def default_formatter() -> PythonTypeFormatter:
    """Return the shared, immutable default formatter."""
    return _DEFAULT_FORMATTER
