"""Tests for TypeNameService (core/describe_service.py).

The :class:`TypeNameFormatter` dependency is **mocked** for the
failure paths.  These tests verify:

* Formatter → parser orchestration
* ParseOptions being applied
* Exception mapping (formatter errors → our hierarchy)
* Subjects that carry their own ``type_name``
"""

from __future__ import annotations

from typing import Generic, TypeVar
from unittest.mock import MagicMock

import pytest

from typename_describe.core.describe_service import TypeNameService
from typename_describe.core.models import ParseOptions, TypeNameDescription
from typename_describe.describable import TypeNameDescribable
from typename_describe.exceptions import (
    MalformedTypeNameError,
    TypeFormattingError,
    TypeNameError,
)
from typename_describe.infra.python_formatter import PythonTypeFormatter

T = TypeVar("T")


class Box(Generic[T]):
    pass


class NamedThing:
    """Carries a pre-formatted name instead of relying on a formatter."""

    type_name = "Remote<Key, (Int, String)>"


class _BrokenFormatter:
    def format(self, subject: object) -> str:
        raise ValueError("formatter broke")


class SelfDescribed(TypeNameDescribable):
    type_name_formatter = _BrokenFormatter()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fake_formatter(result: str | object | Exception) -> MagicMock:
    """Return a mock TypeNameFormatter.

    If *result* is an exception, ``format`` raises it; otherwise
    ``format`` returns it.
    """
    formatter = MagicMock()
    if isinstance(result, Exception):
        formatter.format.side_effect = result
    else:
        formatter.format.return_value = result
    return formatter


def _service(**kwargs: object) -> TypeNameService:
    return TypeNameService(PythonTypeFormatter(), **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------

class TestDescribe:
    def test_describe_alias(self) -> None:
        result = _service().describe(dict[str, list[int]])
        assert isinstance(result, TypeNameDescription)
        assert result.as_tuple() == ("dict", ["str", "list<int>"])

    def test_describe_instance(self) -> None:
        assert _service().describe(Box[int]()).as_tuple() == ("Box", ["int"])

    def test_root_type_name(self) -> None:
        assert _service().root_type_name(Box[str]) == "Box"

    def test_generic_type_names(self) -> None:
        assert _service().generic_type_names(Box[tuple[int, str]]) == ["(int, str)"]

    def test_is_generic_type(self) -> None:
        assert _service().is_generic_type(Box[int]) is True
        assert _service().is_generic_type(Box) is False

    def test_formatter_receives_subject(self) -> None:
        formatter = _fake_formatter("Array<Int>")
        subject = object()
        TypeNameService(formatter).describe(subject)
        formatter.format.assert_called_once_with(subject)

    def test_describe_name_skips_formatter(self) -> None:
        formatter = _fake_formatter("unused")
        result = TypeNameService(formatter).describe_name("Foo<A, B>")
        assert result.parameters == ("A", "B")
        formatter.format.assert_not_called()


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class TestOptions:
    def test_default_options(self) -> None:
        assert _service().options == ParseOptions()

    def test_balanced_option_applied(self) -> None:
        service = TypeNameService(_fake_formatter("A<B>.C<D>"), ParseOptions(balanced=True))
        assert service.generic_type_names(object()) == ["B"]

    def test_strict_option_applied(self) -> None:
        service = TypeNameService(_fake_formatter("Foo<Bar"), ParseOptions(strict=True))
        with pytest.raises(MalformedTypeNameError):
            service.describe(object())

    def test_permissive_by_default(self) -> None:
        service = TypeNameService(_fake_formatter("Foo<Bar"))
        assert service.describe(object()).as_tuple() == ("Foo<Bar", [])


# ---------------------------------------------------------------------------
# Self-named subjects
# ---------------------------------------------------------------------------

class TestSupportsTypeName:
    def test_instance_name_is_used(self) -> None:
        formatter = _fake_formatter("ignored")
        service = TypeNameService(formatter)
        result = service.describe(NamedThing())
        assert result.as_tuple() == ("Remote", ["Key", "(Int, String)"])
        formatter.format.assert_not_called()

    def test_class_goes_through_formatter(self) -> None:
        assert _service().type_name(NamedThing) == "NamedThing"

    def test_non_string_name_is_rejected(self) -> None:
        class BadName:
            type_name = 42

        with pytest.raises(TypeFormattingError, match="expected str"):
            _service().type_name(BadName())


# ---------------------------------------------------------------------------
# Exception mapping
# ---------------------------------------------------------------------------

class TestExceptionMapping:
    def test_unexpected_error_wrapped(self) -> None:
        service = TypeNameService(_fake_formatter(RuntimeError("boom")))
        with pytest.raises(TypeFormattingError, match="boom") as exc_info:
            service.describe(object())
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_own_errors_propagate_unchanged(self) -> None:
        original = TypeNameError("already ours")
        service = TypeNameService(_fake_formatter(original))
        with pytest.raises(TypeNameError) as exc_info:
            service.describe(object())
        assert exc_info.value is original

    def test_non_string_result_rejected(self) -> None:
        service = TypeNameService(_fake_formatter(123))
        with pytest.raises(TypeFormattingError) as exc_info:
            service.type_name(object())
        assert exc_info.value.hint is not None

    def test_self_named_subject_error_wrapped(self) -> None:
        with pytest.raises(TypeFormattingError, match="formatter broke") as exc_info:
            _service().describe(SelfDescribed())
        assert isinstance(exc_info.value.__cause__, ValueError)
