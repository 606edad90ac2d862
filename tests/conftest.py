"""Shared pytest fixtures and configuration for the typename-describe test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Formatters are mocked at the service boundary.
* Tests must not depend on Rich being installed unless they say so.
"""

from __future__ import annotations

import pytest

from typename_describe.infra.python_formatter import PythonTypeFormatter


@pytest.fixture
def formatter() -> PythonTypeFormatter:
    return PythonTypeFormatter()
