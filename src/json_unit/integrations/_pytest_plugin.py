"""pytest plugin for json-unit.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_unit import (
    DEFAULT_CONFIG,
    DiffConfig,
    assert_json_part_equals,
    assert_json_part_structure_equals,
)


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("json-unit")
    group.addoption(
        "--json-unit-tolerance",
        action="store",
        default=None,
        help="Default numeric tolerance for the json_unit_config fixture.",
    )
    parser.addini(
        "json_unit_ignore_placeholder",
        help="Default ignore placeholder for the json_unit_config fixture.",
        default=DEFAULT_CONFIG.ignore_placeholder,
    )


@pytest.fixture(scope="session")
def json_unit_config(pytestconfig: pytest.Config) -> DiffConfig:
    """Session-wide DiffConfig built once from command-line and ini options.

    The returned config is immutable; tests that need different settings
    should derive one with ``json_unit_config.replace(...)``.
    """
    return DiffConfig(
        ignore_placeholder=pytestconfig.getini("json_unit_ignore_placeholder"),
        tolerance=pytestconfig.getoption("--json-unit-tolerance"),
    )


@pytest.fixture(scope="session")
def assert_json_equals(json_unit_config: DiffConfig) -> Any:
    """Fixture that returns a callable JSON equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (each call builds its own trees and its own DiffResult).

    Usage in tests::

        def test_payload(assert_json_equals):
            assert_json_equals({"id": "${json-unit.ignore}"}, '{"id": 7}')

        def test_items_shape(assert_json_equals):
            assert_json_equals([{}], body, path="items", structure=True)

    Returns:
        A callable ``_assert(expected, actual, path="", structure=False,
        config=None) -> None`` that raises ``AssertionError`` with the
        difference report when the documents differ.
    """

    def _assert(
        expected: Any,
        actual: Any,
        path: str = "",
        structure: bool = False,
        config: DiffConfig | None = None,
    ) -> None:
        effective = config if config is not None else json_unit_config
        if structure:
            assert_json_part_structure_equals(expected, actual, path, config=effective)
        else:
            assert_json_part_equals(expected, actual, path, config=effective)

    return _assert
