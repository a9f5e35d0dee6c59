"""Public API functions for json-unit.

``diff`` returns a DiffResult and never fails for differing documents.  The
four ``assert_*`` functions turn a negative result into an
``AssertionError`` carrying the rendered report.  Path, configuration and
parse errors are raised as themselves so they are never mistaken for "the
documents differ".

Every call reads its settings from an immutable DiffConfig (the read-only
``DEFAULT_CONFIG`` when none is given), so concurrent calls never observe
each other's settings.
"""

from __future__ import annotations

import logging
from typing import Any

from json_unit.algorithm.config import DiffConfig
from json_unit.comparator import JsonDiff
from json_unit.result import DiffResult
from json_unit.tree.builder import TreeBuilder

__all__ = [
    "assert_json_equals",
    "assert_json_part_equals",
    "assert_json_part_structure_equals",
    "assert_json_structure_equals",
    "diff",
]

logger = logging.getLogger(__name__)

_builder = TreeBuilder()


def diff(
    expected: Any,
    actual: Any,
    path: str = "",
    config: DiffConfig | None = None,
) -> DiffResult:
    """Compare ``expected`` with the part of ``actual`` addressed by ``path``.

    Args:
        expected: Expected JSON: text, Python value, stream or TreeNode.
                  Text that is obviously not JSON is taken as a string.
        actual:   Actual (full) JSON document in any supported form.
        path:     Path such as ``"root.array[0].value"``; "" for the root.
        config:   Comparison settings.  Defaults to ``DEFAULT_CONFIG``.

    Returns:
        A DiffResult.

    Raises:
        ParseError:        If either side is unparsable JSON text.
        PathSyntaxError:   If ``path`` is malformed.
        PathNotFoundError: If ``path`` does not exist in ``actual``.
    """
    expected_tree = _builder.build(expected, lenient_text=True)
    actual_tree = _builder.build(actual)
    return JsonDiff.create(expected_tree, actual_tree, path=path, config=config)


def assert_json_equals(expected: Any, actual: Any, config: DiffConfig | None = None) -> None:
    """Assert that two JSON documents are equal.

    Raises:
        AssertionError: With the difference report when they differ.
    """
    assert_json_part_equals(expected, actual, "", config=config)


def assert_json_part_equals(
    expected: Any,
    full_json: Any,
    path: str,
    config: DiffConfig | None = None,
) -> None:
    """Assert that the part of ``full_json`` at ``path`` equals ``expected``.

    Path has the form ``"root.array[0].value"``.

    Raises:
        AssertionError: With the difference report when they differ.
    """
    result = diff(expected, full_json, path=path, config=config)
    if not result.similar():
        _fail(result.report())


def assert_json_structure_equals(
    expected: Any,
    actual: Any,
    config: DiffConfig | None = None,
) -> None:
    """Assert that two JSON documents have the same structure.

    Leaf values are not compared; container shapes, field names and array
    lengths are.
    """
    assert_json_part_structure_equals(expected, actual, "", config=config)


def assert_json_part_structure_equals(
    expected: Any,
    full_json: Any,
    path: str,
    config: DiffConfig | None = None,
) -> None:
    """Assert that the part of ``full_json`` at ``path`` has the structure of ``expected``."""
    result = diff(expected, full_json, path=path, config=config)
    if not result.similar_structure():
        _fail(result.structure_differences())


def _fail(message: str) -> None:
    logger.debug("JSON assertion failed:\n%s", message)
    raise AssertionError(message)
