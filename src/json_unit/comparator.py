"""JsonDiff: orchestrator that wires path resolution and the NodeComparator.

This is the engine entry point used by the public API.  It takes trees that
have already been normalised by ``TreeBuilder`` and returns a single
immutable ``DiffResult``.

Architecture:
- create() snapshots the config, resolves ``path`` inside the full document,
  then runs the NodeComparator twice (VALUE and STRUCTURE) with a fresh
  collector each time, so one result answers both ``similar()`` and
  ``similar_structure()``.
- Path and configuration errors propagate unchanged; content mismatches
  only ever become Difference records.
"""

from __future__ import annotations

import logging

from json_unit.algorithm.config import DEFAULT_CONFIG, ComparisonMode, DiffConfig
from json_unit.algorithm.walker import NodeComparator
from json_unit.path import parse_path, resolve
from json_unit.result import DiffResult
from json_unit.tree.nodes import TreeNode

__all__ = ["JsonDiff"]

logger = logging.getLogger(__name__)


class JsonDiff:
    """Compares an expected tree with a part of a document tree.

    Example::

        from json_unit.comparator import JsonDiff
        from json_unit.tree import TreeBuilder

        builder = TreeBuilder()
        result = JsonDiff.create(
            builder.build('"y"'),
            builder.build({"root": {"items": [{"name": "x"}, {"name": "y"}]}}),
            path="root.items[1].name",
        )
        result.similar()   # True
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config: DiffConfig = config if config is not None else DEFAULT_CONFIG
        self._comparator = NodeComparator(self._config)

    @classmethod
    def create(
        cls,
        expected: TreeNode,
        document: TreeNode,
        path: str = "",
        config: DiffConfig | None = None,
    ) -> DiffResult:
        """Shorthand for ``JsonDiff(config).compare(expected, document, path)``."""
        return cls(config).compare(expected, document, path)

    def compare(self, expected: TreeNode, document: TreeNode, path: str = "") -> DiffResult:
        """Compare ``expected`` with the subtree of ``document`` at ``path``.

        Args:
            expected: Expected tree.
            document: Full actual document.
            path:     Path of the compared part; "" compares the whole
                      document.  Also used as the prefix of every
                      reported difference path.

        Returns:
            A DiffResult holding value and structure differences.

        Raises:
            PathSyntaxError:   ``path`` is malformed.
            PathNotFoundError: ``path`` does not exist in ``document``.
        """
        expression = parse_path(path)
        actual = resolve(document, expression)
        start = expression.render()

        value_found = self._comparator.compare(
            expected, actual, ComparisonMode.VALUE, path=start
        )
        structure_found = self._comparator.compare(
            expected, actual, ComparisonMode.STRUCTURE, path=start
        )

        logger.debug(
            "Compared JSON at %r: %d value difference(s), %d structure difference(s)",
            start or "$",
            len(value_found),
            len(structure_found),
        )
        return DiffResult(
            differences=value_found.freeze(),
            structure_diffs=structure_found.freeze(),
        )
