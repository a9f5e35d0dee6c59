"""NodeComparator: recursive expected-vs-actual tree walk.

Visits node pairs depth-first, pre-order, and records every mismatch as a
``Difference`` in a per-call ``DifferenceCollector``.  Mismatches are data,
never exceptions.

Per visited pair the checks run in this order:

1. Expected is the ignore placeholder  -> match, do not descend.
2. Kinds differ                        -> TYPE_MISMATCH (in STRUCTURE mode
                                          two leaves of any kind still match).
3. Objects  -> MISSING_FIELD / recurse in expected key order, then
               EXTRA_FIELD for actual-only keys (STRICT policy only).
4. Arrays   -> ARRAY_LENGTH once if lengths differ, then element-wise over
               the common prefix (or optimal pairing when UNORDERED).
5. Leaves   -> VALUE_MISMATCH in VALUE mode; numbers honour the tolerance.
"""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from collections.abc import Hashable, Iterator

import numpy as np

from json_unit.algorithm.config import (
    ArrayComparisonMode,
    ComparisonMode,
    DiffConfig,
    ExtraFieldsPolicy,
)
from json_unit.algorithm.matcher import hungarian_match
from json_unit.algorithm.tolerance import numbers_equal
from json_unit.result import Difference, DifferenceKind
from json_unit.tree.nodes import NodeKind, TreeNode

__all__ = ["DifferenceCollector", "NodeComparator"]

_PREVIEW_LIMIT = 80


def _preview(node: TreeNode) -> str:
    text = node.render()
    if len(text) > _PREVIEW_LIMIT:
        return text[: _PREVIEW_LIMIT - 3] + "..."
    return text


class DifferenceCollector:
    """Append-only accumulator of Difference records for a single call."""

    def __init__(self) -> None:
        self._items: list[Difference] = []

    def record(self, kind: DifferenceKind, path: str, description: str) -> None:
        self._items.append(Difference(kind=kind, path=path, description=description))

    def extend(self, other: DifferenceCollector) -> None:
        self._items.extend(other._items)

    def freeze(self) -> tuple[Difference, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Difference]:
        return iter(self._items)


class _WalkState:
    """Caches owned by one ``compare`` call, used when arrays are unordered.

    A signature is an order-insensitive content key: objects become sets of
    ``(name, signature)`` pairs and arrays become multisets of element
    signatures.  Two nodes with equal signatures compare without
    differences, so unordered matching can pair them without walking them.
    Text equal to the ignore placeholder gets a key unique to its node.
    """

    def __init__(self, placeholder: str) -> None:
        self._placeholder = placeholder
        self._signatures: dict[int, Hashable] = {}
        self.trials: dict[
            tuple[int, Hashable, ComparisonMode, str], DifferenceCollector
        ] = {}

    def signature(self, node: TreeNode) -> Hashable:
        key = self._signatures.get(id(node))
        if key is None:
            key = self._build_signature(node)
            self._signatures[id(node)] = key
        return key

    def _build_signature(self, node: TreeNode) -> Hashable:
        kind = node.kind
        if kind == NodeKind.OBJECT:
            return (
                kind,
                frozenset(
                    (name, self.signature(child)) for name, child in node.fields.items()
                ),
            )
        if kind == NodeKind.ARRAY:
            counts = Counter(self.signature(child) for child in node.elements)
            return (kind, frozenset(counts.items()))
        if kind == NodeKind.TEXT and node.value == self._placeholder:
            return (kind, id(node))
        return (kind, node.value)

    def pair_identical(
        self,
        expected_items: tuple[TreeNode, ...],
        actual_items: tuple[TreeNode, ...],
    ) -> tuple[list[int], list[int]]:
        """Pair elements with equal signatures; return the unpaired indexes."""
        waiting: defaultdict[Hashable, deque[int]] = defaultdict(deque)
        for j, a in enumerate(actual_items):
            waiting[self.signature(a)].append(j)

        rows: list[int] = []
        for i, e in enumerate(expected_items):
            candidates = waiting.get(self.signature(e))
            if candidates:
                candidates.popleft()
            else:
                rows.append(i)
        cols = sorted(j for candidates in waiting.values() for j in candidates)
        return rows, cols


class NodeComparator:
    """Recursive structural/value comparator.

    Holds only the immutable config, so a single instance may be shared;
    all per-call state lives in the collector and in caches created by
    ``compare``.

    Example::

        cmp = NodeComparator(DiffConfig(tolerance=0.01))
        found = cmp.compare(expected_tree, actual_tree, ComparisonMode.VALUE)
        [d.render() for d in found]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self,
        expected: TreeNode,
        actual: TreeNode,
        mode: ComparisonMode,
        path: str = "",
        into: DifferenceCollector | None = None,
    ) -> DifferenceCollector:
        """Compare two trees and record differences.

        Args:
            expected: Expected tree; may contain the ignore placeholder.
            actual:   Actual tree (already resolved to the compared part).
            mode:     VALUE or STRUCTURE.
            path:     Path of ``expected``/``actual`` used as the prefix of
                      every recorded difference.
            into:     Collector to append to.  A new one is created if None.

        Returns:
            The collector holding the recorded differences.
        """
        collector = into if into is not None else DifferenceCollector()
        state = _WalkState(self._config.ignore_placeholder)
        self._compare(expected, actual, ComparisonMode(mode), path, collector, state)
        return collector

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _compare(
        self,
        expected: TreeNode,
        actual: TreeNode,
        mode: ComparisonMode,
        path: str,
        into: DifferenceCollector,
        state: _WalkState,
    ) -> None:
        if (
            expected.kind == NodeKind.TEXT
            and expected.value == self._config.ignore_placeholder
        ):
            return

        if expected.kind != actual.kind:
            self._compare_kinds(expected, actual, mode, path, into)
            return

        kind = expected.kind
        if kind == NodeKind.OBJECT:
            self._compare_objects(expected, actual, mode, path, into, state)
        elif kind == NodeKind.ARRAY:
            self._compare_arrays(expected, actual, mode, path, into, state)
        elif mode == ComparisonMode.VALUE:
            self._compare_leaves(expected, actual, path, into)

    def _compare_kinds(
        self,
        expected: TreeNode,
        actual: TreeNode,
        mode: ComparisonMode,
        path: str,
        into: DifferenceCollector,
    ) -> None:
        if mode == ComparisonMode.STRUCTURE:
            if not expected.is_container and not actual.is_container:
                return
            into.record(
                DifferenceKind.TYPE_MISMATCH,
                path,
                f"Different structure found. Expected {expected.kind}, got {actual.kind}.",
            )
            return
        into.record(
            DifferenceKind.TYPE_MISMATCH,
            path,
            f"Different value found. Expected {expected.kind} {_preview(expected)}, "
            f"got {actual.kind} {_preview(actual)}.",
        )

    def _compare_objects(
        self,
        expected: TreeNode,
        actual: TreeNode,
        mode: ComparisonMode,
        path: str,
        into: DifferenceCollector,
        state: _WalkState,
    ) -> None:
        actual_fields = actual.fields
        for name, expected_child in expected.fields.items():
            child_path = f"{path}.{name}"
            if name not in actual_fields:
                into.record(
                    DifferenceKind.MISSING_FIELD,
                    child_path,
                    f"Missing field. Expected {_preview(expected_child)}.",
                )
                continue
            self._compare(
                expected_child, actual_fields[name], mode, child_path, into, state
            )

        if self._config.extra_fields == ExtraFieldsPolicy.LENIENT:
            return
        for name, actual_child in actual_fields.items():
            if name not in expected.fields:
                into.record(
                    DifferenceKind.EXTRA_FIELD,
                    f"{path}.{name}",
                    f"Unexpected field with value {_preview(actual_child)}.",
                )

    def _compare_arrays(
        self,
        expected: TreeNode,
        actual: TreeNode,
        mode: ComparisonMode,
        path: str,
        into: DifferenceCollector,
        state: _WalkState,
    ) -> None:
        expected_items = expected.elements
        actual_items = actual.elements
        if len(expected_items) != len(actual_items):
            into.record(
                DifferenceKind.ARRAY_LENGTH,
                path,
                f"Array has different length. Expected {len(expected_items)}, "
                f"got {len(actual_items)}.",
            )

        if self._config.array_comparison_mode == ArrayComparisonMode.UNORDERED:
            self._compare_unordered(expected_items, actual_items, mode, path, into, state)
            return

        for index, (e, a) in enumerate(zip(expected_items, actual_items, strict=False)):
            self._compare(e, a, mode, f"{path}[{index}]", into, state)

    def _compare_unordered(
        self,
        expected_items: tuple[TreeNode, ...],
        actual_items: tuple[TreeNode, ...],
        mode: ComparisonMode,
        path: str,
        into: DifferenceCollector,
        state: _WalkState,
    ) -> None:
        if not expected_items or not actual_items:
            return

        rows = list(range(len(expected_items)))
        cols = list(range(len(actual_items)))
        # Tolerance makes value matching non-transitive, so identical
        # elements may only be paired up front when it cannot apply.
        if mode == ComparisonMode.STRUCTURE or self._config.tolerance is None:
            rows, cols = state.pair_identical(expected_items, actual_items)
            if not rows or not cols:
                return

        trials: dict[tuple[int, int], DifferenceCollector] = {}
        cost_matrix = np.empty((len(rows), len(cols)), dtype=float)
        for r, i in enumerate(rows):
            for c, j in enumerate(cols):
                trial = self._trial(
                    expected_items[i], actual_items[j], mode, f"{path}[{i}]", state
                )
                trials[(r, c)] = trial
                cost_matrix[r, c] = len(trial)

        for r, c in hungarian_match(cost_matrix):
            into.extend(trials[(r, c)])

    def _trial(
        self,
        expected: TreeNode,
        actual: TreeNode,
        mode: ComparisonMode,
        path: str,
        state: _WalkState,
    ) -> DifferenceCollector:
        """Differences of one candidate pairing, shared by equal actual content."""
        key = (id(expected), state.signature(actual), mode, path)
        trial = state.trials.get(key)
        if trial is None:
            trial = DifferenceCollector()
            if state.signature(expected) != state.signature(actual):
                self._compare(expected, actual, mode, path, trial, state)
            state.trials[key] = trial
        return trial

    def _compare_leaves(
        self,
        expected: TreeNode,
        actual: TreeNode,
        path: str,
        into: DifferenceCollector,
    ) -> None:
        tolerance = self._config.tolerance
        if expected.kind == NodeKind.NUMBER:
            if numbers_equal(expected.value, actual.value, tolerance):
                return
            suffix = f" (tolerance {tolerance})" if tolerance is not None else ""
            into.record(
                DifferenceKind.VALUE_MISMATCH,
                path,
                f"Different value found. Expected {expected.render()}, "
                f"got {actual.render()}{suffix}.",
            )
            return

        if expected.value != actual.value:
            into.record(
                DifferenceKind.VALUE_MISMATCH,
                path,
                f"Different value found. Expected {_preview(expected)}, "
                f"got {_preview(actual)}.",
            )
