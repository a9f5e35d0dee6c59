"""Tests for JsonDiff: the engine orchestrator.

Covers:
- Whole-document and part comparison
- Both verdicts come from one call
- Difference paths are prefixed with the compared part's path
- Path and configuration errors propagate instead of becoming differences
- Default config is used when none is given
"""

from __future__ import annotations

import logging

import pytest

from json_unit.algorithm.config import DEFAULT_CONFIG, DiffConfig, ExtraFieldsPolicy
from json_unit.comparator import JsonDiff
from json_unit.errors import PathNotFoundError, PathSyntaxError
from json_unit.result import DifferenceKind
from json_unit.tree.builder import TreeBuilder

_builder = TreeBuilder()
tree = _builder.from_python

DOC = tree({"root": {"items": [{"name": "x"}, {"name": "y", "size": 2}]}})


class TestCreate:
    def test_whole_document_identical(self) -> None:
        result = JsonDiff.create(DOC, DOC)
        assert result.similar()
        assert result.similar_structure()

    def test_part_comparison(self) -> None:
        result = JsonDiff.create(tree("y"), DOC, path="root.items[1].name")
        assert result.similar()

    def test_part_difference_paths_are_prefixed(self) -> None:
        result = JsonDiff.create(tree({"name": "z"}), DOC, path="root.items[1]")
        assert [(d.kind, d.path) for d in result.differences] == [
            (DifferenceKind.VALUE_MISMATCH, "root.items[1].name"),
            (DifferenceKind.EXTRA_FIELD, "root.items[1].size"),
        ]

    def test_path_is_normalised_in_prefix(self) -> None:
        result = JsonDiff.create(tree(1), DOC, path="  root.items[1].size ")
        assert [d.path for d in result.differences] == ["root.items[1].size"]

    def test_one_call_answers_both_modes(self) -> None:
        result = JsonDiff.create(tree({"a": 1, "b": [1, 2]}), tree({"a": 99, "b": [5, 6]}))
        assert not result.similar()
        assert result.similar_structure()
        assert len(result.differences) == 3
        assert result.structure_diffs == ()

    def test_config_is_applied(self) -> None:
        config = DiffConfig(extra_fields=ExtraFieldsPolicy.LENIENT)
        result = JsonDiff.create(tree({"a": 1}), tree({"a": 1, "b": 2}), config=config)
        assert result.similar()

    def test_default_config(self) -> None:
        assert JsonDiff()._config is DEFAULT_CONFIG

    def test_instance_is_reusable(self) -> None:
        engine = JsonDiff()
        first = engine.compare(tree([1]), tree([2]))
        second = engine.compare(tree([1]), tree([2]))
        assert first == second


class TestErrors:
    def test_missing_path_raises(self) -> None:
        with pytest.raises(PathNotFoundError):
            JsonDiff.create(tree(1), DOC, path="root.items[5]")

    def test_malformed_path_raises(self) -> None:
        with pytest.raises(PathSyntaxError):
            JsonDiff.create(tree(1), DOC, path="root..items")


class TestLogging:
    def test_debug_log_records_counts(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="json_unit.comparator"):
            JsonDiff.create(tree({"a": 1}), tree({"a": 2}))
        assert "1 value difference(s)" in caplog.text
        assert "0 structure difference(s)" in caplog.text
