"""Tests for Difference and DiffResult frozen dataclasses.

Covers:
- similar() / similar_structure() verdicts
- Rendering: one line per difference, root shown as "$", order preserved
- report() / __str__ headers
- Frozen (immutable) enforcement
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, fields

import pytest

from json_unit.result import DiffResult, Difference, DifferenceKind

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_difference(path: str = ".a", description: str = "Different value found.") -> Difference:
    return Difference(kind=DifferenceKind.VALUE_MISMATCH, path=path, description=description)


# ---------------------------------------------------------------------------
# Verdicts
# ---------------------------------------------------------------------------


class TestVerdicts:
    def test_empty_result_is_similar(self) -> None:
        result = DiffResult()
        assert result.similar()
        assert result.similar_structure()

    def test_value_differences_only(self) -> None:
        result = DiffResult(differences=(make_difference(),))
        assert not result.similar()
        assert result.similar_structure()

    def test_structure_differences(self) -> None:
        result = DiffResult(
            differences=(make_difference(),),
            structure_diffs=(make_difference(),),
        )
        assert not result.similar_structure()

    def test_structure_field_and_renderer_are_distinct(self) -> None:
        found = (make_difference("[0]", "shape"),)
        result = DiffResult(structure_diffs=found)
        assert [f.name for f in fields(DiffResult)] == ["differences", "structure_diffs"]
        assert result.structure_diffs == found
        assert result.structure_differences().endswith("[0]: shape")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRendering:
    def test_difference_render(self) -> None:
        assert make_difference(".a", "Boom.").render() == ".a: Boom."

    def test_root_path_rendered_as_dollar(self) -> None:
        assert make_difference("", "Boom.").render() == "$: Boom."

    def test_lines_preserve_order(self) -> None:
        result = DiffResult(
            differences=(make_difference(".b", "second"), make_difference(".a", "first"))
        )
        assert result.differences_text() == ".b: second\n.a: first"

    def test_report_header(self) -> None:
        result = DiffResult(differences=(make_difference(".a", "x"),))
        assert result.report() == "JSON documents are different:\n.a: x"
        assert str(result) == result.report()

    def test_report_when_similar(self) -> None:
        assert DiffResult().report() == "JSON documents are similar."

    def test_structure_differences_text(self) -> None:
        result = DiffResult(structure_diffs=(make_difference("[0]", "shape"),))
        assert result.structure_differences() == (
            "JSON documents have different structures:\n[0]: shape"
        )

    def test_structure_differences_empty_when_similar(self) -> None:
        assert DiffResult().structure_differences() == ""

    def test_rendering_is_repeatable(self) -> None:
        result = DiffResult(differences=(make_difference(),))
        assert result.report() == result.report()


# ---------------------------------------------------------------------------
# Immutability
# ---------------------------------------------------------------------------


class TestImmutability:
    def test_result_is_frozen(self) -> None:
        result = DiffResult()
        with pytest.raises(FrozenInstanceError):
            result.differences = ()  # type: ignore[misc]

    def test_difference_is_frozen(self) -> None:
        difference = make_difference()
        with pytest.raises(FrozenInstanceError):
            difference.path = ".b"  # type: ignore[misc]

    def test_equal_results_compare_equal(self) -> None:
        assert DiffResult(differences=(make_difference(),)) == DiffResult(
            differences=(make_difference(),)
        )
