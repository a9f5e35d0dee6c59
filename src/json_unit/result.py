"""Difference records and the DiffResult returned by every comparison.

Both types are frozen.  Rendering is plain string formatting over the
recorded differences; nothing is recomputed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["DiffResult", "Difference", "DifferenceKind"]

ROOT_LABEL = "$"


class DifferenceKind(StrEnum):
    """Category of a recorded mismatch."""

    TYPE_MISMATCH = auto()
    MISSING_FIELD = auto()
    EXTRA_FIELD = auto()
    ARRAY_LENGTH = auto()
    VALUE_MISMATCH = auto()


@dataclass(frozen=True, slots=True)
class Difference:
    """One mismatch between expected and actual.

    Attributes:
        kind:        Category of the mismatch.
        path:        Dotted/bracketed path of the node, rooted at the
                     comparison's starting point ("" is that point itself).
        description: Human-readable explanation.
    """

    kind: DifferenceKind
    path: str
    description: str

    def render(self) -> str:
        return f"{self.path or ROOT_LABEL}: {self.description}"


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Outcome of comparing an expected tree with (part of) a document.

    Attributes:
        differences:     Value-mode differences in discovery order.
        structure_diffs: Structure-mode differences in discovery order.  The
                         ``structure_differences()`` method renders them.
    """

    differences: tuple[Difference, ...] = ()
    structure_diffs: tuple[Difference, ...] = ()

    def similar(self) -> bool:
        """True if the documents are equal under value comparison."""
        return not self.differences

    def similar_structure(self) -> bool:
        """True if the documents have the same shape."""
        return not self.structure_diffs

    def differences_text(self) -> str:
        """One line per value-mode difference."""
        return "\n".join(d.render() for d in self.differences)

    def structure_differences(self) -> str:
        """Report of structure-mode differences, empty when shapes match."""
        if not self.structure_diffs:
            return ""
        lines = "\n".join(d.render() for d in self.structure_diffs)
        return f"JSON documents have different structures:\n{lines}"

    def report(self) -> str:
        """Report of value-mode differences."""
        if not self.differences:
            return "JSON documents are similar."
        return f"JSON documents are different:\n{self.differences_text()}"

    def __str__(self) -> str:
        return self.report()
