"""algorithm subpackage: public API for the comparison engine.

Provides the recursive node comparator, its configuration, and numeric
tolerance handling.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from json_unit.algorithm import ComparisonMode, DiffConfig, NodeComparator
    from json_unit.tree import TreeBuilder

    builder = TreeBuilder()
    cmp = NodeComparator(DiffConfig(tolerance=0.01))
    found = cmp.compare(builder.build({"a": 1.0}), builder.build({"a": 1.005}),
                        ComparisonMode.VALUE)
    # len(found) == 0
"""

from __future__ import annotations

from json_unit.algorithm.config import (
    DEFAULT_CONFIG,
    DEFAULT_IGNORE_PLACEHOLDER,
    ArrayComparisonMode,
    ComparisonMode,
    DiffConfig,
    ExtraFieldsPolicy,
)
from json_unit.algorithm.tolerance import coerce_tolerance, numbers_equal
from json_unit.algorithm.walker import DifferenceCollector, NodeComparator

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_IGNORE_PLACEHOLDER",
    "ArrayComparisonMode",
    "ComparisonMode",
    "DiffConfig",
    "DifferenceCollector",
    "ExtraFieldsPolicy",
    "NodeComparator",
    "coerce_tolerance",
    "numbers_equal",
]
