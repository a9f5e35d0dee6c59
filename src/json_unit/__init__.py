"""json-unit - JSON comparison with ignore placeholders, tolerance and paths."""

from __future__ import annotations

import logging

from json_unit.algorithm.config import (
    DEFAULT_CONFIG,
    DEFAULT_IGNORE_PLACEHOLDER,
    ArrayComparisonMode,
    ComparisonMode,
    DiffConfig,
    ExtraFieldsPolicy,
)
from json_unit.api import (
    assert_json_equals,
    assert_json_part_equals,
    assert_json_part_structure_equals,
    assert_json_structure_equals,
    diff,
)
from json_unit.comparator import JsonDiff
from json_unit.errors import (
    ConfigurationError,
    EngineError,
    JsonUnitError,
    ParseError,
    PathNotFoundError,
    PathSyntaxError,
)
from json_unit.result import DiffResult, Difference, DifferenceKind
from json_unit.tree import NodeKind, TreeBuilder, TreeNode

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "DEFAULT_CONFIG",
    "DEFAULT_IGNORE_PLACEHOLDER",
    "ArrayComparisonMode",
    "ComparisonMode",
    "ConfigurationError",
    "DiffConfig",
    "DiffResult",
    "Difference",
    "DifferenceKind",
    "EngineError",
    "ExtraFieldsPolicy",
    "JsonDiff",
    "JsonUnitError",
    "NodeKind",
    "ParseError",
    "PathNotFoundError",
    "PathSyntaxError",
    "TreeBuilder",
    "TreeNode",
    "assert_json_equals",
    "assert_json_part_equals",
    "assert_json_part_structure_equals",
    "assert_json_structure_equals",
    "diff",
]
