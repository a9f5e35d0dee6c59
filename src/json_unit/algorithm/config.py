"""DiffConfig and the enums that select comparison behaviour.

DiffConfig is a frozen (immutable) dataclass.  A single read-only
``DEFAULT_CONFIG`` exists for the whole process; callers that need other
settings derive a new value with ``DiffConfig.replace`` rather than mutating
shared state, so concurrent comparisons always see a consistent snapshot.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum, auto
from typing import Any

from json_unit.algorithm.tolerance import coerce_tolerance
from json_unit.errors import ConfigurationError

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_IGNORE_PLACEHOLDER",
    "ArrayComparisonMode",
    "ComparisonMode",
    "DiffConfig",
    "ExtraFieldsPolicy",
]

DEFAULT_IGNORE_PLACEHOLDER = "${json-unit.ignore}"


class ComparisonMode(StrEnum):
    """What a comparison pass checks.

    - VALUE:     Full equality of kinds, shapes and leaf values.
    - STRUCTURE: Container shape and key/index presence only.
    """

    VALUE = auto()
    STRUCTURE = auto()


class ExtraFieldsPolicy(StrEnum):
    """How object fields present only in the actual document are treated.

    - STRICT:  Every extra field is reported as a difference.
    - LENIENT: Extra fields are silently tolerated.
    """

    STRICT = auto()
    LENIENT = auto()


class ArrayComparisonMode(StrEnum):
    """How JSON arrays are compared.

    - ORDERED:   Element i of expected is compared with element i of actual.
    - UNORDERED: Elements are paired by minimum total difference
                 (Hungarian assignment), so order does not matter.
    """

    ORDERED = auto()
    UNORDERED = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for one comparison call.

    Attributes:
        ignore_placeholder: Text value that, when found in the expected tree,
            matches any actual value.  Defaults to ``"${json-unit.ignore}"``.
        tolerance: Maximum absolute difference for two numbers to count as
            equal.  ``None`` requires exact equality.  Accepts int, float,
            str or Decimal and is stored as Decimal.
        extra_fields: Whether fields present only in the actual document
            are differences.  Default STRICT.
        array_comparison_mode: How arrays are compared.  Default ORDERED.
    """

    ignore_placeholder: str = DEFAULT_IGNORE_PLACEHOLDER
    tolerance: Decimal | None = None
    extra_fields: ExtraFieldsPolicy = ExtraFieldsPolicy.STRICT
    array_comparison_mode: ArrayComparisonMode = ArrayComparisonMode.ORDERED

    def __post_init__(self) -> None:
        if not isinstance(self.ignore_placeholder, str) or not self.ignore_placeholder:
            msg = f"ignore_placeholder must be a non-empty string, got {self.ignore_placeholder!r}"
            raise ConfigurationError(msg)
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "tolerance", coerce_tolerance(self.tolerance))
        try:
            object.__setattr__(self, "extra_fields", ExtraFieldsPolicy(self.extra_fields))
            object.__setattr__(
                self,
                "array_comparison_mode",
                ArrayComparisonMode(self.array_comparison_mode),
            )
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

    def replace(self, **changes: Any) -> DiffConfig:
        """Return a copy of this config with ``changes`` applied."""
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = DiffConfig()
