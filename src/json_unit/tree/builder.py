"""TreeBuilder: converts any supported input into a typed TreeNode tree.

This is the single normalization point in front of the diff engine.  It
accepts:

- ``TreeNode`` instances (returned unchanged),
- JSON text as ``str``, ``bytes`` or ``bytearray``,
- text or binary streams (anything with a ``read()`` method),
- already-parsed Python values (dict, list, tuple, str, int, float,
  ``Decimal``, bool, None).

Numbers are always stored as ``Decimal`` so that comparisons are exact and
``1.0`` equals ``1``.  Floats go through their shortest ``repr`` so ``0.1``
becomes ``Decimal("0.1")`` rather than its binary expansion.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from json_unit.errors import ParseError
from json_unit.tree.nodes import NodeKind, TreeNode

__all__ = ["TreeBuilder"]

# JSON number literal (RFC 8259 section 6)
_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")

_LITERALS = frozenset({"true", "false", "null"})


def _reject_constant(name: str) -> Any:
    raise ParseError(f"Non-finite number {name} is not valid JSON")


def _looks_like_json(text: str) -> bool:
    """Return True unless ``text`` is obviously not a JSON document."""
    stripped = text.strip()
    if not stripped:
        return False
    if stripped[0] in "{[\"":
        return True
    return stripped in _LITERALS or _NUMBER.fullmatch(stripped) is not None


@dataclass
class TreeBuilder:
    """Converts supported inputs into immutable TreeNode trees.

    The dispatch order matters: ``TreeNode`` first, then text-like inputs,
    then ``bool`` before ``int`` (bool is a subclass of int in Python).

    Example::
        builder = TreeBuilder()
        builder.build('{"a": [1, 2.50]}')
        builder.build({"a": [1, 2.5]})       # same tree
        builder.build("hello", lenient_text=True)  # TEXT node "hello"
    """

    def build(self, value: Any, *, lenient_text: bool = False) -> TreeNode:
        """Convert ``value`` to a TreeNode tree.

        Args:
            value:        Any supported input (see module docstring).
            lenient_text: When True, a string that is obviously not JSON
                          (e.g. ``hello``) is taken as a plain text value
                          instead of failing to parse.  Used for expected
                          values, which are usually hand-written.

        Returns:
            The root TreeNode.

        Raises:
            ParseError: If JSON text cannot be parsed.
            TypeError:  If a Python value has no JSON representation.
        """
        if isinstance(value, TreeNode):
            return value

        if isinstance(value, (bytes, bytearray)):
            return self.parse(bytes(value).decode("utf-8"), lenient_text=lenient_text)

        if isinstance(value, str):
            return self.parse(value, lenient_text=lenient_text)

        if hasattr(value, "read"):
            data = value.read()
            if isinstance(data, (bytes, bytearray)):
                data = bytes(data).decode("utf-8")
            return self.parse(data, lenient_text=lenient_text)

        return self.from_python(value)

    def parse(self, text: str, *, lenient_text: bool = False) -> TreeNode:
        """Parse JSON text into a tree.

        Raises:
            ParseError: If ``text`` is not valid JSON (and, with
                ``lenient_text``, does not look like plain text either).
        """
        if lenient_text and not _looks_like_json(text):
            return TreeNode.text(text)
        try:
            data = json.loads(
                text,
                parse_float=Decimal,
                parse_int=Decimal,
                parse_constant=_reject_constant,
            )
        except json.JSONDecodeError as exc:
            raise ParseError(f"Can not parse JSON: {exc}") from exc
        return self.from_python(data)

    def from_python(self, value: Any) -> TreeNode:
        """Convert an already-parsed Python value into a tree."""
        # CRITICAL: bool MUST be checked before int
        if isinstance(value, bool):
            return TreeNode(NodeKind.BOOLEAN, value=value)

        if value is None:
            return TreeNode(NodeKind.NULL)

        if isinstance(value, str):
            return TreeNode(NodeKind.TEXT, value=value)

        if isinstance(value, (int, float, Decimal)):
            return TreeNode(NodeKind.NUMBER, value=self._to_decimal(value))

        if isinstance(value, Mapping):
            return self._build_object(value)

        if isinstance(value, (list, tuple)):
            return TreeNode(
                NodeKind.ARRAY, elements=tuple(self.from_python(v) for v in value)
            )

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _build_object(self, obj: Mapping[Any, Any]) -> TreeNode:
        fields: dict[str, TreeNode] = {}
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            fields[key] = self.from_python(val)
        return TreeNode.object(fields)

    @staticmethod
    def _to_decimal(value: int | float | Decimal) -> Decimal:
        number = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
        if not number.is_finite():
            raise ParseError(f"Non-finite number {value!r} is not valid JSON")
        return number
