"""TreeNode dataclass and NodeKind StrEnum: the canonical JSON tree.

Every value that reaches the diff engine has been converted into a
``TreeNode`` by ``TreeBuilder``.  Nodes are immutable: arrays hold a tuple of
children and objects hold a read-only mapping proxy.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum, auto
from types import MappingProxyType
from typing import Any

__all__ = ["NodeKind", "TreeNode"]


class NodeKind(StrEnum):
    """The six kinds of JSON value.

    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"  : stored as ``decimal.Decimal``
    - TEXT    -> "text"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    TEXT = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (NodeKind.ARRAY, NodeKind.OBJECT)


def _no_fields() -> Mapping[str, TreeNode]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class TreeNode:
    """One JSON value.

    Attributes:
        kind:     Which variant this node is (see NodeKind).
        value:    ``None``, ``bool``, ``Decimal`` or ``str`` for leaves;
                  ``None`` for containers.
        elements: Children of an ARRAY node, in order.  Empty otherwise.
        fields:   Children of an OBJECT node.  Iteration follows insertion
                  order; equality ignores it.
    """

    kind: NodeKind
    value: Any = None
    elements: tuple[TreeNode, ...] = ()
    fields: Mapping[str, TreeNode] = field(default_factory=_no_fields)

    # Children live in a read-only mapping, so nodes are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def null(cls) -> TreeNode:
        return cls(NodeKind.NULL)

    @classmethod
    def boolean(cls, value: bool) -> TreeNode:
        return cls(NodeKind.BOOLEAN, value=bool(value))

    @classmethod
    def number(cls, value: Decimal | int | str) -> TreeNode:
        return cls(NodeKind.NUMBER, value=Decimal(value))

    @classmethod
    def text(cls, value: str) -> TreeNode:
        return cls(NodeKind.TEXT, value=value)

    @classmethod
    def array(cls, elements: Iterable[TreeNode]) -> TreeNode:
        return cls(NodeKind.ARRAY, elements=tuple(elements))

    @classmethod
    def object(cls, fields: Mapping[str, TreeNode] | Iterable[tuple[str, TreeNode]]) -> TreeNode:
        return cls(NodeKind.OBJECT, fields=MappingProxyType(dict(fields)))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_container(self) -> bool:
        return self.kind.is_container

    def render(self) -> str:
        """Return compact JSON text for this node, used in diff messages."""
        kind = self.kind
        if kind == NodeKind.NULL:
            return "null"
        if kind == NodeKind.BOOLEAN:
            return "true" if self.value else "false"
        if kind == NodeKind.NUMBER:
            return str(self.value)
        if kind == NodeKind.TEXT:
            return json.dumps(self.value, ensure_ascii=False)
        if kind == NodeKind.ARRAY:
            return "[" + ",".join(e.render() for e in self.elements) + "]"
        parts = (
            f"{json.dumps(k, ensure_ascii=False)}:{v.render()}"
            for k, v in self.fields.items()
        )
        return "{" + ",".join(parts) + "}"
