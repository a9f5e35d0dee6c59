"""Path expressions: parsing and resolution against a document tree.

Grammar::

    path     := "" | head ( "." field | "[" digits "]" )*
    head     := field | "[" digits "]"
    field    := [A-Za-z_][A-Za-z0-9_]*

Examples: ``root.array[0].value``, ``items[2]``, ``[0].name``.  The empty
path addresses the document root.

Parsing is pure, so parsed expressions are memoised in a bounded,
lock-protected LRU cache shared by all callers.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass

from cachetools import LRUCache, cached

from json_unit.errors import PathNotFoundError, PathSyntaxError
from json_unit.tree.nodes import NodeKind, TreeNode

__all__ = [
    "FieldSegment",
    "IndexSegment",
    "PathExpression",
    "parse_path",
    "resolve",
]

_FIELD = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_INDEX = re.compile(r"\[([0-9]+)\]")


@dataclass(frozen=True, slots=True)
class FieldSegment:
    """Selects a field of an object."""

    name: str

    def render(self, first: bool = False) -> str:
        return self.name if first else f".{self.name}"


@dataclass(frozen=True, slots=True)
class IndexSegment:
    """Selects an element of an array by zero-based index."""

    index: int

    def render(self, first: bool = False) -> str:
        return f"[{self.index}]"


Segment = FieldSegment | IndexSegment


@dataclass(frozen=True, slots=True)
class PathExpression:
    """An ordered sequence of path segments.  Empty means the root."""

    segments: tuple[Segment, ...] = ()

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        """Return the textual form, e.g. ``root.array[0].value``."""
        return "".join(s.render(first=i == 0) for i, s in enumerate(self.segments))


@cached(cache=LRUCache(maxsize=256), lock=threading.Lock())
def parse_path(text: str) -> PathExpression:
    """Parse ``text`` into a PathExpression.

    Leading and trailing whitespace is ignored; an empty string yields the
    root expression.

    Raises:
        PathSyntaxError: If ``text`` does not match the path grammar.
    """
    if not isinstance(text, str):
        raise TypeError(f"path must be str, got {type(text)!r}")
    path = text.strip()
    segments: list[Segment] = []
    pos = 0
    end = len(path)

    while pos < end:
        ch = path[pos]
        if ch == "[":
            match = _INDEX.match(path, pos)
            if match is None:
                raise PathSyntaxError(path, pos, _bracket_problem(path, pos))
            segments.append(IndexSegment(int(match.group(1))))
            pos = match.end()
            continue

        if segments:
            if ch != ".":
                raise PathSyntaxError(path, pos, f"unexpected character {ch!r}")
            pos += 1
        match = _FIELD.match(path, pos)
        if match is None:
            raise PathSyntaxError(path, pos, "expected a field name")
        segments.append(FieldSegment(match.group(0)))
        pos = match.end()

    return PathExpression(tuple(segments))


def _bracket_problem(path: str, pos: int) -> str:
    close = path.find("]", pos)
    if close == -1:
        return "unbalanced '['"
    if close == pos + 1:
        return "empty index"
    return f"index must be a non-negative integer, got {path[pos + 1:close]!r}"


def resolve(document: TreeNode, path: str | PathExpression) -> TreeNode:
    """Return the subtree of ``document`` addressed by ``path``.

    Args:
        document: Root of the document tree.  Never mutated.
        path:     Path text or an already-parsed PathExpression.

    Returns:
        The addressed node; ``document`` itself for the empty path.

    Raises:
        PathSyntaxError:   If ``path`` is text that does not parse.
        PathNotFoundError: If a field is missing or an index is out of range.
    """
    expression = parse_path(path) if isinstance(path, str) else path
    text = expression.render()
    node = document

    for depth, segment in enumerate(expression.segments):
        resolved = PathExpression(expression.segments[:depth]).render()
        if isinstance(segment, FieldSegment):
            if node.kind != NodeKind.OBJECT:
                raise PathNotFoundError(
                    text, resolved, f"{resolved or 'root'} is {node.kind}, not an object"
                )
            if segment.name not in node.fields:
                raise PathNotFoundError(
                    text, resolved, f"no field {segment.name!r} in {resolved or 'root'}"
                )
            node = node.fields[segment.name]
        else:
            if node.kind != NodeKind.ARRAY:
                raise PathNotFoundError(
                    text, resolved, f"{resolved or 'root'} is {node.kind}, not an array"
                )
            if segment.index >= len(node.elements):
                raise PathNotFoundError(
                    text,
                    resolved,
                    f"index {segment.index} out of range for array of length "
                    f"{len(node.elements)} at {resolved or 'root'}",
                )
            node = node.elements[segment.index]

    return node
