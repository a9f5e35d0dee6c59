"""Exception hierarchy for json-unit.

Engine errors (bad path syntax, unresolvable path, invalid configuration)
abort a comparison call.  ``ParseError`` comes from the normalization layer
and is deliberately *not* an ``EngineError`` so callers can tell "the input
was not JSON" apart from "the comparison was set up wrongly".

Content mismatches are never raised: they are ``Difference`` records inside
a ``DiffResult``.
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "EngineError",
    "JsonUnitError",
    "ParseError",
    "PathNotFoundError",
    "PathSyntaxError",
]


class JsonUnitError(Exception):
    """Base class for every error raised by json-unit."""


class EngineError(JsonUnitError):
    """A comparison call could not be carried out."""


class PathSyntaxError(EngineError, ValueError):
    """A path string does not match the path grammar.

    Attributes:
        path:     The offending path text.
        position: Zero-based character offset where parsing failed.
    """

    def __init__(self, path: str, position: int, reason: str) -> None:
        self.path = path
        self.position = position
        super().__init__(f"Invalid path {path!r} at position {position}: {reason}")


class PathNotFoundError(EngineError, LookupError):
    """A well-formed path addresses a field or index absent from the document.

    Attributes:
        path:     The full path that was being resolved.
        resolved: The longest prefix of ``path`` that did resolve.
    """

    def __init__(self, path: str, resolved: str, reason: str) -> None:
        self.path = path
        self.resolved = resolved
        super().__init__(f"Path {path!r} not found: {reason}")


class ConfigurationError(EngineError, ValueError):
    """An invalid configuration value (e.g. a negative tolerance)."""


class ParseError(JsonUnitError, ValueError):
    """Input text could not be parsed into a JSON tree."""
