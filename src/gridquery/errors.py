"""Structured error types for gridquery."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GridQueryError(Exception):
    """Base error for all gridquery errors."""


class SchemaError(GridQueryError):
    """Raised when a property schema or schema document is invalid."""


class DuplicatePropertyError(SchemaError):
    """Raised when two properties share a name (compared case-insensitively)."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"Duplicate property names in schema: {names}")


class UnknownPropertyError(GridQueryError):
    """Raised when a property name is required but not present in the schema."""

    def __init__(self, name: str, known: list[str] | None = None) -> None:
        self.name = name
        self.known = known or []
        msg = f"Unknown property '{name}'"
        if self.known:
            msg += f". Known properties: {', '.join(self.known)}"
        super().__init__(msg)


class ConditionDocumentError(GridQueryError):
    """Raised when a condition document (YAML/JSON) cannot be loaded."""


class IssueKind(str, Enum):
    """Why a query segment was dropped during parsing."""

    EMPTY = "empty"
    MALFORMED = "malformed"
    UNKNOWN_PROPERTY = "unknown_property"
    INVALID_VALUE = "invalid_value"


@dataclass(frozen=True)
class SegmentIssue:
    """A query segment the parser skipped.

    ``offset`` is the index of the segment's first character in the
    original query string.
    """

    kind: IssueKind
    segment: str
    offset: int
    detail: str = ""
