"""Parse query strings back into condition chains.

The query language is a flat chain of ``name`` + ``operator`` + ``value``
segments joined by ``,`` (AND) or ``|`` (OR), for example
``FirstName=John,Age>30|Dept=Sales``. A trailing ``/i`` marks a
case-insensitive string match.

Parsing is best effort: segments that are malformed, name an unknown
property, or carry a value that does not fit the property type are
skipped, and the rest of the query is still parsed. Nothing here raises
on bad query input.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from gridquery.conditions import Condition
from gridquery.errors import IssueKind, SegmentIssue
from gridquery.operators import LogicalConnective, Operator, match_operator
from gridquery.schema import PropertyDescriptor, Schema, ValueType, find_property
from gridquery.values import validate_value

logger = logging.getLogger(__name__)

CASE_INSENSITIVE_SUFFIX = "/i"

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

SchemaLike = Schema | Iterable[PropertyDescriptor]


@dataclass
class ParseResult:
    """Conditions parsed from a query plus the segments that were dropped."""

    conditions: list[Condition] = field(default_factory=list)
    issues: list[SegmentIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def uniform_connective(self) -> LogicalConnective | None:
        """The connective shared by the whole chain, or None if mixed or single."""
        connectives = {c.next_connective for c in self.conditions[:-1]}
        if len(connectives) == 1:
            return connectives.pop()
        return None


@dataclass
class _Segment:
    prop: PropertyDescriptor
    operator: Operator
    raw_value: str
    case_insensitive: bool
    connective: LogicalConnective | None


def parse(query: str | None, schema: SchemaLike) -> list[Condition]:
    """Parse a query string into conditions, skipping segments that do not parse."""
    return parse_with_report(query, schema).conditions


def parse_with_report(query: str | None, schema: SchemaLike) -> ParseResult:
    """Parse a query string and report every segment that was skipped."""
    result = ParseResult()
    if query is None or not query.strip():
        return result

    if not isinstance(schema, Schema):
        # Plain iterables may be one-shot generators; lookups need a sequence
        schema = list(schema)

    parsed: list[_Segment] = []
    for offset, text, connective in _split_segments(query):
        segment, issue = _parse_segment(text, offset, schema, connective)
        if issue is not None:
            logger.debug("Dropped query segment %r: %s", issue.segment, issue.kind.value)
            result.issues.append(issue)
            continue
        parsed.append(segment)

    for index, seg in enumerate(parsed):
        is_last = index == len(parsed) - 1
        result.conditions.append(
            Condition(
                prop=seg.prop,
                operator=seg.operator,
                raw_value=seg.raw_value,
                case_insensitive=seg.case_insensitive,
                next_connective=None if is_last else seg.connective,
            )
        )
    return result


def _split_segments(query: str) -> Iterable[tuple[int, str, LogicalConnective | None]]:
    """Yield (offset, segment text, connective after it) left to right.

    The nearer of the next ``,`` and ``|`` ends each segment.
    """
    cursor = 0
    length = len(query)
    while cursor < length:
        next_comma = query.find(",", cursor)
        next_pipe = query.find("|", cursor)

        if next_comma == -1 and next_pipe == -1:
            end, connective = length, None
        elif next_pipe == -1 or (next_comma != -1 and next_comma < next_pipe):
            end, connective = next_comma, LogicalConnective.AND
        else:
            end, connective = next_pipe, LogicalConnective.OR

        yield cursor, query[cursor:end], connective
        cursor = end + 1


def _parse_segment(
    text: str,
    offset: int,
    schema: Schema | list[PropertyDescriptor],
    connective: LogicalConnective | None,
) -> tuple[_Segment, None] | tuple[None, SegmentIssue]:
    segment = text.strip()
    if not segment:
        return None, SegmentIssue(IssueKind.EMPTY, text, offset)

    case_insensitive = False
    if segment.endswith(CASE_INSENSITIVE_SUFFIX):
        case_insensitive = True
        segment = segment[: -len(CASE_INSENSITIVE_SUFFIX)]

    ident = _IDENTIFIER_RE.match(segment)
    if ident is None:
        return None, SegmentIssue(
            IssueKind.MALFORMED, text, offset, "expected a property name"
        )
    name = ident.group(0)
    symbol = match_operator(segment, ident.end())
    if symbol is None:
        return None, SegmentIssue(
            IssueKind.MALFORMED, text, offset, f"expected an operator after '{name}'"
        )
    raw = segment[ident.end() + len(symbol) :]

    prop = find_property(schema, name)
    if prop is None:
        return None, SegmentIssue(
            IssueKind.UNKNOWN_PROPERTY, text, offset, f"no property named '{name}'"
        )

    operator = Operator.from_symbol(symbol)
    if operator is None:
        return None, SegmentIssue(IssueKind.MALFORMED, text, offset, f"unknown operator '{symbol}'")

    value = validate_value(raw, prop.value_type)
    if value is None:
        if prop.value_type != ValueType.BOOLEAN or raw:
            return None, SegmentIssue(
                IssueKind.INVALID_VALUE,
                text,
                offset,
                f"'{raw}' is not a valid {prop.value_type.value} value",
            )
        value = ""

    return (
        _Segment(
            prop=prop,
            operator=operator,
            raw_value=value,
            case_insensitive=case_insensitive,
            connective=connective,
        ),
        None,
    )
