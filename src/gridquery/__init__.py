"""gridquery: structured filter conditions and their compact query-string form."""

__version__ = "0.1.0"

from gridquery.conditions import Condition
from gridquery.config import GridQueryConfig, configure_logging
from gridquery.errors import (
    ConditionDocumentError,
    DuplicatePropertyError,
    GridQueryError,
    IssueKind,
    SchemaError,
    SegmentIssue,
    UnknownPropertyError,
)
from gridquery.evaluate import apply_filter, matches
from gridquery.operators import LogicalConnective, Operator, operators_for_type
from gridquery.parser import ParseResult, parse, parse_with_report
from gridquery.schema import PropertyDescriptor, Schema, ValueType, schema_from_type
from gridquery.serializer import serialize, serialize_conditions

__all__ = [
    "__version__",
    "Condition",
    "GridQueryConfig",
    "configure_logging",
    "PropertyDescriptor",
    "Schema",
    "ValueType",
    "schema_from_type",
    "Operator",
    "LogicalConnective",
    "operators_for_type",
    "serialize",
    "serialize_conditions",
    "parse",
    "parse_with_report",
    "ParseResult",
    "matches",
    "apply_filter",
    "GridQueryError",
    "SchemaError",
    "DuplicatePropertyError",
    "UnknownPropertyError",
    "ConditionDocumentError",
    "IssueKind",
    "SegmentIssue",
]
