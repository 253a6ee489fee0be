"""Apply a condition chain to in-memory rows.

The chain is folded left to right with no precedence: ``A,B|C`` is
``(A and B) or C``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from gridquery.conditions import Condition
from gridquery.operators import NEGATED_OPERATORS, LogicalConnective, Operator
from gridquery.schema import ValueType
from gridquery.values import coerce_value

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT")

_MISSING = object()


def row_value(row: Any, name: str) -> Any:
    """Read a named value from a mapping or an object, falling back to a case-insensitive match."""
    if isinstance(row, Mapping):
        if name in row:
            return row[name]
        key = name.casefold()
        for k, v in row.items():
            if isinstance(k, str) and k.casefold() == key:
                return v
        return None

    value = getattr(row, name, _MISSING)
    if value is not _MISSING:
        return value
    key = name.casefold()
    for attr in dir(row):
        if not attr.startswith("_") and attr.casefold() == key:
            return getattr(row, attr)
    return None


def evaluate_condition(condition: Condition, row: Any) -> bool:
    """Evaluate one condition against a row. Invalid conditions match everything."""
    if not condition.is_valid or condition.prop is None:
        return True

    prop = condition.prop
    op = condition.operator
    actual = coerce_value(row_value(row, prop.name), prop.value_type)
    expected = coerce_value(condition.raw_value, prop.value_type)

    if prop.value_type == ValueType.BOOLEAN and expected is None:
        # boolean filters with no value default to "true"
        expected = True

    if actual is None or expected is None:
        return op in NEGATED_OPERATORS

    if prop.value_type == ValueType.STRING and condition.case_insensitive:
        actual = actual.casefold()
        expected = expected.casefold()

    try:
        return _compare(op, actual, expected)
    except TypeError:
        logger.debug("Cannot compare %r with %r for %s", actual, expected, prop.name)
        return op in NEGATED_OPERATORS


def _compare(op: Operator, actual: Any, expected: Any) -> bool:
    if op == Operator.EQUALS:
        return actual == expected
    if op == Operator.NOT_EQUALS:
        return actual != expected
    if op == Operator.GREATER_THAN:
        return actual > expected
    if op == Operator.LESS_THAN:
        return actual < expected
    if op == Operator.GREATER_OR_EQUAL:
        return actual >= expected
    if op == Operator.LESS_OR_EQUAL:
        return actual <= expected

    # String operators also work on the text form of other types
    actual_text, expected_text = str(actual), str(expected)
    if op == Operator.CONTAINS:
        return expected_text in actual_text
    if op == Operator.NOT_CONTAINS:
        return expected_text not in actual_text
    if op == Operator.STARTS_WITH:
        return actual_text.startswith(expected_text)
    if op == Operator.NOT_STARTS_WITH:
        return not actual_text.startswith(expected_text)
    if op == Operator.ENDS_WITH:
        return actual_text.endswith(expected_text)
    if op == Operator.NOT_ENDS_WITH:
        return not actual_text.endswith(expected_text)
    raise ValueError(f"Unsupported operator: {op}")


def matches(row: Any, conditions: Sequence[Condition]) -> bool:
    """Whether a row satisfies the condition chain. An empty chain matches.

    Invalid conditions are skipped; the connective before each remaining
    condition is taken from its neighbour in the chain, the same way
    ``serialize_conditions`` composes a query.
    """
    result: bool | None = None
    for index, condition in enumerate(conditions):
        if not condition.is_valid:
            continue
        outcome = evaluate_condition(condition, row)
        if result is None:
            result = outcome
            continue
        connective = conditions[index - 1].next_connective or LogicalConnective.AND
        if connective == LogicalConnective.AND:
            result = result and outcome
        else:
            result = result or outcome
    return True if result is None else result


def apply_filter(rows: Iterable[RowT], conditions: Sequence[Condition]) -> list[RowT]:
    """Return the rows that satisfy the condition chain, preserving order."""
    return [row for row in rows if matches(row, conditions)]
