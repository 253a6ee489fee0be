"""Serialize conditions into query tokens and composed query strings."""

from __future__ import annotations

from collections.abc import Sequence

from gridquery.conditions import Condition
from gridquery.config import GridQueryConfig
from gridquery.values import format_value


def serialize(condition: Condition, config: GridQueryConfig | None = None) -> str:
    """Serialize one condition as ``name`` + ``symbol`` + ``value``.

    Invalid (incomplete) conditions serialize to an empty string.
    """
    if not condition.is_valid or condition.prop is None:
        return ""

    prop = condition.prop
    value = format_value(
        condition.raw_value,
        prop.value_type,
        case_insensitive=condition.case_insensitive,
        config=config,
    )
    return f"{prop.name}{condition.operator.symbol}{value}"


def serialize_conditions(
    conditions: Sequence[Condition], config: GridQueryConfig | None = None
) -> str:
    """Compose a query from a condition chain.

    Invalid conditions are omitted. The separator written before a condition
    is the connective stored on the condition right before it in the chain,
    even when that one was omitted.
    """
    config = config or GridQueryConfig()
    parts: list[str] = []
    for index, condition in enumerate(conditions):
        token = serialize(condition, config)
        if not token:
            continue
        if parts:
            connective = conditions[index - 1].next_connective or config.default_connective
            parts.append(connective.symbol)
        parts.append(token)
    return "".join(parts)
