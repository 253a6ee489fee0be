"""Operator table: comparison operators, logical connectives, and their symbols."""

from __future__ import annotations

from enum import Enum

from gridquery.schema import ValueType


class Operator(str, Enum):
    """Comparison operators supported by the query language."""

    # Universal
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"

    # Numeric and date
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_OR_EQUAL = "greater_or_equal"
    LESS_OR_EQUAL = "less_or_equal"

    # String
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    STARTS_WITH = "starts_with"
    NOT_STARTS_WITH = "not_starts_with"
    ENDS_WITH = "ends_with"
    NOT_ENDS_WITH = "not_ends_with"

    @property
    def symbol(self) -> str:
        return OPERATOR_SYMBOLS[self]

    @property
    def display_name(self) -> str:
        return OPERATOR_DISPLAY_NAMES[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator | None:
        return SYMBOL_OPERATORS.get(symbol)


class LogicalConnective(str, Enum):
    """Boolean join between a condition and the one that follows it."""

    AND = "and"
    OR = "or"

    @property
    def symbol(self) -> str:
        return CONNECTIVE_SYMBOLS[self]

    @property
    def display_name(self) -> str:
        return self.name

    @classmethod
    def from_symbol(cls, symbol: str) -> LogicalConnective | None:
        return SYMBOL_CONNECTIVES.get(symbol)


OPERATOR_SYMBOLS: dict[Operator, str] = {
    Operator.EQUALS: "=",
    Operator.NOT_EQUALS: "!=",
    Operator.GREATER_THAN: ">",
    Operator.LESS_THAN: "<",
    Operator.GREATER_OR_EQUAL: ">=",
    Operator.LESS_OR_EQUAL: "<=",
    Operator.CONTAINS: "=*",
    Operator.NOT_CONTAINS: "!*",
    Operator.STARTS_WITH: "^",
    Operator.NOT_STARTS_WITH: "!^",
    Operator.ENDS_WITH: "$",
    Operator.NOT_ENDS_WITH: "!$",
}

SYMBOL_OPERATORS: dict[str, Operator] = {sym: op for op, sym in OPERATOR_SYMBOLS.items()}

# Shorter symbols are prefixes of longer ones ("!=" vs "=", ">=" vs ">", "=*" vs "="),
# so candidates must be tried longest first. Stable sort keeps table order within a length.
OPERATOR_SYMBOLS_LONGEST_FIRST: tuple[str, ...] = tuple(
    sorted(OPERATOR_SYMBOLS.values(), key=len, reverse=True)
)

OPERATOR_DISPLAY_NAMES: dict[Operator, str] = {
    Operator.EQUALS: "Equals",
    Operator.NOT_EQUALS: "Not Equals",
    Operator.GREATER_THAN: "Greater Than",
    Operator.LESS_THAN: "Less Than",
    Operator.GREATER_OR_EQUAL: "Greater or Equal",
    Operator.LESS_OR_EQUAL: "Less or Equal",
    Operator.CONTAINS: "Contains",
    Operator.NOT_CONTAINS: "Not Contains",
    Operator.STARTS_WITH: "Starts With",
    Operator.NOT_STARTS_WITH: "Not Starts With",
    Operator.ENDS_WITH: "Ends With",
    Operator.NOT_ENDS_WITH: "Not Ends With",
}

CONNECTIVE_SYMBOLS: dict[LogicalConnective, str] = {
    LogicalConnective.AND: ",",
    LogicalConnective.OR: "|",
}

SYMBOL_CONNECTIVES: dict[str, LogicalConnective] = {
    sym: conn for conn, sym in CONNECTIVE_SYMBOLS.items()
}

_ORDERING_OPERATORS: tuple[Operator, ...] = (
    Operator.EQUALS,
    Operator.NOT_EQUALS,
    Operator.GREATER_THAN,
    Operator.LESS_THAN,
    Operator.GREATER_OR_EQUAL,
    Operator.LESS_OR_EQUAL,
)

OPERATORS_BY_TYPE: dict[ValueType, tuple[Operator, ...]] = {
    ValueType.STRING: (
        Operator.EQUALS,
        Operator.NOT_EQUALS,
        Operator.CONTAINS,
        Operator.NOT_CONTAINS,
        Operator.STARTS_WITH,
        Operator.NOT_STARTS_WITH,
        Operator.ENDS_WITH,
        Operator.NOT_ENDS_WITH,
    ),
    ValueType.NUMBER: _ORDERING_OPERATORS,
    ValueType.DATE: _ORDERING_OPERATORS,
    ValueType.DATETIME: _ORDERING_OPERATORS,
    ValueType.BOOLEAN: (Operator.EQUALS, Operator.NOT_EQUALS),
}

NEGATED_OPERATORS: frozenset[Operator] = frozenset(
    {
        Operator.NOT_EQUALS,
        Operator.NOT_CONTAINS,
        Operator.NOT_STARTS_WITH,
        Operator.NOT_ENDS_WITH,
    }
)


def operators_for_type(value_type: ValueType) -> tuple[Operator, ...]:
    """Operators a UI should offer for a property of the given type."""
    return OPERATORS_BY_TYPE.get(value_type, (Operator.EQUALS, Operator.NOT_EQUALS))


def is_operator_allowed(operator: Operator, value_type: ValueType) -> bool:
    return operator in operators_for_type(value_type)


def match_operator(text: str, pos: int = 0) -> str | None:
    """Return the operator symbol that starts at ``text[pos]``, longest match first."""
    for symbol in OPERATOR_SYMBOLS_LONGEST_FIRST:
        if text.startswith(symbol, pos):
            return symbol
    return None
