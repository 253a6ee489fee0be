"""In-memory model of a single filter condition."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from gridquery.operators import LogicalConnective, Operator, is_operator_allowed
from gridquery.schema import PropertyDescriptor, ValueType


def _new_condition_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Condition:
    """One filter condition plus the connective joining it to the next one.

    ``next_connective`` is set only when another condition follows in the
    chain. ``id`` identifies the condition for the editing UI and is not
    part of equality: two conditions that filter the same way compare equal.
    """

    prop: PropertyDescriptor | None = None
    operator: Operator = Operator.EQUALS
    raw_value: str = ""
    case_insensitive: bool = False
    next_connective: LogicalConnective | None = None
    id: str = field(default_factory=_new_condition_id, compare=False)

    @property
    def is_valid(self) -> bool:
        """A property is chosen and, unless it is boolean, a value is filled in."""
        if self.prop is None or not self.prop.name.strip():
            return False
        if self.prop.value_type == ValueType.BOOLEAN:
            return True
        return bool(self.raw_value and self.raw_value.strip())

    @property
    def is_complete(self) -> bool:
        return self.is_valid

    @property
    def operator_allowed(self) -> bool:
        if self.prop is None:
            return False
        return is_operator_allowed(self.operator, self.prop.value_type)

    @property
    def is_last(self) -> bool:
        return self.next_connective is None

    def to_query(self) -> str:
        """Serialize this condition to its query token ("" when invalid)."""
        from gridquery.serializer import serialize

        return serialize(self)
