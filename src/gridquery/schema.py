"""Filterable property descriptors and the schema that groups them."""

from __future__ import annotations

import re
import types
import typing
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, get_args, get_origin, get_type_hints

from gridquery.errors import DuplicatePropertyError, UnknownPropertyError


class ValueType(str, Enum):
    """Data types a filterable property can have."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"


@dataclass(frozen=True)
class PropertyDescriptor:
    """A property that can be filtered on.

    ``name`` must match the attribute/column name in the underlying rows.
    ``true_label`` and ``false_label`` are optional display strings for
    boolean properties.
    """

    name: str
    display_label: str = ""
    value_type: ValueType = ValueType.STRING
    true_label: str | None = None
    false_label: str | None = None

    @property
    def label(self) -> str:
        return self.display_label or self.name


class Schema:
    """Ordered, read-only collection of property descriptors.

    Names are unique when compared case-insensitively.
    """

    def __init__(self, properties: Iterable[PropertyDescriptor] = ()) -> None:
        self._properties: tuple[PropertyDescriptor, ...] = tuple(properties)
        self._index: dict[str, PropertyDescriptor] = {}
        duplicates: list[str] = []
        for prop in self._properties:
            key = prop.name.casefold()
            if key in self._index:
                duplicates.append(prop.name)
                continue
            self._index[key] = prop
        if duplicates:
            raise DuplicatePropertyError(duplicates)

    def __iter__(self) -> Iterator[PropertyDescriptor]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __getitem__(self, index: int) -> PropertyDescriptor:
        return self._properties[index]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._index

    def __repr__(self) -> str:
        return f"Schema({[p.name for p in self._properties]!r})"

    @property
    def names(self) -> list[str]:
        return [p.name for p in self._properties]

    def find(self, name: str) -> PropertyDescriptor | None:
        """Look up a property by name, ignoring case."""
        return self._index.get(name.casefold())

    def require(self, name: str) -> PropertyDescriptor:
        prop = self.find(name)
        if prop is None:
            raise UnknownPropertyError(name, self.names)
        return prop


def find_property(
    schema: Schema | Iterable[PropertyDescriptor], name: str
) -> PropertyDescriptor | None:
    """Case-insensitive first-match lookup over a schema or plain descriptor list."""
    if isinstance(schema, Schema):
        return schema.find(name)
    key = name.casefold()
    for prop in schema:
        if prop.name.casefold() == key:
            return prop
    return None


# --- Schema inference from annotated classes ---

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def humanize(name: str) -> str:
    """Turn ``HireDate`` or ``hire_date`` into ``Hire Date``."""
    words = _CAMEL_BOUNDARY_RE.sub(" ", name.replace("_", " ")).split()
    return " ".join(w[:1].upper() + w[1:] for w in words)


def value_type_for(annotation: Any) -> ValueType | None:
    """Map a Python annotation to a ValueType, or None if unsupported."""
    origin = get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        members = [a for a in get_args(annotation) if a is not type(None)]
        if len(members) != 1:
            return None
        return value_type_for(members[0])

    if origin is not None or not isinstance(annotation, type):
        return None
    # bool before int, datetime before date: both are subclasses
    if issubclass(annotation, bool):
        return ValueType.BOOLEAN
    if issubclass(annotation, (int, float, Decimal)):
        return ValueType.NUMBER
    if issubclass(annotation, datetime):
        return ValueType.DATETIME
    if issubclass(annotation, date):
        return ValueType.DATE
    if issubclass(annotation, str):
        return ValueType.STRING
    return None


def schema_from_type(cls: type) -> Schema:
    """Infer a schema from a dataclass, pydantic model, or annotated class.

    Attributes with unsupported annotations and private attributes are skipped.
    """
    model_fields = getattr(cls, "model_fields", None)
    try:
        if isinstance(model_fields, dict):
            # pydantic models: resolved annotations live on the field info
            hints = {name: info.annotation for name, info in model_fields.items()}
        else:
            hints = get_type_hints(cls)
    except Exception:
        # Unresolvable forward refs: fall back to raw annotations
        hints = dict(getattr(cls, "__annotations__", {}))

    properties: list[PropertyDescriptor] = []
    for attr_name, annotation in hints.items():
        if attr_name.startswith("_") or get_origin(annotation) is typing.ClassVar:
            continue
        value_type = value_type_for(annotation)
        if value_type is None:
            continue
        properties.append(
            PropertyDescriptor(
                name=attr_name,
                display_label=humanize(attr_name),
                value_type=value_type,
            )
        )
    return Schema(properties)
