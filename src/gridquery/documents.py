"""YAML/JSON documents describing schemas and condition lists."""

from __future__ import annotations

import json
from pathlib import Path
from datetime import date, datetime
from typing import IO, Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gridquery.conditions import Condition
from gridquery.errors import (
    ConditionDocumentError,
    GridQueryError,
    SchemaError,
    UnknownPropertyError,
)
from gridquery.operators import LogicalConnective, Operator
from gridquery.schema import PropertyDescriptor, Schema, ValueType

# YAML turns unquoted ISO dates into date objects
ConditionValue = Union[str, bool, int, float, datetime, date, None]


class PropertyEntry(BaseModel):
    """One property in a schema document."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    label: Optional[str] = None
    type: ValueType = ValueType.STRING
    true_label: Optional[str] = None
    false_label: Optional[str] = None

    def to_descriptor(self) -> PropertyDescriptor:
        return PropertyDescriptor(
            name=self.name,
            display_label=self.label or "",
            value_type=self.type,
            true_label=self.true_label,
            false_label=self.false_label,
        )


class SchemaDocument(BaseModel):
    """Top-level schema document: ``properties: [...]``."""

    model_config = ConfigDict(extra="forbid")

    properties: list[PropertyEntry] = Field(default_factory=list)


class ConditionEntry(BaseModel):
    """One condition in a condition document.

    ``operator`` accepts either the operator name (``greater_than``) or
    its query symbol (``>``); ``next`` accepts ``and``/``or`` or ``,``/``|``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    property: str
    operator: str = Operator.EQUALS.value
    value: ConditionValue = ""
    case_insensitive: bool = False
    next: Optional[str] = None


def _read_structured(path: Union[str, Path, IO[str]]) -> Any:
    """Read YAML or JSON (JSON is a YAML subset) from a path or open stream."""
    if hasattr(path, "read"):
        text = path.read()  # type: ignore[union-attr]
    else:
        text = Path(path).read_text(encoding="utf-8")
    return yaml.safe_load(text)


def load_schema(path: Union[str, Path, IO[str]]) -> Schema:
    """Load a schema document from a YAML or JSON file."""
    try:
        data = _read_structured(path)
    except (OSError, yaml.YAMLError) as e:
        raise SchemaError(f"Cannot read schema document: {e}") from e

    if isinstance(data, list):
        data = {"properties": data}
    try:
        doc = SchemaDocument.model_validate(data or {})
    except ValidationError as e:
        raise SchemaError(f"Invalid schema document: {e}") from e
    return Schema(entry.to_descriptor() for entry in doc.properties)


def schema_to_dict(schema: Schema) -> dict[str, Any]:
    properties: list[dict[str, Any]] = []
    for prop in schema:
        entry: dict[str, Any] = {"name": prop.name, "type": prop.value_type.value}
        if prop.display_label:
            entry["label"] = prop.display_label
        if prop.true_label is not None:
            entry["true_label"] = prop.true_label
        if prop.false_label is not None:
            entry["false_label"] = prop.false_label
        properties.append(entry)
    return {"properties": properties}


def dump_schema(schema: Schema, fmt: str = "yaml") -> str:
    data = schema_to_dict(schema)
    if fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return json.dumps(data, indent=2)


def _resolve_operator(token: str) -> Operator:
    op = Operator.from_symbol(token)
    if op is not None:
        return op
    try:
        return Operator(token.strip().lower())
    except ValueError:
        raise ConditionDocumentError(f"Unknown operator '{token}'") from None


def _resolve_connective(token: str | None) -> LogicalConnective | None:
    if token is None or token == "":
        return None
    conn = LogicalConnective.from_symbol(token)
    if conn is not None:
        return conn
    try:
        return LogicalConnective(token.strip().lower())
    except ValueError:
        raise ConditionDocumentError(f"Unknown connective '{token}'") from None


def _value_text(value: ConditionValue) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def conditions_from_entries(entries: list[ConditionEntry], schema: Schema) -> list[Condition]:
    """Build conditions from validated entries, resolving properties against the schema."""
    conditions: list[Condition] = []
    for entry in entries:
        try:
            prop = schema.require(entry.property)
        except UnknownPropertyError as e:
            raise ConditionDocumentError(str(e)) from e
        conditions.append(
            Condition(
                prop=prop,
                operator=_resolve_operator(entry.operator),
                raw_value=_value_text(entry.value),
                case_insensitive=entry.case_insensitive,
                next_connective=_resolve_connective(entry.next),
            )
        )
    return conditions


def load_conditions(path: Union[str, Path, IO[str]], schema: Schema) -> list[Condition]:
    """Load a condition list (YAML or JSON array) and bind it to the schema."""
    try:
        data = _read_structured(path)
    except (OSError, yaml.YAMLError) as e:
        raise ConditionDocumentError(f"Cannot read condition document: {e}") from e

    if isinstance(data, dict) and "conditions" in data:
        data = data["conditions"]
    if not isinstance(data, list):
        raise ConditionDocumentError("Condition document must be a list of conditions")
    try:
        entries = [ConditionEntry.model_validate(item) for item in data]
    except ValidationError as e:
        raise ConditionDocumentError(f"Invalid condition document: {e}") from e
    return conditions_from_entries(entries, schema)


def condition_to_dict(condition: Condition) -> dict[str, Any]:
    """Plain-data view of a condition, suitable for JSON output."""
    return {
        "id": condition.id,
        "property": condition.prop.name if condition.prop else None,
        "operator": condition.operator.value,
        "symbol": condition.operator.symbol,
        "value": condition.raw_value,
        "case_insensitive": condition.case_insensitive,
        "next": condition.next_connective.value if condition.next_connective else None,
    }


def load_rows(path: Union[str, Path, IO[str]]) -> list[Any]:
    """Load a YAML/JSON array of row objects."""
    try:
        data = _read_structured(path)
    except (OSError, yaml.YAMLError) as e:
        raise GridQueryError(f"Cannot read data file: {e}") from e
    if not isinstance(data, list):
        raise GridQueryError("Data file must contain a list of rows")
    return data
