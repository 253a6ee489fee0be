"""gridquery parse / serialize / filter — work with query strings."""

from __future__ import annotations

import sys
from typing import Any

import typer

from gridquery.cli import _exitcodes as ec
from gridquery.cli._output import print_error, print_json, print_table, print_warning
from gridquery.cli._schema import open_schema
from gridquery.conditions import Condition
from gridquery.documents import condition_to_dict, load_conditions, load_rows
from gridquery.errors import ConditionDocumentError, GridQueryError
from gridquery.evaluate import apply_filter
from gridquery.parser import parse_with_report
from gridquery.serializer import serialize, serialize_conditions


def _condition_rows(conditions: list[Condition]) -> list[list[Any]]:
    return [
        [
            i,
            c.prop.name if c.prop else "",
            c.operator.symbol,
            c.raw_value,
            "yes" if c.case_insensitive else "",
            c.next_connective.display_name if c.next_connective else "",
        ]
        for i, c in enumerate(conditions)
    ]


def parse_cmd(
    query_text: str = typer.Argument(..., metavar="QUERY", help="Query string to parse"),
    strict: bool = typer.Option(
        False, "--strict", help="Exit non-zero when any segment was dropped"
    ),
) -> None:
    """Parse a query string into conditions and report dropped segments."""
    from gridquery.cli import state

    schema = open_schema()
    result = parse_with_report(query_text, schema)

    if state.json_output:
        print_json(
            {
                "conditions": [condition_to_dict(c) for c in result.conditions],
                "dropped": [
                    {
                        "kind": issue.kind.value,
                        "segment": issue.segment,
                        "offset": issue.offset,
                        "detail": issue.detail,
                    }
                    for issue in result.issues
                ],
            }
        )
    else:
        print_table(
            ["#", "property", "op", "value", "ci", "next"],
            _condition_rows(result.conditions),
        )
        for issue in result.issues:
            detail = f" ({issue.detail})" if issue.detail else ""
            print_warning(
                f"dropped segment {issue.segment!r} at offset {issue.offset}: "
                f"{issue.kind.value}{detail}"
            )

    if strict and result.issues:
        raise typer.Exit(ec.DROPPED_SEGMENTS)


def serialize_cmd(
    source: str = typer.Argument(
        ..., metavar="FILE", help="YAML/JSON condition list, or '-' for stdin"
    ),
) -> None:
    """Compose a query string from a condition document."""
    from gridquery.cli import state

    schema = open_schema()
    try:
        conditions = load_conditions(sys.stdin if source == "-" else source, schema)
    except ConditionDocumentError as e:
        print_error(str(e))
        raise typer.Exit(ec.DOCUMENT_ERROR)

    for index, condition in enumerate(conditions):
        if not condition.is_valid:
            print_warning(f"condition #{index} is incomplete and was left out")
        elif not condition.operator_allowed:
            print_warning(
                f"condition #{index}: operator '{condition.operator.symbol}' is not offered "
                f"for {condition.prop.value_type.value} properties"  # type: ignore[union-attr]
            )

    query_text = serialize_conditions(conditions)
    if state.json_output:
        print_json({"query": query_text, "tokens": [serialize(c) for c in conditions]})
    else:
        print(query_text)


def filter_cmd(
    query_text: str = typer.Argument(..., metavar="QUERY", help="Query string to apply"),
    data: str = typer.Argument(
        ..., metavar="DATA", help="YAML/JSON array of rows, or '-' for stdin"
    ),
    count_only: bool = typer.Option(False, "--count", help="Only print the number of matches"),
) -> None:
    """Apply a query string to a list of rows and print the matching rows."""
    schema = open_schema()
    result = parse_with_report(query_text, schema)
    for issue in result.issues:
        print_warning(f"dropped segment {issue.segment!r}: {issue.kind.value}")

    try:
        rows = load_rows(sys.stdin if data == "-" else data)
    except GridQueryError as e:
        print_error(str(e))
        raise typer.Exit(ec.DOCUMENT_ERROR)

    matched = apply_filter(rows, result.conditions)
    if count_only:
        print(len(matched))
        return
    print_json(matched)
