"""gridquery schema — inspect and infer property schemas."""

from __future__ import annotations

from typing import Optional

import typer

from gridquery.cli import _exitcodes as ec
from gridquery.cli._loader import load_class
from gridquery.cli._output import print_error, print_json, print_table
from gridquery.cli._schema import open_schema
from gridquery.documents import dump_schema, schema_to_dict
from gridquery.errors import SchemaError
from gridquery.operators import operators_for_type
from gridquery.schema import schema_from_type

app = typer.Typer(no_args_is_help=True)


@app.command(name="show")
def schema_show_cmd() -> None:
    """List the schema's properties and the operators each one accepts."""
    from gridquery.cli import state

    schema = open_schema()
    rows = [
        [
            prop.name,
            prop.label,
            prop.value_type.value,
            " ".join(op.symbol for op in operators_for_type(prop.value_type)),
        ]
        for prop in schema
    ]
    print_table(["name", "label", "type", "operators"], rows, json_mode=state.json_output)


@app.command(name="infer")
def schema_infer_cmd(
    target: str = typer.Argument(
        ..., help="Class to inspect: 'package.module:Class' or 'path/to/file.py:Class'"
    ),
    fmt: str = typer.Option("yaml", "--format", help="Output format: yaml or json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """Infer a schema document from an annotated class."""
    from gridquery.cli import state

    if fmt not in ("yaml", "json"):
        print_error("--format must be 'yaml' or 'json'")
        raise typer.Exit(ec.USAGE_ERROR)

    try:
        cls = load_class(target)
    except Exception as e:
        print_error(f"Failed to load class: {e}")
        raise typer.Exit(ec.GENERAL_ERROR)

    try:
        schema = schema_from_type(cls)
    except SchemaError as e:
        print_error(str(e))
        raise typer.Exit(ec.SCHEMA_ERROR)

    if not len(schema):
        print_error(f"No filterable attributes found on {cls.__name__}")
        raise typer.Exit(ec.SCHEMA_ERROR)

    if state.json_output and output is None:
        print_json(schema_to_dict(schema))
        return

    content = dump_schema(schema, fmt)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        print(f"Schema written to {output}")
    else:
        print(content, end="" if content.endswith("\n") else "\n")
