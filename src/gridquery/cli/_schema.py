"""Schema resolution for CLI commands."""

from __future__ import annotations

import typer

from gridquery.cli import _exitcodes as ec
from gridquery.cli._output import print_error
from gridquery.documents import load_schema
from gridquery.errors import SchemaError
from gridquery.schema import Schema


def open_schema() -> Schema:
    """Load the schema named by --schema / GRIDQUERY_SCHEMA, or exit."""
    from gridquery.cli import state

    if not state.schema_path:
        print_error("A schema is required: pass --schema or set GRIDQUERY_SCHEMA")
        raise typer.Exit(ec.USAGE_ERROR)
    try:
        return load_schema(state.schema_path)
    except SchemaError as e:
        print_error(str(e))
        raise typer.Exit(ec.SCHEMA_ERROR)
