"""gridquery CLI: parse, compose, and apply filter query strings."""

from __future__ import annotations

from typing import Optional

import typer

from gridquery.cli import operators_cmd, query, schema

app = typer.Typer(
    name="gridquery",
    help="gridquery CLI: parse, compose, and apply filter query strings.",
    no_args_is_help=True,
)


class _State:
    """Global CLI state shared across subcommands."""

    schema_path: str | None = None
    json_output: bool = False
    verbose: bool = False


state = _State()


def _version_callback(value: bool) -> None:
    if value:
        try:
            from importlib.metadata import version

            v = version("gridquery")
        except Exception:
            v = "unknown"
        print(f"gridquery {v}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    schema_path: Optional[str] = typer.Option(
        None,
        "--schema",
        "-s",
        envvar="GRIDQUERY_SCHEMA",
        help="Schema document (YAML or JSON) listing the filterable properties",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output when supported"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", help="Show version", is_eager=True, callback=_version_callback
    ),
) -> None:
    """Global options for all gridquery commands."""
    state.schema_path = schema_path
    state.json_output = json_output
    state.verbose = verbose
    if verbose:
        from gridquery.config import configure_logging

        configure_logging("DEBUG")
    if ctx.invoked_subcommand is None and not version:
        print(ctx.get_help())
        raise typer.Exit()


app.add_typer(schema.app, name="schema", help="Inspect and infer property schemas")

app.command(name="parse")(query.parse_cmd)
app.command(name="serialize")(query.serialize_cmd)
app.command(name="filter")(query.filter_cmd)
app.command(name="operators")(operators_cmd.operators_cmd)


def main() -> None:
    """Entry point for the gridquery CLI."""
    app()
