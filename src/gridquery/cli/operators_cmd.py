"""gridquery operators — show the operator table."""

from __future__ import annotations

from typing import Optional

import typer

from gridquery.cli import _exitcodes as ec
from gridquery.cli._output import print_error, print_table
from gridquery.operators import Operator, operators_for_type
from gridquery.schema import ValueType


def operators_cmd(
    value_type: Optional[str] = typer.Argument(
        None, metavar="TYPE", help="Only list operators for this value type"
    ),
) -> None:
    """List operator symbols, names, and the value types that accept them."""
    from gridquery.cli import state

    if value_type is not None:
        try:
            selected = operators_for_type(ValueType(value_type.lower()))
        except ValueError:
            print_error(
                f"Unknown value type '{value_type}'. "
                f"Valid types: {', '.join(t.value for t in ValueType)}"
            )
            raise typer.Exit(ec.USAGE_ERROR)
    else:
        selected = tuple(Operator)

    rows = [
        [
            op.symbol,
            op.value,
            op.display_name,
            " ".join(t.value for t in ValueType if op in operators_for_type(t)),
        ]
        for op in selected
    ]
    print_table(["symbol", "operator", "name", "types"], rows, json_mode=state.json_output)
