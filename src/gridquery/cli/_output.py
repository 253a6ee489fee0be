"""Output formatting helpers for the CLI."""

from __future__ import annotations

import json
import sys
from typing import Any


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def print_table(headers: list[str], rows: list[list[Any]], *, json_mode: bool = False) -> None:
    """Print rows under their headers, or as a JSON array of objects.

    Blank cells stand for None; an empty result prints nothing in text mode.
    """
    if json_mode:
        print_json([dict(zip(headers, row)) for row in rows])
        return
    if not rows:
        return

    cells = [[_cell(v) for v in row] for row in rows]
    widths = [
        max([len(header)] + [len(row[col]) for row in cells if col < len(row)])
        for col, header in enumerate(headers)
    ]
    rule = ["-" * w for w in widths]
    for line in [list(headers), rule, *cells]:
        padded = [
            f"{text:<{widths[col]}}" if col < len(widths) else text
            for col, text in enumerate(line)
        ]
        print("  ".join(padded).rstrip())


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    print(f"Error: {msg}", file=sys.stderr)


def print_warning(msg: str) -> None:
    print(f"Warning: {msg}", file=sys.stderr)
