"""Shared fixtures for CLI tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from gridquery.cli import app, state

if TYPE_CHECKING:
    from click.testing import Result

SCHEMA_YAML = """
properties:
  - name: FirstName
    label: First Name
  - name: Department
  - name: Age
    type: number
  - name: HireDate
    label: Hire Date
    type: date
  - name: IsActive
    type: boolean
"""

ROWS = [
    {"FirstName": "John", "Department": "Sales", "Age": 34, "HireDate": "2019-03-11", "IsActive": True},
    {"FirstName": "Maria", "Department": "Engineering", "Age": 29, "HireDate": "2021-07-01", "IsActive": True},
    {"FirstName": "Wei", "Department": "Marketing", "Age": 45, "HireDate": "2016-11-20", "IsActive": False},
]


@pytest.fixture(autouse=True)
def reset_state():
    yield
    state.schema_path = None
    state.json_output = False
    state.verbose = False


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def schema_path(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(SCHEMA_YAML)
    return str(path)


@pytest.fixture
def rows_path(tmp_path):
    path = tmp_path / "rows.json"
    path.write_text(json.dumps(ROWS))
    return str(path)


def invoke(
    runner: CliRunner, args: list[str], schema_path: str | None = None, **kwargs
) -> "Result":
    """Invoke CLI with the schema option injected before the subcommand."""
    if schema_path:
        args = ["--schema", schema_path] + args
    return runner.invoke(app, args, catch_exceptions=False, **kwargs)
