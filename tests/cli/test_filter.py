"""Tests for gridquery filter."""

import json

from gridquery.cli import _exitcodes as ec
from tests.cli.conftest import invoke


def test_filter_rows(runner, schema_path, rows_path):
    result = invoke(runner, ["filter", "Department=Sales|Age>40", rows_path], schema_path)
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [r["FirstName"] for r in data] == ["John", "Wei"]


def test_filter_count(runner, schema_path, rows_path):
    result = invoke(runner, ["filter", "--count", "IsActive=true", rows_path], schema_path)
    assert result.exit_code == 0
    assert result.stdout.strip() == "2"


def test_filter_dates(runner, schema_path, rows_path):
    result = invoke(runner, ["filter", "HireDate<2020-01-01", rows_path], schema_path)
    data = json.loads(result.stdout)
    assert [r["FirstName"] for r in data] == ["John", "Wei"]


def test_filter_warns_on_dropped_segment(runner, schema_path, rows_path):
    result = invoke(runner, ["filter", "--count", "Bogus=1", rows_path], schema_path)
    assert result.exit_code == 0
    assert result.stdout.strip() == "3"
    assert "Bogus=1" in result.stderr


def test_filter_bad_data(runner, schema_path, tmp_path):
    path = tmp_path / "rows.json"
    path.write_text('{"not": "a list"}')
    result = invoke(runner, ["filter", "Age>1", str(path)], schema_path)
    assert result.exit_code == ec.DOCUMENT_ERROR
