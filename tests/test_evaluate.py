"""Tests for in-memory evaluation of condition chains."""

from __future__ import annotations

from datetime import date

import pytest

from gridquery import Condition, apply_filter, matches, parse
from gridquery.evaluate import evaluate_condition, row_value


def _names(rows):
    return [r.FirstName for r in rows]


class TestRowValue:
    def test_mapping(self):
        assert row_value({"Age": 3}, "Age") == 3

    def test_mapping_case_insensitive(self):
        assert row_value({"age": 3}, "Age") == 3

    def test_mapping_missing(self):
        assert row_value({}, "Age") is None

    def test_object(self, employees):
        assert row_value(employees[0], "FirstName") == "John"
        assert row_value(employees[0], "firstname") == "John"
        assert row_value(employees[0], "Nope") is None


class TestApplyFilter:
    def test_empty_chain_matches_everything(self, employees):
        assert apply_filter(employees, []) == employees

    def test_string_equals(self, schema, employees):
        assert _names(apply_filter(employees, parse("Department=Sales", schema))) == [
            "John",
            "johanna",
        ]

    def test_string_is_case_sensitive_by_default(self, schema, employees):
        assert _names(apply_filter(employees, parse("FirstName^jo", schema))) == ["johanna"]

    def test_case_insensitive(self, schema, employees):
        assert _names(apply_filter(employees, parse("FirstName^jo/i", schema))) == [
            "John",
            "johanna",
        ]

    @pytest.mark.parametrize(
        "query, expected",
        [
            ("LastName=*ar", ["Maria"]),
            ("LastName!*ar", ["John", "Wei", "johanna"]),
            ("LastName$en", ["Wei"]),
            ("LastName!$en", ["John", "Maria", "johanna"]),
            ("LastName!^S", ["Maria", "Wei", "johanna"]),
        ],
    )
    def test_string_operators(self, schema, employees, query, expected):
        assert _names(apply_filter(employees, parse(query, schema))) == expected

    def test_number_comparison(self, schema, employees):
        assert _names(apply_filter(employees, parse("Age>30", schema))) == ["John", "Wei"]
        assert _names(apply_filter(employees, parse("Salary<=58500", schema))) == [
            "John",
            "johanna",
        ]

    def test_date_comparison(self, schema, employees):
        result = apply_filter(employees, parse("HireDate>=2021-07-01", schema))
        assert _names(result) == ["Maria", "johanna"]

    def test_boolean(self, schema, employees):
        assert _names(apply_filter(employees, parse("IsActive=false", schema))) == ["Wei"]
        assert _names(apply_filter(employees, parse("IsActive!=true", schema))) == ["Wei"]

    def test_boolean_without_value_means_true(self, schema, employees):
        assert len(apply_filter(employees, parse("IsActive=", schema))) == 3

    def test_and_chain(self, schema, employees):
        result = apply_filter(employees, parse("Department=Sales,Age<30", schema))
        assert _names(result) == ["johanna"]

    def test_or_chain(self, schema, employees):
        result = apply_filter(employees, parse("Department=Marketing|Age<30", schema))
        assert _names(result) == ["Maria", "Wei", "johanna"]

    def test_flat_left_to_right(self, schema, employees):
        # (Sales and Age>30) or Engineering
        result = apply_filter(employees, parse("Department=Sales,Age>30|Department=Engineering", schema))
        assert _names(result) == ["John", "Maria"]
        # (Engineering or Sales) and Age>30
        result = apply_filter(employees, parse("Department=Engineering|Department=Sales,Age>30", schema))
        assert _names(result) == ["John"]

    def test_dict_rows_with_string_values(self, schema):
        rows = [
            {"FirstName": "A", "Age": "31", "HireDate": "2020-01-01"},
            {"FirstName": "B", "Age": 20, "HireDate": date(2022, 5, 5)},
        ]
        assert [r["FirstName"] for r in apply_filter(rows, parse("Age>25", schema))] == ["A"]
        result = apply_filter(rows, parse("HireDate>2021-01-01", schema))
        assert [r["FirstName"] for r in result] == ["B"]


class TestMissingValues:
    def test_missing_value_does_not_match(self, schema):
        assert not matches({}, parse("Age>1", schema))
        assert not matches({"Age": "n/a"}, parse("Age=1", schema))

    def test_missing_value_matches_negated(self, schema):
        assert matches({}, parse("Age!=1", schema))
        assert matches({"LastName": None}, parse("LastName!*x", schema))

    def test_nan_row_value_is_missing(self, schema):
        rows = [{"Age": float("nan")}, {"Age": 40}]
        assert apply_filter(rows, parse("Age>30", schema)) == [{"Age": 40}]
        assert matches({"Age": float("nan")}, parse("Age!=30", schema))

    def test_invalid_condition_is_ignored(self, schema):
        assert evaluate_condition(Condition(), {"Age": 1})
        chain = parse("Age>1", schema) + [Condition()]
        assert matches({"Age": 5}, chain)
