"""Tests for condition and chain serialization."""

from __future__ import annotations

from gridquery import Condition, GridQueryConfig, LogicalConnective, Operator, parse
from gridquery.serializer import serialize, serialize_conditions
from tests.conftest import make_condition

AND = LogicalConnective.AND
OR = LogicalConnective.OR


class TestSerialize:
    def test_basic_token(self, schema):
        assert serialize(make_condition(schema, "FirstName", value="John")) == "FirstName=John"

    def test_operator_symbols(self, schema):
        c = make_condition(schema, "Age", Operator.GREATER_OR_EQUAL, "30")
        assert serialize(c) == "Age>=30"
        c = make_condition(schema, "LastName", Operator.NOT_ENDS_WITH, "son")
        assert serialize(c) == "LastName!$son"

    def test_case_insensitive_suffix(self, schema):
        c = make_condition(schema, "FirstName", Operator.CONTAINS, "jo", case_insensitive=True)
        assert serialize(c) == "FirstName=*jo/i"

    def test_case_insensitive_ignored_for_numbers(self, schema):
        c = make_condition(schema, "Age", value="30", case_insensitive=True)
        assert serialize(c) == "Age=30"

    def test_invalid_condition_is_empty(self, schema):
        assert serialize(Condition()) == ""
        assert serialize(make_condition(schema, "FirstName", value="  ")) == ""

    def test_boolean_without_value(self, schema):
        assert serialize(make_condition(schema, "IsActive")) == "IsActive="

    def test_boolean_lowercased(self, schema):
        assert serialize(make_condition(schema, "IsActive", value="True")) == "IsActive=true"

    def test_date_reformatted(self, schema):
        c = make_condition(schema, "HireDate", Operator.LESS_THAN, "03/01/2020")
        assert serialize(c) == "HireDate<2020-03-01"

    def test_datetime_reformatted(self, schema):
        c = make_condition(schema, "LastLogin", Operator.GREATER_THAN, "2024-05-06 07:08:09")
        assert serialize(c) == "LastLogin>2024-05-06T07:08:09"

    def test_unparseable_date_passes_through(self, schema):
        c = make_condition(schema, "HireDate", value="yesterday")
        assert serialize(c) == "HireDate=yesterday"

    def test_canonical_date_is_idempotent(self, schema):
        c = make_condition(schema, "LastLogin", value="2024-05-06T07:08:09")
        assert serialize(c) == "LastLogin=2024-05-06T07:08:09"

    def test_years_below_1000_keep_four_digits(self, schema):
        c = make_condition(schema, "HireDate", value="0999-01-15")
        assert serialize(c) == "HireDate=0999-01-15"
        assert parse(serialize_conditions(parse("HireDate=0999-01-15", schema)), schema)


class TestSerializeConditions:
    def test_empty(self):
        assert serialize_conditions([]) == ""

    def test_single(self, schema):
        assert serialize_conditions([make_condition(schema, "Age", value="1")]) == "Age=1"

    def test_mixed_chain(self, schema):
        conditions = [
            make_condition(schema, "FirstName", value="John", next_connective=AND),
            make_condition(schema, "Age", Operator.GREATER_THAN, "30", next_connective=OR),
            make_condition(schema, "Department", value="Sales"),
        ]
        assert serialize_conditions(conditions) == "FirstName=John,Age>30|Department=Sales"

    def test_invalid_conditions_are_omitted(self, schema):
        conditions = [
            Condition(next_connective=AND),
            make_condition(schema, "Age", value="30", next_connective=OR),
            make_condition(schema, "FirstName", next_connective=AND),
        ]
        assert serialize_conditions(conditions) == "Age=30"

    def test_connective_slot_is_positional(self, schema):
        conditions = [
            make_condition(schema, "Age", value="30", next_connective=AND),
            make_condition(schema, "FirstName", next_connective=OR),
            make_condition(schema, "Department", value="Sales"),
        ]
        assert serialize_conditions(conditions) == "Age=30|Department=Sales"

    def test_missing_connective_uses_default(self, schema):
        conditions = [
            make_condition(schema, "Age", value="30"),
            make_condition(schema, "Department", value="Sales"),
        ]
        assert serialize_conditions(conditions) == "Age=30,Department=Sales"
        config = GridQueryConfig(default_connective=OR)
        assert serialize_conditions(conditions, config) == "Age=30|Department=Sales"
