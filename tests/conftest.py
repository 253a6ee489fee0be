"""Shared test fixtures for gridquery tests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

import pytest

from gridquery import Condition, LogicalConnective, Operator, PropertyDescriptor, Schema, ValueType

# --- Test row types ---


@dataclass
class Employee:
    Id: int
    FirstName: str
    LastName: str
    Department: str
    Salary: float
    HireDate: date
    IsActive: bool
    Age: int


@dataclass
class Product:
    Id: int
    Name: str
    Category: str
    Price: float
    InStock: bool
    CreatedDate: datetime
    LastUpdated: Optional[datetime] = None


EMPLOYEE_PROPERTIES = [
    PropertyDescriptor("FirstName", "First Name", ValueType.STRING),
    PropertyDescriptor("LastName", "Last Name", ValueType.STRING),
    PropertyDescriptor("Department", "Department", ValueType.STRING),
    PropertyDescriptor("Salary", "Salary", ValueType.NUMBER),
    PropertyDescriptor("Age", "Age", ValueType.NUMBER),
    PropertyDescriptor("HireDate", "Hire Date", ValueType.DATE),
    PropertyDescriptor("LastLogin", "Last Login", ValueType.DATETIME),
    PropertyDescriptor("IsActive", "Active", ValueType.BOOLEAN),
]


@pytest.fixture
def schema() -> Schema:
    return Schema(EMPLOYEE_PROPERTIES)


@pytest.fixture
def employees() -> list[Employee]:
    return [
        Employee(1, "John", "Smith", "Sales", 52000, date(2019, 3, 11), True, 34),
        Employee(2, "Maria", "Garcia", "Engineering", 87000, date(2021, 7, 1), True, 29),
        Employee(3, "Wei", "Chen", "Marketing", 61000, date(2016, 11, 20), False, 45),
        Employee(4, "johanna", "Berg", "Sales", 58500, date(2023, 1, 15), True, 27),
    ]


def make_condition(
    schema: Schema,
    name: str,
    operator: Operator = Operator.EQUALS,
    value: str = "",
    *,
    case_insensitive: bool = False,
    next_connective: LogicalConnective | None = None,
) -> Condition:
    return Condition(
        prop=schema.require(name),
        operator=operator,
        raw_value=value,
        case_insensitive=case_insensitive,
        next_connective=next_connective,
    )
