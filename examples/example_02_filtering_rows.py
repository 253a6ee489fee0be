"""Example 02: Filtering rows in memory.

This example demonstrates:
- Inferring a schema from a dataclass
- Applying a query string to a list of objects
- Flat left-to-right evaluation of mixed AND/OR chains
"""

from dataclasses import dataclass
from datetime import date

from gridquery import apply_filter, parse, schema_from_type


@dataclass
class Employee:
    Id: int
    FirstName: str
    Department: str
    Salary: float
    HireDate: date
    IsActive: bool
    Age: int


employees = [
    Employee(1, "John", "Sales", 52000, date(2019, 3, 11), True, 34),
    Employee(2, "Maria", "Engineering", 87000, date(2021, 7, 1), True, 29),
    Employee(3, "Wei", "Marketing", 61000, date(2016, 11, 20), False, 45),
]

schema = schema_from_type(Employee)
print("Properties:", ", ".join(f"{p.name} ({p.value_type.value})" for p in schema))

for query in [
    "Department=Sales",
    "Salary>=60000,IsActive=true",
    "Department=Sales|Age>40",
    "FirstName=*ar/i",
]:
    matched = apply_filter(employees, parse(query, schema))
    print(f"{query:32} -> {[e.FirstName for e in matched]}")
