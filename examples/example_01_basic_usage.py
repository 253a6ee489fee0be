"""Example 01: Basic Usage - building, serializing, and parsing filters.

This example demonstrates the round trip a grid UI relies on:
- Describing the filterable properties with a Schema
- Building a condition chain the way a filter builder would
- Serializing the chain into a compact query string (e.g. for a URL)
- Parsing the query string back after a reload
"""

from gridquery import (
    Condition,
    LogicalConnective,
    Operator,
    PropertyDescriptor,
    Schema,
    ValueType,
    parse,
    parse_with_report,
    serialize_conditions,
)

# Step 1: Describe the filterable properties
schema = Schema(
    [
        PropertyDescriptor("FirstName", "First Name", ValueType.STRING),
        PropertyDescriptor("Age", "Age", ValueType.NUMBER),
        PropertyDescriptor("Department", "Department", ValueType.STRING),
        PropertyDescriptor("HireDate", "Hire Date", ValueType.DATE),
        PropertyDescriptor("IsActive", "Active", ValueType.BOOLEAN),
    ]
)

# Step 2: Build conditions. The connective sits on the condition it follows.
conditions = [
    Condition(
        prop=schema.require("FirstName"),
        operator=Operator.STARTS_WITH,
        raw_value="jo",
        case_insensitive=True,
        next_connective=LogicalConnective.AND,
    ),
    Condition(
        prop=schema.require("Age"),
        operator=Operator.GREATER_THAN,
        raw_value="30",
        next_connective=LogicalConnective.OR,
    ),
    Condition(prop=schema.require("HireDate"), operator=Operator.GREATER_OR_EQUAL, raw_value="01/15/2023"),
]

# Step 3: Serialize. Dates are re-emitted in their canonical form.
query = serialize_conditions(conditions)
print(f"Query: {query}")  # FirstName^jo/i,Age>30|HireDate>=2023-01-15

# Step 4: Parse it back
for condition in parse(query, schema):
    print(
        condition.prop.name,
        condition.operator.display_name,
        repr(condition.raw_value),
        "ci" if condition.case_insensitive else "",
        condition.next_connective.display_name if condition.next_connective else "-",
    )

# Bad segments are skipped, not fatal
report = parse_with_report("Department=Sales,Bogus=1,HireDate=15/01/2023", schema)
print(f"Kept {len(report.conditions)} condition(s)")
for issue in report.issues:
    print(f"Dropped {issue.segment!r}: {issue.kind.value} - {issue.detail}")
