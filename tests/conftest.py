"""Shared fixtures: small hand-built org charts."""

from __future__ import annotations

import pytest

from orgchart.models import Employee


def emp(employee_id: int, name: str, *subordinates: Employee) -> Employee:
    return Employee(id=employee_id, name=name, subordinates=list(subordinates))


@pytest.fixture
def small_org() -> Employee:
    """CEO(1) with two direct reports, A(2) and B(3)."""
    return emp(1, "CEO", emp(2, "A"), emp(3, "B"))


@pytest.fixture
def company() -> Employee:
    """A four-level chart.

    1 John
    ├── 2 Margot
    │   ├── 5 Cassandra
    │   │   ├── 9 Mary
    │   │   └── 10 Bob
    │   └── 6 Tyler S
    ├── 3 Tyler M
    └── 4 Lisa
        └── 7 Ben
            └── 8 Georgina
    """
    return emp(
        1,
        "John",
        emp(2, "Margot", emp(5, "Cassandra", emp(9, "Mary"), emp(10, "Bob")), emp(6, "Tyler S")),
        emp(3, "Tyler M"),
        emp(4, "Lisa", emp(7, "Ben", emp(8, "Georgina"))),
    )
