"""Tree model for the organization chart.

Each ``Employee`` owns its ``subordinates`` list and, transitively, every
descendant. There is no back-reference to the supervisor: supervisor
relationships are derived by traversal (see ``orgchart.traversal``).
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from .traversal import iter_employees


class Employee(BaseModel):
    id: int = Field(validation_alias=AliasChoices("id", "uniqueId"))
    name: str
    subordinates: list[Employee] = Field(default_factory=list)

    def clone(self) -> Employee:
        """Return a deep, independent snapshot of this subtree."""
        return self.model_copy(deep=True)


def check_unique_ids(root: Employee) -> None:
    """Raise ValueError if any id appears more than once under *root*."""
    seen: set[int] = set()
    for employee in iter_employees(root):
        if employee.id in seen:
            raise ValueError(f"Duplicate employee id {employee.id} ({employee.name!r})")
        seen.add(employee.id)
