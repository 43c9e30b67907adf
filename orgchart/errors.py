"""Exceptions raised by the org chart core."""

from __future__ import annotations


class EntityNotFound(Exception):
    """Raised by ``move`` when the employee or the supervisor id does not resolve."""

    def __init__(self, employee_id: int, supervisor_id: int) -> None:
        self.employee_id = employee_id
        self.supervisor_id = supervisor_id
        super().__init__("Employee or Supervisor not found")
