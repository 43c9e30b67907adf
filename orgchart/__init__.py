"""OrgChart — hierarchical org chart with reparenting and undo/redo."""

from __future__ import annotations

from .app import EmployeeOrgApp
from .errors import EntityNotFound
from .models import Employee

__all__ = ["Employee", "EmployeeOrgApp", "EntityNotFound"]
