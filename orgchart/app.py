"""EmployeeOrgApp — the reparent engine and its undo/redo controller.

The app owns one live tree plus two history stacks. Operations are
synchronous and run to completion; callers that share an instance across
concurrent handlers must serialize access themselves.
"""

from __future__ import annotations

import logging

from .config import MOVE
from .errors import EntityNotFound
from .history import History, create_undo_data
from .models import Employee
from .traversal import find_employee, find_supervisor

logger = logging.getLogger(__name__)


class EmployeeOrgApp:
    """Org chart with ``move``, ``undo`` and ``redo``.

    ``original`` is the root supplied at construction and is never mutated.
    The live tree starts as a deep copy of it and is exposed as ``ceo``.
    """

    def __init__(self, ceo: Employee) -> None:
        self.original = ceo
        self._current = ceo.clone()
        self.history = History()

    @property
    def ceo(self) -> Employee:
        """Root of the live tree."""
        return self._current

    def move(self, employee_id: int, supervisor_id: int) -> None:
        """Reparent *employee_id* under *supervisor_id*, appending it last.

        Raises EntityNotFound, without touching the tree, if either id is
        unknown. Moving a node under its own descendant is not rejected.
        """
        employee = find_employee(self._current, employee_id)
        supervisor = find_employee(self._current, supervisor_id)

        if employee is None or supervisor is None:
            logger.warning(
                "Move rejected: employee=%s supervisor=%s not found", employee_id, supervisor_id
            )
            raise EntityNotFound(employee_id, supervisor_id)

        record = create_undo_data(self._current, employee, supervisor)

        current_supervisor = find_supervisor(self._current, employee_id)
        if current_supervisor is not None:
            current_supervisor.subordinates = [
                sub for sub in current_supervisor.subordinates if sub.id != employee_id
            ]

        supervisor.subordinates.append(employee)
        self.history.push(record)
        logger.info(
            "Moved employee %d (%s) under %d (%s)",
            employee.id,
            employee.name,
            supervisor.id,
            supervisor.name,
        )

    def undo(self) -> None:
        """Restore the tree captured before the most recent move. No-op if none."""
        record = self.history.pop_undo()
        if record is None:
            logger.debug("Undo: nothing to undo")
            return

        if record.kind == MOVE:
            self._current = record.tree
            logger.info("Undo: restored tree from before move of employee %d", record.employee.id)

    def redo(self) -> None:
        """Re-apply the most recently undone move. No-op if the redo stack is empty.

        ``undo`` does not feed the redo stack, so with the operations above
        this never finds a record.
        """
        record = self.history.pop_redo()
        if record is None:
            logger.debug("Redo: nothing to redo")
            return

        if record.kind == MOVE:
            self.history.push(record)
            if record.result is not None:
                self._current = record.result.clone()
            logger.info("Redo: re-applied move of employee %d", record.employee.id)

    def reset(self) -> None:
        """Discard all moves and history, returning to the construction-time chart."""
        self._current = self.original.clone()
        self.history.clear()
        logger.info("Chart reset to original (ceo=%d)", self.original.id)
