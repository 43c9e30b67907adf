"""Undo/redo history for org chart mutations.

Each ``HistoryRecord`` holds deep snapshots taken immediately before a move.
Restoring a record swaps the live tree for its stored ``tree`` snapshot; the
other snapshots are kept for auditing and are not consulted on restore.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import MOVE
from .models import Employee
from .traversal import find_supervisor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryRecord:
    """A single history entry and the snapshots captured for it."""

    kind: str
    tree: Employee
    employee: Employee
    supervisor: Employee
    previous_supervisor: Employee | None = None
    result: Employee | None = None

    @property
    def snapshots(self) -> tuple[Employee, ...]:
        """Snapshots in capture order: tree, previous supervisor (if any), employee, supervisor."""
        if self.previous_supervisor is None:
            return (self.tree, self.employee, self.supervisor)
        return (self.tree, self.previous_supervisor, self.employee, self.supervisor)


def create_undo_data(root: Employee, employee: Employee, supervisor: Employee) -> HistoryRecord:
    """Snapshot the live tree and the subtrees a move of *employee* under *supervisor* touches.

    Must be called before the tree is mutated.
    """
    previous = find_supervisor(root, employee.id)
    return HistoryRecord(
        kind=MOVE,
        tree=root.clone(),
        previous_supervisor=previous.clone() if previous is not None else None,
        employee=employee.clone(),
        supervisor=supervisor.clone(),
    )


@dataclass
class History:
    """Two LIFO stacks of history records."""

    undo_stack: list[HistoryRecord] = field(default_factory=list)
    redo_stack: list[HistoryRecord] = field(default_factory=list)

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def push(self, record: HistoryRecord) -> None:
        self.undo_stack.append(record)
        logger.debug("History push: %s (undo depth=%d)", record.kind, len(self.undo_stack))

    def push_redo(self, record: HistoryRecord) -> None:
        self.redo_stack.append(record)
        logger.debug("Redo push: %s (redo depth=%d)", record.kind, len(self.redo_stack))

    def pop_undo(self) -> HistoryRecord | None:
        """Pop the most recent undo record, or None if the stack is empty."""
        return self.undo_stack.pop() if self.undo_stack else None

    def pop_redo(self) -> HistoryRecord | None:
        """Pop the most recent redo record, or None if the stack is empty."""
        return self.redo_stack.pop() if self.redo_stack else None

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()
