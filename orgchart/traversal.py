"""Read-only searches over the org chart tree.

All searches are pre-order depth-first: a node is visited before its
subordinates, and subordinates are visited in list order. None of these
functions allocate nodes or mutate the tree.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Employee


def iter_employees(root: Employee) -> Iterator[Employee]:
    """Yield every node under *root* (inclusive) in pre-order.

    A node reachable twice (only possible after a move under its own
    descendant) is yielded once.
    """
    seen: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        stack.extend(reversed(node.subordinates))


def find_employee(root: Employee, employee_id: int) -> Employee | None:
    """Return the first node in pre-order whose id matches, or None."""
    for node in iter_employees(root):
        if node.id == employee_id:
            return node
    return None


def find_supervisor(root: Employee, employee_id: int) -> Employee | None:
    """Return the node whose direct subordinates include *employee_id*.

    Returns None for the root itself and for unknown ids.
    """
    for node in iter_employees(root):
        if any(sub.id == employee_id for sub in node.subordinates):
            return node
    return None


def is_descendant(root: Employee, employee_id: int) -> bool:
    """True if *employee_id* appears strictly below *root*."""
    return any(find_employee(sub, employee_id) is not None for sub in root.subordinates)
