"""OrgChart CLI — inspect the chart and try out moves from the terminal.

Usage:
    python -m orgchart.cli --status
    python -m orgchart.cli --move 5 3 --move 9 1 --undo 1 --status
    python -m orgchart.cli --move 5 3 --output reorg.yaml
    python -m orgchart.cli --interactive

Nothing is written back to the org file unless ``--output`` names it.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import yaml

from orgchart.app import EmployeeOrgApp
from orgchart.errors import EntityNotFound
from orgchart.models import Employee
from orgchart.org_utils import load_org, save_org
from orgchart.traversal import iter_employees

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def format_tree(root: Employee) -> str:
    """Render the tree under *root* as indented lines, one employee per line."""
    lines: list[str] = []
    seen: set[int] = set()

    def walk(node: Employee, depth: int) -> None:
        if id(node) in seen:
            return
        seen.add(id(node))
        lines.append(f"{'  ' * depth}{node.name} ({node.id})")
        for sub in node.subordinates:
            walk(sub, depth + 1)

    walk(root, 0)
    return "\n".join(lines)


def show_status(app: EmployeeOrgApp) -> None:
    """Print the live chart and history depth."""
    count = sum(1 for _ in iter_employees(app.ceo))
    print(f"\n=== Org Chart ({count} employees) ===\n")
    print(format_tree(app.ceo))
    print(
        f"\nUndo: {len(app.history.undo_stack)} pending | "
        f"Redo: {len(app.history.redo_stack)} pending\n"
    )


def run_command(app: EmployeeOrgApp, line: str) -> str:
    """Execute one interactive command and return a status message.

    Commands: ``move EMPLOYEE SUPERVISOR``, ``undo``, ``redo``, ``reset``.
    Raises ValueError for malformed input and EntityNotFound for unknown ids.
    """
    parts = line.split()
    if not parts:
        raise ValueError("empty command")

    cmd, args = parts[0].lower(), parts[1:]
    if cmd == "move":
        if len(args) != 2:
            raise ValueError("usage: move EMPLOYEE_ID SUPERVISOR_ID")
        try:
            employee_id, supervisor_id = int(args[0]), int(args[1])
        except ValueError:
            raise ValueError("ids must be integers") from None
        app.move(employee_id, supervisor_id)
        return "Employee moved successfully"
    if cmd == "undo":
        app.undo()
        return "Undo successful"
    if cmd == "redo":
        app.redo()
        return "Redo successful"
    if cmd == "reset":
        app.reset()
        return "Chart reset"
    raise ValueError(f"unknown command: {cmd}")


def interactive_mode(app: EmployeeOrgApp) -> None:
    """Read commands from stdin until EOF or ``quit``."""
    print("\nOrgChart interactive mode")
    print("Commands: move E S | undo | redo | reset | status | quit\n")

    while True:
        try:
            line = input("org> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue
        if line.lower() in ("exit", "quit", "q"):
            break
        if line.lower() == "status":
            show_status(app)
            continue

        try:
            print(run_command(app, line))
        except (ValueError, EntityNotFound) as e:
            print(f"Error: {e}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="OrgChart — reparent employees with undo/redo",
    )
    parser.add_argument(
        "--org-file", "-f",
        default=None,
        help="Org chart YAML (default: company/org.yaml)",
    )
    parser.add_argument(
        "--move", "-m",
        nargs=2,
        type=int,
        action="append",
        default=[],
        metavar=("EMPLOYEE", "SUPERVISOR"),
        help="Move EMPLOYEE under SUPERVISOR (repeatable, applied in order)",
    )
    parser.add_argument("--undo", type=int, default=0, metavar="N", help="Undo N moves")
    parser.add_argument("--redo", type=int, default=0, metavar="N", help="Redo N moves")
    parser.add_argument("--output", "-o", default=None, help="Write the resulting chart to this file")
    parser.add_argument("--status", "-s", action="store_true", help="Print the resulting chart")
    parser.add_argument("--json", action="store_true", help="Print the resulting chart as JSON")
    parser.add_argument("--interactive", "-i", action="store_true", help="Run in interactive mode")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        app = EmployeeOrgApp(load_org(args.org_file))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Failed to load org chart: {e}", file=sys.stderr)
        return 1

    if args.interactive:
        interactive_mode(app)
        return 0

    for employee_id, supervisor_id in args.move:
        try:
            app.move(employee_id, supervisor_id)
        except EntityNotFound as e:
            print(f"Error: {e} (employee={employee_id}, supervisor={supervisor_id})", file=sys.stderr)
            return 1
    for _ in range(args.undo):
        app.undo()
    for _ in range(args.redo):
        app.redo()

    if args.output:
        save_org(app.ceo, args.output)

    if args.json:
        print(json.dumps(app.ceo.model_dump(), ensure_ascii=False, indent=2))
    elif args.status or not (args.move or args.undo or args.redo or args.output):
        show_status(app)

    return 0


if __name__ == "__main__":
    sys.exit(main())
