"""Shared utilities for reading and writing org.yaml."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import DEFAULT_CEO_ID, DEFAULT_CEO_NAME, ORG_YAML_PATH
from .models import Employee, check_unique_ids

logger = logging.getLogger(__name__)


def default_org() -> Employee:
    """A chart holding only the CEO."""
    return Employee(id=DEFAULT_CEO_ID, name=DEFAULT_CEO_NAME)


def load_org(path: Path | str | None = None) -> Employee:
    """Load org.yaml and return the CEO node.

    The document must have a top-level ``ceo`` mapping. A missing file
    yields ``default_org()``.
    """
    p = Path(path) if path else ORG_YAML_PATH
    if not p.exists():
        logger.info("No org file at %s, starting with default CEO", p)
        return default_org()

    with open(p, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict) or "ceo" not in data:
        raise ValueError(f"{p}: missing top-level 'ceo' entry")

    root = Employee.model_validate(data["ceo"])
    check_unique_ids(root)
    logger.info("Loaded org chart from %s (ceo=%d)", p, root.id)
    return root


def save_org(root: Employee, path: Path | str | None = None) -> None:
    """Write the tree under *root* to org.yaml."""
    p = Path(path) if path else ORG_YAML_PATH
    with open(p, "w", encoding="utf-8") as f:
        yaml.dump(
            {"ceo": root.model_dump()},
            f,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
    logger.info("Saved org chart to %s", p)
