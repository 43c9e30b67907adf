"""Tests for the Employee model."""

from __future__ import annotations

import pytest

from orgchart.models import Employee, check_unique_ids


def test_accepts_unique_id_alias():
    e = Employee.model_validate({"uniqueId": 4, "name": "Lisa", "subordinates": []})
    assert e.id == 4
    assert e.model_dump() == {"id": 4, "name": "Lisa", "subordinates": []}


def test_subordinates_default_empty():
    assert Employee(id=1, name="CEO").subordinates == []


def test_clone_is_independent(company):
    copy = company.clone()
    copy.subordinates[0].subordinates.clear()
    copy.subordinates[1].name = "renamed"

    assert len(company.subordinates[0].subordinates) == 2
    assert company.subordinates[1].name == "Tyler M"


def test_check_unique_ids_passes(company):
    check_unique_ids(company)


def test_check_unique_ids_rejects_duplicates():
    root = Employee(id=1, name="CEO", subordinates=[Employee(id=2, name="A"), Employee(id=2, name="B")])
    with pytest.raises(ValueError, match="Duplicate employee id 2"):
        check_unique_ids(root)
