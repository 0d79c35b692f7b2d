from __future__ import annotations

import pytest

from emp_grid.core.dataset import EmployeeDataset
from emp_grid.core.exceptions import DatasetSchemaError
from emp_grid.core.record import Record


def _raw(**overrides):
    raw = {
        "id": 7,
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "department": "Engineering",
        "position": "Engineer",
        "salary": 100000,
        "hireDate": "2018-01-15",
        "age": 36,
        "location": "London",
        "performanceRating": 4.9,
        "projectsCompleted": 12,
        "isActive": True,
        "skills": ["Math", "Analytical Engines"],
        "manager": None,
    }
    raw.update(overrides)
    return raw


def test_record_from_dict_and_back():
    rec = Record.from_dict(_raw())

    assert rec.first_name == "Ada"
    assert rec.skills == ("Math", "Analytical Engines")
    assert rec.full_name == "Ada Lovelace"
    assert rec.get("performanceRating") == 4.9

    row = rec.to_row()
    assert row["skills"] == ["Math", "Analytical Engines"]
    assert row["manager"] is None
    assert list(row) == list(Record.FIELD_KEYS)


def test_record_missing_required_key():
    raw = _raw()
    del raw["lastName"]

    with pytest.raises(DatasetSchemaError):
        Record.from_dict(raw)


def test_record_optional_fields_default():
    rec = Record.from_dict({"id": 1, "firstName": "A", "lastName": "B"})

    assert rec.skills == ()
    assert rec.manager is None
    assert rec.is_active is False


def test_record_keeps_malformed_skills_for_renderer():
    rec = Record.from_dict(_raw(skills="Math"))

    assert rec.skills == "Math"


def test_dataset_summary():
    ds = EmployeeDataset(
        name="d",
        records=[
            Record.from_dict(_raw(id=1, salary=100000, department="A")),
            Record.from_dict(_raw(id=2, salary=50000, department="B", isActive=False)),
            Record.from_dict(_raw(id=3, salary="unknown", department="A")),
        ],
    )

    summary = ds.summary
    assert summary.n_employees == 3
    assert summary.n_active == 2
    assert summary.n_departments == 2
    assert summary.mean_salary == pytest.approx(75000.0)
    assert len(ds) == 3
    assert ds[0].id == 1


def test_empty_dataset_summary():
    summary = EmployeeDataset(name="empty", records=[]).summary

    assert summary.n_employees == 0
    assert summary.mean_salary is None
