import json
from pathlib import Path

import pytest

from emp_grid.config.loader import load_app_data, load_dataset, load_global_config
from emp_grid.core.exceptions import ConfigError, DatasetSchemaError


def _write_config(root: Path, global_json: dict, employees: object) -> Path:
    # root/
    #   global.json
    #   data/
    #     employees.json
    data_dir = root / "data"
    data_dir.mkdir(parents=True)
    (root / "global.json").write_text(json.dumps(global_json))
    (data_dir / "employees.json").write_text(json.dumps(employees))
    return root


def _employee(emp_id: int, **overrides) -> dict:
    raw = {
        "id": emp_id,
        "firstName": f"First{emp_id}",
        "lastName": f"Last{emp_id}",
        "salary": 50000 + emp_id,
        "hireDate": "2020-01-01",
        "performanceRating": 3.0,
        "isActive": True,
        "skills": ["SQL"],
        "manager": None,
    }
    raw.update(overrides)
    return raw


def test_load_global_config_defaults(tmp_path):
    root = _write_config(tmp_path / "config", {}, {"employees": []})

    cfg = load_global_config(root)

    assert cfg.ui_title == "Employee Dashboard"
    assert cfg.default_page_size == 10
    assert cfg.page_size_options == [10, 20, 50, 100]
    assert cfg.header_height_px == 50
    assert cfg.dynamic_page_size is True
    assert cfg.data_file == (root / "data" / "employees.json").resolve()


def test_load_global_config_overrides(tmp_path):
    root = _write_config(
        tmp_path / "config",
        {
            "ui_title": "People",
            "default_page_size": 25,
            "page_size_options": [100, 25, 10],
            "dynamic_page_size": False,
        },
        {"employees": []},
    )

    cfg = load_global_config(root)

    assert cfg.ui_title == "People"
    assert cfg.default_page_size == 25
    assert cfg.page_size_options == [10, 25, 100]
    assert cfg.dynamic_page_size is False


def test_load_global_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


@pytest.mark.parametrize(
    "global_json",
    [
        {"default_page_size": 0},
        {"default_page_size": "ten"},
        {"page_size_options": []},
        {"page_size_options": [10, -5]},
    ],
)
def test_load_global_config_rejects_bad_values(tmp_path, global_json):
    root = _write_config(tmp_path / "config", global_json, {"employees": []})

    with pytest.raises(ConfigError):
        load_global_config(root)


def test_load_app_data(tmp_path):
    root = _write_config(
        tmp_path / "config",
        {"ui_title": "Test"},
        {"employees": [_employee(1), _employee(2, manager="First1 Last1")]},
    )

    cfg, ds = load_app_data(root)

    assert cfg.ui_title == "Test"
    assert len(ds) == 2
    assert ds.name == "employees"
    assert ds[1].manager == "First1 Last1"


def test_load_dataset_requires_employees_list(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"people": []}))

    with pytest.raises(DatasetSchemaError):
        load_dataset(path)


def test_load_dataset_reports_record_index(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"employees": [_employee(1), {"id": 2}]}))

    with pytest.raises(DatasetSchemaError, match="#1"):
        load_dataset(path)


def test_shipped_config_loads():
    root = Path(__file__).resolve().parents[3] / "config"

    cfg, ds = load_app_data(root)

    assert cfg.ui_title == "Employee Dashboard"
    assert len(ds) > 0
