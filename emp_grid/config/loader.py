from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from emp_grid.config.model import GlobalConfig
from emp_grid.core.dataset import EmployeeDataset
from emp_grid.core.exceptions import ConfigError, DatasetSchemaError
from emp_grid.core.record import Record

logger = logging.getLogger(__name__)


def _positive_int(raw: Dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
    return value


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load global.json from the config directory.

    Expected structure:

        root/
            global.json
            data/
                employees.json

    - data_file: path to the dataset, relative paths resolve against root
                 (defaults to 'data/employees.json')
    - everything else is optional and falls back to the GlobalConfig defaults

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if a value has the wrong type.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{global_path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    data_file = Path(raw.get("data_file", "data/employees.json"))
    if not data_file.is_absolute():
        data_file = (root / data_file).resolve()

    options = raw.get("page_size_options", [10, 20, 50, 100])
    if (
        not isinstance(options, list)
        or not options
        or not all(isinstance(o, int) and not isinstance(o, bool) and o > 0 for o in options)
    ):
        raise ConfigError(f"'page_size_options' must be a non-empty list of positive integers, got {options!r}")

    return GlobalConfig(
        data_file=data_file,
        ui_title=raw.get("ui_title", "Employee Dashboard"),
        subtitle=raw.get("subtitle", "Interactive employee directory"),
        default_page_size=_positive_int(raw, "default_page_size", 10),
        page_size_options=sorted(set(options)),
        header_height_px=_positive_int(raw, "header_height_px", 50),
        dynamic_page_size=bool(raw.get("dynamic_page_size", True)),
    )


def load_dataset(path: Path, name: str | None = None) -> EmployeeDataset:
    """
    Load the employee snapshot from a JSON file of the form
    {"employees": [{...}, ...]}.

    :raises FileNotFoundError: if the file does not exist.
    :raises DatasetSchemaError: if the file has no "employees" list or a record
        is missing required keys.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Dataset file not found at {path}")

    logger.info("Loading dataset", extra={"path": str(path)})

    with path.open() as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetSchemaError(f"{path} is not valid JSON: {e}") from e

    employees = raw.get("employees") if isinstance(raw, dict) else None
    if not isinstance(employees, list):
        raise DatasetSchemaError(f"{path} must contain an 'employees' list")

    records: List[Record] = []
    for idx, item in enumerate(employees):
        if not isinstance(item, dict):
            raise DatasetSchemaError(f"Employee #{idx} in {path} is not an object")
        try:
            records.append(Record.from_dict(item))
        except DatasetSchemaError as e:
            raise DatasetSchemaError(f"Employee #{idx} in {path}: {e}") from e

    dataset = EmployeeDataset(name=name or path.stem, records=records, file_path=path)
    logger.info(
        "Dataset loaded",
        extra={"dataset": dataset.name, "n_records": len(dataset)},
    )
    return dataset


def load_app_data(root: Path) -> Tuple[GlobalConfig, EmployeeDataset]:
    """Global config + the dataset it points at."""
    global_config = load_global_config(root)
    dataset = load_dataset(global_config.data_file)
    return global_config, dataset
