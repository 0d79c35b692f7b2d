from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Tuple

import pandas as pd

from .record import Record


@dataclass(frozen=True)
class DatasetSummary:
    """Headline numbers shown above the grid."""
    n_employees: int
    n_active: int
    n_departments: int
    mean_salary: Optional[float]


class EmployeeDataset:
    """
    Immutable snapshot of the employee records.

    Created once when the app is composed; nothing in the package mutates it
    afterwards. Derived views (DataFrame, summary) are computed lazily and
    cached on the instance.
    """

    def __init__(
        self,
        name: str,
        records: Iterable[Record],
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self._records: Tuple[Record, ...] = tuple(records)
        self.file_path = file_path

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, idx: int) -> Record:
        return self._records[idx]

    def __repr__(self) -> str:
        return f"EmployeeDataset(name={self.name!r}, n_records={len(self)})"

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------
    @cached_property
    def frame(self) -> pd.DataFrame:
        """Records as a DataFrame with the grid's camelCase column names."""
        return pd.DataFrame(
            [r.to_row() for r in self._records],
            columns=list(Record.FIELD_KEYS),
        )

    @cached_property
    def summary(self) -> DatasetSummary:
        df = self.frame
        if df.empty:
            return DatasetSummary(0, 0, 0, None)

        # only a literal True counts as active
        n_active = sum(1 for r in self._records if r.is_active is True)
        salary = pd.to_numeric(df["salary"], errors="coerce")
        mean_salary: Any = salary.mean()

        return DatasetSummary(
            n_employees=len(df),
            n_active=n_active,
            n_departments=int(df["department"].nunique(dropna=True)),
            mean_salary=None if pd.isna(mean_salary) else float(mean_salary),
        )

    def names(self) -> set[str]:
        """Full names of all records, used to resolve manager references."""
        return {r.full_name for r in self._records}
