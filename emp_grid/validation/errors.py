from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from emp_grid.core.exceptions import EmpGridError


@dataclass(frozen=True)
class ValidationIssue:
    """
    One data-quality problem in the employee snapshot.

    record_id is None for dataset-wide issues (e.g. an empty file).
    """
    code: str
    message: str
    record_id: Optional[Any] = None

    def __str__(self) -> str:
        where = "dataset" if self.record_id is None else f"id {self.record_id!r}"
        return f"[{self.code}] {where}: {self.message}"


class ValidationError(EmpGridError):
    def __init__(self, issues: List[ValidationIssue]):
        self.issues = list(issues)
        super().__init__(f"{len(self.issues)} validation issue(s):\n" + "\n".join(map(str, self.issues)))

    @property
    def codes(self) -> List[str]:
        return [i.code for i in self.issues]

    def for_record(self, record_id: Any) -> List[ValidationIssue]:
        return [i for i in self.issues if i.record_id == record_id]
