from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import DatasetSchemaError


# Grid field key -> Record attribute. Keys are the camelCase names used in the
# dataset file and by the grid widget.
FIELD_ATTRS: Dict[str, str] = {
    "id": "id",
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "department": "department",
    "position": "position",
    "salary": "salary",
    "hireDate": "hire_date",
    "age": "age",
    "location": "location",
    "performanceRating": "performance_rating",
    "projectsCompleted": "projects_completed",
    "isActive": "is_active",
    "skills": "skills",
    "manager": "manager",
}

FIELD_KEYS: Tuple[str, ...] = tuple(FIELD_ATTRS)

_REQUIRED_KEYS = ("id", "firstName", "lastName")


@dataclass(frozen=True)
class Record:
    """
    One employee row.

    Values are kept as delivered by the dataset file. Nothing here coerces
    salary/rating/date types: formatting is defensive at render time, so a
    malformed value shows up as a placeholder in the grid instead of failing
    the load.
    """

    id: int
    first_name: str
    last_name: str
    email: str = ""
    department: str = ""
    position: str = ""
    salary: Any = 0
    hire_date: Any = ""
    age: Any = None
    location: str = ""
    performance_rating: Any = None
    projects_completed: Any = 0
    is_active: bool = False
    skills: Any = field(default_factory=tuple)
    manager: Optional[str] = None

    FIELD_KEYS = FIELD_KEYS

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def get(self, field_key: str) -> Any:
        """Value for a grid field key (camelCase)."""
        return getattr(self, FIELD_ATTRS[field_key])

    def to_row(self) -> Dict[str, Any]:
        row = {key: getattr(self, attr) for key, attr in FIELD_ATTRS.items()}
        if isinstance(row["skills"], tuple):
            row["skills"] = list(row["skills"])
        return row

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Record:
        missing = [k for k in _REQUIRED_KEYS if k not in data]
        if missing:
            raise DatasetSchemaError(
                f"Employee record is missing required keys: {', '.join(missing)}"
            )

        skills = data.get("skills", ())
        if isinstance(skills, list):
            skills = tuple(skills)

        kwargs = {
            attr: data[key]
            for key, attr in FIELD_ATTRS.items()
            if key in data and key != "skills"
        }
        kwargs["skills"] = skills if skills is not None else ()
        return cls(**kwargs)
