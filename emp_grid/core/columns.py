from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Optional, Tuple

from .exceptions import ColumnConfigError
from .record import FIELD_KEYS
from .renderers import (
    DisplayWidget,
    FieldContext,
    RendererKind,
    RendererRegistry,
    default_registry,
)


class FilterKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    NONE = "none"


@dataclass(frozen=True)
class ColumnSpec:
    """
    Declarative description of one grid column.

    Fields:

    - field: Record field key (camelCase, see Record.FIELD_KEYS)
    - header_name: column header label
    - filter: which filter the grid offers for this column
    - sortable: whether header clicks sort the column
    - renderer: display variant; selects the formatter/renderer pair from the
      RendererRegistry. PLAIN means "no custom formatting"

    - width / flex / min_width: sizing hints, passed through to the grid
    - auto_height: let rows grow to fit this column's content
    - column_type: named grid column type (e.g. "textColumn")

    Specs are immutable and compared structurally, so two builds of the column
    model are equal and can be handed to the grid by reference.
    """

    field: str
    header_name: str
    filter: FilterKind = FilterKind.TEXT
    sortable: bool = True
    renderer: RendererKind = RendererKind.PLAIN

    width: Optional[int] = None
    flex: Optional[int] = None
    min_width: Optional[int] = None
    auto_height: bool = False
    column_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.field not in FIELD_KEYS:
            raise ColumnConfigError(
                f"Column '{self.header_name}' references unknown field '{self.field}'"
            )

    @property
    def has_formatter(self) -> bool:
        return self.renderer is not RendererKind.PLAIN

    def format(self, value: Any, registry: Optional[RendererRegistry] = None) -> str:
        registry = registry or default_registry()
        return registry.formatter(self.renderer)(value)

    def render(
        self,
        value: Any,
        registry: Optional[RendererRegistry] = None,
        row: Optional[dict] = None,
    ) -> DisplayWidget:
        registry = registry or default_registry()
        return registry.renderer(self.renderer)(value, FieldContext(field=self.field, row=row))


def build_column_specs() -> Tuple[ColumnSpec, ...]:
    """
    The column model for the employee grid, in display order.

    Pure: every call returns an equal tuple. Use ``column_specs()`` to get the
    shared instance instead of rebuilding it per request.
    """
    return (
        ColumnSpec("id", "ID", filter=FilterKind.NONE, width=90),
        ColumnSpec("firstName", "First Name"),
        ColumnSpec("lastName", "Last Name"),
        ColumnSpec("email", "Email"),
        ColumnSpec("department", "Department"),
        ColumnSpec("position", "Position"),
        ColumnSpec(
            "salary",
            "Salary ($)",
            filter=FilterKind.NUMBER,
            renderer=RendererKind.CURRENCY,
        ),
        ColumnSpec(
            "hireDate",
            "Hire Date",
            filter=FilterKind.DATE,
            renderer=RendererKind.DATE,
        ),
        ColumnSpec("age", "Age", filter=FilterKind.NUMBER),
        ColumnSpec("location", "Location"),
        ColumnSpec(
            "performanceRating",
            "Performance Rating",
            filter=FilterKind.NUMBER,
            renderer=RendererKind.RATING,
        ),
        ColumnSpec("projectsCompleted", "Projects Completed", filter=FilterKind.NUMBER),
        ColumnSpec("isActive", "Active", renderer=RendererKind.BOOLEAN),
        ColumnSpec(
            "skills",
            "Skills",
            renderer=RendererKind.STRING_LIST,
            column_type="textColumn",
            min_width=200,
            auto_height=True,
        ),
        ColumnSpec(
            "manager",
            "Manager",
            renderer=RendererKind.OPTIONAL_REFERENCE,
            column_type="textColumn",
        ),
    )


@lru_cache(maxsize=1)
def column_specs() -> Tuple[ColumnSpec, ...]:
    return build_column_specs()
