"""
ColumnSpecs and records -> Dash AG Grid props.

The grid receives raw record values (sorting and number/date filtering work on
those) plus two per-row lookups built here:

- ``_display``: serialised DisplayWidget per formatted column, drawn by the
  ``DisplayCell`` cell renderer in assets/dashAgGridComponentFunctions.js
- ``_text``: formatted text per formatted column, used as the filter value for
  text-filtered columns so "Active" / "No skills" / "None" match what is shown
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

from .columns import ColumnSpec, FilterKind
from .dataset import EmployeeDataset
from .layout_sizer import DEFAULT_PAGE_SIZE_OPTIONS, page_size_options
from .renderers import RendererKind, RendererRegistry

DISPLAY_KEY = "_display"
TEXT_KEY = "_text"
DISPLAY_CELL_RENDERER = "DisplayCell"

AG_FILTERS: Dict[FilterKind, Any] = {
    FilterKind.TEXT: "agTextColumnFilter",
    FilterKind.NUMBER: "agNumberColumnFilter",
    FilterKind.DATE: "agDateColumnFilter",
    FilterKind.NONE: False,
}

COLUMN_TYPES: Dict[str, Dict[str, Any]] = {
    "textColumn": {
        "filter": "agTextColumnFilter",
        "sortable": True,
        "resizable": True,
    },
}


def column_def(spec: ColumnSpec) -> Dict[str, Any]:
    col: Dict[str, Any] = {
        "field": spec.field,
        "headerName": spec.header_name,
        "sortable": spec.sortable,
        "filter": AG_FILTERS[spec.filter],
    }

    if spec.width is not None:
        col["width"] = spec.width
        # a fixed width only sticks when the default flex is switched off
        col["flex"] = 0
    if spec.flex is not None:
        col["flex"] = spec.flex
    if spec.min_width is not None:
        col["minWidth"] = spec.min_width
    if spec.auto_height:
        col["autoHeight"] = True
        col["wrapText"] = True
    if spec.column_type:
        col["type"] = spec.column_type

    if spec.has_formatter:
        col["cellRenderer"] = DISPLAY_CELL_RENDERER
        if spec.filter is FilterKind.TEXT:
            col["filterValueGetter"] = {
                "function": f"params.data.{TEXT_KEY}['{spec.field}']"
            }
    if spec.renderer is RendererKind.DATE:
        col["cellDataType"] = "dateString"

    return col


def column_defs(specs: Sequence[ColumnSpec]) -> List[Dict[str, Any]]:
    return [column_def(s) for s in specs]


def default_col_def() -> Dict[str, Any]:
    return {
        "flex": 1,
        "minWidth": 100,
        "filter": True,
        "resizable": True,
    }


def dash_grid_options(
    page_size: int,
    base_page_sizes: Iterable[int] = DEFAULT_PAGE_SIZE_OPTIONS,
) -> Dict[str, Any]:
    return {
        "columnTypes": COLUMN_TYPES,
        "domLayout": "autoHeight",
        "pagination": True,
        "paginationPageSize": page_size,
        "paginationPageSizeSelector": page_size_options(page_size, base_page_sizes),
        "animateRows": True,
        "rowSelection": {"mode": "multiRow"},
        "enableCellTextSelection": True,
        "theme": "legacy",
    }


def build_row(
    row: Dict[str, Any],
    specs: Sequence[ColumnSpec],
    registry: RendererRegistry,
) -> Dict[str, Any]:
    display: Dict[str, Any] = {}
    text: Dict[str, str] = {}
    for spec in specs:
        if not spec.has_formatter:
            continue
        value = row.get(spec.field)
        display[spec.field] = spec.render(value, registry, row).to_dict()
        text[spec.field] = spec.format(value, registry)

    out = dict(row)
    out[DISPLAY_KEY] = display
    out[TEXT_KEY] = text
    return out


def build_row_data(
    dataset: EmployeeDataset,
    specs: Sequence[ColumnSpec],
    registry: RendererRegistry,
) -> List[Dict[str, Any]]:
    """
    Grid rowData for the whole snapshot.

    The snapshot never changes, so callers build this once at startup.
    """
    return [build_row(r.to_row(), specs, registry) for r in dataset]
