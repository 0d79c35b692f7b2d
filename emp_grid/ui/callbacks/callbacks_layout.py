from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

import dash
from dash import ClientsideFunction, Input, Output, Patch, State, no_update

from emp_grid.core.layout_sizer import page_size_from_metrics, page_size_options
from emp_grid.ui.ids import IDs

if TYPE_CHECKING:
    from emp_grid.config.model import GlobalConfig
    from emp_grid.ui.config import AppConfig

logger = logging.getLogger(__name__)


def next_page_size(
    metrics: Optional[Mapping[str, Any]],
    grid_options: Optional[Mapping[str, Any]],
    global_config: GlobalConfig,
) -> Optional[int]:
    """
    Page size to apply for a new measurement, or None when nothing changes.

    Returning None for an unchanged size keeps repeated resize events with the
    same geometry from re-rendering the grid.
    """
    if not global_config.dynamic_page_size or metrics is None:
        return None

    size = page_size_from_metrics(metrics, global_config.header_height_px)
    current = (grid_options or {}).get("paginationPageSize")
    if current == size:
        return None
    return size


def register_layout_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Browser: wait for grid ready, measure container + row height
    # ---------------------------------------------------------
    app.clientside_callback(
        ClientsideFunction(namespace="emp_grid", function_name="measureGrid"),
        Output(IDs.Store.GRID_METRICS, "data"),
        Input(IDs.Store.RESIZE_TICK, "data"),
        State(IDs.Control.GRID_CONTAINER, "id"),
        State(IDs.Control.EMPLOYEE_GRID, "id"),
        State(IDs.Control.STATUS_BAR, "id"),
    )

    # ---------------------------------------------------------
    # Measurement -> pagination page size
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.EMPLOYEE_GRID, "dashGridOptions"),
        Input(IDs.Store.GRID_METRICS, "data"),
        State(IDs.Control.EMPLOYEE_GRID, "dashGridOptions"),
        prevent_initial_call=True,
    )
    def apply_dynamic_page_size(metrics: dict[str, Any] | None, grid_options: dict[str, Any] | None):
        size = next_page_size(metrics, grid_options, ctx.global_config)
        if size is None:
            return no_update

        logger.info(
            "page_size_applied",
            extra={"page_size": size, "metrics": metrics},
        )
        patched = Patch()
        patched["paginationPageSize"] = size
        patched["paginationPageSizeSelector"] = page_size_options(
            size, ctx.global_config.page_size_options
        )
        return patched
