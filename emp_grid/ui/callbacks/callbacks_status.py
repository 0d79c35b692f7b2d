from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output

from emp_grid.ui.helpers import status_text
from emp_grid.ui.ids import IDs

if TYPE_CHECKING:
    from emp_grid.ui.config import AppConfig


def register_status_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    n_total = len(ctx.dataset)

    @app.callback(
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Control.EMPLOYEE_GRID, "virtualRowData"),
        Input(IDs.Control.EMPLOYEE_GRID, "selectedRows"),
        Input(IDs.Control.EMPLOYEE_GRID, "dashGridOptions"),
    )
    def update_status(
        virtual_rows: Optional[list[dict[str, Any]]],
        selected_rows: Optional[list[dict[str, Any]]],
        grid_options: Optional[dict[str, Any]],
    ):
        n_visible = len(virtual_rows) if virtual_rows is not None else None
        page_size = (grid_options or {}).get("paginationPageSize")
        return status_text(n_total, n_visible, page_size, len(selected_rows or []))
