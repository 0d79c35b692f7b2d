from __future__ import annotations

from typing import TYPE_CHECKING

import dash_ag_grid as dag
import dash_bootstrap_components as dbc
from dash import dcc, html

from emp_grid.core.grid_options import column_defs, dash_grid_options, default_col_def
from emp_grid.ui.ids import IDs

if TYPE_CHECKING:
    from emp_grid.ui.config import AppConfig

MIN_CONTAINER_HEIGHT = "400px"


def build_employee_grid(ctx: AppConfig) -> dag.AgGrid:
    gc = ctx.global_config
    return dag.AgGrid(
        id=IDs.Control.EMPLOYEE_GRID,
        rowData=ctx.row_data,
        columnDefs=column_defs(ctx.columns),
        defaultColDef=default_col_def(),
        dashGridOptions=dash_grid_options(gc.default_page_size, gc.page_size_options),
        getRowId="params.data.id",
        className="ag-theme-alpine",
        style={"height": None, "width": "100%"},
    )


def build_grid_panel(ctx: AppConfig) -> dbc.Card:
    """
    Card holding the grid.

    The inner div is the container the browser measures for the dynamic page
    size; the two stores carry the resize signal and the measurement.
    """
    return dbc.Card(
        dbc.CardBody(
            [
                dcc.Store(id=IDs.Store.RESIZE_TICK, data=0),
                dcc.Store(id=IDs.Store.GRID_METRICS),
                html.Div(
                    build_employee_grid(ctx),
                    id=IDs.Control.GRID_CONTAINER,
                    className="emp-grid-container",
                    style={"height": "100%", "minHeight": MIN_CONTAINER_HEIGHT},
                ),
                html.Div(
                    id=IDs.Control.STATUS_BAR,
                    className="text-muted small mt-2",
                ),
            ],
            className="p-3",
        ),
        className="shadow-sm",
    )
