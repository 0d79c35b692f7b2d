from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc

from emp_grid.ui.layout.build_grid_panel import build_grid_panel
from emp_grid.ui.layout.build_navbar import build_navbar

if TYPE_CHECKING:
    from emp_grid.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    navbar = build_navbar(ctx.global_config, ctx.dataset.summary)

    return dbc.Container(
        fluid=True,
        className="emp-root",
        children=[
            navbar,
            dbc.Row(
                dbc.Col(build_grid_panel(ctx), xxl=10, className="mt-3 mx-auto"),
                className="gx-3",
            ),
        ],
    )
