from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from emp_grid.config.model import GlobalConfig
from emp_grid.core.dataset import DatasetSummary
from emp_grid.ui.helpers import summary_bar
from emp_grid.ui.ids import IDs


def build_navbar(global_config: GlobalConfig, summary: DatasetSummary) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H1(global_config.ui_title, className="mb-0 emp-title"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id=IDs.Control.NAVBAR_SUBTITLE,
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    summary_bar(summary),
                    id=IDs.Control.SUMMARY_BAR,
                    className="ms-auto d-flex align-items-center small",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm emp-navbar",
    )
