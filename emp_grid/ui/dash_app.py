from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from emp_grid.config.loader import load_app_data
from emp_grid.core.columns import column_specs
from emp_grid.core.grid_options import build_row_data
from emp_grid.core.renderers import default_registry
from emp_grid.ui.layout.build_layout import build_layout
from emp_grid.ui.callbacks.callbacks_layout import register_layout_callbacks
from emp_grid.ui.callbacks.callbacks_status import register_status_callbacks
from emp_grid.validation.dataset_validation import warn_on_invalid_dataset

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config + dataset snapshot
    global_config, dataset = load_app_data(config_root)
    warn_on_invalid_dataset(dataset, logger)

    # 2) One-time engine setup: renderer registry + column model are built
    #    once per process and shared by every layout/callback below
    registry = default_registry()
    columns = column_specs()

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=dataset,
        columns=columns,
        registry=registry,
        row_data=build_row_data(dataset, columns, registry),
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_layout_callbacks(app, ctx)
    register_status_callbacks(app, ctx)

    logger.info(
        "App created",
        extra={
            "dataset": dataset.name,
            "n_records": len(dataset),
            "n_columns": len(columns),
        },
    )
    return app
