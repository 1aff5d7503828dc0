from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from statue_dashboard.config.loader import load_global_config
from statue_dashboard.core.dataset import Dataset
from statue_dashboard.core.view_registry import ViewRegistry
from statue_dashboard.ui.layout.build_layout import build_layout
from statue_dashboard.ui.callbacks.callbacks_filters import register_filter_callbacks
from statue_dashboard.ui.callbacks.callbacks_io import register_io_callbacks
from statue_dashboard.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from statue_dashboard.views import (
        CostChartView,
        MaterialTableView,
        WorkflowTimelineView,
        CostSummaryView,
    )

    registry = ViewRegistry()
    registry.register(CostChartView)
    registry.register(MaterialTableView)
    registry.register(WorkflowTimelineView)
    registry.register(CostSummaryView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Static dataset, built once and shared read-only by every session
    dataset = Dataset.from_static(global_config.dataset_name)
    logger.info(
        "Dataset ready",
        extra={
            "dataset": dataset.name,
            "n_materials": len(dataset.materials),
            "n_stages": len(dataset.stages),
        },
    )

    # 3) App Context
    ctx = AppConfig(
        global_config=global_config,
        dataset=dataset,
        registry=_build_view_registry(),
    )
    ctx.validate()
    logger.info(
        "Views registered",
        extra={"views": [cls.id for cls in ctx.registry.all_classes()]},
    )

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_render_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    return app
