from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from statue_dashboard.core.filter_state import FilterState
from statue_dashboard.views.workflow_timeline_view import WorkflowTimelineView
from statue_dashboard.ui.layout.build_chart_panel import build_chart_panel, build_workflow_panel
from statue_dashboard.ui.layout.build_filter_panel import build_filter_panel
from statue_dashboard.ui.layout.build_navbar import build_navbar
from statue_dashboard.ui.layout.build_table_panel import build_table_panel
from statue_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from statue_dashboard.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    dataset = ctx.dataset

    # Workflow stages ignore the filter, so the figure is rendered once here
    workflow_view = ctx.registry.create(WorkflowTimelineView.id, dataset)
    workflow_view(dataset.subset(()))

    initial_state = FilterState.initial(dataset.name, dataset.categories)

    return dbc.Container(
        fluid=True,
        children=[
            build_navbar(ctx.global_config),

            # Session-scoped selection; nothing outlives the browser tab
            dcc.Store(
                id=IDs.Store.FILTER_STATE,
                storage_type="session",
                data=initial_state.to_dict(),
            ),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(dataset), md=3),
                    dbc.Col(
                        [
                            build_chart_panel(),
                            build_table_panel(),
                            build_workflow_panel(workflow_view.output),
                        ],
                        md=9,
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
