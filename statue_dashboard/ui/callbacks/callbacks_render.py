from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Tuple

import dash
import plotly.graph_objs as go
from dash import Input, Output

from statue_dashboard.core.filter_state import FilterState
from statue_dashboard.ui.ids import IDs
from statue_dashboard.views import CostChartView, CostSummaryView, MaterialTableView

if TYPE_CHECKING:
    from statue_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def error_outputs() -> Tuple[Any, go.Figure, Any, Any]:
    """
    Outputs for a failed render: an error figure, everything else untouched.

    Store, table and summary keep their previous values so the table and the
    CSV export (which reads the store) still show the same selection.
    """
    return (
        dash.no_update,
        _error_figure(
            "The app hit an unexpected error. "
            "If this keeps happening, grab the logs and open an issue."
        ),
        dash.no_update,
        dash.no_update,
    )


def render_selection(
    ctx: AppConfig,
    categories: Optional[Iterable[str]],
) -> Tuple[dict[str, Any], go.Figure, List[dict[str, Any]], str]:
    """
    Apply a category selection and collect what every consumer rendered.

    Chart, table and summary are subscribed to one controller, so a single
    set_filter updates all of them from the same DerivedView.

    :return: (filter-state dict, cost figure, table rows, summary text)
    """
    selection = list(categories or [])
    state = FilterState(dataset_name=ctx.dataset.name, categories=selection)

    controller = ctx.new_controller()
    chart = ctx.registry.create(CostChartView.id, ctx.dataset)
    table = ctx.registry.create(MaterialTableView.id, ctx.dataset)
    summary = ctx.registry.create(CostSummaryView.id, ctx.dataset)
    for consumer in (chart, table, summary):
        controller.subscribe(consumer)

    controller.set_filter(selection)

    logger.info(
        "render_done",
        extra={
            "dataset": ctx.dataset.name,
            "n_selected": len(selection),
            "n_visible": len(controller.get_derived_view()),
        },
    )
    return state.to_dict(), chart.output, table.output["data"], summary.output


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Category selection -> store, chart, table, summary
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Control.COST_GRAPH, "figure"),
        Output(IDs.Control.MATERIAL_TABLE, "data"),
        Output(IDs.Control.SUMMARY_TEXT, "children"),
        Input(IDs.Control.CATEGORY_CHECKLIST, "value"),
    )
    def update_views_from_selection(categories):
        try:
            return render_selection(ctx, categories)
        except Exception:
            logger.exception(
                "Error in update_views_from_selection",
                extra={"categories": categories},
            )
            return error_outputs()
