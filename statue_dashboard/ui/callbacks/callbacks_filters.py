from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import dash
from dash import Input, Output, exceptions

from statue_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from statue_dashboard.ui.config import AppConfig


def selection_for_trigger(ctx: AppConfig, triggered_id: Optional[str]) -> List[str]:
    """Checklist value after one of the bulk-selection buttons was pressed."""
    if triggered_id == IDs.Control.SELECT_ALL_BTN:
        return ctx.dataset.categories
    if triggered_id == IDs.Control.CLEAR_BTN:
        return []
    raise exceptions.PreventUpdate


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.CATEGORY_CHECKLIST, "value"),
        Input(IDs.Control.SELECT_ALL_BTN, "n_clicks"),
        Input(IDs.Control.CLEAR_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def bulk_select_categories(_all_clicks, _clear_clicks):
        return selection_for_trigger(ctx, dash.ctx.triggered_id)
