from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, State, dcc, exceptions

from statue_dashboard.core.filter_state import FilterState
from statue_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from statue_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


def build_download(
    ctx: AppConfig,
    fs_data: Optional[dict[str, Any]],
    on: Optional[date] = None,
) -> dict[str, Any]:
    """
    CSV download payload for the selection held in the session store.

    An empty selection still downloads (header only).
    """
    if fs_data is None:
        raise exceptions.PreventUpdate

    state = FilterState.from_dict(fs_data)
    controller = ctx.new_controller(state.categories)

    payload = controller.export_csv()
    filename = controller.export_filename(on)

    logger.info(
        "csv_export",
        extra={
            "dataset": ctx.dataset.name,
            "export_filename": filename,
            "n_rows": len(controller.get_derived_view()),
            "n_bytes": len(payload),
        },
    )
    return dcc.send_bytes(payload, filename, type="text/csv")


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Export Logic
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_current_data(n_clicks, fs_data):
        if not n_clicks:
            raise exceptions.PreventUpdate
        return build_download(ctx, fs_data)
