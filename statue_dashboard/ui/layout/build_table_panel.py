from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dash_table, html

from statue_dashboard.ui.ids import IDs
from statue_dashboard.views.material_table_view import MaterialTableView

_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def build_table_panel() -> dbc.Card:
    """
    Styled DataTable for the visible materials. Rows are filled by the render
    callback; column specs (incl. currency formats) are fixed here.
    """
    table = dash_table.DataTable(
        id=IDs.Control.MATERIAL_TABLE,
        data=[],
        columns=MaterialTableView.columns(),
        style_table={"overflowX": "auto"},
        style_as_list_view=True,
        style_cell={
            "fontFamily": _FONT,
            "fontSize": "13px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "100px",
        },
        style_cell_conditional=[
            {"if": {"column_type": "numeric"}, "textAlign": "right"},
        ],
        style_header={
            "fontFamily": _FONT,
            "fontSize": "13px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={"borderBottom": "1px solid #e5e7eb"},
        sort_action="native",
        filter_action="none",
    )

    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Material data"), className="p-2"),
            dbc.CardBody(table),
        ],
        className="mb-3",
    )
