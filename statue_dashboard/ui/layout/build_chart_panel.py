from __future__ import annotations

import dash_bootstrap_components as dbc
import plotly.graph_objs as go
from dash import dcc, html

from statue_dashboard.ui.ids import IDs


def build_chart_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Cost comparison"),
                        html.Span(
                            id=IDs.Control.SUMMARY_TEXT,
                            className="text-muted small ms-auto",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dcc.Loading(
                        id="cost-graph-loading",
                        type="default",
                        children=dcc.Graph(
                            id=IDs.Control.COST_GRAPH,
                            style={"height": "450px"},
                            config={"responsive": True},
                        ),
                    ),
                    html.Div(
                        [
                            dbc.Button(
                                "Export CSV",
                                id=IDs.Control.DOWNLOAD_DATA_BTN,
                                color="secondary",
                                size="sm",
                                className="mt-2 ms-auto me-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                        ],
                        className="d-flex justify-content-end align-items-center",
                    ),
                ]
            ),
        ],
        className="mb-3",
    )


def build_workflow_panel(figure: go.Figure) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Build workflow"), className="p-2"),
            dbc.CardBody(
                dcc.Graph(
                    id=IDs.Control.WORKFLOW_GRAPH,
                    figure=figure,
                    config={"responsive": True},
                )
            ),
        ],
        className="mb-3",
    )
