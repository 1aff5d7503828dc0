from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from statue_dashboard.core.dataset import Dataset
from statue_dashboard.ui.ids import IDs


def build_filter_panel(dataset: Dataset) -> dbc.Card:
    categories = dataset.categories
    options = [{"label": f" {c}", "value": c} for c in categories]

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div([
                        html.H5(dataset.name, className="card-title"),
                        html.P(
                            f"{len(dataset.materials)} materials · {len(dataset.stages)} build stages",
                            className="card-subtitle text-muted mb-3",
                        ),
                        html.Hr(),
                    ]),
                    html.Label("Material categories", className="form-label"),
                    dbc.Checklist(
                        id=IDs.Control.CATEGORY_CHECKLIST,
                        options=options,
                        # Initial selection: everything visible
                        value=list(categories),
                        className="mb-3",
                    ),
                    html.Div(
                        [
                            dbc.Button(
                                "Select all",
                                id=IDs.Control.SELECT_ALL_BTN,
                                color="secondary",
                                outline=True,
                                size="sm",
                                className="me-2",
                            ),
                            dbc.Button(
                                "Clear",
                                id=IDs.Control.CLEAR_BTN,
                                color="secondary",
                                outline=True,
                                size="sm",
                            ),
                        ],
                        className="d-flex",
                    ),
                ]
            ),
        ],
    )
