from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from statue_dashboard.core.base_view import BaseView
from statue_dashboard.core.records import CATEGORY, COST_1886, COST_TODAY, DerivedView

SERIES_1886 = "Cost in 1886"
SERIES_TODAY = "Cost Today"


class CostChartView(BaseView):
    """
    Grouped bar chart: one group per visible category, bars for the 1886 cost
    and today's estimated cost.
    """

    id = "cost_chart"
    label = "Cost Comparison"

    def compute_data(self, view: DerivedView) -> pd.DataFrame:
        frame = view.to_frame()
        return frame[[CATEGORY, COST_1886, COST_TODAY]]

    def render(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No materials selected - tick at least one category")

        fig = go.Figure()
        fig.add_bar(
            x=data[CATEGORY],
            y=data[COST_1886],
            name=SERIES_1886,
            hovertemplate="%{x}<br>1886: $%{y:,.0f}<extra></extra>",
        )
        fig.add_bar(
            x=data[CATEGORY],
            y=data[COST_TODAY],
            name=SERIES_TODAY,
            hovertemplate="%{x}<br>Today: $%{y:,.0f}<extra></extra>",
        )

        fig.update_layout(
            barmode="group",
            height=450,
            margin=dict(l=40, r=40, t=60, b=40),
            title=f"{self.dataset.name}: cost then and now",
            xaxis_title="Category",
            yaxis_title="Cost (USD)",
            yaxis_tickprefix="$",
            yaxis_tickformat=",.0f",
            legend_title="Series",
        )
        return fig
