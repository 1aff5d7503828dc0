from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from statue_dashboard.core.base_view import BaseView
from statue_dashboard.core.records import DerivedView


class WorkflowTimelineView(BaseView):
    """
    Horizontal bars of build stage durations.

    Workflow stages are not subject to the category filter: the DerivedView
    argument is accepted for the common contract and ignored.
    """

    id = "workflow_timeline"
    label = "Build Workflow"

    def compute_data(self, view: DerivedView) -> pd.DataFrame:
        return self.dataset.stages_frame()

    def render(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No workflow stages configured")

        fig = px.bar(
            data,
            x="Time_Days",
            y="Stage",
            orientation="h",
            text="Time_Days",
        )
        # Keep dataset order top-to-bottom
        fig.update_yaxes(categoryorder="array", categoryarray=list(data["Stage"])[::-1])
        fig.update_traces(texttemplate="%{text:.0f} d", textposition="outside")
        fig.update_layout(
            height=350,
            margin=dict(l=40, r=40, t=60, b=40),
            title=f"Build workflow ({data['Time_Days'].sum():.0f} days total)",
            xaxis_title="Time (days)",
            yaxis_title=None,
        )
        return fig
