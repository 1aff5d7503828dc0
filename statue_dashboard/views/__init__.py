from .cost_chart_view import CostChartView
from .material_table_view import MaterialTableView
from .workflow_timeline_view import WorkflowTimelineView
from .cost_summary_view import CostSummaryView

__all__ = ["CostChartView", "MaterialTableView", "WorkflowTimelineView", "CostSummaryView"]
