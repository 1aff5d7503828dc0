from __future__ import annotations

from typing import Any, Dict

from statue_dashboard.core.base_view import BaseView
from statue_dashboard.core.records import DerivedView


class CostSummaryView(BaseView):
    """Totals over the visible records, shown above the chart."""

    id = "cost_summary"
    label = "Summary"

    def compute_data(self, view: DerivedView) -> Dict[str, Any]:
        total_1886 = sum(r.cost_1886 for r in view)
        total_today = sum(r.cost_today for r in view)
        return {
            "n_records": len(view),
            "total_1886": total_1886,
            "total_today": total_today,
            # No meaningful multiple when nothing (or only free items) is visible
            "multiple": (total_today / total_1886) if total_1886 else None,
        }

    def render(self, data: Dict[str, Any]) -> str:
        n = data["n_records"]
        if n == 0:
            return "No categories selected."

        text = (
            f"{n} categor{'ies' if n != 1 else 'y'} · "
            f"1886: ${data['total_1886']:,.0f} · "
            f"Today: ${data['total_today']:,.0f}"
        )
        if data["multiple"] is not None:
            text += f" · {data['multiple']:.1f}x"
        return text
