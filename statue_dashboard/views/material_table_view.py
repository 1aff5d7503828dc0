from __future__ import annotations

from typing import Any, Dict, List

from dash.dash_table import FormatTemplate

from statue_dashboard.core.base_view import BaseView
from statue_dashboard.core.records import (
    CATEGORY,
    COST_1886,
    COST_TODAY,
    MATERIAL_COLUMNS,
    WEIGHT_TONS,
    DerivedView,
)

# Display-only: the table shows these as money, the stored values stay raw numbers
CURRENCY_COLUMNS = (COST_1886, COST_TODAY)

COLUMN_TITLES = {
    CATEGORY: "Category",
    WEIGHT_TONS: "Weight (tons)",
    COST_1886: "Cost in 1886",
    COST_TODAY: "Cost Today",
}


class MaterialTableView(BaseView):
    """
    Payload for a dash_table.DataTable: row records plus column specs.
    """

    id = "material_table"
    label = "Materials"

    def compute_data(self, view: DerivedView) -> List[Dict[str, Any]]:
        return [rec.to_row() for rec in view]

    def render(self, data: List[Dict[str, Any]]) -> Dict[str, Any]:
        return {"data": data, "columns": self.columns()}

    @staticmethod
    def columns() -> List[Dict[str, Any]]:
        cols: List[Dict[str, Any]] = []
        for col in MATERIAL_COLUMNS:
            spec: Dict[str, Any] = {"name": COLUMN_TITLES[col], "id": col}
            if col in CURRENCY_COLUMNS:
                spec["type"] = "numeric"
                spec["format"] = FormatTemplate.money(0)
            elif col == WEIGHT_TONS:
                spec["type"] = "numeric"
            cols.append(spec)
        return cols
