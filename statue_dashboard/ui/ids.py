from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        # Filters
        CATEGORY_CHECKLIST = "category-checklist"
        SELECT_ALL_BTN = "select-all-btn"
        CLEAR_BTN = "clear-btn"

        # Charts + table
        COST_GRAPH = "cost-graph"
        WORKFLOW_GRAPH = "workflow-graph"
        MATERIAL_TABLE = "material-table"
        SUMMARY_TEXT = "summary-text"

        # Downloads
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"
