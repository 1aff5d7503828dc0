"""
Top-level package for the statue rebuild cost dashboard.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    statue_dashboard.core
    statue_dashboard.views
    statue_dashboard.ui
"""

__all__: list[str] = []
