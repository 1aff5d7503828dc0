"""
Core domain layer: dataset abstraction, filter state, view controller,
view base class and the view registry
"""

from .dataset import Dataset
from .filter_state import FilterState
from .controller import ViewController
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = ["Dataset", "FilterState", "ViewController", "BaseView", "ViewRegistry"]
