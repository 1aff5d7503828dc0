from __future__ import annotations

import pytest

from statue_dashboard.core.base_view import BaseView
from statue_dashboard.core.dataset import Dataset
from statue_dashboard.core.view_registry import ViewRegistry
from statue_dashboard.views import CostChartView, MaterialTableView


class _CountingView(BaseView):
    id = "counting"
    label = "Counting"

    def compute_data(self, view):
        return len(view)

    def render(self, data):
        return f"{data} rows"


def test_register_and_create():
    registry = ViewRegistry()
    registry.register(CostChartView)
    registry.register(MaterialTableView)

    ds = Dataset.from_static()
    view = registry.create("cost_chart", ds)

    assert isinstance(view, CostChartView)
    assert view.dataset is ds
    assert registry.all_classes() == [CostChartView, MaterialTableView]


def test_duplicate_id_rejected():
    registry = ViewRegistry()
    registry.register(CostChartView)
    with pytest.raises(ValueError):
        registry.register(CostChartView)


def test_non_view_rejected():
    registry = ViewRegistry()
    with pytest.raises(TypeError):
        registry.register(object)


def test_unknown_view_id():
    with pytest.raises(KeyError):
        ViewRegistry().create("nope", Dataset.from_static())


def test_view_is_a_controller_consumer():
    ds = Dataset.from_static()
    view = _CountingView(ds)
    assert view.output is None

    view(ds.subset(["Copper", "Steel"]))
    assert view.output == "2 rows"
