from __future__ import annotations

import io

import pandas as pd
import pytest

from statue_dashboard.core.controller import ControllerState, ViewController
from statue_dashboard.core.dataset import Dataset
from statue_dashboard.core.exceptions import ReentrantUpdateError
from statue_dashboard.core.records import MaterialRecord

HEADER = "Category,Weight_Tons,Cost_1886,Cost_Today"


@pytest.fixture()
def controller() -> ViewController:
    return ViewController(Dataset.from_static())


def _lines(payload: bytes) -> list[str]:
    return payload.decode("utf-8").splitlines()


def test_initial_selection_is_every_category(controller: ViewController):
    view = controller.get_derived_view()
    assert view.categories == ["Copper", "Steel", "Labor", "Pedestal"]
    assert controller.state is ControllerState.IDLE


def test_filter_copper_and_steel():
    ctl = ViewController(Dataset.from_static())
    ctl.set_filter({"Copper", "Steel"})

    assert list(ctl.get_derived_view()) == [
        MaterialRecord("Copper", 31, 50000, 2500000),
        MaterialRecord("Steel", 125, 40000, 2000000),
    ]


def test_filter_keeps_dataset_order_not_selection_order(controller: ViewController):
    controller.set_filter(["Pedestal", "Copper"])
    assert controller.get_derived_view().categories == ["Copper", "Pedestal"]


def test_empty_filter_gives_empty_view_and_header_only_csv(controller: ViewController):
    controller.set_filter(set())

    assert list(controller.get_derived_view()) == []
    assert _lines(controller.export_csv()) == [HEADER]


def test_labor_has_no_weight_and_csv_leaves_it_blank(controller: ViewController):
    controller.set_filter({"Labor"})

    assert list(controller.get_derived_view()) == [
        MaterialRecord("Labor", None, 100000, 7500000),
    ]
    assert _lines(controller.export_csv()) == [HEADER, "Labor,,100000,7500000"]


def test_unknown_category_is_silently_ignored(controller: ViewController):
    controller.set_filter({"Unknown"})
    assert list(controller.get_derived_view()) == []

    controller.set_filter({"Unknown", "Steel"})
    assert controller.get_derived_view().categories == ["Steel"]


@pytest.mark.parametrize(
    "selection",
    [set(), {"Copper"}, {"Copper", "Labor"}, {"Steel", "Pedestal", "Nope"}],
)
def test_view_matches_selection_exactly(controller: ViewController, selection):
    controller.set_filter(selection)
    expected = [r for r in controller.dataset.materials if r.category in selection]

    assert list(controller.get_derived_view()) == expected
    assert len(_lines(controller.export_csv())) == len(expected) + 1


def test_set_filter_is_idempotent(controller: ViewController):
    controller.set_filter({"Copper", "Labor"})
    once = controller.get_derived_view()
    controller.set_filter({"Copper", "Labor"})

    assert controller.get_derived_view() == once


def test_csv_parses_back_to_the_view(controller: ViewController):
    controller.set_filter({"Copper", "Labor", "Pedestal"})
    parsed = pd.read_csv(io.BytesIO(controller.export_csv()))

    view = controller.get_derived_view()
    assert list(parsed.columns) == ["Category", "Weight_Tons", "Cost_1886", "Cost_Today"]
    assert list(parsed["Category"]) == view.categories
    assert list(parsed["Cost_1886"]) == [r.cost_1886 for r in view]
    assert list(parsed["Cost_Today"]) == [r.cost_today for r in view]
    assert parsed.loc[1, "Weight_Tons"] != parsed.loc[1, "Weight_Tons"]  # NaN for Labor
    assert parsed.loc[0, "Weight_Tons"] == 31


def test_consumers_are_notified_once_with_the_committed_view(controller: ViewController):
    seen = []

    def consumer(view):
        # The controller has already committed the view it is delivering
        assert controller.get_derived_view() is view
        assert controller.state is ControllerState.RECOMPUTING
        seen.append(view.categories)

    controller.subscribe(consumer)
    controller.set_filter({"Steel"})

    assert seen == [["Steel"]]
    assert controller.state is ControllerState.IDLE


def test_consumers_run_in_subscription_order(controller: ViewController):
    calls = []
    controller.subscribe(lambda v: calls.append("chart"))
    controller.subscribe(lambda v: calls.append("table"))
    controller.subscribe(lambda v: calls.append("export"))

    controller.set_filter({"Copper"})
    assert calls == ["chart", "table", "export"]


def test_unsubscribe_stops_notifications(controller: ViewController):
    calls = []
    unsubscribe = controller.subscribe(lambda v: calls.append(len(v)))

    controller.set_filter({"Copper"})
    unsubscribe()
    unsubscribe()  # second call is a no-op
    controller.set_filter({"Copper", "Steel"})

    assert calls == [1]


def test_subscribing_does_not_trigger_a_call(controller: ViewController):
    calls = []
    controller.subscribe(lambda v: calls.append(v))
    assert calls == []


def test_reentrant_set_filter_is_rejected(controller: ViewController):
    def greedy(_view):
        controller.set_filter({"Labor"})

    controller.subscribe(greedy)

    with pytest.raises(ReentrantUpdateError):
        controller.set_filter({"Copper"})

    # The outer update still went through and the controller is usable again
    assert controller.get_derived_view().categories == ["Copper"]
    assert controller.state is ControllerState.IDLE


def test_consumer_error_propagates_after_commit(controller: ViewController):
    def broken(_view):
        raise RuntimeError("boom")

    controller.subscribe(broken)

    with pytest.raises(RuntimeError):
        controller.set_filter({"Steel"})

    assert controller.get_derived_view().categories == ["Steel"]
    assert controller.state is ControllerState.IDLE


def test_explicit_initial_selection():
    ctl = ViewController(Dataset.from_static(), ["Labor"])
    assert ctl.selection == frozenset({"Labor"})
    assert ctl.get_derived_view().categories == ["Labor"]


def test_export_filename_uses_prefix_and_iso_date():
    from datetime import date

    ctl = ViewController(Dataset.from_static())
    assert ctl.export_filename(date(2024, 7, 4)) == "statue_rebuild_data_2024-07-04.csv"

    custom = ViewController(Dataset.from_static(), export_prefix="liberty")
    assert custom.export_filename(date(1886, 10, 28)) == "liberty_1886-10-28.csv"
