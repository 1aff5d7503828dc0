from __future__ import annotations

from statue_dashboard.core.filter_state import FilterState


def test_filter_state_to_from_dict_roundtrip():
    st = FilterState(dataset_name="ds1", categories=["Copper", "Labor"])

    raw = st.to_dict()
    rebuilt = FilterState.from_dict(raw)

    assert raw == {"dataset_name": "ds1", "categories": ["Copper", "Labor"]}
    assert rebuilt == st


def test_filter_state_from_missing_data():
    st = FilterState.from_dict(None)
    assert st.dataset_name == ""
    assert st.categories == []


def test_filter_state_from_dict_drops_nulls_and_stringifies():
    st = FilterState.from_dict({"dataset_name": "ds1", "categories": ["Steel", None, 7]})
    assert st.categories == ["Steel", "7"]


def test_initial_state_selects_everything():
    st = FilterState.initial("ds1", ("A", "B"))
    assert st.categories == ["A", "B"]
