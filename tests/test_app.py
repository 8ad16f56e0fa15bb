import json
from pathlib import Path

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from chaosmap.models.view import VIEW_OPTIONS
from chaosmap.services import preferences
from chaosmap.services.preferences import SETTINGS_KEY, PreferencesStore

APP_PATH = Path(__file__).resolve().parents[1] / "app" / "main.py"


@pytest.fixture
def store(tmp_path, monkeypatch):
    path = tmp_path / "preferences.json"
    monkeypatch.setattr(preferences, "PREFS_PATH", str(path))
    st.cache_resource.clear()
    yield PreferencesStore(path)
    st.cache_resource.clear()


def _run_app() -> AppTest:
    app = AppTest.from_file(str(APP_PATH), default_timeout=30)
    app.run()
    assert not app.exception
    return app


def _stored(store: PreferencesStore) -> dict:
    return json.loads(store.get_item(SETTINGS_KEY))


def test_widgets_start_from_stored_preferences(store):
    store.set_item(
        SETTINGS_KEY,
        json.dumps(
            {
                "selected_view": VIEW_OPTIONS[2].label,
                "show_region_b": False,
                "transaction_modes": ["exclusive"],
                "land_area_min": 50,
                "land_area_max": 300,
                "use_relative_size": True,
                "relative_size_metric": "land_area",
            }
        ),
    )
    app = _run_app()

    assert app.selectbox(key="flt_view").value == VIEW_OPTIONS[2].label
    assert app.checkbox(key="flt_region_a").value is True
    assert app.checkbox(key="flt_region_b").value is False
    assert app.checkbox(key="flt_on_market").value is True
    assert app.multiselect(key="flt_transaction_modes").value == ["exclusive"]
    assert app.slider(key="flt_land_area").value == (50.0, 300.0)
    assert app.checkbox(key="flt_use_relative_size").value is True
    assert app.selectbox(key="flt_relative_size_metric").value == "land_area"


def test_every_change_is_saved(store):
    app = _run_app()
    assert store.get_item(SETTINGS_KEY) is None

    app.checkbox(key="flt_on_market").uncheck().run()
    assert not app.exception
    blob = _stored(store)
    assert blob["show_on_market"] is False
    assert blob["selected_view"] == VIEW_OPTIONS[0].label

    app.selectbox(key="flt_view").select(VIEW_OPTIONS[4].label).run()
    blob = _stored(store)
    assert blob["selected_view"] == VIEW_OPTIONS[4].label
    assert blob["show_on_market"] is False


def test_reversed_land_area_bounds_are_ordered(store):
    store.set_item(SETTINGS_KEY, json.dumps({"land_area_min": 300, "land_area_max": 50}))
    app = _run_app()

    assert app.slider(key="flt_land_area").value == (50.0, 300.0)
    blob = _stored(store)
    assert (blob["land_area_min"], blob["land_area_max"]) == (50.0, 300.0)


def test_stored_maximum_above_default_widens_slider(store):
    store.set_item(SETTINGS_KEY, json.dumps({"land_area_max": 600}))
    app = _run_app()

    slider = app.slider(key="flt_land_area")
    assert slider.value == (0.0, 600.0)
    assert slider.max == 600.0


def test_details_button_opens_and_closes_the_panel(store):
    app = _run_app()

    app.button(key="select-2").click().run()
    assert not app.exception
    assert any("(No. 2)" in block.value for block in app.markdown)
    assert len(app.dataframe) == 1

    app.button(key="close-detail").click().run()
    assert not app.exception
    assert len(app.dataframe) == 0
