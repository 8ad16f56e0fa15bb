"""Persist filter/view preferences in a local key-value file."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from ..models.filters import DEFAULT_FILTER_STATE, FilterState
from ..models.view import ViewOption, view_by_label
from ..utils.logging import get_logger

LOGGER = get_logger("services.preferences")

SETTINGS_KEY = "real-estate-chaos-map/settings"
PREFS_PATH = os.getenv(
    "CHAOSMAP_PREFS_PATH",
    os.path.join(os.path.expanduser("~"), ".chaosmap", "preferences.json"),
)

# Persisted keys share their FilterState field names; each is validated on its own.
_SCALAR_FIELDS = (
    "show_region_a",
    "show_region_b",
    "show_contracted",
    "show_on_market",
    "transaction_modes",
    "land_area_min",
    "land_area_max",
    "use_relative_size",
    "relative_size_metric",
)


class PreferencesStore:
    """Durable string key-value store backed by a single JSON file.

    Reads and writes are synchronous. Failures are logged and swallowed so the
    in-memory state stays authoritative for the session.
    """

    def __init__(self, path: Union[str, Path, None] = None) -> None:
        self.path = Path(path or PREFS_PATH)

    def get_item(self, key: str) -> Optional[str]:
        data = self._read()
        value = data.get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def _write(self, data: Dict[str, Any]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as outfile:
                json.dump(data, outfile, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            LOGGER.warning("preferences_write_failed path=%s error=%s", self.path, exc)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as infile:
                data = json.load(infile)
        except (OSError, ValueError) as exc:
            LOGGER.warning("preferences_read_failed path=%s error=%s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("preferences_read_failed path=%s error=not_an_object", self.path)
            return {}
        return data


def serialize_settings(state: FilterState) -> Dict[str, Any]:
    return {
        "selected_view": state.view.label,
        "show_region_a": state.show_region_a,
        "show_region_b": state.show_region_b,
        "show_contracted": state.show_contracted,
        "show_on_market": state.show_on_market,
        "transaction_modes": sorted(state.transaction_modes),
        "land_area_min": state.land_area_min,
        "land_area_max": state.land_area_max,
        "use_relative_size": state.use_relative_size,
        "relative_size_metric": state.relative_size_metric.value,
    }


def _parse_view(value: Any) -> Optional[ViewOption]:
    # Older blobs stored the whole view object rather than its label.
    if isinstance(value, Mapping):
        value = value.get("label")
    if not isinstance(value, str):
        return None
    return view_by_label(value)


def parse_settings(raw: Any) -> FilterState:
    """Build a fully populated FilterState from a settings blob.

    Each field falls back to its default independently when it is absent,
    null or invalid; unknown keys are ignored.
    """

    if not isinstance(raw, Mapping):
        return DEFAULT_FILTER_STATE

    accepted: Dict[str, Any] = {}
    view = _parse_view(raw.get("selected_view"))
    if view is not None:
        accepted["view"] = view
    elif raw.get("selected_view") is not None:
        LOGGER.info("preferences_field_ignored field=selected_view")

    for name in _SCALAR_FIELDS:
        value = raw.get(name)
        if value is None:
            continue
        try:
            # Strict JSON mode: "no" is not a bool and "5" is not a float.
            FilterState.model_validate_json(json.dumps({name: value}), strict=True)
        except ValidationError:
            LOGGER.info("preferences_field_ignored field=%s", name)
            continue
        accepted[name] = value

    return FilterState.model_validate(accepted)


def load_filter_state(store: PreferencesStore) -> FilterState:
    text = store.get_item(SETTINGS_KEY)
    if text is None:
        return DEFAULT_FILTER_STATE
    try:
        raw = json.loads(text)
    except ValueError:
        LOGGER.warning("preferences_decode_failed key=%s", SETTINGS_KEY)
        return DEFAULT_FILTER_STATE
    return parse_settings(raw)


def save_filter_state(store: PreferencesStore, state: FilterState) -> None:
    store.set_item(SETTINGS_KEY, json.dumps(serialize_settings(state), ensure_ascii=False))
    LOGGER.debug("preferences_saved key=%s", SETTINGS_KEY)


__all__ = [
    "PREFS_PATH",
    "PreferencesStore",
    "SETTINGS_KEY",
    "load_filter_state",
    "parse_settings",
    "save_filter_state",
    "serialize_settings",
]
