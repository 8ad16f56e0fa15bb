"""IO helpers for loading the listing CSV into pandas."""

from __future__ import annotations

import os
from functools import lru_cache

import pandas as pd

from .logging import get_logger

LOGGER = get_logger("utils.io")

DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "data"))


def resolve_path(name: str) -> str:
    return name if os.path.isabs(name) else os.path.join(DATA_DIR, name)


@lru_cache(maxsize=8)
def load_csv(name: str) -> pd.DataFrame:
    """Load a CSV by filename from the data directory.

    Every column is read as text so that the mappers decide how to coerce
    values; blank cells come back as NaN.
    """

    path = resolve_path(name)
    if not os.path.exists(path):
        raise FileNotFoundError(f"CSV not found: {path}")
    LOGGER.debug("loading_csv path=%s", path)
    return pd.read_csv(path, dtype=str, encoding="utf-8")


__all__ = ["load_csv", "resolve_path", "DATA_DIR"]
