"""Namespaced loggers for the chaos map; messages are written as ``event key=value``."""

from __future__ import annotations

import logging
import os
from typing import Optional

ROOT_LOGGER = "chaosmap"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(namespace: str = ROOT_LOGGER) -> logging.Logger:
    """Attach one stream handler to ``namespace``; later calls reuse it."""

    logger = logging.getLogger(namespace)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
        logger.addHandler(handler)
        logger.propagate = False
        logger.setLevel(_LOG_LEVEL)
    return logger


def get_logger(child: Optional[str] = None) -> logging.Logger:
    base = configure_logging()
    return base.getChild(child) if child else base
