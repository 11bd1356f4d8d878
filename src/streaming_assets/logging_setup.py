from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV_VAR = "STREAMING_ASSETS_LOG_LEVEL"


def _parse_level(s: Optional[str]) -> Optional[int]:
    if not s:
        return None
    v = str(s).strip().upper()
    if not v:
        return None
    mapping = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    return mapping.get(v)


def setup_logging(level: Optional[str] = None, *, name: str = "streaming_assets") -> None:
    """Configure python logging once.

    Priority (highest first):
    - env STREAMING_ASSETS_LOG_LEVEL
    - `level` argument (e.g. settings["logging"]["level"])
    - default: INFO

    A host that already installed root handlers keeps its own setup.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    lvl = _parse_level(level)
    env_level = _parse_level(os.environ.get(LOG_LEVEL_ENV_VAR))
    if env_level is not None:
        lvl = env_level
    if lvl is None:
        lvl = logging.INFO

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%H:%M:%S"

    logging.basicConfig(level=lvl, format=fmt, datefmt=datefmt)

    logging.getLogger(name).debug("logging initialized (level=%s)", logging.getLevelName(lvl))
