from __future__ import annotations

import logging

from streaming_assets.logging_setup import LOG_LEVEL_ENV_VAR, _parse_level, setup_logging


def test_parse_level() -> None:
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level(" warn ") == logging.WARNING
    assert _parse_level("") is None
    assert _parse_level("nonsense") is None


def test_setup_logging_env_wins(monkeypatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "ERROR")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        setup_logging("debug")
        assert root.level == logging.ERROR
        assert root.handlers
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_keeps_existing_handlers() -> None:
    root = logging.getLogger()
    marker = logging.NullHandler()
    saved_level = root.level
    root.addHandler(marker)
    try:
        setup_logging("debug")
        assert root.level == saved_level
        assert marker in root.handlers
    finally:
        root.removeHandler(marker)
