# src/streaming_assets/settings.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Set

import hashlib
import json

import yaml

SettingsDict = Dict[str, Any]


# =========================
# Public API
# =========================
def load_settings(path: str | Path) -> SettingsDict:
    """
    Load asset-loader YAML -> normalized nested dict settings.

    Guarantees:
    - defaults are applied (so required nested maps exist)
    - validation is executed (ValueError with clear messages)
    - runtime metadata is attached into settings["_meta"]
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError("config root must be a mapping (YAML dict)")

    s = apply_defaults(raw)
    validate_settings(s)

    s.setdefault("_meta", {})
    s["_meta"]["config_path"] = str(path)
    s["_meta"]["config_hash"] = hash_settings(s, exclude_keys={"_meta"})
    return s


def apply_defaults(raw: SettingsDict) -> SettingsDict:
    """
    Apply defaults, ensuring required nested objects exist.

    Supported top-level blocks:
      - assets.base / assets.platform
      - fetch.timeout_sec / fetch.user_agent
      - logging.level
    """
    s: SettingsDict = _deep_copy_dict(raw)

    # ---- assets ----
    s.setdefault("assets", {})
    _must_be_mapping(s["assets"], "assets")
    a = s["assets"]
    a.setdefault("base", "")
    a.setdefault("platform", "auto")  # auto | android | ios | <anything else -> filesystem>

    # ---- fetch ----
    s.setdefault("fetch", {})
    _must_be_mapping(s["fetch"], "fetch")
    fe = s["fetch"]
    fe.setdefault("timeout_sec", None)  # None -> block until the response arrives
    fe.setdefault("user_agent", "streaming-assets")

    # ---- logging ----
    s.setdefault("logging", {})
    _must_be_mapping(s["logging"], "logging")
    s["logging"].setdefault("level", "info")

    return s


def validate_settings(s: SettingsDict) -> None:
    """
    Validate normalized settings dict (after apply_defaults).
    Raises ValueError with explicit messages.

    fetch.timeout_sec is coerced to float in place.
    """
    a = s["assets"]
    _require_nonempty_str(a.get("base"), "assets.base")
    _require_nonempty_str(a.get("platform"), "assets.platform")

    fe = s["fetch"]
    if fe.get("timeout_sec") is not None:
        # requests needs a real number > 0 here; None is the only "no timeout"
        t = _as_float(fe.get("timeout_sec"), "fetch.timeout_sec")
        if not 0 < t < float("inf"):
            raise ValueError(f"fetch.timeout_sec must be > 0 or null, got {t}")
        fe["timeout_sec"] = t
    _require_nonempty_str(fe.get("user_agent"), "fetch.user_agent")

    _validate_enum(
        str(s["logging"].get("level")).lower(),
        {"critical", "error", "warning", "warn", "info", "debug", "notset"},
        "logging.level",
    )


def hash_settings(s: SettingsDict, *, exclude_keys: Optional[Set[str]] = None) -> str:
    """
    Stable hash for settings dict (used as config fingerprint).
    """
    exclude_keys = exclude_keys or set()
    filtered = {k: v for k, v in s.items() if k not in exclude_keys}
    blob = json.dumps(filtered, sort_keys=True, ensure_ascii=False).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()


# =========================
# Internal helpers
# =========================
def _deep_copy_dict(d: SettingsDict) -> SettingsDict:
    # yaml-safe types -> json roundtrip keeps it simple
    return json.loads(json.dumps(d, ensure_ascii=False))


def _must_be_mapping(v: Any, path: str) -> None:
    if not isinstance(v, dict):
        raise ValueError(f"{path} must be a mapping (YAML dict)")


def _require_nonempty_str(v: Any, path: str) -> str:
    vv = str(v or "")
    if not vv.strip():
        raise ValueError(f"{path} is required")
    return vv


def _validate_enum(v: str, allowed: Set[str], path: str) -> None:
    if v not in allowed:
        raise ValueError(f"{path} must be one of {sorted(allowed)}, got {v!r}")


def _as_float(v: Any, path: str, *, min_value: Optional[float] = None, max_value: Optional[float] = None) -> float:
    try:
        x = float(v)
    except Exception as e:
        raise ValueError(f"{path} must be float-like, got {v!r}") from e
    if min_value is not None and x < min_value:
        raise ValueError(f"{path} must be >= {min_value}, got {x}")
    if max_value is not None and x > max_value:
        raise ValueError(f"{path} must be <= {max_value}, got {x}")
    return x
