from __future__ import annotations

import os
import sys
from typing import Optional

PLATFORM_ENV_VAR = "STREAMING_ASSETS_PLATFORM"

ANDROID = "android"
IOS = "ios"

# Bundled assets on these platforms sit inside the app archive.
RESTRICTED_PLATFORMS = frozenset({ANDROID, IOS})

_ALIASES = {
    "iphone": IOS,
    "iphoneplayer": IOS,
}


def normalize_platform(name: str) -> str:
    v = str(name or "").strip().lower()
    return _ALIASES.get(v, v)


def detect_platform(env: Optional[dict] = None) -> str:
    """Platform name of the running interpreter.

    The env override wins; otherwise sys.platform, which CPython reports as
    "android" / "ios" on those targets.
    """
    env = os.environ if env is None else env
    override = env.get(PLATFORM_ENV_VAR)
    if override and override.strip():
        return normalize_platform(override)
    return normalize_platform(sys.platform)


def is_restricted(platform: str) -> bool:
    return normalize_platform(platform) in RESTRICTED_PLATFORMS
