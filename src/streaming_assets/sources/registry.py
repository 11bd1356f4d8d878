from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import requests

from streaming_assets.platform import detect_platform, is_restricted
from streaming_assets.sources.base import AssetSource
from streaming_assets.sources.fetch import DEFAULT_USER_AGENT, FetchSource
from streaming_assets.sources.filesystem import FilesystemSource


def select_source(
    base: str | Path,
    platform: str,
    *,
    session: Optional[requests.Session] = None,
    timeout_sec: Optional[float] = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> AssetSource:
    """Pick the access strategy for `platform`.

    Restricted platforms (android / ios) get a FetchSource over `base` as a
    URI prefix; everything else reads `base` as a directory.
    """
    if is_restricted(platform):
        return FetchSource(str(base), session=session, timeout_sec=timeout_sec, user_agent=user_agent)
    return FilesystemSource(Path(base))


def build_source(cfg: Dict[str, Any], *, session: Optional[requests.Session] = None) -> AssetSource:
    """Build the asset source from normalized settings.

    Example:
      assets:
        base: StreamingAssets
        platform: auto
    """
    assets_cfg = cfg.get("assets")
    if not isinstance(assets_cfg, dict):
        raise ValueError("cfg['assets'] must be a dict")
    base = assets_cfg.get("base")
    if not base:
        raise ValueError("assets.base is required")

    platform = str(assets_cfg.get("platform") or "auto")
    if platform == "auto":
        platform = detect_platform()

    fetch_cfg = cfg.get("fetch") or {}
    return select_source(
        base,
        platform,
        session=session,
        timeout_sec=fetch_cfg.get("timeout_sec"),
        user_agent=str(fetch_cfg.get("user_agent") or DEFAULT_USER_AGENT),
    )
