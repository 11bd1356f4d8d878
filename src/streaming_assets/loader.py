from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from streaming_assets.platform import detect_platform
from streaming_assets.sources.base import AssetSource
from streaming_assets.sources.registry import build_source, select_source


class AssetLoader:
    """
    Stateless front for reading bundled assets.

    Results:
      load_string            -> str   | None
      load_bytes             -> bytes | None
      list_files_recursive   -> list[str] | None

    None only comes from the fetch-based source (not found / transport error,
    already logged). The filesystem source lets OSError reach the caller.

    Use as a context manager (or call close()) to release the HTTP session a
    fetch-based source opened for itself.
    """

    def __init__(self, source: AssetSource) -> None:
        self.source = source

    def __enter__(self) -> "AssetLoader":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.source.close()

    @classmethod
    def for_platform(
        cls,
        base: str | Path,
        platform: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        timeout_sec: Optional[float] = None,
    ) -> "AssetLoader":
        if platform is None:
            platform = detect_platform()
        return cls(select_source(base, platform, session=session, timeout_sec=timeout_sec))

    def load_string(self, file_path: str) -> Optional[str]:
        return self.source.read_text(file_path)

    def load_bytes(self, file_path: str) -> Optional[bytes]:
        return self.source.read_bytes(file_path)

    def list_files_recursive(self, folder_path: str, search_pattern: str = "*.*") -> Optional[List[str]]:
        return self.source.list_files_recursive(folder_path, search_pattern)


def build_loader(settings: Dict[str, Any], *, session: Optional[requests.Session] = None) -> AssetLoader:
    """Wire a loader from normalized settings.

    Logging is left to the host: call logging_setup.setup_logging(settings["logging"]["level"])
    from the application entry point if wanted.
    """
    return AssetLoader(build_source(settings, session=session))
