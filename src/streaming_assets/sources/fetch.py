from __future__ import annotations

import logging
from typing import List, Optional

import requests

from streaming_assets.sources.base import AssetSource, join_relative, matches_pattern

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "streaming-assets"


class AssetFetchError(RuntimeError):
    """A fetch ended in a transport error or a not-found/error status."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(reason)
        self.path = path
        self.reason = reason


class FetchSource(AssetSource):
    """Request-based access for platforms where assets live inside the app archive.

    Every call blocks until the response has been fully read. There is no
    retry; `timeout_sec=None` waits forever, like the platform loaders this
    stands in for.

    Failures are logged and reported as None. Listing expects the folder URI
    to answer with one entry per line, subfolders marked by a trailing "/".
    Entries that are not a single plain name (".", "..", "a/b", "/") are skipped.

    A session created here is owned by the source and closed by close();
    a session passed in is left to the caller.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout_sec: Optional[float] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        if timeout_sec is not None:
            timeout_sec = float(timeout_sec)
            if not 0 < timeout_sec < float("inf"):
                raise ValueError(f"timeout_sec must be > 0 or None, got {timeout_sec}")
        self.base_url = base_url
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout_sec
        self.ua = user_agent

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def url_for(self, path: str) -> str:
        if not path:
            return self.base_url
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _get(self, path: str) -> bytes:
        url = self.url_for(path)
        logger.debug("GET %s", url)
        try:
            r = self.session.get(url, timeout=self.timeout, headers={"User-Agent": self.ua})
            r.raise_for_status()
        except requests.RequestException as e:
            raise AssetFetchError(path, str(e)) from e
        return r.content

    def read_text(self, path: str) -> Optional[str]:
        try:
            data = self._get(path)
        except AssetFetchError as e:
            logger.error("Failed to load file %s: %s", path, e.reason)
            return None
        return data.decode("utf-8-sig")

    def read_bytes(self, path: str) -> Optional[bytes]:
        try:
            return self._get(path)
        except AssetFetchError as e:
            logger.error("Failed to load file %s: %s", path, e.reason)
            return None

    def list_files_recursive(self, folder: str, pattern: str = "*.*") -> Optional[List[str]]:
        try:
            return self._list(folder, pattern)
        except AssetFetchError as e:
            # no partial results once any level fails
            logger.error("Failed to list files in folder %s: %s", e.path, e.reason)
            return None

    def _list(self, folder: str, pattern: str) -> List[str]:
        listing = self._get(folder).decode("utf-8-sig")
        entries = [e.strip() for e in listing.splitlines()]

        files: list[str] = []
        subfolders: list[str] = []
        for entry in entries:
            if not entry:
                continue
            is_folder = entry.endswith("/")
            name = entry[:-1] if is_folder else entry
            if not _is_plain_name(name):
                logger.debug("skipping listing entry %r in %s", entry, folder or "<root>")
                continue
            if is_folder:
                subfolders.append(name)
            elif matches_pattern(entry, pattern):
                files.append(join_relative(folder, entry))

        out = files
        for name in subfolders:
            out.extend(self._list(join_relative(folder, name), pattern))
        return out


def _is_plain_name(name: str) -> bool:
    # one path segment; "." / ".." would loop or escape the folder
    return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name
