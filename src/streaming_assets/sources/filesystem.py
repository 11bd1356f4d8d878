from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from streaming_assets.sources.base import AssetSource, join_relative, matches_pattern

logger = logging.getLogger(__name__)


class FilesystemSource(AssetSource):
    """Direct file access for platforms where bundled assets are plain files.

    Nothing is caught here: a missing file or folder surfaces as the usual
    OSError subclass.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def _p(self, path: str) -> Path:
        # plain join, no resolve(): symlinked bundles stay as laid out
        return self.root / path

    def read_text(self, path: str) -> str:
        logger.debug("reading text %s", path)
        # utf-8-sig drops a leading BOM and otherwise decodes as utf-8
        return self._p(path).read_text(encoding="utf-8-sig")

    def read_bytes(self, path: str) -> bytes:
        logger.debug("reading bytes %s", path)
        return self._p(path).read_bytes()

    def list_files_recursive(self, folder: str, pattern: str = "*.*") -> List[str]:
        base = self._p(folder)
        entries = sorted(base.iterdir(), key=lambda p: p.name)

        out: list[str] = []
        for p in entries:
            if p.is_file() and matches_pattern(p.name, pattern):
                out.append(join_relative(folder, p.name))

        for p in entries:
            if p.is_dir():
                out.extend(self.list_files_recursive(join_relative(folder, p.name), pattern))
        return out
