from __future__ import annotations

import fnmatch
from abc import ABC, abstractmethod
from typing import List, Optional

# .NET-style "all files" patterns; both must also match names without a dot.
MATCH_ALL_PATTERNS = ("*", "*.*")


def join_relative(folder: str, name: str) -> str:
    """Join a relative folder and an entry name with POSIX separators."""
    folder = folder.replace("\\", "/").rstrip("/")
    if not folder:
        return name
    return f"{folder}/{name}"


def matches_pattern(name: str, pattern: str) -> bool:
    if pattern in MATCH_ALL_PATTERNS:
        return True
    return fnmatch.fnmatch(name, pattern)


class AssetSource(ABC):
    # Read-only access to bundled assets under a base location.

    @abstractmethod
    def read_text(self, path: str) -> Optional[str]: ...

    @abstractmethod
    def read_bytes(self, path: str) -> Optional[bytes]: ...

    @abstractmethod
    def list_files_recursive(self, folder: str, pattern: str = "*.*") -> Optional[List[str]]: ...

    def close(self) -> None:
        """Release transport resources; nothing to do for plain files."""
