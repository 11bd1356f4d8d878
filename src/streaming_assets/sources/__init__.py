from .base import AssetSource
from .fetch import AssetFetchError, FetchSource
from .filesystem import FilesystemSource
from .registry import build_source, select_source

__all__ = [
    "AssetSource",
    "AssetFetchError",
    "FetchSource",
    "FilesystemSource",
    "build_source",
    "select_source",
]
