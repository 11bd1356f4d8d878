from .loader import AssetLoader, build_loader
from .logging_setup import setup_logging
from .platform import detect_platform, is_restricted
from .sources import AssetFetchError, AssetSource, FetchSource, FilesystemSource, select_source

__all__ = [
    "AssetLoader",
    "build_loader",
    "setup_logging",
    "detect_platform",
    "is_restricted",
    "AssetFetchError",
    "AssetSource",
    "FetchSource",
    "FilesystemSource",
    "select_source",
]
