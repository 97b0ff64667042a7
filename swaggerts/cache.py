"""On-disk cache of fetched schema documents.

One flat file per URL, named by stripping separator characters from the
URL. Entries never expire; deleting the directory is the only way to
refresh them.
"""

from __future__ import annotations

import enum
import re
from pathlib import Path

from .config import DEFAULT_CACHE_DIR

_KEY_STRIP = re.compile(r"[:/.\-?={}]+")


class CachePolicy(str, enum.Enum):
    NEVER_EXPIRES = "cache-never-expires"


def cache_key(url: str) -> str:
    """Derive the cache file name for a URL."""
    return _KEY_STRIP.sub("", url)


class JsonCache:
    """Write-if-absent store of raw response bodies keyed by URL."""

    policy = CachePolicy.NEVER_EXPIRES

    def __init__(self, directory: Path = DEFAULT_CACHE_DIR) -> None:
        self.directory = Path(directory)

    def path_for(self, url: str) -> Path:
        return self.directory / cache_key(url)

    def read(self, url: str) -> bytes | None:
        """Return the cached body for a URL, or None on a miss."""
        path = self.path_for(url)
        if not path.is_file():
            return None
        return path.read_bytes()

    def write(self, url: str, body: bytes) -> Path:
        """Store a raw body verbatim, creating the directory on first use."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(url)
        path.write_bytes(body)
        return path
