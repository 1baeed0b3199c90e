"""Content-addressed on-disk cache for downloaded documents.

Entries are named ``{sha256(url)}.{ext}`` and live in one shared directory
under the OS temp root. There is no manifest, no size cap and no expiry;
cleanup is left to whoever owns the temp directory.

Writes go to a dot-prefixed temporary name first and are renamed into place,
so a lookup never sees a partially written entry.
"""

import hashlib
import tempfile
import uuid
from dataclasses import dataclass
from pathlib import Path

import aiofiles
import aiofiles.os

from paddleocr_mcp.logging.logger import Log

CACHE_DIR_NAME = "paddle-ocr-download-cache"


def default_cache_dir() -> Path:
    return Path(tempfile.gettempdir()) / CACHE_DIR_NAME


def cache_key(url: str) -> str:
    """Hex SHA-256 of the source URL."""
    return hashlib.sha256(url.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class CachedFile:
    file_name: str
    data: bytes

    @property
    def extension(self) -> str:
        return Path(self.file_name).suffix.lower()


class DownloadCache:
    """Write-once, read-many file cache keyed by URL hash."""

    def __init__(self, cache_dir: Path | None = None) -> None:
        self._cache_dir = cache_dir if cache_dir is not None else default_cache_dir()

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    async def lookup(self, url: str) -> CachedFile | None:
        """Return the cached entry for ``url``, or None on a miss."""
        key = cache_key(url)
        await self._ensure_dir()
        for name in await aiofiles.os.listdir(self._cache_dir):
            if not name.startswith(key) or name.endswith(".tmp"):
                continue
            async with aiofiles.open(self._cache_dir / name, "rb") as f:
                data = await f.read()
            Log.debug(f"Cache hit for {url}: {name}")
            return CachedFile(file_name=name, data=data)
        Log.debug(f"Cache miss for {url}")
        return None

    async def store(self, url: str, extension: str, data: bytes) -> str:
        """Persist ``data`` for ``url`` and return the cache file name."""
        await self._ensure_dir()
        file_name = f"{cache_key(url)}.{extension}"
        tmp_path = self._cache_dir / f".{file_name}.{uuid.uuid4().hex}.tmp"
        try:
            async with aiofiles.open(tmp_path, "wb") as f:
                await f.write(data)
            await aiofiles.os.replace(tmp_path, self._cache_dir / file_name)
        except OSError:
            if await aiofiles.os.path.exists(tmp_path):
                await aiofiles.os.remove(tmp_path)
            raise
        Log.debug(f"Cached {len(data)} bytes for {url} as {file_name}")
        return file_name

    async def _ensure_dir(self) -> None:
        await aiofiles.os.makedirs(self._cache_dir, exist_ok=True)
