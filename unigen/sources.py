"""Upstream source files: download once, then read from the local cache.

Files are cached by URL basename (.cache/emoji-test.txt, .cache/en.xml).
Delete the cache (`unigen cache --clear`) to pick up a new upstream release.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import httpx

from unigen.config import CACHE_DIR, HTTP_TIMEOUT

logger = logging.getLogger(__name__)

USER_AGENT = "unigen/0.1 (Unicode data compiler)"


class SourceFetchError(httpx.HTTPError):
    """Raised when a source URL can't be downloaded (transport error or non-200)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"cannot download {url!r}: {reason}")


def cache_path(url: str, cache_dir: Path = CACHE_DIR) -> Path:
    name = os.path.basename(urlparse(url).path)
    if not name:
        raise ValueError(f"URL has no file name: {url!r}")
    return cache_dir / name


def _write_atomic(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp", prefix=f".{path.name}_")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except Exception:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def fetch(
    url: str,
    cache_dir: Path = CACHE_DIR,
    client: Optional[httpx.Client] = None,
) -> str:
    """Return the text at url, downloading it into cache_dir on first use."""
    path = cache_path(url, cache_dir)
    if path.exists():
        logger.debug("Using cached %s", path)
        return path.read_text(encoding="utf-8")

    own_client = client is None
    if own_client:
        client = httpx.Client(
            timeout=HTTP_TIMEOUT,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )
    try:
        logger.info("Downloading %s", url)
        try:
            resp = client.get(url)
        except httpx.HTTPError as e:
            raise SourceFetchError(url, str(e)) from e
        if resp.status_code != 200:
            raise SourceFetchError(url, f"unexpected status code {resp.status_code}")
        data = resp.content
    finally:
        if own_client:
            client.close()

    _write_atomic(path, data)
    logger.info("Cached %s (%d bytes)", path, len(data))
    return data.decode("utf-8")


def load_source(location: str, cache_dir: Path = CACHE_DIR, client: Optional[httpx.Client] = None) -> str:
    """Read a local file, or fetch location if it looks like a URL."""
    if location.startswith(("http://", "https://")):
        return fetch(location, cache_dir=cache_dir, client=client)
    return Path(location).read_text(encoding="utf-8")


def clear_cache(cache_dir: Path = CACHE_DIR) -> int:
    """Delete cached source files. Returns count removed."""
    if not cache_dir.is_dir():
        return 0
    removed = 0
    for p in cache_dir.iterdir():
        if p.is_file():
            p.unlink()
            removed += 1
    if removed:
        logger.info("Cleared %d cached source files", removed)
    return removed
