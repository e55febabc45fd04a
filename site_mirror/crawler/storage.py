"""
Page persistence: one file per crawled URL under a per-host directory.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Union
from urllib.parse import unquote, urlsplit

from site_mirror.errors import PersistError

INDEX_NAME = "index"
SUFFIX = ".html"


def filename_for(url: str) -> str:
    """
    Map a URL to a flat file name: path segments joined with ``_``.

    ``https://site.com/foo/bar`` -> ``_foo_bar.html``; an empty or root path
    maps to ``index.html``. Query and fragment do not take part in the name.
    """
    path = unquote(urlsplit(url).path)
    name = path.replace("/", "_")
    if name in ("", "_"):
        name = INDEX_NAME
    return name + SUFFIX


class PageStore:
    """Writes raw page bodies to ``<root>/<host>/<filename>``."""

    def __init__(self, root: Union[str, Path], host: str) -> None:
        self.directory = Path(root) / host

    def path_for(self, url: str) -> Path:
        return self.directory / filename_for(url)

    async def save(self, url: str, body: bytes) -> Path:
        """Write *body* for *url*, creating directories first. Raises PersistError."""
        path = self.path_for(url)
        try:
            await asyncio.to_thread(self._write, path, body)
        except (OSError, ValueError) as exc:
            raise PersistError(url, path, exc) from exc
        return path

    @staticmethod
    def _write(path: Path, body: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(body)
