# File: site_mirror/errors.py
"""site_mirror.errors: Типы ошибок обхода.

Фатальна только ``SeedParseError``; остальные локальны для одной задачи и
попадают в лог и в отчёт.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

__all__ = ["CrawlError", "SeedParseError", "FetchError", "PersistError"]


class CrawlError(Exception):
    """Базовый класс ошибок SiteMirror."""


class SeedParseError(CrawlError, ValueError):
    """Стартовый URL не разбирается или не является абсолютным http(s) URL."""

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid seed URL {raw!r}: {reason}")


class FetchError(CrawlError):
    """Сетевая ошибка при загрузке одной страницы."""

    def __init__(self, url: str, reason: BaseException | str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {str(reason) or type(reason).__name__}")


class PersistError(CrawlError):
    """Не удалось записать загруженную страницу на диск."""

    def __init__(self, url: str, path: Optional[Path], reason: BaseException | str) -> None:
        self.url = url
        self.path = path
        self.reason = reason
        super().__init__(f"{url} -> {path}: {reason}")
