# === FILE: site_mirror/logger.py ===
"""Логирование проекта **SiteMirror**.

Все компоненты пишут в общий логгер :data:`LOGGER_NAME` или в его потомков
(``SiteMirror.crawler`` и т.п.), поэтому одна настройка уровня и обработчиков
действует на весь обход::

      from site_mirror.logger import get_logger
      log = get_logger("crawler")
      log.info("Crawl started")

По умолчанию вывод идёт только в stdout; файл с ротацией подключается через
:func:`configure` (CLI-опция ``--log-file``).
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

LOGGER_NAME: Final[str] = "SiteMirror"
_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_MAX_BYTES: Final[int] = 5 * 1024 * 1024
_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def _make_handler(fmt: str, log_file: Optional[Union[str, Path]] = None) -> logging.Handler:
    if log_file is None:
        # sys.stdout читается при каждой настройке: CliRunner и pytest подменяют его
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
    else:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUPS,
            encoding="utf-8",
        )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Настроить корневой логгер проекта и вернуть его.

    :param level: уровень логирования, числом или строкой (``"DEBUG"``)
    :param log_file: дополнительно писать в файл с ротацией (5 МБ, 3 архива)
    :param log_format: строка формата для :class:`logging.Formatter`
    :param replace_handlers: закрыть и снять прежние обработчики
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    lg.addHandler(_make_handler(log_format))
    if log_file is not None:
        lg.addHandler(_make_handler(log_format, log_file))

    lg.propagate = False
    return lg


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """Логгер компонента: ``get_logger("crawler")`` -> ``SiteMirror.crawler``."""
    if not component:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


logger: logging.Logger = configure()

__all__ = ["logger", "configure", "get_logger", "LOGGER_NAME"]
