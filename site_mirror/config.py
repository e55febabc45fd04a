# === FILE: site_mirror/config.py ===
"""
Модуль для загрузки и валидации конфигурации обхода SiteMirror.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from site_mirror.crawler.urls import parse_seed


class CrawlerConfig(BaseModel):
    """Конфигурация одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="Стартовый URL обхода.")
    max_depth: int = Field(2, ge=0, description="Максимальная глубина обхода ссылок.")
    max_concurrency: int = Field(10, ge=1, description="Максимум одновременных загрузок.")
    output_dir: Path = Field(Path("crawl_output"), description="Корневая папка для страниц.")
    timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("SiteMirrorBot/1.0", min_length=1, description="Заголовок User-Agent.")
    permit_scope: Literal["fetch", "task"] = Field(
        "fetch",
        description="Сколько держать разрешение: только загрузку или всю задачу.",
    )

    @field_validator("base_url")
    @classmethod
    def _check_seed(cls, v: str) -> str:
        # SeedParseError наследует ValueError, pydantic превратит её в ValidationError
        parse_seed(v)
        return v.strip()


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Читает YAML или JSON и возвращает сырой словарь настроек."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Optional[Any]) -> CrawlerConfig:
    """
    Собирает и проверяет CrawlerConfig.

    Значения из файла (если path задан) перекрываются аргументами ``overrides``;
    аргументы со значением None игнорируются, так что опции CLI можно
    передавать как есть.
    """
    data = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)
