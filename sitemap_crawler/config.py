"""
Модуль для загрузки и валидации конфигурации SitemapCrawler.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

from sitemap_crawler.crawler.processor import DEFAULT_CONCURRENCY


class CrawlerConfig(BaseModel):
    """Конфигурация одного запуска обхода sitemap."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_concurrency: int = Field(
        DEFAULT_CONCURRENCY, ge=1, description="Макс. число одновременных запросов на один sitemap."
    )
    timeout: Optional[float] = Field(
        None, gt=0, description="Общий таймаут одного запроса (секунд); None — без таймаута."
    )
    user_agent: str = Field("SitemapCrawler/1.0", min_length=1, description="Заголовок User-Agent.")
    prune_failed: bool = Field(
        False, description="Удалять неудачные запросы из списка ожидающих."
    )


_DEFAULT_CFG = Path("configs/default.yaml")


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


def load_config(path: Union[str, Path, None] = None) -> CrawlerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlerConfig.
    Без пути использует configs/default.yaml, если он есть, иначе значения по умолчанию.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return CrawlerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return CrawlerConfig(**data)


def resolve_concurrency(value: Optional[str], default: int = DEFAULT_CONCURRENCY) -> int:
    """Число из флага --processors; пустое, нечисловое или < 1 значение даёт *default*."""
    if value is None or not value.strip():
        return default
    try:
        number = int(value.strip())
    except ValueError:
        return default
    return number if number >= 1 else default


__all__ = ["CrawlerConfig", "load_config", "resolve_concurrency"]
