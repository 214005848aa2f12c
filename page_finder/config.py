"""
Модуль для загрузки и валидации конфигурации PageFinder.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union
from urllib.parse import urlsplit, urlunsplit

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from page_finder.crawler.models import ByClass, ByString, SearchCriterion
from page_finder.crawler.scope import CrawlScope

__all__ = ("CrawlerConfig", "load_config")

_CRITERION_FIELDS = ("search_class", "search_text")


class CrawlerConfig(BaseModel):
    """Конфигурация для одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="Стартовый URL; он же граница обхода.")
    search_class: Optional[str] = Field(None, min_length=1, description="CSS-класс для поиска.")
    search_text: Optional[str] = Field(None, min_length=1, description="Подстрока для поиска в тексте.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("PageFinder/1.0", min_length=1, description="Заголовок User-Agent.")
    concurrency: int = Field(1, ge=1, description="Число одновременных загрузок.")
    strict_scope: bool = Field(True, description="Сравнивать хост и границу пути, а не только префикс.")

    @field_validator("base_url", mode="before")
    def _default_scheme(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            if v and "://" not in v:
                v = "https://" + v
        return v

    @field_validator("base_url")
    def _check_base_url(cls, v: str) -> str:
        parts = urlsplit(v)
        if parts.scheme.lower() not in ("http", "https"):
            raise ValueError(f"поддерживаются только http/https, получено {parts.scheme!r}")
        if not parts.hostname:
            raise ValueError("в URL отсутствует хост")
        if not parts.path:
            # ссылка "/" на главной должна совпадать со стартовым URL
            return urlunsplit(parts._replace(path="/"))
        return v

    @field_validator("search_class")
    def _check_class(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().removeprefix(".")
        if not v or any(ch.isspace() for ch in v):
            raise ValueError("имя класса должно быть одним непустым токеном")
        return v

    @model_validator(mode="after")
    def _exactly_one_criterion(self) -> CrawlerConfig:
        if (self.search_class is None) == (self.search_text is None):
            raise ValueError("нужно указать ровно один критерий: search_class или search_text")
        return self

    def criterion(self) -> SearchCriterion:
        if self.search_class is not None:
            return ByClass(self.search_class)
        return ByString(self.search_text)  # type: ignore[arg-type]

    def scope(self) -> CrawlScope:
        return CrawlScope(self.base_url, strict=self.strict_scope)


_DEFAULT_CFG = Path("configs/page_finder.yaml")


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


def _read_file(path: Union[str, Path, None]) -> dict[str, Any]:
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return {}
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Читает YAML или JSON, накладывает непустые overrides и возвращает CrawlerConfig.

    Без path используется configs/page_finder.yaml, если он есть.
    Критерий из overrides полностью заменяет критерий из файла.
    """
    data = _read_file(path)
    given = {k: v for k, v in overrides.items() if v is not None}
    if any(name in given for name in _CRITERION_FIELDS):
        for name in _CRITERION_FIELDS:
            data.pop(name, None)
    data.update(given)
    return CrawlerConfig(**data)
