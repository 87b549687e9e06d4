"""
Загрузка и валидация конфигурации обхода LinkWalker.
Схема описана через Pydantic; файл конфигурации может быть YAML или JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, model_validator


class CrawlConfig(BaseModel):
    """Конфигурация одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: Optional[HttpUrl] = Field(None, description="Стартовый URL обхода.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    status_code_min: int = Field(200, ge=100, le=599, description="Минимальный допустимый HTTP-статус.")
    status_code_max: int = Field(299, ge=100, le=599, description="Максимальный допустимый HTTP-статус.")
    only_same_host: bool = Field(True, description="Ходить только по ссылкам того же основного домена.")
    links_limit: int = Field(0, ge=0, description="Лимит посещённых ссылок, 0 = без лимита.")
    user_agent: str = Field("LinkWalker/0.1", min_length=1, description="Заголовок User-Agent.")

    @model_validator(mode="after")
    def _check_status_range(self) -> CrawlConfig:
        if self.status_code_min > self.status_code_max:
            raise ValueError(
                f"status_code_min ({self.status_code_min}) is greater than "
                f"status_code_max ({self.status_code_max})"
            )
        return self

    def with_overrides(self, **overrides: Any) -> CrawlConfig:
        """Return a validated copy with every non-None override applied."""
        data = self.model_dump(mode="json")
        data.update({k: v for k, v in overrides.items() if v is not None})
        return CrawlConfig(**data)


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


def load_config(path: Union[str, Path, None] = None) -> CrawlConfig:
    """
    Читает YAML или JSON и возвращает проверенный CrawlConfig.
    Без пути возвращает конфигурацию по умолчанию.
    """
    if path is None:
        return CrawlConfig()

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

    return CrawlConfig(**data)
