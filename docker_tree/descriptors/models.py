"""Канонические структуры данных, получаемые из сырых описаний Docker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_REGISTRY = "docker.io/library"
DEFAULT_TAG = "latest"


@dataclass(frozen=True, slots=True)
class ImageReference:
    """Разобранная ссылка на образ: registry/repository:tag."""

    registry: str
    repository: str
    tag: str = DEFAULT_TAG
    explicit_tag: bool = False  # был ли тег указан в исходной строке
    digest: Optional[str] = None

    @property
    def is_default_registry(self) -> bool:
        return self.registry == DEFAULT_REGISTRY

    @property
    def repository_name(self) -> str:
        """Последний сегмент пути репозитория."""

        return self.repository.rsplit("/", 1)[-1]

    def full_tag(self) -> str:
        """Полное имя образа без реестра по умолчанию."""

        name = self.repository if self.is_default_registry else f"{self.registry}/{self.repository}"
        if self.explicit_tag:
            name = f"{name}:{self.tag}"
        if self.digest:
            name = f"{name}@{self.digest}"
        return name


@dataclass(frozen=True, slots=True)
class RelativeTime:
    """Человекочитаемый возраст и ранг для хронологической сортировки."""

    label: str
    rank: int


@dataclass(frozen=True, slots=True)
class PortMapping:
    """Один опубликованный порт контейнера."""

    private_port: int
    public_port: Optional[int] = None
    protocol: str = "tcp"


@dataclass(frozen=True, slots=True)
class NormalizedItem:
    """Неизменяемое каноническое представление одного ресурса."""

    id: str
    short_id: str
    display_name: str
    created_at: float
    created: RelativeTime
    image_ref: Optional[ImageReference] = None
    ports: Tuple[PortMapping, ...] = ()
    status: str = ""
    state: str = ""
    image_id: str = ""
    networks: Tuple[str, ...] = ()
    size: Optional[int] = None
    driver: str = ""
    scope: str = ""
