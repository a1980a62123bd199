"""Выбор адаптера по виду ресурса."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from docker_tree.adapters.base import ResourceAdapter
from docker_tree.adapters.containers import ContainerAdapter
from docker_tree.adapters.images import ImageAdapter
from docker_tree.adapters.networks import NetworkAdapter
from docker_tree.adapters.volumes import VolumeAdapter
from docker_tree.exceptions import UnknownResourceKindError


class ResourceKind(str, Enum):
    """Виды ресурсов, которые умеет отображать дерево."""

    CONTAINERS = "containers"
    IMAGES = "images"
    VOLUMES = "volumes"
    NETWORKS = "networks"


# Адаптеры создаются один раз и далее только читаются
_ADAPTERS: Mapping[str, ResourceAdapter] = MappingProxyType(
    {
        ResourceKind.CONTAINERS.value: ContainerAdapter(),
        ResourceKind.IMAGES.value: ImageAdapter(),
        ResourceKind.VOLUMES.value: VolumeAdapter(),
        ResourceKind.NETWORKS.value: NetworkAdapter(),
    }
)


def resolve_kind(kind: "ResourceKind | str") -> ResourceKind:
    """Принимает вид ресурса в единственном или множественном числе."""

    if isinstance(kind, ResourceKind):
        return kind
    if isinstance(kind, str):
        name = kind.strip().lower()
        for candidate in (name, f"{name}s"):
            if candidate in _ADAPTERS:
                return ResourceKind(candidate)
    raise UnknownResourceKindError(kind, _ADAPTERS.keys())


def get_adapter(kind: "ResourceKind | str") -> ResourceAdapter:
    """Возвращает общий неизменяемый адаптер для вида ресурса."""

    return _ADAPTERS[resolve_kind(kind).value]
