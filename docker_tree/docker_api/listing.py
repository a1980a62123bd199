"""Получение сырых описаний ресурсов через Docker Engine API.

Возвращаемые словари имеют ровно ту форму, которую отдают эндпоинты
``/containers/json``, ``/images/json``, ``/volumes`` и ``/networks``, и
передаются в движок дерева без изменений.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from docker.errors import DockerException
from requests.exceptions import RequestException

from docker_tree.adapters.registry import ResourceKind, resolve_kind
from docker_tree.docker_api.client import DockerClientWrapper
from docker_tree.docker_api.exceptions import DockerAPIError

RawDescriptors = List[Dict[str, Any]]


def list_containers(client: DockerClientWrapper) -> RawDescriptors:
    """Все контейнеры, включая остановленные."""

    return list(client.get_raw_client().containers(all=True))


def list_images(client: DockerClientWrapper) -> RawDescriptors:
    """Образы верхнего уровня."""

    return list(client.get_raw_client().images())


def list_volumes(client: DockerClientWrapper) -> RawDescriptors:
    """Тома; API оборачивает список в поле Volumes, которое может быть null."""

    payload = client.get_raw_client().volumes() or {}
    return list(payload.get("Volumes") or [])


def list_networks(client: DockerClientWrapper) -> RawDescriptors:
    """Сети."""

    return list(client.get_raw_client().networks())


_LISTERS: Dict[ResourceKind, Callable[[DockerClientWrapper], RawDescriptors]] = {
    ResourceKind.CONTAINERS: list_containers,
    ResourceKind.IMAGES: list_images,
    ResourceKind.VOLUMES: list_volumes,
    ResourceKind.NETWORKS: list_networks,
}


def list_descriptors(client: DockerClientWrapper, kind: "ResourceKind | str") -> RawDescriptors:
    """Возвращает сырые описания для вида ресурса."""

    lister = _LISTERS[resolve_kind(kind)]
    try:
        return lister(client)
    except (DockerException, RequestException) as exc:
        raise DockerAPIError(str(exc)) from exc
