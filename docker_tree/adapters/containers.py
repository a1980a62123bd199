"""Адаптер контейнеров."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from docker_tree.adapters.base import (
    CREATED_TIME,
    GROUP_NONE,
    Formatter,
    ResourceAdapter,
    format_created_time,
    image_reference_formatters,
    join_or_placeholder,
)
from docker_tree.descriptors.models import NormalizedItem
from docker_tree.descriptors.normalizer import normalize_container, short_id

CONTAINER_KEYS = (
    "ContainerId",
    "ContainerName",
    CREATED_TIME,
    "FullTag",
    "ImageId",
    "Networks",
    "Ports",
    "Registry",
    "Repository",
    "RepositoryName",
    "RepositoryNameAndTag",
    "State",
    "Status",
    "Tag",
)


class ContainerAdapter(ResourceAdapter):
    """Контейнеры из /containers/json."""

    kind = "containers"
    valid_label_keys = CONTAINER_KEYS
    default_label_key = "RepositoryNameAndTag"
    valid_description_keys = CONTAINER_KEYS
    default_description_keys = ("ContainerName", "Status")
    valid_group_by_keys = (
        "ContainerName",
        CREATED_TIME,
        "FullTag",
        "ImageId",
        "Registry",
        "Repository",
        "RepositoryName",
        "RepositoryNameAndTag",
        "State",
        "Tag",
        GROUP_NONE,
    )

    def _build_formatters(self) -> Dict[str, Formatter]:
        formatters = image_reference_formatters()
        formatters.update(
            {
                "ContainerId": lambda item: item.short_id,
                "ContainerName": lambda item: item.display_name,
                CREATED_TIME: format_created_time,
                "ImageId": lambda item: short_id(item.image_id),
                "Networks": lambda item: join_or_placeholder(item.networks),
                "Ports": lambda item: join_or_placeholder(
                    tuple(port.private_port for port in item.ports)
                ),
                "State": lambda item: item.state,
                "Status": lambda item: item.status,
            }
        )
        return formatters

    def normalize(self, descriptor: Mapping[str, Any], now: float) -> List[NormalizedItem]:
        return normalize_container(descriptor, now)

    def context_value(self, item: NormalizedItem) -> str:
        # "runningContainer" ищут внешние расширения для команды attach
        state = item.state.strip().lower()
        return f"{state}Container" if state else "container"
