"""Адаптер сетей."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from docker_tree.adapters.base import (
    CREATED_TIME,
    GROUP_NONE,
    Formatter,
    ResourceAdapter,
    format_created_time,
)
from docker_tree.descriptors.models import NormalizedItem
from docker_tree.descriptors.normalizer import normalize_network

NETWORK_KEYS = (CREATED_TIME, "NetworkDriver", "NetworkId", "NetworkName", "NetworkScope")
BUILTIN_NETWORKS = frozenset({"bridge", "host", "none"})


class NetworkAdapter(ResourceAdapter):
    """Сети из /networks."""

    kind = "networks"
    valid_label_keys = NETWORK_KEYS
    default_label_key = "NetworkName"
    valid_description_keys = NETWORK_KEYS
    default_description_keys = ("NetworkDriver",)
    valid_group_by_keys = (CREATED_TIME, "NetworkDriver", "NetworkScope", GROUP_NONE)

    def _build_formatters(self) -> Dict[str, Formatter]:
        return {
            CREATED_TIME: format_created_time,
            "NetworkDriver": lambda item: item.driver,
            "NetworkId": lambda item: item.short_id,
            "NetworkName": lambda item: item.display_name,
            "NetworkScope": lambda item: item.scope,
        }

    def normalize(self, descriptor: Mapping[str, Any], now: float) -> List[NormalizedItem]:
        return normalize_network(descriptor, now)

    def context_value(self, item: NormalizedItem) -> str:
        # встроенные сети нельзя удалить
        if item.display_name in BUILTIN_NETWORKS:
            return "defaultNetwork"
        return "customNetwork"
