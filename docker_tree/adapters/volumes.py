"""Адаптер томов."""

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
from docker_tree.descriptors.normalizer import normalize_volume

VOLUME_KEYS = (CREATED_TIME, "VolumeDriver", "VolumeName")


class VolumeAdapter(ResourceAdapter):
    """Тома из /volumes."""

    kind = "volumes"
    valid_label_keys = VOLUME_KEYS
    default_label_key = "VolumeName"
    valid_description_keys = VOLUME_KEYS
    default_description_keys = (CREATED_TIME,)
    valid_group_by_keys = (CREATED_TIME, "VolumeDriver", GROUP_NONE)

    def _build_formatters(self) -> Dict[str, Formatter]:
        return {
            CREATED_TIME: format_created_time,
            "VolumeDriver": lambda item: item.driver,
            "VolumeName": lambda item: item.display_name,
        }

    def normalize(self, descriptor: Mapping[str, Any], now: float) -> List[NormalizedItem]:
        return normalize_volume(descriptor, now)

    def context_value(self, item: NormalizedItem) -> str:
        return "volume"
