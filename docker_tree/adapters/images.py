"""Адаптер образов."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from docker_tree.adapters.base import (
    CREATED_TIME,
    GROUP_NONE,
    Formatter,
    ResourceAdapter,
    format_created_time,
    image_reference_formatters,
)
from docker_tree.descriptors.models import NormalizedItem
from docker_tree.descriptors.normalizer import normalize_image
from docker_tree.utils.helpers import format_bytes

IMAGE_KEYS = (
    CREATED_TIME,
    "FullTag",
    "ImageId",
    "Registry",
    "Repository",
    "RepositoryName",
    "RepositoryNameAndTag",
    "Size",
    "Tag",
)


class ImageAdapter(ResourceAdapter):
    """Образы из /images/json, по одному узлу на тег."""

    kind = "images"
    valid_label_keys = IMAGE_KEYS
    default_label_key = "RepositoryNameAndTag"
    valid_description_keys = IMAGE_KEYS
    default_description_keys = (CREATED_TIME,)
    valid_group_by_keys = (
        CREATED_TIME,
        "ImageId",
        "Registry",
        "Repository",
        "RepositoryName",
        "Tag",
        GROUP_NONE,
    )

    def _build_formatters(self) -> Dict[str, Formatter]:
        formatters = image_reference_formatters()
        formatters.update(
            {
                CREATED_TIME: format_created_time,
                "ImageId": lambda item: item.short_id,
                "Size": lambda item: format_bytes(item.size),
            }
        )
        return formatters

    def normalize(self, descriptor: Mapping[str, Any], now: float) -> List[NormalizedItem]:
        return normalize_image(descriptor, now)

    def context_value(self, item: NormalizedItem) -> str:
        return "image"
