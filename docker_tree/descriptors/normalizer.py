"""Приведение сырых описаний Docker Engine API к NormalizedItem.

Каждый вид ресурса имеет собственную функцию извлечения полей. Все они
терпимы к отсутствующим и некорректным полям: вместо исключения
подставляется документированное значение по умолчанию, а исходный
словарь никогда не изменяется.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from docker_tree.descriptors.models import NormalizedItem, PortMapping
from docker_tree.descriptors.references import NONE_PLACEHOLDER, parse_image_reference
from docker_tree.descriptors.relative_time import describe_created

LOGGER = logging.getLogger(__name__)

SHORT_ID_LENGTH = 12
_FRACTION_PATTERN = re.compile(r"\.(\d+)")

Normalizer = Callable[[Mapping[str, Any], float], List[NormalizedItem]]


# --------------------------------------------------------------------- fields
def short_id(identifier: str) -> str:
    """Первые 12 символов идентификатора без префикса sha256:."""

    if identifier.startswith("sha256:"):
        identifier = identifier[len("sha256:") :]
    return identifier[:SHORT_ID_LENGTH]


def primary_name(names: Any) -> str:
    """Первое имя контейнера без ведущего разделителя '/'."""

    if isinstance(names, str):
        names = [names]
    if not isinstance(names, (list, tuple)):
        return ""
    for name in names:
        if isinstance(name, str) and name.strip("/"):
            return name.lstrip("/")
    return ""


def parse_timestamp(value: Any) -> float:
    """Возвращает время в секундах эпохи или 0, если значение не разобрать."""

    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return _finite_or_zero(value)
    if not isinstance(value, str) or not value.strip():
        return 0.0
    text = value.strip().replace("Z", "+00:00")
    # Docker отдаёт наносекунды, fromisoformat понимает не больше микросекунд
    text = _FRACTION_PATTERN.sub(
        lambda match: "." + match.group(1)[:6].ljust(6, "0"), text, count=1
    )
    try:
        timestamp = datetime.fromisoformat(text)
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return timestamp.timestamp()
    except (ValueError, OverflowError, OSError):
        LOGGER.debug("Cannot parse timestamp %r", value)
        return 0.0


def parse_ports(raw_ports: Any) -> Tuple[PortMapping, ...]:
    """Преобразует список Ports из /containers/json."""

    if not isinstance(raw_ports, (list, tuple)):
        return ()
    ports: List[PortMapping] = []
    for entry in raw_ports:
        if not isinstance(entry, Mapping):
            continue
        private_port = _safe_int(entry.get("PrivatePort"))
        if private_port is None:
            continue
        ports.append(
            PortMapping(
                private_port=private_port,
                public_port=_safe_int(entry.get("PublicPort")),
                protocol=str(entry.get("Type") or "tcp"),
            )
        )
    return tuple(ports)


def parse_network_names(network_settings: Any) -> Tuple[str, ...]:
    """Имена сетей из NetworkSettings.Networks в исходном порядке."""

    if not isinstance(network_settings, Mapping):
        return ()
    networks = network_settings.get("Networks")
    if not isinstance(networks, Mapping):
        return ()
    return tuple(str(name) for name in networks.keys())


def _finite_or_zero(value: float) -> float:
    try:
        number = float(value)
    except OverflowError:
        return 0.0
    # json.loads принимает NaN и Infinity
    return number if math.isfinite(number) else 0.0


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _safe_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


# ---------------------------------------------------------------- normalizers
def normalize_container(descriptor: Mapping[str, Any], now: float) -> List[NormalizedItem]:
    """Один контейнер из /containers/json."""

    identifier = _text(descriptor.get("Id"))
    created_at = parse_timestamp(descriptor.get("Created"))
    return [
        NormalizedItem(
            id=identifier,
            short_id=short_id(identifier),
            display_name=primary_name(descriptor.get("Names")) or short_id(identifier),
            created_at=created_at,
            created=describe_created(created_at, now),
            image_ref=parse_image_reference(descriptor.get("Image")),
            ports=parse_ports(descriptor.get("Ports")),
            status=_text(descriptor.get("Status")),
            state=_text(descriptor.get("State")),
            image_id=_text(descriptor.get("ImageID")),
            networks=parse_network_names(descriptor.get("NetworkSettings")),
        )
    ]


def normalize_image(descriptor: Mapping[str, Any], now: float) -> List[NormalizedItem]:
    """Образ из /images/json: по одному элементу на каждый тег."""

    identifier = _text(descriptor.get("Id"))
    created_at = parse_timestamp(descriptor.get("Created"))
    created = describe_created(created_at, now)
    size = _safe_int(descriptor.get("Size"))

    repo_tags = descriptor.get("RepoTags")
    if not isinstance(repo_tags, (list, tuple)) or not repo_tags:
        repo_tags = [f"{NONE_PLACEHOLDER}:{NONE_PLACEHOLDER}"]

    items = []
    for repo_tag in repo_tags:
        reference = parse_image_reference(repo_tag)
        items.append(
            NormalizedItem(
                id=identifier,
                short_id=short_id(identifier),
                display_name=reference.full_tag(),
                created_at=created_at,
                created=created,
                image_ref=reference,
                image_id=identifier,
                size=size,
            )
        )
    return items


def normalize_volume(descriptor: Mapping[str, Any], now: float) -> List[NormalizedItem]:
    """Том из /volumes; идентификатором служит имя тома."""

    name = _text(descriptor.get("Name"))
    created_at = parse_timestamp(descriptor.get("CreatedAt"))
    return [
        NormalizedItem(
            id=name,
            short_id=name[:SHORT_ID_LENGTH],
            display_name=name,
            created_at=created_at,
            created=describe_created(created_at, now),
            driver=_text(descriptor.get("Driver")),
            scope=_text(descriptor.get("Scope")),
        )
    ]


def normalize_network(descriptor: Mapping[str, Any], now: float) -> List[NormalizedItem]:
    """Сеть из /networks."""

    identifier = _text(descriptor.get("Id"))
    created_at = parse_timestamp(descriptor.get("Created"))
    return [
        NormalizedItem(
            id=identifier,
            short_id=short_id(identifier),
            display_name=_text(descriptor.get("Name")) or short_id(identifier),
            created_at=created_at,
            created=describe_created(created_at, now),
            driver=_text(descriptor.get("Driver")),
            scope=_text(descriptor.get("Scope")),
        )
    ]


def normalize_all(
    descriptors: Iterable[Any], normalizer: Normalizer, now: float
) -> List[NormalizedItem]:
    """Нормализует последовательность описаний, пропуская не-словари."""

    items: List[NormalizedItem] = []
    for index, descriptor in enumerate(descriptors):
        if not isinstance(descriptor, Mapping):
            LOGGER.warning(
                "Skipping descriptor #%s: expected mapping, got %s",
                index,
                type(descriptor).__name__,
            )
            continue
        items.extend(normalizer(descriptor, now))
    return items
