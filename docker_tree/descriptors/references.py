"""Разбор ссылок на образы вида [registry/]repository[:tag]."""

from __future__ import annotations

from typing import Any

from docker_tree.descriptors.models import DEFAULT_REGISTRY, DEFAULT_TAG, ImageReference

NONE_PLACEHOLDER = "<none>"


def parse_image_reference(reference: Any) -> ImageReference:
    """Возвращает registry, repository и tag для строки ссылки.

    Тег отделяется по двоеточию только в последнем сегменте пути, поэтому
    ``localhost:5000/app`` не считается тегированным. Первый сегмент
    становится реестром, если похож на домен или host:port. Функция
    никогда не выбрасывает исключений: некорректный ввод превращается в
    репозиторий реестра по умолчанию с тегом ``latest``.
    """

    if not isinstance(reference, str) or not reference.strip():
        return ImageReference(registry=DEFAULT_REGISTRY, repository=NONE_PLACEHOLDER)

    text = reference.strip()
    head, slash, last_segment = text.rpartition("/")

    digest = None
    if "@" in last_segment:
        last_segment, _, digest = last_segment.partition("@")

    tag = DEFAULT_TAG
    explicit_tag = False
    if ":" in last_segment:
        last_segment, _, tag = last_segment.partition(":")
        explicit_tag = True

    name = f"{head}{slash}{last_segment}"
    if not last_segment:
        # "registry/:tag" и подобное оставляем как есть
        return ImageReference(registry=DEFAULT_REGISTRY, repository=text)

    registry = DEFAULT_REGISTRY
    repository = name
    if "/" in name:
        first, _, rest = name.partition("/")
        if "." in first or ":" in first:
            registry = first
            repository = rest

    return ImageReference(
        registry=registry,
        repository=repository,
        tag=tag,
        explicit_tag=explicit_tag,
        digest=digest or None,
    )
