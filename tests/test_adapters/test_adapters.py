"""Тесты адаптеров видов ресурсов."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from docker_tree.adapters.base import GROUP_NONE
from docker_tree.adapters.containers import ContainerAdapter
from docker_tree.adapters.networks import NetworkAdapter
from docker_tree.adapters.registry import ResourceKind, get_adapter, resolve_kind
from docker_tree.exceptions import UnknownFormatKeyError, UnknownResourceKindError


@pytest.fixture
def adapter() -> ContainerAdapter:
    return get_adapter("containers")  # type: ignore[return-value]


def _container(containers: List[Dict[str, Any]], index: int, adapter, now: float):
    (item,) = adapter.normalize(containers[index], now)
    return item


class TestRegistry:
    """Выбор адаптера по виду ресурса."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            ("containers", ResourceKind.CONTAINERS),
            ("container", ResourceKind.CONTAINERS),
            ("Images", ResourceKind.IMAGES),
            (ResourceKind.VOLUMES, ResourceKind.VOLUMES),
            ("network", ResourceKind.NETWORKS),
        ],
    )
    def test_resolve_kind(self, kind: Any, expected: ResourceKind) -> None:
        assert resolve_kind(kind) is expected

    def test_adapters_are_shared(self) -> None:
        assert get_adapter("containers") is get_adapter(ResourceKind.CONTAINERS)

    @pytest.mark.parametrize("kind", ["pods", "", None, 3])
    def test_unknown_kind_raises(self, kind: Any) -> None:
        with pytest.raises(UnknownResourceKindError):
            get_adapter(kind)


@pytest.mark.parametrize("kind", list(ResourceKind))
def test_every_declared_key_can_be_formatted(kind: ResourceKind) -> None:
    adapter = get_adapter(kind)
    formattable = set(adapter.format_keys())
    assert set(adapter.valid_label_keys) <= formattable
    assert set(adapter.valid_description_keys) <= formattable
    assert set(adapter.valid_group_by_keys) - {GROUP_NONE} <= formattable
    assert adapter.default_label_key in adapter.valid_label_keys
    assert adapter.default_sort_by_key in adapter.valid_sort_by_keys


def test_unknown_format_key_raises(adapter, containers, now) -> None:
    item = _container(containers, 0, adapter, now)
    with pytest.raises(UnknownFormatKeyError):
        adapter.format("NoSuchKey", item)


def test_mismatched_tables_are_rejected() -> None:
    class BrokenAdapter(NetworkAdapter):
        valid_label_keys = ("NetworkName", "Bogus")

    with pytest.raises(UnknownFormatKeyError):
        BrokenAdapter()


class TestContainerFormatting:
    """Форматирование полей контейнера."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("ContainerName", "zealous_napier"),
            ("ContainerId", "49df1ed4a46c"),
            ("Ports", "2222,8000"),
            ("Status", "Up 8 minutes"),
            ("State", "running"),
            ("Registry", "emjacr2.azurecr.io"),
            ("Repository", "docker-django-webapp-linux"),
            ("RepositoryName", "docker-django-webapp-linux"),
            ("Tag", "cj8"),
            ("RepositoryNameAndTag", "emjacr2.azurecr.io/docker-django-webapp-linux:cj8"),
            ("FullTag", "emjacr2.azurecr.io/docker-django-webapp-linux:cj8"),
            ("ImageId", "d3eef98c0630"),
            ("CreatedTime", "a month ago"),
            ("Networks", "<none>"),
        ],
    )
    def test_format(self, adapter, containers, now, key: str, expected: str) -> None:
        item = _container(containers, 3, adapter, now)
        assert adapter.format(key, item) == expected

    def test_empty_ports_placeholder(self, adapter, containers, now) -> None:
        item = _container(containers, 0, adapter, now)
        assert adapter.format("Ports", item) == "<none>"

    def test_default_registry_rendering(self, adapter, containers, now) -> None:
        item = _container(containers, 0, adapter, now)
        assert adapter.format("Registry", item) == "docker.io/library"
        assert adapter.format("RepositoryNameAndTag", item) == "node:8.0"

    @pytest.mark.parametrize(
        ("index", "context_value"),
        [
            (0, "createdContainer"),
            (1, "runningContainer"),
            (2, "pausedContainer"),
            (4, "exitedContainer"),
        ],
    )
    def test_context_value_follows_state(
        self, adapter, containers, now, index: int, context_value: str
    ) -> None:
        item = _container(containers, index, adapter, now)
        assert adapter.context_value(item) == context_value


def test_image_formatting(now: float) -> None:
    adapter = get_adapter("images")
    (item,) = adapter.normalize(
        {"Id": "sha256:" + "a" * 64, "RepoTags": ["redis:7"], "Created": now, "Size": 1536}, now
    )
    assert adapter.format("RepositoryNameAndTag", item) == "redis:7"
    assert adapter.format("ImageId", item) == "aaaaaaaaaaaa"
    assert adapter.format("Size", item) == "1.5 KB"
    assert adapter.format("CreatedTime", item) == "a few seconds ago"
    assert adapter.context_value(item) == "image"


def test_volume_formatting(now: float) -> None:
    adapter = get_adapter("volumes")
    (item,) = adapter.normalize({"Name": "cache", "Driver": "local"}, now)
    assert adapter.format("VolumeName", item) == "cache"
    assert adapter.format("VolumeDriver", item) == "local"
    assert adapter.context_value(item) == "volume"


@pytest.mark.parametrize(
    ("name", "context_value"), [("host", "defaultNetwork"), ("web", "customNetwork")]
)
def test_network_context_value(now: float, name: str, context_value: str) -> None:
    adapter = get_adapter("networks")
    (item,) = adapter.normalize({"Id": "e" * 64, "Name": name, "Driver": "bridge"}, now)
    assert adapter.format("NetworkName", item) == name
    assert adapter.context_value(item) == context_value
