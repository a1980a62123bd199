"""Общие данные для тестов дерева ресурсов."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import pytest

NOW = 1_700_000_000.0
DAY = 86400


def created_days_ago(days: float) -> float:
    return NOW - days * DAY


def make_test_containers() -> List[Dict[str, Any]]:
    """Восемь контейнеров, уже упорядоченных от новых к старым."""

    return [
        {
            "Id": "9330566c414439f4873edd95689b559466993681f7b9741005b5a74786134202",
            "Names": ["/vigorous_booth"],
            "Image": "node:8.0",
            "ImageID": "sha256:065e283f68bd5ef3b079aee76d3aa55b5e56e8f9ede991a97ff15fdc556f8cfd",
            "Created": created_days_ago(1),
            "Ports": [],
            "State": "created",
            "Status": "Created",
        },
        {
            "Id": "faeb6f02af06df748a0040476ba7c335fb8aaefd76f6ea14a76800faf0fa3910",
            "Names": ["/elegant_knuth"],
            "Image": "registry:latest",
            "ImageID": "sha256:f32a97de94e13d29835a19851acd6cbc7979d1d50f703725541e44bb89a1ce91",
            "Created": created_days_ago(2),
            "Ports": [{"IP": "0.0.0.0", "PrivatePort": 5000, "PublicPort": 5000, "Type": "tcp"}],
            "State": "running",
            "Status": "Up 6 minutes",
        },
        {
            "Id": "99636d5207b3da8a9865ef931aa3c758688e795e7787a6982fc7b5da07a5de8c",
            "Names": ["/focused_cori"],
            "Image": "mcr.microsoft.com/dotnet/core/sdk:latest",
            "ImageID": "sha256:bbae085fa7eb0725dd2647a357988095754620aaf64ddc4b152d6f1407111dc8",
            "Created": created_days_ago(3),
            "Ports": [],
            "State": "paused",
            "Status": "Up 8 minutes (Paused)",
        },
        {
            "Id": "49df1ed4a46c2617025298a8bdb01bc37267ecae82fc8ab88b0504314d94b983",
            "Names": ["/zealous_napier"],
            "Image": "emjacr2.azurecr.io/docker-django-webapp-linux:cj8",
            "ImageID": "sha256:d3eef98c0630cc7e2b81f37fe8c8db7b554aeff42d3bf193337842f80b208614",
            "Created": created_days_ago(35),
            "Ports": [
                {"IP": "0.0.0.0", "PrivatePort": 2222, "PublicPort": 2222, "Type": "tcp"},
                {"IP": "0.0.0.0", "PrivatePort": 8000, "PublicPort": 8000, "Type": "tcp"},
            ],
            "State": "running",
            "Status": "Up 8 minutes",
        },
        {
            "Id": "ee098ec2fb0b337e4f480a1a33dd1d396ef6b242579bb8b874e480957c053f34",
            "Names": ["/admiring_leavitt"],
            "Image": "vsc-js1-6b97c65e88377ff89a4eab7bc81b694d",
            "ImageID": "sha256:7804287702e2a3d7f44b46a9ce864951ed093227e1d4e1f67992760292bd8126",
            "Created": created_days_ago(36),
            "Ports": [],
            "State": "exited",
            "Status": "Exited (137) 12 hours ago",
        },
        {
            "Id": "5e25d05c0797d44c0efaf3479633316f9229e3f71feccfbe2278c35681c0436f",
            "Names": ["/inspiring_brattain"],
            "Image": "acr-build-helloworld-node:latest",
            "ImageID": "sha256:4d476c415ca931a558cfefe48f4f51e8b6bcbadf6f8820cf5a98a05794b59293",
            "Created": created_days_ago(37),
            "Ports": [{"IP": "0.0.0.0", "PrivatePort": 80, "PublicPort": 80, "Type": "tcp"}],
            "State": "running",
            "Status": "Up 32 hours",
        },
        {
            "Id": "531005593f5da6f15ce13a6149a9b4866608fad5bddc600d37239e3d9976f00f",
            "Names": ["/elegant_mendel"],
            "Image": "test:latest",
            "ImageID": "sha256:93074a25f8cc8647a62dfc14d42710751d1f341479d0a6943384e618685db614",
            "Created": created_days_ago(90),
            "Ports": [],
            "State": "running",
            "Status": "Up 49 seconds",
        },
        {
            "Id": "99fd96f9cdf9fb7668887477f91b0c72682461690ff83030e8a6aa63a871f63a",
            "Names": ["/devtest"],
            "Image": "nginx:latest",
            "ImageID": "sha256:62c261073ecffe22a28f2ba67760a9320bc4bfe8136a83ba9b579983346564be",
            "Created": created_days_ago(365),
            "Ports": [],
            "State": "exited",
            "Status": "Exited (0) 2 days ago",
        },
    ]


@pytest.fixture
def containers() -> List[Dict[str, Any]]:
    return make_test_containers()


@pytest.fixture
def now() -> float:
    return NOW


@pytest.fixture
def restore_root_logging():
    """configure_logging заменяет обработчики корневого логгера; возвращаем их."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
