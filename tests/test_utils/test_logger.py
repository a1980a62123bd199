"""Проверки подсистемы логирования."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docker_tree.utils.logger import configure_logging, get_logger, resolve_log_level

pytestmark = pytest.mark.usefixtures("restore_root_logging")


def test_configure_logging_creates_file(tmp_path: Path) -> None:
    """После конфигурации должны появиться файлы логов и запись в них."""

    log_dir = tmp_path / "logs"
    configure_logging(log_dir, level_name="INFO", max_bytes=1024, backup_count=1)

    logger = get_logger("docker_tree.test")
    logger.info("log entry")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_file = log_dir / "docker-tree.log"
    assert log_file.exists()
    assert "log entry" in log_file.read_text(encoding="utf-8")


def test_configure_logging_without_dir_uses_stderr_only(tmp_path: Path) -> None:
    configure_logging(None, level_name="debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not list(tmp_path.iterdir())


def test_resolve_log_level_invalid() -> None:
    """Неизвестный уровень логирования приводит к ValueError."""

    with pytest.raises(ValueError):
        resolve_log_level("INVALID")


def test_resolve_log_level_is_case_insensitive() -> None:
    assert resolve_log_level("warning") == logging.WARNING
