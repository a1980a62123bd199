"""Точка входа командной строки docker-tree."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from docker_tree import __version__
from docker_tree.adapters.registry import ResourceKind, get_adapter, resolve_kind
from docker_tree.docker_api.client import DockerClientWrapper
from docker_tree.docker_api.exceptions import DockerAPIError
from docker_tree.docker_api.listing import list_descriptors
from docker_tree.exceptions import TreeError
from docker_tree.rendering import node_to_dict, render_tree
from docker_tree.settings.config import explorer_settings, load_config
from docker_tree.settings.tree_settings import (
    DESCRIPTION_FIELD,
    GROUP_BY_FIELD,
    LABEL_FIELD,
    SORT_BY_FIELD,
)
from docker_tree.tree.assembler import build_tree
from docker_tree.utils.logger import configure_logging, get_logger

LOGGER = get_logger(__name__)

app = typer.Typer(help="Show Docker resources as a grouped, sorted tree.", no_args_is_help=True)
console = Console()
error_console = Console(stderr=True)


def setup_logging_from_config(
    config: Dict[str, Any],
    level_override: Optional[str] = None,
    log_dir_override: Optional[Path] = None,
) -> None:
    """Настраивает логирование по разделу logging конфигурации.

    Параметры командной строки имеют приоритет над файлом.
    """

    logging_config = config["logging"]
    log_dir = log_dir_override or logging_config.get("log_dir")
    configure_logging(
        Path(log_dir).expanduser() if log_dir else None,
        level_name=level_override or logging_config.get("level", "WARNING"),
        max_bytes=logging_config.get("max_file_size_mb", 10) * 1024 * 1024,
        backup_count=logging_config.get("max_archived_files", 5),
    )


def read_descriptors(path: Path, kind: ResourceKind) -> List[Any]:
    """Читает описания из JSON: список либо объект с ключом вида ресурса."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc
    if isinstance(payload, dict):
        payload = payload.get(kind.value, [])
    if not isinstance(payload, list):
        raise typer.BadParameter(f"{path} must contain a JSON list of {kind.value}")
    return payload


def fetch_descriptors(
    host: Optional[str], config: Dict[str, Any], kind: ResourceKind
) -> List[Any]:
    """Проверяет доступность Docker Engine и запрашивает описания."""

    docker_config = config["docker"]
    client = DockerClientWrapper(
        host or docker_config.get("base_url"),
        timeout=docker_config.get("timeout_sec", 10),
    )
    if not client.ping():
        raise DockerAPIError(
            f"Docker daemon is unreachable at {client.base_url or 'the environment address'}"
        )
    return list_descriptors(client, kind)


def merge_cli_settings(
    base: Any,
    *,
    label: Optional[str],
    description: Optional[List[str]],
    no_description: bool,
    group_by: Optional[str],
    sort_by: Optional[str],
) -> Any:
    """Накладывает параметры командной строки на настройки из файла."""

    overrides: Dict[str, Any] = {}
    if label is not None:
        overrides[LABEL_FIELD] = label
    if no_description:
        overrides[DESCRIPTION_FIELD] = []
    elif description:
        overrides[DESCRIPTION_FIELD] = list(description)
    if group_by is not None:
        overrides[GROUP_BY_FIELD] = group_by
    if sort_by is not None:
        overrides[SORT_BY_FIELD] = sort_by
    if not overrides:
        return base
    merged = dict(base) if isinstance(base, dict) else {}
    merged.update(overrides)
    return merged


def _fail(message: str) -> NoReturn:
    error_console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


@app.command("show")
def show(
    kind: str = typer.Argument(..., help="containers, images, volumes or networks."),
    input_file: Optional[Path] = typer.Option(
        None, "--input", "-i", help="JSON file with raw descriptors instead of a live engine."
    ),
    host: Optional[str] = typer.Option(None, "--host", "-H", help="Docker daemon address."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="JSON config file."),
    label: Optional[str] = typer.Option(None, "--label", "-l", help="Label key."),
    description: Optional[List[str]] = typer.Option(
        None, "--description", "-d", help="Description key (repeatable)."
    ),
    no_description: bool = typer.Option(False, "--no-description", help="Hide descriptions."),
    group_by: Optional[str] = typer.Option(None, "--group-by", "-g", help="Group-by key."),
    sort_by: Optional[str] = typer.Option(None, "--sort-by", "-s", help="Sort-by key."),
    as_json: bool = typer.Option(False, "--json", help="Print nodes as JSON."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override log level."),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for log files."),
) -> None:
    """Print the resource tree for one kind."""

    try:
        config = load_config(config_path)
        setup_logging_from_config(config, log_level, log_dir)
        resource_kind = resolve_kind(kind)
    except (TreeError, ValueError) as exc:
        _fail(str(exc))

    if input_file is not None:
        descriptors = read_descriptors(input_file, resource_kind)
    else:
        try:
            descriptors = fetch_descriptors(host, config, resource_kind)
        except DockerAPIError as exc:
            _fail(f"Cannot query Docker: {exc}")

    settings = merge_cli_settings(
        explorer_settings(config, resource_kind.value),
        label=label,
        description=description,
        no_description=no_description,
        group_by=group_by,
        sort_by=sort_by,
    )
    nodes = build_tree(resource_kind, descriptors, settings)
    LOGGER.info("Rendered %d top-level %s nodes", len(nodes), resource_kind.value)

    if as_json:
        typer.echo(json.dumps([node_to_dict(node) for node in nodes], indent=2))
    else:
        console.print(render_tree(resource_kind.value, nodes))


@app.command("keys")
def keys(
    kind: str = typer.Argument(..., help="containers, images, volumes or networks.")
) -> None:
    """List the label, description, group-by and sort-by keys of a kind."""

    try:
        adapter = get_adapter(kind)
    except TreeError as exc:
        _fail(str(exc))

    table = Table(title=f"{adapter.kind} keys")
    table.add_column("Setting")
    table.add_column("Valid keys")
    table.add_column("Default")
    table.add_row("label", ", ".join(adapter.valid_label_keys), adapter.default_label_key)
    table.add_row(
        "description",
        ", ".join(adapter.valid_description_keys),
        ", ".join(adapter.default_description_keys),
    )
    table.add_row("groupBy", ", ".join(adapter.valid_group_by_keys), "None")
    table.add_row("sortBy", ", ".join(adapter.valid_sort_by_keys), adapter.default_sort_by_key)
    console.print(table)


@app.command("version")
def version() -> None:
    """Print the version."""

    console.print(__version__)


def main() -> None:
    """Точка входа console_scripts."""

    app()


if __name__ == "__main__":
    main()
