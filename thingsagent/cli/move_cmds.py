"""Commands that move tasks and projects and reorder their items."""

from __future__ import annotations

from collections.abc import Callable

import click

from thingsagent.cli.selectors import (
    resolve_area_selector,
    resolve_entity_selector,
    resolve_move_project_destination,
    resolve_move_task_destination,
)

__all__ = [
    "new_move_task_cmd",
    "new_move_project_cmd",
    "new_reorder_project_items_cmd",
    "new_reorder_area_items_cmd",
]


def _checked(resolver: Callable[..., object], *args: str) -> object:
    try:
        return resolver(*args)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def new_move_task_cmd(callback: Callable[[str, str, dict[str, str]], None]) -> click.Command:
    """Move command; the callback receives the name, the id and URL-scheme params."""

    @click.command(name="move-task", help="Move a task to an area, project, or heading")
    @click.option("--name", default="", help="Task name")
    @click.option("--id", "item_id", default="", help="Task ID")
    @click.option("--to-area", default="", help="Target area name")
    @click.option("--to-area-id", default="", help="Target area ID")
    @click.option("--to-project", default="", help="Target project name")
    @click.option("--to-project-id", default="", help="Target project ID")
    @click.option("--to-heading", default="", help="Target heading name")
    @click.option("--to-heading-id", default="", help="Target heading ID")
    def move_task_cmd(
        name: str,
        item_id: str,
        to_area: str,
        to_area_id: str,
        to_project: str,
        to_project_id: str,
        to_heading: str,
        to_heading_id: str,
    ) -> None:
        params = _checked(
            resolve_move_task_destination,
            to_area,
            to_area_id,
            to_project,
            to_project_id,
            to_heading,
            to_heading_id,
        )
        callback(name, item_id, params)

    return move_task_cmd


def new_move_project_cmd(callback: Callable[[str, str, dict[str, str]], None]) -> click.Command:
    @click.command(name="move-project", help="Move a project to another area")
    @click.option("--name", default="", help="Project name")
    @click.option("--id", "item_id", default="", help="Project ID")
    @click.option("--to-area", default="", help="Target area name")
    @click.option("--to-area-id", default="", help="Target area ID")
    def move_project_cmd(name: str, item_id: str, to_area: str, to_area_id: str) -> None:
        params = _checked(resolve_move_project_destination, to_area, to_area_id)
        callback(name, item_id, params)

    return move_project_cmd


def new_reorder_project_items_cmd(
    callback: Callable[[str, str, list[str]], None],
    parse_csv: Callable[[str], list[str]],
) -> click.Command:
    @click.command(
        name="reorder-project-items",
        help="Reorder tasks inside a project (private Things backend)",
    )
    @click.option("--project", "project_name", default="", help="Project name")
    @click.option("--project-id", default="", help="Project ID")
    @click.option("--ids", "ids_csv", default="", help="Comma-separated ordered task IDs")
    def reorder_cmd(project_name: str, project_id: str, ids_csv: str) -> None:
        project_name, project_id = _checked(resolve_entity_selector, project_name, project_id)
        ids = parse_csv(ids_csv)
        if not ids:
            raise click.ClickException("--ids is required")
        callback(project_name, project_id, ids)

    return reorder_cmd


def new_reorder_area_items_cmd(
    callback: Callable[[str, str, list[str]], None],
    parse_csv: Callable[[str], list[str]],
) -> click.Command:
    @click.command(
        name="reorder-area-items",
        help="Reorder items inside an area (private Things backend)",
    )
    @click.option("--area", "area_name", default="", help="Area name")
    @click.option("--area-id", default="", help="Area ID")
    @click.option("--ids", "ids_csv", default="", help="Comma-separated ordered item IDs")
    def reorder_cmd(area_name: str, area_id: str, ids_csv: str) -> None:
        area_name, area_id = _checked(resolve_area_selector, area_name, area_id)
        ids = parse_csv(ids_csv)
        if not ids:
            raise click.ClickException("--ids is required")
        callback(area_name, area_id, ids)

    return reorder_cmd