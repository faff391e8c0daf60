"""Commands that add, edit and delete projects and areas."""

from __future__ import annotations

from collections.abc import Callable

import click

from thingsagent.cli.selectors import resolve_entity_selector

__all__ = [
    "new_add_project_cmd",
    "new_add_area_cmd",
    "new_edit_project_cmd",
    "new_edit_area_cmd",
    "new_delete_project_cmd",
    "new_delete_cmd",
]


def _entity(name: str, item_id: str) -> tuple[str, str]:
    try:
        return resolve_entity_selector(name, item_id)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def new_add_project_cmd(callback: Callable[[str, str, str], None]) -> click.Command:
    @click.command(name="add-project", help="Add a project")
    @click.option("--name", required=True, help="Project name")
    @click.option("--notes", default="", help="Notes")
    @click.option("--area", "area_name", default="", help="Destination area")
    def add_project_cmd(name: str, notes: str, area_name: str) -> None:
        if not name.strip():
            raise click.ClickException("--name is required")
        area_name = area_name.strip()
        if not area_name:
            raise click.ClickException("destination is required: use --area")
        callback(name, notes, area_name)

    return add_project_cmd


def new_add_area_cmd(callback: Callable[[str], None]) -> click.Command:
    @click.command(name="add-area", help="Add an area")
    @click.option("--name", required=True, help="Area name")
    def add_area_cmd(name: str) -> None:
        if not name.strip():
            raise click.ClickException("--name is required")
        callback(name)

    return add_area_cmd


def new_edit_project_cmd(callback: Callable[[str, str, str, str], None]) -> click.Command:
    @click.command(name="edit-project", help="Edit a project")
    @click.option("--name", "source_name", default="", help="Project name")
    @click.option("--id", "source_id", default="", help="Project ID")
    @click.option("--new-name", default="", help="New name")
    @click.option("--notes", default="", help="New notes")
    def edit_project_cmd(source_name: str, source_id: str, new_name: str, notes: str) -> None:
        source_name, source_id = _entity(source_name, source_id)
        if not new_name.strip() and not notes.strip():
            raise click.ClickException("specify --new-name and/or --notes")
        callback(source_name, source_id, new_name, notes)

    return edit_project_cmd


def new_edit_area_cmd(callback: Callable[[str, str], None]) -> click.Command:
    @click.command(name="edit-area", help="Rename an area")
    @click.option("--name", "source_name", required=True, help="Area name")
    @click.option("--new-name", default="", help="New name")
    def edit_area_cmd(source_name: str, new_name: str) -> None:
        if not source_name.strip():
            raise click.ClickException("--name is required")
        if not new_name.strip():
            raise click.ClickException("--new-name is required")
        callback(source_name, new_name)

    return edit_area_cmd


def new_delete_project_cmd(callback: Callable[[str, str], None]) -> click.Command:
    @click.command(name="delete-project", help="Delete a project")
    @click.option("--name", default="", help="Project name")
    @click.option("--id", "item_id", default="", help="Project ID")
    def delete_project_cmd(name: str, item_id: str) -> None:
        name, item_id = _entity(name, item_id)
        callback(name, item_id)

    return delete_project_cmd


def new_delete_cmd(
    kind: str, name: str, short: str, callback: Callable[[str, str], None]
) -> click.Command:
    """Delete-by-name command; the callback receives ``kind`` and the target name."""

    @click.command(name=name, help=short)
    @click.option("--name", "target", required=True, help="Item name")
    def delete_cmd(target: str) -> None:
        if not target.strip():
            raise click.ClickException("--name is required")
        callback(kind, target)

    return delete_cmd