"""Commands that show, add, edit and delete tasks."""

from __future__ import annotations

from collections.abc import Callable

import click

from thingsagent.cli.selectors import resolve_entity_selector

__all__ = [
    "new_show_task_cmd",
    "new_add_task_cmd",
    "new_edit_task_cmd",
    "new_delete_task_cmd",
]


def _entity(name: str, item_id: str) -> tuple[str, str]:
    try:
        return resolve_entity_selector(name, item_id)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def new_show_task_cmd(callback: Callable[[str, str, bool, bool], None]) -> click.Command:
    @click.command(name="show-task", help="Show full details for a task or project")
    @click.option("--name", default="", help="Task or project name")
    @click.option("--id", "item_id", default="", help="Task or project ID")
    @click.option(
        "--with-child-tasks/--no-with-child-tasks",
        default=True,
        help="Include child tasks",
    )
    @click.option("--json", "json_output", is_flag=True, default=False, help="Output structured JSON")
    def show_task_cmd(name: str, item_id: str, with_child_tasks: bool, json_output: bool) -> None:
        name, item_id = _entity(name, item_id)
        callback(name, item_id, with_child_tasks, json_output)

    return show_task_cmd


def new_add_task_cmd(
    resolve_destination: Callable[[str, str], tuple[str, str]],
    callback: Callable[[str, str, str, str, str, str, str], None],
) -> click.Command:
    """Add command; ``resolve_destination`` maps area/project flags to (kind, name)."""

    @click.command(name="add-task", help="Add a task")
    @click.option("--name", required=True, help="Task name")
    @click.option("--notes", default="", help="Notes")
    @click.option("--tags", default="", help="Tags (comma-separated)")
    @click.option("--area", "area_name", default="", help="Destination area")
    @click.option("--project", "project_name", default="", help="Destination project")
    @click.option("--due", default="", help="Due date (YYYY-MM-DD [HH:mm[:ss]])")
    @click.option("--checklist-items", default="", help="Checklist items (name1, name2, ...)")
    def add_task_cmd(
        name: str,
        notes: str,
        tags: str,
        area_name: str,
        project_name: str,
        due: str,
        checklist_items: str,
    ) -> None:
        if not name.strip():
            raise click.ClickException("--name is required")
        try:
            kind, destination = resolve_destination(area_name, project_name)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
        callback(name, notes, tags, kind, destination, due, checklist_items)

    return add_task_cmd


def new_edit_task_cmd(
    callback: Callable[[str, str, str, str, str, str, str, str, str, str], None],
) -> click.Command:
    @click.command(name="edit-task", help="Edit a task (by name)")
    @click.option("--name", "source_name", default="", help="Task name to edit")
    @click.option("--id", "source_id", default="", help="Task ID to edit")
    @click.option("--new-name", default="", help="New name")
    @click.option("--notes", default="", help="New notes")
    @click.option("--tags", default="", help="Tags")
    @click.option("--move-to", default="", help="New area")
    @click.option("--due", default="", help="New due date")
    @click.option("--completion", default="", help="Completion date")
    @click.option("--creation", default="", help="Creation date")
    @click.option("--cancel", default="", help="Cancellation date")
    def edit_task_cmd(
        source_name: str,
        source_id: str,
        new_name: str,
        notes: str,
        tags: str,
        move_to: str,
        due: str,
        completion: str,
        creation: str,
        cancel: str,
    ) -> None:
        source_name, source_id = _entity(source_name, source_id)
        callback(
            source_name, source_id, new_name, notes, tags, move_to, due, completion, creation, cancel
        )

    return edit_task_cmd


def new_delete_task_cmd(
    use: str, short: str, callback: Callable[[str, str], None]
) -> click.Command:
    @click.command(name=use, help=short)
    @click.option("--name", default="", help="Task name")
    @click.option("--id", "item_id", default="", help="Task ID")
    def delete_task_cmd(name: str, item_id: str) -> None:
        name, item_id = _entity(name, item_id)
        callback(name, item_id)

    return delete_task_cmd