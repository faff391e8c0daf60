"""Commands for checklist items and child tasks."""

from __future__ import annotations

from collections.abc import Callable

import click

from thingsagent.cli.selectors import (
    resolve_child_task_mutation_selector,
    resolve_parent_selector,
    resolve_task_parent_selector,
)

__all__ = [
    "new_add_checklist_item_cmd",
    "new_list_child_tasks_cmd",
    "new_add_child_task_cmd",
    "new_edit_child_task_cmd",
    "new_delete_child_task_cmd",
]


def _checked(resolver: Callable[..., tuple], *args: object) -> tuple:
    try:
        return resolver(*args)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def _child_target_options(command: Callable) -> Callable:
    for decorator in reversed(
        (
            click.option("--parent", "parent_name", default="", help="Parent item name"),
            click.option("--parent-id", default="", help="Parent item ID"),
            click.option("--name", "child_task_name", default="", help="Child task name"),
            click.option("--id", "child_task_id", default="", help="Child task ID"),
            click.option(
                "--index", "child_task_index", type=int, default=0, help="Child task index (1-based)"
            ),
        )
    ):
        command = decorator(command)
    return command


def new_add_checklist_item_cmd(callback: Callable[[str, str, str], None]) -> click.Command:
    @click.command(name="add-checklist-item", help="Add a native checklist item to a task")
    @click.option("--task", "task_name", default="", help="Task name parent")
    @click.option("--task-id", default="", help="Task ID parent")
    @click.option("--name", "item_name", required=True, help="Checklist item name")
    def add_item_cmd(task_name: str, task_id: str, item_name: str) -> None:
        task_name, task_id = _checked(resolve_task_parent_selector, task_name, task_id)
        item_name = item_name.strip()
        if not item_name:
            raise click.ClickException("--name is required")
        callback(task_name, task_id, item_name)

    return add_item_cmd


def new_list_child_tasks_cmd(callback: Callable[[str, str], None]) -> click.Command:
    @click.command(name="list-child-tasks", help="List child tasks for a parent item")
    @click.option("--parent", "parent_name", default="", help="Parent item name")
    @click.option("--parent-id", default="", help="Parent item ID")
    def list_cmd(parent_name: str, parent_id: str) -> None:
        parent_name, parent_id = _checked(resolve_parent_selector, parent_name, parent_id)
        callback(parent_name, parent_id)

    return list_cmd


def new_add_child_task_cmd(callback: Callable[[str, str, str, str], None]) -> click.Command:
    @click.command(name="add-child-task", help="Add a child task under a parent item")
    @click.option("--parent", "parent_name", default="", help="Parent item name")
    @click.option("--parent-id", default="", help="Parent item ID")
    @click.option("--name", "child_task_name", required=True, help="Child task name")
    @click.option("--notes", default="", help="Child task notes")
    def add_cmd(parent_name: str, parent_id: str, child_task_name: str, notes: str) -> None:
        parent_name, parent_id = _checked(resolve_parent_selector, parent_name, parent_id)
        child_task_name = child_task_name.strip()
        notes = notes.strip()
        if not child_task_name:
            raise click.ClickException("--name is required")
        callback(parent_name, parent_id, child_task_name, notes)

    return add_cmd


def new_edit_child_task_cmd(
    callback: Callable[[str, str, str, str, int, str, str], None],
) -> click.Command:
    """Edit command; the callback receives the resolved selector, the raw child id,
    the index, the new name and the notes."""

    @click.command(name="edit-child-task", help="Edit a child task")
    @_child_target_options
    @click.option("--new-name", default="", help="New name")
    @click.option("--notes", default="", help="New notes")
    def edit_cmd(
        parent_name: str,
        parent_id: str,
        child_task_name: str,
        child_task_id: str,
        child_task_index: int,
        new_name: str,
        notes: str,
    ) -> None:
        parent_name, parent_id, child_task_name, child_task_index = _checked(
            resolve_child_task_mutation_selector,
            parent_name,
            parent_id,
            child_task_name,
            child_task_id,
            child_task_index,
        )
        new_name = new_name.strip()
        notes = notes.strip()
        if not new_name and not notes:
            raise click.ClickException("provide --new-name and/or --notes")
        callback(
            parent_name, parent_id, child_task_name, child_task_id, child_task_index, new_name, notes
        )

    return edit_cmd


def new_delete_child_task_cmd(
    use: str, short: str, callback: Callable[[str, str, str, str, int], None]
) -> click.Command:
    @click.command(name=use, help=short)
    @_child_target_options
    def delete_cmd(
        parent_name: str,
        parent_id: str,
        child_task_name: str,
        child_task_id: str,
        child_task_index: int,
    ) -> None:
        parent_name, parent_id, child_task_name, child_task_index = _checked(
            resolve_child_task_mutation_selector,
            parent_name,
            parent_id,
            child_task_name,
            child_task_id,
            child_task_index,
        )
        callback(parent_name, parent_id, child_task_name, child_task_id, child_task_index)

    return delete_cmd