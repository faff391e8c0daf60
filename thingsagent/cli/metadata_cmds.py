"""Commands that set tags, notes and dates on tasks."""

from __future__ import annotations

from collections.abc import Callable

import click

from thingsagent.cli.selectors import resolve_entity_selector

__all__ = [
    "new_set_tags_cmd",
    "new_set_task_tags_cmd",
    "new_add_task_tags_cmd",
    "new_remove_task_tags_cmd",
    "new_set_task_notes_cmd",
    "new_append_task_notes_cmd",
    "new_set_task_date_cmd",
]

_TAGS_HELP = "Comma-separated tags"


def _entity(name: str, item_id: str) -> tuple[str, str]:
    try:
        return resolve_entity_selector(name, item_id)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def _tags_command(
    use: str, short: str, id_help: str, callback: Callable[[str, str, str], None]
) -> click.Command:
    @click.command(name=use, help=short)
    @click.option("--name", default="", help="Task name")
    @click.option("--id", "item_id", default="", help=id_help)
    @click.option("--tags", required=True, help=_TAGS_HELP)
    def tags_cmd(name: str, item_id: str, tags: str) -> None:
        name, item_id = _entity(name, item_id)
        callback(name, item_id, tags)

    return tags_cmd


def new_set_tags_cmd(callback: Callable[[str, str, str], None]) -> click.Command:
    return _tags_command("set-tags", "Set tags on a task or project", "Task or project ID", callback)


def new_set_task_tags_cmd(callback: Callable[[str, str, str], None]) -> click.Command:
    return _tags_command("set-task-tags", "Set task tags exactly", "Task ID", callback)


def new_add_task_tags_cmd(callback: Callable[[str, str, str], None]) -> click.Command:
    return _tags_command(
        "add-task-tags", "Add tags to a task (merge with existing tags)", "Task ID", callback
    )


def new_remove_task_tags_cmd(callback: Callable[[str, str, str], None]) -> click.Command:
    return _tags_command("remove-task-tags", "Remove tags from a task", "Task ID", callback)


def new_set_task_notes_cmd(callback: Callable[[str, str, str], None]) -> click.Command:
    @click.command(name="set-task-notes", help="Set task notes")
    @click.option("--name", default="", help="Task name")
    @click.option("--id", "item_id", default="", help="Task ID")
    @click.option("--notes", required=True, help="New notes")
    def set_notes_cmd(name: str, item_id: str, notes: str) -> None:
        name, item_id = _entity(name, item_id)
        callback(name, item_id, notes)

    return set_notes_cmd


def new_append_task_notes_cmd(callback: Callable[[str, str, str, str], None]) -> click.Command:
    @click.command(name="append-task-notes", help="Append notes to task notes")
    @click.option("--name", default="", help="Task name")
    @click.option("--id", "item_id", default="", help="Task ID")
    @click.option("--notes", required=True, help="Text to append to notes")
    @click.option(
        "--separator",
        default="\n",
        show_default=False,
        help="Append separator (default: newline)",
    )
    def append_notes_cmd(name: str, item_id: str, notes: str, separator: str) -> None:
        name, item_id = _entity(name, item_id)
        callback(name, item_id, notes, separator)

    return append_notes_cmd


def new_set_task_date_cmd(
    callback: Callable[[str, str, str, str, bool, bool], None],
) -> click.Command:
    @click.command(name="set-task-date", help="Set/update task due date")
    @click.option("--name", default="", help="Task name")
    @click.option("--id", "item_id", default="", help="Task ID")
    @click.option("--due", default="", help="New due date (YYYY-MM-DD [HH:mm[:ss]])")
    @click.option("--deadline", default="", help="New deadline (YYYY-MM-DD [HH:mm[:ss]])")
    @click.option("--clear-due", is_flag=True, default=False, help="Clear due date")
    @click.option("--clear-deadline", is_flag=True, default=False, help="Clear deadline")
    def set_date_cmd(
        name: str,
        item_id: str,
        due: str,
        deadline: str,
        clear_due: bool,
        clear_deadline: bool,
    ) -> None:
        name, item_id = _entity(name, item_id)
        callback(name, item_id, due, deadline, clear_due, clear_deadline)

    return set_date_cmd