"""Commands that list and search lists, areas, projects and tasks."""

from __future__ import annotations

from collections.abc import Callable

import click

__all__ = [
    "new_lists_cmd",
    "new_areas_cmd",
    "new_projects_cmd",
    "new_tasks_cmd",
    "new_search_cmd",
]

_JSON_HELP = "Output structured JSON"
_LIST_HELP = "Limit to a Things list or area"


def new_lists_cmd(callback: Callable[[], None]) -> click.Command:
    @click.command(name="lists", help="List Things areas and built-in lists")
    def lists_cmd() -> None:
        callback()

    return lists_cmd


def new_areas_cmd(callback: Callable[[], None]) -> click.Command:
    @click.command(name="areas", help="List Things areas")
    def areas_cmd() -> None:
        callback()

    return areas_cmd


def new_projects_cmd(callback: Callable[[bool], None]) -> click.Command:
    @click.command(name="projects", help="List projects")
    @click.option("--json", "json_output", is_flag=True, default=False, help=_JSON_HELP)
    def projects_cmd(json_output: bool) -> None:
        callback(json_output)

    return projects_cmd


def new_tasks_cmd(callback: Callable[[str, str, bool], None]) -> click.Command:
    @click.command(name="tasks", help="List tasks (optionally filtered)")
    @click.option("--list", "list_name", default="", help=_LIST_HELP)
    @click.option("--query", default="", help="Filter by name / notes")
    @click.option("--json", "json_output", is_flag=True, default=False, help=_JSON_HELP)
    def tasks_cmd(list_name: str, query: str, json_output: bool) -> None:
        callback(list_name, query, json_output)

    return tasks_cmd


def new_search_cmd(callback: Callable[[str, str, bool], None]) -> click.Command:
    @click.command(name="search", help="Search tasks")
    @click.option("--query", required=True, help="Search text")
    @click.option("--list", "list_name", default="", help=_LIST_HELP)
    @click.option("--json", "json_output", is_flag=True, default=False, help=_JSON_HELP)
    def search_cmd(query: str, list_name: str, json_output: bool) -> None:
        if not query.strip():
            raise click.ClickException("--query is required")
        callback(list_name, query, json_output)

    return search_cmd