"""Commands for listing and managing tags."""

from __future__ import annotations

from collections.abc import Callable

import click

__all__ = [
    "new_tags_list_cmd",
    "new_tags_search_cmd",
    "new_tags_add_cmd",
    "new_tags_edit_cmd",
    "new_tags_delete_cmd",
]


def new_tags_list_cmd(callback: Callable[[str], None]) -> click.Command:
    @click.command(name="list", help="List tags")
    @click.option("--query", default="", help="Optional filter by tag name")
    def list_cmd(query: str) -> None:
        callback(query)

    return list_cmd


def new_tags_search_cmd(callback: Callable[[str], None]) -> click.Command:
    @click.command(name="search", help="Search tags by name")
    @click.option("--query", required=True, help="Search text")
    def search_cmd(query: str) -> None:
        if not query.strip():
            raise click.ClickException("--query is required")
        callback(query)

    return search_cmd


def new_tags_add_cmd(callback: Callable[[str, str], None]) -> click.Command:
    @click.command(name="add", help="Create a tag")
    @click.option("--name", required=True, help="Tag name")
    @click.option("--parent", default="", help="Parent tag name (optional)")
    def add_cmd(name: str, parent: str) -> None:
        if not name.strip():
            raise click.ClickException("--name is required")
        callback(name, parent)

    return add_cmd


def new_tags_edit_cmd(callback: Callable[[str, str, str, bool], None]) -> click.Command:
    """Edit command; an explicitly given empty ``--parent`` clears the parent."""

    @click.command(name="edit", help="Edit a tag")
    @click.option("--name", required=True, help="Existing tag name")
    @click.option("--new-name", default="", help="New tag name")
    @click.option("--parent", default=None, help="Parent tag name (empty to clear parent)")
    def edit_cmd(name: str, new_name: str, parent: str | None) -> None:
        name = name.strip()
        new_name = new_name.strip()
        parent_changed = parent is not None
        parent = (parent or "").strip()
        if not name:
            raise click.ClickException("--name is required")
        if not new_name and not parent_changed:
            raise click.ClickException("provide --new-name and/or --parent")
        callback(name, new_name, parent, parent_changed)

    return edit_cmd


def new_tags_delete_cmd(callback: Callable[[str], None]) -> click.Command:
    @click.command(name="delete", help="Delete a tag")
    @click.option("--name", required=True, help="Tag name")
    def delete_cmd(name: str) -> None:
        if not name.strip():
            raise click.ClickException("--name is required")
        callback(name)

    return delete_cmd