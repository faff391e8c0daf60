"""Small standalone commands: date, version and the command groups."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import click

__all__ = [
    "format_current_date",
    "new_date_cmd",
    "new_version_cmd",
    "new_tags_root_cmd",
    "new_url_root_cmd",
]

_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def _local_now() -> datetime:
    return datetime.now().astimezone()


def format_current_date(now: datetime) -> str:
    """Format as ``Weekday YYYY-MM-DD HH:MM:SS ZONE``."""
    if now.tzinfo is None:
        now = now.astimezone()
    zone = now.tzname() or ""
    return f"{_WEEKDAYS[now.weekday()]} {now:%Y-%m-%d %H:%M:%S} {zone}"


def new_date_cmd(now: Callable[[], datetime] | None = None) -> click.Command:
    clock = now or _local_now

    @click.command(name="date", help="Show current weekday, date, time, and timezone")
    def date_cmd() -> None:
        click.echo(format_current_date(clock()))

    return date_cmd


def new_version_cmd(version: Callable[[], str]) -> click.Command:
    @click.command(name="version", help="Show CLI version")
    def version_cmd() -> None:
        click.echo(f"things {version()}")

    return version_cmd


def _group(name: str, help_text: str, subcommands: tuple[click.Command, ...]) -> click.Group:
    group = click.Group(name=name, help=help_text)
    for command in subcommands:
        group.add_command(command)
    return group


def new_tags_root_cmd(*args: click.Command) -> click.Group:
    return _group("tags", "Manage Things tags", args)


def new_url_root_cmd(*args: click.Command) -> click.Group:
    return _group("url", "Things URL Scheme commands (official API)", args)