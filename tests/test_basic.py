import re
from datetime import datetime, timedelta, timezone

import click
from click.testing import CliRunner

from thingsagent.cli.basic import (
    format_current_date,
    new_date_cmd,
    new_tags_root_cmd,
    new_url_root_cmd,
    new_version_cmd,
)

FIXED = datetime(2026, 3, 8, 7, 18, 8, tzinfo=timezone(timedelta(hours=-3), "-03"))


def test_format_current_date():
    assert format_current_date(FIXED) == "Sunday 2026-03-08 07:18:08 -03"


def test_format_current_date_for_naive_time_keeps_fields():
    text = format_current_date(datetime(2026, 3, 8, 7, 18, 8))
    assert text.startswith("Sunday 2026-03-08 07:18:08 ")
    assert len(text) > len("Sunday 2026-03-08 07:18:08 ")


def test_date_command_prints_formatted_now():
    result = CliRunner().invoke(new_date_cmd(lambda: FIXED), [])
    assert result.exit_code == 0
    assert result.output == "Sunday 2026-03-08 07:18:08 -03\n"


def test_date_command_default_clock():
    result = CliRunner().invoke(new_date_cmd(), [])
    assert result.exit_code == 0
    assert re.match(
        r"^[A-Z][a-z]+ \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} .+\n$", result.output
    )


def test_version_command():
    result = CliRunner().invoke(new_version_cmd(lambda: "dev"), [])
    assert result.exit_code == 0
    assert result.output == "things dev\n"


def _echo_cmd(name, text):
    @click.command(name=name)
    def cmd():
        click.echo(text)

    return cmd


def test_tags_root_groups_subcommands():
    group = new_tags_root_cmd(_echo_cmd("list", "listed"), _echo_cmd("add", "added"))
    assert group.name == "tags"
    assert sorted(group.commands) == ["add", "list"]
    result = CliRunner().invoke(group, ["list"])
    assert result.exit_code == 0
    assert result.output == "listed\n"


def test_url_root_groups_subcommands():
    group = new_url_root_cmd(_echo_cmd("show", "shown"))
    assert group.name == "url"
    result = CliRunner().invoke(group, ["show"])
    assert result.output == "shown\n"
    result = CliRunner().invoke(group, ["--help"])
    assert "Things URL Scheme commands (official API)" in result.output