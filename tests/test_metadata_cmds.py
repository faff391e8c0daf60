import pytest
from click.testing import CliRunner

from thingsagent.cli.metadata_cmds import (
    new_add_task_tags_cmd,
    new_append_task_notes_cmd,
    new_remove_task_tags_cmd,
    new_set_tags_cmd,
    new_set_task_date_cmd,
    new_set_task_notes_cmd,
    new_set_task_tags_cmd,
)


def _recorder():
    calls = []

    def callback(*args):
        calls.append(args)

    return calls, callback


@pytest.mark.parametrize(
    "factory, name",
    [
        (new_set_tags_cmd, "set-tags"),
        (new_set_task_tags_cmd, "set-task-tags"),
        (new_add_task_tags_cmd, "add-task-tags"),
        (new_remove_task_tags_cmd, "remove-task-tags"),
    ],
)
def test_tag_commands(factory, name):
    calls, cb = _recorder()
    cmd = factory(cb)
    assert cmd.name == name
    runner = CliRunner()
    ok = runner.invoke(cmd, ["--name", " task ", "--tags", "a,b"])
    assert ok.exit_code == 0
    assert calls == [("task", "", "a,b")]
    missing_tags = runner.invoke(cmd, ["--name", "task"])
    assert missing_tags.exit_code == 2
    no_selector = runner.invoke(cmd, ["--tags", "a"])
    assert "exactly one of --name or --id is required" in no_selector.output
    assert len(calls) == 1


def test_set_task_notes():
    calls, cb = _recorder()
    runner = CliRunner()
    ok = runner.invoke(new_set_task_notes_cmd(cb), ["--id", "t-1", "--notes", "hello"])
    assert ok.exit_code == 0
    assert calls == [("", "t-1", "hello")]
    missing = runner.invoke(new_set_task_notes_cmd(cb), ["--id", "t-1"])
    assert missing.exit_code == 2
    assert len(calls) == 1


def test_append_task_notes_default_separator():
    calls, cb = _recorder()
    result = CliRunner().invoke(new_append_task_notes_cmd(cb), ["--name", "task", "--notes", "note"])
    assert result.exit_code == 0
    assert calls == [("task", "", "note", "\n")]


def test_append_task_notes_custom_separator():
    calls, cb = _recorder()
    result = CliRunner().invoke(
        new_append_task_notes_cmd(cb), ["--name", "task", "--notes", "note", "--separator", " | "]
    )
    assert result.exit_code == 0
    assert calls == [("task", "", "note", " | ")]


def test_set_task_date():
    calls, cb = _recorder()
    runner = CliRunner()
    ok = runner.invoke(
        new_set_task_date_cmd(cb),
        ["--name", "task", "--due", "2026-03-06 00:00:00", "--clear-deadline"],
    )
    assert ok.exit_code == 0
    assert calls == [("task", "", "2026-03-06 00:00:00", "", False, True)]
    both = runner.invoke(new_set_task_date_cmd(cb), ["--name", "a", "--id", "b"])
    assert "exactly one of --name or --id is allowed" in both.output
    assert len(calls) == 1