from click.testing import CliRunner

from thingsagent.cli.subtask_cmds import (
    new_add_checklist_item_cmd,
    new_add_child_task_cmd,
    new_delete_child_task_cmd,
    new_edit_child_task_cmd,
    new_list_child_tasks_cmd,
)


def _recorder():
    calls = []

    def callback(*args):
        calls.append(args)

    return calls, callback


def test_add_checklist_item():
    calls, cb = _recorder()
    runner = CliRunner()
    ok = runner.invoke(new_add_checklist_item_cmd(cb), ["--task", "Task A", "--name", " item "])
    assert ok.exit_code == 0
    assert calls == [("Task A", "", "item")]
    no_parent = runner.invoke(new_add_checklist_item_cmd(cb), ["--name", "item"])
    assert "exactly one of --task or --task-id is required" in no_parent.output
    blank = runner.invoke(new_add_checklist_item_cmd(cb), ["--task-id", "t", "--name", "  "])
    assert "--name is required" in blank.output
    assert len(calls) == 1


def test_list_child_tasks():
    calls, cb = _recorder()
    runner = CliRunner()
    assert runner.invoke(new_list_child_tasks_cmd(cb), ["--parent-id", "p-1"]).exit_code == 0
    assert calls == [("", "p-1")]
    both = runner.invoke(new_list_child_tasks_cmd(cb), ["--parent", "P", "--parent-id", "p-1"])
    assert "exactly one of --parent or --parent-id is allowed" in both.output
    assert len(calls) == 1


def test_add_child_task_trims():
    calls, cb = _recorder()
    result = CliRunner().invoke(
        new_add_child_task_cmd(cb), ["--parent", "P", "--name", " sub ", "--notes", " n "]
    )
    assert result.exit_code == 0
    assert calls == [("P", "", "sub", "n")]


def test_edit_child_task_by_parent_and_index():
    calls, cb = _recorder()
    result = CliRunner().invoke(
        new_edit_child_task_cmd(cb), ["--parent", "P", "--index", "2", "--new-name", "new"]
    )
    assert result.exit_code == 0
    assert calls == [("P", "", "", "", 2, "new", "")]


def test_edit_child_task_by_id_and_errors():
    calls, cb = _recorder()
    runner = CliRunner()
    ok = runner.invoke(new_edit_child_task_cmd(cb), ["--id", "child-1", "--notes", "note"])
    assert ok.exit_code == 0
    assert calls[0][3] == "child-1"
    assert calls[0][4] == 0
    mixed = runner.invoke(new_edit_child_task_cmd(cb), ["--id", "child-1", "--parent", "P", "--notes", "x"])
    assert "use either --id or a parent selector with --name/--index" in mixed.output
    nothing = runner.invoke(new_edit_child_task_cmd(cb), ["--parent", "P", "--name", "sub"])
    assert "provide --new-name and/or --notes" in nothing.output
    assert len(calls) == 1


def test_delete_child_task():
    calls, cb = _recorder()
    cmd = new_delete_child_task_cmd("complete-child-task", "Complete a child task", cb)
    assert cmd.name == "complete-child-task"
    runner = CliRunner()
    ok = runner.invoke(cmd, ["--parent", "P", "--name", "sub"])
    assert ok.exit_code == 0
    assert calls == [("P", "", "sub", "", 0)]
    missing = runner.invoke(cmd, ["--parent", "P"])
    assert "provide --id or --index (>=1) or --name" in missing.output
    assert len(calls) == 1