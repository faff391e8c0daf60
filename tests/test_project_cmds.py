from click.testing import CliRunner

from thingsagent.cli.project_cmds import (
    new_add_area_cmd,
    new_add_project_cmd,
    new_delete_cmd,
    new_delete_project_cmd,
    new_edit_area_cmd,
    new_edit_project_cmd,
)


def _recorder():
    calls = []

    def callback(*args):
        calls.append(args)

    return calls, callback


def test_add_project_trims_area():
    calls, cb = _recorder()
    result = CliRunner().invoke(
        new_add_project_cmd(cb), ["--name", "Proj", "--notes", "n", "--area", "  Work "]
    )
    assert result.exit_code == 0
    assert calls == [("Proj", "n", "Work")]


def test_add_project_requires_area_and_name():
    calls, cb = _recorder()
    runner = CliRunner()
    no_area = runner.invoke(new_add_project_cmd(cb), ["--name", "Proj"])
    assert "destination is required: use --area" in no_area.output
    blank = runner.invoke(new_add_project_cmd(cb), ["--name", "  ", "--area", "A"])
    assert "--name is required" in blank.output
    missing = runner.invoke(new_add_project_cmd(cb), ["--area", "A"])
    assert missing.exit_code == 2
    assert calls == []


def test_add_area():
    calls, cb = _recorder()
    runner = CliRunner()
    assert runner.invoke(new_add_area_cmd(cb), ["--name", "Home"]).exit_code == 0
    assert calls == [("Home",)]
    blank = runner.invoke(new_add_area_cmd(cb), ["--name", " "])
    assert "--name is required" in blank.output
    assert len(calls) == 1


def test_edit_project():
    calls, cb = _recorder()
    runner = CliRunner()
    ok = runner.invoke(new_edit_project_cmd(cb), ["--id", "p-1", "--new-name", "Project B"])
    assert ok.exit_code == 0
    assert calls == [("", "p-1", "Project B", "")]
    nothing = runner.invoke(new_edit_project_cmd(cb), ["--name", "Project A"])
    assert "specify --new-name and/or --notes" in nothing.output
    both = runner.invoke(new_edit_project_cmd(cb), ["--name", "A", "--id", "p", "--notes", "x"])
    assert "exactly one of --name or --id is allowed" in both.output
    assert len(calls) == 1


def test_edit_area():
    calls, cb = _recorder()
    runner = CliRunner()
    ok = runner.invoke(new_edit_area_cmd(cb), ["--name", "Old", "--new-name", "New"])
    assert ok.exit_code == 0
    assert calls == [("Old", "New")]
    no_new = runner.invoke(new_edit_area_cmd(cb), ["--name", "Old"])
    assert "--new-name is required" in no_new.output
    assert len(calls) == 1


def test_delete_project():
    calls, cb = _recorder()
    runner = CliRunner()
    ok = runner.invoke(new_delete_project_cmd(cb), ["--name", " Proj "])
    assert ok.exit_code == 0
    assert calls == [("Proj", "")]
    none = runner.invoke(new_delete_project_cmd(cb), [])
    assert "exactly one of --name or --id is required" in none.output
    assert len(calls) == 1


def test_delete_cmd_passes_kind():
    calls, cb = _recorder()
    cmd = new_delete_cmd("list", "delete-list", "Delete a list", cb)
    assert cmd.name == "delete-list"
    result = CliRunner().invoke(cmd, ["--name", "Inbox"])
    assert result.exit_code == 0
    assert calls == [("list", "Inbox")]