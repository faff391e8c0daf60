from click.testing import CliRunner

from thingsagent.cli.read_cmds import (
    new_areas_cmd,
    new_lists_cmd,
    new_projects_cmd,
    new_search_cmd,
    new_tasks_cmd,
)


def _invoke(command, args):
    return CliRunner().invoke(command, args)


def test_lists_and_areas_call_back():
    calls = []
    assert _invoke(new_lists_cmd(lambda: calls.append("lists")), []).exit_code == 0
    assert _invoke(new_areas_cmd(lambda: calls.append("areas")), []).exit_code == 0
    assert calls == ["lists", "areas"]


def test_projects_json_flag():
    calls = []
    command = new_projects_cmd(calls.append)
    _invoke(command, [])
    _invoke(command, ["--json"])
    assert calls == [False, True]


def test_tasks_passes_filters():
    calls = []
    command = new_tasks_cmd(lambda *a: calls.append(a))
    result = _invoke(command, ["--list", "Inbox", "--query", "alpha", "--json"])
    assert result.exit_code == 0
    assert calls == [("Inbox", "alpha", True)]


def test_tasks_defaults_are_empty():
    calls = []
    _invoke(new_tasks_cmd(lambda *a: calls.append(a)), [])
    assert calls == [("", "", False)]


def test_search_passes_query():
    calls = []
    result = _invoke(new_search_cmd(lambda *a: calls.append(a)), ["--query", "beta", "--list", "Today"])
    assert result.exit_code == 0
    assert calls == [("Today", "beta", False)]


def test_search_rejects_blank_query():
    calls = []
    result = _invoke(new_search_cmd(lambda *a: calls.append(a)), ["--query", "   "])
    assert result.exit_code == 1
    assert "--query is required" in result.output
    assert calls == []


def test_search_requires_query_option():
    calls = []
    result = _invoke(new_search_cmd(lambda *a: calls.append(a)), [])
    assert result.exit_code != 0
    assert calls == []