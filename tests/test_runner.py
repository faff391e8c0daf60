import pytest

from thingsagent.things.runner import Runner, ScriptError

BUNDLE = "com.culturedcode.ThingsMac"


def _install_fake_osascript(directory, body, monkeypatch):
    fake = directory / "osascript"
    fake.write_text("#!/bin/sh\n" + body)
    fake.chmod(0o755)
    monkeypatch.setenv("PATH", str(directory))


def test_runner_keeps_bundle_id():
    assert Runner(BUNDLE).bundle_id == BUNDLE


def test_run_and_ensure_reachable_succeed_with_fake(tmp_path, monkeypatch):
    _install_fake_osascript(tmp_path, "echo runner-ok\n", monkeypatch)
    runner = Runner(BUNDLE)
    assert runner.ensure_reachable() is None
    assert runner.run('return "ok"') == "runner-ok"


def test_run_passes_script_as_argument(tmp_path, monkeypatch):
    _install_fake_osascript(tmp_path, 'printf "%s %s" "$1" "$2"\n', monkeypatch)
    assert Runner(BUNDLE).run('return "ok"') == '-e return "ok"'


def test_ensure_reachable_fails_with_bad_bundle(tmp_path, monkeypatch):
    _install_fake_osascript(tmp_path, 'echo "application not found" >&2\nexit 1\n', monkeypatch)
    runner = Runner("com.invalid.bundle")
    with pytest.raises(ScriptError) as info:
        runner.ensure_reachable()
    message = str(info.value)
    assert "Things app not found (com.invalid.bundle)" in message
    assert "application not found" in message


def test_run_error_includes_output(tmp_path, monkeypatch):
    _install_fake_osascript(tmp_path, "echo boom\nexit 3\n", monkeypatch)
    with pytest.raises(ScriptError, match="exit status 3: boom"):
        Runner(BUNDLE).run("x")


def test_run_missing_osascript(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    with pytest.raises(ScriptError):
        Runner(BUNDLE).run("x")


def test_run_timeout(tmp_path, monkeypatch):
    _install_fake_osascript(tmp_path, "exec sleep 5\n", monkeypatch)
    with pytest.raises(ScriptError, match="timed out"):
        Runner(BUNDLE).run("x", timeout=0.2)