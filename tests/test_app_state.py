import pytest
from click.testing import CliRunner

from thingsagent.cli.app_state import (
    AppController,
    AppStateTimeoutError,
    OperationCancelledError,
    new_close_cmd,
    new_open_cmd,
    wait_for_app_state,
)


class FakeAppController(AppController):
    def __init__(self, running=None, error=None):
        self.running = list(running or [])
        self.error = error
        self.calls = 0

    def is_running(self, bundle_id):
        self.calls += 1
        if self.error is not None:
            raise self.error
        if not self.running:
            return False
        state = self.running[0]
        if len(self.running) > 1:
            self.running = self.running[1:]
        return state

    def quit(self, bundle_id):
        return None

    def activate(self, bundle_id):
        return None


def _no_sleep(_):
    return None


def test_waits_for_open():
    app = FakeAppController([False, True])
    assert wait_for_app_state(app, "bundle.id", True, 0.1, 0.001, _no_sleep) is None
    assert app.calls == 2


def test_waits_for_close():
    app = FakeAppController([True, False])
    wait_for_app_state(app, "bundle.id", False, 0.1, 0.001, _no_sleep)
    assert app.calls == 2


def test_returns_controller_errors():
    app = FakeAppController(error=RuntimeError("boom"))
    with pytest.raises(RuntimeError, match="boom"):
        wait_for_app_state(app, "bundle.id", True, 0.1, 0.001, _no_sleep)


def test_times_out_waiting_for_open():
    app = FakeAppController([False, False, False])
    with pytest.raises(AppStateTimeoutError, match="did not open"):
        wait_for_app_state(app, "bundle.id", True, 1e-9, 0.001, _no_sleep)


def test_times_out_waiting_for_close():
    app = FakeAppController([True, True, True])
    with pytest.raises(AppStateTimeoutError, match="did not close"):
        wait_for_app_state(app, "bundle.id", False, 1e-9, 0.001, _no_sleep)


def test_returns_cancellation():
    app = FakeAppController([False])
    with pytest.raises(OperationCancelledError):
        wait_for_app_state(app, "bundle.id", True, 0.1, 0.001, _no_sleep, lambda: True)


def test_uses_default_timeout_and_poll_when_unset():
    app = FakeAppController([False, True])
    wait_for_app_state(app, "bundle.id", True, 0, 0, None)
    assert app.calls == 2


def test_sleep_receives_poll_interval():
    app = FakeAppController([False, False, True])
    slept = []
    wait_for_app_state(app, "bundle.id", True, 10.0, 0.5, slept.append)
    assert slept == [0.5, 0.5]


def test_open_and_close_commands_call_back():
    calls = []
    runner = CliRunner()
    result = runner.invoke(new_open_cmd(lambda: calls.append("open")), [])
    assert result.exit_code == 0
    result = runner.invoke(new_close_cmd(lambda: calls.append("close")), [])
    assert result.exit_code == 0
    assert calls == ["open", "close"]


def test_open_command_help():
    result = CliRunner().invoke(new_open_cmd(lambda: None), ["--help"])
    assert "Open Things" in result.output