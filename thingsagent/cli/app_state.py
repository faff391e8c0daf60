"""Opening, closing and waiting for the app's running state."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable

import click

__all__ = [
    "AppController",
    "AppStateTimeoutError",
    "OperationCancelledError",
    "wait_for_app_state",
    "new_open_cmd",
    "new_close_cmd",
]

_APP_NAME = "Things"
_DEFAULT_TIMEOUT = 1.0
_DEFAULT_POLL = 0.01


class AppStateTimeoutError(TimeoutError):
    """Raised when the app does not reach the wanted state in time."""


class OperationCancelledError(RuntimeError):
    """Raised when a wait is cancelled before the app reaches its state."""


class AppController(ABC):
    """Controls a running application by bundle id."""

    @abstractmethod
    def is_running(self, bundle_id: str) -> bool:
        """Whether the application is running."""

    @abstractmethod
    def quit(self, bundle_id: str) -> None:
        """Ask the application to quit."""

    @abstractmethod
    def activate(self, bundle_id: str) -> None:
        """Launch or bring the application to the front."""


def wait_for_app_state(
    app: AppController,
    bundle_id: str,
    want_running: bool,
    timeout: float | None = None,
    poll: float | None = None,
    sleep: Callable[[float], None] | None = None,
    cancelled: Callable[[], bool] | None = None,
) -> None:
    """Poll until the app is running (or not) as wanted.

    Timeout and poll are in seconds; non-positive values fall back to one
    second and ten milliseconds. Errors from the controller propagate.
    """
    if timeout is None or timeout <= 0:
        timeout = _DEFAULT_TIMEOUT
    if poll is None or poll <= 0:
        poll = _DEFAULT_POLL
    if sleep is None:
        sleep = time.sleep

    deadline = time.monotonic() + timeout
    while True:
        if app.is_running(bundle_id) == want_running:
            return
        if cancelled is not None and cancelled():
            raise OperationCancelledError("operation cancelled")
        if time.monotonic() > deadline:
            verb = "open" if want_running else "close"
            raise AppStateTimeoutError(f"{_APP_NAME} did not {verb} within {timeout:g}s")
        sleep(poll)


def new_open_cmd(callback: Callable[[], None]) -> click.Command:
    @click.command(name="open", help="Open Things")
    def open_cmd() -> None:
        callback()

    return open_cmd


def new_close_cmd(callback: Callable[[], None]) -> click.Command:
    @click.command(name="close", help="Close Things")
    def close_cmd() -> None:
        callback()

    return close_cmd