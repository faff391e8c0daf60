"""Launching the app with its network access sandboxed away."""

from __future__ import annotations

import glob
import os
import subprocess
from collections.abc import Callable

from thingsagent.things.helpers import escape_apple

__all__ = [
    "NETWORK_ISOLATION_NONE",
    "NETWORK_ISOLATION_SANDBOX_NO_NETWORK",
    "NetworkIsolationError",
    "new_offline_app_launch",
    "launch_app_sandbox_no_network",
    "resolve_app_bundle_path",
]

NETWORK_ISOLATION_NONE = "none"
NETWORK_ISOLATION_SANDBOX_NO_NETWORK = "sandbox-no-network"

OfflineAppLaunch = Callable[[str], None]


class NetworkIsolationError(RuntimeError):
    """Raised when an isolation mode is unknown or the offline launch fails."""


def new_offline_app_launch(mode: str) -> OfflineAppLaunch | None:
    """Return the launcher for ``mode``, or None when no isolation is wanted."""
    selected = mode.strip()
    if selected in ("", NETWORK_ISOLATION_NONE):
        return None
    if selected == NETWORK_ISOLATION_SANDBOX_NO_NETWORK:
        return launch_app_sandbox_no_network
    raise NetworkIsolationError(f"unsupported network isolation mode {mode!r}")


def launch_app_sandbox_no_network(bundle_id: str) -> None:
    """Start the app's executable under a sandbox profile that denies network."""
    app_path = resolve_app_bundle_path(bundle_id)
    exec_dir = os.path.join(app_path, "Contents", "MacOS")
    entries = sorted(glob.glob(os.path.join(glob.escape(exec_dir), "*")))
    if not entries:
        raise NetworkIsolationError(
            "launch Things offline: resolve app executable: no executable found"
        )
    try:
        subprocess.Popen(
            ["/usr/bin/sandbox-exec", "-n", "no-network", entries[0]],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise NetworkIsolationError(f"launch Things offline: {exc}") from exc


def resolve_app_bundle_path(bundle_id: str) -> str:
    """Ask the system for the filesystem path of the app with ``bundle_id``."""
    bundle_id = bundle_id.strip()
    if not bundle_id:
        raise NetworkIsolationError("resolve Things app path: empty bundle id")
    script = f'POSIX path of (path to application id "{escape_apple(bundle_id)}")'
    try:
        completed = subprocess.run(
            ["/usr/bin/osascript", "-e", script],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise NetworkIsolationError(f"resolve Things app path: {exc}") from exc
    output = (completed.stdout or "").strip()
    if completed.returncode != 0:
        reason = f"exit status {completed.returncode}"
        if not output:
            raise NetworkIsolationError(f"resolve Things app path: {reason}")
        raise NetworkIsolationError(f"resolve Things app path: {reason}: {output}")
    if not output:
        raise NetworkIsolationError("resolve Things app path: empty result")
    return output