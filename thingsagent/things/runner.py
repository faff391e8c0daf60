"""Execution of AppleScript through osascript."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

__all__ = ["ScriptError", "Runner"]

_APP_NAME = "Things"


class ScriptError(RuntimeError):
    """Raised when a script cannot be run or exits with an error."""


@dataclass
class Runner:
    """Runs scripts against the app identified by ``bundle_id``."""

    bundle_id: str

    def run(self, script: str, timeout: float | None = None) -> str:
        """Run ``script`` and return its trimmed combined output."""
        try:
            completed = subprocess.run(
                ["osascript", "-e", script],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ScriptError(f"script timed out after {timeout}s") from exc
        except OSError as exc:
            raise ScriptError(f"{exc}: ") from exc
        output = (completed.stdout or "").strip()
        if completed.returncode != 0:
            raise ScriptError(f"exit status {completed.returncode}: {output}")
        return output

    def ensure_reachable(self) -> None:
        """Raise ScriptError unless the app answers a trivial script."""
        script = f'tell application id "{self.bundle_id}"\n  return name\nend tell'
        try:
            self.run(script)
        except ScriptError as exc:
            raise ScriptError(f"{_APP_NAME} app not found ({self.bundle_id}): {exc}") from exc