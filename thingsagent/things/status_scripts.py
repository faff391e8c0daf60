"""AppleScript builders for deletion and completion state."""

from __future__ import annotations

from thingsagent.things.helpers import escape_apple, things_query_escape
from thingsagent.things.query_scripts import (
    script_resolve_project_ref,
    script_resolve_task_ref,
)

__all__ = [
    "script_delete",
    "script_delete_task_ref",
    "script_delete_project_ref",
    "script_complete_task",
    "script_set_task_completion_by_ref",
]

_DELETE_SUBJECTS = {"task": "to do", "project": "project", "list": "list"}


def script_delete(bundle_id: str, kind: str, name: str) -> str:
    """Script deleting the first item of ``kind`` with the given name.

    Raises ValueError for an unknown kind.
    """
    try:
        subject = _DELETE_SUBJECTS[kind]
    except KeyError:
        raise ValueError(f"unknown kind: {kind}") from None
    return (
        f'tell application id "{bundle_id}"\n'
        f'  delete first {subject} whose name is "{escape_apple(name)}"\n'
        "end tell"
    )


def script_delete_task_ref(bundle_id: str, name: str, item_id: str) -> str:
    return (
        f'tell application id "{bundle_id}"\n'
        f"{script_resolve_task_ref(name, item_id)}  delete t\n"
        "end tell"
    )


def script_delete_project_ref(bundle_id: str, name: str, item_id: str) -> str:
    return (
        f'tell application id "{bundle_id}"\n'
        f"{script_resolve_project_ref(name, item_id)}  delete p\n"
        "end tell"
    )


def script_complete_task(bundle_id: str, name: str, item_id: str, done: bool) -> str:
    inner = script_set_task_completion_by_ref(
        bundle_id, name, item_id, done, "AUTH_TOKEN_PLACEHOLDER"
    )
    return f'tell application id "{bundle_id}"\n{inner}'


def script_set_task_completion_by_ref(
    bundle_id: str, name: str, item_id: str, done: bool, auth_token: str
) -> str:
    """Script marking a task completed or open through the URL scheme."""
    state = "true" if done else "false"
    token = escape_apple(things_query_escape(auth_token))
    tail = (
        "end tell\n"
        f'open location "things:///update?auth-token={token}&id=" & tid & "&completed={state}"\n'
        "return tid"
    )
    if item_id:
        return (
            f'tell application id "{bundle_id}"\n'
            f'  set tid to "{escape_apple(item_id)}"\n'
            f"{tail}"
        )
    return (
        f'tell application id "{bundle_id}"\n'
        f"{script_resolve_task_ref(name, item_id)}  set tid to id of t\n"
        f"{tail}"
    )