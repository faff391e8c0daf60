"""AppleScript builders for id resolution and item reordering."""

from __future__ import annotations

from collections.abc import Iterable

from thingsagent.things.helpers import escape_apple
from thingsagent.things.query_scripts import (
    script_resolve_project_ref,
    script_resolve_task_ref,
)

__all__ = [
    "script_resolve_area_ref",
    "script_resolve_task_id",
    "script_resolve_project_id",
    "script_reorder_project_items",
    "script_reorder_area_items",
]


def script_resolve_area_ref(area_name: str, area_id: str) -> str:
    """Script fragment setting ``a`` to the matched area."""
    area_name = escape_apple(area_name.strip())
    area_id = escape_apple(area_id.strip())
    field, value = ("id", area_id) if area_id else ("name", area_name)
    return f"""  try
    set a to first area whose {field} is "{value}"
  on error errMsg
    error errMsg
  end try
"""


def script_resolve_task_id(bundle_id: str, task_name: str) -> str:
    return (
        f'tell application id "{bundle_id}"\n'
        f"{script_resolve_task_ref(task_name, '')}  return id of t\n"
        "end tell"
    )


def script_resolve_project_id(bundle_id: str, project_name: str) -> str:
    return (
        f'tell application id "{bundle_id}"\n'
        f"{script_resolve_project_ref(project_name, '')}  return id of p\n"
        "end tell"
    )


def script_reorder_project_items(
    bundle_id: str, project_name: str, project_id: str, ids: Iterable[str]
) -> str:
    joined = escape_apple(",".join(ids))
    return (
        f'tell application id "{bundle_id}"\n'
        f"{script_resolve_project_ref(project_name, project_id)}"
        f'  _private_experimental_ reorder to dos in p with ids "{joined}"\n'
        '  return "ok"\n'
        "end tell"
    )


def script_reorder_area_items(
    bundle_id: str, area_name: str, area_id: str, ids: Iterable[str]
) -> str:
    joined = escape_apple(",".join(ids))
    return (
        f'tell application id "{bundle_id}"\n'
        f"{script_resolve_area_ref(area_name, area_id)}"
        f'  _private_experimental_ reorder to dos in a with ids "{joined}"\n'
        '  return "ok"\n'
        "end tell"
    )