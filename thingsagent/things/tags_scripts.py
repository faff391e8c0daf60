"""AppleScript builders for tag management."""

from __future__ import annotations

from thingsagent.things.helpers import escape_apple

__all__ = ["script_list_tags", "script_add_tag", "script_edit_tag", "script_delete_tag"]


def script_list_tags(bundle_id: str, query: str) -> str:
    if query == "":
        return f'tell application id "{bundle_id}"\n  return name of every tag\nend tell'
    return f"""tell application id "{bundle_id}"
  set q to "{escape_apple(query)}"
  return name of (every tag whose name contains q)
end tell"""


def script_add_tag(bundle_id: str, name: str, parent: str) -> str:
    parent = escape_apple(parent)
    return f"""tell application id "{bundle_id}"
  set t to make new tag with properties {{name:"{escape_apple(name)}"}}
  if "{parent}" is not "" then
    set parent tag of t to first tag whose name is "{parent}"
  end if
  return name of t
end tell"""


def script_edit_tag(
    bundle_id: str, name: str, new_name: str, parent: str, parent_changed: bool
) -> str:
    new_name = escape_apple(new_name)
    parent = escape_apple(parent)
    changed = "true" if parent_changed else "false"
    return f"""tell application id "{bundle_id}"
  set t to first tag whose name is "{escape_apple(name)}"
  if "{new_name}" is not "" then
    set name of t to "{new_name}"
  end if
  if {changed} then
    if "{parent}" is "" then
      set parent tag of t to missing value
    else
      set parent tag of t to first tag whose name is "{parent}"
    end if
  end if
  return name of t
end tell"""


def script_delete_tag(bundle_id: str, name: str) -> str:
    return f"""tell application id "{bundle_id}"
  set t to first tag whose name is "{escape_apple(name)}"
  delete t
  return "ok"
end tell"""