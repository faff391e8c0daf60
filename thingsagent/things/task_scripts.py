"""AppleScript builders for creating and editing tasks and projects."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from thingsagent.things.helpers import (
    escape_apple,
    parse_csv_list,
    script_list_literal,
    things_query_escape,
    url_encode_checklist,
)
from thingsagent.things.query_scripts import (
    script_resolve_project_ref,
    script_resolve_task_ref,
)

__all__ = [
    "script_add_task_to_area",
    "script_add_task_to_project",
    "script_set_checklist_by_id",
    "script_append_checklist_by_name",
    "script_append_checklist_by_ref",
    "script_add_project",
    "script_edit_task",
    "script_edit_project",
    "script_edit_project_ref",
    "script_set_task_notes",
    "script_append_task_notes",
    "script_set_task_date",
    "script_set_task_deadline_by_ref",
    "script_set_task_deadline_by_name",
    "script_clear_task_deadline_by_name",
    "script_clear_task_deadline_by_ref",
    "script_set_task_tags",
    "script_add_task_tags",
    "script_remove_task_tags",
]

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _tell(bundle_id: str) -> str:
    return f'tell application id "{bundle_id}"\n'


def _task_property_parts(name: str, notes: str, tags: str) -> list[str]:
    parts = [f'name:"{escape_apple(name)}"']
    if notes.strip():
        parts.append(f'notes:"{escape_apple(notes)}"')
    if tags.strip():
        tag_text = ", ".join(parse_csv_list(tags))
        parts.append(f'tag names:"{escape_apple(tag_text)}"')
    return parts


def _date_assignment(var_name: str, property_name: str, normalized: str) -> str:
    """Script lines building a date variable and optionally assigning it to ``t``.

    Values not in ``YYYY-MM-DD HH:MM:SS`` form are handed to AppleScript's own
    date parser instead.
    """
    normalized = normalized.strip()
    if not normalized:
        return ""
    try:
        parsed = datetime.strptime(normalized, _DATE_FORMAT)
    except ValueError:
        return f'  set {property_name} of t to date "{normalized}"\n'
    month_name = _MONTH_NAMES[parsed.month - 1]
    seconds = parsed.hour * 3600 + parsed.minute * 60 + parsed.second
    script = (
        f"  set {var_name} to current date\n"
        f"  set year of {var_name} to {parsed.year}\n"
        f"  set month of {var_name} to {month_name}\n"
        f"  set day of {var_name} to {parsed.day}\n"
        f"  set time of {var_name} to {seconds}\n"
    )
    if property_name.strip():
        script += f"  set {property_name} of t to {var_name}\n"
    return script


def _append_due_date(script: str, due: str) -> str:
    if due.strip():
        script += _date_assignment("dueDateValue", "due date", due)
    return script + "  return id of t\nend tell"


def script_add_task_to_area(
    bundle_id: str, area_name: str, name: str, notes: str, tags: str, due: str
) -> str:
    parts = ", ".join(_task_property_parts(name, notes, tags))
    script = (
        _tell(bundle_id)
        + f'  set targetList to first list whose name is "{escape_apple(area_name)}"\n'
        + f"  set t to make new «class tstk» at end of to dos of targetList with properties {{{parts}}}\n"
    )
    return _append_due_date(script, due)


def script_add_task_to_project(
    bundle_id: str, project_name: str, name: str, notes: str, tags: str, due: str
) -> str:
    parts = ", ".join(_task_property_parts(name, notes, tags))
    script = (
        _tell(bundle_id)
        + f'  set targetProject to first project whose name is "{escape_apple(project_name)}"\n'
        + f"  set t to make new «class tstk» at end of to dos of targetProject with properties {{{parts}}}\n"
    )
    return _append_due_date(script, due)


def _url_update_tail(auth_token: str, query_suffix: str) -> str:
    token = escape_apple(things_query_escape(auth_token))
    return (
        "end tell\n"
        f'open location "things:///update?auth-token={token}&id=" & tid & "{query_suffix}"\n'
        "return tid"
    )


def script_set_checklist_by_id(
    bundle_id: str, task_id: str, items: Iterable[str], auth_token: str
) -> str:
    checklist = escape_apple(url_encode_checklist(items))
    return (
        _tell(bundle_id)
        + f'  set t to first to do whose id is "{escape_apple(task_id)}"\n'
        + "  set tid to id of t\n"
        + _url_update_tail(auth_token, f"&checklist-items={checklist}")
    )


def script_append_checklist_by_name(
    bundle_id: str, task_name: str, items: Iterable[str], auth_token: str
) -> str:
    return script_append_checklist_by_ref(bundle_id, task_name, "", items, auth_token)


def script_append_checklist_by_ref(
    bundle_id: str, task_name: str, task_id: str, items: Iterable[str], auth_token: str
) -> str:
    checklist = escape_apple(url_encode_checklist(items))
    return (
        _tell(bundle_id)
        + script_resolve_task_ref(task_name, task_id)
        + "  set tid to id of t\n"
        + _url_update_tail(auth_token, f"&append-checklist-items={checklist}")
    )


def script_add_project(bundle_id: str, list_name: str, name: str, notes: str) -> str:
    script = (
        _tell(bundle_id)
        + f'  set targetList to first list whose name is "{escape_apple(list_name)}"\n'
        + f'  set p to make new project at end of to dos of targetList with properties {{name:"{escape_apple(name)}"}}\n'
    )
    if notes.strip():
        script += f'  set notes of p to "{escape_apple(notes)}"\n'
    return script + "  return id of p\nend tell"


def script_edit_task(
    bundle_id: str,
    source_name: str,
    source_id: str,
    new_name: str,
    notes: str,
    tags: str,
    move_to: str,
    due: str,
    completion: str,
    creation: str,
    cancel: str,
) -> str:
    """Script applying every non-empty change to the selected task.

    Raises ValueError when neither a source name nor an id is given.
    """
    if not source_name.strip() and not source_id.strip():
        raise ValueError("source selector is required")
    script = _tell(bundle_id) + script_resolve_task_ref(source_name, source_id)
    if new_name.strip():
        script += f'  set name of t to "{escape_apple(new_name)}"\n'
    if notes.strip():
        script += f'  set notes of t to "{escape_apple(notes)}"\n'
    if tags.strip():
        tag_text = ", ".join(parse_csv_list(tags))
        script += f'  set tag names of t to "{escape_apple(tag_text)}"\n'
    if move_to.strip():
        script += (
            "  move t to end of to dos of "
            f'(first list whose name is "{escape_apple(move_to)}")\n'
        )
    if due.strip():
        script += _date_assignment("dueDateValue", "", due)
        script += "  schedule t for dueDateValue\n"
    if completion.strip():
        script += _date_assignment("completionDateValue", "completion date", completion)
    if creation.strip():
        script += _date_assignment("creationDateValue", "creation date", creation)
    if cancel.strip():
        script += _date_assignment("cancellationDateValue", "cancellation date", cancel)
    return script + "  return id of t\nend tell"


def _project_changes(new_name: str, notes: str) -> str:
    script = ""
    if new_name.strip():
        script += f'  set name of p to "{escape_apple(new_name)}"\n'
    if notes.strip():
        script += f'  set notes of p to "{escape_apple(notes)}"\n'
    return script + "  return id of p\nend tell"


def script_edit_project(bundle_id: str, source: str, new_name: str, notes: str) -> str:
    return (
        _tell(bundle_id)
        + f'  set p to first project whose name is "{escape_apple(source)}"\n'
        + _project_changes(new_name, notes)
    )


def script_edit_project_ref(
    bundle_id: str, source_name: str, source_id: str, new_name: str, notes: str
) -> str:
    return (
        _tell(bundle_id)
        + script_resolve_project_ref(source_name, source_id)
        + _project_changes(new_name, notes)
    )


def script_set_task_notes(bundle_id: str, task_name: str, task_id: str, notes: str) -> str:
    return (
        _tell(bundle_id)
        + script_resolve_task_ref(task_name, task_id)
        + f'  set notes of t to "{escape_apple(notes)}"\n'
        + "  return id of t\nend tell"
    )


def script_append_task_notes(
    bundle_id: str, task_name: str, task_id: str, notes: str, separator: str
) -> str:
    """Script appending notes, joined by ``separator`` (a newline when blank)."""
    if not separator.strip():
        separator = "\n"
    escaped_notes = escape_apple(notes)
    return (
        _tell(bundle_id)
        + script_resolve_task_ref(task_name, task_id)
        + '  if (notes of t is missing value) or (notes of t is "") then\n'
        + f'    set notes of t to "{escaped_notes}"\n'
        + "  else\n"
        + f'    set notes of t to (notes of t & "{escape_apple(separator)}" & "{escaped_notes}")\n'
        + "  end if\n"
        + "  return id of t\nend tell"
    )


def script_set_task_date(
    bundle_id: str, task_name: str, task_id: str, due_date: str, clear: bool
) -> str:
    script = _tell(bundle_id) + script_resolve_task_ref(task_name, task_id)
    if clear:
        script += "  set activation date of t to missing value\n"
    if due_date.strip():
        script += _date_assignment("dueDateValue", "", due_date)
        script += "  schedule t for dueDateValue\n"
    return script + "  return id of t\n\tend tell"


def script_set_task_deadline_by_ref(
    bundle_id: str, task_name: str, task_id: str, deadline_date: str, auth_token: str
) -> str:
    deadline = escape_apple(things_query_escape(deadline_date))
    return (
        _tell(bundle_id)
        + script_resolve_task_ref(task_name, task_id)
        + "  set tid to id of t\n"
        + _url_update_tail(auth_token, f"&deadline={deadline}")
    )


def script_set_task_deadline_by_name(
    bundle_id: str, task_name: str, deadline_date: str, auth_token: str
) -> str:
    return script_set_task_deadline_by_ref(bundle_id, task_name, "", deadline_date, auth_token)


def script_clear_task_deadline_by_name(bundle_id: str, task_name: str, auth_token: str) -> str:
    return script_set_task_deadline_by_ref(bundle_id, task_name, "", "", auth_token)


def script_clear_task_deadline_by_ref(
    bundle_id: str, task_name: str, task_id: str, auth_token: str
) -> str:
    return script_set_task_deadline_by_ref(bundle_id, task_name, task_id, "", auth_token)


def script_set_task_tags(
    bundle_id: str, task_name: str, task_id: str, tags: Iterable[str]
) -> str:
    tag_text = ", ".join(tags)
    return (
        _tell(bundle_id)
        + script_resolve_task_ref(task_name, task_id)
        + f'  set tag names of t to "{escape_apple(tag_text)}"\n'
        + "  return id of t\nend tell"
    )


_EXISTING_TAGS_BLOCK = """  set existingTags to {}
  try
    set existingTags to tag names of t
  end try
  if existingTags is missing value then
    set existingTags to {}
  else if class of existingTags is text then
    if (existingTags as string) is "" then
      set existingTags to {}
    else
      set AppleScript's text item delimiters to ", "
      set existingTags to text items of (existingTags as string)
      set AppleScript's text item delimiters to ""
    end if
  end if
"""


def script_add_task_tags(
    bundle_id: str, task_name: str, task_id: str, tags: Iterable[str]
) -> str:
    """Script merging ``tags`` into the task's existing tags."""
    return (
        _tell(bundle_id)
        + script_resolve_task_ref(task_name, task_id)
        + _EXISTING_TAGS_BLOCK
        + f"  repeat with aTag in {script_list_literal(tags)}\n"
        + "    set normalizedTag to aTag as string\n"
        + "    if not (normalizedTag is in existingTags) then\n"
        + "      set end of existingTags to normalizedTag\n"
        + "    end if\n"
        + "  end repeat\n"
        + "  set tag names of t to existingTags\n"
        + "  return id of t\nend tell"
    )


def script_remove_task_tags(
    bundle_id: str, task_name: str, task_id: str, tags: Iterable[str]
) -> str:
    """Script removing ``tags`` from the task's existing tags."""
    return (
        _tell(bundle_id)
        + script_resolve_task_ref(task_name, task_id)
        + _EXISTING_TAGS_BLOCK
        + "  set filteredTags to {}\n"
        + "  repeat with aTag in existingTags\n"
        + "    set normalizedTag to aTag as string\n"
        + f"    if not (normalizedTag is in {script_list_literal(tags)}) then\n"
        + "      set end of filteredTags to normalizedTag\n"
        + "    end if\n"
        + "  end repeat\n"
        + "  set tag names of t to filteredTags\n"
        + "  return id of t\nend tell"
    )