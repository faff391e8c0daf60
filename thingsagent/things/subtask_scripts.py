"""AppleScript builders for child tasks and detailed item display."""

from __future__ import annotations

from thingsagent.things.helpers import escape_apple
from thingsagent.things.query_scripts import (
    script_resolve_item_ref,
    script_resolve_task_ref,
)

__all__ = [
    "script_list_child_tasks",
    "script_add_child_task",
    "script_find_child_task",
    "script_show_task",
    "script_edit_child_task",
    "script_delete_child_task",
    "script_set_child_task_status",
]

_GUARD = 'if class of t is not project then error "Child tasks are only supported on projects."'
_HAS_NOTES = '(notes of s is not missing value) and (notes of s is not "")'
_NO_CHILD = '"No child task found on this item."'

# Property names shown as dates, with the label each one gets.
_DATE_FIELDS = (
    ("Due", "activation date"),
    ("Deadline", "due date"),
    ("Completed on", "completion date"),
    ("Created on", "creation date"),
)


def _pad(level: int, text: str) -> str:
    return "  " * level + text


def _tell(bundle_id: str) -> str:
    return f'tell application id "{bundle_id}"\n'


def _notes_suffix(var: str, level: int) -> list[str]:
    return [
        _pad(level, f"if {_HAS_NOTES} then"),
        _pad(level + 1, f'set {var} to {var} & " | " & (notes of s)'),
        _pad(level, "end if"),
    ]


def _accumulate(acc: str, item: str, separator: str, level: int) -> list[str]:
    return [
        _pad(level, f'if {acc} is "" then'),
        _pad(level + 1, f"set {acc} to {item}"),
        _pad(level, "else"),
        _pad(level + 1, f"set {acc} to {acc} & {separator} & {item}"),
        _pad(level, "end if"),
    ]


def _count_match(level: int) -> list[str]:
    return [
        _pad(level, "set matchedCount to matchedCount + 1"),
        _pad(level, "set s to contents of childTaskRef"),
    ]


def _append_out(label: str, expr: str | None = None) -> str:
    text = f'set out to out & linefeed & "{label}: "'
    return text if expr is None else f"{text} & {expr}"


def script_list_child_tasks(bundle_id: str, parent_name: str, parent_id: str) -> str:
    """Script reporting the child tasks of a project, prefixed by a status line."""
    lines = [
        _pad(1, "try"),
        _pad(2, _GUARD),
        _pad(2, "set childTasks to to dos of t"),
        _pad(1, "on error errMsg number errNum"),
        _pad(
            2,
            'return "status:unsupported" & linefeed & "code:" & (errNum as string)'
            ' & linefeed & "message:" & errMsg',
        ),
        _pad(1, "end try"),
        _pad(1, "if (count childTasks) is 0 then"),
        _pad(2, 'return "status:empty"'),
        _pad(1, "end if"),
        _pad(1, 'set out to "status:ok"'),
        _pad(1, "repeat with i from 1 to count childTasks"),
        _pad(2, "set s to item i of childTasks"),
        _pad(
            2,
            'set childTaskLine to (i as string) & ". " & (name of s)'
            ' & " (id: " & (id of s) & ")"',
        ),
        *_notes_suffix("childTaskLine", 2),
        _pad(2, "set out to out & linefeed & childTaskLine"),
        _pad(1, "end repeat"),
        _pad(1, "return out"),
        "end tell",
    ]
    return (
        _tell(bundle_id)
        + script_resolve_item_ref(parent_name, parent_id)
        + "\n".join(lines)
    )


def script_add_child_task(
    bundle_id: str, parent_name: str, parent_id: str, child_task_name: str, notes: str
) -> str:
    """Script creating a child task at the end of a project and returning its id."""
    script = (
        _tell(bundle_id)
        + script_resolve_item_ref(parent_name, parent_id)
        + _pad(1, _GUARD) + "\n"
        + _pad(1, "try") + "\n"
        + _pad(
            2,
            "set s to make new to do at end of to dos of t with properties "
            f'{{name:"{escape_apple(child_task_name)}"}}',
        )
        + "\n"
    )
    if notes.strip():
        script += _pad(1, f'set notes of s to "{escape_apple(notes)}"') + "\n"
    tail = [
        _pad(1, "return id of s"),
        _pad(1, "on error"),
        _pad(2, 'error "Cannot add a child task to this item."'),
        _pad(1, "end try"),
        "end tell",
    ]
    return script + "\n".join(tail)


def _fallback_lookup(var: str, list_name: str, name: str) -> list[str]:
    name_match = f'(name of childTaskRef as string) is "{name}"'
    same_parent = (
        "(project of childTaskRef is not missing value)"
        " and ((id of project of childTaskRef) is (id of t))"
    )
    return [
        _pad(3, "try"),
        _pad(4, f'set {var} to every to do of list "{list_name}" whose name is "{name}"'),
        _pad(4, f"repeat with childTaskRef in {var}"),
        _pad(5, "try"),
        _pad(6, f"if {same_parent} and ({name_match}) then"),
        *_count_match(7),
        _pad(6, "end if"),
        _pad(5, "end try"),
        _pad(4, "end repeat"),
        _pad(3, "end try"),
    ]


def script_find_child_task(
    bundle_id: str,
    parent_name: str,
    parent_id: str,
    child_task_name: str,
    child_task_id: str,
    index: int,
) -> str:
    """Open script fragment setting ``s`` to the selected child task.

    The returned text leaves the ``tell`` block open for further statements.
    """
    child_task_name = child_task_name.strip()
    child_task_id = child_task_id.strip()
    if child_task_id:
        return (
            _tell(bundle_id)
            + script_resolve_task_ref("", child_task_id)
            + _pad(1, "set s to t") + "\n"
        )
    name = escape_apple(child_task_name)
    lines = [
        _pad(1, _GUARD),
        _pad(1, "set childTasks to to dos of t"),
        _pad(1, f"if {index} > 0 then"),
        _pad(2, f"if (count childTasks) < {index} then error {_NO_CHILD}"),
        _pad(2, f"set s to item {index} of childTasks"),
        _pad(1, "else"),
        _pad(2, "set matchedCount to 0"),
        _pad(2, "repeat with childTaskRef in childTasks"),
        _pad(3, f'if (name of childTaskRef as string) is "{name}" then'),
        *_count_match(4),
        _pad(3, "end if"),
        _pad(2, "end repeat"),
        _pad(2, "if matchedCount is 0 then"),
        *_fallback_lookup("logbookMatches", "Logbook", name),
        *_fallback_lookup("archiveMatches", "Archive", name),
        _pad(2, "end if"),
        _pad(2, f"if matchedCount is 0 then error {_NO_CHILD}"),
        _pad(
            2,
            "if matchedCount is greater than 1 then error"
            ' "Ambiguous child task name on this item; use --index."',
        ),
        _pad(1, "end if"),
    ]
    return (
        _tell(bundle_id)
        + script_resolve_item_ref(parent_name, parent_id)
        + "\n".join(lines)
        + "\n"
    )


def _show_handlers() -> str:
    def pad2(expr: str) -> str:
        return f"my pad2({expr})"

    iso = " & ".join(
        [
            "(year of d as string)", '"-"', pad2("(month of d) as integer"),
            '"-"', pad2("day of d"), '" "', pad2("hours of d"),
            '":"', pad2("minutes of d"), '":"', pad2("seconds of d"),
        ]
    )
    lines = [
        "on pad2(v)",
        _pad(1, "set s to (v as integer) as string"),
        _pad(1, 'if (count s) is 1 then return "0" & s'),
        _pad(1, "return s"),
        "end pad2",
        "",
        "on isoDateValue(d)",
        _pad(1, f"return {iso}"),
        "end isoDateValue",
    ]
    return "\n".join(lines) + "\n\n"


def _show_field_lines() -> list[str]:
    lines = [
        _pad(1, 'set out to "ID: " & (id of t)'),
        _pad(1, _append_out("Name", "(name of t)")),
        _pad(1, _append_out("Type", "(class of t as string)")),
        _pad(1, _append_out("Statut", "(status of t as string)")),
    ]
    for label, prop in _DATE_FIELDS:
        lines += [
            _pad(1, f"if {prop} of t is not missing value then"),
            _pad(2, _append_out(label, f"my isoDateValue({prop} of t)")),
            _pad(1, "else"),
            _pad(2, _append_out(label)),
            _pad(1, "end if"),
        ]
    lines += [
        _pad(1, 'set tagText to ""'),
        _pad(1, "try"),
        _pad(2, "set taskTags to tag names of t"),
        _pad(2, "if class of taskTags is text then"),
        _pad(3, "set taskTags to {taskTags}"),
        _pad(2, "end if"),
        _pad(2, "repeat with i from 1 to count taskTags"),
        _pad(3, "set tagLine to item i of taskTags"),
        *_accumulate("tagText", "tagLine", '", "', 3),
        _pad(2, "end repeat"),
        _pad(1, "end try"),
        _pad(1, _append_out("Tags", "tagText")),
        _pad(1, "if notes of t is missing value then"),
        _pad(2, _append_out("Notes")),
        _pad(1, "else"),
        _pad(2, _append_out("Notes", "(notes of t)")),
        _pad(1, "end if"),
        _pad(1, 'set out to out & linefeed & "Checklist Items: unsupported via AppleScript"'),
    ]
    return lines


def _show_child_task_lines() -> list[str]:
    return [
        _pad(2, "try"),
        _pad(3, "set childTasks to to dos of t"),
        _pad(3, 'set childTaskLines to "No child tasks"'),
        _pad(3, "if (count childTasks) > 0 then"),
        _pad(4, 'set childTaskLines to ""'),
        _pad(4, "repeat with i from 1 to count childTasks"),
        _pad(5, "set s to item i of childTasks"),
        _pad(
            5,
            'set lineItem to (i as string) & ". " & (name of s) & " [" & '
            '(status of s as string) & "] (id: " & (id of s) & ")"',
        ),
        *_notes_suffix("lineItem", 5),
        *_accumulate("childTaskLines", "lineItem", "linefeed", 5),
        _pad(4, "end repeat"),
        _pad(3, "end if"),
        _pad(3, 'set out to out & linefeed & "Child Tasks:" & linefeed & childTaskLines'),
        _pad(2, "on error"),
        _pad(3, 'set out to out & linefeed & "Child Tasks: not supported"'),
        _pad(2, "end try"),
    ]


def script_show_task(
    bundle_id: str, task_name: str, task_id: str, with_child_tasks: bool
) -> str:
    """Script printing the full details of a task or project, one field per line."""
    flag = "true" if with_child_tasks else "false"
    lines = [
        *_show_field_lines(),
        _pad(1, f"if {flag} then"),
        *_show_child_task_lines(),
        _pad(1, "end if"),
        _pad(1, "return out"),
        "end tell",
    ]
    return (
        _show_handlers()
        + _tell(bundle_id)
        + script_resolve_item_ref(task_name, task_id)
        + "\n".join(lines)
    )


def script_edit_child_task(
    bundle_id: str,
    parent_name: str,
    parent_id: str,
    child_task_name: str,
    child_task_id: str,
    index: int,
    new_name: str,
    notes: str,
) -> str:
    """Script renaming and/or re-noting a child task, returning its id."""
    script = script_find_child_task(
        bundle_id, parent_name, parent_id, child_task_name, child_task_id, index
    )
    if new_name != "":
        script += _pad(1, f'set name of s to "{escape_apple(new_name)}"') + "\n"
    if notes != "":
        script += _pad(1, f'set notes of s to "{escape_apple(notes)}"') + "\n"
    return script + "  return id of s\nend tell"


def script_delete_child_task(
    bundle_id: str,
    parent_name: str,
    parent_id: str,
    child_task_name: str,
    child_task_id: str,
    index: int,
) -> str:
    """Script deleting a child task."""
    script = script_find_child_task(
        bundle_id, parent_name, parent_id, child_task_name, child_task_id, index
    )
    return script + '  delete s\n  return "ok"\nend tell'


def script_set_child_task_status(
    bundle_id: str,
    parent_name: str,
    parent_id: str,
    child_task_name: str,
    child_task_id: str,
    index: int,
    done: bool,
) -> str:
    """Script marking a child task completed or open, returning its id."""
    state = "completed" if done else "open"
    script = script_find_child_task(
        bundle_id, parent_name, parent_id, child_task_name, child_task_id, index
    )
    return script + f"  set status of s to {state}\n  return id of s\nend tell"