"""AppleScript builders for app control and read queries."""

from __future__ import annotations

from thingsagent.things.helpers import escape_apple

__all__ = [
    "script_app_running",
    "script_quit_app",
    "script_activate_app",
    "script_all_lists",
    "script_all_areas",
    "script_resolve_item_ref",
    "script_resolve_task_ref",
    "script_resolve_task_by_name",
    "script_resolve_task_by_id",
    "script_resolve_project_ref",
    "script_all_projects",
    "script_all_projects_structured",
    "script_tasks",
    "script_search",
    "script_tasks_structured",
    "script_restore_semantic_check",
]


def script_app_running(bundle_id: str) -> str:
    return f'tell application id "{escape_apple(bundle_id)}"\n  return running\nend tell'


def script_quit_app(bundle_id: str) -> str:
    return (
        f'tell application id "{escape_apple(bundle_id)}"\n'
        "  quit\n"
        "end tell\n"
        'return "ok"'
    )


def script_activate_app(bundle_id: str) -> str:
    return (
        f'tell application id "{escape_apple(bundle_id)}"\n'
        "  activate\n"
        "end tell\n"
        'return "ok"'
    )


def script_all_lists(bundle_id: str) -> str:
    return f'tell application id "{bundle_id}"\n  get name of lists\nend tell'


def script_all_areas(bundle_id: str) -> str:
    return f'tell application id "{bundle_id}"\n  get name of areas\nend tell'


def script_resolve_item_ref(task_name: str, task_id: str) -> str:
    """Script fragment setting ``t`` to the unique project or to-do matched."""
    task_name = escape_apple(task_name.strip())
    task_id = escape_apple(task_id.strip())
    field, value = ("id", task_id) if task_id else ("name", task_name)
    return f"""  try
    set projectMatches to every project whose {field} is "{value}"
    set taskMatches to every to do whose {field} is "{value}"
    if (count of taskMatches) is 0 then
      try
        set taskMatches to every to do of list "Archive" whose {field} is "{value}"
      on error
        try
          set taskMatches to every to do of list "Logbook" whose {field} is "{value}"
        on error
          set taskMatches to {{}}
        end try
      end try
    end if
    set projectCount to count of projectMatches
    set taskCount to count of taskMatches
    set totalCount to projectCount + taskCount
    if totalCount is 0 then error "No item found with this {field}."
    if totalCount is greater than 1 then error "Ambiguous item {field}; use a unique {field}."
    if projectCount is 1 then
      set t to item 1 of projectMatches
    else
      set t to item 1 of taskMatches
    end if
  on error errMsg
    error errMsg
  end try
"""


def script_resolve_task_ref(task_name: str, task_id: str) -> str:
    """Script fragment setting ``t`` to the unique to-do matched."""
    task_name = escape_apple(task_name.strip())
    task_id = escape_apple(task_id.strip())
    if task_id:
        return f"""  try
    set taskMatches to every to do whose id is "{task_id}"
    if (count of taskMatches) is 0 then
      try
        set taskMatches to every to do of list "Archive" whose id is "{task_id}"
      on error
        try
          set taskMatches to every to do of list "Logbook" whose id is "{task_id}"
        on error
          set taskMatches to {{}}
        end try
      end try
    end if
    if (count of taskMatches) is 0 then error "No task found with this id."
    if (count of taskMatches) is greater than 1 then error "Ambiguous task id; use a unique id."
    set t to item 1 of taskMatches
  on error errMsg
    error errMsg
  end try
"""
    return f"""  try
    set taskMatches to every to do whose name is "{task_name}"
    if (count of taskMatches) is 0 then
      try
        set taskMatches to every to do of list "Archive" whose name is "{task_name}"
      on error
        try
          set taskMatches to every to do of list "Logbook" whose name is "{task_name}"
        on error
          set taskMatches to {{}}
        end try
      end try
    end if
    set taskCount to count of taskMatches
    if taskCount is 0 then error "No task found with this name."
    if taskCount is greater than 1 then error "Ambiguous task name; use --id."
    set t to item 1 of taskMatches
  on error errMsg
    error errMsg
  end try
"""


def script_resolve_task_by_name(task_name: str) -> str:
    return script_resolve_task_ref(task_name, "")


def script_resolve_task_by_id(task_id: str) -> str:
    return script_resolve_task_ref("", task_id)


def script_resolve_project_ref(project_name: str, project_id: str) -> str:
    """Script fragment setting ``p`` to the matched project."""
    project_name = escape_apple(project_name.strip())
    project_id = escape_apple(project_id.strip())
    field, value = ("id", project_id) if project_id else ("name", project_name)
    return f"""  try
    set p to first project whose {field} is "{value}"
  on error errMsg
    error errMsg
  end try
"""


def script_all_projects(bundle_id: str) -> str:
    return f'tell application id "{bundle_id}"\n  get name of projects\nend tell'


def script_all_projects_structured(bundle_id: str) -> str:
    return f"""tell application id "{bundle_id}"
  set projectIDs to id of projects
  set projectNames to name of projects
  set outLines to {{}}
  repeat with i from 1 to count projectIDs
    set end of outLines to (((item i of projectIDs) as string) & tab & (item i of projectNames) & tab & "unknown")
  end repeat
  set AppleScript's text item delimiters to linefeed
  return outLines as text
end tell"""


def script_tasks(bundle_id: str, list_name: str, query: str) -> str:
    list_name = list_name.strip()
    query = query.strip()
    if not list_name and not query:
        return f'tell application id "{bundle_id}"\n  return name of (every to do)\nend tell'
    if not list_name:
        return f"""tell application id "{bundle_id}"
  set q to "{escape_apple(query)}"
  return name of (every to do whose (name contains q or notes contains q))
end tell"""
    if not query:
        return f"""tell application id "{bundle_id}"
  set l to first list whose name is "{escape_apple(list_name)}"
  return name of (every to do of l)
end tell"""
    return f"""tell application id "{bundle_id}"
  set q to "{escape_apple(query)}"
  set l to first list whose name is "{escape_apple(list_name)}"
  return name of (every to do of l whose (name contains q or notes contains q))
end tell"""


def script_search(bundle_id: str, list_name: str, query: str) -> str:
    return script_tasks(bundle_id, list_name, query)


def script_tasks_structured(bundle_id: str, list_name: str, query: str) -> str:
    """Script returning tab-separated id, name and status rows of to-dos."""
    list_name = list_name.strip()
    query = query.strip()
    if not list_name and not query:
        prefix, body = "", "every to do"
    elif not list_name:
        prefix = f'  set q to "{escape_apple(query)}"\n'
        body = "every to do whose (name contains q or notes contains q)"
    elif not query:
        prefix = f'  set l to first list whose name is "{escape_apple(list_name)}"\n'
        body = "every to do of l"
    else:
        prefix = (
            f'  set q to "{escape_apple(query)}"\n'
            f'  set l to first list whose name is "{escape_apple(list_name)}"\n'
        )
        body = "every to do of l whose (name contains q or notes contains q)"
    return f"""tell application id "{bundle_id}"
{prefix}  set outLines to {{}}
  repeat with t in {body}
    set end of outLines to ((id of t as string) & tab & (name of t) & tab & (status of t as string))
  end repeat
  set AppleScript's text item delimiters to linefeed
  return outLines as text
end tell"""


def script_restore_semantic_check(bundle_id: str) -> str:
    return f"""tell application id "{bundle_id}"
  -- restore semantic verify
  return ((count of lists) as string) & tab & ((count of projects) as string)
end tell"""