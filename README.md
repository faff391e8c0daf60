# thingsagent

Building blocks for driving the Things task manager on macOS from Python.

The package has two halves:

- `thingsagent.things` builds the AppleScript snippets (some of which open
  `things:///update` URLs) that Things understands, runs them through
  `osascript`, locates the Things data directory, launches Things without
  network access, and parses the text Things sends back into plain Python
  objects.
- `thingsagent.cli` holds click command factories for reading, creating,
  editing, moving, tagging and deleting tasks, projects, areas, tags and child
  tasks, the selector rules that decide which item a command refers to, and a
  helper that waits for Things to open or close.

## Installation

Install the package with your usual Python package tool; it depends only on
`click`. Running scripts needs macOS with Things installed, since scripts are
handed to `osascript`. The tests need `pytest` (the `test` extra).

## Building scripts

Every script builder is a pure function that returns AppleScript text, so it
can be inspected or tested without Things running.

```python
from thingsagent.things.query_scripts import script_tasks, script_resolve_task_by_id
from thingsagent.things.task_scripts import script_set_checklist_by_id
from thingsagent.things.helpers import encode_things_url_params, parse_csv_list

BUNDLE = "com.culturedcode.ThingsMac"

script = script_tasks(BUNDLE, "Inbox", "groceries")
lookup = script_resolve_task_by_id("task-1")

checklist = script_set_checklist_by_id(BUNDLE, "task-1", ["one", "two words"], "token")

query = encode_things_url_params({"title": "hello world", "when": "today"})
# 'title=hello%20world&when=today'

parse_csv_list('one,"two, too"," three "')
# ['one', 'two, too', 'three']
```

The builders are grouped by subject: `query_scripts` (app control, lists,
areas, projects, tasks, item resolution), `task_scripts` (adding and editing
tasks and projects, notes, dates, deadlines, checklists, task tags),
`subtask_scripts` (child tasks and the detailed show-task script),
`tags_scripts`, `status_scripts` (deletion and completion) and
`reorder_scripts`. Scripts that change state through the URL scheme
(checklists, deadlines, completion) take the Things authorization token as an
argument. `script_delete` and `script_edit_task` raise `ValueError` for an
unknown kind or a missing source selector.

## Running scripts

```python
from thingsagent.things.runner import Runner, ScriptError
from thingsagent.things.query_scripts import script_all_areas

runner = Runner("com.culturedcode.ThingsMac")
try:
    runner.ensure_reachable()
    print(runner.run(script_all_areas(runner.bundle_id)))
except ScriptError as exc:
    print("Things did not answer:", exc)
```

`Runner.run` takes an optional timeout in seconds and returns the trimmed
output; a failing or timed-out script raises `ScriptError`.

## Finding the data directory

`thingsagent.things.data_dir.resolve_data_dir(pattern)` globs the pattern
under the home directory and returns the first match, in sorted order, that
holds a `main.sqlite` file; otherwise it raises `FileNotFoundError`.

## Parsing what Things returns

```python
from thingsagent.things.read_output import parse_show_task_output, parse_task_list_json

item = parse_show_task_output(raw_text)
print(item.name, item.tags, [child.name for child in item.child_tasks])
print(item.to_dict())

tasks = parse_task_list_json("id-1\tTask A\topen\nid-2\tTask B\tcompleted")
```

Malformed output raises `ValueError`.

## Commands

Each `new_*_cmd` function in `thingsagent.cli` returns a `click.Command` that
validates its options and then hands the values to a callback you supply:

```python
import click
from thingsagent.cli.basic import new_tags_root_cmd
from thingsagent.cli.tags_cmds import new_tags_add_cmd, new_tags_list_cmd

tags = new_tags_root_cmd(
    new_tags_list_cmd(lambda query: click.echo(f"list {query!r}")),
    new_tags_add_cmd(lambda name, parent: click.echo(f"add {name} under {parent!r}")),
)
```

Validation failures are reported as `click.ClickException`.

## Selector rules

Commands refer to an item either by name or by ID, never both. The rules live
in `thingsagent.cli.selectors` and raise `SelectorError` with a message that
names the offending options:

```python
from thingsagent.cli.selectors import resolve_entity_selector, SelectorError

resolve_entity_selector("  Task A ", "")   # ('Task A', '')
try:
    resolve_entity_selector("Task A", "task-1")
except SelectorError as exc:
    print(exc)   # exactly one of --name or --id is allowed
```

## Waiting for Things to open or close

`thingsagent.cli.app_state.wait_for_app_state` polls an `AppController` until
Things reaches the wanted state, raising `AppStateTimeoutError` when it does
not get there in time and `OperationCancelledError` when the wait is
cancelled.

## Network isolation

`thingsagent.things.network.new_offline_app_launch` returns a launcher for
the `sandbox-no-network` mode, which starts Things under `sandbox-exec`
without network access, or `None` for the `none` mode. Unknown modes raise
`NetworkIsolationError`.

## What the package does not do

- There is no installed command-line program and no assembled root command:
  the command factories are pieces, and wiring them to a runner is up to you.
- There are no commands for the `things:///` URL scheme itself (`add`,
  `update`, `add-project`, `update-project`, `json`, `show`, `search`,
  `version`). `new_url_root_cmd` gives an empty `url` group to hang such
  commands on, and `encode_things_url_params` and `script_open_url` build the
  URL and the script to open it.
- It keeps no configuration, such as a default bundle id or authorization
  token, and makes no backups of the Things database.