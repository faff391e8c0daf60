"""Parsing of script output into structured read results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from thingsagent.things.helpers import parse_csv_list

__all__ = [
    "ReadChildTask",
    "ReadItem",
    "parse_structured_rows",
    "parse_task_list_json",
    "parse_project_list_json",
    "parse_show_task_output",
    "parse_show_task_json",
]


@dataclass
class ReadChildTask:
    """A child task line from the show-task output."""

    index: int
    name: str
    status: str
    id: str = ""
    notes: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; empty id and notes are left out."""
        data: dict[str, Any] = {"index": self.index}
        if self.id:
            data["id"] = self.id
        data["name"] = self.name
        data["status"] = self.status
        if self.notes:
            data["notes"] = self.notes
        return data


@dataclass
class ReadItem:
    """A task or project as reported by the read commands."""

    id: str = ""
    name: str = ""
    type: str = ""
    status: str = ""
    scope: str = ""
    due: str = ""
    deadline: str = ""
    created: str = ""
    completed: str = ""
    tags: list[str] = field(default_factory=list)
    notes: str = ""
    checklist_items_supported: bool = False
    child_tasks: list[ReadChildTask] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; empty scope, tags, notes and child tasks are left out."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "status": self.status,
        }
        if self.scope:
            data["scope"] = self.scope
        data.update(
            due=self.due,
            deadline=self.deadline,
            created=self.created,
            completed=self.completed,
        )
        if self.tags:
            data["tags"] = list(self.tags)
        if self.notes:
            data["notes"] = self.notes
        data["checklist_items_supported"] = self.checklist_items_supported
        if self.child_tasks:
            data["child_tasks"] = [child.to_dict() for child in self.child_tasks]
        return data


def parse_structured_rows(raw: str, expected_fields: int) -> list[list[str]]:
    """Split tab-separated lines into trimmed fields.

    Raises ValueError when a non-blank row has the wrong number of fields.
    """
    rows: list[list[str]] = []
    for line in raw.strip().split("\n"):
        line = line.strip()
        if not line:
            continue
        fields = line.split("\t")
        if len(fields) != expected_fields:
            raise ValueError(
                f"expected {expected_fields} fields in row {line!r}, got {len(fields)}"
            )
        rows.append([value.strip() for value in fields])
    return rows


def _parse_item_list(raw: str, item_type: str) -> list[dict[str, Any]]:
    return [
        ReadItem(id=item_id, name=name, type=item_type, status=status).to_dict()
        for item_id, name, status in parse_structured_rows(raw, 3)
    ]


def parse_task_list_json(raw: str) -> list[dict[str, Any]]:
    """Parse id/name/status rows into JSON-ready task records."""
    return _parse_item_list(raw, "task")


def parse_project_list_json(raw: str) -> list[dict[str, Any]]:
    """Parse id/name/status rows into JSON-ready project records."""
    return _parse_item_list(raw, "project")


_FIELD_PREFIXES = (
    ("ID: ", "id"),
    ("Name: ", "name"),
    ("Type: ", "type"),
    ("Statut: ", "status"),
    ("Due: ", "due"),
    ("Deadline: ", "deadline"),
    ("Completed on: ", "completed"),
    ("Created on: ", "created"),
    ("Tags: ", "tags"),
)


def _match_field(line: str) -> tuple[str, Any] | None:
    for prefix, key in _FIELD_PREFIXES:
        if line.startswith(prefix):
            value = line[len(prefix):].strip()
            if key == "type":
                # Anything that is not a project is reported as a task.
                return key, "project" if value.lower() == "project" else "task"
            if key == "tags":
                return key, parse_csv_list(value)
            return key, value
    return None


def parse_show_task_output(raw: str) -> ReadItem:
    """Parse the show-task script output.

    Raises ValueError when the id, name or type is missing.
    """
    values: dict[str, Any] = {}
    child_tasks: list[ReadChildTask] = []
    note_lines: list[str] = []
    checklist_supported = False
    in_notes = False
    in_child_tasks = False

    for line in raw.strip().split("\n"):
        matched = _match_field(line)
        if matched is not None:
            key, value = matched
            values[key] = value
            in_notes = False
        elif line.startswith("Notes: "):
            in_notes = True
            in_child_tasks = False
            note_lines = [line[len("Notes: "):]]
        elif line.startswith("Checklist Items: "):
            in_notes = False
            in_child_tasks = False
            text = line[len("Checklist Items: "):].strip().lower()
            checklist_supported = "unsupported" not in text
        elif line.startswith("Child Tasks:"):
            in_notes = False
            in_child_tasks = line == "Child Tasks:"
        elif in_child_tasks:
            child = _parse_child_task_line(line)
            if child is not None:
                child_tasks.append(child)
        elif in_notes:
            note_lines.append(line)

    item = ReadItem(
        **values,
        notes="\n".join(note_lines).strip("\n"),
        checklist_items_supported=checklist_supported,
        child_tasks=child_tasks,
    )
    if not item.id or not item.name or not item.type:
        raise ValueError("invalid show-task output")
    return item


def parse_show_task_json(raw: str) -> dict[str, Any]:
    """Parse the show-task script output into a JSON-ready mapping."""
    return parse_show_task_output(raw).to_dict()


_ID_PREFIX = "(id: "


def _parse_child_task_line(line: str) -> ReadChildTask | None:
    line = line.strip()
    if line in ("", "No child tasks", "Child Tasks: not supported"):
        return None

    dot = line.find(". ")
    open_bracket = line.rfind(" [")
    close_bracket = line.rfind("]")
    if dot <= 0 or open_bracket <= dot or close_bracket <= open_bracket:
        return None

    index_text = line[:dot].strip()
    name = line[dot + 2:open_bracket].strip()
    status = line[open_bracket + 2:close_bracket].strip()
    rest = line[close_bracket + 1:].strip()
    child_id = ""
    notes = ""
    if rest.startswith(_ID_PREFIX):
        end_id = rest.find(")")
        if end_id <= len(_ID_PREFIX):
            return None
        child_id = rest[len(_ID_PREFIX):end_id].strip()
        rest = rest[end_id + 1:].strip()
    if rest.startswith("| "):
        notes = rest[2:].strip()

    if not index_text or not all("0" <= ch <= "9" for ch in index_text):
        return None
    index = int(index_text)
    if index <= 0 or not name:
        return None
    return ReadChildTask(index=index, id=child_id, name=name, status=status, notes=notes)