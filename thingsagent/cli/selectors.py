"""Validation of the selector and destination flags shared by commands."""

from __future__ import annotations

from collections.abc import Callable

__all__ = [
    "SelectorError",
    "resolve_entity_selector",
    "resolve_task_parent_selector",
    "resolve_parent_selector",
    "resolve_area_selector",
    "resolve_child_task_mutation_selector",
    "resolve_move_task_destination",
    "resolve_move_project_destination",
    "resolve_task_destination",
]


class SelectorError(ValueError):
    """Raised when selector or destination flags are missing or conflict."""


def _exactly_one(first: str, second: str, first_flag: str, second_flag: str) -> tuple[str, str]:
    first = first.strip()
    second = second.strip()
    if not first and not second:
        raise SelectorError(f"exactly one of {first_flag} or {second_flag} is required")
    if first and second:
        raise SelectorError(f"exactly one of {first_flag} or {second_flag} is allowed")
    return first, second


def resolve_entity_selector(name: str, item_id: str) -> tuple[str, str]:
    """Return the trimmed (name, id) pair; exactly one must be set."""
    return _exactly_one(name, item_id, "--name", "--id")


def resolve_task_parent_selector(task_name: str, task_id: str) -> tuple[str, str]:
    return _exactly_one(task_name, task_id, "--task", "--task-id")


def resolve_parent_selector(parent_name: str, parent_id: str) -> tuple[str, str]:
    return _exactly_one(parent_name, parent_id, "--parent", "--parent-id")


def resolve_area_selector(name: str, area_id: str) -> tuple[str, str]:
    return _exactly_one(name, area_id, "--area", "--area-id")


def resolve_child_task_mutation_selector(
    parent_name: str,
    parent_id: str,
    child_task_name: str,
    child_task_id: str,
    child_task_index: int,
) -> tuple[str, str, str, int]:
    """Validate how a child task is targeted.

    With a child id, no other selector may be given and the result is
    ``("", child_id, "", 0)``. Otherwise a parent selector plus a name or a
    positive index is required.
    """
    child_task_id = child_task_id.strip()
    if child_task_id:
        if (
            parent_name.strip()
            or parent_id.strip()
            or child_task_name.strip()
            or child_task_index > 0
        ):
            raise SelectorError("use either --id or a parent selector with --name/--index")
        return "", child_task_id, "", 0

    parent_name, parent_id = resolve_parent_selector(parent_name, parent_id)
    child_task_name = child_task_name.strip()
    if child_task_index <= 0 and not child_task_name:
        raise SelectorError("provide --id or --index (>=1) or --name")
    return parent_name, parent_id, child_task_name, child_task_index


def resolve_move_task_destination(
    to_area: str,
    to_area_id: str,
    to_project: str,
    to_project_id: str,
    to_heading: str,
    to_heading_id: str,
) -> dict[str, str]:
    """Map the single chosen move destination to its URL-scheme parameter."""
    options = (
        ("list", to_area),
        ("list-id", to_area_id),
        ("list", to_project),
        ("list-id", to_project_id),
        ("heading", to_heading),
        ("heading-id", to_heading_id),
    )
    chosen = [(param, value.strip()) for param, value in options if value.strip()]
    if not chosen:
        raise SelectorError(
            "destination is required: use one of --to-area, --to-area-id, "
            "--to-project, --to-project-id, --to-heading, or --to-heading-id"
        )
    if len(chosen) > 1:
        raise SelectorError("exactly one move destination is allowed")
    return dict(chosen)


def resolve_move_project_destination(to_area: str, to_area_id: str) -> dict[str, str]:
    """Map the chosen target area to its URL-scheme parameter."""
    to_area = to_area.strip()
    to_area_id = to_area_id.strip()
    if to_area and to_area_id:
        raise SelectorError("exactly one of --to-area or --to-area-id is allowed")
    if to_area:
        return {"area": to_area}
    if to_area_id:
        return {"area-id": to_area_id}
    raise SelectorError("destination is required: use --to-area or --to-area-id")


def resolve_task_destination(
    area_name: str,
    project_name: str,
    fallback_list: Callable[[], str] | None = None,
) -> tuple[str, str]:
    """Return ``(kind, name)`` for a new task, falling back to a default list."""
    area_name = area_name.strip()
    project_name = project_name.strip()
    if area_name and project_name:
        raise SelectorError("exactly one destination is allowed: use --area or --project")
    if area_name:
        return "area", area_name
    if project_name:
        return "project", project_name
    if fallback_list is not None:
        fallback = fallback_list().strip()
        if fallback:
            return "area", fallback
    raise SelectorError(
        "destination is required: use --area, --project, or THINGS_DEFAULT_LIST"
    )