"""String helpers shared by the AppleScript and URL-scheme builders."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Mapping
from urllib.parse import quote

__all__ = [
    "escape_apple",
    "parse_csv_list",
    "things_query_escape",
    "url_encode_checklist",
    "normalize_checklist_input",
    "script_list_literal",
    "encode_things_url_params",
    "script_open_url",
]


def escape_apple(value: str) -> str:
    """Escape a value for use inside an AppleScript string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _first_csv_record(value: str) -> list[str]:
    reader = csv.reader(io.StringIO(value), skipinitialspace=True, strict=True)
    for row in reader:
        if row:
            return row
    return []


def parse_csv_list(value: str) -> list[str]:
    """Split a comma-separated value into trimmed, non-empty fields.

    Quoted fields are honoured; malformed quoting falls back to a plain split.
    """
    try:
        fields = _first_csv_record(value)
    except csv.Error:
        fields = value.split(",")
    return [field.strip() for field in fields if field.strip()]


def things_query_escape(value: str) -> str:
    """Percent-encode a query value, with spaces as %20."""
    return quote(value, safe="")


def url_encode_checklist(items: Iterable[str]) -> str:
    """Encode checklist items as a newline-joined query value."""
    return things_query_escape("\n".join(items))


def normalize_checklist_input(raw: str) -> str:
    """Turn CSV checklist input into newline-separated items.

    Multi-line input is returned unchanged (apart from trimming).
    """
    raw = raw.strip()
    if not raw:
        return ""
    if "\n" in raw:
        return raw
    items = parse_csv_list(raw)
    if not items:
        return raw
    return "\n".join(items)


def script_list_literal(values: Iterable[str]) -> str:
    """Render values as an AppleScript list literal."""
    items = [f'"{escape_apple(value)}"' for value in values]
    if not items:
        return "{}"
    return "{" + ", ".join(items) + "}"


def encode_things_url_params(params: Mapping[str, str]) -> str:
    """Encode URL parameters sorted by key, using %20 for spaces."""
    return "&".join(
        f"{things_query_escape(key)}={things_query_escape(params[key])}"
        for key in sorted(params)
    )


def script_open_url(bundle_id: str, raw_url: str) -> str:
    """Build a script that asks the app to open a URL."""
    return (
        f'tell application id "{escape_apple(bundle_id)}"\n'
        f'  open location "{escape_apple(raw_url)}"\n'
        "end tell\n"
        'return "ok"'
    )