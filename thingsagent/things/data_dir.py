"""Location of the app's data directory."""

from __future__ import annotations

import glob
import os
from pathlib import Path

__all__ = ["resolve_data_dir"]


def resolve_data_dir(things_data_pattern: str) -> str:
    """Return the first directory matching the pattern under the home directory
    that holds a ``main.sqlite`` file.

    Raises FileNotFoundError when no candidate qualifies.
    """
    pattern = os.path.join(str(Path.home()), things_data_pattern)
    for candidate in sorted(glob.glob(pattern)):
        if os.path.isfile(os.path.join(candidate, "main.sqlite")):
            return candidate
    raise FileNotFoundError(
        "could not resolve Things data dir automatically; set THINGS_DATA_DIR"
    )