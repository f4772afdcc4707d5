"""Project metadata and paths."""

from __future__ import annotations

import os
from pathlib import Path

VERSION = "unspecified"

_ROOT = Path(__file__).resolve().parent.parent


def relative_to_root(path: str) -> str:
    """Return path joined onto the project root directory."""
    return os.path.normpath(os.path.join(str(_ROOT), path.lstrip("/\\")))