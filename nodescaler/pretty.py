"""Compact one-line rendering of objects for log messages."""

from __future__ import annotations

import dataclasses
import json
from datetime import datetime
from typing import Any


def _encode(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def concise(obj: Any) -> str:
    """Return obj as compact JSON, or the error message if it cannot be encoded."""
    try:
        return json.dumps(
            obj,
            default=_encode,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as err:
        return str(err)