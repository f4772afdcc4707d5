"""Read typed settings from the environment with fallbacks."""

from __future__ import annotations

import os
import re

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def with_default_int(key: str, default: int) -> int:
    """Return the variable as an int, or default if unset or not a valid integer."""
    val = os.environ.get(key)
    if val is None or not _INT_PATTERN.fullmatch(val):
        return default
    number = int(val)
    if not _INT_MIN <= number <= _INT_MAX:
        return default
    return number


def with_default_string(key: str, default: str) -> str:
    """Return the variable's value, or default if it is unset."""
    return os.environ.get(key, default)


def with_default_bool(key: str, default: bool) -> bool:
    """Return the variable as a bool, or default if unset or not a recognised boolean."""
    val = os.environ.get(key)
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    return default