"""Small helpers over string lists and maps."""

from __future__ import annotations


def union_string_maps(*maps: dict[str, str]) -> dict[str, str]:
    """Merge all key value pairs into one dict; the last write wins."""
    result: dict[str, str] = {}
    for mapping in maps:
        result.update(mapping)
    return result


def string_slice_without(vals: list[str] | None, *remove: str) -> list[str] | None:
    """Return vals without any of the removed strings; None stays None."""
    if vals is None:
        return None
    return [val for val in vals if val not in remove]


def intersect_string_slice(*slices: list[str] | None) -> list[str] | None:
    """Intersect the lists, treating None as the universal set.

    An empty list always yields an empty list; None places no constraint.
    """
    result: list[str] | None = None
    for current in slices:
        if current is None:
            continue
        if result is None:
            result = list(current)
        else:
            members = set(current)
            result = [s for s in result if s in members]
    return unique_strings(result)


def unique_strings(strings: list[str] | None) -> list[str] | None:
    """Return the distinct strings; None stays None."""
    if strings is None:
        return None
    return list(dict.fromkeys(strings))


def contains_string(strings: list[str] | None, candidate: str) -> bool:
    """Return True if candidate is among strings."""
    return candidate in (strings or ())


def has_any_prefix(s: str, *prefixes: str) -> bool:
    """Return True if s starts with any of the prefixes."""
    return any(s.startswith(prefix) for prefix in prefixes)