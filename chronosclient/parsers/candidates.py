"""
First-hit-wins field resolution.

Backend revisions renamed fields more than once (friendId vs id vs
friend.id, content vs text vs message, ...). Each ambiguous field is read
through an ordered tuple of candidate paths; the first candidate holding a
usable value wins. This is a priority cascade, never a merge.

A candidate path is a dotted string: "meta.number" reads raw["meta"]["number"].
"""

import math
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")

_MISSING = object()


def lookup_path(raw: Any, path: str) -> Any:
    """
    Read a dotted path from nested mappings.

    Returns None when any segment is missing or a non-mapping is reached.
    """
    current = raw
    for segment in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment, _MISSING)
        if current is _MISSING:
            return None
    return current


def first_hit(
    raw: Any,
    candidates: Iterable[str],
    coerce: Callable[[Any], T | None],
) -> T | None:
    """
    Return the first candidate value that `coerce` accepts.

    None values are skipped, as is anything `coerce` maps to None.
    """
    for path in candidates:
        value = lookup_path(raw, path)
        if value is None:
            continue
        coerced = coerce(value)
        if coerced is not None:
            return coerced
    return None


def coerce_number(value: Any) -> int | float | None:
    """
    Coerce a number or numeric string.

    Integral values come back as int. Booleans, NaN, infinities and
    non-numeric strings are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value) if value.is_integer() else value
    if isinstance(value, str):
        text = value.strip()
        # digit separators are not numbers on the backend side
        if not text or "_" in text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return coerce_number(number)
    return None


def coerce_text(value: Any) -> str | None:
    """Non-empty string, or an integer id rendered as a string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        return text or None
    if isinstance(value, int):
        return str(value)
    return None


def coerce_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def first_number(raw: Any, candidates: Iterable[str], default: int | float = 0) -> int | float:
    number = first_hit(raw, candidates, coerce_number)
    return default if number is None else number


def first_text(raw: Any, candidates: Iterable[str]) -> str | None:
    return first_hit(raw, candidates, coerce_text)


def as_record_list(payload: Any, *wrapper_keys: str) -> list[Any]:
    """
    Extract a list of records from a list payload.

    Older endpoints answer with a bare list, newer ones wrap it in an object
    (e.g. {"cards": [...]}). Anything else yields an empty list.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping):
        for key in wrapper_keys:
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []
