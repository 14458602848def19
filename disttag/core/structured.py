"""Narrowing helpers for untyped JSON/TOML values.

The publish summary and the config file are both parsed into plain
``object`` trees; these helpers validate shape at that boundary.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict whose keys are all strings."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a non-empty string value from a mapping, stripping whitespace.

    Returns None if the key is missing, not a str, or blank.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    return as_str_dict(table.get(key))


def get_raw_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping exactly as stored.

    Returns None if the key is missing, not a str, or blank; surrounding
    whitespace is kept.
    """
    value = table.get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return value
