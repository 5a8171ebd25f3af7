"""Validation helpers for to_dict / from_dict round-trips."""

from collections.abc import Mapping


def as_str_object_dict(value: object, *, field_name: str) -> dict[str, object]:
    """Validate and normalize a mapping value into ``dict[str, object]``."""
    if not isinstance(value, Mapping):
        msg = f"{field_name} must be a mapping."
        raise TypeError(msg)
    return {str(key): item for key, item in value.items()}


def optional_string(value: object, *, field_name: str) -> str | None:
    """Validate an optional string field."""
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"{field_name} must be a string or None."
        raise TypeError(msg)
    return value


def require_string(value: object, *, field_name: str) -> str:
    """Validate a required string field."""
    if not isinstance(value, str):
        msg = f"{field_name} must be a string."
        raise TypeError(msg)
    return value


def optional_bool(value: object, *, field_name: str) -> bool | None:
    """Validate an optional boolean field."""
    if value is None:
        return None
    if not isinstance(value, bool):
        msg = f"{field_name} must be a bool or None."
        raise TypeError(msg)
    return value


def string_mapping(value: object, *, field_name: str) -> dict[str, str]:
    """Validate an optional mapping of strings, keeping key order."""
    if value is None:
        return {}
    items = as_str_object_dict(value, field_name=field_name)

    result: dict[str, str] = {}
    for key, item in items.items():
        if not isinstance(item, str):
            msg = f"{field_name}[{key!r}] must be a string."
            raise TypeError(msg)
        result[key] = item
    return result
