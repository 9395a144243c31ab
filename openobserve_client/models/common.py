"""Shared helpers for the JSON models."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


class Unset:
    """Marks an optional property that is absent, as opposed to an explicit null."""

    _instance: "Unset | None" = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (Unset, ())


UNSET = Unset()


def _as_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _check_type(name: str, value: Any, *kinds: type) -> None:
    """Raise TypeError unless ``value`` is one of ``kinds`` (bools are not ints)."""
    if isinstance(value, bool) and bool not in kinds:
        matches = False
    else:
        matches = isinstance(value, kinds)
    if not matches:
        raise TypeError(f"property {name} has unexpected type {type(value).__name__}")


def require_properties(data: Any, required: Iterable[str]) -> None:
    """Raise ValueError naming the first required property missing from ``data``."""
    mapping = _as_mapping(data)
    for name in required:
        if name not in mapping:
            raise ValueError(f"no value given for required property {name}")


def reject_unknown(data: Any, allowed: Iterable[str]) -> None:
    """Raise ValueError if ``data`` holds a key outside ``allowed``."""
    allowed_keys = set(allowed)
    for key in _as_mapping(data):
        if key not in allowed_keys:
            raise ValueError(f'unknown field "{key}"')


_OPTION_FIELDS = ("label", "value")


@dataclass
class CustomFieldsOption:
    """A label/value pair offered as a choice for a custom field."""

    label: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "value": self.value}

    @classmethod
    def from_dict(cls, data: Any) -> "CustomFieldsOption":
        require_properties(data, _OPTION_FIELDS)
        reject_unknown(data, _OPTION_FIELDS)
        for key in _OPTION_FIELDS:
            _check_type(key, data[key], str)
        return cls(label=data["label"], value=data["value"])