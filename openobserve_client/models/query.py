"""Query targeting a single field of a stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .common import UNSET, Unset, _check_type, reject_unknown, require_properties

_REQUIRED = ("field", "stream", "stream_type")
_ALLOWED = _REQUIRED + ("max_record_size",)


@dataclass
class QueryData:
    """A field of a stream to query, with an optional record-size limit."""

    field: str
    stream: str
    stream_type: str
    max_record_size: int | None | Unset = UNSET

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"field": self.field}
        if not isinstance(self.max_record_size, Unset):
            result["max_record_size"] = self.max_record_size
        result["stream"] = self.stream
        result["stream_type"] = self.stream_type
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "QueryData":
        require_properties(data, _REQUIRED)
        reject_unknown(data, _ALLOWED)
        for key in _REQUIRED:
            _check_type(key, data[key], str)
        max_record_size: int | None | Unset = UNSET
        if "max_record_size" in data:
            max_record_size = data["max_record_size"]
            _check_type("max_record_size", max_record_size, int, type(None))
        return cls(
            field=data["field"],
            stream=data["stream"],
            stream_type=data["stream_type"],
            max_record_size=max_record_size,
        )