"""Chart axis items, panel filters and the field selection of a panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .common import UNSET, Unset, _check_type, reject_unknown, require_properties
from .enums import AggregationFunc, parse_enum

_AXIS_REQUIRED = ("alias", "column", "label")
_AXIS_ALLOWED = _AXIS_REQUIRED + ("aggregationFunction", "color")


@dataclass
class AxisItem:
    """A column plotted on a chart axis, with an optional aggregation and colour."""

    alias: str
    column: str
    label: str
    aggregation_function: AggregationFunc | None | Unset = UNSET
    color: str | None | Unset = UNSET

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if not isinstance(self.aggregation_function, Unset):
            func = self.aggregation_function
            result["aggregationFunction"] = None if func is None else func.value
        result["alias"] = self.alias
        if not isinstance(self.color, Unset):
            result["color"] = self.color
        result["column"] = self.column
        result["label"] = self.label
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "AxisItem":
        require_properties(data, _AXIS_REQUIRED)
        reject_unknown(data, _AXIS_ALLOWED)
        for key in _AXIS_REQUIRED:
            _check_type(key, data[key], str)
        aggregation: AggregationFunc | None | Unset = UNSET
        if "aggregationFunction" in data:
            raw = data["aggregationFunction"]
            aggregation = None if raw is None else parse_enum(AggregationFunc, raw)
        color: str | None | Unset = UNSET
        if "color" in data:
            color = data["color"]
            _check_type("color", color, str, type(None))
        return cls(
            alias=data["alias"],
            column=data["column"],
            label=data["label"],
            aggregation_function=aggregation,
            color=color,
        )


_FILTER_REQUIRED = ("column", "type", "values")
_FILTER_ALLOWED = _FILTER_REQUIRED + ("operator", "value")


def _string_list(name: str, raw: Any) -> list[str] | None:
    if raw is None:
        return None
    _check_type(name, raw, list)
    for item in raw:
        _check_type(name, item, str)
    return list(raw)


@dataclass
class PanelFilter:
    """A filter applied to a panel's column."""

    column: str
    type: str
    values: list[str] | None
    operator: str | None | Unset = UNSET
    value: str | None | Unset = UNSET

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"column": self.column}
        if not isinstance(self.operator, Unset):
            result["operator"] = self.operator
        result["type"] = self.type
        if not isinstance(self.value, Unset):
            result["value"] = self.value
        result["values"] = None if self.values is None else list(self.values)
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "PanelFilter":
        require_properties(data, _FILTER_REQUIRED)
        reject_unknown(data, _FILTER_ALLOWED)
        _check_type("column", data["column"], str)
        _check_type("type", data["type"], str)
        values = _string_list("values", data["values"])
        optional: dict[str, Any] = {}
        for key in ("operator", "value"):
            if key in data:
                _check_type(key, data[key], str, type(None))
                optional[key] = data[key]
        return cls(column=data["column"], type=data["type"], values=values, **optional)


_FIELDS_REQUIRED = ("filter", "stream", "stream_type", "x", "y")


def _object_list(name: str, raw: Any, parse) -> list | None:
    if raw is None:
        return None
    _check_type(name, raw, list)
    return [parse(item) for item in raw]


def _dump_list(items: list | None) -> list | None:
    if items is None:
        return None
    return [item.to_dict() for item in items]


@dataclass
class PanelFields:
    """The stream a panel reads and the axes and filters it applies."""

    filter: list[PanelFilter] | None
    stream: str
    stream_type: str
    x: list[AxisItem] | None
    y: list[AxisItem] | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "filter": _dump_list(self.filter),
            "stream": self.stream,
            "stream_type": self.stream_type,
            "x": _dump_list(self.x),
            "y": _dump_list(self.y),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "PanelFields":
        require_properties(data, _FIELDS_REQUIRED)
        reject_unknown(data, _FIELDS_REQUIRED)
        _check_type("stream", data["stream"], str)
        _check_type("stream_type", data["stream_type"], str)
        return cls(
            filter=_object_list("filter", data["filter"], PanelFilter.from_dict),
            stream=data["stream"],
            stream_type=data["stream_type"],
            x=_object_list("x", data["x"], AxisItem.from_dict),
            y=_object_list("y", data["y"], AxisItem.from_dict),
        )