"""Dashboard panels and their display configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .common import UNSET, Unset, _check_type, reject_unknown, require_properties
from .fields import PanelFields

_CONFIG_REQUIRED = ("description", "show_legends", "title")
_CONFIG_NULLABLE = ("legends_position", "promql_legend", "unit", "unit_custom")
_CONFIG_ALLOWED = _CONFIG_REQUIRED + _CONFIG_NULLABLE


@dataclass
class PanelConfig:
    """How a panel is titled and how its legend and units are shown."""

    description: str
    show_legends: bool
    title: str
    legends_position: str | None | Unset = UNSET
    promql_legend: str | None | Unset = UNSET
    unit: str | None | Unset = UNSET
    unit_custom: str | None | Unset = UNSET

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"description": self.description}
        if not isinstance(self.legends_position, Unset):
            result["legends_position"] = self.legends_position
        if not isinstance(self.promql_legend, Unset):
            result["promql_legend"] = self.promql_legend
        result["show_legends"] = self.show_legends
        result["title"] = self.title
        if not isinstance(self.unit, Unset):
            result["unit"] = self.unit
        if not isinstance(self.unit_custom, Unset):
            result["unit_custom"] = self.unit_custom
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "PanelConfig":
        require_properties(data, _CONFIG_REQUIRED)
        reject_unknown(data, _CONFIG_ALLOWED)
        _check_type("description", data["description"], str)
        _check_type("show_legends", data["show_legends"], bool)
        _check_type("title", data["title"], str)
        optional: dict[str, Any] = {}
        for key in _CONFIG_NULLABLE:
            if key in data:
                _check_type(key, data[key], str, type(None))
                optional[key] = data[key]
        return cls(
            description=data["description"],
            show_legends=data["show_legends"],
            title=data["title"],
            **optional,
        )


_PANEL_REQUIRED = ("config", "customQuery", "fields", "id", "query", "type")
_PANEL_ALLOWED = _PANEL_REQUIRED + ("queryType",)


@dataclass
class Panel:
    """A single chart or table on a dashboard."""

    config: PanelConfig
    custom_query: bool
    fields: PanelFields
    id: str
    query: str
    type: str
    query_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "config": self.config.to_dict(),
            "customQuery": self.custom_query,
            "fields": self.fields.to_dict(),
            "id": self.id,
            "query": self.query,
        }
        if self.query_type is not None:
            result["queryType"] = self.query_type
        result["type"] = self.type
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "Panel":
        require_properties(data, _PANEL_REQUIRED)
        reject_unknown(data, _PANEL_ALLOWED)
        _check_type("customQuery", data["customQuery"], bool)
        for key in ("id", "query", "type"):
            _check_type(key, data[key], str)
        query_type = data.get("queryType")
        if query_type is not None:
            _check_type("queryType", query_type, str)
        return cls(
            config=PanelConfig.from_dict(data["config"]),
            custom_query=data["customQuery"],
            fields=PanelFields.from_dict(data["fields"]),
            id=data["id"],
            query=data["query"],
            type=data["type"],
            query_type=query_type,
        )