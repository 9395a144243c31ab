"""Dashboards, their panel layouts, and the dashboard listing responses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .common import (
    UNSET,
    Unset,
    _as_mapping,
    _check_type,
    reject_unknown,
    require_properties,
)
from .panels import Panel

_LAYOUT_FIELDS = ("h", "i", "panelId", "static", "w", "x", "y")


@dataclass
class Layout:
    """Position and size of a panel on the dashboard grid."""

    h: int
    i: int
    panel_id: str
    static: bool
    w: int
    x: int
    y: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "h": self.h,
            "i": self.i,
            "panelId": self.panel_id,
            "static": self.static,
            "w": self.w,
            "x": self.x,
            "y": self.y,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Layout":
        require_properties(data, _LAYOUT_FIELDS)
        reject_unknown(data, _LAYOUT_FIELDS)
        for key in ("h", "i", "w", "x", "y"):
            _check_type(key, data[key], int)
        _check_type("panelId", data["panelId"], str)
        _check_type("static", data["static"], bool)
        return cls(
            h=data["h"],
            i=data["i"],
            panel_id=data["panelId"],
            static=data["static"],
            w=data["w"],
            x=data["x"],
            y=data["y"],
        )


_TIME_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<zone>Z|z|[+-]\d{2}:\d{2})$"
)


def _parse_time(name: str, raw: Any) -> datetime:
    _check_type(name, raw, str)
    match = _TIME_RE.match(raw)
    if match is None:
        raise ValueError(f"property {name} is not an RFC 3339 time: {raw!r}")
    frac = (match["frac"] or "")[:6].ljust(6, "0")
    zone = match["zone"]
    if zone in ("Z", "z"):
        zone = "+00:00"
    return datetime.fromisoformat(f"{match['base']}.{frac}{zone}")


def _format_time(value: datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


_DASHBOARD_REQUIRED = ("description", "title")
_DASHBOARD_ALLOWED = _DASHBOARD_REQUIRED + (
    "created",
    "dashboardId",
    "layouts",
    "owner",
    "panels",
    "role",
    "variables",
)


def _optional_str(data: Any, key: str) -> str | None:
    value = data.get(key)
    if value is not None:
        _check_type(key, value, str)
    return value


@dataclass
class Dashboard:
    """A dashboard with its panels, their layout and its variables."""

    description: str
    title: str
    created: datetime | None = None
    dashboard_id: str | None = None
    layouts: list[Layout] | None = None
    owner: str | None = None
    panels: list[Panel] | None = None
    role: str | None = None
    variables: Any = UNSET

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.created is not None:
            result["created"] = _format_time(self.created)
        if self.dashboard_id is not None:
            result["dashboardId"] = self.dashboard_id
        result["description"] = self.description
        if self.layouts is not None:
            result["layouts"] = [layout.to_dict() for layout in self.layouts]
        if self.owner is not None:
            result["owner"] = self.owner
        if self.panels is not None:
            result["panels"] = [panel.to_dict() for panel in self.panels]
        if self.role is not None:
            result["role"] = self.role
        result["title"] = self.title
        if not isinstance(self.variables, Unset):
            result["variables"] = self.variables
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "Dashboard":
        require_properties(data, _DASHBOARD_REQUIRED)
        reject_unknown(data, _DASHBOARD_ALLOWED)
        _check_type("description", data["description"], str)
        _check_type("title", data["title"], str)
        created_raw = data.get("created")
        created = None if created_raw is None else _parse_time("created", created_raw)
        layouts: list[Layout] | None = None
        if data.get("layouts") is not None:
            _check_type("layouts", data["layouts"], list)
            layouts = [Layout.from_dict(item) for item in data["layouts"]]
        panels: list[Panel] | None = None
        if data.get("panels") is not None:
            _check_type("panels", data["panels"], list)
            panels = [Panel.from_dict(item) for item in data["panels"]]
        variables = data["variables"] if "variables" in data else UNSET
        return cls(
            description=data["description"],
            title=data["title"],
            created=created,
            dashboard_id=_optional_str(data, "dashboardId"),
            layouts=layouts,
            owner=_optional_str(data, "owner"),
            panels=panels,
            role=_optional_str(data, "role"),
            variables=variables,
        )


def _lenient(mapping: Any, key: str, kind: type, default: Any) -> Any:
    value = mapping.get(key)
    if value is None:
        return default
    _check_type(key, value, kind)
    return value


@dataclass
class DashboardsResponseItem:
    """One dashboard in a listing, with its folder and raw versioned body."""

    created: str = ""
    dashboard_id: str = ""
    description: str = ""
    folder_id: str = ""
    folder_name: str = ""
    hash: str = ""
    owner: str = ""
    role: str = ""
    title: str = ""
    v1: Any = None
    v2: Any = None
    v3: Any = None
    v4: Any = None
    v5: Any = None
    version: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "DashboardsResponseItem":
        mapping = _as_mapping(data)
        strings = {
            key: _lenient(mapping, key, str, "")
            for key in (
                "created",
                "dashboard_id",
                "description",
                "folder_id",
                "folder_name",
                "hash",
                "owner",
                "role",
                "title",
            )
        }
        versions = {key: mapping.get(key) for key in ("v1", "v2", "v3", "v4", "v5")}
        return cls(
            **strings,
            **versions,
            version=_lenient(mapping, "version", int, 0),
        )


@dataclass
class DashboardsResponse:
    """The list of dashboards in an organisation."""

    dashboards: list[DashboardsResponseItem] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "DashboardsResponse":
        mapping = _as_mapping(data)
        raw = mapping.get("dashboards")
        if raw is None:
            return cls()
        _check_type("dashboards", raw, list)
        return cls(dashboards=[DashboardsResponseItem.from_dict(item) for item in raw])


@dataclass
class DashboardResponse:
    """A single dashboard's raw versioned body."""

    v1: Any = None
    v2: Any = None
    v3: Any = None
    v4: Any = None
    v5: Any = None
    version: int = 0
    hash: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "DashboardResponse":
        mapping = _as_mapping(data)
        return cls(
            v1=mapping.get("v1"),
            v2=mapping.get("v2"),
            v3=mapping.get("v3"),
            v4=mapping.get("v4"),
            v5=mapping.get("v5"),
            version=_lenient(mapping, "version", int, 0),
            hash=_lenient(mapping, "hash", str, ""),
        )