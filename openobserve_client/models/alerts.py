"""Alert definitions, their query and trigger conditions, and alert listings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from .common import _as_mapping, _check_type
from .enums import SearchEventType, parse_enum


class _TextEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class FrequencyType(_TextEnum):
    """How often an alert is evaluated."""

    CRON = "cron"
    MINUTES = "minutes"


class QueryType(_TextEnum):
    """Kind of query an alert runs."""

    CUSTOM = "custom"
    SQL = "sql"
    PROMQL = "promql"


class Operator(_TextEnum):
    """Comparison used by alert conditions."""

    EQ = "="
    NEQ = "!="
    GT = ">"
    GTEQ = ">="
    LT = "<"
    LTEQ = "<="
    CONTAINS = "Contains"
    NOT_CONTAINS = "NotContains"


E = TypeVar("E", bound=_TextEnum)


def _lenient_enum(enum_cls: type[E], name: str, raw: Any) -> E | str:
    """Return the enum member for ``raw``, or the raw string if it is not one."""
    if raw is None:
        return ""
    _check_type(name, raw, str)
    try:
        return enum_cls(raw)
    except ValueError:
        return raw


def _text(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _optional(mapping: Any, key: str, *kinds: type) -> Any:
    value = mapping.get(key)
    if value is not None:
        _check_type(key, value, *kinds)
    return value


def _with_default(mapping: Any, key: str, default: Any, *kinds: type) -> Any:
    value = mapping.get(key)
    if value is None:
        return default
    _check_type(key, value, *kinds)
    return value


def _put(result: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        result[key] = value


def _string_list(name: str, raw: Any) -> list[str] | None:
    if raw is None:
        return None
    _check_type(name, raw, list)
    for item in raw:
        _check_type(name, item, str)
    return list(raw)


@dataclass
class TriggerCondition:
    """When and how often an alert fires."""

    frequency_type: FrequencyType | str = ""
    operator: Operator | str = ""
    period: int = 0
    cron: str | None = None
    frequency: int | None = None
    silence: int | None = None
    threshold: int | None = None
    timezone: str | None = None
    tolerance_in_secs: int | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        _put(result, "cron", self.cron)
        _put(result, "frequency", self.frequency)
        result["frequency_type"] = _text(self.frequency_type)
        result["operator"] = _text(self.operator)
        result["period"] = self.period
        _put(result, "silence", self.silence)
        _put(result, "threshold", self.threshold)
        _put(result, "timezone", self.timezone)
        _put(result, "tolerance_in_secs", self.tolerance_in_secs)
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "TriggerCondition":
        mapping = _as_mapping(data)
        return cls(
            frequency_type=_lenient_enum(
                FrequencyType, "frequency_type", mapping.get("frequency_type")
            ),
            operator=_lenient_enum(Operator, "operator", mapping.get("operator")),
            period=_with_default(mapping, "period", 0, int),
            cron=_optional(mapping, "cron", str),
            frequency=_optional(mapping, "frequency", int),
            silence=_optional(mapping, "silence", int),
            threshold=_optional(mapping, "threshold", int),
            timezone=_optional(mapping, "timezone", str),
            tolerance_in_secs=_optional(mapping, "tolerance_in_secs", int),
        )


@dataclass
class Aggregation:
    """Aggregation function applied by an alert query."""

    function: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"function": self.function}

    @classmethod
    def from_dict(cls, data: Any) -> "Aggregation":
        mapping = _as_mapping(data)
        return cls(function=_with_default(mapping, "function", "", str))


def _column_fields(data: Any) -> dict[str, Any]:
    mapping = _as_mapping(data)
    return {
        "column": _with_default(mapping, "column", "", str),
        "ignore_case": _with_default(mapping, "ignore_case", False, bool),
        "operator": _lenient_enum(Operator, "operator", mapping.get("operator")),
        "value": mapping.get("value"),
    }


@dataclass
class _ColumnCondition:
    column: str = ""
    ignore_case: bool = False
    operator: Operator | str = ""
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "column": self.column,
            "ignore_case": self.ignore_case,
            "operator": _text(self.operator),
            "value": self.value,
        }


@dataclass
class Condition(_ColumnCondition):
    """A comparison of a column against a value."""

    @classmethod
    def from_dict(cls, data: Any) -> "Condition":
        return cls(**_column_fields(data))


@dataclass
class PromQLCondition(_ColumnCondition):
    """A comparison applied to the result of a PromQL query."""

    @classmethod
    def from_dict(cls, data: Any) -> "PromQLCondition":
        return cls(**_column_fields(data))


@dataclass
class CompareHistoricData:
    """A time offset to compare the current window with."""

    off_set: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"offSet": self.off_set}

    @classmethod
    def from_dict(cls, data: Any) -> "CompareHistoricData":
        mapping = _as_mapping(data)
        return cls(off_set=_with_default(mapping, "offSet", "", str))


@dataclass
class QueryCondition:
    """The query an alert evaluates."""

    type: QueryType | str = ""
    aggregation: Aggregation | None = None
    multi_time_range: list[CompareHistoricData | None] | None = None
    promql: str | None = None
    promql_condition: PromQLCondition | None = None
    search_event_type: SearchEventType | None = None
    sql: str | None = None
    vrl_function: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.aggregation is not None:
            result["aggregation"] = self.aggregation.to_dict()
        if self.multi_time_range:
            result["multi_time_range"] = [
                None if item is None else item.to_dict()
                for item in self.multi_time_range
            ]
        _put(result, "promql", self.promql)
        if self.promql_condition is not None:
            result["promql_condition"] = self.promql_condition.to_dict()
        if self.search_event_type is not None:
            result["search_event_type"] = self.search_event_type.value
        _put(result, "sql", self.sql)
        result["type"] = _text(self.type)
        _put(result, "vrl_function", self.vrl_function)
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "QueryCondition":
        mapping = _as_mapping(data)
        aggregation_raw = mapping.get("aggregation")
        ranges_raw = mapping.get("multi_time_range")
        ranges: list[CompareHistoricData | None] | None = None
        if ranges_raw is not None:
            _check_type("multi_time_range", ranges_raw, list)
            ranges = [
                None if item is None else CompareHistoricData.from_dict(item)
                for item in ranges_raw
            ]
        promql_raw = mapping.get("promql_condition")
        event_raw = mapping.get("search_event_type")
        return cls(
            type=_lenient_enum(QueryType, "type", mapping.get("type")),
            aggregation=(
                None if aggregation_raw is None else Aggregation.from_dict(aggregation_raw)
            ),
            multi_time_range=ranges,
            promql=_optional(mapping, "promql", str),
            promql_condition=(
                None if promql_raw is None else PromQLCondition.from_dict(promql_raw)
            ),
            search_event_type=(
                None if event_raw is None else parse_enum(SearchEventType, event_raw)
            ),
            sql=_optional(mapping, "sql", str),
            vrl_function=_optional(mapping, "vrl_function", str),
        )


def _query_condition(mapping: Any, key: str) -> QueryCondition:
    raw = mapping.get(key)
    return QueryCondition() if raw is None else QueryCondition.from_dict(raw)


@dataclass
class Alert:
    """An alert: what it queries, when it triggers and where it notifies."""

    id: str = ""
    name: str = ""
    org_id: str = ""
    destinations: list[str] | None = field(default_factory=list)
    query_condition: QueryCondition = field(default_factory=QueryCondition)
    context_attributes: dict[str, str] | None = None
    description: str | None = None
    enabled: bool | None = None
    is_real_time: bool | None = None
    last_edited_by: str | None = None
    last_satisfied_at: int | None = None
    last_triggered_at: int | None = None
    owner: str | None = None
    row_template: str | None = None
    stream_name: str | None = None
    stream_type: str | None = None
    trigger_condition: TriggerCondition | None = None
    tz_offset: int | None = None
    updated_at: int | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.context_attributes:
            result["context_attributes"] = dict(self.context_attributes)
        _put(result, "description", self.description)
        result["destinations"] = (
            None if self.destinations is None else list(self.destinations)
        )
        _put(result, "enabled", self.enabled)
        result["id"] = self.id
        _put(result, "is_real_time", self.is_real_time)
        _put(result, "last_edited_by", self.last_edited_by)
        _put(result, "last_satisfied_at", self.last_satisfied_at)
        _put(result, "last_triggered_at", self.last_triggered_at)
        result["name"] = self.name
        result["org_id"] = self.org_id
        _put(result, "owner", self.owner)
        result["query_condition"] = self.query_condition.to_dict()
        _put(result, "row_template", self.row_template)
        _put(result, "stream_name", self.stream_name)
        _put(result, "stream_type", self.stream_type)
        if self.trigger_condition is not None:
            result["trigger_condition"] = self.trigger_condition.to_dict()
        _put(result, "tz_offset", self.tz_offset)
        _put(result, "updated_at", self.updated_at)
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "Alert":
        mapping = _as_mapping(data)
        attributes = mapping.get("context_attributes")
        if attributes is not None:
            _check_type("context_attributes", attributes, dict)
            for value in attributes.values():
                _check_type("context_attributes", value, str)
            attributes = dict(attributes)
        trigger_raw = mapping.get("trigger_condition")
        return cls(
            id=_with_default(mapping, "id", "", str),
            name=_with_default(mapping, "name", "", str),
            org_id=_with_default(mapping, "org_id", "", str),
            destinations=_string_list("destinations", mapping.get("destinations")),
            query_condition=_query_condition(mapping, "query_condition"),
            context_attributes=attributes,
            description=_optional(mapping, "description", str),
            enabled=_optional(mapping, "enabled", bool),
            is_real_time=_optional(mapping, "is_real_time", bool),
            last_edited_by=_optional(mapping, "last_edited_by", str),
            last_satisfied_at=_optional(mapping, "last_satisfied_at", int),
            last_triggered_at=_optional(mapping, "last_triggered_at", int),
            owner=_optional(mapping, "owner", str),
            row_template=_optional(mapping, "row_template", str),
            stream_name=_optional(mapping, "stream_name", str),
            stream_type=_optional(mapping, "stream_type", str),
            trigger_condition=(
                None if trigger_raw is None else TriggerCondition.from_dict(trigger_raw)
            ),
            tz_offset=_optional(mapping, "tz_offset", int),
            updated_at=_optional(mapping, "updated_at", int),
        )


@dataclass
class ListAlertsResponseItem:
    """One alert in a listing, with the folder it lives in."""

    alert_id: str = ""
    condition: QueryCondition = field(default_factory=QueryCondition)
    folder_id: str = ""
    folder_name: str = ""
    name: str = ""
    description: str | None = None
    owner: str | None = None
    last_satisfied_at: int | None = None
    last_triggered_at: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ListAlertsResponseItem":
        mapping = _as_mapping(data)
        return cls(
            alert_id=_with_default(mapping, "alert_id", "", str),
            condition=_query_condition(mapping, "condition"),
            folder_id=_with_default(mapping, "folder_id", "", str),
            folder_name=_with_default(mapping, "folder_name", "", str),
            name=_with_default(mapping, "name", "", str),
            description=_optional(mapping, "description", str),
            owner=_optional(mapping, "owner", str),
            last_satisfied_at=_optional(mapping, "last_satisfied_at", int),
            last_triggered_at=_optional(mapping, "last_triggered_at", int),
        )


@dataclass
class ListAlertsResponse:
    """The alerts of an organisation."""

    alerts: list[ListAlertsResponseItem] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ListAlertsResponse":
        mapping = _as_mapping(data)
        raw = mapping.get("list")
        if raw is None:
            return cls()
        _check_type("list", raw, list)
        return cls(alerts=[ListAlertsResponseItem.from_dict(item) for item in raw])