"""String enumerations used by the search and dashboard models."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar


class _StringEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class AggregationFunc(_StringEnum):
    """Aggregation applied to a chart axis."""

    COUNT = "count"
    COUNT_DISTINCT = "count-distinct"
    HISTOGRAM = "histogram"
    SUM = "sum"
    MIN = "min"
    MAX = "max"
    AVG = "avg"
    MEDIAN = "median"


class OrderBy(_StringEnum):
    """Sort direction."""

    DESC = "desc"
    ASC = "asc"


class RequestEncoding(_StringEnum):
    """Encoding of a search request's SQL text."""

    BASE64 = "base64"
    EMPTY = "Empty"


class SearchEventType(_StringEnum):
    """Origin of a search request."""

    UI = "ui"
    DASHBOARDS = "dashboards"
    REPORTS = "reports"
    ALERTS = "alerts"
    VALUES = "values"
    OTHER = "other"
    RUM = "rum"
    DERIVEDSTREAM = "derivedstream"
    SEARCHJOB = "searchjob"


E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: type[E], value: Any) -> E:
    """Return the member of ``enum_cls`` for ``value`` or raise ValueError."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise TypeError(
            f"{enum_cls.__name__} expects a string, got {type(value).__name__}"
        )
    try:
        return enum_cls(value)
    except ValueError:
        valid = " ".join(member.value for member in enum_cls)
        raise ValueError(
            f"invalid value '{value}' for {enum_cls.__name__}: valid values are [{valid}]"
        ) from None