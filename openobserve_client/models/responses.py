"""Response bodies returned by the server, and the short-URL request body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .common import (
    UNSET,
    Unset,
    _as_mapping,
    _check_type,
    reject_unknown,
    require_properties,
)

_HTTP_REQUIRED = ("code", "message")
_HTTP_ALLOWED = _HTTP_REQUIRED + ("error_detail", "trace_id")


@dataclass
class HttpResponse:
    """Generic status body: a numeric code, a message and optional details."""

    code: int
    message: str
    error_detail: str | None | Unset = UNSET
    trace_id: str | None | Unset = UNSET

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"code": self.code}
        if not isinstance(self.error_detail, Unset):
            result["error_detail"] = self.error_detail
        result["message"] = self.message
        if not isinstance(self.trace_id, Unset):
            result["trace_id"] = self.trace_id
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "HttpResponse":
        require_properties(data, _HTTP_REQUIRED)
        reject_unknown(data, _HTTP_ALLOWED)
        _check_type("code", data["code"], int)
        _check_type("message", data["message"], str)
        optional: dict[str, Any] = {}
        for key in ("error_detail", "trace_id"):
            if key in data:
                _check_type(key, data[key], str, type(None))
                optional[key] = data[key]
        return cls(code=data["code"], message=data["message"], **optional)


@dataclass
class ShortenUrlRequest:
    """Body of a request to shorten a URL."""

    original_url: str

    def to_dict(self) -> dict[str, Any]:
        return {"original_url": self.original_url}


@dataclass
class ShortenUrlResponse:
    """The shortened URL created by the server."""

    short_url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ShortenUrlResponse":
        mapping = _as_mapping(data)
        short_url = mapping.get("short_url", "")
        if short_url is None:
            short_url = ""
        _check_type("short_url", short_url, str)
        return cls(short_url=short_url)


@dataclass
class ShortenUrlRedirect:
    """Where a short URL redirects to."""

    location: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ShortenUrlRedirect":
        mapping = _as_mapping(data)
        location: Any = ""
        for key, value in mapping.items():
            if key.lower() == "location":
                location = "" if value is None else value
                if key == "Location":
                    break
        _check_type("Location", location, str)
        return cls(location=location)


_NODE_FIELDS = ("is_ingester", "node", "took")


@dataclass
class ResponseNodeTook:
    """Time one node spent on a search."""

    is_ingester: bool
    node: str
    took: int

    def to_dict(self) -> dict[str, Any]:
        return {"is_ingester": self.is_ingester, "node": self.node, "took": self.took}

    @classmethod
    def from_dict(cls, data: Any) -> "ResponseNodeTook":
        require_properties(data, _NODE_FIELDS)
        reject_unknown(data, _NODE_FIELDS)
        _check_type("is_ingester", data["is_ingester"], bool)
        _check_type("node", data["node"], str)
        _check_type("took", data["took"], int)
        return cls(
            is_ingester=data["is_ingester"], node=data["node"], took=data["took"]
        )


_TOOK_REQUIRED = ("cache_took", "file_list_took", "idx_took", "total", "wait_in_queue")
_TOOK_ALLOWED = _TOOK_REQUIRED + (
    "search_took",
    "cluster_total",
    "cluster_wait_queue",
    "nodes",
)


@dataclass
class ResponseTook:
    """Breakdown of the time a search took, overall and per node."""

    cache_took: int
    file_list_took: int
    idx_took: int
    total: int
    wait_queue: int
    search_took: int = 0
    cluster_total: int | None = None
    cluster_wait_queue: int | None = None
    nodes: list[ResponseNodeTook] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "search_took": self.search_took,
            "cache_took": self.cache_took,
            "file_list_took": self.file_list_took,
            "cluster_total": self.cluster_total,
            "cluster_wait_queue": self.cluster_wait_queue,
            "idx_took": self.idx_took,
        }
        if self.nodes is not None:
            result["nodes"] = [node.to_dict() for node in self.nodes]
        result["total"] = self.total
        result["wait_in_queue"] = self.wait_queue
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "ResponseTook":
        require_properties(data, _TOOK_REQUIRED)
        reject_unknown(data, _TOOK_ALLOWED)
        for key in _TOOK_REQUIRED:
            _check_type(key, data[key], int)
        search_took = data.get("search_took", 0)
        if search_took is None:
            search_took = 0
        _check_type("search_took", search_took, int)
        for key in ("cluster_total", "cluster_wait_queue"):
            if key in data:
                _check_type(key, data[key], int, type(None))
        nodes_raw = data.get("nodes")
        nodes: list[ResponseNodeTook] | None = None
        if nodes_raw is not None:
            _check_type("nodes", nodes_raw, list)
            nodes = [ResponseNodeTook.from_dict(item) for item in nodes_raw]
        return cls(
            cache_took=data["cache_took"],
            file_list_took=data["file_list_took"],
            idx_took=data["idx_took"],
            total=data["total"],
            wait_queue=data["wait_in_queue"],
            search_took=search_took,
            cluster_total=data.get("cluster_total"),
            cluster_wait_queue=data.get("cluster_wait_queue"),
            nodes=nodes,
        )