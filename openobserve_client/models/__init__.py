"""Typed models for the documents exchanged with the OpenObserve API."""

__all__ = [
    "alerts",
    "common",
    "dashboards",
    "enums",
    "fields",
    "panels",
    "query",
    "responses",
]