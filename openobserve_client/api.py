"""Server API calls: alerts, dashboards, users, short URLs and clusters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

import requests

from .client import _PATH_SAFE, Client, _join_path, _status_text
from .models.alerts import Alert, ListAlertsResponse
from .models.common import _check_type
from .models.dashboards import DashboardResponse, DashboardsResponse
from .models.responses import (
    HttpResponse,
    ShortenUrlRedirect,
    ShortenUrlRequest,
    ShortenUrlResponse,
)

BASE_PATH = "/api"


class APIError(Exception):
    """The server answered a request with an unexpected status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def build_path(*args: str) -> str:
    """Join ``args`` under the API base path."""
    return quote(_join_path(BASE_PATH, *args), safe=_PATH_SAFE)


def _query_suffix(query_params: Mapping[str, Any]) -> str:
    if not query_params:
        return ""
    return "?" + urlencode(dict(query_params))


class UrlPath:
    """A request path under the API base path, with optional query parameters."""

    def __init__(self, value: str = "") -> None:
        self.value = value

    def __str__(self) -> str:
        return self.value

    def set(self, *args: str) -> None:
        self.value = build_path(*args)

    def add_query_params(self, query_params: Mapping[str, Any]) -> None:
        self.value += _query_suffix(query_params)


class API:
    """Typed calls to the server over a Client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _fail(self, response: requests.Response, message: str) -> APIError:
        return APIError(
            f"{message}: {_status_text(response)}", status_code=response.status_code
        )

    def error(self, response: requests.Response) -> APIError:
        """Build the error for a failed response from its JSON error body."""
        body = HttpResponse.from_dict(response.json())
        return APIError(
            f"{_status_text(response)} {body.message}", status_code=response.status_code
        )

    def shorten_url(self, org_id: str, request: ShortenUrlRequest) -> ShortenUrlResponse:
        response = self._client.do("POST", build_path(org_id, "short"), request)
        if response.status_code != 201:
            raise self._fail(response, "failed to create shorten url")
        return ShortenUrlResponse.from_dict(response.json())

    def retrieve_short_url(self, org_id: str, short_id: str) -> ShortenUrlRedirect:
        path = f"/short/{org_id}/short/{short_id}"
        response = self._client.do("GET", path, None)
        if response.status_code == 404:
            raise APIError(_status_text(response), status_code=404)
        return ShortenUrlRedirect.from_dict(response.json())

    def list_clusters(self) -> dict[str, list[str]]:
        response = self._client.do("GET", build_path("clusters"), None)
        if response.status_code != 200:
            raise self._fail(response, "failed to list clusters")
        data = response.json()
        _check_type("clusters", data, dict)
        clusters: dict[str, list[str]] = {}
        for region, names in data.items():
            if names is None:
                clusters[region] = []
                continue
            _check_type(region, names, list)
            for name in names:
                _check_type(region, name, str)
            clusters[region] = list(names)
        return clusters

    def list_alerts(
        self,
        org_id: str,
        folder: str | None = None,
        owner: str | None = None,
        enabled: bool | None = None,
        page_size: int | None = None,
        stream_type: str | None = None,
        stream_name: str | None = None,
    ) -> ListAlertsResponse:
        params: dict[str, str] = {}
        if folder is not None:
            params["folder"] = folder
        if owner is not None:
            params["owner"] = owner
        if enabled is not None:
            params["enabled"] = "true" if enabled else "false"
        if page_size is not None:
            params["pageSize"] = str(page_size)
        if stream_type is not None:
            params["streamType"] = stream_type
        if stream_name is not None:
            params["streamName"] = stream_name
        path = build_path("v2", org_id, "alerts") + _query_suffix(params)
        response = self._client.do("GET", path, None)
        if response.status_code != 200:
            raise self._fail(response, "failed to get Alerts")
        return ListAlertsResponse.from_dict(response.json())

    def get_alert(self, org_id: str, alert_id: str) -> Alert:
        response = self._client.do("GET", build_path("v2", org_id, "alerts", alert_id), None)
        if response.status_code != 200:
            raise self._fail(response, "failed to get Alerts")
        return Alert.from_dict(response.json())

    def get_dashboard(self, org_id: str, dashboard_id: str) -> DashboardResponse:
        response = self._client.do(
            "GET", build_path(org_id, "dashboards", dashboard_id), None
        )
        if response.status_code == 404:
            raise APIError(_status_text(response), status_code=404)
        if response.status_code != 200:
            raise self._fail(response, "failed to get dashboards")
        return DashboardResponse.from_dict(response.json())

    def dashboards(
        self,
        org_id: str,
        folder: str | None = None,
        title: str | None = None,
        page_size: int | None = None,
    ) -> DashboardsResponse:
        """List dashboards; ``page_size`` is accepted but the server is not paged."""
        params: dict[str, str] = {}
        if folder is not None:
            params["folder"] = folder
        if title is not None:
            params["title"] = title
        path = build_path(org_id, "dashboards") + _query_suffix(params)
        response = self._client.do("GET", path, None)
        if response.status_code != 200:
            raise self._fail(response, "failed to list dashboards")
        return DashboardsResponse.from_dict(response.json())

    def delete_user(self, org_id: str, email: str) -> HttpResponse | None:
        """Delete a user; returns the status body, or None if the server sent none."""
        response = self._client.do("DELETE", build_path(org_id, "users", email), None)
        if response.status_code != 204:
            raise self.error(response)
        if not response.content.strip():
            return None
        return HttpResponse.from_dict(response.json())