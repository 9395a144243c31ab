"""HTTP client that sends authenticated JSON requests to the server."""

from __future__ import annotations

import base64
import dataclasses
import json
import logging
import posixpath
import re
import sys
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any
from urllib.parse import quote, urlsplit, urlunsplit

import requests
from requests.adapters import HTTPAdapter

_LOGGER_NAME = "openobserve_client"
_log = logging.getLogger(_LOGGER_NAME)
_stdout_handler: logging.Handler | None = None

_PATH_SAFE = "/:@!$&'()*+,;=-._~%"
_ERROR_STATUSES = frozenset({HTTPStatus.INTERNAL_SERVER_ERROR, HTTPStatus.NOT_IMPLEMENTED})


class DefaultLogger:
    """Logger that writes prefixed messages; debug messages only when enabled."""

    def __init__(self, debug: bool = False) -> None:
        self.debug_enabled = debug

    def info(self, msg: str) -> None:
        _log.info("INFO: %s", msg)

    def error(self, msg: str) -> None:
        _log.error("ERROR: %s", msg)

    def debug(self, msg: str) -> None:
        if self.debug_enabled:
            _log.debug("DEBUG: %s", msg)


def init_logger(debug: bool) -> DefaultLogger:
    """Send the package's log output to standard output and return a logger."""
    global _stdout_handler
    if _stdout_handler is None:
        _stdout_handler = logging.StreamHandler(sys.stdout)
        _stdout_handler.setFormatter(
            logging.Formatter("%(asctime)s %(message)s", "%Y/%m/%d %H:%M:%S")
        )
        _log.addHandler(_stdout_handler)
    _log.setLevel(logging.DEBUG if debug else logging.INFO)
    return DefaultLogger(debug)


@dataclass
class ClientConfig:
    """Connection settings for a server."""

    base_url: str
    username: str = ""
    password: str = ""
    timeout: float | None = None
    headers: dict[str, str] = field(default_factory=dict)
    retries: int = 0
    debug: bool = False


class RequestError(Exception):
    """A request could not be sent, or the server failed to handle it."""

    def __init__(self, message: str, response: requests.Response | None = None) -> None:
        super().__init__(message)
        self.response = response


def _status_text(response: requests.Response) -> str:
    reason = response.reason
    if not reason:
        try:
            reason = HTTPStatus(response.status_code).phrase
        except ValueError:
            reason = ""
    return f"{response.status_code} {reason}".rstrip()


def _join_path(base: str, *elements: str) -> str:
    """Join path elements onto ``base`` and clean the result."""
    parts = [part for part in (base, *elements) if part]
    if not parts:
        return ""
    joined = posixpath.normpath("/".join(parts))
    joined = re.sub(r"^/+", "/", joined)
    if elements and elements[-1].endswith("/") and not joined.endswith("/"):
        joined += "/"
    return joined


def _join_url(base_url: str, path: str) -> str:
    base = urlsplit(base_url)
    path_part, _, query = path.partition("?")
    joined = quote(_join_path(base.path, path_part), safe=_PATH_SAFE)
    return urlunsplit((base.scheme, base.netloc, joined, query or base.query, ""))


def _to_json(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


class Client:
    """Sends JSON requests with basic authentication to the configured server."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self._session = requests.Session()
        if config.retries > 0:
            adapter = HTTPAdapter(max_retries=config.retries)
            self._session.mount("http://", adapter)
            self._session.mount("https://", adapter)
        self._logger = DefaultLogger(config.debug)

    def _auth_header(self) -> str:
        credentials = f"{self.config.username}:{self.config.password}".encode()
        return "Basic " + base64.b64encode(credentials).decode("ascii")

    def do(self, method: str, path: str, body: Any = None) -> requests.Response:
        """Send ``body`` as JSON to ``path`` and return the response.

        Raises RequestError if the body cannot be encoded, the request cannot be
        sent, or the server answers 500 or 501.
        """
        data: bytes | None = None
        if body is not None:
            try:
                data = json.dumps(body, default=_to_json).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise RequestError(f"failed to marshal request body: {exc}") from exc

        url = _join_url(self.config.base_url, path)
        headers = dict(self.config.headers)
        headers["Authorization"] = self._auth_header()
        headers["Content-Type"] = "application/json"

        try:
            response = self._session.request(
                method,
                url,
                data=data,
                headers=headers,
                timeout=self.config.timeout or None,
            )
        except requests.RequestException as exc:
            raise RequestError(f"failed to execute request: {exc}") from exc

        self._logger.debug(f"response status: {response.status_code}")

        if response.status_code in _ERROR_STATUSES:
            raise RequestError(
                f"request failed with status {_status_text(response)}: {response.text}",
                response=response,
            )
        return response