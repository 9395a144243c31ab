# openobserve-client

A small Python client for the OpenObserve HTTP API. It reads alerts and
dashboards, deletes users, shortens URLs and lists clusters, and ships typed
models for the JSON documents the server exchanges.

## Connecting

```python
from openobserve_client.client import Client, ClientConfig
from openobserve_client.api import API

password = "password"
config = ClientConfig(
    base_url="https://observe.example.com",
    username="admin@example.com",
    password=password,
    timeout=10.0,
)
api = API(Client(config))
```

`ClientConfig` also takes `headers` (extra headers sent with every request),
`retries` (connection retries, passed to the HTTP adapter when above zero) and
`debug` (log each response status at debug level).

Every request carries HTTP basic authentication built from the username and
password, and a `Content-Type: application/json` header. Request bodies are
serialised to JSON; model objects are encoded through their `to_dict()`.
`Client.do(method, path, body)` sends a single request and returns the
`requests.Response`; the `API` class builds on it.

## Calls

```python
alert = api.get_alert("default", "alert-id")
print(alert.name, alert.org_id)

alerts = api.list_alerts("default", enabled=True, page_size=50, stream_type="logs")
for item in alerts.alerts or []:
    print(item.alert_id, item.name, item.folder_name)

listing = api.dashboards("default", title="Overview")
for entry in listing.dashboards or []:
    print(entry.dashboard_id, entry.title)

dashboard = api.get_dashboard("default", "dashboard-id")
print(dashboard.version, dashboard.hash)

clusters = api.list_clusters()          # {"region": ["cluster", ...], ...}

from openobserve_client.models.responses import ShortenUrlRequest
short = api.shorten_url("default", ShortenUrlRequest("https://observe.example.com/web/logs"))
print(short.short_url)

api.delete_user("default", "someone@example.com")
```

Query parameters are only sent for the arguments that are not `None`.
`dashboards` accepts `page_size` but does not send it. `delete_user` returns
the server's status body as an `HttpResponse`, or `None` when the reply is
empty. `build_path(*args)` and `UrlPath` build request paths under `/api`.

## Errors

- `openobserve_client.client.RequestError` is raised when a body cannot be
  encoded, a request cannot be sent, or the server answers 500 or 501; the
  message holds the status and the response body, and `.response` holds the
  response where there is one.
- `openobserve_client.api.APIError` is raised when the server answers with a
  status other than the one the call expects; `.status_code` holds it. For
  `delete_user`, the message is the HTTP status followed by the message from
  the server's error document (see `API.error`).
- Decoding a document raises `ValueError` for a missing required or unknown
  property and `TypeError` for a value of the wrong type.

## Models

The `openobserve_client.models` package holds the data types used by the API:

- `models.enums`: `AggregationFunc`, `OrderBy`, `RequestEncoding`,
  `SearchEventType`, and `parse_enum(enum_cls, value)`, which raises
  `ValueError` on values the enum does not allow.
- `models.common`: `CustomFieldsOption`, the `Unset` marker (`UNSET`) that
  tells a missing optional field apart from an explicit `null`, and the
  validation helpers `require_properties` and `reject_unknown`.
- `models.query`: `QueryData`.
- `models.responses`: `HttpResponse`, `ResponseTook`, `ResponseNodeTook`,
  `ShortenUrlRequest`, `ShortenUrlResponse` and `ShortenUrlRedirect`.
- `models.fields`: `AxisItem`, `PanelFilter`, `PanelFields`.
- `models.panels`: `PanelConfig`, `Panel`.
- `models.dashboards`: `Layout`, `Dashboard`, `DashboardsResponse`,
  `DashboardsResponseItem`, `DashboardResponse`.
- `models.alerts`: `Alert`, `QueryCondition`, `TriggerCondition`,
  `Condition`, `PromQLCondition`, `Aggregation`, `CompareHistoricData`,
  `ListAlertsResponse`, `ListAlertsResponseItem`, and the `FrequencyType`,
  `QueryType` and `Operator` enums.

Models convert to a JSON-ready dictionary with `to_dict()` and are built from
a decoded document with `from_dict(data)`. The dashboard-building models
(`AxisItem`, `PanelFilter`, `Panel`, `Dashboard` and the like) check that
required properties are present and reject properties they do not know; the
alert and listing models are lenient and fill absent fields with defaults.

```python
from openobserve_client.models.fields import AxisItem
from openobserve_client.models.enums import AggregationFunc, parse_enum

item = AxisItem.from_dict({"alias": "x", "column": "_timestamp", "label": "Time"})
assert item.to_dict() == {"alias": "x", "column": "_timestamp", "label": "Time"}
assert parse_enum(AggregationFunc, "count-distinct") is AggregationFunc.COUNT_DISTINCT
```

## Logging

`openobserve_client.client.init_logger(debug)` attaches a standard-output
handler to the `openobserve_client` logger, sets its level, and returns a
`DefaultLogger`. `DefaultLogger` writes messages prefixed with `INFO:`,
`ERROR:` or `DEBUG:`, and debug messages only when debugging is on.

## What it does not do

- There is no command-line tool; the package is a library only.
- It does not run searches: there are no calls for search, search history or
  search partitions.
- Alerts and dashboards can be read but not created, updated, moved or
  deleted. Of the user calls, only deletion is available.
- Folders, functions, key-value storage, metrics, organisations, streams,
  syslog, traces and saved views have no calls.