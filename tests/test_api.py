from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from openobserve_client.api import API, APIError, UrlPath, build_path
from openobserve_client.client import Client, ClientConfig, RequestError
from openobserve_client.models.alerts import QueryType
from openobserve_client.models.responses import ShortenUrlRequest

BASE = "http://openobserve.test"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def api():
    password = "password"
    return API(Client(ClientConfig(base_url=BASE, username="user", password=password)))


def _query(mocked):
    return parse_qs(urlsplit(mocked.calls[0].request.url).query)


def test_build_path_joins_under_api():
    assert build_path("default", "users") == "/api/default/users"
    assert build_path("v2", "org", "alerts", "a1") == "/api/v2/org/alerts/a1"


def test_build_path_cleans_empty_elements():
    assert build_path("org", "", "dashboards") == "/api/org/dashboards"


def test_url_path_set_and_query():
    path = UrlPath()
    path.set("org", "_search")
    assert str(path) == "/api/org/_search"
    path.add_query_params({"a": "1", "b": "2"})
    assert str(path) == "/api/org/_search?a=1&b=2"


def test_url_path_empty_query_leaves_path():
    path = UrlPath()
    path.set("org")
    path.add_query_params({})
    assert str(path) == "/api/org"


def test_list_alerts_sends_filters(mocked, api):
    mocked.add(
        responses.GET,
        BASE + "/api/v2/default/alerts",
        json={
            "list": [
                {
                    "alert_id": "a1",
                    "condition": {"type": "sql", "sql": "select 1"},
                    "folder_id": "f1",
                    "folder_name": "Default",
                    "name": "errors",
                }
            ]
        },
    )
    result = api.list_alerts("default", folder="f1", enabled=True, page_size=10)
    assert _query(mocked) == {"folder": ["f1"], "enabled": ["true"], "pageSize": ["10"]}
    assert result.alerts[0].alert_id == "a1"
    assert result.alerts[0].condition.type is QueryType.SQL


def test_list_alerts_without_filters_sends_no_query(mocked, api):
    mocked.add(responses.GET, BASE + "/api/v2/default/alerts", json={"list": []})
    result = api.list_alerts("default")
    assert urlsplit(mocked.calls[0].request.url).query == ""
    assert result.alerts == []


def test_list_alerts_error_status(mocked, api):
    mocked.add(responses.GET, BASE + "/api/v2/default/alerts", json={}, status=403)
    with pytest.raises(APIError, match="failed to get Alerts: 403") as info:
        api.list_alerts("default")
    assert info.value.status_code == 403


def test_get_alert(mocked, api):
    mocked.add(
        responses.GET,
        BASE + "/api/v2/default/alerts/a1",
        json={"id": "a1", "name": "errors", "org_id": "default", "destinations": ["d"]},
    )
    alert = api.get_alert("default", "a1")
    assert alert.id == "a1"
    assert alert.destinations == ["d"]


def test_get_dashboard(mocked, api):
    mocked.add(
        responses.GET,
        BASE + "/api/default/dashboards/d1",
        json={"version": 3, "hash": "abc", "v3": {"title": "t"}},
    )
    dashboard = api.get_dashboard("default", "d1")
    assert dashboard.version == 3
    assert dashboard.v3 == {"title": "t"}


def test_get_dashboard_not_found(mocked, api):
    mocked.add(responses.GET, BASE + "/api/default/dashboards/d1", json={}, status=404)
    with pytest.raises(APIError) as info:
        api.get_dashboard("default", "d1")
    assert info.value.status_code == 404


def test_dashboards_ignores_page_size(mocked, api):
    mocked.add(
        responses.GET,
        BASE + "/api/default/dashboards",
        json={"dashboards": [{"dashboard_id": "d1", "title": "Main"}]},
    )
    result = api.dashboards("default", title="Main", page_size=5)
    assert _query(mocked) == {"title": ["Main"]}
    assert result.dashboards[0].dashboard_id == "d1"


def test_dashboards_error_status(mocked, api):
    mocked.add(responses.GET, BASE + "/api/default/dashboards", json={}, status=401)
    with pytest.raises(APIError, match="401"):
        api.dashboards("default")


def test_delete_user_no_content(mocked, api):
    mocked.add(responses.DELETE, BASE + "/api/default/users/u@example.com", status=204)
    assert api.delete_user("default", "u@example.com") is None
    assert urlsplit(mocked.calls[0].request.url).path == "/api/default/users/u@example.com"


def test_delete_user_with_body(mocked, api):
    mocked.add(
        responses.DELETE,
        BASE + "/api/default/users/u@example.com",
        json={"code": 200, "message": "deleted"},
        status=204,
    )
    result = api.delete_user("default", "u@example.com")
    assert result.message == "deleted"


def test_delete_user_error_uses_message(mocked, api):
    mocked.add(
        responses.DELETE,
        BASE + "/api/default/users/u@example.com",
        json={"code": 400, "message": "user not found"},
        status=400,
    )
    with pytest.raises(APIError, match="user not found") as info:
        api.delete_user("default", "u@example.com")
    assert info.value.status_code == 400


def test_error_with_malformed_body_raises_decode_error(mocked, api):
    mocked.add(
        responses.DELETE,
        BASE + "/api/default/users/u@example.com",
        json={"unexpected": True},
        status=400,
    )
    with pytest.raises(ValueError, match="no value given for required property code"):
        api.delete_user("default", "u@example.com")


def test_shorten_url(mocked, api):
    mocked.add(
        responses.POST,
        BASE + "/api/default/short",
        json={"short_url": "http://s.test/abc"},
        status=201,
    )
    result = api.shorten_url("default", ShortenUrlRequest(original_url="http://a.test/long"))
    assert result.short_url == "http://s.test/abc"


def test_shorten_url_requires_created(mocked, api):
    mocked.add(responses.POST, BASE + "/api/default/short", json={}, status=200)
    with pytest.raises(APIError, match="failed to create shorten url"):
        api.shorten_url("default", ShortenUrlRequest(original_url="http://a.test/long"))


def test_retrieve_short_url(mocked, api):
    mocked.add(
        responses.GET,
        BASE + "/short/default/short/abc",
        json={"Location": "http://a.test/long"},
    )
    assert api.retrieve_short_url("default", "abc").location == "http://a.test/long"


def test_retrieve_short_url_not_found(mocked, api):
    mocked.add(responses.GET, BASE + "/short/default/short/abc", json={}, status=404)
    with pytest.raises(APIError) as info:
        api.retrieve_short_url("default", "abc")
    assert info.value.status_code == 404


def test_list_clusters(mocked, api):
    mocked.add(responses.GET, BASE + "/api/clusters", json={"eu": ["c1", "c2"], "us": None})
    assert api.list_clusters() == {"eu": ["c1", "c2"], "us": []}


def test_server_error_comes_from_client(mocked, api):
    mocked.add(responses.GET, BASE + "/api/clusters", body="down", status=500)
    with pytest.raises(RequestError, match="500"):
        api.list_clusters()