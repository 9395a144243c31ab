import pytest

from openobserve_client.models.common import UNSET
from openobserve_client.models.fields import PanelFields
from openobserve_client.models.panels import Panel, PanelConfig


def _config_dict():
    return {"description": "desc", "show_legends": True, "title": "Errors"}


def _fields_dict():
    return {
        "filter": [],
        "stream": "k8s",
        "stream_type": "logs",
        "x": [{"alias": "ts", "column": "_timestamp", "label": "Time"}],
        "y": [],
    }


def _panel_dict():
    return {
        "config": _config_dict(),
        "customQuery": False,
        "fields": _fields_dict(),
        "id": "panel1",
        "query": "select * from k8s",
        "type": "bar",
    }


def test_config_required_only_serializes_required_keys():
    cfg = PanelConfig(description="desc", show_legends=False, title="t")
    assert cfg.to_dict() == {"description": "desc", "show_legends": False, "title": "t"}


def test_config_optional_values_round_trip():
    data = dict(_config_dict(), unit="bytes", legends_position=None)
    cfg = PanelConfig.from_dict(data)
    assert cfg.unit == "bytes"
    assert cfg.legends_position is None
    assert cfg.promql_legend is UNSET
    assert cfg.to_dict() == data


def test_config_explicit_null_differs_from_unset():
    cfg = PanelConfig(description="d", show_legends=True, title="t", unit_custom=None)
    assert "unit_custom" in cfg.to_dict()
    assert cfg.to_dict()["unit_custom"] is None
    assert "unit" not in cfg.to_dict()


@pytest.mark.parametrize("missing", ["description", "show_legends", "title"])
def test_config_missing_required(missing):
    data = _config_dict()
    del data[missing]
    with pytest.raises(ValueError, match=f"no value given for required property {missing}"):
        PanelConfig.from_dict(data)


def test_config_unknown_field_rejected():
    with pytest.raises(ValueError, match="unknown field"):
        PanelConfig.from_dict(dict(_config_dict(), extra=1))


def test_config_wrong_type_rejected():
    with pytest.raises(TypeError):
        PanelConfig.from_dict(dict(_config_dict(), show_legends="yes"))


def test_panel_round_trip():
    data = _panel_dict()
    panel = Panel.from_dict(data)
    assert panel.id == "panel1"
    assert panel.custom_query is False
    assert panel.query_type is None
    assert isinstance(panel.config, PanelConfig)
    assert isinstance(panel.fields, PanelFields)
    assert panel.to_dict() == data


def test_panel_query_type_kept():
    data = dict(_panel_dict(), queryType="sql")
    panel = Panel.from_dict(data)
    assert panel.query_type == "sql"
    assert panel.to_dict()["queryType"] == "sql"


def test_panel_null_query_type_omitted():
    panel = Panel.from_dict(dict(_panel_dict(), queryType=None))
    assert "queryType" not in panel.to_dict()


@pytest.mark.parametrize(
    "missing", ["config", "customQuery", "fields", "id", "query", "type"]
)
def test_panel_missing_required(missing):
    data = _panel_dict()
    del data[missing]
    with pytest.raises(ValueError, match=missing):
        Panel.from_dict(data)


def test_panel_nested_config_validated():
    data = _panel_dict()
    del data["config"]["title"]
    with pytest.raises(ValueError, match="required property title"):
        Panel.from_dict(data)


def test_panel_nested_fields_validated():
    data = _panel_dict()
    data["fields"]["bogus"] = True
    with pytest.raises(ValueError, match="unknown field"):
        Panel.from_dict(data)


def test_panel_unknown_field_rejected():
    with pytest.raises(ValueError, match="unknown field"):
        Panel.from_dict(dict(_panel_dict(), layout={}))


def test_panel_not_an_object():
    with pytest.raises(TypeError):
        Panel.from_dict(["not", "a", "dict"])