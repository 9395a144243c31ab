import json

import pytest

from openobserve_client.models.common import UNSET
from openobserve_client.models.query import QueryData


def make(**overrides):
    values = {"field": "level", "stream": "k8s", "stream_type": "logs"}
    values.update(overrides)
    return QueryData(**values)


def test_unset_limit_is_omitted():
    assert make().to_dict() == {"field": "level", "stream": "k8s", "stream_type": "logs"}


def test_explicit_null_limit_is_kept():
    assert make(max_record_size=None).to_dict()["max_record_size"] is None


def test_limit_is_written():
    assert make(max_record_size=250).to_dict()["max_record_size"] == 250


@pytest.mark.parametrize("limit", [UNSET, None, 250])
def test_round_trip_through_json(limit):
    query = make(max_record_size=limit)
    restored = QueryData.from_dict(json.loads(json.dumps(query.to_dict())))
    assert restored == query


def test_absent_limit_reads_as_unset():
    restored = QueryData.from_dict({"field": "level", "stream": "k8s", "stream_type": "logs"})
    assert restored.max_record_size is UNSET


def test_missing_required_property():
    with pytest.raises(ValueError, match="required property stream_type"):
        QueryData.from_dict({"field": "level", "stream": "k8s"})


def test_unknown_property_is_rejected():
    data = make().to_dict()
    data["size"] = 5
    with pytest.raises(ValueError, match="size"):
        QueryData.from_dict(data)


def test_boolean_limit_is_rejected():
    data = make().to_dict()
    data["max_record_size"] = True
    with pytest.raises(TypeError, match="max_record_size"):
        QueryData.from_dict(data)


def test_non_string_field_is_rejected():
    with pytest.raises(TypeError, match="field"):
        QueryData.from_dict({"field": 1, "stream": "k8s", "stream_type": "logs"})