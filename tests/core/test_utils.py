import pytest
from collections import OrderedDict

from civic_connectors.core.exceptions import ParseError
from civic_connectors.core.utils import encode_query_string, parse_json, redact_key


# ---------------- encode_query_string ----------------

def test_encode_empty():
    assert encode_query_string({}) == ""
    assert encode_query_string(None) == ""


def test_encode_spaces_and_reserved_characters():
    assert encode_query_string({"address": "123 Main St."}) == "address=123+Main+St."
    assert encode_query_string({"query": "ocd-division/country:us"}) == "query=ocd-division%2Fcountry%3Aus"


def test_encode_list_as_repeated_key():
    query = encode_query_string({"tag": ["a", "b"], "other": ("c",)})
    assert query == "tag=a&tag=b&other=c"
    assert "tag[0]" not in query and "%5B0%5D" not in query


def test_encode_booleans():
    assert encode_query_string({"officialOnly": True, "recursive": False}) == "officialOnly=true&recursive=false"


def test_encode_skips_none():
    assert encode_query_string({"address": "x", "electionId": None, "levels": [None, "country"]}) == \
        "address=x&levels=country"


def test_encode_keeps_insertion_order():
    assert encode_query_string({"b": 1, "a": 2}) == "b=1&a=2"


# ---------------- parse_json ----------------

def test_parse_json_generic():
    assert parse_json('{"a": [1, {"b": null}]}') == {"a": [1, {"b": None}]}


def test_parse_json_ordered():
    data = parse_json('{"z": 1, "y": {"x": 2, "w": 3}}', ordered=True)
    assert isinstance(data, OrderedDict)
    assert isinstance(data["y"], OrderedDict)
    assert list(data["y"]) == ["x", "w"]


@pytest.mark.parametrize("text", ["", "{", "not json", None])
def test_parse_json_invalid(text):
    with pytest.raises(ParseError):
        parse_json(text)


# ---------------- redact_key ----------------

def test_redact_key():
    url = "https://www.googleapis.com/civicinfo/v2/elections/?key=SECRET"
    assert redact_key(url, "SECRET") == "https://www.googleapis.com/civicinfo/v2/elections/?key=***"


def test_redact_key_encoded():
    url = "https://example.test/divisions/?query=x&key=a%2Bb"
    assert redact_key(url, "a+b").endswith("key=***")


def test_redact_without_key():
    assert redact_key("https://example.test/?a=1", None) == "https://example.test/?a=1"


def test_redact_key_param_without_known_key():
    message = "Max retries exceeded with url: /civicinfo/v2/divisions/?query=ks&key=ABC123 (Caused by timeout)"
    assert redact_key(message) == \
        "Max retries exceeded with url: /civicinfo/v2/divisions/?query=ks&key=*** (Caused by timeout)"
