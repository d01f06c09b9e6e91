"""Tests for JSON extraction."""

import pytest

from domweave.core import JSONParseError, extract_json, safe_json_dumps
from domweave.core.json import extract_json_boundaries


@pytest.mark.unit
def test_extract_plain_object():
    assert extract_json('{"tag": "div"}') == {"tag": "div"}


@pytest.mark.unit
def test_extract_array():
    assert extract_json('[{"tag": "p"}, "x"]') == [{"tag": "p"}, "x"]


@pytest.mark.unit
def test_extract_from_surrounding_text():
    text = 'Here you go:\n```json\n{"tag": "ul", "children": []}\n```\nDone.'
    assert extract_json(text) == {"tag": "ul", "children": []}


@pytest.mark.unit
def test_boundaries_not_found():
    assert extract_json_boundaries("plain words") is None


@pytest.mark.unit
def test_repair_path():
    assert extract_json("{'tag': 'div', 'class': 'a',}") == {"tag": "div", "class": "a"}


@pytest.mark.unit
def test_no_repair_raises():
    with pytest.raises(JSONParseError) as exc_info:
        extract_json('{"tag": "div",}', repair=False)
    assert exc_info.value.original is not None


@pytest.mark.unit
def test_no_json_raises():
    with pytest.raises(JSONParseError):
        extract_json("nothing to see")


@pytest.mark.unit
def test_safe_json_dumps():
    assert safe_json_dumps({"a": [1, 2]}) == '{"a":[1,2]}'
    with pytest.raises(JSONParseError):
        safe_json_dumps({"a": object()})
