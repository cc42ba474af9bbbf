"""レスポンスパーサのテスト。"""

from __future__ import annotations

import pytest

from curlall.errors import MalformedResponseError
from curlall.parsers import extract_records, parse_json_response


def test_values_take_precedence_over_items() -> None:
    parsed = parse_json_response('{"items": [9], "values": [1, 2], "next": "/b"}')

    assert parsed.records == [1, 2]
    assert parsed.shape == "values"
    assert parsed.next == "/b"


def test_items_are_used_when_values_missing() -> None:
    parsed = parse_json_response('{"items": [{"id": 1}]}')

    assert parsed.records == [{"id": 1}]
    assert parsed.shape == "items"
    assert parsed.next is None


def test_non_array_values_fall_through_to_items() -> None:
    assert extract_records({"values": {"a": 1}, "items": [3]}) == ("items", [3])


def test_bare_array_body() -> None:
    parsed = parse_json_response("[1, 2, 3]")

    assert parsed.records == [1, 2, 3]
    assert parsed.shape == "array"


def test_next_field_must_be_a_string() -> None:
    assert parse_json_response('{"values": [1], "next": 2}').next is None
    assert parse_json_response('{"values": [1], "next": null}').next is None


def test_missing_record_array_is_malformed() -> None:
    body = '{"data": [1, 2]}'

    with pytest.raises(MalformedResponseError) as excinfo:
        parse_json_response(body, request_url="https://example.invalid/x")

    assert str(excinfo.value) == (
        'Could not read values from response. Expected either {"values": [...]} or [...], '
        'got: {"data": [1, 2]}'
    )
    assert excinfo.value.context.raw_response == body
    assert excinfo.value.context.request_url == "https://example.invalid/x"


def test_scalar_body_is_malformed() -> None:
    with pytest.raises(MalformedResponseError):
        parse_json_response("42")


def test_invalid_json_is_malformed() -> None:
    with pytest.raises(MalformedResponseError) as excinfo:
        parse_json_response("<html>oops</html>")

    assert "Could not decode response as JSON" in str(excinfo.value)
