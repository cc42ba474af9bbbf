"""入力バリデーションのテスト。"""

from __future__ import annotations

import io

import httpx
import pytest

from curlall.errors import CurlallValidationError, UrlResolutionError
from curlall.http import build_request_headers
from curlall.output import write_record
from curlall.validation import parse_header_line, parse_start_url


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Accept: application/json", ("Accept", "application/json")),
        ("X-Token:abc", ("X-Token", "abc")),
        ("X-Url: http://a/b", ("X-Url", "http://a/b")),
        ("X-Empty", ("X-Empty", "")),
    ],
)
def test_parse_header_line(raw: str, expected: tuple[str, str]) -> None:
    assert parse_header_line(raw) == expected


def test_parse_header_line_rejects_empty_name() -> None:
    with pytest.raises(CurlallValidationError) as excinfo:
        parse_header_line(": value")

    assert excinfo.value.validation_code == "invalid_header"


def test_build_request_headers_defaults_user_agent() -> None:
    assert build_request_headers("curlall/0.1.0", ["Accept: text/plain"]) == [
        ("User-Agent", "curlall/0.1.0"),
        ("Accept", "text/plain"),
    ]
    assert build_request_headers("curlall/0.1.0", ["user-agent: x"]) == [("user-agent", "x")]


def test_parse_start_url() -> None:
    url = parse_start_url("https://example.invalid/items?page=2")

    assert isinstance(url, httpx.URL)
    assert url.params["page"] == "2"

    with pytest.raises(UrlResolutionError):
        parse_start_url("ftp://example.invalid/items")


def test_write_record() -> None:
    out = io.StringIO()
    write_record({"a": [1, 2]}, out)
    write_record("x", out)

    assert out.getvalue() == '{"a":[1,2]}\n"x"\n'
