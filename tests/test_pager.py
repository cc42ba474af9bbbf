"""ページャの状態遷移テスト。"""

from __future__ import annotations

import httpx
import pytest

from curlall.enums import PagingStrategy
from curlall.errors import PageParseError, UrlResolutionError
from curlall.pager import Pager, parse_page_number


def _pager(url: str) -> Pager:
    return Pager.from_url(httpx.URL(url))


def test_from_url_splits_page_param() -> None:
    pager = _pager("https://example.invalid/items?a=1&page=3&b=2")

    assert pager.page_param == "3"
    assert pager.query_params == [("a", "1"), ("b", "2")]
    assert pager.page is None
    assert pager.strategy is PagingStrategy.TRY_PAGE_NUMBERS


def test_page_numbers_start_after_one_without_page_param() -> None:
    pager = _pager("https://example.invalid/without-link")

    pages = [pager.advance(None) for _ in range(3)]

    assert [str(url) for url in pages] == [
        "https://example.invalid/without-link?page=2",
        "https://example.invalid/without-link?page=3",
        "https://example.invalid/without-link?page=4",
    ]
    assert pager.page == 4


def test_page_numbers_continue_from_initial_page() -> None:
    pager = _pager("https://example.invalid/items?page=5")

    first = pager.advance(None)
    second = pager.advance(None)

    assert first is not None and first.params["page"] == "6"
    assert second is not None and second.params["page"] == "7"


def test_other_query_params_survive_page_rewrite() -> None:
    pager = _pager("https://example.invalid/items?q=a+b&page=3&sort=asc")

    url = pager.advance(None)

    assert url is not None
    assert url.path == "/items"
    assert url.params.multi_items() == [("q", "a b"), ("sort", "asc"), ("page", "4")]


def test_non_numeric_page_fails_only_when_paging_by_number() -> None:
    pager = _pager("https://example.invalid/x?page=x")

    with pytest.raises(PageParseError) as excinfo:
        pager.advance(None)

    assert "Page query param 'x' could not be parsed as a number" in str(excinfo.value)
    assert excinfo.value.value == "x"


def test_non_numeric_page_is_ignored_when_hint_given() -> None:
    pager = _pager("https://example.invalid/x?page=x")

    url = pager.advance("/x?cursor=abc")

    assert str(url) == "https://example.invalid/x?cursor=abc"


def test_hint_locks_strategy() -> None:
    pager = _pager("https://example.invalid/items")

    assert str(pager.advance(None)) == "https://example.invalid/items?page=2"
    assert str(pager.advance("/items?cursor=b")) == "https://example.invalid/items?cursor=b"
    assert pager.strategy is PagingStrategy.HINTS_ONLY
    assert pager.advance(None) is None
    assert pager.advance(None) is None
    assert pager.page == 2


def test_relative_and_absolute_hints_resolve_against_start_url() -> None:
    pager = _pager("https://example.invalid/link-header")

    assert str(pager.advance("?page=b")) == "https://example.invalid/link-header?page=b"
    assert str(pager.advance("https://other.invalid/v2/items?c=1")) == "https://other.invalid/v2/items?c=1"


def test_empty_hint_is_treated_as_missing() -> None:
    pager = _pager("https://example.invalid/items")

    url = pager.advance("")

    assert str(url) == "https://example.invalid/items?page=2"
    assert pager.strategy is PagingStrategy.TRY_PAGE_NUMBERS


@pytest.mark.parametrize(
    ("raw", "details"),
    [
        ("", "cannot parse integer from empty string"),
        ("x", "invalid digit found in string"),
        ("-1", "invalid digit found in string"),
        ("1.5", "invalid digit found in string"),
    ],
)
def test_parse_page_number_rejects(raw: str, details: str) -> None:
    with pytest.raises(PageParseError) as excinfo:
        parse_page_number(raw)

    assert str(excinfo.value) == f"Page query param '{raw}' could not be parsed as a number: {details}"


def test_parse_page_number_accepts_leading_zeros() -> None:
    assert parse_page_number("007") == 7


@pytest.mark.parametrize("hint", ["http://[bad", "http://", "https://:80/x"])
def test_unresolvable_hint_raises(hint: str) -> None:
    pager = _pager("https://example.invalid/start")

    with pytest.raises(UrlResolutionError) as excinfo:
        pager.advance(hint)

    assert excinfo.value.url == hint


def test_parse_page_number_accepts_leading_plus() -> None:
    assert parse_page_number("+5") == 5

    with pytest.raises(PageParseError):
        parse_page_number("+")


def test_encoded_plus_page_seeds_counter() -> None:
    pager = _pager("https://example.invalid/items?page=%2B5")

    url = pager.advance(None)

    assert url is not None and url.params["page"] == "6"
