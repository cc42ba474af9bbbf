"""全ページ取得ループ。"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any

import httpx

from curlall.config import DEFAULT_USER_AGENT, FetchConfig
from curlall.errors import RequestFailedError
from curlall.http import async_sleep_between_pages, build_request_headers, sleep_between_pages
from curlall.pager import Pager, parse_next_link
from curlall.parsers import parse_json_response
from curlall.services._transport import perform_async_request, perform_sync_request
from curlall.types import FetchedPage, ParsedPage
from curlall.validation import parse_start_url, parse_user_password, validate_fetch_config

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FetchState:
    """1回の取得で共有する状態。

    Attributes:
        pager: ページャ。
        limit: 出力レコード数の上限。
        emitted: 出力済みレコード数。
    """

    pager: Pager
    limit: int | None = None
    emitted: int = 0

    @property
    def limit_reached(self) -> bool:
        return self.limit is not None and self.emitted >= self.limit

    def take(self, records: list[Any]) -> Iterator[Any]:
        """上限に達するまでレコードを順に返す。ページ内の超過分は捨てる。"""

        for record in records:
            self.emitted += 1
            yield record
            if self.limit_reached:
                logger.debug("limit of %s records reached", self.limit)
                return


def _read_page(page: FetchedPage, state: FetchState) -> ParsedPage | None:
    """レスポンスを検査し、継続する場合は解析結果を返す。

    Returns:
        解析結果。正常終了とみなす場合はNone。

    Raises:
        RequestFailedError: 成功以外のステータスの場合。
        MalformedResponseError: レコード配列が見つからない場合。
    """

    if page.status == 404 and state.emitted > 0:
        # 2ページ目以降の404は最終ページを越えたとみなす
        logger.debug("%s not found after %s records, stopping", page.request_url, state.emitted)
        return None
    if not 200 <= page.status < 300:
        raise RequestFailedError(
            request_url=page.request_url,
            status=page.status,
            reason=page.reason,
            body=page.text,
        )

    parsed = parse_json_response(page.text, request_url=page.request_url)
    if not parsed.records:
        logger.debug("%s returned no records, stopping", page.request_url)
        return None
    logger.debug("%s returned %s records from %r", page.request_url, len(parsed.records), parsed.shape)
    return parsed


def _next_url(page: FetchedPage, parsed: ParsedPage, state: FetchState) -> httpx.URL | None:
    """次に要求するURLを決める。Linkヘッダが本文 ``next`` より優先される。"""

    if state.limit_reached:
        return None
    hint = parse_next_link(page.link_header) if page.link_header else None
    if hint is None:
        hint = parsed.next
    next_url = state.pager.advance(hint)
    if next_url is None:
        logger.debug("no next page after %s", page.request_url)
    return next_url


def iter_records(
    client: httpx.Client,
    url: str | httpx.URL,
    config: FetchConfig | None = None,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Iterator[Any]:
    """開始URLから全ページを辿り、レコードを順に返す。

    Args:
        client: HTTPクライアント。
        url: 開始URL。
        config: 取得設定。
        user_agent: 既定User-Agent。

    Yields:
        レコード（デコード済みJSON値）。

    Raises:
        CurlallError: 要求失敗、応答形式不正、page解析失敗、URL解決失敗。
    """

    config = config or FetchConfig()
    validate_fetch_config(config)
    start_url = parse_start_url(url)
    headers = build_request_headers(user_agent, config.headers)
    auth = parse_user_password(config.user_password)
    state = FetchState(pager=Pager.from_url(start_url), limit=config.limit)

    next_url: httpx.URL | None = start_url
    while next_url is not None:
        page = perform_sync_request(client=client, url=next_url, headers=headers, auth=auth)
        parsed = _read_page(page, state)
        if parsed is None:
            return
        yield from state.take(parsed.records)
        next_url = _next_url(page, parsed, state)
        if next_url is not None:
            sleep_between_pages(config.wait)


async def aiter_records(
    client: httpx.AsyncClient,
    url: str | httpx.URL,
    config: FetchConfig | None = None,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
) -> AsyncIterator[Any]:
    """``iter_records`` の非同期版。"""

    config = config or FetchConfig()
    validate_fetch_config(config)
    start_url = parse_start_url(url)
    headers = build_request_headers(user_agent, config.headers)
    auth = parse_user_password(config.user_password)
    state = FetchState(pager=Pager.from_url(start_url), limit=config.limit)

    next_url: httpx.URL | None = start_url
    while next_url is not None:
        page = await perform_async_request(client=client, url=next_url, headers=headers, auth=auth)
        parsed = _read_page(page, state)
        if parsed is None:
            return
        for record in state.take(parsed.records):
            yield record
        next_url = _next_url(page, parsed, state)
        if next_url is not None:
            await async_sleep_between_pages(config.wait)
