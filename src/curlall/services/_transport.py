"""サービス層向けトランスポート共通処理。"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from curlall.errors import CurlallTransportError
from curlall.types import FetchedPage

logger = logging.getLogger(__name__)


def _to_fetched_page(response: httpx.Response, *, request_url: str) -> FetchedPage:
    return FetchedPage(
        request_url=request_url,
        status=int(response.status_code),
        reason=response.reason_phrase,
        link_header=response.headers.get("Link"),
        text=response.text,
    )


def perform_sync_request(
    *,
    client: httpx.Client,
    url: httpx.URL,
    headers: Sequence[tuple[str, str]],
    auth: httpx.BasicAuth | None,
) -> FetchedPage:
    """同期GET要求を1回実行する。再試行は行わない。

    Raises:
        CurlallTransportError: 通信に失敗した場合。
    """

    request_url = str(url)
    logger.debug("GET %s", request_url)
    try:
        if auth is None:
            response = client.get(url, headers=list(headers))
        else:
            response = client.get(url, headers=list(headers), auth=auth)
    except httpx.HTTPError as exc:
        raise CurlallTransportError(
            f"Error getting {request_url}: {exc}", request_url=request_url
        ) from exc
    logger.debug("%s -> %s", request_url, response.status_code)
    return _to_fetched_page(response, request_url=request_url)


async def perform_async_request(
    *,
    client: httpx.AsyncClient,
    url: httpx.URL,
    headers: Sequence[tuple[str, str]],
    auth: httpx.BasicAuth | None,
) -> FetchedPage:
    """非同期GET要求を1回実行する。再試行は行わない。"""

    request_url = str(url)
    logger.debug("GET %s", request_url)
    try:
        if auth is None:
            response = await client.get(url, headers=list(headers))
        else:
            response = await client.get(url, headers=list(headers), auth=auth)
    except httpx.HTTPError as exc:
        raise CurlallTransportError(
            f"Error getting {request_url}: {exc}", request_url=request_url
        ) from exc
    logger.debug("%s -> %s", request_url, response.status_code)
    return _to_fetched_page(response, request_url=request_url)
