"""公開クライアント実装。"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from typing import Any

import httpx

from curlall.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ClientConfig, FetchConfig
from curlall.services.fetch import aiter_records, iter_records
from curlall.validation import validate_fetch_config, validate_timeout


class CurlallClient:
    """ページングAPIの同期クライアント。"""

    def __init__(
        self,
        config: FetchConfig | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        follow_redirects: bool = True,
        http_client: httpx.Client | None = None,
    ) -> None:
        """クライアントを初期化する。

        Args:
            config: 取得設定（認証、上限、待機、追加ヘッダ）。
            timeout: HTTPタイムアウト秒。
            user_agent: User-Agent。
            follow_redirects: リダイレクトを追従するか。
            http_client: 外部httpx.Client。
        """

        validate_timeout(timeout)
        self.config = config or FetchConfig()
        validate_fetch_config(self.config)
        self._client_config = ClientConfig(
            timeout=timeout,
            user_agent=user_agent,
            follow_redirects=follow_redirects,
        )

        self._owns_client = http_client is None
        if http_client is None:
            self._http_client = httpx.Client(
                timeout=self._client_config.timeout,
                follow_redirects=self._client_config.follow_redirects,
            )
        else:
            self._http_client = http_client

    def records(self, url: str | httpx.URL) -> Iterator[Any]:
        """開始URLから全ページのレコードを順に返す。"""

        return iter_records(
            self._http_client,
            url,
            self.config,
            user_agent=self._client_config.user_agent,
        )

    def close(self) -> None:
        """内部Clientをクローズする。"""

        if self._owns_client:
            self._http_client.close()

    def __enter__(self) -> "CurlallClient":
        """コンテキスト開始。"""

        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        """コンテキスト終了。"""

        self.close()


class AsyncCurlallClient:
    """ページングAPIの非同期クライアント。"""

    def __init__(
        self,
        config: FetchConfig | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        follow_redirects: bool = True,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """非同期クライアントを初期化する。"""

        validate_timeout(timeout)
        self.config = config or FetchConfig()
        validate_fetch_config(self.config)
        self._client_config = ClientConfig(
            timeout=timeout,
            user_agent=user_agent,
            follow_redirects=follow_redirects,
        )

        self._owns_client = http_client is None
        if http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._client_config.timeout,
                follow_redirects=self._client_config.follow_redirects,
            )
        else:
            self._http_client = http_client

    def records(self, url: str | httpx.URL) -> AsyncIterator[Any]:
        """開始URLから全ページのレコードを非同期に順に返す。"""

        return aiter_records(
            self._http_client,
            url,
            self.config,
            user_agent=self._client_config.user_agent,
        )

    async def aclose(self) -> None:
        """内部Clientをクローズする。"""

        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "AsyncCurlallClient":
        """非同期コンテキスト開始。"""

        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        """非同期コンテキスト終了。"""

        await self.aclose()
