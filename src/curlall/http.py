"""HTTP実行補助。"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Sequence

from curlall.validation import parse_headers


def build_request_headers(user_agent: str, raw_headers: Sequence[str] = ()) -> list[tuple[str, str]]:
    """標準ヘッダと追加ヘッダを構築する。

    追加ヘッダに User-Agent がある場合は標準値より優先する。同名の追加ヘッダは全て送る。

    Args:
        user_agent: 既定User-Agent。
        raw_headers: ``Name: Value`` 形式の追加ヘッダ。

    Returns:
        (名前, 値) の列。
    """

    extra = parse_headers(raw_headers)
    headers: list[tuple[str, str]] = []
    if not any(name.lower() == "user-agent" for name, _ in extra):
        headers.append(("User-Agent", user_agent))
    headers.extend(extra)
    return headers


def sleep_between_pages(wait: float | None) -> float:
    """次ページ要求前に待機する。

    Returns:
        待機した秒数。
    """

    if not wait or wait <= 0:
        return 0.0
    time.sleep(wait)
    return wait


async def async_sleep_between_pages(wait: float | None) -> float:
    """次ページ要求前に非同期で待機する。"""

    if not wait or wait <= 0:
        return 0.0
    await asyncio.sleep(wait)
    return wait
