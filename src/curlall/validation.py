"""入力正規化と送信前バリデーション。"""

from __future__ import annotations

from collections.abc import Iterable

import httpx

from curlall.config import FetchConfig
from curlall.errors import CurlallValidationError, UrlResolutionError


def is_absolute_http_url(url: httpx.URL) -> bool:
    """http/https の絶対URLかを判定する。

    ホストが空、またはパーセントエンコードや角括弧を含む場合は不正とみなす。
    """

    host = url.host
    return url.scheme in {"http", "https"} and bool(host) and not any(ch in host for ch in "%[]")


def parse_start_url(value: str | httpx.URL) -> httpx.URL:
    """開始URLを検証して ``httpx.URL`` へ変換する。

    Args:
        value: 開始URL。

    Returns:
        絶対URL。

    Raises:
        UrlResolutionError: 絶対 http/https URL でない場合。
    """

    raw = str(value)
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise UrlResolutionError(f"Invalid URL '{raw}': {exc}", url=raw) from exc
    if not is_absolute_http_url(url):
        raise UrlResolutionError(
            f"Invalid URL '{raw}': expected an absolute http or https URL",
            url=raw,
        )
    return url


def parse_header_line(raw: str) -> tuple[str, str]:
    """``Name: Value`` 形式のヘッダ文字列を分解する。

    最初のコロンで分割し、値の先頭空白を除く。コロンが無い場合の値は空文字。

    Raises:
        CurlallValidationError: ヘッダ名が空の場合。
    """

    name, _, value = raw.partition(":")
    name = name.strip()
    if not name:
        raise CurlallValidationError(
            f"Invalid header '{raw}': expected 'Name: Value'",
            validation_code="invalid_header",
        )
    return name, value.lstrip()


def parse_headers(raw_headers: Iterable[str]) -> list[tuple[str, str]]:
    """追加ヘッダ一覧を (名前, 値) の列へ変換する。同名ヘッダは保持する。"""

    return [parse_header_line(raw) for raw in raw_headers]


def parse_user_password(value: str | None) -> httpx.BasicAuth | None:
    """``user:password`` をBasic認証へ変換する。

    コロンが無い場合は全体をユーザ名とし、パスワードは空とする。
    """

    if value is None:
        return None
    user, _, password = value.partition(":")
    return httpx.BasicAuth(user, password)


def validate_timeout(timeout: float) -> None:
    """タイムアウト秒を検証する。"""

    if timeout <= 0:
        raise CurlallValidationError(
            f"Invalid timeout {timeout}: must be greater than 0",
            validation_code="invalid_timeout",
        )


def validate_fetch_config(config: FetchConfig) -> None:
    """取得設定を検証する。

    Args:
        config: 取得設定。

    Raises:
        CurlallValidationError: limit/wait/headers が不正な場合。
    """

    if config.limit is not None and config.limit < 1:
        raise CurlallValidationError(
            f"Invalid limit {config.limit}: must be at least 1",
            validation_code="invalid_limit",
        )
    if config.wait is not None and config.wait < 0:
        raise CurlallValidationError(
            f"Invalid wait {config.wait}: must not be negative",
            validation_code="invalid_wait",
        )
    parse_headers(config.headers)
