"""例外定義。"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CurlallErrorContext:
    """例外に付随する共通コンテキスト。

    Attributes:
        request_url: リクエストURL。
        raw_response: レスポンス本文。
    """

    request_url: str | None = None
    raw_response: str | None = None


class CurlallError(Exception):
    """ライブラリ例外の基底クラス。

    Attributes:
        origin: 例外発生元。
        context: 追加コンテキスト。
    """

    def __init__(
        self,
        message: str,
        *,
        origin: str,
        context: CurlallErrorContext | None = None,
    ) -> None:
        super().__init__(message)
        self.origin = origin
        self.context = context or CurlallErrorContext()


class RequestFailedError(CurlallError):
    """成功以外のHTTPステータス。"""

    def __init__(self, *, request_url: str, status: int, reason: str, body: str) -> None:
        status_text = f"{status} {reason}".rstrip()
        super().__init__(
            f"Error getting {request_url}: {status_text}: {body}",
            origin="server_response",
            context=CurlallErrorContext(request_url=request_url, raw_response=body),
        )
        self.status = status


class MalformedResponseError(CurlallError):
    """レコード配列を特定できないレスポンス。"""

    def __init__(self, message: str, *, request_url: str | None = None, body: str) -> None:
        super().__init__(
            message,
            origin="server_response",
            context=CurlallErrorContext(request_url=request_url, raw_response=body),
        )


class PageParseError(CurlallError):
    """開始URLの page パラメータが数値でない。"""

    def __init__(self, *, value: str, details: str) -> None:
        super().__init__(
            f"Page query param '{value}' could not be parsed as a number: {details}",
            origin="client_validation",
        )
        self.value = value


class UrlResolutionError(CurlallError):
    """URLを解決できない。"""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(
            message,
            origin="client_validation",
            context=CurlallErrorContext(request_url=url),
        )
        self.url = url


class CurlallValidationError(CurlallError):
    """送信前バリデーションエラー。"""

    def __init__(self, message: str, *, validation_code: str) -> None:
        super().__init__(message, origin="client_validation")
        self.validation_code = validation_code


class CurlallTransportError(CurlallError):
    """HTTP通信層の例外。"""

    def __init__(self, message: str, *, request_url: str | None = None) -> None:
        super().__init__(
            message,
            origin="transport",
            context=CurlallErrorContext(request_url=request_url),
        )
