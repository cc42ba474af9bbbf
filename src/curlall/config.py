"""設定値定義。"""

from __future__ import annotations

from dataclasses import dataclass

NAME = "curlall"
__version__ = "0.1.0"

DEFAULT_USER_AGENT = f"{NAME}/{__version__}"
DEFAULT_TIMEOUT = 30.0


@dataclass(slots=True)
class ClientConfig:
    """HTTPクライアント共通設定。

    Attributes:
        timeout: タイムアウト秒。
        user_agent: User-Agent。
        follow_redirects: リダイレクトを追従するか。
    """

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True


@dataclass(frozen=True, slots=True)
class FetchConfig:
    """1回の取得で共有する呼び出し側設定。

    Attributes:
        user_password: Basic認証の ``user:password`` 文字列。
        limit: 出力レコード数の上限。未指定時は全ページを取得する。
        wait: リクエスト間の待機秒。
        headers: ``Name: Value`` 形式の追加ヘッダ。
    """

    user_password: str | None = None
    limit: int | None = None
    wait: float | None = None
    headers: tuple[str, ...] = ()
