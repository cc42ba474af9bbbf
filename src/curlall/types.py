"""内部共通データ構造。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

RecordShape = Literal["values", "items", "array"]


@dataclass(slots=True)
class ParsedPage:
    """1ページ分の解析結果。

    Attributes:
        records: レコード配列。
        next: 本文 ``next`` フィールド（文字列の場合のみ）。
        shape: レコード配列を見つけた形状。
    """

    records: list[Any] = field(default_factory=list)
    next: str | None = None
    shape: RecordShape | str = "values"


@dataclass(slots=True)
class FetchedPage:
    """取得済みレスポンスの要約。

    Attributes:
        request_url: リクエストURL。
        status: HTTPステータス。
        reason: ステータス理由句。
        link_header: Linkヘッダ。
        text: 本文。
    """

    request_url: str
    status: int
    reason: str
    link_header: str | None
    text: str
