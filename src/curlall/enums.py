"""列挙型定義。"""

from __future__ import annotations

from enum import StrEnum


class PagingStrategy(StrEnum):
    """ページ送り戦略を表す列挙型。

    ``TRY_PAGE_NUMBERS`` から ``HINTS_ONLY`` への一方向にのみ遷移する。

    Attributes:
        TRY_PAGE_NUMBERS: ``page=N`` クエリの連番を試す。
        HINTS_ONLY: Linkヘッダまたは本文 ``next`` のみに従う。
    """

    TRY_PAGE_NUMBERS = "try_page_numbers"
    HINTS_ONLY = "hints_only"
