"""次ページURLを決定するページャ。"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from curlall.enums import PagingStrategy
from curlall.errors import PageParseError, UrlResolutionError
from curlall.validation import is_absolute_http_url

logger = logging.getLogger(__name__)

PAGE_PARAM = "page"


def parse_page_number(raw: str) -> int:
    """page パラメータを非負整数として解析する。先頭の ``+`` は許容する。

    Raises:
        PageParseError: 10進数字以外を含む場合。
    """

    if not raw:
        raise PageParseError(value=raw, details="cannot parse integer from empty string")
    digits = raw[1:] if raw.startswith("+") else raw
    if not (digits and digits.isascii() and digits.isdigit()):
        raise PageParseError(value=raw, details="invalid digit found in string")
    return int(digits)


@dataclass(slots=True)
class Pager:
    """ページング状態。

    一度でもヒント（Linkヘッダ/本文 ``next``）を受け取ると ``HINTS_ONLY`` に固定され、
    以後は連番ページへ戻らない。

    Attributes:
        start_url: 開始URL。相対URL解決とpage書き換えの基準。
        page_param: 開始URLの page 値（未解析）。
        query_params: page を除いたクエリ（順序保持）。
        page: 直近に要求したページ番号。
        strategy: ページ送り戦略。
    """

    start_url: httpx.URL
    page_param: str | None = None
    query_params: list[tuple[str, str]] = field(default_factory=list)
    page: int | None = None
    strategy: PagingStrategy = PagingStrategy.TRY_PAGE_NUMBERS

    @classmethod
    def from_url(cls, start_url: httpx.URL) -> Pager:
        """開始URLのクエリを page とそれ以外に分けて初期化する。"""

        page_param: str | None = None
        query_params: list[tuple[str, str]] = []
        for key, value in start_url.params.multi_items():
            if key == PAGE_PARAM:
                page_param = value
            else:
                query_params.append((key, value))
        return cls(start_url=start_url, page_param=page_param, query_params=query_params)

    def advance(self, hint: str | None) -> httpx.URL | None:
        """次に要求するURLを返す。

        Args:
            hint: レスポンス由来の次ページ位置（絶対または相対URL）。

        Returns:
            次のURL。ページングが終了した場合はNone。

        Raises:
            UrlResolutionError: ヒントを開始URL基準で解決できない場合。
            PageParseError: 開始URLの page 値が数値でない場合。
        """

        # 空文字は未指定と同じ扱い。開始URLの再要求を繰り返さないよう連番へ進む
        if hint:
            if self.strategy is PagingStrategy.TRY_PAGE_NUMBERS:
                logger.debug("next-page hint found, locking to hint paging")
            self.strategy = PagingStrategy.HINTS_ONLY
            return self._resolve(hint)

        if self.strategy is PagingStrategy.HINTS_ONLY:
            return None

        if self.page is None:
            # 初回のみ開始URLの page を解釈する
            current = parse_page_number(self.page_param) if self.page_param is not None else 1
        else:
            current = self.page
        self.page = current + 1

        params = httpx.QueryParams([*self.query_params, (PAGE_PARAM, str(self.page))])
        return self.start_url.copy_with(params=params)

    def _resolve(self, hint: str) -> httpx.URL:
        try:
            resolved = self.start_url.join(hint)
        except httpx.InvalidURL as exc:
            raise UrlResolutionError(
                f"Could not resolve next page URL '{hint}' against {self.start_url}: {exc}",
                url=hint,
            ) from exc
        if not is_absolute_http_url(resolved):
            raise UrlResolutionError(
                f"Could not resolve next page URL '{hint}' against {self.start_url}: "
                "expected an absolute http or https URL",
                url=hint,
            )
        return resolved
