"""Linkヘッダ解析。"""

from __future__ import annotations

_NEXT_REL_MARKER = '>; rel="next"'


def parse_next_link(link_header: str) -> str | None:
    """Linkヘッダから ``rel="next"`` のURIを取り出す。

    RFC5988 (https://tools.ietf.org/html/rfc5988#section-5) の完全な解析ではなく、
    最初の ``>; rel="next"`` を探してその直前の ``<`` までを切り出す。
    引用符や属性順が異なる表記は一致しない。

    例::

        <https://api.github.com/search/code?q=addClass&page=2>; rel="next",
        <https://api.github.com/search/code?q=addClass&page=34>; rel="last"

    Args:
        link_header: Linkヘッダ文字列。

    Returns:
        nextのURI。見つからない場合はNone。
    """

    end = link_header.find(_NEXT_REL_MARKER)
    if end < 0:
        return None
    start = link_header.rfind("<", 0, end)
    if start < 0:
        return None
    return link_header[start + 1 : end]
