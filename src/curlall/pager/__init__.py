"""ページャモジュール。"""

from curlall.pager.link import parse_next_link
from curlall.pager.url_pager import Pager, parse_page_number

__all__ = [
    "Pager",
    "parse_next_link",
    "parse_page_number",
]
