"""レスポンスパーサ公開API。"""

from __future__ import annotations

from curlall.parsers.json_parser import (
    RECORD_EXTRACTORS,
    extract_next_field,
    extract_records,
    parse_json_response,
)

__all__ = [
    "RECORD_EXTRACTORS",
    "extract_next_field",
    "extract_records",
    "parse_json_response",
]
