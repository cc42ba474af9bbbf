"""JSONレスポンスパーサ。"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from curlall.errors import MalformedResponseError
from curlall.types import ParsedPage

RecordExtractor = Callable[[Any], list[Any] | None]

MALFORMED_MESSAGE = (
    'Could not read values from response. Expected either {{"values": [...]}} or [...], got: {body}'
)


def _array_field(name: str) -> RecordExtractor:
    def extract(payload: Any) -> list[Any] | None:
        if isinstance(payload, dict):
            value = payload.get(name)
            if isinstance(value, list):
                return value
        return None

    return extract


def _bare_array(payload: Any) -> list[Any] | None:
    if isinstance(payload, list):
        return payload
    return None


# 先頭から順に試す
RECORD_EXTRACTORS: tuple[tuple[str, RecordExtractor], ...] = (
    ("values", _array_field("values")),
    ("items", _array_field("items")),
    ("array", _bare_array),
)


def extract_records(payload: Any) -> tuple[str, list[Any]] | None:
    """レコード配列を優先順位に従って取り出す。

    Args:
        payload: デコード済みJSON値。

    Returns:
        (一致した形状名, レコード配列)。どれにも一致しない場合はNone。
    """

    for shape, extractor in RECORD_EXTRACTORS:
        records = extractor(payload)
        if records is not None:
            return shape, records
    return None


def extract_next_field(payload: Any) -> str | None:
    """本文の ``next`` フィールドを文字列の場合のみ返す。"""

    if isinstance(payload, dict):
        value = payload.get("next")
        if isinstance(value, str):
            return value
    return None


def parse_json_response(text: str, *, request_url: str | None = None) -> ParsedPage:
    """JSON本文を解析してページ情報へ変換する。

    Args:
        text: レスポンステキスト。
        request_url: エラー報告用のリクエストURL。

    Returns:
        解析結果。

    Raises:
        MalformedResponseError: JSONでない、またはレコード配列が見つからない場合。
    """

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(
            f"Could not decode response as JSON: {exc}: {text}",
            request_url=request_url,
            body=text,
        ) from exc

    found = extract_records(payload)
    if found is None:
        raise MalformedResponseError(
            MALFORMED_MESSAGE.format(body=text),
            request_url=request_url,
            body=text,
        )
    shape, records = found
    return ParsedPage(records=records, next=extract_next_field(payload), shape=shape)
