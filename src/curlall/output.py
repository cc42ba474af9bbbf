"""レコード出力処理。"""

from __future__ import annotations

import json
from typing import Any, TextIO


def dump_record(value: Any) -> str:
    """レコードを1行のJSON文字列へ変換する。"""

    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def write_record(value: Any, out: TextIO) -> None:
    """レコードを1行1値で書き出す。"""

    out.write(dump_record(value))
    out.write("\n")
