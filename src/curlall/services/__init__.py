"""サービス層モジュール。"""

from curlall.services.fetch import FetchState, aiter_records, iter_records

__all__ = ["FetchState", "aiter_records", "iter_records"]
