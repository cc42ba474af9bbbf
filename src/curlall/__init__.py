"""curlall 公開API。"""

from curlall.client import AsyncCurlallClient, CurlallClient
from curlall.config import NAME, FetchConfig, __version__
from curlall.enums import PagingStrategy
from curlall.errors import (
    CurlallError,
    CurlallTransportError,
    CurlallValidationError,
    MalformedResponseError,
    PageParseError,
    RequestFailedError,
    UrlResolutionError,
)
from curlall.output import write_record
from curlall.pager import Pager, parse_next_link
from curlall.services import aiter_records, iter_records

__all__ = [
    "NAME",
    "AsyncCurlallClient",
    "CurlallClient",
    "CurlallError",
    "CurlallTransportError",
    "CurlallValidationError",
    "FetchConfig",
    "MalformedResponseError",
    "PageParseError",
    "Pager",
    "PagingStrategy",
    "RequestFailedError",
    "UrlResolutionError",
    "__version__",
    "aiter_records",
    "iter_records",
    "parse_next_link",
    "write_record",
]
