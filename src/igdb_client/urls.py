"""Request URL construction."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from .endpoints import COUNT_SUFFIX, META_SUFFIX
from .errors import EmptyIDsError, EmptyQueryError, InvalidArgumentError, NegativeIDError
from .options import Option, Search, resolve_options

DEFAULT_ROOT_URL = "https://api-2445582011268.apicast.io/"

# Kept literal in query values so field lists, filter keys and orderings stay readable.
_QUERY_SAFE = ",[]:*"


class RequestMode(str, Enum):
    SINGLE = "single"
    MULTI = "multi"
    SEARCH = "search"
    INDEX = "index"
    COUNT = "count"
    META = "meta"


def normalize_root_url(value: str | None) -> str:
    trimmed = (value or "").strip()
    if not trimmed:
        return DEFAULT_ROOT_URL
    return trimmed if trimmed.endswith("/") else f"{trimmed}/"


def encode_query(params: Sequence[tuple[str, str]]) -> str:
    if not params:
        return ""
    return "?" + urlencode(list(params), safe=_QUERY_SAFE)


def _check_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"IGDB IDs must be integers, got {value!r}")
    if value < 0:
        raise NegativeIDError(f"negative ID {value}")
    return value


def _path_suffix(mode: RequestMode, payload: Any) -> str:
    if mode is RequestMode.SINGLE:
        return str(_check_id(payload))

    if mode is RequestMode.MULTI:
        if isinstance(payload, (str, bytes)) or not isinstance(payload, Sequence):
            raise InvalidArgumentError(f"multi-get expects a sequence of IDs, got {payload!r}")
        if len(payload) == 0:
            raise EmptyIDsError("empty ID list; use an index request to list without IDs")
        return ",".join(str(_check_id(item)) for item in payload)

    if mode is RequestMode.SEARCH:
        if not isinstance(payload, str) or not payload.strip():
            raise EmptyQueryError("search query must be non-empty")
        return ""

    if mode is RequestMode.COUNT:
        return COUNT_SUFFIX
    if mode is RequestMode.META:
        return META_SUFFIX
    return ""


def build_url(
    endpoint: str,
    mode: RequestMode | str,
    payload: Any = None,
    *options: Option,
    root_url: str = DEFAULT_ROOT_URL,
) -> str:
    """Build the request URL for ``endpoint``.

    ``payload`` is an ID for ``SINGLE``, a sequence of IDs for ``MULTI`` (kept
    in caller order) and the search text for ``SEARCH``; other modes ignore it.
    Arguments are checked before options are resolved, so a negative ID is
    reported even when an option is also invalid. The result depends only on
    the inputs and query parameters always serialize in the same order.
    """
    if not endpoint or not endpoint.strip():
        raise InvalidArgumentError("endpoint must be non-empty")

    mode = RequestMode(mode)
    suffix = _path_suffix(mode, payload)

    resolved = list(options)
    if mode is RequestMode.SEARCH:
        resolved.append(Search(query=payload))
    config = resolve_options(resolved)

    url = normalize_root_url(root_url) + endpoint.strip() + suffix
    return url + encode_query(config.params())
