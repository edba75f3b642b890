"""IGDB Python client SDK.

This module uses lazy exports so lightweight utilities (for example option
builders or the lookup tables) can be imported without immediately importing
transport dependencies.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "ApiError",
    "AsyncIGDBClient",
    "AuthError",
    "BadRequestError",
    "ClientConfig",
    "DecodeError",
    "Direction",
    "ERR_AUTH_FAILED",
    "ERR_BAD_REQUEST",
    "ERR_INTERNAL_ERROR",
    "ERR_MANY_REQUESTS",
    "EmptyFieldError",
    "EmptyFilterValueError",
    "EmptyIDsError",
    "EmptyQueryError",
    "HookRegistry",
    "IGDBClient",
    "IGDBError",
    "ImageSize",
    "InternalServerError",
    "InvalidArgumentError",
    "InvalidJSONError",
    "NegativeIDError",
    "NoResultsError",
    "Operator",
    "OutOfRangeError",
    "Phase",
    "RateLimitError",
    "RequestEvent",
    "RequestMode",
    "ServerError",
    "ServiceError",
    "Subfilter",
    "TooManyArgsError",
    "UnsupportedOperatorError",
    "build_url",
    "compose_options",
    "generate_tag",
    "set_fields",
    "set_filter",
    "set_limit",
    "set_offset",
    "set_order",
    "set_search",
    "sized_image_url",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "AsyncIGDBClient": (".client", "AsyncIGDBClient"),
    "IGDBClient": (".client", "IGDBClient"),
    "ClientConfig": (".config", "ClientConfig"),
    "ApiError": (".errors", "ApiError"),
    "AuthError": (".errors", "AuthError"),
    "BadRequestError": (".errors", "BadRequestError"),
    "DecodeError": (".errors", "DecodeError"),
    "ERR_AUTH_FAILED": (".errors", "ERR_AUTH_FAILED"),
    "ERR_BAD_REQUEST": (".errors", "ERR_BAD_REQUEST"),
    "ERR_INTERNAL_ERROR": (".errors", "ERR_INTERNAL_ERROR"),
    "ERR_MANY_REQUESTS": (".errors", "ERR_MANY_REQUESTS"),
    "EmptyFieldError": (".errors", "EmptyFieldError"),
    "EmptyFilterValueError": (".errors", "EmptyFilterValueError"),
    "EmptyIDsError": (".errors", "EmptyIDsError"),
    "EmptyQueryError": (".errors", "EmptyQueryError"),
    "IGDBError": (".errors", "IGDBError"),
    "InternalServerError": (".errors", "InternalServerError"),
    "InvalidArgumentError": (".errors", "InvalidArgumentError"),
    "InvalidJSONError": (".errors", "InvalidJSONError"),
    "NegativeIDError": (".errors", "NegativeIDError"),
    "NoResultsError": (".errors", "NoResultsError"),
    "OutOfRangeError": (".errors", "OutOfRangeError"),
    "RateLimitError": (".errors", "RateLimitError"),
    "ServerError": (".errors", "ServerError"),
    "ServiceError": (".errors", "ServiceError"),
    "TooManyArgsError": (".errors", "TooManyArgsError"),
    "UnsupportedOperatorError": (".errors", "UnsupportedOperatorError"),
    "HookRegistry": (".hooks", "HookRegistry"),
    "Phase": (".hooks", "Phase"),
    "RequestEvent": (".hooks", "RequestEvent"),
    "ImageSize": (".images", "ImageSize"),
    "sized_image_url": (".images", "sized_image_url"),
    "Direction": (".options", "Direction"),
    "Operator": (".options", "Operator"),
    "Subfilter": (".options", "Subfilter"),
    "compose_options": (".options", "compose_options"),
    "set_fields": (".options", "set_fields"),
    "set_filter": (".options", "set_filter"),
    "set_limit": (".options", "set_limit"),
    "set_offset": (".options", "set_offset"),
    "set_order": (".options", "set_order"),
    "set_search": (".options", "set_search"),
    "generate_tag": (".tags", "generate_tag"),
    "RequestMode": (".urls", "RequestMode"),
    "build_url": (".urls", "build_url"),
}

if TYPE_CHECKING:
    from .client import AsyncIGDBClient, IGDBClient
    from .config import ClientConfig
    from .errors import (
        ERR_AUTH_FAILED,
        ERR_BAD_REQUEST,
        ERR_INTERNAL_ERROR,
        ERR_MANY_REQUESTS,
        ApiError,
        AuthError,
        BadRequestError,
        DecodeError,
        EmptyFieldError,
        EmptyFilterValueError,
        EmptyIDsError,
        EmptyQueryError,
        IGDBError,
        InternalServerError,
        InvalidArgumentError,
        InvalidJSONError,
        NegativeIDError,
        NoResultsError,
        OutOfRangeError,
        RateLimitError,
        ServerError,
        ServiceError,
        TooManyArgsError,
        UnsupportedOperatorError,
    )
    from .hooks import HookRegistry, Phase, RequestEvent
    from .images import ImageSize, sized_image_url
    from .options import (
        Direction,
        Operator,
        Subfilter,
        compose_options,
        set_fields,
        set_filter,
        set_limit,
        set_offset,
        set_order,
        set_search,
    )
    from .tags import generate_tag
    from .urls import RequestMode, build_url


def __getattr__(name: str) -> Any:
    module_info = _EXPORTS.get(name)
    if module_info is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute = module_info
    module = import_module(module_name, __name__)
    value = getattr(module, attribute)
    globals()[name] = value
    return value
