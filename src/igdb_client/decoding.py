"""Response classification and decoding into typed shapes."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import (
    DecodeError,
    InvalidJSONError,
    NoResultsError,
    RequestDetails,
    classify_api_error,
    describe,
)
from .transport import RawResponse

T = TypeVar("T")

_adapter_cache: dict[Any, TypeAdapter[Any]] = {}
_MAX_SAMPLE_DEPTH = 2
_MAX_SAMPLE_ITEMS = 5
_MAX_SAMPLE_STRING = 200
_EMPTY_ARRAY = b"[]"


def _model_name(model_type: Any) -> str:
    return getattr(model_type, "__name__", repr(model_type))


def _adapter_for(model_type: Any) -> TypeAdapter[Any]:
    try:
        adapter = _adapter_cache.get(model_type)
    except TypeError:
        return TypeAdapter(model_type)

    if adapter is None:
        adapter = TypeAdapter(model_type)
        _adapter_cache[model_type] = adapter
    return adapter


def _sample_payload(value: Any, depth: int = 0) -> Any:
    if depth > _MAX_SAMPLE_DEPTH:
        return "<trimmed>"

    if isinstance(value, dict):
        sampled: dict[str, Any] = {}
        for index, (key, nested) in enumerate(value.items()):
            if index >= _MAX_SAMPLE_ITEMS:
                sampled["..."] = "<trimmed>"
                break
            sampled[str(key)] = _sample_payload(nested, depth + 1)
        return sampled

    if isinstance(value, list):
        sampled_items = [_sample_payload(item, depth + 1) for item in value[:_MAX_SAMPLE_ITEMS]]
        if len(value) > _MAX_SAMPLE_ITEMS:
            sampled_items.append("<trimmed>")
        return sampled_items

    if isinstance(value, str):
        return value if len(value) <= _MAX_SAMPLE_STRING else f"{value[:_MAX_SAMPLE_STRING]}..."

    if isinstance(value, (int, float, bool)) or value is None:
        return value

    return repr(value)


def _raw_sample(body: bytes) -> Any:
    try:
        return _sample_payload(json.loads(body))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return _sample_payload(body.decode("utf-8", errors="replace"))


def check_response(response: RawResponse, *, details: RequestDetails) -> None:
    """Raise the classified error for a failed status, an empty array or an empty body.

    Only a body that is exactly ``[]`` once surrounding whitespace is trimmed
    counts as no results. ``[ ]`` is an ordinary empty array and decodes as one.
    """
    details.status_code = response.status_code
    if not 200 <= response.status_code < 300:
        details.response_body = _raw_sample(response.content)
        raise classify_api_error(details, response.content)

    trimmed = response.content.strip()
    if trimmed == _EMPTY_ARRAY:
        raise NoResultsError(f"{describe(details)}: no results", details=details)
    if not trimmed:
        raise InvalidJSONError(f"{describe(details)}: empty response body", details=details)


def decode_response(response: RawResponse, shape: type[T] | Any, *, details: RequestDetails) -> T:
    check_response(response, details=details)

    try:
        return _adapter_for(shape).validate_json(response.content)
    except ValidationError as error:
        raise DecodeError(
            f"{describe(details)}: cannot decode response as {_model_name(shape)}",
            details=details,
            model_name=_model_name(shape),
            errors=error.errors(include_url=False),
            raw_sample=_raw_sample(response.content),
        ) from error


def decode_single(response: RawResponse, model: type[T], *, details: RequestDetails) -> T:
    """Decode a one-element list and return its entity."""
    items = decode_response(response, list[model], details=details)  # type: ignore[valid-type]
    if not items:
        raise NoResultsError(f"{describe(details)}: no results", details=details)
    return items[0]
