"""HTTP transport for the IGDB client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RawResponse:
    status_code: int
    content: bytes
    headers: Mapping[str, str] = field(default_factory=dict)


def build_headers(api_key: str, auth_header: str, extra: Mapping[str, str] | None = None) -> dict[str, str]:
    headers = dict(extra or {})
    headers["Accept"] = "application/json"
    headers[auth_header] = api_key
    return headers


class SyncTransport:
    """Issues one GET per call; transport failures propagate unchanged."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def get(self, url: str, *, headers: dict[str, str] | None = None) -> RawResponse:
        logger.debug("GET %s", url)
        response = self._client.get(url, headers=headers)
        content = response.read()
        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(content))
        return RawResponse(status_code=response.status_code, content=content, headers=dict(response.headers))


class AsyncTransport:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get(self, url: str, *, headers: dict[str, str] | None = None) -> RawResponse:
        logger.debug("GET %s", url)
        response = await self._client.get(url, headers=headers)
        content = await response.aread()
        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(content))
        return RawResponse(status_code=response.status_code, content=content, headers=dict(response.headers))
