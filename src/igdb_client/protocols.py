"""Protocol contracts for IGDB client extension points."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .transport import RawResponse


@runtime_checkable
class SyncRequestExecutor(Protocol):
    def get(self, url: str, *, headers: dict[str, str] | None = None) -> RawResponse: ...


@runtime_checkable
class AsyncRequestExecutor(Protocol):
    async def get(self, url: str, *, headers: dict[str, str] | None = None) -> RawResponse: ...
