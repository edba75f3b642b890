"""Request lifecycle hooks.

Hooks are registered for a phase (before the GET, after decoding, or on
failure) and an operation pattern such as ``"games.get"``, ``"games.*"`` or
``"*.count"``. Each hook receives the :class:`RequestEvent` for the request in
flight: the same :class:`~igdb_client.errors.RequestDetails` the decoder fills
in, the outgoing headers, and then either the decoded result or the raised
error.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from fnmatch import fnmatchcase
from typing import Any

from .errors import RequestDetails


class Phase(str, Enum):
    BEFORE = "before"
    AFTER = "after"
    ERROR = "error"


@dataclass(slots=True)
class RequestEvent:
    details: RequestDetails
    headers: dict[str, str] = field(default_factory=dict)
    result: Any = None
    error: Exception | None = None

    @property
    def operation(self) -> str:
        return self.details.operation

    @property
    def url(self) -> str:
        return self.details.url

    @property
    def status_code(self) -> int | None:
        return self.details.status_code


Hook = Callable[[RequestEvent], None | Awaitable[None]]


@dataclass(slots=True)
class HookRegistry:
    """Ordered hook table; hooks for one phase run in registration order."""

    _entries: list[tuple[Phase, str, Hook]] = field(default_factory=list)

    def register(self, phase: Phase | str, pattern: str, hook: Hook) -> None:
        if not callable(hook):
            raise TypeError(f"{phase} hook for {pattern!r} is not callable")
        self._entries.append((Phase(phase), pattern, hook))

    def matching(self, phase: Phase | str, operation: str) -> list[Hook]:
        phase = Phase(phase)
        return [hook for entry_phase, pattern, hook in self._entries if entry_phase is phase and fnmatchcase(operation, pattern)]

    def emit(self, phase: Phase | str, event: RequestEvent) -> None:
        for hook in self.matching(phase, event.operation):
            result = hook(event)
            if inspect.isawaitable(result):
                # Close coroutine objects so sync flows do not leak "never awaited" warnings.
                close = getattr(result, "close", None)
                if callable(close):
                    close()
                raise TypeError(f"{Phase(phase).value} hook for {event.operation} is async; use AsyncIGDBClient")

    async def emit_async(self, phase: Phase | str, event: RequestEvent) -> None:
        for hook in self.matching(phase, event.operation):
            result = hook(event)
            if inspect.isawaitable(result):
                await result
