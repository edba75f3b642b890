from __future__ import annotations

import asyncio

import pytest

from igdb_client.errors import RequestDetails
from igdb_client.hooks import HookRegistry, Phase, RequestEvent


def _event(operation: str) -> RequestEvent:
    resource = operation.split(".", 1)[0]
    details = RequestDetails(operation=operation, url=f"https://api.example.test/{resource}/1")
    return RequestEvent(details=details, headers={"user-key": "test-key"})


def test_patterns_select_operations() -> None:
    registry = HookRegistry()
    seen: list[str] = []

    registry.register(Phase.BEFORE, "games.*", lambda event: seen.append(f"games:{event.operation}"))
    registry.register(Phase.BEFORE, "*.count", lambda event: seen.append(f"count:{event.operation}"))
    registry.register(Phase.BEFORE, "franchises.list", lambda event: seen.append(f"exact:{event.operation}"))

    for operation in ("games.get", "franchises.count", "franchises.list", "covers.get"):
        registry.emit(Phase.BEFORE, _event(operation))

    assert seen == ["games:games.get", "count:franchises.count", "exact:franchises.list"]


def test_hooks_run_in_registration_order_per_phase() -> None:
    registry = HookRegistry()
    seen: list[str] = []

    registry.register("after", "games.get", lambda _event: seen.append("first"))
    registry.register(Phase.ERROR, "*", lambda _event: seen.append("error"))
    registry.register("after", "*", lambda _event: seen.append("second"))

    registry.emit(Phase.AFTER, _event("games.get"))

    assert seen == ["first", "second"]


def test_event_exposes_request_details() -> None:
    event = _event("franchises.get")
    event.details.status_code = 200

    assert event.operation == "franchises.get"
    assert event.url == "https://api.example.test/franchises/1"
    assert event.status_code == 200


def test_register_rejects_unknown_phase_and_non_callable() -> None:
    registry = HookRegistry()

    with pytest.raises(ValueError):
        registry.register("during", "*", lambda _event: None)
    with pytest.raises(TypeError):
        registry.register(Phase.BEFORE, "*", "not a hook")  # type: ignore[arg-type]


def test_sync_emit_rejects_async_hooks() -> None:
    registry = HookRegistry()

    async def before(_event: RequestEvent) -> None:
        return None

    registry.register(Phase.BEFORE, "games.get", before)
    with pytest.raises(TypeError, match="games.get"):
        registry.emit(Phase.BEFORE, _event("games.get"))


@pytest.mark.asyncio
async def test_async_emit_awaits_mixed_hooks() -> None:
    registry = HookRegistry()
    seen: list[str] = []

    async def record_async(event: RequestEvent) -> None:
        await asyncio.sleep(0)
        seen.append(f"async:{event.operation}")

    registry.register(Phase.AFTER, "franchises.*", record_async)
    registry.register(Phase.AFTER, "franchises.list", lambda event: seen.append(f"sync:{event.operation}"))

    await registry.emit_async(Phase.AFTER, _event("franchises.list"))

    assert seen == ["async:franchises.list", "sync:franchises.list"]
