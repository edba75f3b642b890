"""Top-level IGDB clients (sync + async)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx

from .config import ClientConfig
from .decoding import decode_response, decode_single
from .endpoints import STATUS
from .errors import RequestDetails
from .hooks import Hook, HookRegistry, Phase, RequestEvent
from .models import Status
from .protocols import AsyncRequestExecutor, SyncRequestExecutor
from .resources import RESOURCES, AsyncResourceApi, ResourceApi
from .transport import AsyncTransport, SyncTransport, build_headers
from .urls import DEFAULT_ROOT_URL, RequestMode, build_url, normalize_root_url


def _client_kwargs(config: ClientConfig) -> dict[str, Any]:
    if config.timeout_seconds is None:
        return {}
    return {"timeout": config.timeout_seconds}


class _ClientBase:
    def __init__(
        self,
        api_key: str,
        *,
        root_url: str,
        auth_header: str,
        timeout_seconds: float | None,
        headers: dict[str, str] | None,
        hook_registry: HookRegistry | None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ValueError("api_key must be non-empty")
        self.client_config = ClientConfig(
            api_key=api_key.strip(),
            root_url=normalize_root_url(root_url),
            auth_header=auth_header,
            timeout_seconds=timeout_seconds,
            headers=dict(headers or {}),
        )
        self._headers = build_headers(
            self.client_config.api_key,
            self.client_config.auth_header,
            self.client_config.headers,
        )
        self._hooks = hook_registry or HookRegistry()
        self._resources: dict[str, Any] = {}

    @property
    def root_url(self) -> str:
        return self.client_config.root_url

    def resource(self, name: str) -> Any:
        try:
            return self._resources[name]
        except KeyError:
            raise KeyError(f"unknown IGDB resource {name!r}") from None

    def __getattr__(self, name: str) -> Any:
        resources = self.__dict__.get("_resources", {})
        if name in resources:
            return resources[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def before(self, pattern: str = "*") -> Callable[[Hook], Hook]:
        """Register a hook that runs before the GET; it may edit ``event.headers``."""
        return self._hook_decorator(Phase.BEFORE, pattern)

    def after(self, pattern: str = "*") -> Callable[[Hook], Hook]:
        """Register a hook that sees the decoded value in ``event.result``."""
        return self._hook_decorator(Phase.AFTER, pattern)

    def on_error(self, pattern: str = "*") -> Callable[[Hook], Hook]:
        """Register a hook that sees the raised error in ``event.error``."""
        return self._hook_decorator(Phase.ERROR, pattern)

    def _hook_decorator(self, phase: Phase, pattern: str) -> Callable[[Hook], Hook]:
        def decorator(func: Hook) -> Hook:
            self._hooks.register(phase, pattern, func)
            return func

        return decorator

    def _event(self, operation: str, url: str, context: str | None) -> RequestEvent:
        details = RequestDetails(operation=operation, url=url, context=context)
        return RequestEvent(details=details, headers=dict(self._headers))


class IGDBClient(_ClientBase):
    """Synchronous IGDB client.

    Every resource in the registry is available as an attribute
    (``client.games``, ``client.franchises``...) offering ``get``, ``list``,
    ``index``, ``search``, ``count`` and ``fields``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        root_url: str = DEFAULT_ROOT_URL,
        auth_header: str = "user-key",
        timeout_seconds: float | None = None,
        headers: dict[str, str] | None = None,
        http_client: httpx.Client | None = None,
        request_executor: SyncRequestExecutor | None = None,
        hook_registry: HookRegistry | None = None,
    ) -> None:
        super().__init__(
            api_key,
            root_url=root_url,
            auth_header=auth_header,
            timeout_seconds=timeout_seconds,
            headers=headers,
            hook_registry=hook_registry,
        )
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(**_client_kwargs(self.client_config))
        self._transport = SyncTransport(self._client)
        self._executor = request_executor or self._transport

        for resource in RESOURCES:
            self._resources[resource.name] = ResourceApi(resource, self._request, self.root_url)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "IGDBClient":
        return cls(
            config.api_key,
            root_url=config.root_url,
            auth_header=config.auth_header,
            timeout_seconds=config.timeout_seconds,
            headers=config.headers,
            **kwargs,
        )

    @classmethod
    def from_env(cls) -> "IGDBClient":
        return cls.from_config(ClientConfig.from_env())

    @classmethod
    def from_profile(cls, profile: str | None = None) -> "IGDBClient":
        return cls.from_config(ClientConfig.from_profile(profile))

    def get(self, url: str, shape: Any, *, operation: str = "raw.get", context: str | None = None) -> Any:
        """GET ``url`` and decode the body into ``shape`` (a model, ``list[Model]``, ...)."""
        return self._request(operation, url, shape, context=context)

    def status(self) -> Status:
        """Usage report for the configured API key."""
        url = build_url(STATUS, RequestMode.INDEX, root_url=self.root_url)
        return self._request("status", url, Status, context="api status", single=True)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "IGDBClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _request(
        self,
        operation: str,
        url: str,
        shape: Any,
        *,
        context: str | None = None,
        single: bool = False,
    ) -> Any:
        event = self._event(operation, url, context)

        self._hooks.emit(Phase.BEFORE, event)
        try:
            response = self._executor.get(event.url, headers=event.headers)
            decode = decode_single if single else decode_response
            event.result = decode(response, shape, details=event.details)
        except Exception as error:
            event.error = error
            self._hooks.emit(Phase.ERROR, event)
            raise

        self._hooks.emit(Phase.AFTER, event)
        return event.result


class AsyncIGDBClient(_ClientBase):
    """Asynchronous IGDB client."""

    def __init__(
        self,
        api_key: str,
        *,
        root_url: str = DEFAULT_ROOT_URL,
        auth_header: str = "user-key",
        timeout_seconds: float | None = None,
        headers: dict[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
        request_executor: AsyncRequestExecutor | None = None,
        hook_registry: HookRegistry | None = None,
    ) -> None:
        super().__init__(
            api_key,
            root_url=root_url,
            auth_header=auth_header,
            timeout_seconds=timeout_seconds,
            headers=headers,
            hook_registry=hook_registry,
        )
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(**_client_kwargs(self.client_config))
        self._transport = AsyncTransport(self._client)
        self._executor = request_executor or self._transport

        for resource in RESOURCES:
            self._resources[resource.name] = AsyncResourceApi(resource, self._request, self.root_url)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "AsyncIGDBClient":
        return cls(
            config.api_key,
            root_url=config.root_url,
            auth_header=config.auth_header,
            timeout_seconds=config.timeout_seconds,
            headers=config.headers,
            **kwargs,
        )

    @classmethod
    def from_env(cls) -> "AsyncIGDBClient":
        return cls.from_config(ClientConfig.from_env())

    @classmethod
    def from_profile(cls, profile: str | None = None) -> "AsyncIGDBClient":
        return cls.from_config(ClientConfig.from_profile(profile))

    async def get(self, url: str, shape: Any, *, operation: str = "raw.get", context: str | None = None) -> Any:
        return await self._request(operation, url, shape, context=context)

    async def status(self) -> Status:
        url = build_url(STATUS, RequestMode.INDEX, root_url=self.root_url)
        return await self._request("status", url, Status, context="api status", single=True)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncIGDBClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _request(
        self,
        operation: str,
        url: str,
        shape: Any,
        *,
        context: str | None = None,
        single: bool = False,
    ) -> Any:
        event = self._event(operation, url, context)

        await self._hooks.emit_async(Phase.BEFORE, event)
        try:
            response = await self._executor.get(event.url, headers=event.headers)
            decode = decode_single if single else decode_response
            event.result = decode(response, shape, details=event.details)
        except Exception as error:
            event.error = error
            await self._hooks.emit_async(Phase.ERROR, event)
            raise

        await self._hooks.emit_async(Phase.AFTER, event)
        return event.result
