"""Generic per-resource accessors and the resource registry."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, TypeVar

from . import endpoints, models
from .endpoints import Endpoint
from .errors import NoResultsError
from .options import Option
from .urls import RequestMode, build_url

ModelT = TypeVar("ModelT", bound=models.IGDBModel)
RequestFn = Callable[..., Any]
AsyncRequestFn = Callable[..., Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class ResourceSpec:
    name: str
    endpoint: Endpoint
    model: type[models.IGDBModel]


RESOURCES: tuple[ResourceSpec, ...] = (
    ResourceSpec("characters", endpoints.CHARACTERS, models.Character),
    ResourceSpec("collections", endpoints.COLLECTIONS, models.Collection),
    ResourceSpec("companies", endpoints.COMPANIES, models.Company),
    ResourceSpec("covers", endpoints.COVERS, models.Cover),
    ResourceSpec("credits", endpoints.CREDITS, models.Credit),
    ResourceSpec("engines", endpoints.ENGINES, models.Engine),
    ResourceSpec("feeds", endpoints.FEEDS, models.Feed),
    ResourceSpec("franchises", endpoints.FRANCHISES, models.Franchise),
    ResourceSpec("games", endpoints.GAMES, models.Game),
    ResourceSpec("game_modes", endpoints.GAME_MODES, models.GameMode),
    ResourceSpec("genres", endpoints.GENRES, models.Genre),
    ResourceSpec("keywords", endpoints.KEYWORDS, models.Keyword),
    ResourceSpec("pages", endpoints.PAGES, models.Page),
    ResourceSpec("people", endpoints.PEOPLE, models.Person),
    ResourceSpec("perspectives", endpoints.PERSPECTIVES, models.Perspective),
    ResourceSpec("platforms", endpoints.PLATFORMS, models.Platform),
    ResourceSpec("pulses", endpoints.PULSES, models.Pulse),
    ResourceSpec("pulse_groups", endpoints.PULSE_GROUPS, models.PulseGroup),
    ResourceSpec("pulse_sources", endpoints.PULSE_SOURCES, models.PulseSource),
    ResourceSpec("release_dates", endpoints.RELEASE_DATES, models.ReleaseDate),
    ResourceSpec("reviews", endpoints.REVIEWS, models.Review),
    ResourceSpec("themes", endpoints.THEMES, models.Theme),
    ResourceSpec("titles", endpoints.TITLES, models.Title),
    ResourceSpec("versions", endpoints.VERSIONS, models.Version),
)


class _ResourceBase(Generic[ModelT]):
    def __init__(self, resource: ResourceSpec, root_url: str) -> None:
        self.resource = resource
        self.endpoint = resource.endpoint
        self.model: type[ModelT] = resource.model  # type: ignore[assignment]
        self._root_url = root_url

    def _url(self, mode: RequestMode, payload: Any, options: Sequence[Option]) -> str:
        return build_url(self.endpoint, mode, payload, *options, root_url=self._root_url)

    def _operation(self, action: str) -> str:
        return f"{self.resource.name}.{action}"


class ResourceApi(_ResourceBase[ModelT]):
    """Get, list, index, search, count and field listing for one endpoint."""

    def __init__(self, resource: ResourceSpec, request: RequestFn, root_url: str) -> None:
        super().__init__(resource, root_url)
        self._request = request

    def get(self, id: int, *options: Option) -> ModelT:
        """Return the entity with ``id``.

        Sorting and pagination options have no effect on a single entity.
        """
        url = self._url(RequestMode.SINGLE, id, options)
        return self._request(self._operation("get"), url, self.model, context=f"id {id}", single=True)

    def list(self, ids: Sequence[int], *options: Option) -> list[ModelT]:
        """Return the entities matching ``ids``; use :meth:`index` to list without IDs."""
        url = self._url(RequestMode.MULTI, ids, options)
        return self._request(self._operation("list"), url, list[self.model], context=f"ids {list(ids)}")

    def index(self, *options: Option) -> list[ModelT]:
        url = self._url(RequestMode.INDEX, None, options)
        return self._request(self._operation("index"), url, list[self.model], context="index")

    def search(self, query: str, *options: Option) -> list[ModelT]:
        url = self._url(RequestMode.SEARCH, query, options)
        return self._request(self._operation("search"), url, list[self.model], context=f"query {query!r}")

    def count(self, *options: Option) -> int:
        """Count entities, narrowed by any filter options."""
        url = self._url(RequestMode.COUNT, None, options)
        result: models.Count = self._request(self._operation("count"), url, models.Count, context="count")
        return result.count

    def fields(self) -> list[str]:
        url = self._url(RequestMode.META, None, ())
        try:
            return self._request(self._operation("fields"), url, list[str], context="fields")
        except NoResultsError:
            return []


class AsyncResourceApi(_ResourceBase[ModelT]):
    def __init__(self, resource: ResourceSpec, request: AsyncRequestFn, root_url: str) -> None:
        super().__init__(resource, root_url)
        self._request = request

    async def get(self, id: int, *options: Option) -> ModelT:
        url = self._url(RequestMode.SINGLE, id, options)
        return await self._request(self._operation("get"), url, self.model, context=f"id {id}", single=True)

    async def list(self, ids: Sequence[int], *options: Option) -> list[ModelT]:
        url = self._url(RequestMode.MULTI, ids, options)
        return await self._request(self._operation("list"), url, list[self.model], context=f"ids {list(ids)}")

    async def index(self, *options: Option) -> list[ModelT]:
        url = self._url(RequestMode.INDEX, None, options)
        return await self._request(self._operation("index"), url, list[self.model], context="index")

    async def search(self, query: str, *options: Option) -> list[ModelT]:
        url = self._url(RequestMode.SEARCH, query, options)
        return await self._request(self._operation("search"), url, list[self.model], context=f"query {query!r}")

    async def count(self, *options: Option) -> int:
        url = self._url(RequestMode.COUNT, None, options)
        result: models.Count = await self._request(self._operation("count"), url, models.Count, context="count")
        return result.count

    async def fields(self) -> list[str]:
        url = self._url(RequestMode.META, None, ())
        try:
            return await self._request(self._operation("fields"), url, list[str], context="fields")
        except NoResultsError:
            return []
