"""Typed records decoded from IGDB responses.

Only the commonly used fields are declared; anything else the service returns
is kept as an extra attribute so new IGDB fields never break decoding.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .images import ImageSize, sized_image_url


class IGDBModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class Entity(IGDBModel):
    id: int
    name: str | None = None
    slug: str | None = None
    url: str | None = None
    created_at: int | None = None
    updated_at: int | None = None


class Count(IGDBModel):
    count: int


class Image(IGDBModel):
    id: int | None = None
    image_id: str | None = Field(default=None, alias="cloudinary_id")
    url: str | None = None
    width: int | None = None
    height: int | None = None
    alpha_channel: bool | None = None
    animated: bool | None = None

    def sized_url(self, size: ImageSize | str, ratio: int = 1) -> str:
        return sized_image_url(self.image_id or "", size, ratio)


class Character(Entity):
    description: str | None = None
    gender: int | None = None
    species: int | None = None
    games: list[int] = Field(default_factory=list)
    mug_shot: Image | int | None = None


class Collection(Entity):
    games: list[int] = Field(default_factory=list)


class Company(Entity):
    description: str | None = None
    country: int | None = None
    website: str | None = None
    start_date: int | None = None
    start_date_category: int | None = None
    parent: int | None = None
    published: list[int] = Field(default_factory=list)
    developed: list[int] = Field(default_factory=list)
    logo: Image | int | None = None


class Cover(Image):
    game: int | None = None


class Credit(Entity):
    game: int | None = None
    category: int | None = None
    company: int | None = None
    person: int | None = None
    character: int | None = None
    country: int | None = None
    credited_name: str | None = None
    character_credited_name: str | None = None


class Engine(Entity):
    companies: list[int] = Field(default_factory=list)
    platforms: list[int] = Field(default_factory=list)
    games: list[int] = Field(default_factory=list)


class Feed(Entity):
    category: int | None = None
    content: str | None = None
    games: list[int] = Field(default_factory=list)


class Franchise(Entity):
    games: list[int] = Field(default_factory=list)


class Game(Entity):
    summary: str | None = None
    storyline: str | None = None
    category: int | None = None
    status: int | None = None
    first_release_date: int | None = None
    popularity: float | None = None
    rating: float | None = None
    total_rating: float | None = None
    collection: int | None = None
    franchise: int | None = None
    franchises: list[int] = Field(default_factory=list)
    genres: list[int] = Field(default_factory=list)
    platforms: list[int] = Field(default_factory=list)
    themes: list[int] = Field(default_factory=list)
    keywords: list[int] = Field(default_factory=list)
    game_modes: list[int] = Field(default_factory=list)
    player_perspectives: list[int] = Field(default_factory=list)
    cover: Image | int | None = None


class GameMode(Entity):
    games: list[int] = Field(default_factory=list)


class Genre(Entity):
    games: list[int] = Field(default_factory=list)


class Keyword(Entity):
    games: list[int] = Field(default_factory=list)


class Page(Entity):
    description: str | None = None
    category: int | None = None
    country: int | None = None


class Person(Entity):
    description: str | None = None
    gender: int | None = None
    country: int | None = None
    born: int | None = None
    games: list[int] = Field(default_factory=list)
    characters: list[int] = Field(default_factory=list)
    mug_shot: Image | int | None = None


class Perspective(Entity):
    games: list[int] = Field(default_factory=list)


class Platform(Entity):
    abbreviation: str | None = None
    alternative_name: str | None = None
    generation: int | None = None
    category: int | None = None
    summary: str | None = None
    games: list[int] = Field(default_factory=list)
    logo: Image | int | None = None


class Pulse(IGDBModel):
    id: int
    title: str | None = None
    summary: str | None = None
    author: str | None = None
    published_at: int | None = None
    url: str | None = None
    image: str | None = None


class PulseGroup(Entity):
    """A group of news articles about one game."""

    published_at: int | None = None
    category: int | None = None
    tags: list[int] = Field(default_factory=list)
    pulses: list[int] = Field(default_factory=list)
    game: int | None = None


class PulseSource(IGDBModel):
    id: int
    name: str | None = None
    game: int | None = None
    page: int | None = None


class ReleaseDate(IGDBModel):
    id: int
    game: int | None = None
    category: int | None = None
    platform: int | None = None
    region: int | None = None
    date: int | None = None
    human: str | None = None


class Review(IGDBModel):
    id: int
    title: str | None = None
    slug: str | None = None
    url: str | None = None
    game: int | None = None
    platform: int | None = None
    user: int | None = None
    content: str | None = None
    positive_points: str | None = None
    negative_points: str | None = None


class Theme(Entity):
    games: list[int] = Field(default_factory=list)


class Title(Entity):
    description: str | None = None
    games: list[int] = Field(default_factory=list)


class Version(IGDBModel):
    id: int
    game: int | None = None
    games: list[int] = Field(default_factory=list)
    features: list[int] = Field(default_factory=list)
    url: str | None = None


class UsageReport(IGDBModel):
    metric: str | None = None
    period: str | None = None
    period_start: str | None = None
    period_end: str | None = None
    max_value: int | None = None
    current_value: int | None = None


class Status(IGDBModel):
    authorized: bool | None = None
    plan: str | None = None
    usage_reports: UsageReport | None = None
