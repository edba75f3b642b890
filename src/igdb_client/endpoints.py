"""IGDB REST endpoints."""

from __future__ import annotations

from typing import NewType

Endpoint = NewType("Endpoint", str)

COUNT_SUFFIX = "count"
META_SUFFIX = "meta"

CHARACTERS = Endpoint("characters/")
COLLECTIONS = Endpoint("collections/")
COMPANIES = Endpoint("companies/")
COVERS = Endpoint("covers/")
CREDITS = Endpoint("credits/")
ENGINES = Endpoint("game_engines/")
FEEDS = Endpoint("feeds/")
FRANCHISES = Endpoint("franchises/")
GAMES = Endpoint("games/")
GAME_MODES = Endpoint("game_modes/")
GENRES = Endpoint("genres/")
KEYWORDS = Endpoint("keywords/")
PAGES = Endpoint("pages/")
PEOPLE = Endpoint("people/")
PERSPECTIVES = Endpoint("player_perspectives/")
PLATFORMS = Endpoint("platforms/")
PULSES = Endpoint("pulses/")
PULSE_GROUPS = Endpoint("pulse_groups/")
PULSE_SOURCES = Endpoint("pulse_sources/")
RELEASE_DATES = Endpoint("release_dates/")
REVIEWS = Endpoint("reviews/")
THEMES = Endpoint("themes/")
TITLES = Endpoint("titles/")
VERSIONS = Endpoint("game_versions/")
STATUS = Endpoint("api_status")
