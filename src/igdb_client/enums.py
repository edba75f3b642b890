"""Labels for IGDB enumerated codes."""

from __future__ import annotations

from collections.abc import Mapping

UNDEFINED = "Undefined"

CREDIT_CATEGORY: Mapping[int, str] = {
    1: "voice_actor",
    2: "language",
    3: "company_credit",
    4: "employee",
    5: "misc",
    6: "support_company",
}

DATE_CATEGORY: Mapping[int, str] = {
    0: "YYYY MM DD",
    1: "YYYY-MMM",
    2: "YYYY",
    3: "YYYY-Q1",
    4: "YYYY-Q2",
    5: "YYYY-Q3",
    6: "YYYY-Q4",
    7: "TBD",
}

ESRB_RATING: Mapping[int, str] = {
    1: "RP",
    2: "EC",
    3: "E",
    4: "E10+",
    5: "T",
    6: "M",
    7: "AO",
}

FEATURE_CATEGORY: Mapping[int, str] = {
    0: "Boolean",
    1: "String",
    2: "Preorder only",
}

FEED_CATEGORY: Mapping[int, str] = {
    1: "Pulse Article",
    2: "Coming Soon",
    3: "New Trailer",
    5: "User Contributed Item",
    6: "User Contributions Item",
    7: "Page Contributed Item",
}

GAME_CATEGORY: Mapping[int, str] = {
    0: "Main Game",
    1: "DLC / Addon",
    2: "Expansion",
    3: "Bundle",
    4: "Standalone Expansion",
}

GAME_STATUS: Mapping[int, str] = {
    0: "Released",
    2: "Alpha",
    3: "Beta",
    4: "Early Access",
    5: "Offline",
    6: "Cancelled",
}

GENDER: Mapping[int, str] = {
    0: "Male",
    1: "Female",
    2: "Unknown",
}

PEGI_RATING: Mapping[int, str] = {
    1: "3",
    2: "7",
    3: "12",
    4: "16",
    5: "18",
}

REGION: Mapping[int, str] = {
    1: "Europe (EU)",
    2: "North America (NA)",
    3: "Australia (AU)",
    4: "New Zealand (NZ)",
    5: "Japan (JP)",
    6: "China (CH)",
    7: "Asia (AS)",
    8: "Worldwide",
}

SPECIES: Mapping[int, str] = {
    1: "Human",
    2: "Alien",
    3: "Animal",
    4: "Android",
    5: "Unknown",
}

WEBSITE_CATEGORY: Mapping[int, str] = {
    1: "official",
    2: "wikia",
    3: "wikipedia",
    4: "facebook",
    5: "twitter",
    6: "twitch",
    8: "instagram",
    9: "youtube",
    10: "iphone",
    11: "ipad",
    12: "android",
    13: "steam",
}


def label(table: Mapping[int, str], code: int | None) -> str:
    if code is None:
        return UNDEFINED
    return table.get(code, UNDEFINED)
