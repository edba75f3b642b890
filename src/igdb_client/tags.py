"""Tag numbers: packed integers addressing one IGDB object for compact filtering."""

from __future__ import annotations

from enum import IntEnum

from .errors import NegativeIDError

TAG_TYPE_SHIFT = 28


class TagType(IntEnum):
    THEME = 0
    GENRE = 1
    KEYWORD = 2
    GAME = 3
    PERSPECTIVE = 4


def generate_tag(type_id: TagType | int, object_id: int) -> int:
    if type_id < 0 or object_id < 0:
        raise NegativeIDError(f"negative tag input: type {int(type_id)}, object {object_id}")
    return (int(type_id) << TAG_TYPE_SHIFT) | object_id
