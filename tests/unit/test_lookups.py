from __future__ import annotations

import pytest

from igdb_client import enums
from igdb_client.errors import InvalidArgumentError, NegativeIDError
from igdb_client.images import ImageSize, sized_image_url
from igdb_client.models import Cover
from igdb_client.tags import TagType, generate_tag


def test_labels_fall_back_to_undefined() -> None:
    assert enums.label(enums.ESRB_RATING, 4) == "E10+"
    assert enums.label(enums.CREDIT_CATEGORY, 1) == "voice_actor"
    assert enums.label(enums.GAME_STATUS, 1) == enums.UNDEFINED
    assert enums.label(enums.REGION, None) == enums.UNDEFINED


def test_sized_image_url() -> None:
    assert sized_image_url("dfgkfivjrhcksyymh9vw", ImageSize.SCREENSHOT_MED) == (
        "https://images.igdb.com/igdb/image/upload/t_screenshot_med/dfgkfivjrhcksyymh9vw.jpg"
    )
    assert sized_image_url("dfgkfivjrhcksyymh9vw", "screenshot_med", 2) == (
        "https://images.igdb.com/igdb/image/upload/t_screenshot_med_2x/dfgkfivjrhcksyymh9vw.jpg"
    )


@pytest.mark.parametrize(
    ("image_id", "size", "ratio"),
    [("", ImageSize.THUMB, 1), ("abc", ImageSize.THUMB, 3), ("abc", "giant", 1)],
)
def test_sized_image_url_rejects_bad_arguments(image_id: str, size: str, ratio: int) -> None:
    with pytest.raises(InvalidArgumentError):
        sized_image_url(image_id, size, ratio)


def test_cover_builds_sized_url() -> None:
    cover = Cover.model_validate({"id": 7, "image_id": "co1abc", "game": 1022})

    assert cover.sized_url(ImageSize.FULL_HD) == "https://images.igdb.com/igdb/image/upload/t_1080p/co1abc.jpg"


def test_generate_tag() -> None:
    assert generate_tag(TagType.GAME, 1942) == (3 << 28) | 1942
    assert generate_tag(TagType.THEME, 0) == 0

    with pytest.raises(NegativeIDError):
        generate_tag(TagType.GENRE, -1)
