"""Sized image URLs for IGDB images."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidArgumentError

IMAGE_URL_TEMPLATE = "https://images.igdb.com/igdb/image/upload/t_{size}{ratio}/{image_id}.jpg"


class ImageSize(str, Enum):
    """Maximum dimensions of a served image, not its exact size."""

    COVER_SMALL = "cover_small"  # 90x128
    COVER_BIG = "cover_big"  # 227x320
    SCREENSHOT_MED = "screenshot_med"  # 569x320
    SCREENSHOT_BIG = "screenshot_big"  # 889x500
    SCREENSHOT_HUGE = "screenshot_huge"  # 1280x720
    LOGO_MED = "logo_med"  # 284x160
    MICRO = "micro"  # 35x35
    THUMB = "thumb"  # 90x90
    HD = "720p"
    FULL_HD = "1080p"


_PIXEL_RATIOS = {1: "", 2: "_2x"}


def sized_image_url(image_id: str, size: ImageSize | str, ratio: int = 1) -> str:
    if not image_id or not image_id.strip():
        raise InvalidArgumentError("image id must be non-empty")
    if ratio not in _PIXEL_RATIOS:
        raise InvalidArgumentError(f"unsupported display pixel ratio {ratio}; expected 1 or 2")
    try:
        resolved = ImageSize(size)
    except ValueError as error:
        raise InvalidArgumentError(str(error)) from error
    return IMAGE_URL_TEMPLATE.format(size=resolved.value, ratio=_PIXEL_RATIOS[ratio], image_id=image_id.strip())
