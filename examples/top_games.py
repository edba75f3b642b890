"""Print the most hyped games for two platforms with their cover art URLs."""

from __future__ import annotations

import argparse
import logging
import sys

from igdb_client import (
    Direction,
    IGDBClient,
    IGDBError,
    ImageSize,
    Operator,
    compose_options,
    set_fields,
    set_filter,
    set_limit,
    set_order,
)

PLATFORMS = {"PS4": 48, "XB1": 49}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-k", "--key", help="IGDB API key (defaults to IGDB_API_KEY)")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        client = IGDBClient(args.key) if args.key else IGDBClient.from_env()
    except ValueError:
        parser.error("no API key; pass --key or set IGDB_API_KEY")

    by_popularity = compose_options(
        set_limit(5),
        set_fields("name", "cover"),
        set_order("hypes", Direction.DESCENDING),
        set_filter("category", Operator.EQUALS, "0"),
        set_filter("cover", Operator.EXISTS),
    )

    with client:
        try:
            for label, platform_id in PLATFORMS.items():
                games = client.games.index(by_popularity, set_filter("platforms", Operator.EQUALS, platform_id))
                print(f"Top 5 {label} games:")
                for game in games:
                    cover = client.covers.get(game.cover, set_fields("image_id"))
                    print(f"  {game.name} - {cover.sized_url(ImageSize.FULL_HD)}")
        except IGDBError as error:
            print(f"request failed: {error}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
