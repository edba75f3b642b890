from __future__ import annotations

import pytest

from igdb_client.errors import (
    EmptyIDsError,
    EmptyQueryError,
    InvalidArgumentError,
    NegativeIDError,
    OutOfRangeError,
)
from igdb_client.options import Direction, Operator, set_fields, set_filter, set_limit, set_offset, set_order
from igdb_client.urls import DEFAULT_ROOT_URL, RequestMode, build_url

ROOT = "https://api.example.test/"
ENDPOINT = "tests/"


def test_single_id_appends_path_segment() -> None:
    assert build_url(ENDPOINT, RequestMode.SINGLE, 1234, root_url=ROOT) == ROOT + "tests/1234"


def test_single_id_with_limit_and_offset() -> None:
    url = build_url(ENDPOINT, RequestMode.SINGLE, 55, set_limit(20), set_offset(15), root_url=ROOT)

    assert url == ROOT + "tests/55?limit=20&offset=15"


def test_single_id_with_fields_and_order() -> None:
    url = build_url(
        ENDPOINT,
        RequestMode.SINGLE,
        100,
        set_fields("name", "rating"),
        set_order("rating", Direction.DESCENDING),
        root_url=ROOT,
    )

    assert url == ROOT + "tests/100?fields=name,rating&order=rating:desc"


def test_filters_serialize_in_sorted_key_order() -> None:
    url = build_url(
        ENDPOINT,
        RequestMode.SINGLE,
        55555,
        set_filter("rating", Operator.GREATER_THAN, "80"),
        set_filter("popularity", Operator.LESS_THAN, "2"),
        root_url=ROOT,
    )

    assert url == ROOT + "tests/55555?filter[popularity][lt]=2&filter[rating][gt]=80"


def test_negative_id_is_rejected_before_options() -> None:
    with pytest.raises(NegativeIDError):
        build_url(ENDPOINT, RequestMode.SINGLE, -100, set_limit(999), root_url=ROOT)


def test_invalid_option_fails_when_url_is_built() -> None:
    with pytest.raises(OutOfRangeError):
        build_url(ENDPOINT, RequestMode.SINGLE, 100, set_limit(999), root_url=ROOT)


def test_non_integer_id_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        build_url(ENDPOINT, RequestMode.SINGLE, "12", root_url=ROOT)


def test_multi_ids_preserve_caller_order() -> None:
    assert build_url(ENDPOINT, RequestMode.MULTI, [7, 3, 9], root_url=ROOT) == ROOT + "tests/7,3,9"
    assert build_url(ENDPOINT, RequestMode.MULTI, (3, 3, 1), root_url=ROOT) == ROOT + "tests/3,3,1"


def test_multi_ids_with_options() -> None:
    url = build_url(ENDPOINT, RequestMode.MULTI, [55, 110], set_limit(20), set_offset(15), root_url=ROOT)

    assert url == ROOT + "tests/55,110?limit=20&offset=15"


def test_empty_id_list_is_not_an_index_request() -> None:
    with pytest.raises(EmptyIDsError):
        build_url(ENDPOINT, RequestMode.MULTI, [], root_url=ROOT)


def test_any_negative_id_in_list_is_rejected() -> None:
    with pytest.raises(NegativeIDError):
        build_url(ENDPOINT, RequestMode.MULTI, [100, -200, 300], set_limit(999), root_url=ROOT)


def test_index_has_no_path_suffix() -> None:
    assert build_url(ENDPOINT, RequestMode.INDEX, root_url=ROOT) == ROOT + "tests/"
    assert build_url(ENDPOINT, RequestMode.INDEX, None, set_limit(20), root_url=ROOT) == ROOT + "tests/?limit=20"


def test_search_with_options_uses_stable_parameter_order() -> None:
    url = build_url(
        "games/",
        RequestMode.SEARCH,
        "mario party",
        set_fields("id", "name"),
        set_filter("popularity", Operator.GREATER_THAN_EQUAL, "50"),
        set_limit(10),
        set_offset(5),
        set_order("popularity", Direction.DESCENDING),
        root_url=ROOT,
    )

    assert url == (
        ROOT
        + "games/?search=mario+party&fields=id,name&filter[popularity][gte]=50"
        + "&limit=10&offset=5&order=popularity:desc"
    )


def test_search_text_is_percent_encoded() -> None:
    url = build_url(ENDPOINT, RequestMode.SEARCH, "zelda & link", root_url=ROOT)

    assert url == ROOT + "tests/?search=zelda+%26+link"


@pytest.mark.parametrize("query", ["", "   "])
def test_empty_search_is_rejected(query: str) -> None:
    with pytest.raises(EmptyQueryError):
        build_url(ENDPOINT, RequestMode.SEARCH, query, root_url=ROOT)


def test_count_and_meta_suffixes() -> None:
    count_url = build_url(ENDPOINT, RequestMode.COUNT, None, set_filter("rating", "gt", "80"), root_url=ROOT)

    assert count_url == ROOT + "tests/count?filter[rating][gt]=80"
    assert build_url(ENDPOINT, RequestMode.META, root_url=ROOT) == ROOT + "tests/meta"


def test_repeated_builds_are_identical() -> None:
    options = (
        set_order("popularity", Direction.DESCENDING),
        set_filter("rating", "gt", "80"),
        set_filter("popularity", "gte", "50"),
        set_fields("id", "name"),
        set_limit(10),
    )

    first = build_url(ENDPOINT, RequestMode.MULTI, [1, 2], *options, root_url=ROOT)
    second = build_url(ENDPOINT, RequestMode.MULTI, [1, 2], *options, root_url=ROOT)

    assert first == second


def test_root_url_is_normalized() -> None:
    assert build_url("games/", "index") == DEFAULT_ROOT_URL + "games/"
    assert build_url("games/", "index", root_url="https://api.example.test") == ROOT + "games/"


def test_blank_endpoint_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        build_url(" ", RequestMode.INDEX, root_url=ROOT)
