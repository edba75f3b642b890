"""Request options and the query configuration they resolve into.

Options are plain frozen values. Building one never fails and never performs
I/O; validation happens in :func:`resolve_options`, which runs when a request
is built. Options apply left to right and a later option for the same
parameter replaces the earlier one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeAlias

from .errors import (
    EmptyFieldError,
    EmptyFilterValueError,
    EmptyQueryError,
    InvalidArgumentError,
    OutOfRangeError,
    TooManyArgsError,
    UnsupportedOperatorError,
)

MAX_LIMIT = 50
MAX_OFFSET = 10000
FILTER_PLACEHOLDER = "1"


class Operator(str, Enum):
    EQUALS = "eq"
    NOT_EQUALS = "not_eq"
    GREATER_THAN = "gt"
    GREATER_THAN_EQUAL = "gte"
    LESS_THAN = "lt"
    LESS_THAN_EQUAL = "lte"
    PREFIX = "prefix"
    EXISTS = "exists"
    NOT_EXISTS = "not_exists"
    IN = "in"
    NOT_IN = "not_in"
    ANY = "any"


class Direction(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class Subfilter(str, Enum):
    """Reduces an array field to one value for ordering."""

    MAX = "max"
    MIN = "min"
    SUM = "sum"
    AVERAGE = "avg"
    MEDIAN = "median"


_ZERO_VALUE_OPERATORS = {Operator.EXISTS, Operator.NOT_EXISTS}
_MULTI_VALUE_OPERATORS = {Operator.IN, Operator.NOT_IN, Operator.ANY}


@dataclass(frozen=True, slots=True)
class Fields:
    names: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Filter:
    field: str
    operator: Operator | str
    values: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class Limit:
    value: int


@dataclass(frozen=True, slots=True)
class Offset:
    value: int


@dataclass(frozen=True, slots=True)
class Order:
    field: str
    direction: Direction | str = Direction.ASCENDING
    subfilter: Subfilter | str | None = None


@dataclass(frozen=True, slots=True)
class Search:
    query: str


@dataclass(frozen=True, slots=True)
class ComposedOption:
    options: tuple[Option, ...]


Option: TypeAlias = "Fields | Filter | Limit | Offset | Order | Search | ComposedOption"


def set_fields(*names: str) -> Fields:
    """Select which fields to return; ``"*"`` selects all of them.

    Subfields use the dot operator (``cover.url``). Names must match the
    JSON field names of the IGDB object.
    """
    return Fields(names=tuple(names))


def set_filter(field: str, operator: Operator | str, *values: Any) -> Filter:
    """Narrow results server-side.

    ``exists``/``not_exists`` take no value; ``in``, ``not_in`` and ``any``
    accept several, every other operator exactly one. Filters on different
    field/operator pairs compose; the same pair is overwritten.
    """
    return Filter(field=field, operator=operator, values=tuple(values))


def set_limit(value: int) -> Limit:
    return Limit(value=value)


def set_offset(value: int) -> Offset:
    return Offset(value=value)


def set_order(
    field: str,
    direction: Direction | str = Direction.ASCENDING,
    subfilter: Subfilter | str | None = None,
) -> Order:
    return Order(field=field, direction=direction, subfilter=subfilter)


def set_search(query: str) -> Search:
    return Search(query=query)


def compose_options(*options: Option) -> ComposedOption:
    """Bundle several options into one reusable option."""
    return ComposedOption(options=tuple(options))


@dataclass(slots=True)
class QueryConfig:
    search: str | None = None
    fields: str | None = None
    filters: dict[tuple[str, str], str] = field(default_factory=dict)
    limit: int | None = None
    offset: int | None = None
    order: str | None = None

    def params(self) -> list[tuple[str, str]]:
        """Query parameters in their fixed serialization order."""
        pairs: list[tuple[str, str]] = []
        if self.search is not None:
            pairs.append(("search", self.search))
        if self.fields is not None:
            pairs.append(("fields", self.fields))
        for (name, operator), value in sorted(self.filters.items()):
            pairs.append((f"filter[{name}][{operator}]", value))
        if self.limit is not None:
            pairs.append(("limit", str(self.limit)))
        if self.offset is not None:
            pairs.append(("offset", str(self.offset)))
        if self.order is not None:
            pairs.append(("order", self.order))
        return pairs


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def _coerce_operator(value: Operator | str) -> Operator:
    try:
        return Operator(value)
    except ValueError:
        raise UnsupportedOperatorError(f"unsupported filter operator {value!r}") from None


def _coerce_count(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRangeError(f"{name} must be an integer, got {value!r}")
    return value


def _filter_value(option: Filter, operator: Operator) -> str:
    values = option.values
    if operator in _ZERO_VALUE_OPERATORS:
        if values:
            raise TooManyArgsError(f"filter operator {operator.value} takes no value")
        return FILTER_PLACEHOLDER

    if not values or any(_is_blank(value) for value in values):
        raise EmptyFilterValueError(f"filter on {option.field!r} requires a non-empty value")
    if operator in _MULTI_VALUE_OPERATORS:
        return ",".join(str(value) for value in values)
    if len(values) > 1:
        raise TooManyArgsError(f"filter operator {operator.value} takes exactly one value")
    return str(values[0])


def apply_option(config: QueryConfig, option: Option) -> None:
    if isinstance(option, ComposedOption):
        for nested in option.options:
            apply_option(config, nested)
        return

    if isinstance(option, Fields):
        if not option.names or any(_is_blank(name) for name in option.names):
            raise EmptyFieldError("fields must be non-empty names")
        config.fields = ",".join(name.strip() for name in option.names)
        return

    if isinstance(option, Filter):
        if _is_blank(option.field):
            raise EmptyFieldError("filter field must be non-empty")
        operator = _coerce_operator(option.operator)
        config.filters[(option.field.strip(), operator.value)] = _filter_value(option, operator)
        return

    if isinstance(option, Limit):
        limit = _coerce_count(option.value, "limit")
        if limit <= 0 or limit > MAX_LIMIT:
            raise OutOfRangeError(f"limit must be between 1 and {MAX_LIMIT}, got {limit}")
        config.limit = limit
        return

    if isinstance(option, Offset):
        offset = _coerce_count(option.value, "offset")
        if offset < 0 or offset > MAX_OFFSET:
            raise OutOfRangeError(f"offset must be between 0 and {MAX_OFFSET}, got {offset}")
        config.offset = offset
        return

    if isinstance(option, Order):
        if _is_blank(option.field):
            raise EmptyFieldError("order field must be non-empty")
        try:
            direction = Direction(option.direction)
            subfilter = Subfilter(option.subfilter) if option.subfilter is not None else None
        except ValueError as error:
            raise InvalidArgumentError(str(error)) from error
        order = f"{option.field.strip()}:{direction.value}"
        if subfilter is not None:
            order += f":{subfilter.value}"
        config.order = order
        return

    if isinstance(option, Search):
        if _is_blank(option.query):
            raise EmptyQueryError("search query must be non-empty")
        config.search = option.query
        return

    raise TypeError(f"unsupported option {option!r}")


def resolve_options(options: Iterable[Option]) -> QueryConfig:
    config = QueryConfig()
    for option in options:
        apply_option(config, option)
    return config
