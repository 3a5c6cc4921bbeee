"""Turns untrusted listing query parameters into a bounded page request.

Nothing in here raises: malformed input falls back to the configured
defaults.
"""

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

SortDirection = Literal["asc", "desc"]

_LEADING_INT = re.compile(r"\s*([+-]?)(\d+)")
# Offsets are sent to the store as BIGINT.
_MAX_OFFSET = 2**63 - 1
_MAX_INT_DIGITS = len(str(_MAX_OFFSET))


@dataclass(frozen=True)
class PaginationOptions:
    allowed_sort_fields: frozenset[str]
    default_page_size: int = 10
    max_page_size: int = 100
    default_direction: SortDirection = "asc"
    default_sort_fields: tuple[str, ...] = ("id",)


@dataclass(frozen=True)
class PaginationSpec:
    page: int
    page_size: int
    offset: int
    sort_fields: tuple[str, ...]
    direction: SortDirection

    @property
    def sort_field(self) -> str:
        """The field actually used for ordering."""
        return self.sort_fields[0]


@dataclass(frozen=True)
class PaginationMeta:
    current_page: int
    total_pages: int
    total_count: int
    limit: int
    has_next_page: bool
    has_prev_page: bool
    next_page: int | None = None
    prev_page: int | None = None


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _parse_int(value: Any) -> int | None:
    """Parse a leading integer the lenient way: "3abc" -> 3, "abc" -> None."""
    value = _first(value)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_INT_DIGITS:
        return None
    return int(sign + digits)


def _candidate_sort_fields(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",")]
    if isinstance(value, Iterable):
        return [item.strip() for item in value if isinstance(item, str)]
    return []


def resolve_pagination(
    raw_query: Mapping[str, Any], options: PaginationOptions
) -> PaginationSpec:
    """Resolve ``page``, ``limit``, ``order`` and ``orderBy`` query values."""
    page_size = _parse_int(raw_query.get("limit"))
    if page_size is None or page_size < 1 or page_size > options.max_page_size:
        page_size = options.default_page_size

    page = _parse_int(raw_query.get("page"))
    if page is None or page < 1 or (page - 1) * page_size > _MAX_OFFSET:
        page = 1

    direction: SortDirection = (
        "desc" if _first(raw_query.get("order")) == "desc" else options.default_direction
    )

    sort_fields = tuple(
        name
        for name in _candidate_sort_fields(raw_query.get("orderBy"))
        if name in options.allowed_sort_fields
    )
    if not sort_fields:
        sort_fields = options.default_sort_fields

    return PaginationSpec(
        page=page,
        page_size=page_size,
        offset=(page - 1) * page_size,
        sort_fields=sort_fields,
        direction=direction,
    )


def build_pagination_meta(page: int, limit: int, total_count: int) -> PaginationMeta:
    total_pages = math.ceil(total_count / limit) if limit > 0 else 0
    has_next_page = page < total_pages
    has_prev_page = page > 1
    return PaginationMeta(
        current_page=page,
        total_pages=total_pages,
        total_count=total_count,
        limit=limit,
        has_next_page=has_next_page,
        has_prev_page=has_prev_page,
        next_page=page + 1 if has_next_page else None,
        prev_page=page - 1 if has_prev_page else None,
    )
