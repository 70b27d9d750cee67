"""Query descriptors and result pages."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from realty_crm.exceptions import InvalidQueryError

T = TypeVar("T")

# Filter value meaning "do not filter on this dimension"
ALL = "all"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "str | SortOrder | None") -> "SortOrder":
        """Parse a sort direction, falling back to ascending."""
        if isinstance(value, cls):
            return value
        if value is not None and str(value).lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


@dataclass(frozen=True)
class Range:
    """Inclusive range; either bound may be omitted."""

    min: Any = None
    max: Any = None

    @property
    def is_open(self) -> bool:
        return self.min is None and self.max is None

    def contains(self, value: Any) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


@dataclass
class Query:
    """Search, filter, sort and pagination window for one query.

    Parameters
    ----------
    search : str | None
        Case-insensitive substring matched against the entity's
        searchable fields.
    filters : dict[str, Any]
        Filter dimension name to value. Multi-value dimensions take a
        scalar or a collection; range dimensions take a ``Range`` or a
        ``(min, max)`` tuple.
    sort_by : str | None
        Sort key name; unknown names leave the order unchanged.
    sort_order : SortOrder | str
        ``"asc"`` (default) or ``"desc"``.
    page : int
        1-based page number.
    limit : int | None
        Page size; ``None`` uses the entity default.
    """

    search: str | None = None
    filters: dict[str, Any] = field(default_factory=dict)
    sort_by: str | None = None
    sort_order: SortOrder = SortOrder.ASC
    page: int = 1
    limit: int | None = None

    def __post_init__(self) -> None:
        self.sort_order = SortOrder.parse(self.sort_order)
        if isinstance(self.page, bool) or not isinstance(self.page, int) or self.page < 1:
            raise InvalidQueryError(f"page must be an integer >= 1, got {self.page!r}")
        if self.limit is not None and (
            isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1
        ):
            raise InvalidQueryError(f"limit must be an integer >= 1, got {self.limit!r}")


@dataclass
class Page(Generic[T]):
    """One page of query results."""

    items: list[T]
    total: int  # Matching records before pagination
    page: int
    limit: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.pages
