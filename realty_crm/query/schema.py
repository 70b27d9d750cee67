"""Field-accessor tables describing how an entity kind is queried."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Generic, TypeVar

from realty_crm.query.descriptor import ALL, Range

T = TypeVar("T")

Accessor = Callable[[Any], Any]


def as_values(value: Any) -> tuple:
    """Normalize a scalar or collection filter value to a tuple."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return (value,)
    return tuple(value)


def timestamp(value: datetime | None) -> float:
    """Sortable timestamp; absent values rank as epoch zero."""
    return value.timestamp() if value is not None else 0.0


@dataclass(frozen=True)
class SearchField:
    """Field matched by free-text search.

    List-valued fields match when any element contains the term.
    """

    accessor: Accessor
    fold_case: bool = True

    def matches(self, record: Any, term: str) -> bool:
        value = self.accessor(record)
        if value is None:
            return False
        if isinstance(value, (list, tuple)):
            return any(self._contains(item, term) for item in value if item is not None)
        return self._contains(value, term)

    def _contains(self, value: Any, term: str) -> bool:
        if self.fold_case:
            return term.lower() in str(value).lower()
        return term in str(value)


class FilterDimension(ABC):
    """One independently specified predicate over a record field."""

    def __init__(self, accessor: Accessor) -> None:
        self.accessor = accessor

    def is_active(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return value != "" and value != ALL
        return len(as_values(value)) > 0

    @abstractmethod
    def matches(self, record: Any, value: Any) -> bool:
        """Return True if ``record`` passes this dimension."""


class OneOf(FilterDimension):
    """Record field equals one of the requested values.

    ``normalize`` maps each requested value onto the stored vocabulary
    before comparison (e.g. legacy status labels).
    """

    def __init__(self, accessor: Accessor, normalize: Callable[[Any], Any] | None = None) -> None:
        super().__init__(accessor)
        self.normalize = normalize

    def matches(self, record: Any, value: Any) -> bool:
        actual = self.accessor(record)
        if actual is None:
            return False
        wanted = as_values(value)
        if self.normalize is not None:
            wanted = tuple(self.normalize(v) for v in wanted)
        # Tuple membership compares by equality, so plain strings match str enums
        return actual in wanted


class AnyOf(FilterDimension):
    """Record collection shares at least one element with the requested values."""

    def matches(self, record: Any, value: Any) -> bool:
        actual = self.accessor(record) or ()
        return any(wanted in actual for wanted in as_values(value))


class Contains(FilterDimension):
    """Record field contains the requested substring."""

    def __init__(self, accessor: Accessor, fold_case: bool = True) -> None:
        super().__init__(accessor)
        self._field = SearchField(accessor, fold_case=fold_case)

    def matches(self, record: Any, value: Any) -> bool:
        return self._field.matches(record, str(value))


class InRange(FilterDimension):
    """Record field lies within an inclusive ``Range``.

    ``default`` stands in for an absent field value; with no default,
    records lacking the field never match.
    """

    def __init__(self, accessor: Accessor, default: Any = None) -> None:
        super().__init__(accessor)
        self.default = default

    def is_active(self, value: Any) -> bool:
        return value is not None and not to_range(value).is_open

    def matches(self, record: Any, value: Any) -> bool:
        actual = self.accessor(record)
        if actual is None:
            actual = self.default
        if actual is None:
            return False
        return to_range(value).contains(actual)


def to_range(value: Any) -> Range:
    if isinstance(value, Range):
        return value
    low, high = value
    return Range(low, high)


@dataclass(frozen=True)
class EntitySchema(Generic[T]):
    """Searchable fields, sort keys and filter dimensions of one entity kind."""

    name: str
    search_fields: tuple[SearchField, ...]
    sort_keys: Mapping[str, Accessor] = field(default_factory=dict)
    filters: Mapping[str, FilterDimension] = field(default_factory=dict)
    default_limit: int = 10
