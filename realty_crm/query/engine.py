"""Generic search, filter, sort and paginate pass over a record collection."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from realty_crm.query.descriptor import Page, Query, SortOrder
from realty_crm.query.schema import EntitySchema

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QueryEngine(Generic[T]):
    """Run query descriptors against collections of one entity kind.

    The engine is stateless: it never mutates the input collection and
    the same query over the same records always yields the same page.

    Parameters
    ----------
    schema : EntitySchema
        Searchable fields, sort keys and filter dimensions.
    default_limit : int | None
        Page size used when a query leaves ``limit`` unset. Defaults to
        the schema's.
    """

    def __init__(self, schema: EntitySchema[T], default_limit: int | None = None) -> None:
        self.schema = schema
        self.default_limit = default_limit or schema.default_limit

    def run(self, records: Iterable[T], query: Query | None = None) -> Page[T]:
        """Return one page of matching records plus the match count.

        Parameters
        ----------
        records : Iterable[T]
            Source collection, left untouched.
        query : Query | None
            Query descriptor; ``None`` means the first page of everything.

        Returns
        -------
        Page[T]
            ``items`` holds at most ``limit`` records; ``total`` counts
            every match before pagination.
        """
        query = query or Query()
        limit = query.limit or self.default_limit
        selected = self.select(records, query)

        start = (query.page - 1) * limit
        items = selected[start:start + limit]

        logger.debug(
            "%s query search=%r filters=%s sort=%s/%s page=%d limit=%d -> %d of %d",
            self.schema.name,
            query.search,
            sorted(query.filters),
            query.sort_by,
            query.sort_order.value,
            query.page,
            limit,
            len(items),
            len(selected),
        )
        return Page(items=items, total=len(selected), page=query.page, limit=limit)

    def select(self, records: Iterable[T], query: Query) -> list[T]:
        """Search, filter and sort without paginating."""
        survivors = [record for record in records if self.matches(record, query)]
        return self.sort(survivors, query.sort_by, query.sort_order)

    def matches(self, record: T, query: Query) -> bool:
        """Return True if ``record`` passes the search term and every active filter."""
        if query.search:
            if not any(f.matches(record, query.search) for f in self.schema.search_fields):
                return False

        for name, value in query.filters.items():
            dimension = self.schema.filters.get(name)
            if dimension is None:
                logger.warning("Ignoring unknown %s filter %r", self.schema.name, name)
                continue
            if dimension.is_active(value) and not dimension.matches(record, value):
                return False
        return True

    def sort(
        self,
        records: list[T],
        sort_by: str | None,
        sort_order: SortOrder = SortOrder.ASC,
    ) -> list[T]:
        """Stable sort by a named key; unknown or empty keys keep input order."""
        key = self.schema.sort_keys.get(sort_by) if sort_by else None
        if key is None:
            return list(records)
        # sorted() stays stable with reverse=True: ties keep input order
        return sorted(records, key=key, reverse=sort_order == SortOrder.DESC)
