"""Customer CRUD, search and statistics."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from realty_crm.exceptions import InvalidRecordError
from realty_crm.models import Customer, CustomerStatus, Priority
from realty_crm.query import CUSTOMER_SCHEMA, Page, Query, QueryEngine, Range
from realty_crm.services.base import RecordService, coerce_enum, enum_value
from realty_crm.store import RecordStore

# Urgent is reserved for listings
CUSTOMER_PRIORITIES = (Priority.LOW, Priority.MEDIUM, Priority.HIGH)


@dataclass
class CustomerSearch:
    """Multi-criteria customer search.

    Text criteria are substring matches (case-insensitive except phone);
    ``tags`` matches customers carrying any of the tags; ranges are
    inclusive.
    """

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    tags: list[str] = field(default_factory=list)
    status: list[str] = field(default_factory=list)
    priority: list[str] = field(default_factory=list)
    created_from: datetime | None = None
    created_to: datetime | None = None
    value_from: int | None = None
    value_to: int | None = None

    def to_query(self) -> Query:
        return Query(
            filters={
                "name": self.name,
                "email": self.email,
                "phone": self.phone,
                "tags": self.tags,
                "status": [CustomerStatus.coerce(s) for s in self.status],
                "priority": self.priority,
                "created": Range(self.created_from, self.created_to),
                "value": Range(self.value_from, self.value_to),
            }
        )


@dataclass
class CustomerStats:
    """Aggregate figures over the customer base."""

    total: int
    by_status: dict[str, int]
    by_priority: dict[str, int]
    by_source: dict[str, int]
    total_value: int
    average_value: float
    recent_count: int  # Created within the recent window


class CustomerService(RecordService[Customer]):
    """Customer operations over a record store.

    Parameters
    ----------
    store : RecordStore[Customer]
        Backing collection.
    page_size : int
        Default page size for ``list_customers``.
    recent_days : int
        Window used by ``get_customer_stats`` for new customers.
    **kwargs
        Passed to ``RecordService`` (``id_factory``, ``clock``, ``timeout``).
    """

    record_type = Customer
    entity_name = "customer"

    def __init__(
        self,
        store: RecordStore[Customer],
        page_size: int = 10,
        recent_days: int = 30,
        **kwargs: Any,
    ) -> None:
        super().__init__(store, QueryEngine(CUSTOMER_SCHEMA, default_limit=page_size), **kwargs)
        self.recent_days = recent_days

    async def list_customers(self, query: Query | None = None) -> Page[Customer]:
        """Return one page of customers matching ``query``."""
        return await self._query(query)

    async def get_customer(self, customer_id: str) -> Customer | None:
        return await self._get(customer_id)

    async def create_customer(self, data: Mapping[str, Any]) -> Customer:
        """Create a customer from everything but id and timestamps."""
        return await self._create(data)

    async def update_customer(self, customer_id: str, patch: Mapping[str, Any]) -> Customer:
        """Merge ``patch`` into a customer.

        Raises
        ------
        RecordNotFoundError
            If the customer does not exist.
        InvalidRecordError
            If the patch names unknown or system-assigned fields.
        """
        return await self._update(customer_id, patch)

    async def delete_customer(self, customer_id: str) -> None:
        await self._delete(customer_id)

    async def update_last_contact(
        self, customer_id: str, when: datetime | None = None
    ) -> Customer:
        """Record a contact with the customer (default: now)."""
        return await self._update(customer_id, {"last_contacted_at": when or self.clock()})

    async def search_customers(self, criteria: CustomerSearch) -> list[Customer]:
        """Return every customer matching all given criteria, unpaginated."""
        return self.engine.select(await self._all(), criteria.to_query())

    async def get_customer_stats(self) -> CustomerStats:
        customers = await self._all()
        cutoff = self.clock() - timedelta(days=self.recent_days)

        total_value = sum(c.total_value or 0 for c in customers)
        return CustomerStats(
            total=len(customers),
            by_status=dict(Counter(enum_value(c.status) for c in customers)),
            by_priority=dict(Counter(enum_value(c.priority) for c in customers)),
            by_source=dict(Counter(c.source for c in customers if c.source)),
            total_value=total_value,
            average_value=total_value / len(customers) if customers else 0.0,
            recent_count=sum(1 for c in customers if c.created_at >= cutoff),
        )

    def _normalize(self, fields: dict[str, Any]) -> dict[str, Any]:
        if "status" in fields:
            fields["status"] = CustomerStatus.coerce(fields["status"])
        if "priority" in fields:
            priority = coerce_enum(Priority, fields["priority"])
            if priority not in CUSTOMER_PRIORITIES:
                raise InvalidRecordError(f"Invalid customer priority: {fields['priority']!r}")
            fields["priority"] = priority
        if "total_value" in fields:
            value = fields["total_value"] or 0
            if value < 0:
                raise InvalidRecordError("total_value must be non-negative")
            fields["total_value"] = value
        if "tags" in fields:
            fields["tags"] = list(fields["tags"] or [])
        return fields
