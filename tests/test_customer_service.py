"""Tests for CustomerService."""

import asyncio
import logging
from datetime import datetime

import pytest

from realty_crm.exceptions import (
    InvalidQueryError,
    InvalidRecordError,
    RecordNotFoundError,
    StoreTimeoutError,
)
from realty_crm.fixtures import fixture_customers
from realty_crm.models import CustomerStatus, Priority
from realty_crm.query import Query
from realty_crm.services import CustomerSearch, CustomerService
from realty_crm.store import InMemoryRecordStore

NOW = datetime(2024, 1, 25, 9, 0, 0)

NEW_CUSTOMER = {
    "name": "Võ Thị Giang",
    "email": "giang@example.com",
    "phone": "0987654321",
    "status": "prospect",
    "priority": "high",
    "source": "Zalo",
    "total_value": 2_000_000_000,
    "tags": ["Căn hộ"],
}


@pytest.fixture
def office_customers() -> CustomerService:
    """Customer service over the sample office records."""
    return CustomerService(
        InMemoryRecordStore(fixture_customers(), name="customer"), clock=lambda: NOW
    )


class TestListCustomers:
    """Tests for paginated listing."""

    @pytest.mark.asyncio
    async def test_sort_by_value(self, customer_service: CustomerService) -> None:
        page = await customer_service.list_customers(
            Query(sort_by="value", sort_order="desc", page=1, limit=10)
        )
        assert [c.name for c in page.items] == ["An", "Binh"]
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_filter_by_status(self, customer_service: CustomerService) -> None:
        page = await customer_service.list_customers(Query(filters={"status": "prospect"}))
        assert [c.name for c in page.items] == ["Binh"]
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_filter_accepts_legacy_status(self, office_customers: CustomerService) -> None:
        listed = await office_customers.list_customers(Query(filters={"status": "qualified"}))
        searched = await office_customers.search_customers(CustomerSearch(status=["qualified"]))

        assert [c.id for c in listed.items] == ["2"]
        assert listed.items == searched

    @pytest.mark.asyncio
    async def test_filter_rejects_unknown_status(self, office_customers: CustomerService) -> None:
        with pytest.raises(InvalidQueryError, match="vip"):
            await office_customers.list_customers(Query(filters={"status": "vip"}))

    @pytest.mark.asyncio
    async def test_default_page_size(self, office_customers: CustomerService) -> None:
        page = await office_customers.list_customers()
        assert page.limit == 10
        assert page.total == 5

    @pytest.mark.asyncio
    async def test_configured_page_size(self) -> None:
        service = CustomerService(InMemoryRecordStore(fixture_customers()), page_size=2)
        page = await service.list_customers()
        assert len(page.items) == 2
        assert page.pages == 3


class TestCustomerMutations:
    """Tests for create, update and delete."""

    @pytest.mark.asyncio
    async def test_create_round_trip(self, customer_service: CustomerService) -> None:
        created = await customer_service.create_customer(NEW_CUSTOMER)

        assert created.id
        assert created.created_at == created.updated_at == NOW
        assert created.status is CustomerStatus.PROSPECT
        assert created.priority is Priority.HIGH

        stored = await customer_service.get_customer(created.id)
        assert stored == created
        assert stored.name == NEW_CUSTOMER["name"]
        assert stored.tags == NEW_CUSTOMER["tags"]

        page = await customer_service.list_customers()
        assert page.items[0] == created
        assert page.total == 3

    @pytest.mark.asyncio
    async def test_create_maps_legacy_status(self, customer_service: CustomerService) -> None:
        created = await customer_service.create_customer({**NEW_CUSTOMER, "status": "converted"})
        assert created.status is CustomerStatus.CUSTOMER

    @pytest.mark.asyncio
    async def test_create_assigns_unique_ids(self, customer_service: CustomerService) -> None:
        first = await customer_service.create_customer(NEW_CUSTOMER)
        second = await customer_service.create_customer(NEW_CUSTOMER)
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_create_rejects_system_fields(self, customer_service: CustomerService) -> None:
        with pytest.raises(InvalidRecordError, match="id"):
            await customer_service.create_customer({**NEW_CUSTOMER, "id": "x"})

    @pytest.mark.asyncio
    async def test_create_missing_required(self, customer_service: CustomerService) -> None:
        with pytest.raises(InvalidRecordError):
            await customer_service.create_customer({"name": "Only a name"})

    @pytest.mark.asyncio
    async def test_create_rejects_bad_priority(self, customer_service: CustomerService) -> None:
        with pytest.raises(InvalidRecordError, match="Priority"):
            await customer_service.create_customer({**NEW_CUSTOMER, "priority": "asap"})

    @pytest.mark.asyncio
    async def test_create_rejects_negative_value(self, customer_service: CustomerService) -> None:
        with pytest.raises(InvalidRecordError, match="total_value"):
            await customer_service.create_customer({**NEW_CUSTOMER, "total_value": -1})

    @pytest.mark.asyncio
    async def test_create_rejects_urgent_priority(self, customer_service: CustomerService) -> None:
        with pytest.raises(InvalidRecordError, match="customer priority"):
            await customer_service.create_customer({**NEW_CUSTOMER, "priority": "urgent"})
        assert (await customer_service.list_customers()).total == 2

    @pytest.mark.asyncio
    async def test_update_rejects_urgent_priority(self, customer_service: CustomerService) -> None:
        with pytest.raises(InvalidRecordError, match="customer priority"):
            await customer_service.update_customer("1", {"priority": Priority.URGENT})
        assert (await customer_service.get_customer("1")).priority is Priority.MEDIUM

    @pytest.mark.asyncio
    async def test_update_rejects_mistyped_value(self, customer_service: CustomerService) -> None:
        before = await customer_service.get_customer("1")
        with pytest.raises(InvalidRecordError, match="Invalid customer data"):
            await customer_service.update_customer("1", {"total_value": "5"})
        assert await customer_service.get_customer("1") == before

    @pytest.mark.asyncio
    async def test_create_logs_record_context(
        self, customer_service: CustomerService, caplog
    ) -> None:
        with caplog.at_level(logging.INFO, logger="realty_crm.services.base"):
            created = await customer_service.create_customer(NEW_CUSTOMER)

        record = next(r for r in caplog.records if r.getMessage().startswith("Created"))
        assert record.extra == {"entity": "customer", "record_id": created.id}

    @pytest.mark.asyncio
    async def test_update_logs_changed_fields(
        self, customer_service: CustomerService, caplog
    ) -> None:
        with caplog.at_level(logging.INFO, logger="realty_crm.services.base"):
            await customer_service.update_customer("1", {"notes": "x", "source": "Zalo"})

        record = next(r for r in caplog.records if r.getMessage().startswith("Updated"))
        assert record.extra["record_id"] == "1"
        assert record.extra["fields"] == ["notes", "source"]

    @pytest.mark.asyncio
    async def test_update_merges_patch(self, customer_service: CustomerService) -> None:
        before = await customer_service.get_customer("1")
        updated = await customer_service.update_customer("1", {"notes": "Gọi lại thứ Hai"})

        assert updated.notes == "Gọi lại thứ Hai"
        assert updated.name == before.name
        assert updated.total_value == before.total_value
        assert updated.created_at == before.created_at
        assert updated.updated_at > before.updated_at
        assert await customer_service.get_customer("1") == updated

    @pytest.mark.asyncio
    async def test_updated_at_strictly_increases(self, customer_service: CustomerService) -> None:
        first = await customer_service.update_customer("1", {"notes": "a"})
        second = await customer_service.update_customer("1", {"notes": "b"})
        assert second.updated_at > first.updated_at

    @pytest.mark.asyncio
    async def test_update_missing(self, customer_service: CustomerService, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            with pytest.raises(RecordNotFoundError, match="Customer nope not found"):
                await customer_service.update_customer("nope", {"notes": "x"})
        assert "nope" in caplog.text

    @pytest.mark.asyncio
    async def test_update_rejects_unknown_field(self, customer_service: CustomerService) -> None:
        with pytest.raises(InvalidRecordError, match="shoe_size"):
            await customer_service.update_customer("1", {"shoe_size": 42})

    @pytest.mark.asyncio
    async def test_update_rejects_id_change(self, customer_service: CustomerService) -> None:
        with pytest.raises(InvalidRecordError, match="id"):
            await customer_service.update_customer("1", {"id": "99"})

    @pytest.mark.asyncio
    async def test_failed_update_leaves_record(self, customer_service: CustomerService) -> None:
        before = await customer_service.get_customer("1")
        with pytest.raises(InvalidRecordError):
            await customer_service.update_customer("1", {"notes": "x", "status": "bogus"})
        assert await customer_service.get_customer("1") == before

    @pytest.mark.asyncio
    async def test_delete(self, customer_service: CustomerService) -> None:
        await customer_service.delete_customer("1")
        assert await customer_service.get_customer("1") is None
        assert (await customer_service.list_customers()).total == 1

    @pytest.mark.asyncio
    async def test_delete_missing_leaves_collection(self, customer_service: CustomerService) -> None:
        with pytest.raises(RecordNotFoundError):
            await customer_service.delete_customer("nope")
        assert len(await customer_service.store.get_all()) == 2

    @pytest.mark.asyncio
    async def test_update_last_contact_defaults_to_now(
        self, customer_service: CustomerService
    ) -> None:
        updated = await customer_service.update_last_contact("2")
        assert updated.last_contacted_at == NOW

    @pytest.mark.asyncio
    async def test_update_last_contact_explicit(self, customer_service: CustomerService) -> None:
        when = datetime(2024, 1, 22, 15, 30)
        updated = await customer_service.update_last_contact("2", when)
        assert updated.last_contacted_at == when


class TestSearchCustomers:
    """Tests for multi-criteria search."""

    @pytest.mark.asyncio
    async def test_tags(self, office_customers: CustomerService) -> None:
        found = await office_customers.search_customers(CustomerSearch(tags=["VIP"]))
        assert sorted(c.id for c in found) == ["1", "3"]

    @pytest.mark.asyncio
    async def test_name_case_insensitive(self, office_customers: CustomerService) -> None:
        found = await office_customers.search_customers(CustomerSearch(name="trần thị"))
        assert [c.id for c in found] == ["2"]

    @pytest.mark.asyncio
    async def test_phone_substring(self, office_customers: CustomerService) -> None:
        found = await office_customers.search_customers(CustomerSearch(phone="0934"))
        assert [c.id for c in found] == ["4"]

    @pytest.mark.asyncio
    async def test_status_accepts_legacy_labels(self, office_customers: CustomerService) -> None:
        found = await office_customers.search_customers(CustomerSearch(status=["new", "lost"]))
        assert sorted(c.id for c in found) == ["1", "4", "5"]

    @pytest.mark.asyncio
    async def test_value_range(self, office_customers: CustomerService) -> None:
        found = await office_customers.search_customers(
            CustomerSearch(value_from=3_000_000_000, value_to=5_000_000_000)
        )
        assert sorted(c.id for c in found) == ["1", "2"]

    @pytest.mark.asyncio
    async def test_created_range(self, office_customers: CustomerService) -> None:
        found = await office_customers.search_customers(
            CustomerSearch(created_from=datetime(2024, 1, 10), created_to=datetime(2024, 1, 12))
        )
        assert sorted(c.id for c in found) == ["2", "4"]

    @pytest.mark.asyncio
    async def test_criteria_combine(self, office_customers: CustomerService) -> None:
        found = await office_customers.search_customers(
            CustomerSearch(tags=["VIP"], priority=["high"], status=["customer"])
        )
        assert [c.id for c in found] == ["3"]

    @pytest.mark.asyncio
    async def test_empty_criteria_returns_all(self, office_customers: CustomerService) -> None:
        assert len(await office_customers.search_customers(CustomerSearch())) == 5


class TestCustomerStats:
    """Tests for aggregate statistics."""

    @pytest.mark.asyncio
    async def test_stats(self, office_customers: CustomerService) -> None:
        stats = await office_customers.get_customer_stats()

        assert stats.total == 5
        assert stats.by_status == {"lead": 2, "prospect": 1, "customer": 1, "inactive": 1}
        assert stats.by_priority == {"high": 2, "medium": 1, "low": 2}
        assert stats.by_source["Zalo"] == 1
        assert stats.total_value == 17_500_000_000
        assert stats.average_value == 3_500_000_000
        assert stats.recent_count == 5

    @pytest.mark.asyncio
    async def test_recent_window(self) -> None:
        service = CustomerService(
            InMemoryRecordStore(fixture_customers()),
            recent_days=14,
            clock=lambda: NOW,
        )
        stats = await service.get_customer_stats()
        # Created on or after Jan 11
        assert stats.recent_count == 2

    @pytest.mark.asyncio
    async def test_empty(self) -> None:
        stats = await CustomerService(InMemoryRecordStore()).get_customer_stats()
        assert stats.total == 0
        assert stats.average_value == 0.0
        assert stats.by_status == {}


class TestStoreBoundary:
    """Tests for timeouts and concurrent writers."""

    @pytest.mark.asyncio
    async def test_timeout(self, make_customer) -> None:
        service = CustomerService(
            InMemoryRecordStore([make_customer()], latency=0.5), timeout=0.01
        )
        with pytest.raises(StoreTimeoutError, match="Customer store"):
            await service.list_customers()

    @pytest.mark.asyncio
    async def test_no_timeout_by_default(self, make_customer) -> None:
        service = CustomerService(InMemoryRecordStore([make_customer()], latency=0.01))
        assert (await service.list_customers()).total == 1

    @pytest.mark.asyncio
    async def test_concurrent_creates(self, make_customer) -> None:
        service = CustomerService(InMemoryRecordStore(latency=0.001))
        created = await asyncio.gather(
            *(service.create_customer(NEW_CUSTOMER) for _ in range(10))
        )
        assert len({c.id for c in created}) == 10
        assert len(await service.store.get_all()) == 10
