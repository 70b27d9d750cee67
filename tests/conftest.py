"""Pytest configuration and fixtures."""

from datetime import datetime
from typing import Any, Callable

import pytest

from realty_crm.models import (
    Customer,
    CustomerStatus,
    LegalStatus,
    Location,
    Priority,
    Property,
    PropertyStatus,
    PropertyType,
)
from realty_crm.services import CustomerService, PropertyService
from realty_crm.store import InMemoryRecordStore

NOW = datetime(2024, 1, 25, 9, 0, 0)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def now() -> datetime:
    """Fixed reference time."""
    return NOW


@pytest.fixture
def make_customer() -> Callable[..., Customer]:
    """Factory for customers with sensible defaults."""
    counter = iter(range(1, 10_000))

    def factory(**overrides: Any) -> Customer:
        n = next(counter)
        fields: dict[str, Any] = {
            "id": f"c{n}",
            "name": f"Customer {n}",
            "email": f"customer{n}@example.com",
            "phone": f"09000000{n:02d}",
            "status": CustomerStatus.LEAD,
            "priority": Priority.MEDIUM,
            "created_at": datetime(2024, 1, n % 28 + 1),
            "updated_at": datetime(2024, 1, n % 28 + 1),
        }
        fields.update(overrides)
        return Customer(**fields)

    return factory


@pytest.fixture
def make_property() -> Callable[..., Property]:
    """Factory for listings with sensible defaults."""
    counter = iter(range(1, 10_000))

    def factory(**overrides: Any) -> Property:
        n = next(counter)
        fields: dict[str, Any] = {
            "id": f"p{n}",
            "title": f"Listing {n}",
            "description": "Căn hộ thoáng mát",
            "property_type": PropertyType.APARTMENT,
            "status": PropertyStatus.AVAILABLE,
            "price": 1_000_000_000 * n,
            "area": 50.0 + n,
            "location": Location(address=f"{n} Lê Lợi", district="Quận 1", city="TP. Hồ Chí Minh"),
            "legal_status": LegalStatus.RED_BOOK,
            "owner_name": "Chủ nhà",
            "owner_phone": "0900000000",
            "created_at": datetime(2024, 1, n % 28 + 1),
            "updated_at": datetime(2024, 1, n % 28 + 1),
        }
        fields.update(overrides)
        return Property(**fields)

    return factory


@pytest.fixture
def customer_service(make_customer: Callable[..., Customer]) -> CustomerService:
    """Customer service over An (lead, 5B) and Binh (prospect, 3B)."""
    store = InMemoryRecordStore(
        [
            make_customer(id="1", name="An", total_value=5_000_000_000, status=CustomerStatus.LEAD),
            make_customer(
                id="2", name="Binh", total_value=3_000_000_000, status=CustomerStatus.PROSPECT
            ),
        ],
        name="customer",
    )
    return CustomerService(store, clock=lambda: NOW)


@pytest.fixture
def property_service(make_property: Callable[..., Property]) -> PropertyService:
    """Property service over three available listings."""
    store = InMemoryRecordStore([make_property() for _ in range(3)], name="property")
    return PropertyService(store, clock=lambda: NOW)
