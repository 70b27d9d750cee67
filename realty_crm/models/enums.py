"""Enumeration types for CRM entities."""

from enum import Enum

from realty_crm.exceptions import InvalidRecordError


class CustomerStatus(str, Enum):
    LEAD = "lead"
    PROSPECT = "prospect"
    CUSTOMER = "customer"
    INACTIVE = "inactive"

    @classmethod
    def coerce(cls, value: "str | CustomerStatus") -> "CustomerStatus":
        """Map a status from any known vocabulary onto the canonical one.

        Parameters
        ----------
        value : str | CustomerStatus
            Canonical status or one of the legacy pipeline labels.

        Returns
        -------
        CustomerStatus
            Canonical status.

        Raises
        ------
        InvalidRecordError
            If the value belongs to no known vocabulary.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        if key in LEGACY_CUSTOMER_STATUSES:
            return LEGACY_CUSTOMER_STATUSES[key]
        raise InvalidRecordError(f"Unknown customer status: {value!r}")


# Pipeline labels used by older screens
LEGACY_CUSTOMER_STATUSES: dict[str, CustomerStatus] = {
    "new": CustomerStatus.LEAD,
    "contacted": CustomerStatus.LEAD,
    "qualified": CustomerStatus.PROSPECT,
    "potential": CustomerStatus.PROSPECT,
    "interested": CustomerStatus.PROSPECT,
    "viewing": CustomerStatus.PROSPECT,
    "negotiating": CustomerStatus.PROSPECT,
    "active": CustomerStatus.CUSTOMER,
    "converted": CustomerStatus.CUSTOMER,
    "closed": CustomerStatus.CUSTOMER,
    "lost": CustomerStatus.INACTIVE,
}


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


PRIORITY_ORDINAL: dict[Priority, int] = {
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
    Priority.URGENT: 4,
}


class PropertyType(str, Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    VILLA = "villa"
    TOWNHOUSE = "townhouse"
    OFFICE = "office"
    SHOP = "shop"
    WAREHOUSE = "warehouse"
    LAND = "land"
    RESORT = "resort"
    HOTEL = "hotel"


class PropertyStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    RENTED = "rented"
    RESERVED = "reserved"
    PENDING = "pending"
    EXPIRED = "expired"
    DRAFT = "draft"


class Direction(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"


class LegalStatus(str, Enum):
    RED_BOOK = "red_book"
    PINK_BOOK = "pink_book"
    SALE_CONTRACT = "sale_contract"
    AUTHORIZATION = "authorization"
    WAITING_BOOK = "waiting_book"
    OTHER = "other"


class FeatureCategory(str, Enum):
    INTERIOR = "interior"
    EXTERIOR = "exterior"
    SECURITY = "security"
    CONVENIENCE = "convenience"
    ENVIRONMENT = "environment"


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    APPROVED = "approved"
    CONSTRUCTION = "construction"
    COMPLETED = "completed"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class ProjectType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    MIXED = "mixed"
    INDUSTRIAL = "industrial"
    RESORT = "resort"
    INFRASTRUCTURE = "infrastructure"


def priority_rank(value: "str | Priority | None") -> int:
    """Ordinal of a priority; unknown or absent values rank 0."""
    try:
        return PRIORITY_ORDINAL[Priority(value)]
    except ValueError:
        return 0
