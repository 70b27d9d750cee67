"""Customer model."""

from dataclasses import dataclass, field
from datetime import datetime

from realty_crm.models.enums import CustomerStatus, Priority


@dataclass
class Customer:
    """CRM customer (lead, prospect or buyer)."""

    id: str
    name: str
    email: str
    phone: str
    status: CustomerStatus
    priority: Priority
    created_at: datetime
    updated_at: datetime
    company: str | None = None
    position: str | None = None
    address: str | None = None
    source: str = ""
    notes: str = ""
    total_value: int = 0  # Deal value in VND
    tags: list[str] = field(default_factory=list)
    last_contacted_at: datetime | None = None
