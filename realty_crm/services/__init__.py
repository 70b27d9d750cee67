"""CRM services: CRUD, search and statistics per entity kind."""

from realty_crm.services.base import RecordService
from realty_crm.services.customer import CustomerSearch, CustomerService, CustomerStats
from realty_crm.services.project import ProjectService
from realty_crm.services.property import PropertyService, PropertyStats

__all__ = [
    "CustomerSearch",
    "CustomerService",
    "CustomerStats",
    "ProjectService",
    "PropertyService",
    "PropertyStats",
    "RecordService",
]
