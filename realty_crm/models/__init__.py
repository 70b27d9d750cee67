"""Domain models for the CRM."""

from realty_crm.models.base import Coordinates, Location
from realty_crm.models.customer import Customer
from realty_crm.models.enums import (
    PRIORITY_ORDINAL,
    CustomerStatus,
    Direction,
    FeatureCategory,
    LegalStatus,
    Priority,
    ProjectStatus,
    ProjectType,
    PropertyStatus,
    PropertyType,
)
from realty_crm.models.project import Project
from realty_crm.models.property import Property, PropertyFeature, PropertyImage

__all__ = [
    "PRIORITY_ORDINAL",
    "Coordinates",
    "Customer",
    "CustomerStatus",
    "Direction",
    "FeatureCategory",
    "LegalStatus",
    "Location",
    "Priority",
    "Project",
    "ProjectStatus",
    "ProjectType",
    "Property",
    "PropertyFeature",
    "PropertyImage",
    "PropertyStatus",
    "PropertyType",
]
