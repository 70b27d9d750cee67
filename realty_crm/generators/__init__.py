"""Seed data generators."""

from realty_crm.generators.customer import CustomerGenerator
from realty_crm.generators.property import PropertyGenerator

__all__ = ["CustomerGenerator", "PropertyGenerator"]
