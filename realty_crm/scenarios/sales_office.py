"""Sales office scenario: seeded stores plus the services running over them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from realty_crm.config import CRMConfig, QueryConfig, StoreConfig
from realty_crm.fixtures import fixture_customers, fixture_projects, fixture_properties
from realty_crm.generators import CustomerGenerator, PropertyGenerator
from realty_crm.models import Customer, Property
from realty_crm.services import CustomerService, ProjectService, PropertyService
from realty_crm.store import InMemoryRecordStore

logger = logging.getLogger(__name__)


@dataclass
class CRMServices:
    """The three entity services of one sales office."""

    customers: CustomerService
    properties: PropertyService
    projects: ProjectService


@dataclass
class SalesOfficeScenario:
    """Generate a sales office: fixture records topped up with Faker data.

    State lives in in-memory stores for the lifetime of the returned
    services.

    Parameters
    ----------
    num_customers : int
        Number of generated customers on top of the fixtures.
    num_properties : int
        Number of generated listings on top of the fixtures.
    include_fixtures : bool
        Start from the hand-written sample records.
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale.
    now : datetime | None
        Reference time for generated timestamps.
    store : StoreConfig
        Latency and timeout applied to every store.
    query : QueryConfig
        Page sizes and analytics windows for the services.
    """

    num_customers: int = 0
    num_properties: int = 0
    include_fixtures: bool = True
    seed: int | None = None
    locale: str = "vi_VN"
    now: datetime | None = None
    store: StoreConfig = field(default_factory=StoreConfig)
    query: QueryConfig = field(default_factory=QueryConfig)

    @classmethod
    def from_config(cls, config: CRMConfig) -> "SalesOfficeScenario":
        return cls(
            num_customers=config.seed.num_customers,
            num_properties=config.seed.num_properties,
            include_fixtures=config.seed.include_fixtures,
            seed=config.seed.seed,
            locale=config.seed.locale,
            store=config.store,
            query=config.query,
        )

    def generate(self) -> CRMServices:
        """Build the stores and wire the services over them.

        Returns
        -------
        CRMServices
            Customer, property and project services sharing one office.
        """
        logger.info(
            "Starting sales office scenario: %d customers, %d properties",
            self.num_customers,
            self.num_properties,
        )

        customers = self._customers()
        properties = self._properties()
        projects = fixture_projects() if self.include_fixtures else []

        latency = self.store.latency_seconds
        timeout = self.store.timeout_seconds
        services = CRMServices(
            customers=CustomerService(
                InMemoryRecordStore(customers, latency=latency, name="customer"),
                page_size=self.query.customer_page_size,
                recent_days=self.query.recent_days,
                timeout=timeout,
            ),
            properties=PropertyService(
                InMemoryRecordStore(properties, latency=latency, name="property"),
                page_size=self.query.property_page_size,
                recent_days=self.query.recent_days,
                expiring_days=self.query.expiring_days,
                timeout=timeout,
            ),
            projects=ProjectService(
                InMemoryRecordStore(projects, latency=latency, name="project"),
                page_size=self.query.project_page_size,
                timeout=timeout,
            ),
        )

        logger.info(
            "Generated sales office: %d customers, %d properties, %d projects",
            len(customers),
            len(properties),
            len(projects),
        )
        return services

    def _customers(self) -> list[Customer]:
        records = fixture_customers() if self.include_fixtures else []
        if self.num_customers:
            generator = CustomerGenerator(seed=self.seed, locale=self.locale, now=self.now)
            records.extend(generator.generate_batch(self.num_customers))
        return records

    def _properties(self) -> list[Property]:
        records = fixture_properties() if self.include_fixtures else []
        if self.num_properties:
            generator = PropertyGenerator(seed=self.seed, locale=self.locale, now=self.now)
            records.extend(generator.generate_batch(self.num_properties))
        return records
