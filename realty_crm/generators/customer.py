"""Customer generator."""

from __future__ import annotations

import random
from datetime import timedelta
from typing import Iterator

from realty_crm.generators.base import HCMC_DISTRICTS, BaseGenerator
from realty_crm.models import Customer, CustomerStatus, Priority


class CustomerGenerator(BaseGenerator):
    """Generate synthetic CRM customers."""

    STATUSES = list(CustomerStatus)
    STATUS_WEIGHTS = [0.40, 0.25, 0.20, 0.15]

    PRIORITIES = [Priority.LOW, Priority.MEDIUM, Priority.HIGH]
    PRIORITY_WEIGHTS = [0.30, 0.45, 0.25]

    SOURCES = ["Facebook", "Google Ads", "Zalo", "Website", "Giới thiệu", "Walk-in"]
    TAGS = ["VIP", "Căn hộ", "Nhà phố", "Biệt thự", "Đầu tư", "Văn phòng", "Gia đình", "Startup"]

    # Deal value ranges by status (VND)
    VALUE_RANGES = {
        CustomerStatus.LEAD: (0, 5_000_000_000),
        CustomerStatus.PROSPECT: (500_000_000, 8_000_000_000),
        CustomerStatus.CUSTOMER: (1_000_000_000, 20_000_000_000),
        CustomerStatus.INACTIVE: (0, 2_000_000_000),
    }

    CONTACT_RATE = 0.8
    COMPANY_RATE = 0.6

    def generate(self) -> Customer:
        """Generate a single customer.

        Returns
        -------
        Customer
            Generated customer.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Customer:
        status = random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]
        priority = random.choices(self.PRIORITIES, weights=self.PRIORITY_WEIGHTS, k=1)[0]

        low, high = self.VALUE_RANGES[status]
        # Round to millions, as agents quote them
        total_value = random.randint(low, high) // 1_000_000 * 1_000_000

        created_at, updated_at = self._timeline(max_age_days=2 * 365)
        last_contacted_at = None
        if random.random() < self.CONTACT_RATE:
            span = (updated_at - created_at).total_seconds()
            last_contacted_at = created_at + timedelta(seconds=random.uniform(0, span))

        has_company = random.random() < self.COMPANY_RATE
        return Customer(
            id=self.fake.uuid4(),
            name=self.fake.name(),
            email=self.fake.free_email(),
            phone=self.fake.phone_number(),
            status=status,
            priority=priority,
            created_at=created_at,
            updated_at=updated_at,
            company=self.fake.company() if has_company else None,
            position=self.fake.job() if has_company else None,
            address=f"{random.choice(HCMC_DISTRICTS)}, TP. Hồ Chí Minh",
            source=random.choice(self.SOURCES),
            notes="",
            total_value=total_value,
            tags=random.sample(self.TAGS, k=random.randint(0, 3)),
            last_contacted_at=last_contacted_at,
        )
