"""Base generator class for all seed data generators."""

from __future__ import annotations

import random
from abc import ABC
from datetime import datetime, timedelta

from faker import Faker

HCMC_DISTRICTS = [
    "Quận 1",
    "Quận 2",
    "Quận 3",
    "Quận 7",
    "Quận 9",
    "Bình Thạnh",
    "Phú Nhuận",
    "Tân Bình",
    "Gò Vấp",
    "Thủ Đức",
]


class BaseGenerator(ABC):
    """Base class for all seed data generators.

    Provides common initialization: Faker instance creation and
    seed-based reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``vi_VN``).
    now : datetime | None
        Reference time for generated timestamps (default: current time).
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "vi_VN",
        now: datetime | None = None,
    ) -> None:
        self.fake = Faker(locale)
        self.now = now or datetime.now()
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def _timeline(self, max_age_days: int) -> tuple[datetime, datetime]:
        """Random ``(created_at, updated_at)`` pair ending no later than ``now``."""
        created_at = self.now - timedelta(
            days=random.randint(0, max_age_days),
            minutes=random.randint(0, 24 * 60 - 1),
        )
        age = (self.now - created_at).total_seconds()
        updated_at = created_at + timedelta(seconds=random.uniform(0, age))
        return created_at, updated_at
