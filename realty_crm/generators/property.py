"""Property listing generator."""

from __future__ import annotations

import random
from datetime import timedelta
from typing import Iterator

from realty_crm.generators.base import HCMC_DISTRICTS, BaseGenerator
from realty_crm.models import (
    Direction,
    FeatureCategory,
    LegalStatus,
    Location,
    Priority,
    Property,
    PropertyFeature,
    PropertyImage,
    PropertyStatus,
    PropertyType,
)


class PropertyGenerator(BaseGenerator):
    """Generate synthetic property listings in Ho Chi Minh City."""

    TYPES = [
        PropertyType.APARTMENT,
        PropertyType.TOWNHOUSE,
        PropertyType.HOUSE,
        PropertyType.VILLA,
        PropertyType.LAND,
        PropertyType.OFFICE,
        PropertyType.SHOP,
    ]
    TYPE_WEIGHTS = [0.35, 0.20, 0.15, 0.08, 0.10, 0.07, 0.05]

    STATUSES = list(PropertyStatus)
    STATUS_WEIGHTS = [0.55, 0.12, 0.08, 0.08, 0.07, 0.05, 0.05]

    PRIORITIES = list(Priority)
    PRIORITY_WEIGHTS = [0.25, 0.45, 0.22, 0.08]

    # Area (m2) and price per m2 (VND) ranges by type
    AREA_RANGES = {
        PropertyType.APARTMENT: (45, 150),
        PropertyType.TOWNHOUSE: (60, 200),
        PropertyType.HOUSE: (50, 250),
        PropertyType.VILLA: (200, 600),
        PropertyType.LAND: (80, 500),
        PropertyType.OFFICE: (50, 400),
        PropertyType.SHOP: (30, 150),
    }
    PRICE_PER_SQM_RANGES = {
        PropertyType.APARTMENT: (40_000_000, 120_000_000),
        PropertyType.TOWNHOUSE: (60_000_000, 150_000_000),
        PropertyType.HOUSE: (50_000_000, 200_000_000),
        PropertyType.VILLA: (80_000_000, 250_000_000),
        PropertyType.LAND: (30_000_000, 150_000_000),
        PropertyType.OFFICE: (50_000_000, 180_000_000),
        PropertyType.SHOP: (60_000_000, 300_000_000),
    }

    RESIDENTIAL = {
        PropertyType.APARTMENT,
        PropertyType.TOWNHOUSE,
        PropertyType.HOUSE,
        PropertyType.VILLA,
    }

    AMENITIES = [
        "Hồ bơi",
        "Gym",
        "Sân tennis",
        "Thang máy",
        "An ninh 24/7",
        "Công viên",
        "Trường học",
        "Siêu thị",
        "Bệnh viện",
        "Hầm để xe",
    ]
    FEATURES = [
        ("Điều hòa", FeatureCategory.INTERIOR),
        ("Nội thất", FeatureCategory.INTERIOR),
        ("Ban công", FeatureCategory.EXTERIOR),
        ("Sân vườn", FeatureCategory.EXTERIOR),
        ("Camera", FeatureCategory.SECURITY),
        ("Cáp quang", FeatureCategory.CONVENIENCE),
        ("Cây xanh", FeatureCategory.ENVIRONMENT),
    ]

    FEATURED_RATE = 0.2
    EXPIRY_RATE = 0.3

    def generate(self) -> Property:
        """Generate a single listing.

        Returns
        -------
        Property
            Generated listing.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple listings.

        Parameters
        ----------
        count : int
            Number of listings to generate.

        Yields
        ------
        Property
            Generated listings.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Property:
        property_type = random.choices(self.TYPES, weights=self.TYPE_WEIGHTS, k=1)[0]
        status = random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]
        priority = random.choices(self.PRIORITIES, weights=self.PRIORITY_WEIGHTS, k=1)[0]

        area = float(random.randint(*self.AREA_RANGES[property_type]))
        price_per_sqm = random.randint(*self.PRICE_PER_SQM_RANGES[property_type])
        price = int(area * price_per_sqm) // 1_000_000 * 1_000_000

        bedrooms = bathrooms = floors = None
        if property_type in self.RESIDENTIAL:
            bedrooms = random.randint(1, 5)
            bathrooms = random.randint(1, bedrooms)
            floors = 1 if property_type == PropertyType.APARTMENT else random.randint(2, 5)

        created_at, updated_at = self._timeline(max_age_days=365)
        published_at = min(created_at + timedelta(days=random.randint(0, 3)), self.now)
        expires_at = None
        if random.random() < self.EXPIRY_RATE:
            expires_at = self.now + timedelta(days=random.randint(-10, 90))

        district = random.choice(HCMC_DISTRICTS)
        views = random.randint(0, 3000)
        title = f"{_TYPE_LABELS[property_type]} {district} {int(area)}m2"

        return Property(
            id=self.fake.uuid4(),
            title=title,
            description=self.fake.paragraph(nb_sentences=3),
            property_type=property_type,
            status=status,
            price=price,
            area=area,
            location=Location(
                address=self.fake.street_address(),
                district=district,
                city="TP. Hồ Chí Minh",
            ),
            legal_status=random.choice(list(LegalStatus)),
            owner_name=self.fake.name(),
            owner_phone=self.fake.phone_number(),
            created_at=created_at,
            updated_at=max(updated_at, published_at),
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            floors=floors,
            year_built=random.randint(2000, self.now.year) if property_type != PropertyType.LAND else None,
            features=[
                PropertyFeature(name=name, category=category)
                for name, category in random.sample(self.FEATURES, k=random.randint(1, 4))
            ],
            amenities=random.sample(self.AMENITIES, k=random.randint(2, 5)),
            direction=random.choice(list(Direction)),
            images=self._images(random.randint(1, 4)),
            slug=self.fake.slug(),
            priority=priority,
            featured=random.random() < self.FEATURED_RATE,
            views=views,
            favorites=random.randint(0, views // 20),
            inquiries=random.randint(0, views // 40),
            published_at=published_at,
            expires_at=expires_at,
        )

    def _images(self, count: int) -> list[PropertyImage]:
        return [
            PropertyImage(url=self.fake.image_url(), order=i + 1, is_primary=i == 0)
            for i in range(count)
        ]


_TYPE_LABELS = {
    PropertyType.APARTMENT: "Căn hộ",
    PropertyType.TOWNHOUSE: "Nhà phố",
    PropertyType.HOUSE: "Nhà riêng",
    PropertyType.VILLA: "Biệt thự",
    PropertyType.LAND: "Đất nền",
    PropertyType.OFFICE: "Văn phòng",
    PropertyType.SHOP: "Mặt bằng",
}
