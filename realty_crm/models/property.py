"""Property listing model."""

from dataclasses import dataclass, field
from datetime import datetime

from realty_crm.models.base import Location
from realty_crm.models.enums import (
    Direction,
    FeatureCategory,
    LegalStatus,
    Priority,
    PropertyStatus,
    PropertyType,
)


@dataclass
class PropertyFeature:
    """Named feature of a listing (e.g. air conditioning: inverter)."""

    name: str
    category: FeatureCategory
    value: str | None = None


@dataclass
class PropertyImage:
    """Listing image."""

    url: str
    order: int
    is_primary: bool = False
    title: str | None = None


@dataclass
class Property:
    """Real estate listing."""

    id: str
    title: str
    description: str
    property_type: PropertyType
    status: PropertyStatus
    price: int  # Smallest currency unit
    area: float  # Square meters
    location: Location
    legal_status: LegalStatus
    owner_name: str
    owner_phone: str
    created_at: datetime
    updated_at: datetime
    bedrooms: int | None = None
    bathrooms: int | None = None
    floors: int | None = None
    year_built: int | None = None
    features: list[PropertyFeature] = field(default_factory=list)
    amenities: list[str] = field(default_factory=list)
    direction: Direction | None = None
    images: list[PropertyImage] = field(default_factory=list)
    owner_email: str | None = None
    agent_name: str | None = None
    slug: str = ""
    priority: Priority = Priority.MEDIUM
    featured: bool = False
    views: int = 0
    favorites: int = 0
    inquiries: int = 0
    last_contacted_at: datetime | None = None
    published_at: datetime | None = None
    expires_at: datetime | None = None

    @property
    def price_per_sqm(self) -> float:
        return self.price / self.area if self.area else 0.0

    @property
    def primary_image(self) -> PropertyImage | None:
        """Designated primary image, falling back to the lowest ``order``."""
        for image in self.images:
            if image.is_primary:
                return image
        if not self.images:
            return None
        return min(self.images, key=lambda image: image.order)
