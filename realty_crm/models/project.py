"""Development project model."""

from dataclasses import dataclass, field
from datetime import datetime

from realty_crm.models.base import Location
from realty_crm.models.enums import ProjectStatus, ProjectType


@dataclass
class Project:
    """Residential or commercial development grouping several listings."""

    id: str
    name: str
    description: str
    developer: str
    status: ProjectStatus
    project_type: ProjectType
    location: Location
    total_area: float  # Square meters
    total_units: int
    available_units: int
    price_min: int
    price_max: int
    created_at: datetime
    updated_at: datetime
    amenities: list[str] = field(default_factory=list)
    property_ids: list[str] = field(default_factory=list)
    featured: bool = False
    views: int = 0
    inquiries: int = 0
    expected_completion: datetime | None = None
