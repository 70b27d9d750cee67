"""Property listing CRUD, discovery, engagement counters and statistics."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from realty_crm.exceptions import InvalidRecordError
from realty_crm.models import (
    Coordinates,
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
from realty_crm.query import (
    PROPERTY_SCHEMA,
    PROPERTY_TEXT_SCHEMA,
    Page,
    Query,
    QueryEngine,
    SortOrder,
)
from realty_crm.services.base import RecordService, coerce_enum, enum_value
from realty_crm.store import RecordStore

logger = logging.getLogger(__name__)

COUNTERS = ("views", "favorites", "inquiries")

# Upper bounds (exclusive) of the price bands, in VND
PRICE_BANDS: tuple[tuple[str, int | None], ...] = (
    ("under_5b", 5_000_000_000),
    ("5b_10b", 10_000_000_000),
    ("10b_20b", 20_000_000_000),
    ("over_20b", None),
)

SIMILAR_PRICE_TOLERANCE = 0.3


def price_band(price: int) -> str:
    for name, upper in PRICE_BANDS:
        if upper is None or price < upper:
            return name
    return PRICE_BANDS[-1][0]


@dataclass
class PropertyStats:
    """Aggregate figures over all listings."""

    total: int
    by_type: dict[str, int]
    by_status: dict[str, int]
    by_price_range: dict[str, int]
    avg_price: float
    avg_price_per_sqm: float
    total_value: int
    recently_added: int
    expiring_soon: int


class PropertyService(RecordService[Property]):
    """Listing operations over a record store.

    Parameters
    ----------
    store : RecordStore[Property]
        Backing collection.
    page_size : int
        Default page size for ``list_properties``.
    recent_days : int
        Window for ``PropertyStats.recently_added``.
    expiring_days : int
        Window for ``PropertyStats.expiring_soon``.
    **kwargs
        Passed to ``RecordService`` (``id_factory``, ``clock``, ``timeout``).
    """

    record_type = Property
    entity_name = "property"

    def __init__(
        self,
        store: RecordStore[Property],
        page_size: int = 12,
        recent_days: int = 30,
        expiring_days: int = 7,
        **kwargs: Any,
    ) -> None:
        super().__init__(store, QueryEngine(PROPERTY_SCHEMA, default_limit=page_size), **kwargs)
        self.text_engine = QueryEngine(PROPERTY_TEXT_SCHEMA)
        self.recent_days = recent_days
        self.expiring_days = expiring_days

    async def list_properties(self, query: Query | None = None) -> Page[Property]:
        """Return one page of listings matching ``query``."""
        return await self._query(query)

    async def get_property(self, property_id: str) -> Property | None:
        return await self._get(property_id)

    async def create_property(self, data: Mapping[str, Any]) -> Property:
        """Create a listing; engagement counters always start at zero."""
        counters = [name for name in COUNTERS if name in data]
        if counters:
            raise InvalidRecordError(f"Cannot set {', '.join(counters)} on create")
        return await self._create(data, views=0, favorites=0, inquiries=0)

    async def update_property(self, property_id: str, patch: Mapping[str, Any]) -> Property:
        """Merge ``patch`` into a listing.

        Raises
        ------
        RecordNotFoundError
            If the listing does not exist.
        InvalidRecordError
            If the patch names unknown or system-assigned fields.
        """
        return await self._update(property_id, patch)

    async def delete_property(self, property_id: str) -> None:
        await self._delete(property_id)

    async def search_properties(self, text: str) -> list[Property]:
        """Free-text search over title, description, address, district and amenities."""
        if not text.strip():
            return []
        return self.text_engine.select(await self._all(), Query(search=text))

    async def get_recommended_properties(self, customer_id: str, limit: int = 6) -> list[Property]:
        """Most engaged available listings (views plus favorites)."""
        logger.debug("Recommending %d properties for customer %s", limit, customer_id)
        available = [p for p in await self._all() if p.status == PropertyStatus.AVAILABLE]
        available.sort(key=lambda p: p.views + p.favorites, reverse=True)
        return available[:limit]

    async def get_featured_properties(self, limit: int = 6) -> list[Property]:
        """Featured available listings, most recently updated first."""
        page = self.engine.run(
            await self._all(),
            Query(
                filters={"featured": True, "status": PropertyStatus.AVAILABLE},
                sort_by="updated",
                sort_order=SortOrder.DESC,
                limit=limit,
            ),
        )
        return page.items

    async def get_similar_properties(self, property_id: str, limit: int = 4) -> list[Property]:
        """Other available listings sharing type or district, or priced within 30%.

        Returns an empty list when the base listing does not exist.
        """
        properties = await self._all()
        base = next((p for p in properties if p.id == property_id), None)
        if base is None:
            return []

        tolerance = base.price * SIMILAR_PRICE_TOLERANCE
        similar = [
            p
            for p in properties
            if p.id != property_id
            and p.status == PropertyStatus.AVAILABLE
            and (
                p.property_type == base.property_type
                or p.location.district == base.location.district
                or abs(p.price - base.price) < tolerance
            )
        ]
        return similar[:limit]

    async def increment_views(self, property_id: str) -> Property:
        return await self._bump(property_id, "views", 1)

    async def toggle_favorite(self, property_id: str, increment: bool) -> Property:
        """Add or withdraw one favorite; the count never drops below zero."""
        return await self._bump(property_id, "favorites", 1 if increment else -1)

    async def record_inquiry(self, property_id: str) -> Property:
        return await self._bump(property_id, "inquiries", 1)

    async def get_property_stats(self) -> PropertyStats:
        properties = await self._all()
        now = self.clock()
        recent_cutoff = now - timedelta(days=self.recent_days)
        expiry_cutoff = now + timedelta(days=self.expiring_days)

        total_value = sum(p.price for p in properties)
        total_area = sum(p.area for p in properties)
        return PropertyStats(
            total=len(properties),
            by_type=dict(Counter(enum_value(p.property_type) for p in properties)),
            by_status=dict(Counter(enum_value(p.status) for p in properties)),
            by_price_range=dict(Counter(price_band(p.price) for p in properties)),
            avg_price=total_value / len(properties) if properties else 0.0,
            avg_price_per_sqm=total_value / total_area if total_area > 0 else 0.0,
            total_value=total_value,
            recently_added=sum(1 for p in properties if p.created_at >= recent_cutoff),
            expiring_soon=sum(
                1 for p in properties if p.expires_at is not None and p.expires_at <= expiry_cutoff
            ),
        )

    async def _bump(self, property_id: str, counter: str, delta: int) -> Property:
        return await self._update(
            property_id,
            lambda prop: {counter: max(0, getattr(prop, counter) + delta)},
        )

    def _normalize(self, fields: dict[str, Any]) -> dict[str, Any]:
        enums = {
            "property_type": PropertyType,
            "status": PropertyStatus,
            "priority": Priority,
            "direction": Direction,
            "legal_status": LegalStatus,
        }
        for name, kind in enums.items():
            if name in fields:
                fields[name] = coerce_enum(kind, fields[name])

        for name in ("price", "area"):
            if name in fields and not fields[name] > 0:
                raise InvalidRecordError(f"{name} must be positive")
        for name in COUNTERS:
            if name in fields and fields[name] < 0:
                raise InvalidRecordError(f"{name} must be non-negative")

        if isinstance(fields.get("location"), Mapping):
            fields["location"] = _location(fields["location"])
        if "features" in fields:
            fields["features"] = [_feature(f) for f in fields["features"] or []]
        if "images" in fields:
            fields["images"] = [_image(i) for i in fields["images"] or []]
            if sum(1 for image in fields["images"] if image.is_primary) > 1:
                raise InvalidRecordError("Only one image may be primary")
        if "amenities" in fields:
            fields["amenities"] = list(fields["amenities"] or [])
        return fields


def _location(data: Mapping[str, Any]) -> Location:
    values = dict(data)
    try:
        if isinstance(values.get("coordinates"), Mapping):
            values["coordinates"] = Coordinates(**values["coordinates"])
        return Location(**values)
    except TypeError as e:
        raise InvalidRecordError(f"Invalid location: {e}") from e


def _feature(data: PropertyFeature | Mapping[str, Any]) -> PropertyFeature:
    if isinstance(data, PropertyFeature):
        return data
    values = dict(data)
    values["category"] = coerce_enum(FeatureCategory, values.get("category"))
    try:
        return PropertyFeature(**values)
    except TypeError as e:
        raise InvalidRecordError(f"Invalid feature: {e}") from e


def _image(data: PropertyImage | Mapping[str, Any]) -> PropertyImage:
    if isinstance(data, PropertyImage):
        return data
    try:
        return PropertyImage(**data)
    except TypeError as e:
        raise InvalidRecordError(f"Invalid image: {e}") from e
