"""Base models shared across entity kinds."""

from dataclasses import dataclass


@dataclass
class Coordinates:
    """WGS84 point."""

    lat: float
    lng: float


@dataclass
class Location:
    """Street location of a property or project.

    ``district`` and ``city`` are the filterable parts; ``ward`` is the
    sub-district unit used in Vietnamese addresses.
    """

    address: str
    district: str
    city: str
    ward: str | None = None
    coordinates: Coordinates | None = None
