"""LatLon value object: an immutable point on a sphere with geodesy methods."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from spherenav.config import config
from spherenav.tools import great_circle, rhumb_line
from spherenav.utils.errors import InvalidInputError
from spherenav.utils.geo import DmsFormat, parse_dms, require_finite, to_lat, to_lon


@dataclass(frozen=True)
class LatLon:
    """A point given by latitude/longitude in degrees on a sphere of ``radius``.

    Latitude and longitude are stored as given (not clamped or wrapped).
    The radius sets the distance unit: the default mean Earth radius gives
    kilometres. When two points meet in a formula the first point's radius
    is used.
    """

    latitude: float
    longitude: float
    radius: float = field(default_factory=lambda: config.EARTH_RADIUS_KM)

    def __post_init__(self) -> None:
        # frozen dataclass: normalize ints to floats through object.__setattr__
        object.__setattr__(self, "latitude", require_finite(self.latitude, "latitude"))
        object.__setattr__(self, "longitude", require_finite(self.longitude, "longitude"))
        radius = require_finite(self.radius, "radius")
        if radius <= 0:
            raise InvalidInputError(f"radius must be positive, got {radius!r}")
        object.__setattr__(self, "radius", radius)

    @classmethod
    def parse(
        cls,
        lat: Union[str, float],
        lon: Union[str, float],
        radius: Optional[float] = None,
    ) -> LatLon:
        """Build a point from degree/minute/second strings like ``"58°38′38″N"``."""

        if radius is None:
            return cls(parse_dms(lat), parse_dms(lon))
        return cls(parse_dms(lat), parse_dms(lon), radius)

    # ------------------------------------------------------------------
    # Accessors and formatting
    # ------------------------------------------------------------------
    @property
    def lat(self) -> float:
        return self.latitude

    @property
    def lon(self) -> float:
        return self.longitude

    def format_lat(self, fmt: DmsFormat = "dms", dp: Optional[int] = None) -> str:
        """Latitude as d/dm/dms text with an N/S suffix."""
        return to_lat(self.latitude, fmt, dp)

    def format_lon(self, fmt: DmsFormat = "dms", dp: Optional[int] = None) -> str:
        """Longitude as d/dm/dms text with an E/W suffix."""
        return to_lon(self.longitude, fmt, dp)

    def to_string(self, fmt: DmsFormat = "dms", dp: Optional[int] = None) -> str:
        """Comma-separated latitude and longitude, e.g. ``51°30′00″N, 000°07′48″W``."""
        return f"{self.format_lat(fmt, dp)}, {self.format_lon(fmt, dp)}"

    def __str__(self) -> str:
        return self.to_string()

    # ------------------------------------------------------------------
    # Great circle
    # ------------------------------------------------------------------
    def distance_to(self, other: LatLon, precision: Optional[int] = None) -> float:
        """Great-circle distance, rounded to ``precision`` significant digits."""
        return great_circle.haversine_distance(self, other, precision)

    def bearing_to(self, other: LatLon) -> float:
        return great_circle.initial_bearing(self, other)

    def final_bearing_to(self, other: LatLon) -> float:
        return great_circle.final_bearing(self, other)

    def midpoint_to(self, other: LatLon) -> LatLon:
        return great_circle.midpoint(self, other)

    def destination_point(self, bearing: float, distance: float) -> LatLon:
        return great_circle.destination_point(self, bearing, distance)

    @staticmethod
    def intersection(
        p1: LatLon, brng1: float, p2: LatLon, brng2: float
    ) -> Optional[LatLon]:
        """Crossing of two great-circle paths, or None if it is not unique."""
        return great_circle.intersection(p1, brng1, p2, brng2)

    # ------------------------------------------------------------------
    # Rhumb line
    # ------------------------------------------------------------------
    def rhumb_distance_to(self, other: LatLon) -> float:
        return rhumb_line.rhumb_distance(self, other)

    def rhumb_bearing_to(self, other: LatLon) -> float:
        return rhumb_line.rhumb_bearing(self, other)

    def rhumb_destination_point(self, bearing: float, distance: float) -> LatLon:
        return rhumb_line.rhumb_destination_point(self, bearing, distance)

    def rhumb_midpoint_to(self, other: LatLon) -> LatLon:
        return rhumb_line.rhumb_midpoint(self, other)
