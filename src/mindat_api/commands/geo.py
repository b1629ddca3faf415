"""Bounding-box approximation used to filter localities around a point."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import math

KM_PER_DEGREE = 111.0
MIN_COS_LATITUDE = 0.01


@dataclass(frozen=True)
class BoundingBox:
    """
    A latitude/longitude rectangle. Boundaries are inclusive.

    Example:
        >>> box = BoundingBox.from_radius(0.0, 0.0, 111.0)
        >>> (box.min_lat, box.max_lat)
        (-1.0, 1.0)
        >>> box.contains(0.5, -0.5)
        True
    """

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @classmethod
    def from_radius(cls, latitude: float, longitude: float, radius_km: float) -> BoundingBox:
        """
        Approximates a circle of `radius_km` around a point, taking one degree of latitude as 111 km
        and one degree of longitude as 111 km * cos(latitude). The cosine is clamped to 0.01 so the
        box stays finite near the poles.
        """
        lat_delta = radius_km / KM_PER_DEGREE
        lon_delta = radius_km / (KM_PER_DEGREE * max(abs(math.cos(math.radians(latitude))), MIN_COS_LATITUDE))
        return cls(min_lat=latitude - lat_delta,
                   max_lat=latitude + lat_delta,
                   min_lon=longitude - lon_delta,
                   max_lon=longitude + lon_delta)

    def contains(self, latitude: Optional[float], longitude: Optional[float]) -> bool:
        """Whether a point lies inside the box. Points with a missing coordinate are never inside."""
        if latitude is None or longitude is None:
            return False
        return self.min_lat <= latitude <= self.max_lat and self.min_lon <= longitude <= self.max_lon
