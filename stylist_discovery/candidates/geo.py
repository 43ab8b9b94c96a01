"""Distance helpers: haversine distance and travel estimates from a reference point."""
from __future__ import annotations

import math
from collections.abc import Sequence

from .config import DEFAULT_GEO_CONFIG, GeoConfig
from .models import Candidate, GeoPoint


def haversine_km(a: GeoPoint, b: GeoPoint, config: GeoConfig = DEFAULT_GEO_CONFIG) -> float:
    """Great-circle distance in kilometres between two points."""
    phi1, phi2 = math.radians(a.lat), math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlam = math.radians(b.lng - a.lng)
    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    return 2 * config.earth_radius_km * math.asin(min(1.0, math.sqrt(h)))


def with_distances(
    candidates: Sequence[Candidate],
    reference: GeoPoint,
    config: GeoConfig = DEFAULT_GEO_CONFIG,
) -> list[Candidate]:
    """Return copies of *candidates* with missing ``distance_km`` derived from *reference*.

    Distances already supplied by the caller are kept as-is. Candidates
    without usable coordinates keep ``None``.
    """
    if not reference.in_range:
        return list(candidates)

    result: list[Candidate] = []
    for c in candidates:
        if c.distance_km is None and c.location is not None and c.location.in_range:
            d = haversine_km(reference, c.location, config)
            c = c.model_copy(update={"distance_km": round(d, 3)})
        result.append(c)
    return result


def estimate_travel_minutes(
    distance_km: float | None, config: GeoConfig = DEFAULT_GEO_CONFIG,
) -> int | None:
    if distance_km is None or not math.isfinite(distance_km):
        return None
    minutes = math.ceil(distance_km * 60 / config.avg_speed_kmh)
    return max(1, minutes)
