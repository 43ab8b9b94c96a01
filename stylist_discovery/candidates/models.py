from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.lat) and math.isfinite(self.lng)

    @property
    def in_range(self) -> bool:
        return self.is_finite and abs(self.lat) <= 90.0 and abs(self.lng) <= 180.0


class Candidate(BaseModel):
    """A discoverable stylist, as returned by the data-fetch layer.

    Instances are frozen snapshots. Derived values (such as a distance
    computed from a reference point) are attached with ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    price_from: float = Field(default=0.0, ge=0.0)
    distance_km: float | None = Field(default=None, ge=0.0)
    available_now: bool = False
    specialties: frozenset[str] = Field(default_factory=frozenset)
    languages: frozenset[str] = Field(default_factory=frozenset)
    location: GeoPoint | None = None
    bio: str = ""
    address: str = ""
