from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..candidates.models import GeoPoint


class SortBy(str, Enum):
    distance = "distance"
    price = "price"
    price_desc = "price_desc"
    rating = "rating"
    popular = "popular"
    availability = "availability"


class FilterSpec(BaseModel):
    """Declarative search/sort configuration built from the search form.

    Numeric ranges are deliberately unconstrained here: they are checked by
    ``validate_filter_spec`` so that a malformed form state raises
    ``InvalidFilterSpec`` instead of being clamped.
    """

    model_config = ConfigDict(frozen=True)

    text_query: str | None = Field(
        default=None, description="Substring matched against name, specialties and bio",
    )
    location: str | None = Field(
        default=None, description="Free-text location hint; not used for filtering",
    )
    reference: GeoPoint | None = Field(
        default=None, description="Searcher's coordinate, used to derive missing distances",
    )
    max_distance_km: float | None = None
    price_range: tuple[float, float] | None = None
    min_rating: float | None = None
    available_now: bool = False
    specialties: frozenset[str] = Field(default_factory=frozenset)
    languages: frozenset[str] = Field(default_factory=frozenset)
    sort_by: SortBy = SortBy.rating

    def active_filters(self) -> list[str]:
        """Names of the predicates this spec actually constrains on."""
        active: list[str] = []
        if self.text_query and self.text_query.strip():
            active.append("text_query")
        if self.max_distance_km is not None:
            active.append("max_distance")
        if self.price_range is not None:
            active.append("price_range")
        if self.min_rating is not None:
            active.append("min_rating")
        if self.available_now:
            active.append("available_now")
        if self.specialties:
            active.append("specialties")
        if self.languages:
            active.append("languages")
        return active
