from __future__ import annotations

from pydantic import BaseModel, Field

from ..candidates.models import Candidate
from ..filtering.models import FilterSpec
from ..placement.models import CanvasOptions, PlacementResult


class DiscoveryRequest(BaseModel):
    candidates: list[Candidate] = Field(default_factory=list)
    filters: FilterSpec = Field(default_factory=FilterSpec)
    canvas: CanvasOptions | None = None


class DiscoveryItem(BaseModel):
    candidate: Candidate
    eta_minutes: int | None = None


class DiscoveryResponse(BaseModel):
    results: list[DiscoveryItem]
    placement: PlacementResult
    total_input: int
    total_matches: int


class PlacementRequest(BaseModel):
    candidates: list[Candidate] = Field(default_factory=list)
    canvas: CanvasOptions | None = None
