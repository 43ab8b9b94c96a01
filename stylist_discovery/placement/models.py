from __future__ import annotations

import dataclasses

from pydantic import BaseModel, Field

from .config import DEFAULT_PLACEMENT_CONFIG, PlacementConfig


class Position(BaseModel):
    top: float
    left: float


class PlacementResult(BaseModel):
    positions: dict[str, Position] = Field(default_factory=dict)
    degenerate: bool = False
    malformed_ids: list[str] = Field(default_factory=list)


class CanvasOptions(BaseModel):
    """Per-request overrides of the default placement configuration."""

    padding: float | None = Field(default=None, ge=0.0, lt=0.5)
    min_span_deg: float | None = Field(default=None, gt=0.0)
    fallback_positions: list[tuple[float, float]] | None = Field(default=None, min_length=1)

    def to_config(self, base: PlacementConfig = DEFAULT_PLACEMENT_CONFIG) -> PlacementConfig:
        overrides: dict = {}
        if self.padding is not None:
            overrides["padding"] = self.padding
        if self.min_span_deg is not None:
            overrides["min_span_deg"] = self.min_span_deg
        if self.fallback_positions is not None:
            overrides["fallback_positions"] = tuple(
                (float(top), float(left)) for top, left in self.fallback_positions
            )
        return dataclasses.replace(base, **overrides) if overrides else base
