from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

# (top, left) percentages, visually well separated on a 4:3-ish map panel.
DEFAULT_FALLBACK_POSITIONS: tuple[tuple[float, float], ...] = (
    (25.0, 30.0),
    (40.0, 65.0),
    (65.0, 25.0),
    (30.0, 75.0),
    (70.0, 55.0),
    (50.0, 40.0),
    (20.0, 50.0),
    (75.0, 80.0),
)


@dataclass(frozen=True)
class PlacementConfig:
    """
    Canvas configuration for the placement engine.

    padding: fraction of each axis kept as margin; positions fall in
        ``[padding * 100, (1 - padding) * 100]``.
    min_span_deg: smallest coordinate range (degrees) treated as a real spread.
    fallback_positions: cyclic (top, left) sequence used when coordinates
        are coincident or unusable.
    """

    padding: float = float(os.getenv("DISCOVERY_CANVAS_PADDING", "0.15"))
    min_span_deg: float = float(os.getenv("DISCOVERY_MIN_SPAN_DEG", "0.02"))
    fallback_positions: tuple[tuple[float, float], ...] = DEFAULT_FALLBACK_POSITIONS

    def __post_init__(self) -> None:
        if not 0.0 <= self.padding < 0.5:
            raise ValueError(f"padding must be within [0, 0.5), got {self.padding}")
        if not self.min_span_deg > 0.0:
            raise ValueError(f"min_span_deg must be positive, got {self.min_span_deg}")
        if not self.fallback_positions:
            raise ValueError("fallback_positions must not be empty")

    @property
    def lower_pct(self) -> float:
        return self.padding * 100

    @property
    def upper_pct(self) -> float:
        return (1 - self.padding) * 100


DEFAULT_PLACEMENT_CONFIG = PlacementConfig()
