from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class GeoConfig:
    earth_radius_km: float = 6371.0088
    avg_speed_kmh: float = float(os.getenv("DISCOVERY_AVG_SPEED_KMH", "30"))


DEFAULT_GEO_CONFIG = GeoConfig()
