from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .errors import InvalidFilterSpec
from .filtering.models import SortBy
from .placement.config import DEFAULT_PLACEMENT_CONFIG
from .placement.engine import place_candidates
from .placement.models import PlacementResult
from .search.models import DiscoveryRequest, DiscoveryResponse, PlacementRequest
from .search.service import run_discovery

logger = logging.getLogger(__name__)

app = FastAPI(title="Stylist Discovery API", version="1.0.0")


@app.exception_handler(InvalidFilterSpec)
async def invalid_filter_spec_handler(request: Request, exc: InvalidFilterSpec) -> JSONResponse:
    logger.info("Rejected filter spec on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/config")
def config() -> dict:
    cfg = DEFAULT_PLACEMENT_CONFIG
    return {
        "canvas": {
            "padding": cfg.padding,
            "min_span_deg": cfg.min_span_deg,
            "fallback_positions": [list(p) for p in cfg.fallback_positions],
        },
        "sort_options": [s.value for s in SortBy],
    }


# ── Discovery endpoints ──────────────────────────────────────────────────


@app.post("/discover", response_model=DiscoveryResponse)
def discover(body: DiscoveryRequest) -> DiscoveryResponse:
    return run_discovery(body)


@app.post("/placement", response_model=PlacementResult)
def placement(body: PlacementRequest) -> PlacementResult:
    cfg = body.canvas.to_config() if body.canvas else DEFAULT_PLACEMENT_CONFIG
    return place_candidates(body.candidates, cfg)


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())
