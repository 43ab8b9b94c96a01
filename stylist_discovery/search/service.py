from __future__ import annotations

import time

from ..analytics.store import DISCOVER_EVENT, record_event
from ..candidates.geo import estimate_travel_minutes
from ..filtering.engine import filter_candidates
from ..placement.config import DEFAULT_PLACEMENT_CONFIG
from ..placement.engine import place_candidates
from .models import DiscoveryItem, DiscoveryRequest, DiscoveryResponse


def run_discovery(request: DiscoveryRequest) -> DiscoveryResponse:
    """Filter, rank and place the request's candidates.

    Raises ``InvalidFilterSpec`` for a malformed filter spec; nothing is
    recorded in that case.
    """
    start_time = time.perf_counter()
    spec = request.filters

    ranked = filter_candidates(request.candidates, spec)

    config = request.canvas.to_config() if request.canvas else DEFAULT_PLACEMENT_CONFIG
    placement = place_candidates(ranked, config)

    items = [
        DiscoveryItem(candidate=c, eta_minutes=estimate_travel_minutes(c.distance_km))
        for c in ranked
    ]

    elapsed_ms = round((time.perf_counter() - start_time) * 1000, 1)
    record_event(DISCOVER_EVENT, {
        "location": spec.location,
        "text_query": spec.text_query,
        "specialties": sorted(spec.specialties),
        "sort_by": spec.sort_by.value,
        "active_filters": spec.active_filters(),
        "total_input": len(request.candidates),
        "results_returned": len(items),
        "malformed": len(placement.malformed_ids),
        "response_time_ms": elapsed_ms,
    })

    return DiscoveryResponse(
        results=items,
        placement=placement,
        total_input=len(request.candidates),
        total_matches=len(items),
    )
