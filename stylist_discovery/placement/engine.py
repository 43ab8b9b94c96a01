from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from ..candidates.models import Candidate, GeoPoint
from ..errors import MalformedCandidate
from .config import DEFAULT_PLACEMENT_CONFIG, PlacementConfig
from .models import PlacementResult, Position

logger = logging.getLogger(__name__)


def check_coordinates(candidate: Candidate) -> GeoPoint:
    """Return the candidate's location, or raise ``MalformedCandidate`` if it cannot be projected."""
    loc = candidate.location
    if loc is None:
        raise MalformedCandidate(candidate.id, "missing location")
    if not loc.is_finite:
        raise MalformedCandidate(candidate.id, f"non-finite coordinate ({loc.lat}, {loc.lng})")
    if not loc.in_range:
        raise MalformedCandidate(candidate.id, f"coordinate out of range ({loc.lat}, {loc.lng})")
    return loc


def _fit_axis(values: list[float], lo: float, hi: float) -> list[float]:
    """Map *values* into [lo, hi] with one increasing linear map, keeping distinct values distinct."""
    v_min, v_max = min(values), max(values)
    if lo <= v_min and v_max <= hi:
        return values
    if v_max == v_min:
        return [min(hi, max(lo, v)) for v in values]
    new_min, new_max = max(lo, v_min), min(hi, v_max)
    if new_max <= new_min:
        new_min, new_max = lo, hi
    scale = (new_max - new_min) / (v_max - v_min)
    return [min(hi, max(lo, new_min + (v - v_min) * scale)) for v in values]


def fallback_positions(config: PlacementConfig = DEFAULT_PLACEMENT_CONFIG) -> list[Position]:
    """The fallback sequence fitted into the padded band.

    Entries already inside the band are returned unchanged; otherwise each
    axis is rescaled as a whole rather than clamped entry by entry.
    """
    lo, hi = config.lower_pct, config.upper_pct
    tops = _fit_axis([float(t) for t, _ in config.fallback_positions], lo, hi)
    lefts = _fit_axis([float(l) for _, l in config.fallback_positions], lo, hi)
    return [Position(top=t, left=l) for t, l in zip(tops, lefts)]


def fallback_position(index: int, config: PlacementConfig = DEFAULT_PLACEMENT_CONFIG) -> Position:
    """Position *index* of the cyclic fallback sequence, kept inside the padded band."""
    table = fallback_positions(config)
    return table[index % len(table)]


def place_candidates(
    candidates: Sequence[Candidate],
    config: PlacementConfig = DEFAULT_PLACEMENT_CONFIG,
) -> PlacementResult:
    """Map every candidate id to a ``{top, left}`` percentage on the map canvas.

    Coordinates are normalised against the bounding box of all usable
    coordinates, latitude inverted so north is up. When that box is smaller
    than ``min_span_deg`` on both axes, geography is ignored and every
    candidate takes the fallback sequence entry at its input index. Candidates
    with missing, non-finite or out-of-range coordinates always use the
    fallback entry. A repeated id keeps the position of its first occurrence.
    """
    if not candidates:
        return PlacementResult()

    coords = np.full((len(candidates), 2), np.nan)
    duplicate = np.zeros(len(candidates), dtype=bool)
    seen: set[str] = set()
    malformed: list[str] = []
    for i, c in enumerate(candidates):
        if c.id in seen:
            logger.warning("Duplicate candidate id %s at index %d ignored", c.id, i)
            duplicate[i] = True
            continue
        seen.add(c.id)
        try:
            loc = check_coordinates(c)
        except MalformedCandidate as exc:
            logger.warning("Placing %s from fallback sequence: %s", exc.candidate_id, exc.reason)
            malformed.append(c.id)
            continue
        coords[i] = (loc.lat, loc.lng)

    usable = ~np.isnan(coords[:, 0])
    eps = config.min_span_deg
    fallback = fallback_positions(config)

    if usable.any():
        lat_min, lng_min = coords[usable].min(axis=0)
        lat_max, lng_max = coords[usable].max(axis=0)
        lat_range = float(lat_max - lat_min)
        lng_range = float(lng_max - lng_min)
        degenerate = lat_range < eps and lng_range < eps
    else:
        degenerate = True

    positions: dict[str, Position] = {}
    if degenerate:
        logger.debug("Coincident coordinates for %d candidates, using fallback sequence", len(candidates))
        for i, c in enumerate(candidates):
            if not duplicate[i]:
                positions[c.id] = fallback[i % len(fallback)]
        return PlacementResult(positions=positions, degenerate=True, malformed_ids=malformed)

    norm_lat = (coords[:, 0] - lat_min) / max(lat_range, eps)
    norm_lng = (coords[:, 1] - lng_min) / max(lng_range, eps)

    lo, hi = config.lower_pct, config.upper_pct
    band = (1 - 2 * config.padding) * 100
    tops = np.clip(lo + (1 - norm_lat) * band, lo, hi)
    lefts = np.clip(lo + norm_lng * band, lo, hi)

    for i, c in enumerate(candidates):
        if duplicate[i]:
            continue
        if usable[i]:
            positions[c.id] = Position(top=float(tops[i]), left=float(lefts[i]))
        else:
            positions[c.id] = fallback[i % len(fallback)]

    return PlacementResult(positions=positions, degenerate=False, malformed_ids=malformed)
