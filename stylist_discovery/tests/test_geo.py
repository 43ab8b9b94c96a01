from __future__ import annotations

import math

from stylist_discovery.candidates.config import GeoConfig
from stylist_discovery.candidates.geo import (
    estimate_travel_minutes,
    haversine_km,
    with_distances,
)
from stylist_discovery.candidates.models import Candidate, GeoPoint


def test_haversine_zero_distance():
    p = GeoPoint(lat=43.65, lng=-79.38)
    assert haversine_km(p, p) == 0.0


def test_haversine_one_degree_latitude():
    d = haversine_km(GeoPoint(lat=0.0, lng=0.0), GeoPoint(lat=1.0, lng=0.0))
    assert 110.5 < d < 111.7, f"Expected ~111km, got {d}"


def test_haversine_is_symmetric():
    a, b = GeoPoint(lat=34.05, lng=-118.24), GeoPoint(lat=43.65, lng=-79.38)
    assert math.isclose(haversine_km(a, b), haversine_km(b, a))


def test_with_distances_fills_only_missing():
    ref = GeoPoint(lat=43.65, lng=-79.38)
    candidates = [
        Candidate(id="a", name="a", location=GeoPoint(lat=43.66, lng=-79.38)),
        Candidate(id="b", name="b", distance_km=7.5, location=GeoPoint(lat=43.66, lng=-79.38)),
        Candidate(id="c", name="c"),
        Candidate(id="d", name="d", location=GeoPoint(lat=math.nan, lng=-79.38)),
    ]
    annotated = with_distances(candidates, ref)
    assert 1.0 < annotated[0].distance_km < 1.3
    assert annotated[1].distance_km == 7.5
    assert annotated[2].distance_km is None
    assert annotated[3].distance_km is None
    # originals untouched
    assert candidates[0].distance_km is None


def test_with_distances_ignores_unusable_reference():
    candidates = [Candidate(id="a", name="a", location=GeoPoint(lat=1.0, lng=1.0))]
    annotated = with_distances(candidates, GeoPoint(lat=math.nan, lng=0.0))
    assert annotated[0].distance_km is None


def test_travel_minutes():
    assert estimate_travel_minutes(15.0) == 30
    assert estimate_travel_minutes(0.0) == 1
    assert estimate_travel_minutes(None) is None
    assert estimate_travel_minutes(10.0, GeoConfig(avg_speed_kmh=60.0)) == 10
