from __future__ import annotations

from collections import Counter
from typing import Any

from .store import DISCOVER_EVENT

FILTER_NAMES = [
    "text_query",
    "max_distance",
    "price_range",
    "min_rating",
    "available_now",
    "specialties",
    "languages",
]


def _pct(part: int, total: int) -> float:
    return round(part / total * 100, 1) if total else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == DISCOVER_EVENT]
    total = len(searches)

    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Top location hints
    loc_counter: Counter[str] = Counter()
    for s in searches:
        if s.get("location"):
            loc_counter[s["location"]] += 1
    top_locations = [{"name": n, "count": c} for n, c in loc_counter.most_common(10)]

    # Top requested specialties
    specialty_counter: Counter[str] = Counter()
    for s in searches:
        for sp in s.get("specialties", []) or []:
            specialty_counter[sp] += 1
    top_specialties = [{"name": n, "count": c} for n, c in specialty_counter.most_common(10)]

    sort_usage = dict(Counter(s.get("sort_by", "rating") for s in searches))

    filter_counts = {name: 0 for name in FILTER_NAMES}
    for s in searches:
        for name in s.get("active_filters", []) or []:
            if name in filter_counts:
                filter_counts[name] += 1
    filter_usage = {k: _pct(v, total) for k, v in filter_counts.items()}

    zero_results = sum(1 for s in searches if s.get("results_returned", 0) == 0)

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "top_locations": top_locations,
        "top_specialties": top_specialties,
        "sort_usage": sort_usage,
        "filter_usage": filter_usage,
        "zero_result_rate": _pct(zero_results, total),
    }
