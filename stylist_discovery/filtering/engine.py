from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np
import pandas as pd

from ..candidates.geo import with_distances
from ..candidates.models import Candidate
from ..errors import InvalidFilterSpec
from .models import FilterSpec, SortBy

logger = logging.getLogger(__name__)

# (columns, ascending) per sort key; "id" closes every key so the order is total.
_SORT_KEYS: dict[SortBy, tuple[list[str], list[bool]]] = {
    SortBy.distance: (["distance_km", "rating", "id"], [True, False, True]),
    SortBy.price: (["price_from", "rating", "id"], [True, False, True]),
    SortBy.price_desc: (["price_from", "rating", "id"], [False, False, True]),
    SortBy.rating: (["rating", "review_count", "id"], [False, False, True]),
    SortBy.popular: (["review_count", "rating", "id"], [False, False, True]),
    SortBy.availability: (["available_now", "distance_km", "id"], [False, True, True]),
}


def _normalize_tags(tags: frozenset[str]) -> frozenset[str]:
    return frozenset(t.strip().lower() for t in tags if t.strip())


def validate_filter_spec(spec: FilterSpec) -> None:
    """Raise ``InvalidFilterSpec`` if *spec* carries a malformed numeric range."""
    if spec.min_rating is not None and not 0.0 <= spec.min_rating <= 5.0:
        raise InvalidFilterSpec(f"min_rating must be within [0, 5], got {spec.min_rating}")

    if spec.price_range is not None:
        lo, hi = spec.price_range
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise InvalidFilterSpec(f"price_range bounds must be finite, got {spec.price_range}")
        if lo < 0:
            raise InvalidFilterSpec(f"price_range minimum must be non-negative, got {lo}")
        if lo > hi:
            raise InvalidFilterSpec(f"price_range minimum {lo} exceeds maximum {hi}")

    if spec.max_distance_km is not None:
        d = spec.max_distance_km
        if not math.isfinite(d) or d < 0:
            raise InvalidFilterSpec(f"max_distance_km must be a non-negative number, got {d}")


def _to_frame(candidates: Sequence[Candidate]) -> pd.DataFrame:
    """Tabulate the fields the predicates and sort keys read, indexed by input position."""
    return pd.DataFrame({
        "id": [c.id for c in candidates],
        "name_lower": [c.name.lower() for c in candidates],
        "bio_lower": [c.bio.lower() for c in candidates],
        "specialties_lower": [_normalize_tags(c.specialties) for c in candidates],
        "languages_lower": [_normalize_tags(c.languages) for c in candidates],
        "rating": [c.rating for c in candidates],
        "review_count": [c.review_count for c in candidates],
        "price_from": [c.price_from for c in candidates],
        "distance_km": [
            c.distance_km if c.distance_km is not None else np.nan for c in candidates
        ],
        "available_now": [c.available_now for c in candidates],
    })


def _build_mask(df: pd.DataFrame, spec: FilterSpec) -> pd.Series:
    mask = pd.Series(True, index=df.index)

    query = (spec.text_query or "").strip().lower()
    if query:
        in_tags = df["specialties_lower"].apply(lambda tags: any(query in t for t in tags))
        mask &= (
            df["name_lower"].str.contains(query, regex=False)
            | df["bio_lower"].str.contains(query, regex=False)
            | in_tags.astype(bool)
        )

    if spec.max_distance_km is not None:
        # Unknown distances compare False and drop out
        mask &= df["distance_km"] <= spec.max_distance_km

    if spec.price_range is not None:
        lo, hi = spec.price_range
        mask &= (df["price_from"] >= lo) & (df["price_from"] <= hi)

    if spec.min_rating is not None:
        mask &= df["rating"] >= spec.min_rating

    if spec.available_now:
        mask &= df["available_now"]

    requested_specialties = _normalize_tags(spec.specialties)
    if requested_specialties:
        mask &= df["specialties_lower"].apply(
            lambda tags: bool(requested_specialties & tags)
        ).astype(bool)

    requested_languages = _normalize_tags(spec.languages)
    if requested_languages:
        mask &= df["languages_lower"].apply(
            lambda langs: bool(requested_languages & langs)
        ).astype(bool)

    return mask


def filter_candidates(candidates: Sequence[Candidate], spec: FilterSpec) -> list[Candidate]:
    """Return the candidates satisfying every active predicate of *spec*, in ``sort_by`` order.

    The input sequence and its candidates are never modified; when
    ``spec.reference`` is set, survivors lacking a distance are returned as
    annotated copies.
    """
    validate_filter_spec(spec)

    if not candidates:
        return []

    if spec.reference is not None:
        candidates = with_distances(candidates, spec.reference)

    df = _to_frame(candidates)
    survivors = df.loc[_build_mask(df, spec)]

    columns, ascending = _SORT_KEYS[spec.sort_by]
    ordered = survivors.sort_values(
        by=columns, ascending=ascending, na_position="last", kind="mergesort",
    )

    logger.debug(
        "Filtered %d candidates to %d (sort_by=%s, active=%s)",
        len(candidates), len(ordered), spec.sort_by.value, spec.active_filters(),
    )
    return [candidates[i] for i in ordered.index]
