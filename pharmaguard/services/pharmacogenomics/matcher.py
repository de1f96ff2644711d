"""
Matcher - scores a normalized query against a single formulary entry.

Rules are applied in priority order and the first rule that fires wins:
  1. exact canonical id (case-insensitive)
  2. exact alias
  3. fuzzy canonical id  (distance <= 3, or <= 40% of a query longer than 4)
  4. fuzzy alias         (distance <= 3, or <= 35% of a query longer than 4;
                          substring containment counts as distance 1)
"""

import math
from typing import Optional

from rapidfuzz.distance import Levenshtein

from .config import MatcherThresholds, get_matcher_thresholds
from .models import FormularyEntry, MatchCandidate, MatchKind


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions needed to turn `a` into `b`.

    Unit-cost Levenshtein distance from rapidfuzz.
    """
    return Levenshtein.distance(a, b)


def _within_threshold(distance: int, query_length: int, ratio: float,
                      thresholds: MatcherThresholds) -> bool:
    if distance <= thresholds.max_absolute_distance:
        return True
    return (
        query_length > thresholds.ratio_min_query_length
        and distance <= math.floor(query_length * ratio)
    )


def match_entry(
    query: str,
    entry: FormularyEntry,
    thresholds: Optional[MatcherThresholds] = None,
) -> Optional[MatchCandidate]:
    """
    Match an already lower-cased, trimmed query against one formulary entry.

    Returns a MatchCandidate, or None when no rule fires.
    """
    thresholds = thresholds or get_matcher_thresholds()
    canonical = entry.canonical_id.value

    if query == canonical.lower():
        return MatchCandidate(
            drug_id=entry.canonical_id,
            matched_alias=canonical,
            edit_distance=0,
            match_kind=MatchKind.EXACT,
            category=entry.category,
        )

    if query in entry.aliases:
        return MatchCandidate(
            drug_id=entry.canonical_id,
            matched_alias=query,
            edit_distance=0,
            match_kind=MatchKind.ALIAS_EXACT,
            category=entry.category,
        )

    canonical_distance = levenshtein_distance(query, canonical.lower())
    if _within_threshold(canonical_distance, len(query),
                         thresholds.canonical_distance_ratio, thresholds):
        return MatchCandidate(
            drug_id=entry.canonical_id,
            matched_alias=canonical,
            edit_distance=canonical_distance,
            match_kind=MatchKind.FUZZY,
            category=entry.category,
        )

    best_distance: Optional[int] = None
    best_alias = ""
    for alias in entry.aliases:
        distance = levenshtein_distance(query, alias)
        if best_distance is None or distance < best_distance:
            best_distance = distance
            best_alias = alias
        # Containment either way short-circuits the scan
        if query in alias or alias in query:
            best_distance = 1
            best_alias = alias
            break

    if best_distance is not None and _within_threshold(
        best_distance, len(query), thresholds.alias_distance_ratio, thresholds
    ):
        return MatchCandidate(
            drug_id=entry.canonical_id,
            matched_alias=best_alias,
            edit_distance=best_distance,
            match_kind=MatchKind.FUZZY,
            category=entry.category,
        )

    return None
