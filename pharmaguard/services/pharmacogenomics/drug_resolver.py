"""
Drug Resolver - maps free-text drug names onto the formulary.

Runs the matcher once per formulary entry, orders the candidates by edit
distance (ties keep formulary order) and keeps the best few.
"""

import logging
from typing import List, Mapping, Optional, Sequence

from .config import MatcherThresholds, get_matcher_thresholds
from .formulary import FORMULARY
from .matcher import match_entry
from .models import CanonicalDrug, FormularyEntry, MatchCandidate, MatchKind

logger = logging.getLogger(__name__)


def normalize_query(query: str) -> str:
    """Trim and lower-case a raw user query."""
    return query.strip().lower()


class DrugResolver:
    """
    Resolves free-text queries (misspellings, brand names, salts) to
    canonical drug ids.

    The resolver holds read-only references to the formulary and thresholds,
    so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        formulary: Mapping[CanonicalDrug, FormularyEntry] = FORMULARY,
        thresholds: Optional[MatcherThresholds] = None,
    ):
        self.formulary = formulary
        self.thresholds = thresholds or get_matcher_thresholds()

    def resolve(self, query: str) -> List[MatchCandidate]:
        """
        Return up to `max_candidates` suggestions ordered by edit distance.

        An empty list means the query is too short or nothing is close
        enough; it is not an error.
        """
        normalized = normalize_query(query)
        if len(normalized) < self.thresholds.min_query_length:
            return []

        candidates: List[MatchCandidate] = []
        for entry in self.formulary.values():
            candidate = match_entry(normalized, entry, self.thresholds)
            if candidate is not None:
                candidates.append(candidate)

        # sorted() is stable, so ties stay in formulary order
        ranked = sorted(candidates, key=lambda c: c.edit_distance)
        ranked = ranked[:self.thresholds.max_candidates]

        if not ranked:
            logger.debug(f"No formulary match for query {normalized!r}")
        return ranked

    def best_match(self, query: str) -> Optional[MatchCandidate]:
        """Top suggestion for a query, or None if nothing matched."""
        candidates = self.resolve(query)
        return candidates[0] if candidates else None

    @staticmethod
    def has_exact_match(candidates: Sequence[MatchCandidate]) -> bool:
        """True when any candidate matched a canonical id or alias verbatim."""
        return any(
            c.match_kind in (MatchKind.EXACT, MatchKind.ALIAS_EXACT)
            for c in candidates
        )


def create_drug_resolver() -> DrugResolver:
    """Factory function to create a DrugResolver over the built-in formulary."""
    return DrugResolver()


def resolve_drug_candidates(query: str) -> List[MatchCandidate]:
    """Resolve a free-text query against the built-in formulary."""
    return create_drug_resolver().resolve(query)
