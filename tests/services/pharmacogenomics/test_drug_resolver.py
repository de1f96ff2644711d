"""
Unit tests for the drug resolver.
Tests normalization, ranking, truncation and the empty-result contract.
"""

import pytest
from pharmaguard.services.pharmacogenomics.drug_resolver import (
    DrugResolver,
    create_drug_resolver,
    resolve_drug_candidates,
)
from pharmaguard.services.pharmacogenomics.formulary import FORMULARY
from pharmaguard.services.pharmacogenomics.models import CanonicalDrug, MatchKind


ALL_ALIASES = [
    (entry.canonical_id, alias)
    for entry in FORMULARY.values()
    for alias in entry.aliases
    # Aliases spelled like the canonical id resolve as Exact instead
    if alias != entry.canonical_id.value.lower()
]


class TestDrugResolver:
    """Test DrugResolver ranking logic."""

    @pytest.fixture
    def resolver(self):
        """Create a DrugResolver instance."""
        return create_drug_resolver()

    # ===== Literal scenarios =====

    def test_codeine_exact(self, resolver):
        candidates = resolver.resolve("codeine")

        assert len(candidates) == 1
        assert candidates[0].drug_id == CanonicalDrug.CODEINE
        assert candidates[0].match_kind == MatchKind.EXACT
        assert candidates[0].edit_distance == 0

    def test_zocor_brand_name(self, resolver):
        top = resolver.resolve("zocor")[0]

        assert top.drug_id == CanonicalDrug.SIMVASTATIN
        assert top.match_kind == MatchKind.ALIAS_EXACT
        assert top.edit_distance == 0
        assert top.matched_alias == "zocor"

    def test_plavix_brand_name(self, resolver):
        top = resolver.resolve("plavix")[0]

        assert top.drug_id == CanonicalDrug.CLOPIDOGREL
        assert top.match_kind == MatchKind.ALIAS_EXACT
        assert top.edit_distance == 0

    def test_unrelated_short_query(self, resolver):
        assert resolver.resolve("xqz") == []

    # ===== Normalization =====

    def test_query_is_trimmed_and_lowercased(self, resolver):
        top = resolver.resolve("  CoDeInE \t")[0]

        assert top.drug_id == CanonicalDrug.CODEINE
        assert top.match_kind == MatchKind.EXACT

    @pytest.mark.parametrize("query", ["", " ", "a", "  x  ", "\n"])
    def test_short_queries_return_nothing(self, resolver, query):
        assert resolver.resolve(query) == []

    def test_no_match_is_empty_not_error(self, resolver):
        assert resolver.resolve("zzzzzzzzzz") == []

    # ===== Properties over the formulary =====

    @pytest.mark.parametrize("drug", list(CanonicalDrug))
    @pytest.mark.parametrize("casing", [str.lower, str.upper, str.title])
    def test_canonical_id_any_casing_is_top_exact(self, resolver, drug, casing):
        top = resolver.resolve(casing(drug.value))[0]

        assert top.drug_id == drug
        assert top.match_kind == MatchKind.EXACT
        assert top.edit_distance == 0

    @pytest.mark.parametrize("drug,alias", ALL_ALIASES)
    def test_every_alias_resolves_alias_exact(self, resolver, drug, alias):
        candidates = resolver.resolve(alias)

        assert any(
            c.drug_id == drug
            and c.match_kind == MatchKind.ALIAS_EXACT
            and c.edit_distance == 0
            and c.matched_alias == alias
            for c in candidates
        )

    @pytest.mark.parametrize("query", [
        "co", "cod", "war", "clop", "simva", "fluoro", "azath", "imuran",
        "5fu", "tylenol", "warfarin sodium", "codeine", "xqz", "ab",
    ])
    def test_at_most_three_sorted_by_distance(self, resolver, query):
        candidates = resolver.resolve(query)
        distances = [c.edit_distance for c in candidates]

        assert len(candidates) <= 3
        assert distances == sorted(distances)

    # ===== Ranking =====

    def test_ties_keep_formulary_order_and_truncate(self, resolver):
        """'co' is a substring of an alias of four drugs; the first three in formulary order win"""
        candidates = resolver.resolve("co")

        assert [c.drug_id for c in candidates] == [
            CanonicalDrug.CODEINE,
            CanonicalDrug.WARFARIN,
            CanonicalDrug.CLOPIDOGREL,
        ]
        assert all(c.edit_distance == 1 for c in candidates)
        assert all(c.match_kind == MatchKind.FUZZY for c in candidates)

    def test_misspelled_generic(self, resolver):
        top = resolver.resolve("simvastatn")[0]

        assert top.drug_id == CanonicalDrug.SIMVASTATIN
        assert top.match_kind == MatchKind.FUZZY
        assert top.edit_distance == 1
        assert top.matched_alias == "SIMVASTATIN"

    def test_compact_abbreviation_resolves_through_hyphenated_alias(self, resolver):
        top = resolver.resolve("5fu")[0]

        assert top.drug_id == CanonicalDrug.FLUOROURACIL
        assert top.edit_distance == 1
        assert top.matched_alias == "5-fu"

    # ===== Helpers =====

    def test_best_match(self, resolver):
        assert resolver.best_match("coumadin").drug_id == CanonicalDrug.WARFARIN
        assert resolver.best_match("xqz") is None

    def test_has_exact_match(self, resolver):
        assert DrugResolver.has_exact_match(resolver.resolve("plavix"))
        assert not DrugResolver.has_exact_match(resolver.resolve("plavx"))
        assert not DrugResolver.has_exact_match([])

    def test_module_level_function(self):
        candidates = resolve_drug_candidates("Coumadin")

        assert candidates[0].drug_id == CanonicalDrug.WARFARIN
        assert candidates[0].match_kind == MatchKind.ALIAS_EXACT
