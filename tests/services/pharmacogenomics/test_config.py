"""
Unit tests for service configuration.
"""

import pytest
from pydantic import ValidationError

from pharmaguard.services.pharmacogenomics.config import (
    get_config,
    get_matcher_thresholds,
    load_config_from_file,
    save_config_to_file,
    update_config,
)
from pharmaguard.services.pharmacogenomics.drug_resolver import DrugResolver
from pharmaguard.services.pharmacogenomics.report_engine import ReportEngine
from pharmaguard.services.pharmacogenomics.models import CanonicalDrug


class TestConfig:

    def test_defaults(self):
        thresholds = get_matcher_thresholds()

        assert thresholds.min_query_length == 2
        assert thresholds.max_absolute_distance == 3
        assert thresholds.ratio_min_query_length == 4
        assert thresholds.canonical_distance_ratio == 0.4
        assert thresholds.alias_distance_ratio == 0.35
        assert thresholds.max_candidates == 3
        assert get_config().log_level == "INFO"

    def test_update_nested_key(self):
        update_config(**{"matcher.max_candidates": 1})

        assert get_matcher_thresholds().max_candidates == 1
        assert len(DrugResolver().resolve("co")) == 1

    def test_update_rejects_invalid_value(self):
        with pytest.raises(ValidationError):
            update_config(**{"matcher.canonical_distance_ratio": 2.0})

    def test_report_config_flows_into_engine(self):
        update_config(**{"report.evidence_level": "1B - Moderate"})
        report = ReportEngine().build_report("P1", CanonicalDrug.CODEINE)

        assert report.llm_generated_explanation.evidence_level == "1B - Moderate"

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "pharmaguard.json"
        update_config(log_level="DEBUG", **{"matcher.max_candidates": 2})
        save_config_to_file(str(path))

        update_config(log_level="WARNING")
        loaded = load_config_from_file(str(path))

        assert loaded.log_level == "DEBUG"
        assert loaded.matcher.max_candidates == 2
        assert get_config() is loaded
