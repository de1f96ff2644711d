"""
Configuration for pharmacogenomics service.
Centralizes tunable parameters for drug name matching and report assembly.
"""

import json
import os
from typing import List

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field


class MatcherThresholds(BaseModel):
    """Edit-distance thresholds for fuzzy drug name matching."""

    min_query_length: int = Field(
        default=2,
        ge=1,
        description="Queries shorter than this never match"
    )

    max_absolute_distance: int = Field(
        default=3,
        ge=0,
        description="Any distance at or below this is accepted"
    )

    ratio_min_query_length: int = Field(
        default=4,
        ge=0,
        description="Ratio thresholds only apply to queries longer than this"
    )

    # Canonical names are allowed a looser ratio than aliases
    canonical_distance_ratio: float = Field(
        default=0.4,
        ge=0.0,
        le=1.0,
        description="Distance allowed against the canonical id, as a fraction of query length"
    )

    alias_distance_ratio: float = Field(
        default=0.35,
        ge=0.0,
        le=1.0,
        description="Distance allowed against an alias, as a fraction of query length"
    )

    max_candidates: int = Field(
        default=3,
        ge=1,
        description="Maximum number of suggestions returned per query"
    )


class ReportConfig(BaseModel):
    """Configuration for the explanation block of generated reports."""

    evidence_level: str = Field(
        default="1A - Strong",
        description="Evidence level reported for every gene-drug pair"
    )

    extra_citations: List[str] = Field(
        default_factory=lambda: [
            "PharmGKB Clinical Annotation for {gene}/{drug}",
            "FDA Table of Pharmacogenomic Biomarkers in Drug Labeling",
        ],
        description="Citations appended after the CPIC reference ({gene} and {drug} are substituted)"
    )


class PharmaGuardConfig(BaseModel):
    """Main configuration for pharmacogenomics service."""

    matcher: MatcherThresholds = Field(
        default_factory=MatcherThresholds,
        description="Drug name matching thresholds"
    )

    report: ReportConfig = Field(
        default_factory=ReportConfig,
        description="Report assembly configuration"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level for the service"
    )


# Global configuration instance
_config: PharmaGuardConfig = PharmaGuardConfig()


def get_config() -> PharmaGuardConfig:
    """Get the global configuration instance."""
    return _config


def update_config(**kwargs) -> PharmaGuardConfig:
    """Update configuration parameters."""
    global _config
    current_dict = _config.model_dump()

    for key, value in kwargs.items():
        if '.' in key:
            # Handle nested keys like 'matcher.max_candidates'
            parts = key.split('.')
            current = current_dict
            for part in parts[:-1]:
                current = current[part]
            current[parts[-1]] = value
        else:
            current_dict[key] = value

    _config = PharmaGuardConfig(**current_dict)
    return _config


def reset_config() -> PharmaGuardConfig:
    """Restore the default configuration."""
    global _config
    _config = PharmaGuardConfig()
    return _config


def load_config_from_file(filepath: str) -> PharmaGuardConfig:
    """Load configuration from a JSON file."""
    global _config

    with open(filepath, 'r') as f:
        config_dict = json.load(f)

    _config = PharmaGuardConfig(**config_dict)
    return _config


def save_config_to_file(filepath: str):
    """Save current configuration to a JSON file."""
    with open(filepath, 'w') as f:
        json.dump(_config.model_dump(), f, indent=2)


# Convenience accessors
def get_matcher_thresholds() -> MatcherThresholds:
    """Get drug name matching thresholds."""
    return _config.matcher


def get_report_config() -> ReportConfig:
    """Get report assembly configuration."""
    return _config.report


load_dotenv(find_dotenv(usecwd=True))

_config_file = os.environ.get("PHARMAGUARD_CONFIG_FILE", "")
if _config_file:
    load_config_from_file(_config_file)
