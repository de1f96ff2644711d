"""
Internal data models for the pharmacogenomics service.
These models represent the static reference tables (formulary, rules,
variant catalog) and the per-query match candidates produced by the resolver.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CanonicalDrug(str, Enum):
    """The closed set of supported drugs, in formulary iteration order."""
    CODEINE = "CODEINE"
    WARFARIN = "WARFARIN"
    CLOPIDOGREL = "CLOPIDOGREL"
    SIMVASTATIN = "SIMVASTATIN"
    AZATHIOPRINE = "AZATHIOPRINE"
    FLUOROURACIL = "FLUOROURACIL"


class Pharmacogene(str, Enum):
    """Genes covered by the rule table."""
    CYP2D6 = "CYP2D6"
    CYP2C19 = "CYP2C19"
    CYP2C9 = "CYP2C9"
    SLCO1B1 = "SLCO1B1"
    TPMT = "TPMT"
    DPYD = "DPYD"


class MatchKind(str, Enum):
    """How a query matched a formulary entry."""
    EXACT = "Exact"  # Canonical id, case-insensitive
    ALIAS_EXACT = "AliasExact"  # Alias, verbatim
    FUZZY = "Fuzzy"  # Within edit-distance threshold


class RiskLabel(str, Enum):
    SAFE = "Safe"
    ADJUST_DOSAGE = "Adjust Dosage"
    TOXIC = "Toxic"
    INEFFECTIVE = "Ineffective"
    UNKNOWN = "Unknown"


class Severity(str, Enum):
    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class Phenotype(str, Enum):
    """Metabolizer status codes."""
    PM = "PM"
    IM = "IM"
    NM = "NM"
    RM = "RM"
    URM = "URM"
    UNKNOWN = "Unknown"


class FormularyEntry(BaseModel):
    """One supported drug with the names it may be typed as."""
    model_config = ConfigDict(frozen=True)

    canonical_id: CanonicalDrug = Field(..., description="Canonical drug identifier")
    aliases: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Lowercase misspellings, synonyms and brand names"
    )
    category: str = Field(..., description="Therapeutic category label")


class MatchCandidate(BaseModel):
    """A single resolver suggestion for a free-text query."""
    model_config = ConfigDict(frozen=True)

    drug_id: CanonicalDrug = Field(..., description="Resolved canonical drug")
    matched_alias: str = Field(..., description="Alias or canonical id that produced the best score")
    edit_distance: int = Field(..., ge=0, description="Levenshtein distance (0 for exact matches)")
    match_kind: MatchKind = Field(..., description="Exact, AliasExact or Fuzzy")
    category: Optional[str] = Field(None, description="Formulary category of the drug")


class GeneRule(BaseModel):
    """Primary pharmacogene for a drug and how it affects the drug."""
    model_config = ConfigDict(frozen=True)

    gene: Pharmacogene = Field(..., description="Gene symbol")
    mechanism: str = Field(..., description="Explanation of the gene-drug interaction")


class OutcomeRule(BaseModel):
    """Fixed clinical outcome reported for a drug."""
    model_config = ConfigDict(frozen=True)

    risk_label: RiskLabel = Field(..., description="Risk classification label")
    severity: Severity = Field(..., description="Severity of the interaction")
    confidence: float = Field(..., gt=0.0, le=1.0, description="Confidence score (0-1]")
    phenotype: Phenotype = Field(..., description="Metabolizer phenotype code")
    diplotype: str = Field(..., description="Diplotype (e.g., *1/*4)")
    action: str = Field(..., description="Recommended clinical action")
    dosing_guidance: str = Field(..., description="Dosing guidance text")
    alternative_drugs: Tuple[str, ...] = Field(default_factory=tuple, description="Ordered alternatives")
    monitoring_requirements: str = Field(..., description="Monitoring requirements")
    guideline_reference: str = Field(..., description="CPIC guideline citation")


class VariantRecord(BaseModel):
    """A representative variant reported for a gene."""
    model_config = ConfigDict(frozen=True)

    rsid: str = Field(..., description="dbSNP reference ID")
    gene: Pharmacogene = Field(..., description="Gene symbol")
    chromosome: str = Field(..., description="Chromosome identifier")
    position: int = Field(..., description="Position on chromosome")
    ref: str = Field(..., description="Reference allele")
    alt: str = Field(..., description="Alternate allele")
    genotype: str = Field(..., description="Genotype code (e.g., 0/1)")
    clinical_significance: str = Field(..., description="Star allele and functional effect")
