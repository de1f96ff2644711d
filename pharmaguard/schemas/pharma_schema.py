from pydantic import BaseModel, ConfigDict, field_validator
from typing import List
from datetime import datetime

from pharmaguard.services.pharmacogenomics.models import (
    CanonicalDrug,
    Pharmacogene,
    Phenotype,
    RiskLabel,
    Severity,
    VariantRecord,
)


class RiskAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    risk_label: RiskLabel
    confidence_score: float
    severity: Severity

class PharmacogenomicProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary_gene: Pharmacogene
    diplotype: str
    phenotype: Phenotype
    detected_variants: List[VariantRecord] = []

class ClinicalRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: str
    dosing_guidance: str
    alternative_drugs: List[str] = []
    monitoring_requirements: str
    cpic_guideline_reference: str

class LLMExplanation(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str
    mechanism: str
    evidence_level: str
    citations: List[str] = []

class QualityMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    vcf_parsing_success: bool = True
    variants_detected: int = 0
    genes_analyzed: int = 0
    analysis_timestamp: str

class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    patient_id: str
    drug: CanonicalDrug
    timestamp: str
    risk_assessment: RiskAssessment
    pharmacogenomic_profile: PharmacogenomicProfile
    clinical_recommendation: ClinicalRecommendation
    llm_generated_explanation: LLMExplanation
    quality_metrics: QualityMetrics

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v):
        try:
            datetime.fromisoformat(v.replace('Z', '+00:00'))
            return v
        except ValueError:
            raise ValueError("Timestamp must be a valid ISO 8601 string")
