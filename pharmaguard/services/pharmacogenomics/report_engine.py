"""
Report Engine - builds the structured pharmacogenomic report for a drug.

The report is assembled from the static rule table and variant catalog only:
the same drug always produces the same risk assessment, profile and
recommendation, whichever patient it is built for. Only the patient id and
timestamps differ between reports.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Mapping, Optional, Sequence, Tuple, Union

from pharmaguard.schemas.pharma_schema import (
    AnalysisResult,
    ClinicalRecommendation,
    LLMExplanation,
    PharmacogenomicProfile,
    QualityMetrics,
    RiskAssessment,
)
from .config import ReportConfig, get_report_config
from .models import CanonicalDrug, GeneRule, OutcomeRule, Pharmacogene, VariantRecord
from .rule_table import GENE_RULES, OUTCOME_RULES
from .variant_catalog import VARIANT_CATALOG

logger = logging.getLogger(__name__)

SUMMARY_TEMPLATE = (
    "Based on the patient's {gene} {diplotype} genotype ({phenotype} metabolizer), "
    "{drug} therapy carries a {risk_label} risk classification. {action}"
)

Timestamp = Union[datetime, str, None]


class UnsupportedDrugError(ValueError):
    """Raised when a report is requested for a drug outside the formulary."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReportEngine:
    """
    Composes rule table, variant catalog and a patient identifier into an
    AnalysisResult.

    All tables are held by read-only reference; the engine has no mutable
    state and may be shared between threads.
    """

    def __init__(
        self,
        gene_rules: Mapping[CanonicalDrug, GeneRule] = GENE_RULES,
        outcome_rules: Mapping[CanonicalDrug, OutcomeRule] = OUTCOME_RULES,
        variant_catalog: Mapping[Pharmacogene, Tuple[VariantRecord, ...]] = VARIANT_CATALOG,
        clock: Callable[[], datetime] = _utc_now,
        report_config: Optional[ReportConfig] = None,
    ):
        self.gene_rules = gene_rules
        self.outcome_rules = outcome_rules
        self.variant_catalog = variant_catalog
        self.clock = clock
        self.report_config = report_config or get_report_config()

    def _coerce_drug(self, drug_id: Union[CanonicalDrug, str]) -> CanonicalDrug:
        try:
            drug = CanonicalDrug(drug_id)
        except ValueError:
            logger.error(f"Report requested for unsupported drug {drug_id!r}")
            raise UnsupportedDrugError(
                f"'{drug_id}' is not a supported drug. "
                f"Supported drugs: {', '.join(d.value for d in CanonicalDrug)}"
            ) from None

        if drug not in self.gene_rules or drug not in self.outcome_rules:
            # Tables are total over CanonicalDrug; a gap is a wiring bug.
            raise UnsupportedDrugError(f"No rule table entry for '{drug.value}'")
        return drug

    def _format_timestamp(self, timestamp: Timestamp) -> str:
        if timestamp is None:
            timestamp = self.clock()
        if isinstance(timestamp, datetime):
            return timestamp.isoformat()
        return timestamp

    def _build_explanation(
        self,
        drug: CanonicalDrug,
        gene_rule: GeneRule,
        outcome: OutcomeRule,
    ) -> LLMExplanation:
        gene = gene_rule.gene.value
        summary = SUMMARY_TEMPLATE.format(
            gene=gene,
            diplotype=outcome.diplotype,
            phenotype=outcome.phenotype.value,
            drug=drug.value.lower(),
            risk_label=outcome.risk_label.value.lower(),
            action=outcome.action,
        )
        citations = [outcome.guideline_reference] + [
            citation.format(gene=gene, drug=drug.value)
            for citation in self.report_config.extra_citations
        ]
        return LLMExplanation(
            summary=summary,
            mechanism=gene_rule.mechanism,
            evidence_level=self.report_config.evidence_level,
            citations=citations,
        )

    def build_report(
        self,
        patient_id: str,
        drug_id: Union[CanonicalDrug, str],
        timestamp: Timestamp = None,
    ) -> AnalysisResult:
        """
        Build the complete report for one (patient, drug) pair.

        Args:
            patient_id: Opaque patient/session identifier
            drug_id: Canonical drug id
            timestamp: Report time; the engine clock is read when omitted

        Raises:
            UnsupportedDrugError: drug_id is not one of the supported drugs
        """
        drug = self._coerce_drug(drug_id)
        gene_rule = self.gene_rules[drug]
        outcome = self.outcome_rules[drug]
        variants = list(self.variant_catalog.get(gene_rule.gene, ()))
        stamp = self._format_timestamp(timestamp)

        logger.info(
            f"Building report: patient={patient_id}, drug={drug.value}, "
            f"gene={gene_rule.gene.value}, label={outcome.risk_label.value}"
        )

        return AnalysisResult(
            patient_id=patient_id,
            drug=drug,
            timestamp=stamp,
            risk_assessment=RiskAssessment(
                risk_label=outcome.risk_label,
                confidence_score=outcome.confidence,
                severity=outcome.severity,
            ),
            pharmacogenomic_profile=PharmacogenomicProfile(
                primary_gene=gene_rule.gene,
                diplotype=outcome.diplotype,
                phenotype=outcome.phenotype,
                detected_variants=variants,
            ),
            clinical_recommendation=ClinicalRecommendation(
                action=outcome.action,
                dosing_guidance=outcome.dosing_guidance,
                alternative_drugs=list(outcome.alternative_drugs),
                monitoring_requirements=outcome.monitoring_requirements,
                cpic_guideline_reference=outcome.guideline_reference,
            ),
            llm_generated_explanation=self._build_explanation(drug, gene_rule, outcome),
            quality_metrics=QualityMetrics(
                vcf_parsing_success=True,
                variants_detected=len(variants),
                genes_analyzed=len(Pharmacogene),
                analysis_timestamp=stamp,
            ),
        )

    def build_reports(
        self,
        patient_id: str,
        drug_ids: Sequence[Union[CanonicalDrug, str]],
        timestamp: Timestamp = None,
    ) -> List[AnalysisResult]:
        """Build one report per drug, in request order, sharing one timestamp."""
        stamp = self._format_timestamp(timestamp)
        return [self.build_report(patient_id, drug_id, stamp) for drug_id in drug_ids]


def create_report_engine() -> ReportEngine:
    """Factory function to create a ReportEngine over the built-in tables."""
    return ReportEngine()


def build_report(
    patient_id: str,
    drug_id: Union[CanonicalDrug, str],
    timestamp: Timestamp = None,
) -> AnalysisResult:
    """Build a report with the built-in rule table and variant catalog."""
    return create_report_engine().build_report(patient_id, drug_id, timestamp)
