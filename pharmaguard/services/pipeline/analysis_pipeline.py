"""
Analysis Pipeline: orchestrates VCF check → drug resolution → reports.

Receives raw VCF content and the requested drugs from the API route and
returns one AnalysisResult per drug.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from pharmaguard.schemas.pharma_schema import AnalysisResult
from pharmaguard.services.pharmacogenomics.drug_resolver import DrugResolver, create_drug_resolver
from pharmaguard.services.pharmacogenomics.models import CanonicalDrug
from pharmaguard.services.pharmacogenomics.report_engine import ReportEngine, create_report_engine
from pharmaguard.services.vcf.validator import VcfValidationError, validate_vcf_text

logger = logging.getLogger(__name__)


class UnrecognizedDrugsError(ValueError):
    """Raised when requested drug names do not resolve to the formulary."""

    def __init__(self, names: Sequence[str]):
        self.names = list(names)
        super().__init__(
            f"Not recognized as supported drugs: {', '.join(self.names)}. "
            f"{len(CanonicalDrug)} pharmacogenomic drugs are supported; "
            "check the spelling or try a brand name."
        )


@dataclass
class AnalysisPipeline:
    resolver: DrugResolver
    engine: ReportEngine

    def resolve_drugs(self, names: Sequence[Union[str, CanonicalDrug]]) -> List[CanonicalDrug]:
        """
        Turn requested names into canonical ids, keeping request order and
        dropping repeats.
        """
        resolved: List[CanonicalDrug] = []
        unrecognized: List[str] = []

        for name in names:
            if isinstance(name, CanonicalDrug):
                drug = name
            else:
                match = self.resolver.best_match(name)
                if match is None:
                    unrecognized.append(name)
                    continue
                drug = match.drug_id
                if match.matched_alias.lower() != name.strip().lower():
                    logger.info(f"Resolved {name!r} to {drug.value} via {match.matched_alias!r}")

            if drug not in resolved:
                resolved.append(drug)

        if unrecognized:
            raise UnrecognizedDrugsError(unrecognized)
        return resolved

    def run(
        self,
        vcf_content: Union[str, bytes],
        drugs: Sequence[Union[str, CanonicalDrug]],
        patient_id: Optional[str] = None,
    ) -> List[AnalysisResult]:
        """
        Validate the VCF, resolve the drug names and build the reports.

        Raises:
            VcfValidationError: the file does not look like a VCF
            UnrecognizedDrugsError: a drug name matched nothing
        """
        check = validate_vcf_text(vcf_content, patient_id=patient_id)
        if not check.valid:
            raise VcfValidationError("Invalid VCF: no header line, data line or fileformat marker found.")

        drug_ids = self.resolve_drugs(drugs)
        if not drug_ids:
            raise ValueError("No drugs provided.")

        logger.info(f"Running analysis for {check.patient_id}: {[d.value for d in drug_ids]}")
        return self.engine.build_reports(check.patient_id, drug_ids)


def create_analysis_pipeline() -> AnalysisPipeline:
    return AnalysisPipeline(resolver=create_drug_resolver(), engine=create_report_engine())


def run_analysis(
    vcf_content: Union[str, bytes],
    drugs: Sequence[Union[str, CanonicalDrug]],
    patient_id: Optional[str] = None,
) -> List[AnalysisResult]:
    """Run the analysis pipeline with the built-in formulary and tables."""
    return create_analysis_pipeline().run(vcf_content, drugs, patient_id)
