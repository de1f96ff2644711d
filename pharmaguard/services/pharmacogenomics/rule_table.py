"""
Rule Table - CPIC-aligned drug -> gene and drug -> clinical outcome tables.

Both tables are total over CanonicalDrug: every supported drug has exactly
one GeneRule and one OutcomeRule.
"""

from types import MappingProxyType
from typing import Mapping

from .models import (
    CanonicalDrug,
    GeneRule,
    OutcomeRule,
    Pharmacogene,
    Phenotype,
    RiskLabel,
    Severity,
)


# ---------------------------------------------------------------------------
# Drug -> primary pharmacogene
# ---------------------------------------------------------------------------

GENE_RULES: Mapping[CanonicalDrug, GeneRule] = MappingProxyType({
    CanonicalDrug.CODEINE: GeneRule(
        gene=Pharmacogene.CYP2D6,
        mechanism=(
            "CYP2D6 converts codeine to morphine. Poor metabolizers get no pain "
            "relief; ultrarapid metabolizers risk toxicity."
        ),
    ),
    CanonicalDrug.WARFARIN: GeneRule(
        gene=Pharmacogene.CYP2C9,
        mechanism=(
            "CYP2C9 metabolizes warfarin. Reduced function variants lead to slower "
            "clearance and increased bleeding risk."
        ),
    ),
    CanonicalDrug.CLOPIDOGREL: GeneRule(
        gene=Pharmacogene.CYP2C19,
        mechanism=(
            "CYP2C19 activates clopidogrel. Poor metabolizers cannot convert the "
            "prodrug, leading to treatment failure."
        ),
    ),
    CanonicalDrug.SIMVASTATIN: GeneRule(
        gene=Pharmacogene.SLCO1B1,
        mechanism=(
            "SLCO1B1 transports simvastatin into hepatocytes. Variants cause "
            "elevated plasma levels and myopathy risk."
        ),
    ),
    CanonicalDrug.AZATHIOPRINE: GeneRule(
        gene=Pharmacogene.TPMT,
        mechanism=(
            "TPMT inactivates thiopurine metabolites. Deficiency causes "
            "myelosuppression and potentially fatal toxicity."
        ),
    ),
    CanonicalDrug.FLUOROURACIL: GeneRule(
        gene=Pharmacogene.DPYD,
        mechanism=(
            "DPYD catabolizes fluoropyrimidines. Deficiency leads to severe, "
            "potentially fatal toxicity."
        ),
    ),
})


# ---------------------------------------------------------------------------
# Drug -> reported clinical outcome
# ---------------------------------------------------------------------------

OUTCOME_RULES: Mapping[CanonicalDrug, OutcomeRule] = MappingProxyType({
    CanonicalDrug.CODEINE: OutcomeRule(
        risk_label=RiskLabel.INEFFECTIVE,
        severity=Severity.HIGH,
        confidence=0.92,
        phenotype=Phenotype.IM,
        diplotype="*1/*4",
        action="Avoid codeine. Use non-tramadol analgesic.",
        dosing_guidance="Do not prescribe codeine. Consider morphine or non-opioid alternatives.",
        alternative_drugs=("Morphine", "Acetaminophen", "NSAIDs"),
        monitoring_requirements="Monitor for pain control with alternative analgesics.",
        guideline_reference="CPIC Guideline for CYP2D6 and Codeine Therapy (2019)",
    ),
    CanonicalDrug.WARFARIN: OutcomeRule(
        risk_label=RiskLabel.ADJUST_DOSAGE,
        severity=Severity.MODERATE,
        confidence=0.88,
        phenotype=Phenotype.IM,
        diplotype="*2/*3",
        action="Reduce warfarin dose based on CYP2C9 genotype.",
        dosing_guidance="Reduce initial dose by 25-50%. Target INR 2.0-3.0 with frequent monitoring.",
        alternative_drugs=("Apixaban", "Rivaroxaban", "Dabigatran"),
        monitoring_requirements="Frequent INR monitoring for first 2 weeks. Adjust dose per INR results.",
        guideline_reference="CPIC Guideline for Pharmacogenetics-Guided Warfarin Dosing (2017)",
    ),
    CanonicalDrug.CLOPIDOGREL: OutcomeRule(
        risk_label=RiskLabel.TOXIC,
        severity=Severity.CRITICAL,
        confidence=0.95,
        phenotype=Phenotype.PM,
        diplotype="*2/*2",
        action="Do NOT use clopidogrel. Switch to alternative antiplatelet.",
        dosing_guidance="Contraindicated. Use prasugrel or ticagrelor instead.",
        alternative_drugs=("Prasugrel", "Ticagrelor"),
        monitoring_requirements="Platelet function testing if alternative antiplatelet initiated.",
        guideline_reference="CPIC Guideline for CYP2C19 and Clopidogrel Therapy (2022)",
    ),
    CanonicalDrug.SIMVASTATIN: OutcomeRule(
        risk_label=RiskLabel.ADJUST_DOSAGE,
        severity=Severity.MODERATE,
        confidence=0.85,
        phenotype=Phenotype.IM,
        diplotype="*1/*5",
        action="Reduce simvastatin dose or use alternative statin.",
        dosing_guidance="Do not exceed 20 mg/day simvastatin. Consider rosuvastatin or pravastatin.",
        alternative_drugs=("Rosuvastatin", "Pravastatin", "Atorvastatin"),
        monitoring_requirements="Monitor for myalgia, elevated CK levels. Report any muscle pain.",
        guideline_reference="CPIC Guideline for SLCO1B1 and Statin Therapy (2022)",
    ),
    CanonicalDrug.AZATHIOPRINE: OutcomeRule(
        risk_label=RiskLabel.SAFE,
        severity=Severity.NONE,
        confidence=0.91,
        phenotype=Phenotype.NM,
        diplotype="*1/*1",
        action="Standard dosing appropriate.",
        dosing_guidance="Use standard dose per clinical indication. No pharmacogenomic adjustment needed.",
        alternative_drugs=("Mycophenolate mofetil", "Methotrexate"),
        monitoring_requirements="Standard monitoring: CBC weekly for first month, then monthly.",
        guideline_reference="CPIC Guideline for TPMT/NUDT15 and Thiopurine Therapy (2018)",
    ),
    CanonicalDrug.FLUOROURACIL: OutcomeRule(
        risk_label=RiskLabel.TOXIC,
        severity=Severity.CRITICAL,
        confidence=0.97,
        phenotype=Phenotype.IM,
        diplotype="*1/*2A",
        action="Reduce fluorouracil dose by 50%. Consider alternative regimen.",
        dosing_guidance="Start at 50% of standard dose. Titrate with therapeutic drug monitoring.",
        alternative_drugs=("Raltitrexed", "Modified regimen with leucovorin adjustment"),
        monitoring_requirements="Intensive monitoring for mucositis, myelosuppression, diarrhea for 4+ weeks.",
        guideline_reference="CPIC Guideline for DPYD and Fluoropyrimidine Therapy (2017)",
    ),
})
