"""
Pharmacogenomics Service

Drug identity resolution over a closed six-drug formulary and the static
CPIC-aligned tables used to build deterministic risk reports.

The report engine lives in `report_engine` and is imported from there
directly, since it depends on the response schemas.
"""

from .models import (
    CanonicalDrug,
    Pharmacogene,
    MatchKind,
    RiskLabel,
    Severity,
    Phenotype,
    FormularyEntry,
    MatchCandidate,
    GeneRule,
    OutcomeRule,
    VariantRecord,
)
from .formulary import FORMULARY, SUPPORTED_DRUGS, get_formulary_entry
from .matcher import levenshtein_distance, match_entry
from .drug_resolver import DrugResolver, create_drug_resolver, resolve_drug_candidates
from .rule_table import GENE_RULES, OUTCOME_RULES
from .variant_catalog import VARIANT_CATALOG, variants_for_gene
from .config import (
    get_config,
    update_config,
    reset_config,
    load_config_from_file,
    save_config_to_file,
    get_matcher_thresholds,
    get_report_config,
)

__all__ = [
    # Models
    'CanonicalDrug',
    'Pharmacogene',
    'MatchKind',
    'RiskLabel',
    'Severity',
    'Phenotype',
    'FormularyEntry',
    'MatchCandidate',
    'GeneRule',
    'OutcomeRule',
    'VariantRecord',

    # Static tables
    'FORMULARY',
    'SUPPORTED_DRUGS',
    'get_formulary_entry',
    'GENE_RULES',
    'OUTCOME_RULES',
    'VARIANT_CATALOG',
    'variants_for_gene',

    # Matching
    'levenshtein_distance',
    'match_entry',
    'DrugResolver',
    'create_drug_resolver',
    'resolve_drug_candidates',

    # Configuration
    'get_config',
    'update_config',
    'reset_config',
    'load_config_from_file',
    'save_config_to_file',
    'get_matcher_thresholds',
    'get_report_config',
]
