"""
Variant Catalog - representative variants reported for each pharmacogene.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from .models import Pharmacogene, VariantRecord


VARIANT_CATALOG: Mapping[Pharmacogene, Tuple[VariantRecord, ...]] = MappingProxyType({
    # ── CYP2D6 ──────────────────────────────────────────────────────────────
    Pharmacogene.CYP2D6: (
        VariantRecord(rsid="rs3892097", gene=Pharmacogene.CYP2D6, chromosome="22", position=42524947,
                      ref="G", alt="A", genotype="0/1",
                      clinical_significance="CYP2D6*4 - Non-functional allele"),
        VariantRecord(rsid="rs5030655", gene=Pharmacogene.CYP2D6, chromosome="22", position=42525085,
                      ref="T", alt="TA", genotype="0/0",
                      clinical_significance="CYP2D6*6 - Frameshift variant"),
    ),

    # ── CYP2C19 ─────────────────────────────────────────────────────────────
    Pharmacogene.CYP2C19: (
        VariantRecord(rsid="rs4244285", gene=Pharmacogene.CYP2C19, chromosome="10", position=96541616,
                      ref="G", alt="A", genotype="1/1",
                      clinical_significance="CYP2C19*2 - Splicing defect, loss of function"),
    ),

    # ── CYP2C9 ──────────────────────────────────────────────────────────────
    Pharmacogene.CYP2C9: (
        VariantRecord(rsid="rs1799853", gene=Pharmacogene.CYP2C9, chromosome="10", position=96702047,
                      ref="C", alt="T", genotype="0/1",
                      clinical_significance="CYP2C9*2 - Reduced function"),
        VariantRecord(rsid="rs1057910", gene=Pharmacogene.CYP2C9, chromosome="10", position=96741053,
                      ref="A", alt="C", genotype="0/1",
                      clinical_significance="CYP2C9*3 - Reduced function"),
    ),

    # ── SLCO1B1 ─────────────────────────────────────────────────────────────
    Pharmacogene.SLCO1B1: (
        VariantRecord(rsid="rs4149056", gene=Pharmacogene.SLCO1B1, chromosome="12", position=21331549,
                      ref="T", alt="C", genotype="0/1",
                      clinical_significance="SLCO1B1*5 - Decreased transporter function"),
    ),

    # ── TPMT ────────────────────────────────────────────────────────────────
    Pharmacogene.TPMT: (
        VariantRecord(rsid="rs1800462", gene=Pharmacogene.TPMT, chromosome="6", position=18130918,
                      ref="C", alt="G", genotype="0/0",
                      clinical_significance="TPMT*2 - Non-functional"),
    ),

    # ── DPYD ────────────────────────────────────────────────────────────────
    Pharmacogene.DPYD: (
        VariantRecord(rsid="rs3918290", gene=Pharmacogene.DPYD, chromosome="1", position=97915614,
                      ref="C", alt="T", genotype="0/1",
                      clinical_significance="DPYD*2A - Splicing defect, no DPD activity"),
    ),
})


def variants_for_gene(gene: Pharmacogene) -> Tuple[VariantRecord, ...]:
    """Catalog variants for a gene; empty when none are recorded."""
    return VARIANT_CATALOG.get(gene, ())
