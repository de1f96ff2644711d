from fastapi import APIRouter, Query
from pydantic import BaseModel
from typing import List

from pharmaguard.services.pharmacogenomics.drug_resolver import create_drug_resolver
from pharmaguard.services.pharmacogenomics.formulary import FORMULARY
from pharmaguard.services.pharmacogenomics.models import CanonicalDrug, MatchCandidate, Pharmacogene
from pharmaguard.services.pharmacogenomics.rule_table import GENE_RULES

router = APIRouter()


class FormularyListing(BaseModel):
    drug_id: CanonicalDrug
    category: str
    gene: Pharmacogene
    aliases: List[str]


@router.get("", response_model=List[FormularyListing])
async def list_supported_drugs():
    """List the supported drugs with their category, primary gene and known aliases."""
    return [
        FormularyListing(
            drug_id=drug,
            category=entry.category,
            gene=GENE_RULES[drug].gene,
            aliases=list(entry.aliases),
        )
        for drug, entry in FORMULARY.items()
    ]


@router.get("/resolve", response_model=List[MatchCandidate])
async def resolve_drug(
    q: str = Query(..., description="Free-text drug name (e.g., plavix, coumadin, zocor)")
):
    """
    Suggest up to three supported drugs for a free-text name.

    An empty list means the name was not recognized.
    """
    return create_drug_resolver().resolve(q)
