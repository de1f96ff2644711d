"""
Formulary - the six supported drugs and the names they can be typed as.

Aliases cover common misspellings, salts and brand names. Iteration order of
FORMULARY is the CanonicalDrug declaration order and is the tie-break order
used by the resolver.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from .models import CanonicalDrug, FormularyEntry


_ENTRIES: Tuple[FormularyEntry, ...] = (
    FormularyEntry(
        canonical_id=CanonicalDrug.CODEINE,
        aliases=(
            "codeine", "codien", "codine", "codein", "codeene", "coedine", "codiene",
            "tylenol 3", "tylenol3", "co-codamol", "cocodamol", "codeine phosphate",
            "methylmorphine", "codipar", "codiphen", "panadeine",
        ),
        category="Opioid analgesic",
    ),
    FormularyEntry(
        canonical_id=CanonicalDrug.WARFARIN,
        aliases=(
            "warfarin", "warfrin", "warfarine", "worfarin", "warfaran", "warferin",
            "coumadin", "jantoven", "marevan", "waran", "warfilone",
            "warfarin sodium", "warfarin potassium",
        ),
        category="Anticoagulant",
    ),
    FormularyEntry(
        canonical_id=CanonicalDrug.CLOPIDOGREL,
        aliases=(
            "clopidogrel", "clopidogrl", "clopidogral", "clopidogel", "clopidorel",
            "clopidogrell", "clpidogrel", "clopidogre", "clopidgrel",
            "plavix", "iscover", "clopivas", "clopilet", "deplatt",
            "clopidogrel bisulfate", "clopidogrel bisulphate",
        ),
        category="Antiplatelet",
    ),
    FormularyEntry(
        canonical_id=CanonicalDrug.SIMVASTATIN,
        aliases=(
            "simvastatin", "simvastain", "simvastin", "simvastaton", "simvastatine",
            "simvastein", "simvstation", "simvastattin", "simvastati",
            "zocor", "simvacor", "simvacard", "simvador", "simlup",
        ),
        category="Statin (cholesterol)",
    ),
    FormularyEntry(
        canonical_id=CanonicalDrug.AZATHIOPRINE,
        aliases=(
            "azathioprine", "azathioprin", "azathioprne", "azathioprime",
            "azathiprine", "azathiopirne", "azathioprrine", "azathioprinee",
            "imuran", "azasan", "imurel", "azapress", "thioprine",
        ),
        category="Immunosuppressant",
    ),
    FormularyEntry(
        canonical_id=CanonicalDrug.FLUOROURACIL,
        # "5fu" is left out: a three-letter alias sits within distance 3 of
        # every three-letter query. "5fu" still resolves through "5-fu".
        aliases=(
            "fluorouracil", "fluorourasil", "fluorouracl", "floruracil",
            "flourouracil", "fluourouracil", "fluouracil", "fluororacil",
            "5-fu", "adrucil", "efudex", "carac", "fluoroplex",
            "five-fu", "5-fluorouracil",
        ),
        category="Chemotherapy",
    ),
)

FORMULARY: Mapping[CanonicalDrug, FormularyEntry] = MappingProxyType(
    {entry.canonical_id: entry for entry in _ENTRIES}
)

SUPPORTED_DRUGS: Tuple[CanonicalDrug, ...] = tuple(FORMULARY.keys())


def get_formulary_entry(drug_id: CanonicalDrug) -> FormularyEntry:
    """Look up the formulary entry for a canonical drug id."""
    return FORMULARY[CanonicalDrug(drug_id)]
