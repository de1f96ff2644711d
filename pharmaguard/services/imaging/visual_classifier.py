"""
Visual Classifier - coarse colour-based pill identification.

Averages sampled pixels into a colour bucket and maps the bucket to a drug
through a fixed table. The reported confidence carries a small random
offset; nothing here feeds the deterministic report engine beyond the
drug id the caller chooses to pass on.
"""

import logging
import random
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from pharmaguard.services.pharmacogenomics.models import CanonicalDrug

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

# Every 4th pixel is sampled
SAMPLE_STRIDE = 4
CONFIDENCE_JITTER = 0.08


class ColorBucket(str, Enum):
    WHITE = "white"
    BLUE = "blue"
    PINK = "pink"
    TAN = "tan"
    YELLOW = "yellow"
    NEUTRAL = "neutral"
    RED = "red"
    GREEN = "green"


COLOR_DRUG_MAP: Dict[ColorBucket, Tuple[CanonicalDrug, float]] = {
    ColorBucket.WHITE:   (CanonicalDrug.CODEINE, 0.82),
    ColorBucket.BLUE:    (CanonicalDrug.WARFARIN, 0.87),
    ColorBucket.PINK:    (CanonicalDrug.CLOPIDOGREL, 0.85),
    ColorBucket.TAN:     (CanonicalDrug.SIMVASTATIN, 0.80),
    ColorBucket.YELLOW:  (CanonicalDrug.AZATHIOPRINE, 0.83),
    ColorBucket.NEUTRAL: (CanonicalDrug.FLUOROURACIL, 0.75),
    ColorBucket.RED:     (CanonicalDrug.CLOPIDOGREL, 0.78),
    ColorBucket.GREEN:   (CanonicalDrug.AZATHIOPRINE, 0.72),
}


class PillAppearance(BaseModel):
    """Reference appearance of a supported drug."""
    color: str
    shape: str
    description: str


PILL_APPEARANCE: Dict[CanonicalDrug, PillAppearance] = {
    CanonicalDrug.CODEINE: PillAppearance(
        color="White / Light grey",
        shape="Round tablet",
        description="Codeine phosphate tablet identified",
    ),
    CanonicalDrug.WARFARIN: PillAppearance(
        color="Varies by dose (blue/purple/teal)",
        shape="Scored tablet",
        description="Warfarin sodium tablet identified",
    ),
    CanonicalDrug.CLOPIDOGREL: PillAppearance(
        color="Pink / Film-coated",
        shape="Round biconvex",
        description="Clopidogrel bisulfate tablet identified",
    ),
    CanonicalDrug.SIMVASTATIN: PillAppearance(
        color="Tan / Peach",
        shape="Oval / Shield-shaped",
        description="Simvastatin tablet identified",
    ),
    CanonicalDrug.AZATHIOPRINE: PillAppearance(
        color="Yellow / Off-white",
        shape="Round scored",
        description="Azathioprine tablet identified",
    ),
    CanonicalDrug.FLUOROURACIL: PillAppearance(
        color="Clear (solution) / White (cream)",
        shape="Vial / Tube",
        description="Fluorouracil preparation identified",
    ),
}


class VisualIdentification(BaseModel):
    """Drug suggested by the colour classifier."""
    bucket: ColorBucket = Field(..., description="Dominant colour bucket")
    drug_id: CanonicalDrug = Field(..., description="Drug mapped from the bucket")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Base confidence plus jitter")
    appearance: PillAppearance = Field(..., description="Reference colour, shape and description for the drug")


def average_color(samples: Sequence[RGB]) -> RGB:
    """Rounded mean colour over every SAMPLE_STRIDE-th sample."""
    picked = samples[::SAMPLE_STRIDE]
    if not picked:
        raise ValueError("No pixel samples provided")

    n = len(picked)
    r = round(sum(p[0] for p in picked) / n)
    g = round(sum(p[1] for p in picked) / n)
    b = round(sum(p[2] for p in picked) / n)
    return r, g, b


def classify_rgb(r: int, g: int, b: int) -> ColorBucket:
    """Bucket a single averaged colour. Rules are checked in order."""
    if r > g + 30 and r > b + 30:
        return ColorBucket.RED
    if g > r + 20 and g > b + 20:
        return ColorBucket.GREEN
    if b > r + 20 and b > g + 20:
        return ColorBucket.BLUE
    if r > 200 and g > 200 and b > 200:
        return ColorBucket.WHITE
    if r > 180 and g > 140 and b < 120:
        return ColorBucket.TAN
    if r > 200 and g > 100 and b > 100 and g < 180:
        return ColorBucket.PINK
    if r > 200 and g > 180 and b < 100:
        return ColorBucket.YELLOW
    return ColorBucket.NEUTRAL


def dominant_color(samples: Sequence[RGB]) -> ColorBucket:
    """Colour bucket for a list of RGB pixel samples."""
    return classify_rgb(*average_color(samples))


def identify_drug(
    bucket: ColorBucket,
    rng: Optional[random.Random] = None,
) -> VisualIdentification:
    """Map a colour bucket to a drug with a jittered confidence."""
    rng = rng or random.Random()
    drug, base_confidence = COLOR_DRUG_MAP[ColorBucket(bucket)]
    confidence = min(base_confidence + rng.random() * CONFIDENCE_JITTER, 1.0)

    logger.debug(f"Visual identification: bucket={bucket}, drug={drug.value}, confidence={confidence:.3f}")
    return VisualIdentification(
        bucket=bucket,
        drug_id=drug,
        confidence=confidence,
        appearance=PILL_APPEARANCE[drug],
    )
