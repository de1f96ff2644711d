from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field
from typing import Annotated, List, Tuple

from pharmaguard.services.imaging.visual_classifier import (
    VisualIdentification,
    dominant_color,
    identify_drug,
)

router = APIRouter()


Channel = Annotated[int, Field(ge=0, le=255)]


class PixelSamples(BaseModel):
    pixels: List[Tuple[Channel, Channel, Channel]] = Field(..., description="RGB samples, 0-255 per channel")


@router.post("/visual", response_model=VisualIdentification)
async def identify_from_pixels(req: PixelSamples):
    """Suggest a drug from the dominant colour of a pill photo."""
    if not req.pixels:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No pixel samples provided.")
    return identify_drug(dominant_color(req.pixels))
