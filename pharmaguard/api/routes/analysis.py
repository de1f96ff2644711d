from fastapi import APIRouter, UploadFile, File, Form, HTTPException, Query, status
from typing import List, Optional
import logging

from pharmaguard.schemas.pharma_schema import AnalysisResult
from pharmaguard.services.pharmacogenomics.report_engine import UnsupportedDrugError, create_report_engine
from pharmaguard.services.pipeline.analysis_pipeline import run_analysis

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/report",
    response_model=AnalysisResult,
    summary="Pharmacogenomic Report for One Drug",
)
async def get_report(
    drug: str = Query(..., description="Canonical drug id (e.g., CLOPIDOGREL)"),
    patient_id: str = Query("anonymous", description="Patient identifier"),
) -> AnalysisResult:
    """Build the report for a single canonical drug id."""
    try:
        return create_report_engine().build_report(patient_id, drug)
    except UnsupportedDrugError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/analyze",
    response_model=List[AnalysisResult],
    status_code=status.HTTP_200_OK,
    summary="Analyze Pharmacogenomic Risk",
    description="Upload a VCF file and list drugs to receive one pharmacogenomic risk report per drug."
)
async def analyze_pharmacogenomics(
    drugs: str = Form(..., description="Comma-separated drug names (e.g., plavix, warfarin)"),
    vcf: UploadFile = File(..., description="Patient's VCF file"),
    patient_id: Optional[str] = Form(None, description="Optional patient identifier"),
) -> List[AnalysisResult]:
    """
    Endpoint to trigger the analysis pipeline.

    - **drugs**: Drug names, brand names or misspellings, comma-separated
    - **vcf**: Genetic data file
    - **patient_id**: Optional identifier; a session id is generated when omitted
    """
    if not vcf.filename.endswith(('.vcf', '.vcf.gz')):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid file format. Please upload a .vcf or .vcf.gz file."
        )

    drug_list = [d.strip() for d in drugs.split(",") if d.strip()]
    if not drug_list:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No drugs provided.")

    content = await vcf.read()

    try:
        return run_analysis(content, drug_list, patient_id=patient_id)
    except ValueError as ve:
        logger.error(f"Validation error in pipeline: {str(ve)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(ve)
        )
