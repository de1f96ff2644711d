from fastapi import APIRouter
from pharmaguard.api.routes import analysis, drugs, identify

api_router = APIRouter()

api_router.include_router(drugs.router, prefix="/drugs", tags=["Drugs"])
api_router.include_router(identify.router, prefix="/identify", tags=["Identification"])
api_router.include_router(analysis.router, tags=["Analysis"])
