from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pharmaguard.api.router import api_router
from pharmaguard.core import logging  # Initialize logging

app = FastAPI(
    title="PharmaGuard API",
    description="Drug identity resolution and deterministic pharmacogenomic risk reports",
    version="2.0.0"
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API Routers
app.include_router(api_router, prefix="/api/v1")

@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "PharmaGuard"}
