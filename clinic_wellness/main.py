"""
Clinic Wellness Engine - FastAPI Application

Main application entry point with API endpoints for:
- Patient wellness evaluation (score, risks, recommendations)
- Wellness plan drafting
- Cohort wellness statistics
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import List
from datetime import datetime

from clinic_wellness.config import settings
from clinic_wellness.models.wellness import (
    CategoryResponse,
    CohortRequest,
    CohortResponse,
    EvaluationRequest,
    EvaluationResponse,
    HealthResponse,
    PlanRequest,
    PlanResponse,
)
from clinic_wellness.services.wellness import WellnessService
from clinic_wellness.utils import get_logger

logger = get_logger(__name__)


# ---- FastAPI Application ----

app = FastAPI(
    title="Clinic Wellness API",
    description="Wellness scoring, risk assessment and recommendations for clinic patients",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_wellness_service = WellnessService()


# ---- API Endpoints ----

@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now().isoformat(),
        components={
            "api": "healthy",
            "wellness_engine": "ready",
        }
    )


@app.get(f"{settings.api_prefix}/wellness/categories", response_model=List[CategoryResponse], tags=["Reference"])
async def list_categories():
    """List the recommendation category filter values."""
    return _wellness_service.list_categories()


@app.post(f"{settings.api_prefix}/wellness/evaluate", response_model=EvaluationResponse, tags=["Wellness"])
async def evaluate_wellness(request: EvaluationRequest):
    """
    Evaluate a patient's wellness from the supplied records.

    Returns the wellness score, three condition risks and the
    recommendations matching the requested category.
    """
    return _wellness_service.evaluate(request)


@app.post(f"{settings.api_prefix}/wellness/plans", response_model=PlanResponse, tags=["Wellness"])
async def draft_wellness_plan(request: PlanRequest):
    """Draft a wellness plan from the patient's high-priority recommendations."""
    return _wellness_service.draft_plan(request)


@app.post(f"{settings.api_prefix}/wellness/cohort", response_model=CohortResponse, tags=["Wellness"])
async def cohort_statistics(request: CohortRequest):
    """Aggregate wellness statistics over a list of patients."""
    return _wellness_service.cohort(request)


@app.on_event("startup")
async def startup_event():
    """Application startup."""
    logger.info(f"{settings.app_name} API starting up...")


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown."""
    logger.info(f"{settings.app_name} API shutting down...")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
