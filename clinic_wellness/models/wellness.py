"""
Wellness API Models
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional
from datetime import date, datetime


class PatientInput(BaseModel):
    """Patient demographics as stored by the clinic."""
    patient_id: str = Field(..., description="Clinic patient identifier")
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None


class VisitInput(BaseModel):
    """A recorded visit."""
    visit_date: datetime


class PrescriptionInput(BaseModel):
    """A prescription with its lifecycle status."""
    status: str = Field(..., description="'active', 'completed', 'discontinued', ...")


class PatientRecordsInput(BaseModel):
    """The records one patient is evaluated from."""
    patient: PatientInput
    visits: List[VisitInput] = Field(default_factory=list)
    prescriptions: List[PrescriptionInput] = Field(default_factory=list)


class EvaluationRequest(PatientRecordsInput):
    """Request for a wellness evaluation."""
    now: Optional[datetime] = Field(default=None, description="Reference time; server time when omitted")
    category: str = Field(default="all", description="'all' or one recommendation category")


class PlanRequest(EvaluationRequest):
    """Request for drafting a wellness plan."""
    created_by: str = Field(..., description="Id of the staff member creating the plan")


class CohortPatientInput(PatientRecordsInput):
    """
    One cohort member. The reference time comes from the cohort request,
    so per-patient reference times and categories are rejected.
    """
    model_config = ConfigDict(extra="forbid")


class CohortRequest(BaseModel):
    """Request for cohort statistics."""
    patients: List[CohortPatientInput] = Field(default_factory=list)
    now: Optional[datetime] = Field(default=None, description="Reference time applied to every patient")


class FactorsResponse(BaseModel):
    age: int
    gender: str
    recent_visit_count: int
    active_prescription_count: int


class RiskResponse(BaseModel):
    """Leveled risk for one condition."""
    condition: str
    level: str
    factors: List[str]
    prevention: str


class RecommendationResponse(BaseModel):
    """One personalised recommendation."""
    id: int
    category: str
    priority: str
    title: str
    description: str
    reasoning: str
    actions: List[str]
    impact: str
    timeframe: str
    evidence: str


class EvaluationResponse(BaseModel):
    """Response from a wellness evaluation."""
    patient_id: str
    evaluated_at: str
    score: int
    score_band: str
    factors: FactorsResponse
    risks: List[RiskResponse]
    recommendations: List[RecommendationResponse]
    high_priority_count: int


class PlanResponse(BaseModel):
    """Drafted wellness plan."""
    patient_id: str
    recommendation_ids: List[int]
    created_by: str
    status: str
    created_at: str


class CohortResponse(BaseModel):
    total_patients: int
    high_risk_patients: int
    average_wellness_score: Optional[int] = None


class CategoryResponse(BaseModel):
    value: str
    label: str


class HealthResponse(BaseModel):
    """Health status response."""
    status: str
    version: str
    timestamp: str
    components: Dict[str, str]
