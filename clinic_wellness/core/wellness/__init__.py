"""
Wellness Module

Scores patient wellness, assesses condition risks and generates
personalised recommendations from patient, visit and prescription records.
"""
from .factors import (
    Factors,
    PatientFactorDeriver,
    PatientRecord,
    PrescriptionRecord,
    VisitRecord,
)
from .scoring import ScoreBand, WellnessScoreCalculator
from .risk_engine import Condition, RiskAssessment, RiskAssessmentEngine, RiskLevel
from .recommendations import (
    ALL_CATEGORIES,
    Category,
    Impact,
    Priority,
    Recommendation,
    RecommendationGenerator,
    filter_by_category,
)
from .engine import (
    CohortStats,
    WellnessEngine,
    WellnessEvaluation,
    WellnessPlan,
    build_plan,
    summarize_cohort,
)

__all__ = [
    "Factors",
    "PatientFactorDeriver",
    "PatientRecord",
    "PrescriptionRecord",
    "VisitRecord",
    "ScoreBand",
    "WellnessScoreCalculator",
    "Condition",
    "RiskAssessment",
    "RiskAssessmentEngine",
    "RiskLevel",
    "ALL_CATEGORIES",
    "Category",
    "Impact",
    "Priority",
    "Recommendation",
    "RecommendationGenerator",
    "filter_by_category",
    "CohortStats",
    "WellnessEngine",
    "WellnessEvaluation",
    "WellnessPlan",
    "build_plan",
    "summarize_cohort",
]
