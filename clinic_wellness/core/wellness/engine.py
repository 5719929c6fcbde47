"""
Wellness Engine

Runs factor derivation, scoring, risk assessment and recommendation
generation as one deterministic evaluation, and builds the plan and cohort
views on top of it.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Tuple

from clinic_wellness.core.wellness.factors import (
    DEFAULT_AGE,
    RECENT_VISIT_WINDOW_DAYS,
    DateLike,
    Factors,
    PatientFactorDeriver,
    PatientRecord,
    PrescriptionRecord,
    VisitRecord,
)
from clinic_wellness.core.wellness.recommendations import (
    Priority,
    Recommendation,
    RecommendationGenerator,
)
from clinic_wellness.core.wellness.risk_engine import (
    RiskAssessment,
    RiskAssessmentEngine,
    RiskLevel,
)
from clinic_wellness.core.wellness.scoring import ScoreBand, WellnessScoreCalculator
from clinic_wellness.utils import get_logger

logger = get_logger(__name__)

PLAN_STATUS_ACTIVE = "active"
HIGH_RISK_AGE = 65


@dataclass(frozen=True)
class WellnessEvaluation:
    """Complete wellness evaluation for one patient."""
    patient_id: str
    factors: Factors
    score: int
    risks: Tuple[RiskAssessment, ...]
    recommendations: Tuple[Recommendation, ...]

    @property
    def score_band(self) -> ScoreBand:
        return ScoreBand.from_score(self.score)

    @property
    def high_priority_count(self) -> int:
        return sum(1 for r in self.recommendations if r.priority == Priority.HIGH)

    @property
    def is_high_risk(self) -> bool:
        """Older than 65, or any condition assessed above low."""
        return self.factors.age > HIGH_RISK_AGE or any(
            risk.level != RiskLevel.LOW for risk in self.risks
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "patient_id": self.patient_id,
            "factors": self.factors.to_dict(),
            "score": self.score,
            "score_band": self.score_band.value,
            "risks": [r.to_dict() for r in self.risks],
            "recommendations": [r.to_dict() for r in self.recommendations],
            "high_priority_count": self.high_priority_count,
        }


@dataclass(frozen=True)
class WellnessPlan:
    """Draft wellness plan made of the high-priority recommendations."""
    patient_id: str
    recommendation_ids: Tuple[int, ...]
    created_by: str
    created_at: datetime
    status: str = PLAN_STATUS_ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "patient_id": self.patient_id,
            "recommendation_ids": list(self.recommendation_ids),
            "created_by": self.created_by,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class CohortStats:
    """Aggregate wellness figures across many patients."""
    total_patients: int
    high_risk_patients: int
    average_wellness_score: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_patients": self.total_patients,
            "high_risk_patients": self.high_risk_patients,
            "average_wellness_score": self.average_wellness_score,
        }


class WellnessEngine:
    """
    Facade over the wellness components.

    Holds only immutable configuration, so one instance can serve
    concurrent evaluations.
    """

    def __init__(
        self,
        default_age: int = DEFAULT_AGE,
        recent_visit_window_days: int = RECENT_VISIT_WINDOW_DAYS,
        score_calculator: Optional[WellnessScoreCalculator] = None,
        risk_engine: Optional[RiskAssessmentEngine] = None,
        recommendation_generator: Optional[RecommendationGenerator] = None,
    ):
        self.factor_deriver = PatientFactorDeriver(
            default_age=default_age,
            recent_visit_window_days=recent_visit_window_days,
        )
        self.score_calculator = score_calculator or WellnessScoreCalculator()
        self.risk_engine = risk_engine or RiskAssessmentEngine()
        self.recommendation_generator = recommendation_generator or RecommendationGenerator()
        logger.info(
            f"WellnessEngine initialized (default_age={default_age}, "
            f"recent_visit_window_days={recent_visit_window_days})"
        )

    def evaluate(
        self,
        patient: PatientRecord,
        visits: Iterable[VisitRecord],
        prescriptions: Iterable[PrescriptionRecord],
        now: DateLike,
    ) -> WellnessEvaluation:
        """
        Evaluate one patient as of ``now``.

        Args:
            patient: Demographic record.
            visits: Full visit history; only dates are read.
            prescriptions: Prescriptions; only statuses are read.
            now: Reference time for age and the recent-visit window.

        Returns:
            WellnessEvaluation with score, three risks and five recommendations.
        """
        visits = list(visits)
        prescriptions = list(prescriptions)

        factors = self.factor_deriver.derive(patient, visits, prescriptions, now)
        score = self.score_calculator.calculate(factors)
        risks = self.risk_engine.assess(factors)
        recommendations = self.recommendation_generator.generate(
            factors, has_recent_visits=len(visits) > 0
        )

        return WellnessEvaluation(
            patient_id=patient.patient_id,
            factors=factors,
            score=score,
            risks=tuple(risks),
            recommendations=tuple(recommendations),
        )


def build_plan(
    evaluation: WellnessEvaluation,
    created_by: str,
    created_at: datetime,
) -> WellnessPlan:
    """Draft a plan from the evaluation's high-priority recommendations."""
    ids = tuple(r.id for r in evaluation.recommendations if r.priority == Priority.HIGH)
    return WellnessPlan(
        patient_id=evaluation.patient_id,
        recommendation_ids=ids,
        created_by=created_by,
        created_at=created_at,
    )


def summarize_cohort(evaluations: Iterable[WellnessEvaluation]) -> CohortStats:
    """Count patients and high-risk patients and floor the mean score."""
    evaluations = list(evaluations)
    if not evaluations:
        return CohortStats(total_patients=0, high_risk_patients=0, average_wellness_score=None)

    total_score = sum(e.score for e in evaluations)
    return CohortStats(
        total_patients=len(evaluations),
        high_risk_patients=sum(1 for e in evaluations if e.is_high_risk),
        average_wellness_score=total_score // len(evaluations),
    )
