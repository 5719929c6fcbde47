"""
Wellness Service - Centralized Wellness Evaluation Logic
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from clinic_wellness.config import settings
from clinic_wellness.core.wellness import (
    ALL_CATEGORIES,
    Category,
    PatientRecord,
    PrescriptionRecord,
    VisitRecord,
    WellnessEngine,
    WellnessEvaluation,
    build_plan,
    filter_by_category,
    summarize_cohort,
)
from clinic_wellness.models.wellness import (
    CohortRequest,
    EvaluationRequest,
    PatientRecordsInput,
    PlanRequest,
)
from clinic_wellness.utils import get_logger

logger = get_logger(__name__)

CATEGORY_LABELS = {
    ALL_CATEGORIES: "All Recommendations",
    Category.NUTRITION.value: "Nutrition",
    Category.EXERCISE.value: "Exercise",
    Category.PREVENTIVE.value: "Preventive Care",
    Category.MENTAL_HEALTH.value: "Mental Health",
    Category.LIFESTYLE.value: "Lifestyle",
}


class WellnessService:
    """
    Service class to handle the wellness business logic.
    Decouples the engine from FastAPI endpoints and request models.
    """

    def __init__(self, engine: Optional[WellnessEngine] = None):
        self.engine = engine or WellnessEngine(
            default_age=settings.default_patient_age,
            recent_visit_window_days=settings.recent_visit_window_days,
        )

    @staticmethod
    def list_categories() -> List[Dict[str, str]]:
        """Filter vocabulary, 'all' first."""
        return [{"value": value, "label": label} for value, label in CATEGORY_LABELS.items()]

    def _run(self, records: PatientRecordsInput, now: datetime) -> WellnessEvaluation:
        """Map request models to engine records and evaluate."""
        patient = PatientRecord(
            patient_id=records.patient.patient_id,
            date_of_birth=records.patient.date_of_birth,
            gender=records.patient.gender,
        )
        visits = [VisitRecord(visit_date=v.visit_date) for v in records.visits]
        prescriptions = [PrescriptionRecord(status=p.status) for p in records.prescriptions]
        return self.engine.evaluate(patient, visits, prescriptions, now)

    def evaluate(self, request: EvaluationRequest) -> Dict[str, Any]:
        """
        Evaluate one patient and apply the category filter.

        Args:
            request: Patient records plus optional reference time and category.

        Returns:
            A dictionary matching EvaluationResponse.
        """
        reference = request.now or datetime.now()
        try:
            evaluation = self._run(request, reference)
        except Exception as e:
            logger.error(f"Wellness evaluation failed for {request.patient.patient_id}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Wellness evaluation failed: {str(e)}")

        result = evaluation.to_dict()
        result["recommendations"] = [
            r.to_dict() for r in filter_by_category(evaluation.recommendations, request.category)
        ]
        result["evaluated_at"] = reference.isoformat()

        logger.info(
            f"Evaluated patient {evaluation.patient_id}: score={evaluation.score} "
            f"({evaluation.score_band.value}), category={request.category}, "
            f"{len(result['recommendations'])} recommendations returned"
        )
        return result

    def draft_plan(self, request: PlanRequest) -> Dict[str, Any]:
        """Draft (but do not store) a plan from the high-priority recommendations."""
        reference = request.now or datetime.now()
        try:
            evaluation = self._run(request, reference)
        except Exception as e:
            logger.error(f"Plan drafting failed for {request.patient.patient_id}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Plan drafting failed: {str(e)}")

        plan = build_plan(evaluation, created_by=request.created_by, created_at=reference)
        logger.info(f"Drafted plan for {plan.patient_id} with recommendations {list(plan.recommendation_ids)}")
        return plan.to_dict()

    def cohort(self, request: CohortRequest) -> Dict[str, Any]:
        """Aggregate evaluations for a list of patients."""
        reference = request.now or datetime.now()
        try:
            evaluations = [self._run(item, reference) for item in request.patients]
        except Exception as e:
            logger.error(f"Cohort summary failed: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Cohort summary failed: {str(e)}")

        stats = summarize_cohort(evaluations)
        logger.info(
            f"Cohort of {stats.total_patients}: {stats.high_risk_patients} high risk, "
            f"average score {stats.average_wellness_score}"
        )
        return stats.to_dict()
