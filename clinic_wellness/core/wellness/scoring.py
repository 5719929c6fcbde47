"""
Wellness Score Module

Combines patient factors into a single 0-100 wellness score.
"""
from enum import Enum

from clinic_wellness.core.wellness.factors import Factors

BASE_SCORE = 85
MIN_SCORE = 0
MAX_SCORE = 100


class ScoreBand(str, Enum):
    """Display band for a wellness score."""
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: int) -> "ScoreBand":
        """Convert numeric score (0-100) to a band."""
        if score >= 80:
            return cls.GOOD
        elif score >= 60:
            return cls.FAIR
        else:
            return cls.POOR


class WellnessScoreCalculator:
    """
    Deduction-based scoring from a base of 85.

    Deductions are cumulative; only one age deduction applies. Prescription
    load is measured with active prescriptions, the same count the lifestyle
    recommendation uses.
    """

    def calculate(self, factors: Factors) -> int:
        score = BASE_SCORE

        if factors.age > 65:
            score -= 10
        elif factors.age > 45:
            score -= 5

        if factors.recent_visit_count > 3:
            score -= 15

        if factors.active_prescription_count > 5:
            score -= 10

        return min(max(score, MIN_SCORE), MAX_SCORE)
