"""
Risk Assessment Module

Evaluates a fixed catalog of condition-risk rules against patient factors.
Rule-based: each rule yields exactly one leveled entry per evaluation.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from clinic_wellness.core.wellness.factors import Factors
from clinic_wellness.utils import get_logger

logger = get_logger(__name__)


class RiskLevel(str, Enum):
    """Risk level categories."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class Condition(str, Enum):
    """Conditions covered by the risk catalog, in evaluation order."""
    CARDIOVASCULAR = "Cardiovascular Disease"
    DIABETES_TYPE_2 = "Diabetes Type 2"
    OSTEOPOROSIS = "Osteoporosis"


@dataclass(frozen=True)
class RiskAssessment:
    """Leveled risk for one condition."""
    condition: Condition
    level: RiskLevel
    factors: Tuple[str, ...]
    prevention: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "condition": self.condition.value,
            "level": self.level.value,
            "factors": list(self.factors),
            "prevention": self.prevention,
        }


@dataclass(frozen=True)
class RiskRule:
    """One catalog entry: a condition, its prevention text and its evaluator."""
    condition: Condition
    prevention: str
    evaluate: Callable[[Factors], Tuple[RiskLevel, Tuple[str, ...]]]


def _cardiovascular(factors: Factors) -> Tuple[RiskLevel, Tuple[str, ...]]:
    if factors.age > 45:
        return RiskLevel.MODERATE, ("Age factor", "Requires monitoring")
    return RiskLevel.LOW, ("Low risk age group",)


def _diabetes_type_2(factors: Factors) -> Tuple[RiskLevel, Tuple[str, ...]]:
    # Fixed rule: no indicator in the current factor set moves this level.
    return RiskLevel.LOW, ("No current indicators",)


def _osteoporosis(factors: Factors) -> Tuple[RiskLevel, Tuple[str, ...]]:
    if factors.is_female and factors.age > 50:
        return RiskLevel.MODERATE, ("Female gender", "Age factor")
    return RiskLevel.LOW, ("Low risk",)


RISK_CATALOG: Tuple[RiskRule, ...] = (
    RiskRule(
        condition=Condition.CARDIOVASCULAR,
        prevention="Regular exercise, heart-healthy diet, blood pressure monitoring",
        evaluate=_cardiovascular,
    ),
    RiskRule(
        condition=Condition.DIABETES_TYPE_2,
        prevention="Maintain healthy weight, regular physical activity, balanced diet",
        evaluate=_diabetes_type_2,
    ),
    RiskRule(
        condition=Condition.OSTEOPOROSIS,
        prevention="Weight-bearing exercises, adequate calcium and vitamin D intake",
        evaluate=_osteoporosis,
    ),
)


class RiskAssessmentEngine:
    """
    Core risk assessment engine.

    Walks the catalog in order, so the output always holds one entry per
    condition: cardiovascular, diabetes, osteoporosis.
    """

    def __init__(self, catalog: Tuple[RiskRule, ...] = RISK_CATALOG):
        conditions = [rule.condition for rule in catalog]
        if conditions != list(Condition):
            raise ValueError(
                f"Risk catalog must list each condition once, in order, got {[c.value for c in conditions]}"
            )
        self._catalog = catalog

    def assess(self, factors: Factors) -> List[RiskAssessment]:
        """Evaluate every risk rule against the factors."""
        risks = []
        for rule in self._catalog:
            level, risk_factors = rule.evaluate(factors)
            risks.append(RiskAssessment(
                condition=rule.condition,
                level=level,
                factors=risk_factors,
                prevention=rule.prevention,
            ))

        elevated = [r.condition.value for r in risks if r.level != RiskLevel.LOW]
        if elevated:
            logger.debug(f"Elevated risks: {elevated}")
        return risks
