"""
Recommendation Generator Module

Builds the five personalised wellness recommendations from patient factors
and filters them by category.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Sequence, Tuple, Union

from clinic_wellness.core.wellness.factors import Factors
from clinic_wellness.utils import get_logger

logger = get_logger(__name__)

ALL_CATEGORIES = "all"


class Category(str, Enum):
    """Closed set of recommendation categories."""
    NUTRITION = "nutrition"
    EXERCISE = "exercise"
    PREVENTIVE = "preventive"
    MENTAL_HEALTH = "mental-health"
    LIFESTYLE = "lifestyle"


class Priority(str, Enum):
    """Recommendation priority."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Impact(str, Enum):
    """Expected impact of following a recommendation."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class RecommendationContext:
    """Inputs every recommendation rule reads."""
    factors: Factors
    has_recent_visits: bool

    @property
    def active_prescription_count(self) -> int:
        return self.factors.active_prescription_count


@dataclass(frozen=True)
class Recommendation:
    """A single personalised recommendation."""
    id: int
    category: Category
    priority: Priority
    title: str
    description: str
    reasoning: str
    actions: Tuple[str, ...]
    impact: Impact
    timeframe: str
    evidence: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "category": self.category.value,
            "priority": self.priority.value,
            "title": self.title,
            "description": self.description,
            "reasoning": self.reasoning,
            "actions": list(self.actions),
            "impact": self.impact.value,
            "timeframe": self.timeframe,
            "evidence": self.evidence,
        }


@dataclass(frozen=True)
class RecommendationTemplate:
    """
    Static content for one category plus the rules that personalise it.

    ``priority``, ``reasoning`` and ``actions`` are callables over the
    :class:`RecommendationContext`; everything else is fixed text.
    """
    id: int
    category: Category
    title: str
    description: str
    impact: Impact
    timeframe: str
    evidence: str
    priority: Callable[[RecommendationContext], Priority]
    reasoning: Callable[[RecommendationContext], str]
    actions: Callable[[RecommendationContext], Sequence[str]]

    def render(self, ctx: RecommendationContext) -> Recommendation:
        return Recommendation(
            id=self.id,
            category=self.category,
            priority=self.priority(ctx),
            title=self.title,
            description=self.description,
            reasoning=self.reasoning(ctx),
            # Conditional lines come through as "" and are dropped
            actions=tuple(action for action in self.actions(ctx) if action),
            impact=self.impact,
            timeframe=self.timeframe,
            evidence=self.evidence,
        )


def _demographic_phrase(factors: Factors) -> str:
    gender = factors.gender.strip().lower()
    if gender == "female":
        return "women"
    if gender == "male":
        return "men"
    return "adults"


def _preventive_actions(ctx: RecommendationContext) -> List[str]:
    age = ctx.factors.age
    return [
        "Annual comprehensive health check-up" if age > 40 else "Biennial health screening",
        "Annual gynecological examination" if ctx.factors.is_female and age > 21 else "",
        "Colonoscopy screening every 10 years" if age > 50 else "",
        "Blood pressure monitoring every 6 months",
    ]


RECOMMENDATION_CATALOG: Tuple[RecommendationTemplate, ...] = (
    RecommendationTemplate(
        id=1,
        category=Category.NUTRITION,
        title="Balanced Nutrition Plan",
        description="Personalized meal planning based on your age, activity level, and health conditions",
        impact=Impact.HIGH,
        timeframe="4-6 weeks",
        evidence="Strong clinical evidence supports nutritional interventions for health maintenance",
        priority=lambda ctx: Priority.HIGH,
        reasoning=lambda ctx: (
            f"At {ctx.factors.age} years old, maintaining proper nutrition is crucial for overall health"
        ),
        actions=lambda ctx: [
            "Consume 5-7 servings of fruits and vegetables daily",
            "Include lean proteins with each meal",
            "Limit processed foods and added sugars",
            "Stay hydrated with 8-10 glasses of water daily",
        ],
    ),
    RecommendationTemplate(
        id=2,
        category=Category.EXERCISE,
        title="Age-Appropriate Exercise Program",
        description="Customized physical activity recommendations tailored to your fitness level",
        impact=Impact.HIGH,
        timeframe="6-8 weeks",
        evidence="WHO guidelines recommend regular physical activity for all adults",
        priority=lambda ctx: Priority.HIGH if ctx.factors.age > 50 else Priority.MEDIUM,
        reasoning=lambda ctx: (
            f"Regular exercise is essential for {_demographic_phrase(ctx.factors)} in this age group"
        ),
        actions=lambda ctx: [
            "150 minutes of moderate aerobic activity weekly",
            "Strength training exercises 2-3 times per week",
            "Balance and flexibility exercises daily",
            "Start slowly and gradually increase intensity",
        ],
    ),
    RecommendationTemplate(
        id=3,
        category=Category.PREVENTIVE,
        title="Preventive Health Screenings",
        description="Schedule recommended health screenings based on your age and risk factors",
        impact=Impact.HIGH,
        timeframe="Ongoing",
        evidence="Preventive care guidelines from medical associations",
        priority=lambda ctx: Priority.MEDIUM,
        reasoning=lambda ctx: "Early detection of health issues improves treatment outcomes significantly",
        actions=_preventive_actions,
    ),
    RecommendationTemplate(
        id=4,
        category=Category.MENTAL_HEALTH,
        title="Stress Management & Mental Wellness",
        description="Strategies to maintain good mental health and manage stress effectively",
        impact=Impact.MEDIUM,
        timeframe="2-4 weeks",
        evidence="Research shows strong connection between mental and physical health",
        priority=lambda ctx: Priority.HIGH if ctx.has_recent_visits else Priority.LOW,
        reasoning=lambda ctx: (
            "Recent medical visits may indicate stress or health concerns"
            if ctx.has_recent_visits
            else "Mental wellness is fundamental to overall health"
        ),
        actions=lambda ctx: [
            "Practice mindfulness or meditation 10-15 minutes daily",
            "Maintain regular sleep schedule (7-9 hours nightly)",
            "Engage in social activities and maintain relationships",
            "Consider professional counseling if feeling overwhelmed",
        ],
    ),
    RecommendationTemplate(
        id=5,
        category=Category.LIFESTYLE,
        title="Lifestyle Modifications for Better Health",
        description="Simple daily changes that can significantly improve your health outcomes",
        impact=Impact.MEDIUM,
        timeframe="8-12 weeks",
        evidence="Lifestyle interventions show proven benefits in chronic disease management",
        priority=lambda ctx: Priority.HIGH if ctx.active_prescription_count > 2 else Priority.MEDIUM,
        reasoning=lambda ctx: (
            "Multiple medications suggest need for lifestyle support"
            if ctx.active_prescription_count > 2
            else "Healthy lifestyle choices prevent chronic diseases"
        ),
        actions=lambda ctx: [
            "Quit smoking and limit alcohol consumption",
            "Maintain consistent sleep and wake times",
            "Reduce screen time before bedtime",
            "Practice good hygiene and safety measures",
        ],
    ),
)


class RecommendationGenerator:
    """
    Renders every template in the catalog, in catalog order.

    Whole recommendations are never omitted; only their priority, reasoning
    and action lists vary with the factors.
    """

    def __init__(self, catalog: Tuple[RecommendationTemplate, ...] = RECOMMENDATION_CATALOG):
        categories = [template.category for template in catalog]
        if categories != list(Category):
            raise ValueError(
                f"Recommendation catalog must list each category once, in order, got {[c.value for c in categories]}"
            )
        self._catalog = catalog

    def generate(self, factors: Factors, has_recent_visits: bool) -> List[Recommendation]:
        ctx = RecommendationContext(factors=factors, has_recent_visits=has_recent_visits)
        recommendations = [template.render(ctx) for template in self._catalog]
        logger.debug(
            f"Generated {len(recommendations)} recommendations, "
            f"{sum(1 for r in recommendations if r.priority == Priority.HIGH)} high priority"
        )
        return recommendations


def filter_by_category(
    recommendations: Sequence[Recommendation],
    category: Union[str, Category],
) -> List[Recommendation]:
    """
    Select recommendations by category.

    ``"all"`` returns the full list. Any value outside the category set
    returns an empty list rather than raising.
    """
    if category == ALL_CATEGORIES:
        return list(recommendations)
    return [r for r in recommendations if r.category == category]
