"""
Patient Factor Derivation

Reduces raw patient, visit and prescription records into the small set of
factors every wellness rule is evaluated against.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Any, Dict, Iterable, Optional, Union

from clinic_wellness.utils import get_logger

logger = get_logger(__name__)

DateLike = Union[date, datetime]

DEFAULT_AGE = 30
DEFAULT_GENDER = "unknown"
RECENT_VISIT_WINDOW_DAYS = 90
ACTIVE_STATUS = "active"


@dataclass(frozen=True)
class PatientRecord:
    """Demographic data for one patient."""
    patient_id: str
    date_of_birth: Optional[DateLike] = None
    gender: Optional[str] = None


@dataclass(frozen=True)
class VisitRecord:
    """A single clinic visit. Only the date matters here."""
    visit_date: DateLike


@dataclass(frozen=True)
class PrescriptionRecord:
    """A prescription. Only the status matters here."""
    status: str


@dataclass(frozen=True)
class Factors:
    """Scalar factors derived once per evaluation."""
    age: int
    gender: str
    recent_visit_count: int
    active_prescription_count: int

    @property
    def is_female(self) -> bool:
        return self.gender.strip().lower() == "female"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "age": self.age,
            "gender": self.gender,
            "recent_visit_count": self.recent_visit_count,
            "active_prescription_count": self.active_prescription_count,
        }


def _as_date(value: DateLike, tz: Optional[tzinfo] = None) -> date:
    """
    Reduce datetimes to calendar dates so naive and aware values compare.

    Aware datetimes are moved into ``tz`` first when one is given.
    """
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def whole_years_between(start: DateLike, end: DateLike) -> int:
    """Count completed years from start to end, never below zero."""
    start_day, end_day = _as_date(start), _as_date(end)
    years = end_day.year - start_day.year
    if (end_day.month, end_day.day) < (start_day.month, start_day.day):
        years -= 1
    return max(years, 0)


class PatientFactorDeriver:
    """
    Derives :class:`Factors` from raw records.

    The reference time is always passed in so derivation never depends on
    the wall clock.
    """

    def __init__(
        self,
        default_age: int = DEFAULT_AGE,
        recent_visit_window_days: int = RECENT_VISIT_WINDOW_DAYS,
    ):
        self.default_age = default_age
        self.recent_visit_window = timedelta(days=recent_visit_window_days)

    def derive(
        self,
        patient: PatientRecord,
        visits: Iterable[VisitRecord],
        prescriptions: Iterable[PrescriptionRecord],
        now: DateLike,
    ) -> Factors:
        """Compute factors for one patient as of ``now``."""
        if patient.date_of_birth is not None:
            age = whole_years_between(patient.date_of_birth, now)
        else:
            age = self.default_age

        # Blank strings count as missing
        gender = patient.gender if patient.gender and patient.gender.strip() else DEFAULT_GENDER

        today = _as_date(now)
        now_tz = now.tzinfo if isinstance(now, datetime) else None
        window_start = today - self.recent_visit_window
        recent_visit_count = sum(
            1 for visit in visits
            if window_start <= _as_date(visit.visit_date, now_tz) <= today
        )

        active_prescription_count = sum(
            1 for rx in prescriptions
            if (rx.status or "").strip().lower() == ACTIVE_STATUS
        )

        factors = Factors(
            age=age,
            gender=gender,
            recent_visit_count=recent_visit_count,
            active_prescription_count=active_prescription_count,
        )
        logger.debug(f"Derived factors for patient {patient.patient_id}: {factors}")
        return factors
