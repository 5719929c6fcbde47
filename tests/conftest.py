"""
Shared fixtures for wellness tests.
"""
import pytest
from datetime import date, datetime, timedelta
from typing import List

from clinic_wellness.core.wellness import (
    PatientRecord,
    PrescriptionRecord,
    VisitRecord,
    WellnessEngine,
)

NOW = datetime(2026, 6, 15, 12, 0, 0)


def birth_date_for_age(age: int) -> date:
    """Date of birth giving exactly ``age`` completed years at NOW."""
    return date(NOW.year - age, 1, 1)


def recent_visits(count: int) -> List[VisitRecord]:
    """Visits spread over the last few weeks before NOW."""
    return [VisitRecord(visit_date=NOW - timedelta(days=7 * (i + 1))) for i in range(count)]


def active_prescriptions(count: int) -> List[PrescriptionRecord]:
    return [PrescriptionRecord(status="active") for _ in range(count)]


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def engine() -> WellnessEngine:
    return WellnessEngine()


@pytest.fixture
def elderly_female() -> PatientRecord:
    """70-year-old female patient."""
    return PatientRecord(patient_id="P-ELD", date_of_birth=birth_date_for_age(70), gender="female")


@pytest.fixture
def young_male() -> PatientRecord:
    """25-year-old male patient."""
    return PatientRecord(patient_id="P-YNG", date_of_birth=birth_date_for_age(25), gender="male")
