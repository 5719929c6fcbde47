"""
Unit Tests for Patient Factor Derivation
"""
import pytest
from datetime import date, datetime, timedelta, timezone

from clinic_wellness.core.wellness import (
    Factors,
    PatientFactorDeriver,
    PatientRecord,
    PrescriptionRecord,
    VisitRecord,
)
from clinic_wellness.core.wellness.factors import whole_years_between

from conftest import NOW, birth_date_for_age


class TestWholeYearsBetween:
    """Tests for age arithmetic."""

    def test_birthday_already_passed(self):
        assert whole_years_between(date(1980, 3, 1), date(2026, 6, 15)) == 46

    def test_birthday_not_yet_reached(self):
        """One year less until the birthday comes round."""
        assert whole_years_between(date(1980, 12, 31), date(2026, 6, 15)) == 45

    def test_on_birthday(self):
        assert whole_years_between(date(1980, 6, 15), datetime(2026, 6, 15, 0, 0)) == 46

    def test_future_birth_date_clamps_to_zero(self):
        assert whole_years_between(date(2030, 1, 1), date(2026, 6, 15)) == 0


class TestPatientFactorDeriver:
    """Tests for PatientFactorDeriver."""

    def test_full_record(self):
        deriver = PatientFactorDeriver()
        patient = PatientRecord("P1", date_of_birth=birth_date_for_age(52), gender="female")
        visits = [VisitRecord(NOW - timedelta(days=10)), VisitRecord(NOW - timedelta(days=200))]
        prescriptions = [
            PrescriptionRecord("active"),
            PrescriptionRecord("completed"),
            PrescriptionRecord("active"),
        ]

        factors = deriver.derive(patient, visits, prescriptions, NOW)

        assert factors == Factors(
            age=52, gender="female", recent_visit_count=1, active_prescription_count=2
        )

    def test_missing_demographics_use_defaults(self):
        """No date of birth means age 30; no gender means 'unknown'."""
        factors = PatientFactorDeriver().derive(PatientRecord("P2"), [], [], NOW)

        assert factors.age == 30
        assert factors.gender == "unknown"
        assert factors.recent_visit_count == 0
        assert factors.active_prescription_count == 0

    def test_blank_gender_is_unknown(self):
        factors = PatientFactorDeriver().derive(PatientRecord("P3", gender="  "), [], [], NOW)
        assert factors.gender == "unknown"

    def test_gender_kept_verbatim(self):
        factors = PatientFactorDeriver().derive(PatientRecord("P4", gender="Non-binary"), [], [], NOW)
        assert factors.gender == "Non-binary"
        assert not factors.is_female

    def test_female_check_ignores_case(self):
        factors = PatientFactorDeriver().derive(PatientRecord("P5", gender="Female"), [], [], NOW)
        assert factors.is_female

    @pytest.mark.parametrize("days_ago, counted", [
        (0, True),
        (45, True),
        (90, True),
        (91, False),
        (365, False),
        (-1, False),  # scheduled in the future
    ])
    def test_recent_visit_window(self, days_ago, counted):
        """Only visits in the trailing 90 days up to now are recent."""
        visits = [VisitRecord(NOW - timedelta(days=days_ago))]
        factors = PatientFactorDeriver().derive(PatientRecord("P6"), visits, [], NOW)
        assert factors.recent_visit_count == (1 if counted else 0)

    def test_visit_in_other_offset_is_read_in_reference_timezone(self):
        """A visit 89 days 21 hours old stays recent whatever offset it carries."""
        now = datetime(2026, 6, 15, 1, 0, tzinfo=timezone.utc)
        eastern = timezone(timedelta(hours=-5))
        visit_at = (now - timedelta(days=89, hours=21)).astimezone(eastern)
        assert visit_at.date() == date(2026, 3, 16)

        factors = PatientFactorDeriver().derive(PatientRecord("P6b"), [VisitRecord(visit_at)], [], now)
        assert factors.recent_visit_count == 1

    def test_naive_visit_with_aware_reference(self):
        now = datetime(2026, 6, 15, 1, 0, tzinfo=timezone.utc)
        visits = [VisitRecord(datetime(2026, 6, 1, 9, 0)), VisitRecord(datetime(2026, 3, 1, 9, 0))]
        factors = PatientFactorDeriver().derive(PatientRecord("P6c"), visits, [], now)
        assert factors.recent_visit_count == 1

    def test_visit_dates_may_be_plain_dates(self):
        visits = [VisitRecord(date(2026, 6, 1)), VisitRecord(date(2025, 1, 1))]
        factors = PatientFactorDeriver().derive(PatientRecord("P7"), visits, [], NOW)
        assert factors.recent_visit_count == 1

    def test_configurable_window_and_default_age(self):
        deriver = PatientFactorDeriver(default_age=40, recent_visit_window_days=30)
        visits = [VisitRecord(NOW - timedelta(days=20)), VisitRecord(NOW - timedelta(days=60))]
        factors = deriver.derive(PatientRecord("P8"), visits, [], NOW)

        assert factors.age == 40
        assert factors.recent_visit_count == 1

    def test_active_status_match_is_case_insensitive(self):
        prescriptions = [PrescriptionRecord("ACTIVE"), PrescriptionRecord("discontinued"), PrescriptionRecord("")]
        factors = PatientFactorDeriver().derive(PatientRecord("P9"), [], prescriptions, NOW)
        assert factors.active_prescription_count == 1

    def test_factors_are_immutable(self):
        factors = PatientFactorDeriver().derive(PatientRecord("P10"), [], [], NOW)
        with pytest.raises(AttributeError):
            factors.age = 99
