"""
Risk classifier scoring rule
"""
import pytest
from clinical_cohort.models import RiskLabel
from clinical_cohort.services import RecordStore, scope_patient, classify_risk
from clinical_cohort.services.risk import (
    chronic_points, glycemic_points, blood_pressure_points, label_for,
)
from conftest import patient, obs, condition


def _scope(chronic=0, hba1c=None, sbp=None, dbp=None):
    conditions = [condition(f"C{i}", "P1", 1) for i in range(chronic)]
    observations = []
    if hba1c is not None:
        observations.append(obs("H", "HbA1c", "2023-01-01", hba1c))
    if sbp is not None:
        observations.append(obs("S", "Systolic BP", "2023-01-01", sbp))
    if dbp is not None:
        observations.append(obs("D", "Diastolic BP", "2023-01-01", dbp))
    store = RecordStore.from_records(
        patients=[patient("P1", "A", "B")], conditions=conditions, observations=observations,
    )
    return scope_patient("P1", store)


def test_high_risk_example():
    risk = classify_risk(_scope(chronic=3, hba1c=8.5, sbp=165, dbp=95))
    assert risk.score == 6
    assert risk.label is RiskLabel.HIGH


def test_nothing_recorded_is_low():
    risk = classify_risk(_scope())
    assert risk.score == 0
    assert risk.label is RiskLabel.LOW


def test_unknown_patient_is_low(cohort):
    risk = classify_risk(scope_patient("nobody", cohort))
    assert (risk.label, risk.score) == (RiskLabel.LOW, 0)


def test_fixture_patients(cohort):
    assert classify_risk(scope_patient("P1", cohort)).score == 6
    assert classify_risk(scope_patient("P2", cohort)).label is RiskLabel.LOW


@pytest.mark.parametrize("count, points", [(0, 0), (1, 1), (2, 1), (3, 2), (7, 2)])
def test_chronic_points(count, points):
    assert chronic_points(count) == points


@pytest.mark.parametrize("value, points", [(6.9, 0), (7.0, 1), (7.99, 1), (8.0, 2), (11.2, 2)])
def test_glycemic_points(value, points):
    assert glycemic_points({"value": value}) == points


def test_glycemic_points_absent():
    assert glycemic_points(None) == 0


@pytest.mark.parametrize("sbp, dbp, points", [
    (120, 80, 0),
    (140, 80, 1),
    (120, 90, 1),
    (159, 99, 1),
    (160, 70, 2),
    (110, 100, 2),
])
def test_blood_pressure_points(sbp, dbp, points):
    assert blood_pressure_points({"value": sbp}, {"value": dbp}) == points


def test_blood_pressure_needs_both_readings():
    risk = classify_risk(_scope(sbp=180))
    assert risk.score == 0
    risk = classify_risk(_scope(dbp=110))
    assert risk.score == 0


@pytest.mark.parametrize("score, label", [
    (0, RiskLabel.LOW), (1, RiskLabel.LOW), (2, RiskLabel.MEDIUM),
    (3, RiskLabel.MEDIUM), (4, RiskLabel.HIGH), (6, RiskLabel.HIGH),
])
def test_label_thresholds(score, label):
    assert label_for(score) is label


def test_latest_reading_drives_score():
    """An old high HbA1c does not count once a newer normal one exists"""
    store = RecordStore.from_records(
        patients=[patient("P1", "A", "B")],
        observations=[
            obs("H1", "HbA1c", "2022-01-01", 9.1),
            obs("H2", "HbA1c", "2023-01-01", 6.2),
        ],
    )
    assert classify_risk(scope_patient("P1", store)).score == 0


def test_classification_is_repeatable(cohort):
    scope = scope_patient("P1", cohort)
    assert classify_risk(scope) == classify_risk(scope)
