"""
Shared fixtures: a small synthetic cohort built from flat records.
"""
import pytest
from clinical_cohort.services import RecordStore


def patient(pid, first, last, city="Boston", condition="Asthma", **extra):
    rec = {
        "patient_id": pid, "first_name": first, "last_name": last, "age": 50,
        "gender": "Female", "city": city, "state": "MA", "zip_code": "02118",
        "marital_status": "Single", "insurance_type": "Commercial",
        "primary_condition_code": "X00", "primary_condition_name": condition,
        "birth_date": "1975-01-01",
    }
    rec.update(extra)
    return rec


def obs(oid, obs_type, date, value, pid="P1", normal_flag=1):
    return {
        "observation_id": oid, "patient_id": pid, "observation_type": obs_type,
        "observation_date": date, "value": value, "unit": "", "normal_range_low": 0,
        "normal_range_high": 0, "normal_flag": normal_flag,
    }


def condition(cid, pid, chronic):
    return {"condition_id": cid, "patient_id": pid, "condition_code": "X00",
            "condition_name": f"Condition {cid}", "onset_date": "2020-01-01", "chronic_flag": chronic}


def medication(mid, pid, active):
    return {"medication_id": mid, "patient_id": pid, "medication_name": f"Drug {mid}",
            "atc_code": "A00", "start_date": "2020-01-01", "end_date": None, "active_flag": active}


def encounter(eid, pid, enc_type, date="2023-01-01", readmitted=0):
    return {"encounter_id": eid, "patient_id": pid, "encounter_type": enc_type,
            "department": "General", "encounter_date": date, "length_of_stay_days": 0,
            "total_cost_usd": 100.0, "readmitted_30d_flag": readmitted}


@pytest.fixture
def cohort():
    """Two patients; P1 is high risk, P2 has almost nothing recorded."""
    return RecordStore.from_records(
        patients=[
            patient("P1", "Maria", "Lopez", city="Boston", condition="Diabetes"),
            patient("P2", "James", "Carter", city="Worcester", condition="Hypertension"),
        ],
        conditions=[
            condition("C1", "P1", 1),
            condition("C2", "P2", 0),
            condition("C3", "P1", 1),
            condition("C4", "P1", 0),
            condition("C5", "P1", 1),
        ],
        medications=[
            medication("M1", "P1", 1),
            medication("M2", "P1", 0),
            medication("M3", "P2", 1),
        ],
        observations=[
            obs("O1", "Systolic BP", "2023-01-01", 150),
            obs("O2", "Diastolic BP", "2023-01-01", 85),
            obs("O3", "HbA1c", "2023-01-01", 7.0, normal_flag=0),
            obs("O4", "HbA1c", "2023-06-01", 8.5, normal_flag=0),
            obs("O5", "Systolic BP", "2023-06-01", 165),
            obs("O6", "Diastolic BP", "2023-06-01", 95),
            obs("O7", "Heart Rate", "2023-06-01", 72),
            obs("O8", "BMI", "2023-06-01", 31.2, pid="P2"),
        ],
        encounters=[
            encounter("E1", "P1", "Outpatient", "2023-01-01"),
            encounter("E2", "P2", "Emergency", "2023-03-01"),
            encounter("E3", "P1", "Inpatient", "2023-07-01", readmitted=1),
        ],
    )
