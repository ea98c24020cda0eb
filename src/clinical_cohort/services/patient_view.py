"""
Patient view service - composes scoping, temporal resolution, trend and risk into
what the detail page renders for one patient.
"""

from __future__ import annotations
import logging
import pandas as pd
from clinical_cohort.models.derived import PatientScope, PatientSummary, PatientView
from clinical_cohort.models.records import (
    SYSTOLIC_BP, DIASTOLIC_BP, HBA1C, HEART_RATE, BMI, TOTAL_CHOLESTEROL,
)
from clinical_cohort.services.record_store import RecordStore
from clinical_cohort.services.risk import classify_risk
from clinical_cohort.services.scoping import scope_patient
from clinical_cohort.services.temporal import latest_by_type, order_by_date
from clinical_cohort.services.trend import build_bp_trend

log = logging.getLogger(__name__)

KEY_VITALS = (HEART_RATE, BMI, TOTAL_CHOLESTEROL)

def _value(row: pd.Series | None):
    return None if row is None else row["value"]

def summarize_patient(scope: PatientScope) -> PatientSummary:
    obs = scope.observations
    sbp = latest_by_type(obs, SYSTOLIC_BP)
    dbp = latest_by_type(obs, DIASTOLIC_BP)
    # BP is shown only as a pair
    if sbp is None or dbp is None:
        sbp = dbp = None
    return PatientSummary(
        patient_id=scope.patient_id,
        chronic_count=len(scope.chronic_conditions),
        active_medication_count=len(scope.active_medications),
        encounter_count=len(scope.encounters),
        latest_sbp=_value(sbp),
        latest_dbp=_value(dbp),
        latest_hba1c=_value(latest_by_type(obs, HBA1C)),
    )

def latest_vitals(observations: pd.DataFrame, types=KEY_VITALS) -> dict[str, pd.Series | None]:
    return {t: latest_by_type(observations, t) for t in types}

def observation_history(observations: pd.DataFrame) -> pd.DataFrame:
    """Newest first. ``out_of_range`` comes from the supplied normal_flag, it is not recomputed."""
    df = order_by_date(observations, "observation_date", ascending=False)
    if "normal_flag" in df.columns:
        df["out_of_range"] = df["normal_flag"] == 0
    else:
        df["out_of_range"] = False
    return df

def encounter_timeline(encounters: pd.DataFrame) -> pd.DataFrame:
    df = order_by_date(encounters, "encounter_date", ascending=False)
    if "readmitted_30d_flag" in df.columns:
        df["readmitted"] = df["readmitted_30d_flag"] == 1
    else:
        df["readmitted"] = False
    return df

def cohort_totals(store: RecordStore) -> dict[str, int]:
    return store.counts()

def build_patient_view(patient_id, store: RecordStore) -> PatientView:
    scope = scope_patient(patient_id, store)
    view = PatientView(
        scope=scope,
        summary=summarize_patient(scope),
        risk=classify_risk(scope),
        bp_trend=build_bp_trend(scope.observations),
        latest_vitals=latest_vitals(scope.observations),
        observation_history=observation_history(scope.observations),
        encounter_timeline=encounter_timeline(scope.encounters),
    )
    log.debug("Patient view %s: risk=%s score=%d", patient_id, view.risk.label.value, view.risk.score)
    return view
