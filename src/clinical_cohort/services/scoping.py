"""
Patient scoping: slice every clinical collection down to one patient.
"""

from __future__ import annotations
import logging
import pandas as pd
from clinical_cohort.models.derived import PatientScope
from clinical_cohort.services.record_store import RecordStore

log = logging.getLogger(__name__)

def _for_patient(df: pd.DataFrame, patient_id) -> pd.DataFrame:
    return df.loc[df["patient_id"] == patient_id].copy()

def _flagged(df: pd.DataFrame, column: str) -> pd.DataFrame:
    return df.loc[df[column] == 1].copy()

def scope_patient(patient_id, store: RecordStore) -> PatientScope:
    """Filter conditions, medications, observations and encounters to ``patient_id``.

    Source order is kept. An id with no Patient record gives empty collections, not an error.
    """
    match = store.patients.loc[store.patients["patient_id"] == patient_id]

    if match.empty:
        log.debug("No patient %s in cohort; returning empty scope", patient_id)
        conditions = store.conditions.iloc[0:0].copy()
        medications = store.medications.iloc[0:0].copy()
        observations = store.observations.iloc[0:0].copy()
        encounters = store.encounters.iloc[0:0].copy()
        patient = None
    else:
        conditions = _for_patient(store.conditions, patient_id)
        medications = _for_patient(store.medications, patient_id)
        observations = _for_patient(store.observations, patient_id)
        encounters = _for_patient(store.encounters, patient_id)
        patient = match.iloc[0].copy()

    return PatientScope(
        patient_id=patient_id,
        patient=patient,
        conditions=conditions,
        chronic_conditions=_flagged(conditions, "chronic_flag"),
        medications=medications,
        active_medications=_flagged(medications, "active_flag"),
        observations=observations,
        encounters=encounters,
    )
