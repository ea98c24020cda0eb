"""
Record schemas for the five source collections.
"""

from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class RecordSchema:
    entity: str
    id_field: str
    fields: tuple[str, ...]
    required: tuple[str, ...]

PATIENT = RecordSchema(
    entity="patient",
    id_field="patient_id",
    fields=(
        "patient_id", "first_name", "last_name", "age", "gender",
        "city", "state", "zip_code", "marital_status", "insurance_type",
        "primary_condition_code", "primary_condition_name", "birth_date",
    ),
    required=("patient_id", "first_name", "last_name", "city", "primary_condition_name"),
)

CONDITION = RecordSchema(
    entity="condition",
    id_field="condition_id",
    fields=(
        "condition_id", "patient_id", "condition_code", "condition_name",
        "onset_date", "chronic_flag",
    ),
    required=("condition_id", "patient_id", "chronic_flag"),
)

MEDICATION = RecordSchema(
    entity="medication",
    id_field="medication_id",
    fields=(
        "medication_id", "patient_id", "medication_name", "atc_code",
        "start_date", "end_date", "active_flag",
    ),
    required=("medication_id", "patient_id", "active_flag"),
)

OBSERVATION = RecordSchema(
    entity="observation",
    id_field="observation_id",
    fields=(
        "observation_id", "patient_id", "observation_type", "observation_date",
        "value", "unit", "normal_range_low", "normal_range_high", "normal_flag",
    ),
    required=("observation_id", "patient_id", "observation_type", "observation_date", "value"),
)

ENCOUNTER = RecordSchema(
    entity="encounter",
    id_field="encounter_id",
    fields=(
        "encounter_id", "patient_id", "encounter_type", "department",
        "encounter_date", "length_of_stay_days", "total_cost_usd",
        "readmitted_30d_flag",
    ),
    required=("encounter_id", "patient_id", "encounter_type"),
)

SCHEMAS = {
    "patients": PATIENT,
    "conditions": CONDITION,
    "medications": MEDICATION,
    "observations": OBSERVATION,
    "encounters": ENCOUNTER,
}

# observation labels used by the engine
SYSTOLIC_BP  = "Systolic BP"
DIASTOLIC_BP = "Diastolic BP"
HBA1C        = "HbA1c"
HEART_RATE   = "Heart Rate"
BMI          = "BMI"
TOTAL_CHOLESTEROL = "Total Cholesterol"
