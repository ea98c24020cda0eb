from clinical_cohort.models.records import (
    RecordSchema, SCHEMAS,
    PATIENT, CONDITION, MEDICATION, OBSERVATION, ENCOUNTER,
)
from clinical_cohort.models.derived import (
    PatientScope, RiskLabel, RiskAssessment, AggregateBucket, PatientSummary, PatientView,
)
