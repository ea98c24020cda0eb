from clinical_cohort.services.record_store import RecordStore, load_record_store
from clinical_cohort.services.scoping import scope_patient
from clinical_cohort.services.temporal import latest_by_type, order_by_date
from clinical_cohort.services.trend import build_bp_trend, trend_frame
from clinical_cohort.services.risk import classify_risk
from clinical_cohort.services.cohort import by_city, by_primary_condition, by_encounter_type, buckets_frame
from clinical_cohort.services.search import matches, search_suggestions, filter_visible_list
from clinical_cohort.services.patient_view import (
    build_patient_view, summarize_patient, latest_vitals,
    observation_history, encounter_timeline, cohort_totals,
)
