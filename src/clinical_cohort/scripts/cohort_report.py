"""
Cohort report - prints the aggregate views and the risk distribution.
Run with: python -m clinical_cohort.scripts.cohort_report
"""
import logging
from collections import Counter
from clinical_cohort.core.logging_setup import setup_logging
from clinical_cohort.services import (
    load_record_store, by_city, by_primary_condition, by_encounter_type,
    scope_patient, classify_risk,
)

log = logging.getLogger(__name__)

def risk_distribution(store) -> Counter:
    labels = Counter()
    for pid in store.patients["patient_id"].tolist():
        labels[classify_risk(scope_patient(pid, store)).label.value] += 1
    return labels

def main():
    store = load_record_store()
    totals = store.counts()
    print("Clinical Cohort - Summary\n")
    print("   " + " | ".join(f"{k}: {v}" for k, v in totals.items()))

    print("\n1. Patients by City:")
    for b in by_city(store.patients):
        print(f"   {b.key}: {b.count}")

    print("\n2. Patients by Primary Condition (first 8):")
    for b in by_primary_condition(store.patients):
        print(f"   {b.key}: {b.count}")

    print("\n3. Encounters by Type:")
    for b in by_encounter_type(store.encounters):
        print(f"   {b.key}: {b.count}")

    print("\n4. Risk Distribution:")
    dist = risk_distribution(store)
    for label in ("High", "Medium", "Low"):
        print(f"   {label}: {dist.get(label, 0)}")

if __name__ == "__main__":
    setup_logging()
    log.info("Building cohort report")
    main()
