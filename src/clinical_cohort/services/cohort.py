"""
Cohort aggregates over the full, unscoped collections.
"""

from __future__ import annotations
from dataclasses import asdict
import pandas as pd
from clinical_cohort.models.derived import AggregateBucket

PRIMARY_CONDITION_LIMIT = 8

def count_by(df: pd.DataFrame, column: str) -> list[AggregateBucket]:
    """One bucket per distinct value of ``column``, in order of first appearance."""
    if df.empty:
        return []
    sizes = df.groupby(column, sort=False, dropna=False).size()
    return [AggregateBucket(key=str(key), count=int(count)) for key, count in sizes.items()]

def by_city(patients: pd.DataFrame) -> list[AggregateBucket]:
    return count_by(patients, "city")

def by_primary_condition(patients: pd.DataFrame) -> list[AggregateBucket]:
    # first 8 conditions seen in the file, not the 8 most common
    return count_by(patients, "primary_condition_name")[:PRIMARY_CONDITION_LIMIT]

def by_encounter_type(encounters: pd.DataFrame) -> list[AggregateBucket]:
    return count_by(encounters, "encounter_type")

def buckets_frame(buckets: list[AggregateBucket], key_name: str = "key") -> pd.DataFrame:
    df = pd.DataFrame([asdict(b) for b in buckets], columns=["key", "count"])
    return df.rename(columns={"key": key_name})
