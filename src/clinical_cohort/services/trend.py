"""
Blood-pressure trend: merge systolic and diastolic readings into one dated series.
"""

from __future__ import annotations
import pandas as pd
from clinical_cohort.models.records import SYSTOLIC_BP, DIASTOLIC_BP
from clinical_cohort.transforms.validate_records import parse_iso_dates

def _readings(observations: pd.DataFrame, observation_type: str) -> list[tuple]:
    subset = observations.loc[observations["observation_type"] == observation_type]
    return list(zip(subset["observation_date"].tolist(), subset["value"].tolist()))

def build_bp_trend(observations: pd.DataFrame) -> list[dict]:
    """Points ``{"date", "sbp", "dbp"}`` keyed on the exact date string, oldest first.

    A second reading of the same type on the same date replaces the first.
    A date with only one of the two readings has no key for the other.
    """
    if observations.empty:
        return []
    points: dict[str, dict] = {}
    for date, value in _readings(observations, SYSTOLIC_BP):
        points[date] = {"date": date, "sbp": value}
    for date, value in _readings(observations, DIASTOLIC_BP):
        points.setdefault(date, {"date": date})["dbp"] = value

    if not points:
        return []
    stamps = parse_iso_dates(pd.Series(list(points)))
    order = sorted(range(len(points)), key=lambda i: stamps.iloc[i])
    series = list(points.values())
    return [series[i] for i in order]

def trend_frame(points: list[dict]) -> pd.DataFrame:
    """Trend series as a frame for charting; absent readings become NaN."""
    return pd.DataFrame(points, columns=["date", "sbp", "dbp"])
