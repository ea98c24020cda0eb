"""
Temporal resolution over observation and encounter dates.
"""

from __future__ import annotations
import pandas as pd
from clinical_cohort.transforms.validate_records import parse_iso_dates

def order_by_date(df: pd.DataFrame, column: str, ascending: bool = True) -> pd.DataFrame:
    """Chronological order on ``column``; equal dates keep their source order, NaT sorts last."""
    if df.empty or column not in df.columns:
        return df.copy()
    keyed = df.assign(_ts=parse_iso_dates(df[column]), _pos=range(len(df)))
    ordered = keyed.sort_values(["_ts", "_pos"], ascending=[ascending, True], na_position="last")
    return ordered.drop(columns=["_ts", "_pos"])

def latest_by_type(observations: pd.DataFrame, observation_type: str) -> pd.Series | None:
    """Most recent observation of an exact type, or None.

    Among readings on the same (latest) date the one earliest in ``observations`` wins.
    """
    if observations.empty:
        return None
    subset = observations.loc[observations["observation_type"] == observation_type]
    if subset.empty:
        return None
    return order_by_date(subset, "observation_date", ascending=False).iloc[0]
