"""
Blood-pressure trend builder
"""
import math
import pandas as pd
from clinical_cohort.services import RecordStore, build_bp_trend, trend_frame
from conftest import obs


def _observations(*records):
    return RecordStore.from_records(observations=list(records)).observations


def test_unpaired_dates_keep_the_other_field_absent():
    df = _observations(
        obs("O1", "Systolic BP", "2023-01-01", 120),
        obs("O2", "Diastolic BP", "2023-01-02", 80),
    )
    assert build_bp_trend(df) == [
        {"date": "2023-01-01", "sbp": 120},
        {"date": "2023-01-02", "dbp": 80},
    ]


def test_same_date_readings_are_merged():
    df = _observations(
        obs("O1", "Diastolic BP", "2023-02-01", 85),
        obs("O2", "Systolic BP", "2023-02-01", 135),
    )
    assert build_bp_trend(df) == [{"date": "2023-02-01", "sbp": 135, "dbp": 85}]


def test_later_reading_overwrites_same_type_same_date():
    df = _observations(
        obs("O1", "Systolic BP", "2023-02-01", 135),
        obs("O2", "Diastolic BP", "2023-02-01", 85),
        obs("O3", "Systolic BP", "2023-02-01", 150),
        obs("O4", "Diastolic BP", "2023-02-01", 99),
    )
    assert build_bp_trend(df) == [{"date": "2023-02-01", "sbp": 150, "dbp": 99}]


def test_points_sorted_chronologically_across_year_boundary():
    df = _observations(
        obs("O1", "Systolic BP", "2024-01-05", 130),
        obs("O2", "Systolic BP", "2023-12-20", 128),
        obs("O3", "Diastolic BP", "2023-02-01", 82),
    )
    assert [p["date"] for p in build_bp_trend(df)] == ["2023-02-01", "2023-12-20", "2024-01-05"]


def test_other_observation_types_are_ignored(cohort):
    trend = build_bp_trend(cohort.observations)
    assert trend == [
        {"date": "2023-01-01", "sbp": 150, "dbp": 85},
        {"date": "2023-06-01", "sbp": 165, "dbp": 95},
    ]


def test_no_bp_readings_gives_empty_trend():
    df = _observations(obs("O1", "HbA1c", "2023-01-01", 7.0))
    assert build_bp_trend(df) == []
    assert trend_frame([]).empty


def test_trend_frame_leaves_gaps_as_nan():
    frame = trend_frame([{"date": "2023-01-01", "sbp": 120}, {"date": "2023-01-02", "dbp": 80}])
    assert list(frame.columns) == ["date", "sbp", "dbp"]
    assert math.isnan(frame.loc[0, "dbp"])
    assert math.isnan(frame.loc[1, "sbp"])


def test_bare_empty_frame_gives_empty_trend():
    assert build_bp_trend(pd.DataFrame()) == []
