"""
Risk classifier - a fixed three-input heuristic (not a validated clinical score).

    chronic conditions   >=3 -> 2    1-2 -> 1
    latest HbA1c         >=8.0 -> 2  7.0-7.99 -> 1
    latest BP            >=160 or >=100 -> 2    >=140 or >=90 -> 1   (needs both readings)

    total >=4 High, 2-3 Medium, else Low
"""

from __future__ import annotations
import pandas as pd
from clinical_cohort.models.derived import PatientScope, RiskAssessment, RiskLabel
from clinical_cohort.models.records import SYSTOLIC_BP, DIASTOLIC_BP, HBA1C
from clinical_cohort.services.temporal import latest_by_type

# constants
CHRONIC_HIGH, CHRONIC_LOW = 3, 1
HBA1C_HIGH, HBA1C_LOW = 8.0, 7.0
SBP_HIGH, DBP_HIGH = 160, 100
SBP_LOW, DBP_LOW = 140, 90
HIGH_SCORE, MEDIUM_SCORE = 4, 2

def chronic_points(count: int) -> int:
    if count >= CHRONIC_HIGH:
        return 2
    if count >= CHRONIC_LOW:
        return 1
    return 0

def glycemic_points(hba1c: pd.Series | None) -> int:
    if hba1c is None:
        return 0
    if hba1c["value"] >= HBA1C_HIGH:
        return 2
    if hba1c["value"] >= HBA1C_LOW:
        return 1
    return 0

def blood_pressure_points(sbp: pd.Series | None, dbp: pd.Series | None) -> int:
    if sbp is None or dbp is None:
        return 0
    if sbp["value"] >= SBP_HIGH or dbp["value"] >= DBP_HIGH:
        return 2
    if sbp["value"] >= SBP_LOW or dbp["value"] >= DBP_LOW:
        return 1
    return 0

def label_for(score: int) -> RiskLabel:
    if score >= HIGH_SCORE:
        return RiskLabel.HIGH
    if score >= MEDIUM_SCORE:
        return RiskLabel.MEDIUM
    return RiskLabel.LOW

def classify_risk(scope: PatientScope) -> RiskAssessment:
    obs = scope.observations
    score = (
        chronic_points(len(scope.chronic_conditions))
        + glycemic_points(latest_by_type(obs, HBA1C))
        + blood_pressure_points(latest_by_type(obs, SYSTOLIC_BP), latest_by_type(obs, DIASTOLIC_BP))
    )
    return RiskAssessment(label=label_for(score), score=score)
