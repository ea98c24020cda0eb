"""
Ephemeral entities derived from the record store. Never persisted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import pandas as pd

@dataclass(frozen=True, eq=False)
class PatientScope:
    """One patient's slice of every clinical collection, in source order."""
    patient_id: str
    patient: pd.Series | None
    conditions: pd.DataFrame
    chronic_conditions: pd.DataFrame
    medications: pd.DataFrame
    active_medications: pd.DataFrame
    observations: pd.DataFrame
    encounters: pd.DataFrame

class RiskLabel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

@dataclass(frozen=True)
class RiskAssessment:
    label: RiskLabel
    score: int

@dataclass(frozen=True)
class AggregateBucket:
    key: str
    count: int

@dataclass(frozen=True)
class PatientSummary:
    patient_id: str
    chronic_count: int
    active_medication_count: int
    encounter_count: int
    latest_sbp: float | None = None
    latest_dbp: float | None = None
    latest_hba1c: float | None = None

    @property
    def blood_pressure(self) -> str | None:
        if self.latest_sbp is None or self.latest_dbp is None:
            return None
        return f"{self.latest_sbp:g}/{self.latest_dbp:g} mmHg"

@dataclass(frozen=True, eq=False)
class PatientView:
    scope: PatientScope
    summary: PatientSummary
    risk: RiskAssessment
    bp_trend: list[dict]
    latest_vitals: dict[str, pd.Series | None] = field(default_factory=dict)
    observation_history: pd.DataFrame | None = None
    encounter_timeline: pd.DataFrame | None = None
