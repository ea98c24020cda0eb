"""
Patient search over "first last id", case-insensitive.

Two call sites with different handling of an empty term:
    search_suggestions   - empty term matches nobody (the search page shows a prompt)
    filter_visible_list  - empty term matches everybody (the sidebar list shows the cohort)
"""

from __future__ import annotations
from typing import Mapping
import pandas as pd

def _normalize_term(term: str | None) -> str:
    return (term or "").strip().lower()

def identity_string(patient: Mapping) -> str:
    return f"{patient['first_name']} {patient['last_name']} {patient['patient_id']}".lower()

def matches(patient: Mapping, term: str) -> bool:
    return _normalize_term(term) in identity_string(patient)

def _matching(patients: pd.DataFrame, term: str) -> pd.DataFrame:
    if patients.empty:
        return patients.copy()
    identity = (
        patients["first_name"].astype(str) + " "
        + patients["last_name"].astype(str) + " "
        + patients["patient_id"].astype(str)
    ).str.lower()
    return patients.loc[identity.str.contains(term, regex=False)].copy()

def search_suggestions(patients: pd.DataFrame, term: str) -> pd.DataFrame:
    t = _normalize_term(term)
    if not t:
        return patients.iloc[0:0].copy()
    return _matching(patients, t)

def filter_visible_list(patients: pd.DataFrame, term: str) -> pd.DataFrame:
    t = _normalize_term(term)
    if not t:
        return patients.copy()
    return _matching(patients, t)
