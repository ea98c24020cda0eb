"""
Record store - the five validated cohort collections, populated once per session.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
import pandas as pd
from clinical_cohort.core.config import DATA_DIR
from clinical_cohort.extract.load_records import read_all
from clinical_cohort.models.records import SCHEMAS
from clinical_cohort.transforms.validate_records import Records, validate_records

log = logging.getLogger(__name__)

@dataclass(frozen=True, eq=False)
class RecordStore:
    """Immutable holder of the cohort collections.

    Services never write to these frames; anything they return is a new frame.
    Build it with ``from_records`` so every collection is validated up front.
    """
    patients: pd.DataFrame
    conditions: pd.DataFrame
    medications: pd.DataFrame
    observations: pd.DataFrame
    encounters: pd.DataFrame

    @classmethod
    def from_records(
        cls,
        patients: Records = (),
        conditions: Records = (),
        medications: Records = (),
        observations: Records = (),
        encounters: Records = (),
    ) -> "RecordStore":
        raw = {
            "patients": patients,
            "conditions": conditions,
            "medications": medications,
            "observations": observations,
            "encounters": encounters,
        }
        # all five validate or no store is built
        frames = {name: validate_records(records, SCHEMAS[name]) for name, records in raw.items()}
        store = cls(**frames)
        log.debug("Record store ready: %s", store.counts())
        return store

    @classmethod
    def empty(cls) -> "RecordStore":
        return cls.from_records()

    def counts(self) -> dict[str, int]:
        return {name: len(getattr(self, name)) for name in SCHEMAS}


def load_record_store(data_dir: Path | str = DATA_DIR) -> RecordStore:
    """Read the five JSON files from ``data_dir`` and build a validated store."""
    try:
        frames = read_all(data_dir)
        store = RecordStore.from_records(**frames)
    except Exception as e:
        log.error("Could not load clinical data from %s: %s", data_dir, e, exc_info=True)
        raise
    log.info("Loaded cohort: %s", store.counts())
    return store
