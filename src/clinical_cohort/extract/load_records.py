"""
Extract the five cohort collections from JSON files, raw DataFrames.
"""

from __future__ import annotations
import logging
from pathlib import Path
import pandas as pd
from clinical_cohort.core.config import DATA_DIR, DATA_FILES

log = logging.getLogger(__name__)

def read_collection(name: str, data_dir: Path | str = DATA_DIR) -> pd.DataFrame:
    """Read one JSON array of flat records. Ids and dates stay as strings."""
    path = Path(data_dir) / DATA_FILES[name]
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    df.columns = [str(c).strip() for c in df.columns]
    log.info("Extracted %s: %s (%d rows)", name, path, len(df))
    return df

def read_all(data_dir: Path | str = DATA_DIR) -> dict[str, pd.DataFrame]:
    return {name: read_collection(name, data_dir) for name in DATA_FILES}
