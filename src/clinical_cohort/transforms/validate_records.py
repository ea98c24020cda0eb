"""
Shape validation for the source collections: required fields present, dates ISO-parsable,
observation values numeric. Returns a normalised DataFrame or raises MalformedRecordError.
"""

from __future__ import annotations
import logging
from typing import Iterable, Mapping, Union
import numpy as np
import pandas as pd
from clinical_cohort.core.exceptions import MalformedRecordError
from clinical_cohort.models.records import RecordSchema, OBSERVATION

log = logging.getLogger(__name__)

Records = Union[pd.DataFrame, Iterable[Mapping]]

def parse_iso_dates(values: pd.Series) -> pd.Series:
    """ISO-style date strings -> UTC timestamps; anything unparseable becomes NaT."""
    return pd.to_datetime(values, format="ISO8601", utc=True, errors="coerce")

def _identifier(df: pd.DataFrame, schema: RecordSchema, pos: int) -> str:
    if schema.id_field in df.columns:
        val = df[schema.id_field].iloc[pos]
        if pd.notna(val) and str(val).strip() != "":
            return str(val)
    return f"row {pos}"

def _first(mask: pd.Series) -> int:
    return int(np.argmax(mask.to_numpy()))

def _blank(series: pd.Series) -> pd.Series:
    return series.isna() | series.astype(str).str.strip().eq("")

def to_frame(records: Records) -> pd.DataFrame:
    if isinstance(records, pd.DataFrame):
        df = records.copy()
    else:
        df = pd.DataFrame(list(records))
    df.columns = [str(c).strip() for c in df.columns]
    return df.reset_index(drop=True)

def validate_records(records: Records, schema: RecordSchema) -> pd.DataFrame:
    df = to_frame(records)

    if len(df) == 0:
        cols = list(dict.fromkeys([*schema.fields, *df.columns]))
        return df.reindex(columns=cols)

    for field in schema.required:
        if field not in df.columns:
            raise MalformedRecordError(schema.entity, _identifier(df, schema, 0), field)
        missing = _blank(df[field])
        if missing.any():
            raise MalformedRecordError(schema.entity, _identifier(df, schema, _first(missing)), field)

    if schema is OBSERVATION:
        dates = parse_iso_dates(df["observation_date"])
        if dates.isna().any():
            pos = _first(dates.isna())
            raise MalformedRecordError(
                schema.entity, _identifier(df, schema, pos), "observation_date", "unparseable date in"
            )
        values = pd.to_numeric(df["value"], errors="coerce")
        if values.isna().any():
            pos = _first(values.isna())
            raise MalformedRecordError(
                schema.entity, _identifier(df, schema, pos), "value", "non-numeric value in"
            )
        df["value"] = values

    dups = df[schema.id_field].duplicated(keep="first")
    if dups.any():
        log.warning("%s: %d duplicate %s values: %s", schema.entity, int(dups.sum()),
                    schema.id_field, df.loc[dups, schema.id_field].unique().tolist())

    log.debug("Validated %d %s records", len(df), schema.entity)
    return df
