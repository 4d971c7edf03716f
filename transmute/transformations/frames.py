# =============================================================================
# transmute/transformations/frames.py - DataFrame Conversions
# =============================================================================
# Bridge between pandas DataFrames and the list-of-dicts shape the other
# transformations work on.
#
# Example:
#   records = to_records(df)            # [{"name": "Jane", "age": 12}, ...]
#   df = from_records(records)
# =============================================================================

from __future__ import annotations

from typing import Any, Iterable, Mapping

import pandas as pd

from transmute.registry import Registry


registry = Registry("frames")


@registry.register
def to_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    """
    Convert a DataFrame to a list of row dicts.

    Missing values (NaN / NaT) become None.
    """
    cleaned = df.astype(object).where(pd.notna(df), None)
    return cleaned.to_dict(orient="records")


@registry.register
def from_records(records: Iterable[Mapping[str, Any]], columns: list[str] | None = None) -> pd.DataFrame:
    """Build a DataFrame from row dicts, optionally fixing the column order."""
    return pd.DataFrame.from_records(list(records), columns=columns)
