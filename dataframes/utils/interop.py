# dataframes/utils/interop.py
"""Conversion to and from pandas, for analysis and plotting done outside this package."""
from __future__ import annotations

from typing import Any, List

import pandas as pd

from ..df_types import MISSING, Cell, Row
from .dataframe import DataFrame


def _to_cell(value: Any) -> Cell:
    if value is None:
        return MISSING
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        return value
    # numpy scalars expose .item() to get the Python number back
    item = getattr(value, "item", None)
    if callable(item):
        value = item()
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
    if value is pd.NaT or value is pd.NA:
        return MISSING
    return str(value)


def to_pandas(df: DataFrame) -> pd.DataFrame:
    """Builds a pandas DataFrame; ragged rows are padded with NaN or cut to the column count."""
    width = len(df.names)
    rows: List[Row] = []
    for row in df.data:
        fitted = list(row[:width])
        fitted.extend([MISSING] * (width - len(fitted)))
        rows.append(fitted)
    return pd.DataFrame(rows, columns=list(df.names))


def from_pandas(pdf: pd.DataFrame) -> DataFrame:
    names = [str(c) for c in pdf.columns]
    data: List[Row] = []
    for values in pdf.itertuples(index=False, name=None):
        data.append([_to_cell(v) for v in values])
    return DataFrame(data, names)
