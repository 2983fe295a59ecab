"""CSV ingestion, record rendering and the per-process session holding the dataset."""

import logging
import math
import re
from typing import BinaryIO, List, Optional, Union

import numpy as np
import pandas as pd

from .errors import DatasetNotLoadedError, DatasetParseError

logger = logging.getLogger(__name__)

# Reader errors that mean "this upload is not a usable CSV".
_PARSE_ERRORS = (
    pd.errors.EmptyDataError,
    pd.errors.ParserError,
    UnicodeDecodeError,
    ValueError,
)

# Numeric text as the browser CSV parser recognises it.
_NUMBER = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$")
_INTEGER = re.compile(r"^\s*-?\d+\s*$")


def dynamic_value(v):
    """Type one cell: numeric text to a number, ``true``/``false`` to a bool, other values unchanged."""
    if not isinstance(v, str):
        return v
    if v in ("true", "TRUE"):
        return True
    if v in ("false", "FALSE"):
        return False
    if _INTEGER.match(v):
        return int(v)
    if _NUMBER.match(v):
        return float(v)
    return v


def load_csv(source: Union[str, BinaryIO]) -> pd.DataFrame:
    """Read a passenger CSV and keep the rows that carry a ``Survived`` value.

    The header row names the columns. Numeric and boolean text is converted,
    and only empty fields count as missing (``"NA"`` stays text).

    Args:
        source: Path or binary file object.

    Returns:
        The filtered records in file order, reindexed from 0.

    Raises:
        DatasetParseError: If the file cannot be read as CSV.
    """
    try:
        df = pd.read_csv(source, keep_default_na=False, na_values=[""])
    except _PARSE_ERRORS as e:
        raise DatasetParseError(f"Could not read CSV: {e}") from e

    # A single text cell makes the whole column text; retype cell by cell
    for col in df.select_dtypes(exclude=["number", "bool"]).columns:
        df[col] = df[col].map(dynamic_value).astype(object)

    rows = len(df)
    df = filter_survived(df)
    logger.info("Parsed %d rows, kept %d with a Survived value", rows, len(df))
    return df


def filter_survived(df: pd.DataFrame) -> pd.DataFrame:
    """Drop rows whose ``Survived`` is missing or empty; no column means no rows."""
    if "Survived" not in df.columns:
        return df.iloc[0:0].reset_index(drop=True)
    mask = df["Survived"].notna() & (df["Survived"] != "")
    return df[mask].reset_index(drop=True)


def _jsonable(v):
    if isinstance(v, np.generic):
        v = v.item()
    if isinstance(v, float) and (math.isnan(v) or math.isinf(v)):
        return None
    return v


def records(df: pd.DataFrame, limit: Optional[int] = None) -> List[dict]:
    """Rows as plain dicts with JSON-safe values (NaN becomes None)."""
    head = df if limit is None else df.head(limit)
    return [
        {col: _jsonable(v) for col, v in zip(head.columns, row)}
        for row in head.itertuples(index=False, name=None)
    ]


class Session:
    """Holds the one loaded dataset; a new load replaces it wholesale."""

    def __init__(self):
        self._dataset: Optional[pd.DataFrame] = None
        self._columns: List[str] = []

    @property
    def is_loaded(self) -> bool:
        return self._dataset is not None

    @property
    def columns(self) -> List[str]:
        """Columns as read from the file, before any derived column."""
        if self._dataset is None:
            raise DatasetNotLoadedError("Load data first")
        return list(self._columns)

    def set_dataset(self, df: pd.DataFrame, columns: Optional[List[str]] = None) -> None:
        self._dataset = df
        self._columns = list(df.columns) if columns is None else list(columns)

    def get_dataset(self) -> pd.DataFrame:
        if self._dataset is None:
            raise DatasetNotLoadedError("Load data first")
        return self._dataset

