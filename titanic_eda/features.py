"""Derived columns computed from the raw passenger fields."""

import math
import numbers

import pandas as pd

UNKNOWN = "Unknown"


def age_bucket(age):
    """Bin an age into its decade (``25.5`` -> ``20``); anything unusable maps to Unknown.

    Numeric text is accepted the way the upload form's parser would coerce it.
    Booleans, NaN and infinities are not ages.
    """
    if age is None or isinstance(age, bool):
        return UNKNOWN
    if isinstance(age, str):
        try:
            age = float(age)
        except ValueError:
            return UNKNOWN
    if not isinstance(age, numbers.Real) or not math.isfinite(age):
        return UNKNOWN
    return int(math.floor(age / 10) * 10)


def derive_age_group(df: pd.DataFrame) -> pd.DataFrame:
    """Add an ``AgeGroup`` column computed from ``Age``.

    The frame is modified in place and returned so the call can be chained.
    Running it again recomputes the same buckets from ``Age``.

    Args:
        df: Passenger records, one row each.

    Returns:
        The same DataFrame with ``AgeGroup`` set on every row.
    """
    if "Age" in df.columns:
        df["AgeGroup"] = df["Age"].map(age_bucket).astype(object)
    else:
        df["AgeGroup"] = UNKNOWN
    return df
