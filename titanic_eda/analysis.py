"""Survival aggregation, missing-value profiling and the strongest-factor heuristic.

Everything here is a pure function of a passenger DataFrame; nothing touches
the session or does I/O.
"""

import logging
import numbers
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .errors import EmptyDatasetError
from .features import UNKNOWN

logger = logging.getLogger(__name__)

# Columns compared by the strongest-factor analysis, in tie-break order.
FEATURES = ("Sex", "Pclass", "AgeGroup", "Embarked")


@dataclass(frozen=True)
class GroupStats:
    """Passenger count and survivor count for one group."""

    total: int
    survived: int

    @property
    def rate(self) -> float:
        """Survival percentage in [0, 100]."""
        return self.survived / self.total * 100


def group_key(value) -> str:
    """Render a feature value as a group label.

    Missing values and empty text become ``"Unknown"``; whole-number floats
    drop their fraction so ``3.0`` and ``3`` share a group.
    """
    if isinstance(value, str):
        return value if value != "" else UNKNOWN
    if value is None or pd.isna(value):
        return UNKNOWN
    if isinstance(value, (bool, np.bool_)):
        return str(bool(value)).lower()
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return str(int(value))
    return str(value)


def is_survived(value) -> bool:
    """True only for the number 1.

    Text ``"1"`` and ``True`` do not count; the CSV reader already turns
    numeric text into numbers, so this relies on that coercion.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Number):
        return False
    return value == 1


def group_stats(df: pd.DataFrame, feature: str) -> Dict[str, GroupStats]:
    """Partition passengers by ``feature`` and count survivors per group.

    Groups appear in order of first occurrence. A feature column that does not
    exist puts every passenger in the ``"Unknown"`` group.

    Args:
        df: Passenger records with a ``Survived`` column.
        feature: Column to group by.

    Returns:
        Mapping from group label to its counts. Totals add up to ``len(df)``.
    """
    if feature in df.columns:
        keys = df[feature].map(group_key)
    else:
        keys = pd.Series(UNKNOWN, index=df.index)
    if "Survived" in df.columns:
        survived = df["Survived"].map(is_survived).astype(bool)
    else:
        survived = pd.Series(False, index=df.index)

    counts = survived.groupby(keys.rename("key"), sort=False).agg(["size", "sum"])
    return {
        key: GroupStats(total=int(row["size"]), survived=int(row["sum"]))
        for key, row in counts.iterrows()
    }


def group_by_feature(df: pd.DataFrame, feature: str) -> Dict[str, float]:
    """Survival percentage per group of ``feature``."""
    return {key: stats.rate for key, stats in group_stats(df, feature).items()}


def compute_missing_profile(df: pd.DataFrame) -> Dict[str, float]:
    """Percentage of records with a missing or empty value, per column.

    The column set is the one carried by the first record. For a frame read
    from CSV every row carries every header column, so this is the header as
    loaded (derived columns added later are included if present).

    Raises:
        EmptyDatasetError: If there are no records to profile.
    """
    if len(df) == 0:
        raise EmptyDatasetError("Cannot profile missing values of an empty dataset")

    columns = list(df.iloc[0].index)
    missing = (df[columns].isna() | df[columns].isin([""])).sum()
    return {col: float(missing[col] / len(df) * 100) for col in columns}


def rank_factors(
    df: pd.DataFrame, features: Sequence[str] = FEATURES
) -> List[Tuple[str, float]]:
    """Rank features by the spread of their group survival rates.

    Spread is the highest group survival rate minus the lowest. A feature with
    a single group scores 0 and is still listed. Equal spreads keep the order
    of ``features``.

    Args:
        df: Passenger records, with ``AgeGroup`` already derived if ranked.
        features: Columns to compare.

    Returns:
        ``(feature, spread)`` pairs, largest spread first.

    Raises:
        EmptyDatasetError: If there are no records to rank over.
    """
    if len(df) == 0:
        raise EmptyDatasetError("Cannot rank factors over an empty dataset")

    scores = []
    for feature in features:
        rates = list(group_by_feature(df, feature).values())
        scores.append((feature, max(rates) - min(rates)))
    ranking = sorted(scores, key=lambda item: item[1], reverse=True)
    logger.debug("Factor ranking: %s", ranking)
    return ranking


def strongest_factor(ranking: Sequence[Tuple[str, float]]) -> Optional[str]:
    """Name of the top-ranked feature, or None when nothing was ranked."""
    return ranking[0][0] if ranking else None
