"""Titanic passenger EDA: load, profile, group and rank survival factors."""

from .analysis import (
    FEATURES,
    GroupStats,
    compute_missing_profile,
    group_by_feature,
    group_stats,
    rank_factors,
    strongest_factor,
)
from .dataset import Session, load_csv
from .errors import DatasetNotLoadedError, DatasetParseError, EdaError, EmptyDatasetError
from .features import derive_age_group

__all__ = [
    "FEATURES",
    "GroupStats",
    "Session",
    "compute_missing_profile",
    "derive_age_group",
    "group_by_feature",
    "group_stats",
    "load_csv",
    "rank_factors",
    "strongest_factor",
    "EdaError",
    "EmptyDatasetError",
    "DatasetNotLoadedError",
    "DatasetParseError",
]
