"""
Comparative statistics between anomalous and normal passengers.

This module contains the read-only summaries the dashboard shows for one
scoring method: how many passengers were flagged, averages of the numeric
attributes, categorical distributions and survival rates, each split into
the anomalous and normal partitions.
"""

import json
import numpy as np
import pandas as pd
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..exceptions import InvalidParameterError
from ..outlier.methods import ScoreMethod

AVERAGE_FIELDS = ["age", "fare", "family_size", "survived"]
DISTRIBUTION_FIELDS = ["pclass", "sex", "embarked", "title"]


@dataclass
class GroupComparison:
    """A numeric value for the anomalous and normal partitions"""
    anomalies: float
    normal: float


@dataclass
class DistributionComparison:
    """Value counts for the anomalous and normal partitions"""
    anomalies: Dict[str, int]
    normal: Dict[str, int]


@dataclass
class AnomalyStatistics:
    """Summary of one method's anomalies against the rest of the passengers"""
    method: str
    count: int
    percentage: float
    averages: Dict[str, GroupComparison]
    distributions: Dict[str, DistributionComparison]
    survival_rate: GroupComparison

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)

    def to_json(self, file_path: Optional[Union[str, Path]] = None) -> str:
        """Convert to JSON string or save to file"""
        json_str = json.dumps(self.to_dict(), indent=2)

        if file_path:
            with open(file_path, 'w') as f:
                f.write(json_str)

        return json_str


def average(subset: pd.DataFrame, field: str) -> float:
    """Mean of the present values of a field; 0.0 when none are present"""
    if field not in subset.columns:
        return 0.0
    values = subset[field].dropna()
    if len(values) == 0:
        return 0.0
    return float(values.astype("float64").mean())


def distribution(subset: pd.DataFrame, field: str) -> Dict[str, int]:
    """Count of each present value of a field, keyed by its string form"""
    if field not in subset.columns:
        return {}
    counts: Dict[str, int] = {}
    for value in subset[field].dropna():
        key = str(value)
        counts[key] = counts.get(key, 0) + 1
    return counts


def summarize(df: pd.DataFrame,
              flags: Union[pd.Series, np.ndarray],
              method: Union[ScoreMethod, str]) -> AnomalyStatistics:
    """
    Compare anomalous and normal passengers under one method

    Args:
        df: Enriched passenger DataFrame
        flags: Boolean anomaly flag per passenger row, in row order
        method: Method the flags came from

    Returns:
        AnomalyStatistics for the method
    """
    method = ScoreMethod.parse(method)
    mask = np.asarray(flags, dtype=bool)
    if mask.shape != (len(df),):
        raise InvalidParameterError(
            f"Expected {len(df)} flags, got {mask.shape[0] if mask.ndim else 0}"
        )

    anomalies = df[mask]
    normal = df[~mask]
    count = len(anomalies)
    percentage = (count / len(df)) * 100 if len(df) > 0 else 0.0

    averages = {
        field: GroupComparison(
            anomalies=average(anomalies, field),
            normal=average(normal, field),
        )
        for field in AVERAGE_FIELDS
    }
    distributions = {
        field: DistributionComparison(
            anomalies=distribution(anomalies, field),
            normal=distribution(normal, field),
        )
        for field in DISTRIBUTION_FIELDS
    }
    survival = averages["survived"]

    return AnomalyStatistics(
        method=method.value,
        count=count,
        percentage=float(percentage),
        averages=averages,
        distributions=distributions,
        survival_rate=GroupComparison(
            anomalies=survival.anomalies * 100,
            normal=survival.normal * 100,
        ),
    )
