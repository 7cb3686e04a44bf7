"""
Top-fraction anomaly selection.
"""

import math
import numpy as np
import pandas as pd
from typing import FrozenSet, Union
from typeguard import typechecked

from .methods import ScoreMethod
from ..exceptions import InvalidParameterError


def anomaly_count(total: int, contamination: float) -> int:
    """
    Number of passengers to flag for a contamination fraction

    ceil(contamination * total) clamped to [0, total]. A contamination at or
    below zero flags nobody rather than rounding up to one passenger.
    """
    if math.isnan(contamination):
        raise InvalidParameterError("Contamination must be a number, got NaN")
    if total <= 0 or contamination <= 0:
        return 0
    if contamination >= 1:
        return total
    # Drop float noise such as 0.07 * 100 == 7.000000000000001 before the ceiling
    k = math.ceil(round(contamination * total, 9))
    return min(max(k, 0), total)


def rank_by_score(df: pd.DataFrame, method: Union[ScoreMethod, str]) -> np.ndarray:
    """Positional order of passengers by descending score; equal scores keep record order"""
    method = ScoreMethod.parse(method)
    scores = df[method.score_column].to_numpy(dtype="float64")
    return np.argsort(-scores, kind="stable")


@typechecked
def select_anomalies(df: pd.DataFrame,
                     method: Union[ScoreMethod, str],
                     contamination: float) -> FrozenSet[int]:
    """
    Flag the top contamination fraction of passengers under one method

    Args:
        df: Scored passenger DataFrame
        method: Which score to rank by
        contamination: Fraction of passengers to flag

    Returns:
        Passenger ids of the flagged passengers
    """
    method = ScoreMethod.parse(method)
    k = anomaly_count(len(df), contamination)
    if k == 0:
        return frozenset()

    order = rank_by_score(df, method)
    passenger_ids = df["passenger_id"].to_numpy(dtype="int64")
    return frozenset(int(pid) for pid in passenger_ids[order[:k]])
