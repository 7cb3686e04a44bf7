"""
Anomaly detection over a loaded passenger set.

The detector owns the enriched passengers and the current flags. Scores are
computed once; a contamination change only re-runs selection.
"""

import math
import numbers
import pandas as pd
from dataclasses import dataclass
from typing import FrozenSet, Union

from .methods import ScoreMethod
from .scoring import score_passengers
from .selection import select_anomalies
from ..data.features import add_derived_features
from ..data.loader import standardize_passengers
from ..exceptions import InvalidParameterError
from ..insights.statistics import AnomalyStatistics, summarize
from ..utils.logger import get_logger

DEFAULT_CONTAMINATION_PERCENT = 5.0


def contamination_from_percent(percent: float) -> float:
    """Convert a contamination percentage in (0, 100] to a fraction"""
    if isinstance(percent, bool) or not isinstance(percent, numbers.Real):
        raise InvalidParameterError(f"Contamination must be numeric, got {percent!r}")
    if math.isnan(percent) or percent <= 0 or percent > 100:
        raise InvalidParameterError(
            f"Contamination must be in (0, 100] percent, got {percent}"
        )
    return percent / 100.0


@dataclass(frozen=True)
class AnomalyFlags:
    """Flagged passenger ids for both methods at one contamination"""
    contamination: float
    isolation: FrozenSet[int]
    lof: FrozenSet[int]

    def for_method(self, method: Union[ScoreMethod, str]) -> FrozenSet[int]:
        method = ScoreMethod.parse(method)
        return self.isolation if method is ScoreMethod.ISOLATION else self.lof

    def mask(self, df: pd.DataFrame, method: Union[ScoreMethod, str]) -> pd.Series:
        """Boolean flag per passenger row for one method"""
        return df["passenger_id"].isin(list(self.for_method(method))).astype(bool)


def compute_flags(df: pd.DataFrame, contamination: float) -> AnomalyFlags:
    """Run selection for both methods against the same contamination"""
    return AnomalyFlags(
        contamination=contamination,
        isolation=select_anomalies(df, ScoreMethod.ISOLATION, contamination),
        lof=select_anomalies(df, ScoreMethod.LOF, contamination),
    )


class AnomalyDetector:
    """Scores a passenger set once and tracks flags for the current contamination"""

    def __init__(self, passengers: pd.DataFrame,
                 contamination_percent: float = DEFAULT_CONTAMINATION_PERCENT,
                 validate: bool = True):
        """
        Initialize the detector

        Args:
            passengers: Raw or standardized passenger DataFrame
            contamination_percent: Initial contamination in (0, 100] percent
            validate: Whether to validate passengers against the schema
        """
        self.logger = get_logger(__name__)
        contamination = contamination_from_percent(contamination_percent)

        standardized = standardize_passengers(passengers, validate=validate)
        self._passengers = score_passengers(add_derived_features(standardized))
        self._flags = compute_flags(self._passengers, contamination)
        self._log_flags()

    def _log_flags(self):
        for method in ScoreMethod:
            self.logger.log_anomaly_summary(
                method.label,
                len(self._flags.for_method(method)),
                len(self._passengers),
                self._flags.contamination,
            )

    @property
    def flags(self) -> AnomalyFlags:
        return self._flags

    @property
    def contamination(self) -> float:
        return self._flags.contamination

    @property
    def records(self) -> pd.DataFrame:
        """Enriched passengers with scores and current flags"""
        result = self._passengers.copy()
        flags = self._flags
        for method in ScoreMethod:
            result[method.flag_column] = flags.mask(result, method)
        return result

    def set_contamination(self, percent: float) -> AnomalyFlags:
        """
        Re-select anomalies for a new contamination percentage

        Both flag sets are computed before either replaces the current flags.
        """
        contamination = contamination_from_percent(percent)
        self._flags = compute_flags(self._passengers, contamination)
        self.logger.debug(f"Contamination set to {percent}%")
        self._log_flags()
        return self._flags

    def get_statistics(self, method: Union[ScoreMethod, str]) -> AnomalyStatistics:
        """Compare anomalous and normal passengers under one method"""
        method = ScoreMethod.parse(method)
        return summarize(self._passengers, self._flags.mask(self._passengers, method), method)
