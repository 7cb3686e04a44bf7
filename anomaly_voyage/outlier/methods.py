"""
Anomaly scoring method tags.
"""

from enum import Enum
from typing import Union

from ..exceptions import InvalidParameterError


class ScoreMethod(Enum):
    """The two rule-based scoring methods"""
    ISOLATION = "scoreA"
    LOF = "scoreB"

    @property
    def score_column(self) -> str:
        return "score_isolation" if self is ScoreMethod.ISOLATION else "score_lof"

    @property
    def flag_column(self) -> str:
        return "is_anomaly_isolation" if self is ScoreMethod.ISOLATION else "is_anomaly_lof"

    @property
    def label(self) -> str:
        return "Isolation Forest" if self is ScoreMethod.ISOLATION else "Local Outlier Factor"

    @classmethod
    def parse(cls, value: Union["ScoreMethod", str]) -> "ScoreMethod":
        """Resolve a method tag, "scoreA" or "scoreB"; anything else fails fast"""
        if isinstance(value, cls):
            return value
        for method in cls:
            if method.value == value:
                return method
        valid = [m.value for m in cls]
        raise InvalidParameterError(f"Unknown scoring method {value!r}; expected one of {valid}")
