"""
Anomaly scoring and selection module.
"""

from .methods import ScoreMethod
from .scoring import ScorePair, score_passenger, score_passengers
from .selection import anomaly_count, select_anomalies
from .detector import AnomalyDetector, AnomalyFlags, compute_flags, contamination_from_percent

__all__ = [
    'ScoreMethod',
    'ScorePair',
    'score_passenger',
    'score_passengers',
    'anomaly_count',
    'select_anomalies',
    'AnomalyDetector',
    'AnomalyFlags',
    'compute_flags',
    'contamination_from_percent'
]
