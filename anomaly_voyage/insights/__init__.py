"""
Anomaly insights module.
"""

from .statistics import (
    AnomalyStatistics,
    DistributionComparison,
    GroupComparison,
    average,
    distribution,
    summarize
)

__all__ = [
    'AnomalyStatistics',
    'DistributionComparison',
    'GroupComparison',
    'average',
    'distribution',
    'summarize'
]
