"""
Runner module for the anomaly detection pipeline.
"""

from .config import RunnerConfig
from .pipeline import AnomalyPipeline

__all__ = [
    'RunnerConfig',
    'AnomalyPipeline'
]
