"""
Utility modules for the anomaly_voyage package.
"""

from .logger import AnomalyLogger, get_logger, setup_logging
from .pipeline_decorators import pipeline_step

__all__ = [
    'AnomalyLogger',
    'get_logger',
    'setup_logging',
    'pipeline_step'
]
