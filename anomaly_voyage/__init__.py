"""
Rule-based anomaly detection and comparative statistics for Titanic passengers.
"""

from .exceptions import AnomalyVoyageError, MalformedInputError, InvalidParameterError
from .data import *
from .outlier import *
from .insights import *

__version__ = "0.1.0"
