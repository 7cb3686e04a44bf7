"""
Custom exceptions for passenger loading, scoring and selection.
"""

class AnomalyVoyageError(Exception):
    """Base exception for the anomaly_voyage package"""
    pass

class MalformedInputError(AnomalyVoyageError):
    """Raised when a passenger record is missing a required field or holds an impossible value"""
    pass

class InvalidParameterError(AnomalyVoyageError, ValueError):
    """Raised when a contamination value or method selector is out of range"""
    pass
