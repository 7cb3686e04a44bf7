"""
Passenger data loading, schema validation and feature engineering.
"""

from .schema import PassengerRecord, PassengerSchema
from .loader import load_passengers, parse_passengers, standardize_passengers
from .features import DerivedFeatures, add_derived_features, derive_features, extract_title

__all__ = [
    'PassengerRecord',
    'PassengerSchema',
    'load_passengers',
    'parse_passengers',
    'standardize_passengers',
    'DerivedFeatures',
    'add_derived_features',
    'derive_features',
    'extract_title'
]
