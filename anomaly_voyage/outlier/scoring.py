"""
Rule-based anomaly scoring.

Both scores are fixed weighted sums of per-passenger deviations and do not
look at the rest of the population. They approximate what Isolation Forest
and LOF would surface without fitting either model.
"""

import pandas as pd
from typing import Dict, NamedTuple, Optional
from typeguard import typechecked

from ..data.features import DerivedFeatures, add_derived_features, derive_features
from ..data.schema import PassengerRecord

FARE_BASELINE = 33.0
FARE_SCALE = 50.0
AGE_BASELINE = 30.0
AGE_SCALE = 30.0
HIGH_FARE_THRESHOLD = 200.0
LARGE_FAMILY_THRESHOLD = 5

# Weight order is part of the result: both code paths sum in this order
ISOLATION_WEIGHTS: Dict[str, float] = {
    "fare_dev": 0.4,
    "age_dev": 0.3,
    "high_fare_first_class": 0.2,
    "large_family": 0.1,
}
LOF_WEIGHTS: Dict[str, float] = {
    "fare_dev": 0.5,
    "age_dev": 0.2,
    "large_family": 0.3,
}


class ScorePair(NamedTuple):
    isolation: float
    lof: float


def _weighted_sum(components, weights: Dict[str, float]):
    total = 0.0
    for name, weight in weights.items():
        total = total + weight * components[name]
    return total


def score_components(record: PassengerRecord, features: Optional[DerivedFeatures] = None) -> Dict[str, float]:
    """Deviation components for a single passenger"""
    features = features or derive_features(record)
    fare, age = record.fare, record.age
    return {
        "fare_dev": abs(fare - FARE_BASELINE) / FARE_SCALE if fare is not None else 0.0,
        "age_dev": abs(age - AGE_BASELINE) / AGE_SCALE if age is not None else 0.0,
        "high_fare_first_class": (
            1.0 if record.pclass == 1 and fare is not None and fare > HIGH_FARE_THRESHOLD else 0.0
        ),
        "large_family": (
            1.0 if features.family_size is not None and features.family_size > LARGE_FAMILY_THRESHOLD else 0.0
        ),
    }


def score_passenger(record: PassengerRecord, features: Optional[DerivedFeatures] = None) -> ScorePair:
    """
    Score a single passenger under both methods

    Args:
        record: Validated passenger record
        features: Precomputed derived features (derived from the record if omitted)

    Returns:
        ScorePair of (isolation, lof) scores
    """
    components = score_components(record, features)
    return ScorePair(
        isolation=float(_weighted_sum(components, ISOLATION_WEIGHTS)),
        lof=float(_weighted_sum(components, LOF_WEIGHTS)),
    )


@typechecked
def compute_score_components(df: pd.DataFrame) -> pd.DataFrame:
    """Deviation components for every passenger in a DataFrame"""
    if "family_size" not in df.columns:
        df = add_derived_features(df)

    fare = df["fare"].astype("float64")
    age = df["age"].astype("float64")
    first_class = df["pclass"].eq(1).fillna(False).astype(bool)

    return pd.DataFrame(
        {
            "fare_dev": ((fare - FARE_BASELINE).abs() / FARE_SCALE).fillna(0.0),
            "age_dev": ((age - AGE_BASELINE).abs() / AGE_SCALE).fillna(0.0),
            "high_fare_first_class": (first_class & fare.gt(HIGH_FARE_THRESHOLD)).astype("float64"),
            "large_family": df["family_size"].gt(LARGE_FAMILY_THRESHOLD).fillna(False).astype("float64"),
        },
        index=df.index,
    )


@typechecked
def score_passengers(df: pd.DataFrame) -> pd.DataFrame:
    """
    Add both anomaly scores to a passenger DataFrame

    Args:
        df: Standardized passenger DataFrame (derived features are added if missing)

    Returns:
        New DataFrame with score_isolation and score_lof columns
    """
    result = df if "family_size" in df.columns else add_derived_features(df)
    components = compute_score_components(result)

    result = result.copy()
    result["score_isolation"] = _weighted_sum(components, ISOLATION_WEIGHTS).astype("float64")
    result["score_lof"] = _weighted_sum(components, LOF_WEIGHTS).astype("float64")
    return result
