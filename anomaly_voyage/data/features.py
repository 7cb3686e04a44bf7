"""
Feature engineering for passenger records.

Derived attributes are computed once per passenger at load time:
title (bucketed from the name), family size, travelling alone and
whether a cabin was recorded.
"""

import re
import pandas as pd
from dataclasses import dataclass
from typing import Optional
from typeguard import typechecked

from .schema import PassengerRecord

TITLE_PATTERN = re.compile(r",\s([^.]+)\.")
UNKNOWN_TITLE = "Unknown"

# Rare titles folded into shared buckets; anything else is kept as extracted
TITLE_BUCKETS = {
    "Capt": "Officer",
    "Col": "Officer",
    "Major": "Officer",
    "Dr": "Officer",
    "Rev": "Officer",
    "Dona": "Royalty",
    "Lady": "Royalty",
    "the Countess": "Royalty",
    "Sir": "Royalty",
    "Don": "Royalty",
    "Jonkheer": "Royalty",
    "Mlle": "Miss",
    "Ms": "Miss",
    "Mme": "Mrs",
}


@dataclass(frozen=True)
class DerivedFeatures:
    """Engineered attributes of one passenger"""
    title: str
    family_size: Optional[int]
    is_alone: bool
    has_cabin: bool


def normalize_title(title: str) -> str:
    """Map a raw title onto its bucket"""
    return TITLE_BUCKETS.get(title, title)


def extract_title(name: Optional[str]) -> str:
    """
    Extract the bucketed title from a name such as "Braund, Mr. Owen Harris"

    Returns "Unknown" when the name is absent or carries no ", <title>." part.
    """
    if not isinstance(name, str):
        return UNKNOWN_TITLE
    match = TITLE_PATTERN.search(name)
    if not match:
        return UNKNOWN_TITLE
    return normalize_title(match.group(1).strip())


def _family_size(sib_sp: Optional[int], parch: Optional[int]) -> Optional[int]:
    if sib_sp is None or parch is None:
        return None
    return int(sib_sp) + int(parch) + 1


def derive_features(record: PassengerRecord) -> DerivedFeatures:
    """Compute derived attributes for a single passenger"""
    family_size = _family_size(record.sib_sp, record.parch)
    return DerivedFeatures(
        title=extract_title(record.name),
        family_size=family_size,
        is_alone=family_size == 1,
        has_cabin=record.cabin is not None,
    )


@typechecked
def add_derived_features(df: pd.DataFrame) -> pd.DataFrame:
    """
    Add derived attribute columns to a standardized passenger DataFrame

    Args:
        df: Standardized passenger DataFrame

    Returns:
        New DataFrame with title, family_size, is_alone and has_cabin columns
    """
    result = df.copy()
    result["title"] = result["name"].map(extract_title).astype("object")

    # NA in either count propagates to family_size
    family_size = result["sib_sp"].astype("Int64") + result["parch"].astype("Int64") + 1
    result["family_size"] = family_size
    result["is_alone"] = family_size.eq(1).fillna(False).astype(bool)
    result["has_cabin"] = result["cabin"].notna()
    return result
