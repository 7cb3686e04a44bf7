"""Tests for the rule-based anomaly scores."""

import pandas as pd
import pytest

from anomaly_voyage.data.features import add_derived_features
from anomaly_voyage.data.loader import standardize_passengers
from anomaly_voyage.data.schema import PassengerRecord
from anomaly_voyage.outlier.scoring import score_components, score_passenger, score_passengers
from anomaly_voyage.tests.helpers import make_passenger


def _scored(raw):
    return score_passengers(add_derived_features(standardize_passengers(raw))).set_index("passenger_id")


def test_high_fare_first_class_scenario():
    """fare=500, class 1, age 30, alone: fare_dev 9.34 and the first-class bonus."""
    record = PassengerRecord(passenger_id=1, pclass=1, sex="female", age=30.0,
                             fare=500.0, sib_sp=0, parch=0)
    components = score_components(record)
    assert components["high_fare_first_class"] == 1.0
    assert components["age_dev"] == 0.0
    assert components["fare_dev"] == pytest.approx(9.34)
    assert components["large_family"] == 0.0

    scores = score_passenger(record)
    assert scores.isolation == pytest.approx(3.936)
    assert scores.lof == pytest.approx(4.67)


def test_frame_scores_match_expected(raw_passengers):
    scored = _scored(raw_passengers)
    assert scored.loc[2, "score_isolation"] == pytest.approx(3.936)
    assert scored.loc[2, "score_lof"] == pytest.approx(4.67)
    # Missing fare contributes nothing, age 60 is one full deviation
    assert scored.loc[5, "score_isolation"] == pytest.approx(0.3)
    assert scored.loc[5, "score_lof"] == pytest.approx(0.2)
    # Missing age contributes nothing
    assert scored.loc[3, "score_isolation"] == pytest.approx(0.4 * 20.1 / 50)
    # Family of 11 triggers the large-family term
    assert scored.loc[4, "score_isolation"] == pytest.approx(0.4 * 36.55 / 50 + 0.1)
    assert scored.loc[4, "score_lof"] == pytest.approx(0.5 * 36.55 / 50 + 0.3)


def test_frame_and_single_record_scores_are_identical(raw_passengers):
    """Both scoring paths produce bit-identical values."""
    scored = _scored(raw_passengers)
    for passenger_id, row in scored.iterrows():
        record = PassengerRecord.from_mapping({**row.to_dict(), "passenger_id": passenger_id})
        pair = score_passenger(record)
        assert pair.isolation == row["score_isolation"]
        assert pair.lof == row["score_lof"]


def test_scoring_is_idempotent(raw_passengers):
    first = _scored(raw_passengers)
    second = score_passengers(first.reset_index())
    pd.testing.assert_series_equal(
        first["score_isolation"], second.set_index("passenger_id")["score_isolation"]
    )
    record = PassengerRecord(passenger_id=1, pclass=3, sex="male", age=41.5, fare=12.0)
    assert score_passenger(record) == score_passenger(record)


def test_high_fare_bonus_needs_first_class_and_fare_above_threshold():
    raw = pd.DataFrame([
        make_passenger(1, Pclass=1, Fare=200.0),
        make_passenger(2, Pclass=2, Fare=300.0),
        make_passenger(3, Pclass=1, Fare=200.5),
        make_passenger(4, Pclass=1, Fare=None),
    ])
    scored = _scored(raw)
    assert scored.loc[1, "score_isolation"] == pytest.approx(0.4 * 167 / 50)
    assert scored.loc[2, "score_isolation"] == pytest.approx(0.4 * 267 / 50)
    assert scored.loc[3, "score_isolation"] == pytest.approx(0.4 * 167.5 / 50 + 0.2)
    assert scored.loc[4, "score_isolation"] == 0.0


def test_zero_fare_counts_as_present():
    """A recorded fare of zero still deviates from the baseline."""
    scored = _scored(pd.DataFrame([make_passenger(1, Fare=0.0)]))
    assert scored.loc[1, "score_lof"] == pytest.approx(0.5 * 33 / 50)


def test_family_of_five_is_not_large():
    raw = pd.DataFrame([
        make_passenger(1, SibSp=2, Parch=2),
        make_passenger(2, SibSp=3, Parch=2),
    ])
    scored = _scored(raw)
    assert scored.loc[1, "score_lof"] == 0.0
    assert scored.loc[2, "score_lof"] == pytest.approx(0.3)


def test_scores_are_not_clamped():
    scored = _scored(pd.DataFrame([make_passenger(1, Fare=5000.0, Age=80.0)]))
    assert scored.loc[1, "score_lof"] > 1.0


def test_score_passengers_derives_missing_features(raw_passengers):
    scored = score_passengers(standardize_passengers(raw_passengers))
    assert "family_size" in scored.columns
    assert scored["score_isolation"].notna().all()
