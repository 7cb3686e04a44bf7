"""Tests for the detector that owns the current anomaly flags."""

import pandas as pd
import pytest

from anomaly_voyage.exceptions import InvalidParameterError, MalformedInputError
from anomaly_voyage.insights.statistics import AnomalyStatistics
from anomaly_voyage.outlier.detector import AnomalyDetector, contamination_from_percent
from anomaly_voyage.outlier.methods import ScoreMethod
from anomaly_voyage.data.loader import load_passengers
from anomaly_voyage.tests.helpers import make_passenger


@pytest.fixture
def detector(make_population):
    return AnomalyDetector(make_population(100))


def test_default_contamination_is_five_percent(detector):
    assert detector.contamination == pytest.approx(0.05)
    assert len(detector.flags.isolation) == 5
    assert len(detector.flags.lof) == 5


def test_records_carry_scores_features_and_flags(detector):
    records = detector.records
    for column in ["title", "family_size", "is_alone", "has_cabin",
                   "score_isolation", "score_lof",
                   "is_anomaly_isolation", "is_anomaly_lof"]:
        assert column in records.columns
    assert records["is_anomaly_isolation"].sum() == 5
    assert set(records.loc[records["is_anomaly_lof"], "passenger_id"]) == detector.flags.lof


def test_set_contamination_reselects_without_rescoring(detector):
    scores_before = detector.records[["score_isolation", "score_lof"]]
    flags = detector.set_contamination(20)
    assert flags.contamination == pytest.approx(0.2)
    assert len(flags.isolation) == 20
    assert len(flags.lof) == 20
    assert detector.flags is flags
    pd.testing.assert_frame_equal(detector.records[["score_isolation", "score_lof"]], scores_before)


def test_set_contamination_full_range(detector):
    assert len(detector.set_contamination(100).isolation) == 100
    assert len(detector.set_contamination(0.5).lof) == 1


@pytest.mark.parametrize("percent", [0, -5, 100.5, float("nan"), "5", True])
def test_invalid_contamination_is_rejected(detector, percent):
    flags_before = detector.flags
    with pytest.raises(InvalidParameterError):
        detector.set_contamination(percent)
    assert detector.flags is flags_before


def test_contamination_from_percent():
    assert contamination_from_percent(5) == pytest.approx(0.05)
    assert contamination_from_percent(100) == 1.0


def test_flags_for_both_methods_share_one_contamination(detector):
    detector.set_contamination(10)
    flags = detector.flags
    assert len(flags.for_method(ScoreMethod.ISOLATION)) == len(flags.for_method("scoreB")) == 10


def test_statistics_follow_current_flags(detector):
    detector.set_contamination(12)
    stats = detector.get_statistics("scoreA")
    assert isinstance(stats, AnomalyStatistics)
    assert stats.count == 12
    assert stats.percentage == pytest.approx(12.0)
    # Reading statistics leaves the flags alone
    assert len(detector.flags.isolation) == 12


def test_statistics_reject_unknown_method(detector):
    with pytest.raises(InvalidParameterError):
        detector.get_statistics("forest")


def test_detector_rejects_malformed_passengers():
    raw = pd.DataFrame([make_passenger(1), make_passenger(2, Sex=None)])
    with pytest.raises(MalformedInputError):
        AnomalyDetector(raw)


def test_detector_on_empty_dataset():
    detector = AnomalyDetector(pd.DataFrame(columns=["PassengerId", "Pclass", "Sex"]))
    assert detector.flags.isolation == frozenset()
    stats = detector.get_statistics(ScoreMethod.LOF)
    assert stats.count == 0
    assert stats.percentage == 0.0


def test_detector_on_sample_file(sample_file):
    detector = AnomalyDetector(load_passengers(sample_file))
    # ceil(0.05 * 27) == 2
    assert len(detector.flags.isolation) == 2
    assert 259 in detector.flags.isolation
    assert 259 in detector.flags.lof


def test_detector_on_empty_record_list():
    """An empty list of records gives an empty but usable detector."""
    detector = AnomalyDetector(pd.DataFrame([]))
    assert len(detector.records) == 0
    assert detector.flags.lof == frozenset()
    assert len(detector.set_contamination(20).isolation) == 0
    stats = detector.get_statistics("scoreA")
    assert stats.count == 0
    assert stats.percentage == 0.0
    assert stats.distributions["title"].anomalies == {}
