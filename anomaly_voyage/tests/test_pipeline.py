"""Tests for the anomaly detection runner."""

import json

import pandas as pd
import pytest

from anomaly_voyage.exceptions import InvalidParameterError, MalformedInputError
from anomaly_voyage.outlier.methods import ScoreMethod
from anomaly_voyage.runner import AnomalyPipeline, RunnerConfig
from anomaly_voyage.tests.helpers import make_passenger


def test_pipeline_writes_outputs(sample_file, tmp_path):
    config = RunnerConfig(data_file=sample_file, output_dir=tmp_path / "out", contamination_percent=10)
    results = AnomalyPipeline(config).run()

    assert len(results["passengers"]) == 27
    assert set(results["statistics"]) == {"scoreA", "scoreB"}
    assert results["statistics"]["scoreA"].count == 3

    scored = pd.read_csv(config.get_passengers_output_path())
    assert scored["is_anomaly_isolation"].sum() == 3
    report = json.loads(config.get_statistics_output_path().read_text())
    assert report["total_passengers"] == 27
    assert report["methods"]["scoreB"]["count"] == 3


def test_pipeline_with_loaded_passengers_and_no_save(make_population, tmp_path):
    config = RunnerConfig(output_dir=tmp_path / "out", save_outputs=False, methods=["scoreB"])
    results = AnomalyPipeline(config, passengers=make_population(40)).run()
    assert list(results["statistics"]) == ["scoreB"]
    assert results["statistics"]["scoreB"].count == 2
    assert not (tmp_path / "out").exists()


def test_pipeline_propagates_malformed_input(tmp_path):
    raw = pd.DataFrame([make_passenger(1, Pclass=None)])
    config = RunnerConfig(output_dir=tmp_path, save_outputs=False)
    with pytest.raises(MalformedInputError):
        AnomalyPipeline(config, passengers=raw).run()


@pytest.mark.parametrize("overrides", [
    {"contamination_percent": 0},
    {"contamination_percent": 150},
    {"methods": ["median"]},
    {"methods": ["isolation"]},
    {"methods": []},
    {"log_level": "LOUD"},
])
def test_config_rejects_invalid_values(overrides, tmp_path):
    with pytest.raises(InvalidParameterError):
        RunnerConfig(output_dir=tmp_path, save_outputs=False, **overrides)


def test_config_to_dict(tmp_path):
    config = RunnerConfig(output_dir=tmp_path, save_outputs=False, methods=[ScoreMethod.ISOLATION])
    assert config.to_dict()["methods"] == ["scoreA"]
    assert config.contamination == pytest.approx(0.05)
