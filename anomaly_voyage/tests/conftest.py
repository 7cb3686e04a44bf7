"""Shared fixtures for the anomaly_voyage tests."""

from pathlib import Path

import pandas as pd
import pytest

from anomaly_voyage.tests.helpers import make_passenger

SAMPLE_FILE = Path(__file__).resolve().parent.parent / "data" / "sample" / "passengers_sample.csv"


@pytest.fixture
def sample_file():
    return SAMPLE_FILE


@pytest.fixture
def raw_passengers():
    """A handful of passengers covering the scoring rules and missing values."""
    return pd.DataFrame([
        make_passenger(1, Name="Braund, Mr. Owen Harris", Age=22.0, SibSp=1, Fare=7.25),
        make_passenger(2, Survived=1, Pclass=1, Sex="female", Name="Ward, Miss. Anna",
                       Age=30.0, Fare=500.0, Cabin="B51", Embarked="C"),
        make_passenger(3, Survived=1, Sex="female", Name="Futrelle, Mrs. Jacques Heath",
                       Age=None, SibSp=1, Parch=0, Fare=53.1, Cabin="C123"),
        make_passenger(4, Name="Sage, Master. Thomas Henry", Age=None, SibSp=8, Parch=2,
                       Fare=69.55, Embarked=None),
        make_passenger(5, Survived=1, Pclass=2, Sex="female", Name="Byles, Dr. Alice",
                       Age=60.0, Fare=None),
    ])


@pytest.fixture
def make_population():
    """Factory for n passengers with distinct fares and a few score ties."""
    def _make(n):
        rows = []
        for i in range(1, n + 1):
            rows.append(make_passenger(
                i,
                Survived=i % 2,
                Pclass=(i % 3) + 1,
                Sex="female" if i % 2 else "male",
                Age=float(20 + (i % 40)),
                Fare=float((i * 7) % 250),
                SibSp=i % 4,
                Parch=i % 3,
                Embarked=["S", "C", "Q"][i % 3],
            ))
        return pd.DataFrame(rows)
    return _make
