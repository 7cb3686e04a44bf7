"""
Main pipeline for orchestrating passenger anomaly detection.
"""

import json
import pandas as pd
from typing import Dict, Any, Optional

from .config import RunnerConfig
from ..data.loader import load_passengers
from ..insights.statistics import AnomalyStatistics
from ..outlier.detector import AnomalyDetector
from ..utils.logger import AnomalyLogger
from ..utils.pipeline_decorators import pipeline_step

TOTAL_STEPS = 4


class AnomalyPipeline:
    """Load passengers, score them, flag anomalies and report statistics."""

    def __init__(self, config: RunnerConfig, passengers: Optional[pd.DataFrame] = None):
        """
        Args:
            config: Runner configuration
            passengers: Already loaded passengers; read from config.data_file when omitted
        """
        self.config = config
        self.logger = AnomalyLogger(__name__, config.log_level, config.log_file)

        self.passengers = passengers
        self.detector: Optional[AnomalyDetector] = None
        self.statistics: Dict[str, AnomalyStatistics] = {}

    def run(self) -> Dict[str, Any]:
        """
        Run the complete pipeline.

        Returns:
            Dictionary with the enriched passengers and statistics per method
        """
        self.logger.info("🚀 Starting passenger anomaly detection")
        self.logger.info(f"Configuration: {self.config.to_dict()}")

        try:
            self._load_passengers()
            self._detect_anomalies()
            self._summarize()
            if self.config.save_outputs:
                self._save_outputs()
        except Exception as e:
            self.logger.log_error_with_context(e, "anomaly detection pipeline")
            raise

        self.logger.info("✅ Anomaly detection completed")
        return {
            'passengers': self.detector.records,
            'statistics': self.statistics,
        }

    @pipeline_step("Loading passengers", 1, TOTAL_STEPS)
    def _load_passengers(self):
        if self.passengers is None:
            self.passengers = load_passengers(self.config.data_file, validate=self.config.validate_data)
            if self.config.validate_data:
                self.logger.log_validation_result(str(self.config.data_file), True)
        else:
            self.logger.info(f"Using {len(self.passengers):,} preloaded passengers")

    @pipeline_step("Scoring and selecting anomalies", 2, TOTAL_STEPS)
    def _detect_anomalies(self):
        self.detector = AnomalyDetector(
            self.passengers,
            contamination_percent=self.config.contamination_percent,
            validate=self.config.validate_data,
        )

    @pipeline_step("Summarizing anomalies", 3, TOTAL_STEPS)
    def _summarize(self):
        self.statistics = {
            method: self.detector.get_statistics(method) for method in self.config.methods
        }
        for method, stats in self.statistics.items():
            self.logger.info(
                f"📊 {method}: {stats.count} anomalies ({stats.percentage:.1f}%), "
                f"survival {stats.survival_rate.anomalies:.1f}% vs {stats.survival_rate.normal:.1f}%"
            )

    @pipeline_step("Saving outputs", 4, TOTAL_STEPS)
    def _save_outputs(self):
        passengers_path = self.config.get_passengers_output_path()
        self.detector.records.to_csv(passengers_path, index=False)
        self.logger.info(f"💾 Scored passengers saved to {passengers_path}")

        statistics_path = self.config.get_statistics_output_path()
        report = {
            'contamination_percent': self.config.contamination_percent,
            'total_passengers': len(self.detector.records),
            'methods': {method: stats.to_dict() for method, stats in self.statistics.items()},
        }
        with open(statistics_path, 'w') as f:
            json.dump(report, f, indent=2)
        self.logger.info(f"💾 Statistics saved to {statistics_path}")
