#!/usr/bin/env python3
"""
Passenger Anomaly Detection Runner

Scores every passenger with the two rule-based methods, flags the top
contamination fraction under each and reports how the anomalies compare
with the remaining passengers.

Usage:
    python run_anomaly_detection.py [options]

Examples:
    # Run with default settings (5% contamination, both methods)
    python run_anomaly_detection.py --data-file titanic.csv

    # Flag 10% of passengers, report only the LOF-style method
    python run_anomaly_detection.py --data-file titanic.csv --contamination 10 --method lof

    # Log results without writing output files
    python run_anomaly_detection.py --data-file titanic.csv --no-save
"""

import argparse
import sys
from pathlib import Path

from anomaly_voyage.exceptions import AnomalyVoyageError
from anomaly_voyage.outlier.methods import ScoreMethod
from anomaly_voyage.runner import AnomalyPipeline, RunnerConfig
from anomaly_voyage.utils.logger import get_logger, setup_logging

# Command-line names for the two scoring methods
METHOD_ALIASES = {"isolation": ScoreMethod.ISOLATION.value, "lof": ScoreMethod.LOF.value}


def run_anomaly_detection(
    data_file: str,
    contamination: float = 5.0,
    methods: list = None,
    output_dir: str = "output",
    save_outputs: bool = True,
    log_level: str = "INFO"
) -> bool:
    """
    Run anomaly detection for a passenger file.

    Args:
        data_file: Passenger CSV file
        contamination: Contamination percentage in (0, 100]
        methods: Scoring methods to report (both when None)
        output_dir: Directory for scored passengers and the statistics report
        save_outputs: Whether to write output files
        log_level: Logging level

    Returns:
        True if the run succeeded
    """
    logger = get_logger("anomaly_voyage.cli")

    try:
        config = RunnerConfig(
            data_file=Path(data_file),
            output_dir=Path(output_dir),
            contamination_percent=contamination,
            methods=[METHOD_ALIASES.get(m, m) for m in methods] if methods else [m.value for m in ScoreMethod],
            save_outputs=save_outputs,
            log_level=log_level,
        )
        results = AnomalyPipeline(config).run()
    except (AnomalyVoyageError, FileNotFoundError) as e:
        logger.log_error_with_context(e, "Anomaly detection failed")
        return False

    logger.info("📊 Anomaly Summary:")
    logger.info(f"  Passengers scored: {len(results['passengers']):,}")
    for method, stats in results['statistics'].items():
        logger.info(f"  {ScoreMethod.parse(method).label}: {stats.count} anomalies ({stats.percentage:.1f}%)")
        logger.info(
            f"    Average fare: {stats.averages['fare'].anomalies:.2f} vs {stats.averages['fare'].normal:.2f}"
        )
        logger.info(
            f"    Average age: {stats.averages['age'].anomalies:.1f} vs {stats.averages['age'].normal:.1f}"
        )

    return True


def main():
    """Main function."""
    parser = argparse.ArgumentParser(description="Run passenger anomaly detection")
    parser.add_argument("--data-file", required=True,
                       help="Passenger CSV file with a header row")
    parser.add_argument("--contamination", type=float, default=5.0,
                       help="Percentage of passengers to flag, in (0, 100]")
    parser.add_argument("--method", action="append", dest="methods",
                       choices=["scoreA", "scoreB", "isolation", "lof"],
                       help="Scoring method to report (repeatable, default: both)")
    parser.add_argument("--output-dir", default="output",
                       help="Directory for output files")
    parser.add_argument("--no-save", action="store_true",
                       help="Do not write output files")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                       help="Logging level")

    args = parser.parse_args()

    # Setup logging FIRST before any other operations
    setup_logging(level=args.log_level, console_output=True, file_output=not args.no_save)

    success = run_anomaly_detection(
        data_file=args.data_file,
        contamination=args.contamination,
        methods=args.methods,
        output_dir=args.output_dir,
        save_outputs=not args.no_save,
        log_level=args.log_level
    )
    if not success:
        sys.exit(1)


if __name__ == "__main__":
    main()
