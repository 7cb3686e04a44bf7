"""
Configuration settings for the anomaly detection runner.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
from pathlib import Path
from datetime import datetime

from ..exceptions import InvalidParameterError
from ..outlier.detector import DEFAULT_CONTAMINATION_PERCENT, contamination_from_percent
from ..outlier.methods import ScoreMethod


@dataclass
class RunnerConfig:
    """Configuration for the anomaly detection runner."""

    # Data paths
    data_file: Path = field(default_factory=lambda: Path("data/titanic.csv"))

    # Output paths
    output_dir: Path = field(default_factory=lambda: Path("output"))
    passengers_output_file: str = "passengers_scored.csv"
    statistics_output_file: str = "anomaly_statistics.json"
    save_outputs: bool = True

    # Detection settings
    contamination_percent: float = DEFAULT_CONTAMINATION_PERCENT
    methods: List[str] = field(default_factory=lambda: [m.value for m in ScoreMethod])
    validate_data: bool = True

    # Logging settings
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def __post_init__(self):
        """Post-initialization validation and setup."""
        self.data_file = Path(self.data_file)
        self.output_dir = Path(self.output_dir)

        # Raises InvalidParameterError for out-of-range values
        contamination_from_percent(self.contamination_percent)
        if not self.methods:
            raise InvalidParameterError("At least one scoring method is required")
        self.methods = [ScoreMethod.parse(m).value for m in self.methods]

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise InvalidParameterError(f"Unknown log level: {self.log_level}")

        if self.save_outputs:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            if self.log_file is None:
                self.log_file = self.output_dir / f"anomaly_run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    @property
    def contamination(self) -> float:
        return contamination_from_percent(self.contamination_percent)

    def get_passengers_output_path(self) -> Path:
        """Get the full path for the scored passengers output."""
        return self.output_dir / self.passengers_output_file

    def get_statistics_output_path(self) -> Path:
        """Get the full path for the statistics report."""
        return self.output_dir / self.statistics_output_file

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for logging."""
        return {
            'data_file': str(self.data_file),
            'output_dir': str(self.output_dir),
            'save_outputs': self.save_outputs,
            'contamination_percent': self.contamination_percent,
            'methods': list(self.methods),
            'validate_data': self.validate_data,
            'log_level': self.log_level,
            'log_file': str(self.log_file) if self.log_file else None,
        }
