"""
Standardized logging utilities for the anomaly_voyage package.
Provides consistent logging across loading, scoring and reporting steps.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Dict, Any


class AnomalyLogger:
    """
    Centralized logging for the anomaly_voyage package.

    Features:
    - Hierarchical logging with module names
    - Workflow step tracking
    - File and console output
    - Step timing
    """

    # Global configuration
    _global_config: Dict[str, Any] = {
        'level': 'INFO',
        'log_file': None,
        'console_output': True,
        'file_output': True,
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'date_format': '%Y-%m-%d %H:%M:%S',
        'max_file_size': 10 * 1024 * 1024,  # 10MB
        'backup_count': 5
    }

    # Registry of all loggers
    _loggers: Dict[str, 'AnomalyLogger'] = {}

    def __init__(self, name: str, level: str = None, log_file: Optional[str] = None):
        """
        Initialize the logger

        Args:
            name: Logger name (usually __name__)
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional file path for logging
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self._level = level
        self._log_file = str(log_file) if log_file else None

        self._configure_handlers()

        # Prevent propagation to root logger to avoid duplicate messages
        self.logger.propagate = False

        AnomalyLogger._loggers[name] = self

    def _configure_handlers(self):
        """(Re)build handlers from the instance and global settings"""
        level = self._level or self._global_config['level']
        log_file = self._log_file or self._global_config['log_file']

        self.logger.setLevel(getattr(logging, level.upper()))

        # Clear existing handlers to avoid duplicates
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            self._global_config['format'],
            datefmt=self._global_config['date_format']
        )

        if self._global_config['console_output']:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if self._global_config['file_output'] and log_file:
            self._setup_file_handler(log_file, formatter)

    def _setup_file_handler(self, log_file: str, formatter: logging.Formatter):
        """Setup rotating file handler"""
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=self._global_config['max_file_size'],
            backupCount=self._global_config['backup_count']
        )
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

    # Standard logging methods
    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    # Workflow-specific logging methods
    def log_workflow_step(self, step_name: str, step_number: int, total_steps: int,
                         description: str = ""):
        """Log workflow step information"""
        message = f"Step {step_number}/{total_steps}: {step_name}"
        if description:
            message += f" - {description}"
        self.info(message)

    def log_step_completion(self, step_name: str, duration: float,
                           details: Dict[str, Any] = None):
        """Log step completion with timing and details"""
        message = f"✅ {step_name} completed in {duration:.2f}s"
        if details:
            detail_str = ", ".join([f"{k}: {v}" for k, v in details.items()])
            message += f" - {detail_str}"
        self.info(message)

    def log_data_loading(self, source: str, record_count: int, duration: float):
        """Log data loading information"""
        self.info(f"📂 Loaded {record_count:,} passengers from {source} in {duration:.2f}s")

    def log_validation_result(self, source: str, is_valid: bool, issue_count: int = 0):
        """Log validation results"""
        if is_valid:
            self.info(f"✅ Validation passed for {source}")
        else:
            self.warning(f"⚠️ Validation failed for {source}: {issue_count} issues")

    def log_anomaly_summary(self, method: str, flagged: int, total: int, contamination: float):
        """Log how many passengers a method flagged"""
        self.info(
            f"🚩 {method}: flagged {flagged:,}/{total:,} passengers "
            f"at contamination {contamination:.2%}"
        )

    def log_error_with_context(self, error: Exception, context: str = ""):
        """Log error with context information"""
        message = f"❌ Error in {context}: {str(error)}" if context else f"❌ Error: {str(error)}"
        self.error(message)

    # Configuration methods
    @classmethod
    def configure_global(cls, **kwargs):
        """Configure global logging settings"""
        cls._global_config.update(kwargs)

        # Update existing loggers
        for logger in cls._loggers.values():
            logger._configure_handlers()


def get_logger(name: str = None, level: str = None,
               log_file: Optional[str] = None) -> AnomalyLogger:
    """
    Get or create a logger instance

    Args:
        name: Logger name (defaults to 'anomaly_voyage')
        level: Logging level
        log_file: Optional log file path

    Returns:
        AnomalyLogger instance
    """
    if name is None:
        name = "anomaly_voyage"

    if name in AnomalyLogger._loggers:
        return AnomalyLogger._loggers[name]

    return AnomalyLogger(name, level, log_file)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None,
                  console_output: bool = True, file_output: bool = True):
    """
    Setup global logging configuration

    Args:
        level: Logging level
        log_file: Optional log file path
        console_output: Enable console output
        file_output: Enable file output
    """
    AnomalyLogger.configure_global(
        level=level,
        log_file=str(log_file) if log_file else None,
        console_output=console_output,
        file_output=file_output
    )

    # Also configure the root logger so third-party modules follow the same level
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
