"""
Structured logging for voice form filling.
Tracks dialogue phases per field.
"""

import logging
import sys
from typing import Any, Optional


class SessionLogger:
    """Custom logger for the dialogue with phase tracking."""

    def __init__(self, name: str = "VoiceFormFiller", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Remove existing handlers
        self.logger.handlers.clear()

        # Console handler with formatting
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

    def phase(self, phase: str, message: str, index: Optional[int] = None):
        """Log a dialogue phase transition."""
        where = f" #{index + 1}" if index is not None else ""
        self.logger.info(f"[{phase.upper()}{where}] {message}")

    def set_level(self, level: str):
        """Change verbosity."""
        self.logger.setLevel(getattr(logging, level.upper()))

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)

    def success(self, message: str):
        """Log success message."""
        self.logger.info(f"[OK] {message}")

    def metric(self, name: str, value: Any):
        """Log a metric."""
        self.logger.info(f"[METRIC] {name}: {value}")


# Global logger instance
logger = SessionLogger()
