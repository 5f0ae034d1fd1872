"""
Structured logging system for resumeats.

Provides centralized logging with optional console and file outputs,
log levels, and metrics tracking for monitoring parse and analysis health.
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics for document extraction and analysis runs.
    """

    def __init__(
        self,
        name: str = "resumeats",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = False,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file (off by default; the core never
                touches the file system unless a caller asks for it)
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()  # Remove existing handlers
        self.logger.propagate = False

        # Metrics tracking
        self._lock = threading.Lock()
        self.metrics = {
            "documents_parsed": 0,
            "extraction_failures": 0,
            "analyses_run": 0,
            "errors_by_type": {},
            "format_success_rate": {},
            "degenerate_inputs": {},
        }

        # Console handler
        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        # File handler
        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"resumeats_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        """Internal logging method with context."""
        if not self.logger.isEnabledFor(level):
            return
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_extraction_attempt(self, doc_format: str):
        """Record an extraction attempt for a document format."""
        with self._lock:
            stats = self.metrics["format_success_rate"].setdefault(
                doc_format, {"attempts": 0, "successes": 0}
            )
            stats["attempts"] += 1

    def record_extraction_success(self, doc_format: str):
        """Record a document that produced text."""
        with self._lock:
            self.metrics["documents_parsed"] += 1
            if doc_format in self.metrics["format_success_rate"]:
                self.metrics["format_success_rate"][doc_format]["successes"] += 1

    def record_extraction_failure(self, doc_format: str, error_type: str):
        """Record a failed extraction."""
        with self._lock:
            self.metrics["extraction_failures"] += 1

            # Track error types
            if error_type not in self.metrics["errors_by_type"]:
                self.metrics["errors_by_type"][error_type] = 0
            self.metrics["errors_by_type"][error_type] += 1

    def record_analysis(self):
        """Increment the analysis counter."""
        with self._lock:
            self.metrics["analyses_run"] += 1

    def record_degenerate_input(self, kind: str):
        """Record a degenerate input that was scored as zero instead of raising."""
        with self._lock:
            counts = self.metrics["degenerate_inputs"]
            counts[kind] = counts.get(kind, 0) + 1

    def get_metrics(self) -> dict:
        """Return a snapshot of current metrics."""
        with self._lock:
            metrics_copy = json.loads(json.dumps(self.metrics))

        # Calculate success rates
        for doc_format, stats in metrics_copy["format_success_rate"].items():
            if stats["attempts"] > 0:
                stats["success_rate"] = round(
                    stats["successes"] / stats["attempts"], 3
                )

        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        parsed = metrics["documents_parsed"]
        attempts = sum(s["attempts"] for s in metrics["format_success_rate"].values())
        overall_rate = 0
        if attempts > 0:
            overall_rate = round(parsed / attempts * 100, 1)

        self.info("=== Analysis Session Metrics ===")
        self.info(f"Analyses: {metrics['analyses_run']}")
        self.info(f"Documents: {parsed}/{attempts} ({overall_rate}% extracted)")

        if metrics["format_success_rate"]:
            self.info("Format Success Rates:")
            for doc_format, stats in metrics["format_success_rate"].items():
                rate = stats.get("success_rate", 0) * 100
                self.info(f"  {doc_format}: {stats['successes']}/{stats['attempts']} ({rate:.1f}%)")

        if metrics["errors_by_type"]:
            self.info("Error Types:")
            for error_type, count in metrics["errors_by_type"].items():
                self.info(f"  {error_type}: {count}")

        if metrics["degenerate_inputs"]:
            self.info("Degenerate Inputs:")
            for kind, count in metrics["degenerate_inputs"].items():
                self.info(f"  {kind}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "resumeats",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
