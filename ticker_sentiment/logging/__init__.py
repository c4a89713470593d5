"""Logging setup, structured formatting and event helpers."""

from .logger import (
    PerformanceContext,
    StructuredFormatter,
    log_performance_metric,
    log_signal_summary,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "log_signal_summary",
    "log_performance_metric",
    "PerformanceContext",
    "StructuredFormatter",
]
