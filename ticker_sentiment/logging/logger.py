"""Structured logging, performance timing and signal event logging."""

import json
import logging
import logging.handlers
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import psutil
from loguru import logger as loguru_logger
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from ..research.config import LoggingConfig
    from ..research.sentiment.models import AggregationResult

_RESERVED_RECORD_KEYS = {
    "name",
    "msg",
    "args",
    "created",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "thread",
    "threadName",
    "taskName",
    "exc_info",
    "exc_text",
    "stack_info",
}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields passed through ``extra=``
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class PerformanceContext:
    """Context manager for performance timing."""

    def __init__(self, logger: logging.Logger, operation: str, log_memory: bool = True):
        """Initialize performance context.

        Args:
            logger: Logger instance
            operation: Operation name
            log_memory: Whether to log memory usage
        """
        self.logger = logger
        self.operation = operation
        self.log_memory = log_memory
        self.start_time: Optional[float] = None
        self.start_memory: Optional[float] = None
        self.elapsed: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        if self.log_memory:
            self.start_memory = _rss_mb()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is None:
            return False
        self.elapsed = time.perf_counter() - self.start_time

        memory_mb = _rss_mb() if self.log_memory else None
        memory_delta_mb = None
        if memory_mb is not None and self.start_memory is not None:
            memory_delta_mb = memory_mb - self.start_memory

        log_performance_metric(
            self.logger,
            operation=self.operation,
            duration_seconds=self.elapsed,
            memory_mb=memory_mb,
            memory_delta_mb=memory_delta_mb,
        )
        return False


def _rss_mb() -> Optional[float]:
    try:
        return psutil.Process(os.getpid()).memory_info().rss / 1024 / 1024
    except psutil.Error:
        return None


def setup_logging(config: "LoggingConfig", use_json: Optional[bool] = None, use_rich: Optional[bool] = None) -> None:
    """Setup logging configuration.

    Args:
        config: LoggingConfig with level and output settings
        use_json: Whether to use JSON format for file logs (defaults to config value)
        use_rich: Whether to use rich for console output (defaults to config value)
    """
    if use_json is None:
        use_json = config.log_json_format
    if use_rich is None:
        use_rich = config.log_use_rich

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    console_handler: logging.Handler
    if use_rich:
        console_handler = RichHandler(rich_tracebacks=True, show_path=False, console=Console(stderr=True))
        console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        )
    console_handler.setLevel(log_level)

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)

    loguru_logger.remove()
    loguru_logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True,
    )

    if config.log_file:
        log_file = Path(config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5)  # 10MB
        file_handler.setLevel(logging.DEBUG)
        file_formatter: Union[StructuredFormatter, logging.Formatter]
        if use_json:
            file_formatter = StructuredFormatter()
        else:
            file_formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        loguru_logger.add(
            str(log_file.with_suffix(".loguru.log")),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation="10 MB",
            retention=5,
            compression="zip",
        )

    # aiohttp and uvicorn access logs are noisy at DEBUG
    logging.getLogger("aiohttp").setLevel(max(log_level, logging.INFO))

    logging.info(f"Logging initialized. Level: {config.log_level}, file: {config.log_file}, JSON: {use_json}, Rich: {use_rich}")


def log_signal_summary(
    logger: logging.Logger,
    ticker: str,
    result: "AggregationResult",
    **kwargs,
) -> None:
    """Log the outcome of an aggregation as a structured SIGNAL event.

    Args:
        logger: Logger instance
        ticker: Ticker symbol
        result: Aggregation result to summarize
        **kwargs: Additional fields (company, query, etc.)
    """
    summary = result.summary
    breakdown = result.breakdown
    signal_data = {
        "ticker": ticker,
        "signal": summary.label.value,
        "confidence": summary.confidence,
        "avg_compound": summary.avg_compound,
        "article_count": len(result.articles),
        "positive": breakdown.positive,
        "neutral": breakdown.neutral,
        "negative": breakdown.negative,
        **kwargs,
    }

    logger.info(
        f"SIGNAL: {ticker} | {summary.label.value.upper()} | Confidence: {summary.confidence} | "
        f"Avg: {summary.avg_compound:+.4f} | Articles: {len(result.articles)} "
        f"({breakdown.positive}+/{breakdown.neutral}~/{breakdown.negative}-)",
        extra=signal_data,
    )


def log_performance_metric(
    logger: logging.Logger,
    operation: str,
    duration_seconds: float,
    memory_mb: Optional[float] = None,
    memory_delta_mb: Optional[float] = None,
    **kwargs,
) -> None:
    """Log performance metrics (timing, memory).

    Args:
        logger: Logger instance
        operation: Operation name
        duration_seconds: Duration in seconds
        memory_mb: Current memory usage in MB
        memory_delta_mb: Memory delta in MB
        **kwargs: Additional performance metrics
    """
    metric_data = {
        "operation": operation,
        "duration_seconds": duration_seconds,
        "memory_mb": memory_mb,
        "memory_delta_mb": memory_delta_mb,
        **kwargs,
    }

    msg = f"PERFORMANCE: {operation} | Duration: {duration_seconds:.4f}s"
    if memory_mb is not None:
        msg += f" | Memory: {memory_mb:.2f} MB"
    if memory_delta_mb is not None:
        msg += f" | Memory delta: {memory_delta_mb:+.2f} MB"

    logger.debug(msg, extra=metric_data)
