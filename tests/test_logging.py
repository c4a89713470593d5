"""Tests for logging helpers."""

import json
import logging

from ticker_sentiment.logging.logger import (
    PerformanceContext,
    StructuredFormatter,
    log_signal_summary,
    setup_logging,
)
from ticker_sentiment.research.config import LoggingConfig
from ticker_sentiment.research.sentiment.sentiment_aggregator import aggregate
from tests.utils import create_scored_batch


def test_structured_formatter_includes_extra_fields():
    record = logging.LogRecord("ticker_sentiment.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    record.ticker = "AAPL"

    data = json.loads(StructuredFormatter().format(record))

    assert data["message"] == "hello world"
    assert data["level"] == "INFO"
    assert data["logger"] == "ticker_sentiment.test"
    assert data["ticker"] == "AAPL"
    assert "msg" not in data


def test_log_signal_summary(caplog):
    articles, scorer = create_scored_batch([0.5, -0.2, 0.0])
    result = aggregate(articles, scorer)
    logger = logging.getLogger("ticker_sentiment.test.signal")

    with caplog.at_level(logging.INFO, logger="ticker_sentiment.test.signal"):
        log_signal_summary(logger, "MSFT", result, company="Microsoft")

    record = caplog.records[-1]
    assert record.getMessage().startswith("SIGNAL: MSFT | BUY")
    assert record.positive == 1
    assert record.negative == 1
    assert record.neutral == 1
    assert record.company == "Microsoft"


def test_performance_context_logs_duration(caplog):
    logger = logging.getLogger("ticker_sentiment.test.perf")

    with caplog.at_level(logging.DEBUG, logger="ticker_sentiment.test.perf"):
        with PerformanceContext(logger, "unit-op") as perf:
            sum(range(100))

    assert perf.elapsed is not None and perf.elapsed >= 0
    record = caplog.records[-1]
    assert record.getMessage().startswith("PERFORMANCE: unit-op")
    assert record.operation == "unit-op"


def test_setup_logging_writes_json_file(tmp_path):
    log_file = tmp_path / "logs" / "sentiment.log"
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    try:
        setup_logging(LoggingConfig(log_level="INFO", log_file=str(log_file), log_json_format=True, log_use_rich=False))
        logging.getLogger("ticker_sentiment.test.file").info("written", extra={"ticker": "TSLA"})
        for handler in root_logger.handlers:
            handler.flush()
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)

    lines = [json.loads(line) for line in log_file.read_text().splitlines()]
    written = [line for line in lines if line["message"] == "written"]
    assert written and written[0]["ticker"] == "TSLA"
