"""Tests for CLI interface."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI

from ticker_sentiment.cli import build_parser, main
from ticker_sentiment.exceptions import NewsFetchError
from ticker_sentiment.research.news_analyzer import TickerSentimentReport
from ticker_sentiment.research.sentiment.sentiment_aggregator import aggregate
from tests.utils import create_scored_batch


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep CLI runs from reconfiguring the root logger."""
    with patch("ticker_sentiment.cli.setup_logging") as mock_setup:
        yield mock_setup


@pytest.fixture
def buy_report():
    articles, scorer = create_scored_batch([0.8, 0.6, 0.7])
    return TickerSentimentReport(ticker="AAPL", company="Apple", result=aggregate(articles, scorer))


def _patched_analyzer(report=None, error=None):
    analyzer = MagicMock()
    analyzer.analyze = AsyncMock(return_value=report, side_effect=error)
    return patch("ticker_sentiment.cli.TickerSentimentAnalyzer", return_value=analyzer)


class TestParser:
    def test_analyze_arguments(self):
        args = build_parser().parse_args(["analyze", "AAPL", "--company", "Apple", "--json", "--page-size", "20"])
        assert args.ticker == "AAPL"
        assert args.company == "Apple"
        assert args.json is True
        assert args.page_size == 20

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestAnalyzeCommand:
    def test_prints_summary(self, buy_report, capsys):
        with _patched_analyzer(buy_report):
            exit_code = main(["analyze", "AAPL", "--company", "Apple"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "BUY" in out
        assert "79" in out
        assert "3 positive" in out

    def test_prints_json(self, buy_report, capsys):
        with _patched_analyzer(buy_report):
            exit_code = main(["analyze", "AAPL", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["ticker"] == "AAPL"
        assert data["summary"]["label"] == "buy"
        assert data["summary"]["confidence"] == 79

    def test_passes_ticker_and_company(self, buy_report):
        with _patched_analyzer(buy_report) as analyzer_cls:
            main(["analyze", "aapl", "--company", "Apple"])

        analyzer_cls.return_value.analyze.assert_awaited_once_with("aapl", "Apple")

    def test_page_size_overrides_config(self, buy_report):
        with _patched_analyzer(buy_report) as analyzer_cls:
            main(["analyze", "AAPL", "--page-size", "12"])

        config = analyzer_cls.call_args.args[0]
        assert config.news.page_size == 12

    def test_fetch_error_exit_code(self, capsys):
        error = NewsFetchError("NewsAPI error", status_code=401, detail="apiKeyInvalid")
        with _patched_analyzer(error=error):
            exit_code = main(["analyze", "AAPL"])

        assert exit_code == 1
        assert "apiKeyInvalid" in capsys.readouterr().out

    def test_missing_key_exit_code(self, monkeypatch, capsys):
        monkeypatch.delenv("NEWSAPI_KEY", raising=False)

        exit_code = main(["analyze", "AAPL"])

        assert exit_code == 1
        assert "NEWSAPI_KEY" in capsys.readouterr().out

    def test_empty_result(self, capsys):
        report = TickerSentimentReport(ticker="XYZ", company="XYZ", result=aggregate([], MagicMock()))
        with _patched_analyzer(report):
            exit_code = main(["analyze", "XYZ"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "NEUTRAL" in out
        assert "No recent articles found" in out


class TestScoreCommand:
    def test_positive_text(self, capsys):
        exit_code = main(["score", "Great results, investors are happy"])

        assert exit_code == 0
        assert capsys.readouterr().out.startswith("positive")

    def test_neutral_text(self, capsys):
        main(["score", "The market opened at 9:30 AM today."])
        assert capsys.readouterr().out.startswith("neutral")


class TestServeCommand:
    def test_runs_uvicorn(self):
        with patch("uvicorn.run") as mock_run:
            exit_code = main(["serve", "--port", "8123"])

        assert exit_code == 0
        args, kwargs = mock_run.call_args
        assert isinstance(args[0], FastAPI)
        assert kwargs["port"] == 8123


class TestConfigFile:
    def test_missing_config_file(self, tmp_path, capsys):
        exit_code = main(["--config", str(tmp_path / "missing.yaml"), "score", "fine"])

        assert exit_code == 1
        assert "Config file not found" in capsys.readouterr().out

    def test_config_file_used_for_analyze(self, tmp_path, buy_report):
        path = tmp_path / "config.yaml"
        path.write_text("news:\n  page_size: 7\n")

        with _patched_analyzer(buy_report) as analyzer_cls:
            main(["--config", str(path), "analyze", "AAPL"])

        assert analyzer_cls.call_args.args[0].news.page_size == 7
