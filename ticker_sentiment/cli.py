"""Command-line interface for ticker sentiment with rich output."""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from dotenv import load_dotenv
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .exceptions import ConfigurationError, NewsFetchError, TickerSentimentError
from .logging import setup_logging
from .research.config import ResearchConfig, load_research_config
from .research.news_analyzer import TickerSentimentAnalyzer, TickerSentimentReport
from .research.sentiment.models import SentimentLabel, SignalLabel
from .research.sentiment.sentiment_aggregator import label_from_score

# Global console instance
console = Console()

SIGNAL_STYLES = {
    SignalLabel.BUY: "bold green",
    SignalLabel.SELL: "bold red",
    SignalLabel.NEUTRAL: "bold yellow",
}

LABEL_STYLES = {
    SentimentLabel.POSITIVE: "green",
    SentimentLabel.NEGATIVE: "red",
    SentimentLabel.NEUTRAL: "dim",
}


def print_error(message: str) -> None:
    """Print error message with red color."""
    console.print(f"[bold red]✗[/bold red] {message}")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[cyan]ℹ[/cyan] {message}")


def print_report(report: TickerSentimentReport, max_articles: int = 10) -> None:
    """Render a report as a summary panel, breakdown and headline table."""
    result = report.result
    summary = result.summary
    style = SIGNAL_STYLES[summary.label]

    console.print(
        Panel(
            f"[{style}]{summary.label.value.upper()}[/{style}]\n"
            f"Confidence: [bold]{summary.confidence}[/bold]/100\n"
            f"Average compound: {summary.avg_compound:+.3f}",
            title=f"[bold cyan]{report.ticker}[/bold cyan] [dim]({report.company})[/dim]",
            border_style="cyan",
            padding=(1, 2),
        )
    )

    if result.is_empty:
        print_info("No recent articles found")
        return

    breakdown = result.breakdown
    console.print(
        f"[green]{breakdown.positive} positive[/green]  "
        f"[dim]{breakdown.neutral} neutral[/dim]  "
        f"[red]{breakdown.negative} negative[/red]"
    )

    table = Table(box=box.SIMPLE_HEAVY, show_lines=False)
    table.add_column("Published", style="dim", no_wrap=True)
    table.add_column("Source")
    table.add_column("Headline")
    table.add_column("Score", justify="right")

    for article in result.articles[:max_articles]:
        label_style = LABEL_STYLES[article.sentiment_label]
        published = article.published_at.strftime("%Y-%m-%d %H:%M") if article.published_at else "-"
        table.add_row(
            published,
            article.source,
            article.title,
            f"[{label_style}]{article.sentiment_score:+.3f}[/{label_style}]",
        )
    console.print(table)


def cmd_analyze(args: argparse.Namespace, config: ResearchConfig) -> int:
    """Fetch news for a ticker and print its sentiment signal."""
    if args.page_size:
        config.news.page_size = args.page_size

    analyzer = TickerSentimentAnalyzer(config)
    report = asyncio.run(analyzer.analyze(args.ticker, args.company))

    if args.json:
        console.print_json(json.dumps(report.to_dict()))
    else:
        print_report(report, max_articles=args.max_articles)
    return 0


def cmd_score(args: argparse.Namespace, config: ResearchConfig) -> int:
    """Score a single text and print its compound score and label."""
    from .research.sentiment.vader_analyzer import VADERSentimentAnalyzer

    compound = VADERSentimentAnalyzer().compound(args.text)
    label = label_from_score(
        compound,
        config.sentiment.positive_threshold,
        config.sentiment.negative_threshold,
    )
    style = LABEL_STYLES[label]
    console.print(f"[{style}]{label.value}[/{style}] {compound:+.4f}")
    return 0


def cmd_serve(args: argparse.Namespace, config: ResearchConfig) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from .api.server import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    print_info(f"Ticker sentiment server listening on http://{host}:{port}")
    uvicorn.run(create_app(config), host=host, port=port, log_level=config.logging.log_level.lower())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ticker-sentiment",
        description="News sentiment signals for stock tickers",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--config", default=None, help="YAML config file (defaults to environment variables)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Analyze recent news sentiment for a ticker")
    analyze.add_argument("ticker", help="Ticker symbol, e.g. AAPL")
    analyze.add_argument("--company", default=None, help="Company name to search for (defaults to the ticker)")
    analyze.add_argument("--page-size", type=int, default=None, help="Number of articles to fetch (max 100)")
    analyze.add_argument("--max-articles", type=int, default=10, help="Headlines to show in the table")
    analyze.add_argument("--json", action="store_true", help="Print the raw JSON result")
    analyze.set_defaults(func=cmd_analyze)

    score = subparsers.add_parser("score", help="Score the sentiment of a single text")
    score.add_argument("text", help="Text to score")
    score.set_defaults(func=cmd_score)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()
    try:
        config = load_research_config(args.config)
    except FileNotFoundError as e:
        print_error(str(e))
        return 1
    if args.log_level:
        config.logging.log_level = args.log_level
    setup_logging(config.logging)

    try:
        return args.func(args, config)
    except ConfigurationError as e:
        print_error(f"Configuration error: {e}")
        return 1
    except NewsFetchError as e:
        print_error(f"News fetch failed ({e.status_code}): {e.detail or e}")
        return 1
    except TickerSentimentError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print_error("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
