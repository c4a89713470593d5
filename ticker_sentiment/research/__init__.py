"""News research: sentiment scoring, aggregation and orchestration."""
