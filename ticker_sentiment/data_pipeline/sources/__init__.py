"""Data source implementations for external APIs."""
