"""HTTP API for ticker sentiment."""
