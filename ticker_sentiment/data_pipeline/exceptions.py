"""Custom exceptions for the data pipeline module."""

from typing import Optional


class DataPipelineError(Exception):
    """Base exception for data pipeline errors."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class APIRateLimitError(DataPipelineError):
    """Raised when API rate limit is exceeded."""

    pass


class DataValidationError(DataPipelineError):
    """Raised when fetched data fails validation."""

    pass
