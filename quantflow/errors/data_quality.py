"""
Data quality error classifications for price series processing.

These exceptions describe input that is well-formed but not usable as-is,
so the caller can react (request more history, substitute fallback data).
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that the caller can handle."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InsufficientHistoryError(DataQualityError):
    """Not enough price history for every indicator to produce a value."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count
