"""
Error classification for the indicator and signal engine.

Two families matter to callers: malformed input or configuration
(``InvalidArgumentError``, a caller bug that should fail fast) and valid but
too-short history (``InsufficientHistoryError``, which the caller resolves by
fetching more data or substituting fallback data).
"""

from .arguments import InvalidArgumentError, require_positive_int
from .data_quality import (
    DataQualityError,
    InsufficientHistoryError,
)
from .payload import SignalValidationError

__all__ = [
    # Caller errors
    "InvalidArgumentError",
    "require_positive_int",
    # Data Quality Errors
    "DataQualityError",
    "InsufficientHistoryError",
    # Outgoing payloads
    "SignalValidationError",
]
