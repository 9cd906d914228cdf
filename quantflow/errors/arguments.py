"""
Argument and configuration errors.

These represent caller bugs: a non-positive window, a fast MACD period that is
not shorter than the slow one, an empty series. They are never retried.
"""

from typing import Any, Optional, Dict


class InvalidArgumentError(ValueError):
    """Malformed argument or configuration value."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.argument = argument
        self.value = value
        self.context = context or {}
        self.recoverable = False


def require_positive_int(value: Any, argument: str) -> int:
    """
    Check that a window or period is a positive integer.

    Raises:
        InvalidArgumentError: If the value is not an int or is <= 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{argument} must be an integer, got {type(value).__name__}",
            argument=argument,
            value=value,
        )
    if value <= 0:
        raise InvalidArgumentError(f"{argument} must be positive, got {value}", argument=argument, value=value)
    return value
