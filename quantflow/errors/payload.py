"""Errors raised while validating outgoing signal payloads."""

from typing import Optional, Dict, Any


class SignalValidationError(Exception):
    """Signal payload does not match the published schema."""

    def __init__(self, message: str, field: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.field = field
        self.context = context or {}
        self.recoverable = False
