"""
Outgoing payload validation module.
"""

from .signal_schema import SIGNAL_SCHEMA, SignalValidator, validate_signal, validate_signals

__all__ = ["SIGNAL_SCHEMA", "SignalValidator", "validate_signal", "validate_signals"]
