"""
Signal synthesis module.

Blends trend, momentum and convergence reads into a single BUY/SELL/HOLD
recommendation with a confidence score and a plain-language rationale.
"""

from .synthesizer import SignalSynthesizer, generate_signal

__all__ = ["SignalSynthesizer", "generate_signal"]
