"""
Signal value objects.

A Signal is computed fresh for every call, never mutated and never persisted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .indicators import IndicatorSnapshot


class SignalAction(str, Enum):
    """Recommended action."""
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class Factor(str, Enum):
    """Contributing factors, in narrative order."""
    TREND = "trend"
    MOMENTUM = "momentum"
    CONVERGENCE = "convergence"


@dataclass(frozen=True)
class FactorScores:
    """Directional factor scores, each in [-1, 1]."""
    trend: float
    momentum: float
    convergence: float
    composite: float

    def get(self, factor: Factor) -> float:
        return getattr(self, factor.value)

    def to_dict(self) -> dict[str, float]:
        return {
            "trend": self.trend,
            "momentum": self.momentum,
            "convergence": self.convergence,
            "composite": self.composite,
        }


@dataclass(frozen=True)
class Signal:
    """Composite trading recommendation."""
    action: SignalAction
    confidence: int                      # 0-100 inclusive
    summary: str
    bullet_points: tuple[str, ...]       # trend, momentum, convergence
    indicators: IndicatorSnapshot
    scores: FactorScores
    dominant_factor: Factor

    def to_dict(self) -> dict[str, Any]:
        """Structural mapping consumed by the presentation layer."""
        return {
            "action": self.action.value,
            "confidence": self.confidence,
            "summary": self.summary,
            "bulletPoints": list(self.bullet_points),
            "indicators": self.indicators.to_dict(),
            "scores": self.scores.to_dict(),
            "dominantFactor": self.dominant_factor.value,
        }
