"""JSON schema validation for the signal payload handed to the presentation layer."""

import math
from typing import Any

import structlog

from ..errors import SignalValidationError

logger = structlog.get_logger(__name__)


SNAPSHOT_FIELDS = ["short", "long", "rsi", "macd", "macdSignal", "histogram", "price"]

# Signal JSON schema as produced by Signal.to_dict()
SIGNAL_SCHEMA = {
    "type": "object",
    "required": ["action", "confidence", "summary", "bulletPoints", "indicators"],
    "properties": {
        "action": {
            "type": "string",
            "enum": ["BUY", "SELL", "HOLD"],
            "description": "Recommended action"
        },
        "confidence": {
            "type": "integer",
            "minimum": 0,
            "maximum": 100,
            "description": "Composite conviction 0-100"
        },
        "summary": {
            "type": "string",
            "minLength": 1,
            "description": "One-sentence rationale naming the dominant factor"
        },
        "bulletPoints": {
            "type": "array",
            "items": {"type": "string"},
            "minItems": 3,
            "maxItems": 3,
            "description": "Trend, momentum and convergence reads, in that order"
        },
        "indicators": {
            "type": "object",
            "required": SNAPSHOT_FIELDS,
            "properties": {
                "short": {"type": "number", "description": "Latest short SMA"},
                "long": {"type": "number", "description": "Latest long SMA"},
                "rsi": {"type": "number", "minimum": 0, "maximum": 100, "description": "Latest RSI"},
                "macd": {"type": "number", "description": "Latest MACD line"},
                "macdSignal": {"type": "number", "description": "Latest MACD signal line"},
                "histogram": {"type": "number", "description": "Latest MACD histogram"},
                "price": {"type": "number", "minimum": 0, "description": "Latest price"}
            },
            "additionalProperties": False
        },
        "scores": {
            "type": "object",
            "description": "Factor scores, each in [-1, 1]"
        },
        "dominantFactor": {
            "type": "string",
            "enum": ["trend", "momentum", "convergence"],
            "description": "Factor with the largest weighted contribution"
        }
    },
    "additionalProperties": True
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class SignalValidator:
    """Validates signal payloads against the schema."""

    def __init__(self):
        self.logger = logger
        self.schema = SIGNAL_SCHEMA

    def validate_signal(self, signal: dict[str, Any]) -> bool:
        """
        Validate a signal payload against the schema.

        Args:
            signal: Signal dictionary to validate

        Returns:
            True if valid

        Raises:
            SignalValidationError: If validation fails
        """
        try:
            self._validate_required_fields(signal)
            self._validate_field_types(signal)
            self._validate_indicators(signal["indicators"])
            self._validate_scores(signal)
            return True

        except ValueError as e:
            error_msg = f"Signal validation failed: {str(e)}"
            self.logger.error(error_msg, action=signal.get("action"))
            raise SignalValidationError(error_msg, context={"action": signal.get("action")}) from e

    def _validate_required_fields(self, signal: dict[str, Any]) -> None:
        """Validate required fields are present."""
        required_fields = self.schema["required"]
        missing_fields = [field for field in required_fields if field not in signal]

        if missing_fields:
            raise ValueError(f"Missing required fields: {missing_fields}")

    def _validate_field_types(self, signal: dict[str, Any]) -> None:
        """Validate top-level field types and ranges."""
        # Action
        if signal["action"] not in self.schema["properties"]["action"]["enum"]:
            raise ValueError(f"Invalid action: {signal['action']}")

        # Confidence
        confidence = signal["confidence"]
        if isinstance(confidence, bool) or not isinstance(confidence, int) or not (0 <= confidence <= 100):
            raise ValueError(f"confidence must be an integer between 0-100, got: {confidence}")

        # Summary
        if not isinstance(signal["summary"], str) or len(signal["summary"]) == 0:
            raise ValueError("summary must be a non-empty string")

        # Bullet points
        bullets = signal["bulletPoints"]
        if not isinstance(bullets, list) or not all(isinstance(b, str) for b in bullets):
            raise ValueError("bulletPoints must be a list of strings")
        if len(bullets) != 3:
            raise ValueError(f"bulletPoints must have exactly 3 entries, got: {len(bullets)}")

        # Dominant factor
        if "dominantFactor" in signal:
            allowed = self.schema["properties"]["dominantFactor"]["enum"]
            if signal["dominantFactor"] not in allowed:
                raise ValueError(f"Invalid dominantFactor: {signal['dominantFactor']}")

    def _validate_indicators(self, indicators: Any) -> None:
        """Validate the indicator snapshot."""
        if not isinstance(indicators, dict):
            raise ValueError("indicators must be an object")

        missing = [field for field in SNAPSHOT_FIELDS if field not in indicators]
        if missing:
            raise ValueError(f"indicators missing fields: {missing}")

        extra = sorted(set(indicators) - set(SNAPSHOT_FIELDS))
        if extra:
            raise ValueError(f"indicators has unexpected fields: {extra}")

        for field in SNAPSHOT_FIELDS:
            if not _is_number(indicators[field]):
                raise ValueError(f"indicators.{field} must be a finite number, got: {indicators[field]}")

        if not (0 <= indicators["rsi"] <= 100):
            raise ValueError(f"indicators.rsi must be between 0-100, got: {indicators['rsi']}")

        if indicators["price"] < 0:
            raise ValueError(f"indicators.price must be non-negative, got: {indicators['price']}")

    def _validate_scores(self, signal: dict[str, Any]) -> None:
        """Validate factor scores when present."""
        scores = signal.get("scores")
        if scores is None:
            return

        if not isinstance(scores, dict):
            raise ValueError("scores must be an object")

        for name, value in scores.items():
            if not _is_number(value) or not (-1 <= value <= 1):
                raise ValueError(f"scores.{name} must be between -1 and 1, got: {value}")

    def validate_signals(self, signals: list[dict[str, Any]]) -> list[bool]:
        """
        Validate multiple signal payloads.

        Returns:
            List of boolean validation results
        """
        results = []
        for signal in signals:
            try:
                results.append(self.validate_signal(signal))
            except SignalValidationError:
                results.append(False)
        return results

    def get_schema(self) -> dict[str, Any]:
        """Get the JSON schema for signals."""
        return self.schema.copy()


# Global validator instance
validator = SignalValidator()


def validate_signal(signal: dict[str, Any]) -> bool:
    """Convenience function to validate a signal."""
    return validator.validate_signal(signal)


def validate_signals(signals: list[dict[str, Any]]) -> list[bool]:
    """Convenience function to validate multiple signals."""
    return validator.validate_signals(signals)
