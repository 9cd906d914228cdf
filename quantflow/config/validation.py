"""Configuration validation utilities."""

from dataclasses import asdict, dataclass
from typing import Any, Union

from ..errors import InvalidArgumentError
from .defaults import DefaultConfig

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_LOG_STREAMS = {"stdout", "stderr"}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_moving_average_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate SMA window parameters."""
        errors = []

        for field in ("short_window", "long_window"):
            if field in params and not _is_positive_int(params[field]):
                errors.append(ValidationError(
                    field=f"moving_average.{field}",
                    message="Must be a positive integer",
                    value=params[field]
                ))

        return errors

    @staticmethod
    def validate_rsi_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate RSI parameters."""
        errors = []

        # Validate period
        if "period" in params and not _is_positive_int(params["period"]):
            errors.append(ValidationError(
                field="rsi.period",
                message="Must be a positive integer",
                value=params["period"]
            ))

        # Validate interpolation bounds
        for field in ("oversold", "overbought"):
            if field in params:
                value = params[field]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=f"rsi.{field}",
                        message="Must be a number between 0 and 100",
                        value=value
                    ))

        oversold = params.get("oversold")
        overbought = params.get("overbought")
        if _is_number(oversold) and _is_number(overbought) and oversold >= overbought:
            errors.append(ValidationError(
                field="rsi.oversold",
                message="Must be lower than rsi.overbought",
                value=oversold
            ))

        return errors

    @staticmethod
    def validate_macd_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate MACD parameters."""
        errors = []

        for field in ("fast", "slow", "signal"):
            if field in params and not _is_positive_int(params[field]):
                errors.append(ValidationError(
                    field=f"macd.{field}",
                    message="Must be a positive integer",
                    value=params[field]
                ))

        fast = params.get("fast")
        slow = params.get("slow")
        if _is_positive_int(fast) and _is_positive_int(slow) and fast >= slow:
            errors.append(ValidationError(
                field="macd.fast",
                message="Must be shorter than macd.slow",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_weight_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate factor weights."""
        errors = []

        for field in ("trend", "momentum", "convergence"):
            if field in params and not _is_number(params[field]):
                errors.append(ValidationError(
                    field=f"weights.{field}",
                    message="Must be a number",
                    value=params[field]
                ))

        weights = [params.get(f) for f in ("trend", "momentum", "convergence")]
        if all(_is_number(w) for w in weights) and sum(weights) <= 0:
            errors.append(ValidationError(
                field="weights",
                message="Weights must sum to a positive value",
                value=sum(weights)
            ))

        return errors

    @staticmethod
    def validate_threshold_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate BUY/SELL thresholds."""
        errors = []

        # Validate buy
        if "buy" in params:
            value = params["buy"]
            if not _is_number(value) or value <= 0 or value > 1:
                errors.append(ValidationError(
                    field="thresholds.buy",
                    message="Must be a number in (0, 1]",
                    value=value
                ))

        # Validate sell
        if "sell" in params:
            value = params["sell"]
            if not _is_number(value) or value >= 0 or value < -1:
                errors.append(ValidationError(
                    field="thresholds.sell",
                    message="Must be a number in [-1, 0)",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_scoring_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate scoring constants."""
        errors = []

        for field in ("trend_sensitivity", "zero_line_scale_pct", "histogram_floor_pct"):
            if field in params:
                value = params[field]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=f"scoring.{field}",
                        message="Must be a positive number",
                        value=value
                    ))

        if "histogram_lookback" in params and not _is_positive_int(params["histogram_lookback"]):
            errors.append(ValidationError(
                field="scoring.histogram_lookback",
                message="Must be a positive integer",
                value=params["histogram_lookback"]
            ))

        if "crossover_weight" in params:
            value = params["crossover_weight"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="scoring.crossover_weight",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {sorted(_LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"logging.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        stream = params.get("stream", "stdout")
        if not isinstance(stream, str) or stream not in _LOG_STREAMS:
            errors.append(ValidationError(
                field="logging.stream",
                message=f"Must be one of {sorted(_LOG_STREAMS)}",
                value=stream
            ))

        return errors

    @staticmethod
    def validate_config(config: Union[dict[str, Any], DefaultConfig]) -> list[ValidationError]:
        """Validate complete configuration."""
        if isinstance(config, DefaultConfig):
            config = asdict(config)

        validators = {
            "moving_average": ConfigValidator.validate_moving_average_params,
            "rsi": ConfigValidator.validate_rsi_params,
            "macd": ConfigValidator.validate_macd_params,
            "weights": ConfigValidator.validate_weight_params,
            "thresholds": ConfigValidator.validate_threshold_params,
            "scoring": ConfigValidator.validate_scoring_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        errors = []
        for section, value in config.items():
            if section not in validators:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
            elif not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))
            else:
                errors.extend(validators[section](value))

        return errors

    @staticmethod
    def ensure_valid(config: Union[dict[str, Any], DefaultConfig]) -> None:
        """
        Validate configuration and fail fast on any problem.

        Raises:
            InvalidArgumentError: Listing every validation error found
        """
        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise InvalidArgumentError(
                "Invalid configuration: " + "; ".join(error_msgs),
                argument=errors[0].field,
                value=errors[0].value,
                context={"errors": error_msgs},
            )
