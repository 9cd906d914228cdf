"""Tests for error classification and propagation."""

import dataclasses

import pytest

from quantflow.config import config_from_dict, get_default_config
from quantflow.config.defaults import MACDParams
from quantflow.errors import (
    DataQualityError,
    InsufficientHistoryError,
    InvalidArgumentError,
    SignalValidationError,
    require_positive_int,
)
from quantflow.signals import generate_signal


class TestErrorClassification:
    """Test the error hierarchy seen by callers."""

    def test_invalid_argument_is_value_error(self):
        error = InvalidArgumentError("bad window", argument="window", value=0)
        assert isinstance(error, ValueError)
        assert error.recoverable is False
        assert error.argument == "window"
        assert error.value == 0
        assert error.context == {}

    def test_insufficient_history_is_data_quality(self):
        error = InsufficientHistoryError("too short", required_count=48, available_count=10)
        assert isinstance(error, DataQualityError)
        assert not isinstance(error, ValueError)
        assert error.recoverable is True
        assert error.required_count == 48
        assert error.available_count == 10

    def test_insufficient_history_context(self):
        error = InsufficientHistoryError("too short", context={"asset_id": "bitcoin"})
        assert error.context == {"asset_id": "bitcoin"}

    def test_signal_validation_error(self):
        error = SignalValidationError("bad payload", field="confidence")
        assert error.field == "confidence"
        assert error.recoverable is False


class TestRequirePositiveInt:
    """Test window and period checks."""

    def test_accepts_positive(self):
        assert require_positive_int(14, "period") == 14

    @pytest.mark.parametrize("value", [0, -1, 1.0, "14", None, True])
    def test_rejects(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            require_positive_int(value, "period")
        assert exc_info.value.argument == "period"


class TestErrorPropagation:
    """Test that errors surface unchanged through the public entry points."""

    def test_short_series_raises_insufficient_history(self, short_series):
        with pytest.raises(InsufficientHistoryError) as exc_info:
            generate_signal(short_series)
        assert exc_info.value.available_count == 5

    def test_invalid_config_raises_before_computation(self, short_series):
        """Malformed config wins over short history"""
        config = dataclasses.replace(get_default_config(), macd=MACDParams(fast=30))
        with pytest.raises(InvalidArgumentError):
            generate_signal(short_series, config)

    def test_config_from_dict_rejects_fast_above_slow(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            config_from_dict({"macd": {"fast": 30}})
        assert exc_info.value.argument == "macd.fast"

    def test_config_errors_collected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            config_from_dict({
                "macd": {"fast": 0},
                "thresholds": {"buy": 2.0},
            })
        assert len(exc_info.value.context["errors"]) == 2
