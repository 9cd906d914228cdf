"""Tests for composite signal synthesis"""

import pytest

from quantflow.config import config_from_dict
from quantflow.config.defaults import RSIParams, ScoringParams
from quantflow.errors import InsufficientHistoryError, InvalidArgumentError
from quantflow.metrics.calculator import IndicatorCalculator
from quantflow.models.signal import Factor, SignalAction
from quantflow.signals import SignalSynthesizer, generate_signal
from quantflow.signals.synthesizer import (
    clamp,
    convergence_score,
    momentum_score,
    snap,
    trend_score,
)


class TestFactorScores:
    """Test the individual directional scores"""

    def test_clamp(self):
        assert clamp(2.5) == 1.0
        assert clamp(-3.0) == -1.0
        assert clamp(0.25) == 0.25

    def test_snap(self):
        assert snap(1e-12) == 0.0
        assert snap(-1e-12) == 0.0
        assert snap(0.5) == 0.5

    def test_trend_score_scaled(self):
        # 1% spread * 50 -> 0.5
        assert trend_score(101.0, 100.0, 50.0) == pytest.approx(0.5)
        assert trend_score(99.0, 100.0, 50.0) == pytest.approx(-0.5)

    def test_trend_score_saturates(self):
        assert trend_score(110.0, 100.0, 50.0) == 1.0
        assert trend_score(90.0, 100.0, 50.0) == -1.0

    def test_trend_score_zero_long(self):
        assert trend_score(1.0, 0.0, 50.0) == 0.0

    @pytest.mark.parametrize("rsi,expected", [
        (30.0, 1.0),
        (70.0, -1.0),
        (50.0, 0.0),
        (40.0, 0.5),
        (60.0, -0.5),
        (0.0, 1.0),
        (100.0, -1.0),
    ])
    def test_momentum_score_contrarian(self, rsi, expected):
        assert momentum_score(rsi, RSIParams()) == pytest.approx(expected)

    def test_momentum_score_custom_bounds(self):
        params = RSIParams(oversold=20.0, overbought=80.0)
        assert momentum_score(35.0, params) == pytest.approx(0.5)

    def test_convergence_crossover_only(self):
        params = ScoringParams(crossover_weight=1.0)
        # histogram at its own recent maximum
        assert convergence_score(0.0, 2.0, [1.0, -2.0, 2.0], 100.0, params) == pytest.approx(1.0)
        assert convergence_score(0.0, -1.0, [1.0, -2.0, 2.0], 100.0, params) == pytest.approx(-0.5)

    def test_convergence_histogram_floor(self):
        """Tiny histograms are scaled against a price-based floor"""
        params = ScoringParams(crossover_weight=1.0, histogram_floor_pct=0.001)
        # floor = 0.1, histogram 0.05 -> 0.5
        assert convergence_score(0.0, 0.05, [0.05], 100.0, params) == pytest.approx(0.5)

    def test_convergence_zero_line_only(self):
        params = ScoringParams(crossover_weight=0.0, zero_line_scale_pct=0.01)
        # macd 0.5 against a scale of 1.0
        assert convergence_score(0.5, 0.0, [0.0], 100.0, params) == pytest.approx(0.5)
        assert convergence_score(-5.0, 0.0, [0.0], 100.0, params) == -1.0

    def test_convergence_blend(self):
        params = ScoringParams()
        score = convergence_score(2.0, 1.0, [1.0], 100.0, params)
        assert score == pytest.approx(0.5 * 1.0 + 0.5 * 1.0)

    def test_convergence_zero_price(self):
        """Zero price leaves no normalizer; the score falls back to neutral"""
        assert convergence_score(0.0, 0.0, [0.0], 0.0, ScoringParams()) == 0.0


class TestSignalSynthesizer:
    """Test end-to-end synthesis on canonical series"""

    def test_rising_series_buy(self, rising_series):
        signal = SignalSynthesizer().generate(rising_series)

        assert signal.action == SignalAction.BUY
        assert signal.confidence == 25
        assert signal.dominant_factor == Factor.TREND
        assert signal.scores.trend == 1.0
        assert signal.scores.momentum == -1.0
        assert signal.scores.convergence == pytest.approx(0.5)
        assert signal.scores.composite == pytest.approx(0.25)
        assert signal.summary == (
            "Buy signal with 25% confidence, led by an upward trend "
            "with the short SMA above the long SMA."
        )

    def test_falling_series_sell(self, falling_series):
        signal = SignalSynthesizer().generate(falling_series)

        assert signal.action == SignalAction.SELL
        assert signal.confidence == 25
        assert signal.dominant_factor == Factor.TREND
        assert signal.scores.momentum == 1.0
        assert signal.scores.composite == pytest.approx(-0.25)
        assert signal.summary.startswith("Sell signal with 25% confidence, led by a downward trend")

    def test_flat_series_hold(self, flat_series):
        signal = SignalSynthesizer().generate(flat_series)

        assert signal.action == SignalAction.HOLD
        assert signal.confidence == 0
        assert signal.scores.trend == 0.0
        assert signal.scores.momentum == 0.0
        assert signal.scores.convergence == 0.0
        assert signal.scores.composite == 0.0
        assert signal.dominant_factor == Factor.TREND
        assert signal.summary == (
            "Hold with 0% confidence, led by a flat trend between the short and long SMAs."
        )
        assert signal.indicators.rsi == 50.0
        assert signal.bullet_points[2] == (
            "Convergence: MACD (0.0000) is level with its signal line (0.0000), on the zero line."
        )

    def test_snapshot_is_latest_values(self, wave_series):
        synthesizer = SignalSynthesizer()
        signal = synthesizer.generate(wave_series)
        bundle = IndicatorCalculator().calculate(wave_series)

        assert signal.indicators.short_sma == bundle.sma_short.latest()
        assert signal.indicators.long_sma == bundle.sma_long.latest()
        assert signal.indicators.rsi == bundle.rsi.latest()
        assert signal.indicators.histogram == bundle.macd.histogram.latest()
        assert signal.indicators.price == wave_series.last_price

    def test_scores_bounded(self, wave_series):
        signal = SignalSynthesizer().generate(wave_series)
        for value in signal.scores.to_dict().values():
            assert -1.0 <= value <= 1.0
        assert 0 <= signal.confidence <= 100

    def test_confidence_tracks_composite(self, wave_series):
        signal = SignalSynthesizer().generate(wave_series)
        assert signal.confidence == round(abs(signal.scores.composite) * 100)

    def test_three_bullets_in_factor_order(self, wave_series):
        signal = SignalSynthesizer().generate(wave_series)
        assert len(signal.bullet_points) == 3
        assert signal.bullet_points[0].startswith("Trend:")
        assert signal.bullet_points[1].startswith("Momentum:")
        assert signal.bullet_points[2].startswith("Convergence:")

    def test_thresholds_are_inclusive(self, rising_series):
        """A composite exactly at the buy threshold is a BUY"""
        config = config_from_dict({"weights": {"trend": 1.0, "momentum": 0.0, "convergence": 0.0},
                                   "thresholds": {"buy": 1.0}})
        signal = SignalSynthesizer(config).generate(rising_series)
        assert signal.action == SignalAction.BUY

    def test_custom_threshold_below_composite(self, rising_series):
        config = config_from_dict({"thresholds": {"buy": 0.24}})
        signal = SignalSynthesizer(config).generate(rising_series)
        assert signal.action == SignalAction.BUY

    def test_higher_threshold_holds(self, rising_series):
        config = config_from_dict({"thresholds": {"buy": 0.3}})
        signal = SignalSynthesizer(config).generate(rising_series)
        assert signal.action == SignalAction.HOLD
        assert signal.confidence == 25

    def test_weights_normalized(self, rising_series):
        """Scaling every weight by the same factor leaves the composite unchanged"""
        base = SignalSynthesizer().generate(rising_series)
        scaled = SignalSynthesizer(config_from_dict({
            "weights": {"trend": 4.0, "momentum": 3.0, "convergence": 3.0},
        })).generate(rising_series)

        assert scaled.scores.composite == pytest.approx(base.scores.composite)
        assert scaled.action == base.action

    def test_single_factor_weight(self, rising_series):
        config = config_from_dict({"weights": {"trend": 1.0, "momentum": 0.0, "convergence": 0.0}})
        signal = SignalSynthesizer(config).generate(rising_series)

        assert signal.scores.composite == 1.0
        assert signal.confidence == 100
        assert signal.dominant_factor == Factor.TREND

    def test_momentum_can_dominate(self, rising_series):
        config = config_from_dict({"weights": {"trend": 0.1, "momentum": 0.8, "convergence": 0.1}})
        signal = SignalSynthesizer(config).generate(rising_series)

        assert signal.dominant_factor == Factor.MOMENTUM
        assert signal.action == SignalAction.SELL
        assert "overbought RSI momentum" in signal.summary

    def test_insufficient_history(self, short_series):
        with pytest.raises(InsufficientHistoryError) as exc_info:
            SignalSynthesizer().generate(short_series)
        assert exc_info.value.required_count == 48

    def test_macd_bound_config_rejects_one_short(self, make_series):
        """slow + signal points are required when MACD dominates the warm-up"""
        config = config_from_dict({"moving_average": {"short_window": 5, "long_window": 20}})
        series = make_series([100.0 + i for i in range(34)])

        with pytest.raises(InsufficientHistoryError) as exc_info:
            generate_signal(series, config)
        assert exc_info.value.required_count == 35

        signal = generate_signal(make_series([100.0 + i for i in range(35)]), config)
        assert signal.action == SignalAction.BUY

    def test_synthesize_incomplete_bundle(self, short_series):
        synthesizer = SignalSynthesizer()
        bundle = synthesizer.calculator.calculate(short_series)
        with pytest.raises(InsufficientHistoryError):
            synthesizer.synthesize(bundle, short_series.last_price)

    def test_invalid_config_rejected(self):
        with pytest.raises(InvalidArgumentError):
            SignalSynthesizer(config_from_dict({"weights": {"trend": 0, "momentum": 0, "convergence": 0}}))


class TestGenerateSignal:
    """Test the convenience entry point"""

    def test_accepts_point_sequence(self, rising_series):
        signal = generate_signal(list(rising_series.points))
        assert signal == generate_signal(rising_series)

    def test_to_dict_shape(self, rising_series):
        payload = generate_signal(rising_series).to_dict()

        assert payload["action"] == "BUY"
        assert payload["dominantFactor"] == "trend"
        assert isinstance(payload["bulletPoints"], list)
        assert set(payload["indicators"]) == {
            "short", "long", "rsi", "macd", "macdSignal", "histogram", "price"
        }
        assert set(payload["scores"]) == {"trend", "momentum", "convergence", "composite"}

    def test_rejects_bare_prices(self):
        """Bare numbers are not price points"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            generate_signal([100.0 + i for i in range(60)])
        assert exc_info.value.argument == "series"
