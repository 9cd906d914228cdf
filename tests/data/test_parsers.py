"""Tests for raw market-data payload parsing"""

from datetime import datetime, timezone

import pytest

from quantflow.data import parse_market_chart, parse_price_pairs, parse_price_points
from quantflow.errors import InvalidArgumentError


class TestParsePricePairs:
    """Test [[time, price], ...] parsing"""

    def test_valid_pairs(self, sample_price_pairs):
        series = parse_price_pairs(sample_price_pairs)

        assert len(series) == 3
        assert series.values == [42000.5, 42150.0, 41980.25]
        assert series.times[0] == 1_704_067_200_000

    def test_float_timestamps_truncated(self):
        series = parse_price_pairs([[1_704_067_200_000.0, 1.0]])
        assert series.times == [1_704_067_200_000]
        assert isinstance(series.times[0], int)

    def test_string_prices(self):
        series = parse_price_pairs([[0, "42000.50"], [1, "42001"]])
        assert series.values == [42000.5, 42001.0]

    def test_datetime_timestamps(self):
        ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
        series = parse_price_pairs([[ts, 1.0]])
        assert series.times == [1_704_067_200_000]

    @pytest.mark.parametrize("pair", [[0], [0, 1.0, 2.0], "01", None, {"time": 0}])
    def test_malformed_pair(self, pair):
        with pytest.raises(InvalidArgumentError):
            parse_price_pairs([[0, 1.0], pair])

    @pytest.mark.parametrize("price", ["abc", None, True, [1.0], -5.0])
    def test_bad_price(self, price):
        with pytest.raises(InvalidArgumentError):
            parse_price_pairs([[0, price]])

    def test_bad_timestamp(self):
        with pytest.raises(InvalidArgumentError):
            parse_price_pairs([["yesterday", 1.0]])

    def test_unsorted_pairs(self):
        with pytest.raises(InvalidArgumentError):
            parse_price_pairs([[2, 1.0], [1, 1.0]])

    def test_empty_pairs(self):
        with pytest.raises(InvalidArgumentError):
            parse_price_pairs([])


class TestParseMarketChart:
    """Test raw market-chart response decoding"""

    def test_prices_array(self):
        body = b'{"prices": [[0, 1.5], [1000, 2.5]], "total_volumes": [[0, 10]]}'
        series = parse_market_chart(body)
        assert series.values == [1.5, 2.5]
        assert series.times == [0, 1000]

    def test_str_body(self):
        assert len(parse_market_chart('{"prices": [[0, 1.0]]}')) == 1

    def test_custom_key(self):
        series = parse_market_chart('{"data": [[0, 3.0]]}', key="data")
        assert series.last_price == 3.0

    def test_invalid_json(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_market_chart(b'{"prices": [')
        assert exc_info.value.argument == "raw_data"

    @pytest.mark.parametrize("body", ['{"error": "rate limited"}', '[[0, 1.0]]', '{"prices": {}}'])
    def test_missing_prices_array(self, body):
        with pytest.raises(InvalidArgumentError):
            parse_market_chart(body)

    def test_empty_prices_array(self):
        with pytest.raises(InvalidArgumentError):
            parse_market_chart('{"prices": []}')


class TestParsePricePoints:
    """Test [{"time": ..., "value": ...}, ...] parsing"""

    def test_valid_points(self):
        series = parse_price_points([{"time": 0, "value": 1.0}, {"time": 1, "value": "2.5"}])
        assert series.values == [1.0, 2.5]

    def test_extra_keys_ignored(self):
        series = parse_price_points([{"time": 0, "value": 1.0, "volume": 12}])
        assert series.to_list() == [{"time": 0, "value": 1.0}]

    def test_missing_field(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_price_points([{"time": 0}])
        assert "value" in str(exc_info.value)

    def test_non_object_item(self):
        with pytest.raises(InvalidArgumentError):
            parse_price_points([[0, 1.0]])
