"""
Tests for SensorReading and SimulatedSensorProvider.

Tests cover:
- Deviation derivation
- Validation: finite and non-finite values
- Payload parsing: valid, default baseline, malformed payloads
- Simulated provider replay
"""

import math
from datetime import datetime

import pytest

from envquality.sensor_provider import DEMO_PAYLOAD, SimulatedSensorProvider
from envquality.sensor_reading import SensorReadError, SensorReading


class TestSensorReading:
    """Test suite for SensorReading."""

    def test_deviation_is_raw_minus_baseline(self):
        reading = SensorReading(306, 200, 26.7, 52.0)
        assert reading.deviation == 106

    def test_negative_deviation(self):
        reading = SensorReading(150, 200, 20.0, 40.0)
        assert reading.deviation == -50

    # ==================== Validation ====================

    def test_valid_reading(self):
        """Equivalence class: All finite → validation passes."""
        valid, reason = SensorReading(306, 200, 26.7, 52.0).validate()
        assert valid is True
        assert reason is None

    def test_out_of_range_values_still_valid(self):
        """Physically implausible but finite values are not rejected."""
        valid, _ = SensorReading(-5, 0, 150.0, -20.0).validate()
        assert valid is True

    @pytest.mark.parametrize("field", [
        "raw_gas_value",
        "baseline_value",
        "temperature_celsius",
        "relative_humidity_percent",
    ])
    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_value_fails(self, field, bad):
        """Error scenario: NaN or infinity in any field → validation fails."""
        values = {
            "raw_gas_value": 306,
            "baseline_value": 200,
            "temperature_celsius": 26.7,
            "relative_humidity_percent": 52.0,
        }
        values[field] = bad
        valid, reason = SensorReading(**values).validate()
        assert valid is False
        assert field in reason

    # ==================== Payload Parsing ====================

    def test_from_payload(self):
        timestamp = datetime(2024, 5, 1, 12, 0, 0)
        reading = SensorReading.from_payload(DEMO_PAYLOAD, timestamp=timestamp)
        assert reading.raw_gas_value == 306.0
        assert reading.baseline_value == 200.0
        assert reading.temperature_celsius == 26.70
        assert reading.relative_humidity_percent == 52.00
        assert reading.timestamp == timestamp

    def test_payload_deviation_field_is_ignored(self):
        payload = dict(DEMO_PAYLOAD, deviation=999)
        assert SensorReading.from_payload(payload).deviation == 106

    def test_numeric_strings_accepted(self):
        payload = {"mq135": "250", "baseline": "200", "temperature": "21.5", "humidity": "40"}
        reading = SensorReading.from_payload(payload)
        assert reading.deviation == 50.0
        assert reading.temperature_celsius == 21.5

    def test_missing_baseline_uses_default(self):
        payload = {"mq135": 230, "temperature": 21.0, "humidity": 40.0}
        reading = SensorReading.from_payload(payload, default_baseline=200.0)
        assert reading.baseline_value == 200.0
        assert reading.deviation == 30.0

    def test_missing_baseline_without_default_raises(self):
        payload = {"mq135": 230, "temperature": 21.0, "humidity": 40.0}
        with pytest.raises(SensorReadError, match="baseline"):
            SensorReading.from_payload(payload)

    def test_null_baseline_uses_default(self):
        payload = {"mq135": 306, "baseline": None, "temperature": 26.7, "humidity": 52}
        reading = SensorReading.from_payload(payload, default_baseline=200.0)
        assert reading.baseline_value == 200.0
        assert reading.deviation == pytest.approx(106.0)

    def test_null_baseline_without_default_raises(self):
        payload = {"mq135": 306, "baseline": None, "temperature": 26.7, "humidity": 52}
        with pytest.raises(SensorReadError, match="baseline"):
            SensorReading.from_payload(payload)

    @pytest.mark.parametrize("missing", ["mq135", "temperature", "humidity"])
    def test_missing_field_raises(self, missing):
        payload = dict(DEMO_PAYLOAD)
        del payload[missing]
        with pytest.raises(SensorReadError, match=missing):
            SensorReading.from_payload(payload)

    @pytest.mark.parametrize("bad", ["warm", [26.7], True])
    def test_non_numeric_field_raises(self, bad):
        payload = dict(DEMO_PAYLOAD, temperature=bad)
        with pytest.raises(SensorReadError, match="temperature"):
            SensorReading.from_payload(payload)


class TestSimulatedSensorProvider:
    """Test suite for SimulatedSensorProvider."""

    def test_default_returns_demo_reading(self):
        provider = SimulatedSensorProvider()
        reading = provider.read()
        assert reading.deviation == 106
        assert reading.timestamp is not None
        assert provider.read().deviation == 106

    def test_replays_payloads_in_order_and_cycles(self):
        provider = SimulatedSensorProvider([
            {"mq135": 200, "baseline": 200, "temperature": 22.0, "humidity": 45.0},
            {"mq135": 245, "baseline": 200, "temperature": 22.0, "humidity": 45.0},
        ])
        assert [provider.read().deviation for _ in range(3)] == [0, 45, 0]

    def test_default_baseline_applied(self):
        provider = SimulatedSensorProvider(
            [{"mq135": 180, "temperature": 22.0, "humidity": 45.0}],
            default_baseline=150.0,
        )
        assert provider.read().deviation == 30.0

    def test_malformed_payload_raises(self):
        provider = SimulatedSensorProvider([{"mq135": 180}])
        with pytest.raises(SensorReadError):
            provider.read()

    def test_empty_payload_list_falls_back_to_demo(self):
        assert SimulatedSensorProvider([]).read().deviation == 106
