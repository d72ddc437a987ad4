"""
Sensor reading module for the EnvQuality classifier.

This module defines the SensorReading dataclass which represents one set of
readings from the gas/climate sensor module: the raw gas-sensor value, the
baseline it is compared against, the ambient temperature and the relative
humidity. It also parses the JSON payload published by the sensor module.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional


class SensorReadError(Exception):
    """Raised when a reading cannot be obtained or parsed from the sensor."""


@dataclass
class SensorReading:
    """
    Represents one reading from the sensor module.

    The classifier only consumes the deviation of the gas value from its
    baseline, never the two values on their own.

    Attributes:
        raw_gas_value: Raw gas-sensor (MQ135) value
        baseline_value: Reference value the raw reading is compared against
        temperature_celsius: Ambient temperature in Celsius
        relative_humidity_percent: Relative humidity in percent
        timestamp: Optional timestamp when the reading was taken
    """

    raw_gas_value: float
    baseline_value: float
    temperature_celsius: float
    relative_humidity_percent: float
    timestamp: Optional[datetime] = None

    @property
    def deviation(self) -> float:
        """Raw gas value minus the baseline."""
        return self.raw_gas_value - self.baseline_value

    def validate(self) -> tuple[bool, Optional[str]]:
        """
        Checks that every value is a finite number.

        The classifier itself accepts any real number, including NaN and
        infinities. This check is used by callers that prefer to withhold
        incomplete readings instead of letting the classifier degrade to its
        default label.

        Returns:
            A tuple containing:
            - bool: True if all values are finite, False otherwise
            - Optional[str]: None if valid, or a descriptive error message if invalid
        """
        fields = (
            ("raw_gas_value", self.raw_gas_value),
            ("baseline_value", self.baseline_value),
            ("temperature_celsius", self.temperature_celsius),
            ("relative_humidity_percent", self.relative_humidity_percent),
        )
        for name, value in fields:
            if not math.isfinite(value):
                return (False, f"{name} must be a finite number")

        return (True, None)

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        default_baseline: Optional[float] = None,
        timestamp: Optional[datetime] = None,
    ) -> "SensorReading":
        """
        Builds a reading from the sensor module's JSON object.

        The module publishes ``mq135``, ``baseline``, ``temperature`` and
        ``humidity`` (plus a ``deviation`` field that is ignored and
        recomputed). ``baseline`` may be omitted or null when a default is supplied.

        Args:
            payload: Decoded JSON object from the sensor module
            default_baseline: Baseline to use when the payload has none
            timestamp: Optional timestamp to attach to the reading

        Returns:
            The parsed SensorReading

        Raises:
            SensorReadError: If a required field is missing or not numeric
        """
        baseline = payload.get("baseline")
        # The module sends "baseline": null before it has calibrated
        if baseline is None:
            baseline = default_baseline
        if baseline is None:
            raise SensorReadError("payload is missing 'baseline' and no default baseline is configured")

        values = {}
        for key, raw in (
            ("mq135", payload.get("mq135")),
            ("baseline", baseline),
            ("temperature", payload.get("temperature")),
            ("humidity", payload.get("humidity")),
        ):
            if raw is None:
                raise SensorReadError(f"payload is missing '{key}'")
            # bool is an int subclass but never a valid reading
            if isinstance(raw, bool):
                raise SensorReadError(f"payload field '{key}' is not numeric: {raw!r}")
            try:
                values[key] = float(raw)
            except (TypeError, ValueError):
                raise SensorReadError(f"payload field '{key}' is not numeric: {raw!r}")

        return cls(
            raw_gas_value=values["mq135"],
            baseline_value=values["baseline"],
            temperature_celsius=values["temperature"],
            relative_humidity_percent=values["humidity"],
            timestamp=timestamp,
        )
