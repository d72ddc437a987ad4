"""
Sensor provider module for the EnvQuality monitor.

This module contains the SimulatedSensorProvider, an offline stand-in for the
sensor module that replays JSON payloads in the shape the module publishes.
Any object with a ``read() -> SensorReading`` method can be used as a
provider by the EnvironmentMonitor.
"""

from datetime import datetime
from itertools import cycle
from typing import Any, Iterable, Mapping, Optional

from .config import DEFAULT_BASELINE
from .sensor_reading import SensorReading

# Demonstration payload of the sensor module
DEMO_PAYLOAD: dict[str, float] = {
    "mq135": 306,
    "baseline": 200,
    "deviation": 106,
    "temperature": 26.70,
    "humidity": 52.00,
}


class SimulatedSensorProvider:
    """
    Provider that replays a fixed sequence of sensor payloads.

    Payloads are returned in order and the sequence restarts when exhausted.
    With no payloads, the demonstration payload is returned on every read.
    """

    def __init__(
        self,
        payloads: Optional[Iterable[Mapping[str, Any]]] = None,
        default_baseline: float = DEFAULT_BASELINE,
    ) -> None:
        """
        Args:
            payloads: Payloads to replay; defaults to the demonstration payload
            default_baseline: Baseline for payloads that do not carry one
        """
        items = list(payloads) if payloads is not None else [DEMO_PAYLOAD]
        if not items:
            items = [DEMO_PAYLOAD]
        self._payloads = cycle(items)
        self.default_baseline = default_baseline

    def read(self) -> SensorReading:
        """
        Returns the next reading.

        Raises:
            SensorReadError: If the next payload is malformed
        """
        payload = next(self._payloads)
        return SensorReading.from_payload(
            payload,
            default_baseline=self.default_baseline,
            timestamp=datetime.now(),
        )
