"""
Log entry module for the EnvQuality monitor.

This module defines the LogEntry dataclass which represents a single log
record for a poll cycle: the reading that was obtained (if any), the
condition it was classified as (if any), and details about the cycle.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .condition import Condition
from .sensor_reading import SensorReading


@dataclass
class LogEntry:
    """
    Represents a single log record for a poll cycle.

    A cycle whose reading could not be obtained or was withheld from the
    classifier has no condition; the reason is recorded in ``details``.

    Attributes:
        timestamp: When the cycle ran
        reading: The reading used as input, or None if none was obtained
        condition: The classified condition, or None if classification was skipped
        details: Additional metadata (deviation, activations, errors)
    """

    timestamp: datetime
    reading: Optional[SensorReading]
    condition: Optional[Condition]
    details: dict[str, str]

    @property
    def classified(self) -> bool:
        """True if the cycle produced a condition."""
        return self.condition is not None

    def to_dict(self) -> dict[str, object]:
        """
        Converts the log entry to a serializable dictionary.

        Returns:
            A dictionary representation of the log entry with all fields
            converted to serializable types
        """
        reading = None
        if self.reading is not None:
            reading = {
                "raw_gas_value": self.reading.raw_gas_value,
                "baseline_value": self.reading.baseline_value,
                "temperature_celsius": self.reading.temperature_celsius,
                "relative_humidity_percent": self.reading.relative_humidity_percent,
                "timestamp": self.reading.timestamp.isoformat() if self.reading.timestamp else None,
            }

        return {
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "reading": reading,
            "condition": self.condition.value if self.condition is not None else None,
            "details": self.details,
        }
