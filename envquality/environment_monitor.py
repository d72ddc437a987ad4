"""
Environment monitor module for the EnvQuality classifier.

This module contains the EnvironmentMonitor class, which drives the poll
cycle around the classifier: it obtains a reading from a provider, withholds
failed or incomplete readings, classifies the rest, and records every cycle
as a LogEntry (optionally appended to a persistent log file).

The classifier itself stays pure; scheduling, retries and logging all live
here.
"""

import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Protocol

from .config import MonitorSettings
from .environment_classifier import EnvironmentClassifier
from .log_entry import LogEntry
from .sensor_reading import SensorReadError, SensorReading


class SensorProvider(Protocol):
    """Anything that can produce a SensorReading."""

    def read(self) -> SensorReading:
        ...


class EnvironmentMonitor:
    """
    Poll-cycle orchestrator for the environment classifier.

    Each cycle ends in one of three statuses, recorded in the LogEntry details:
    - "CLASSIFIED": the reading was classified
    - "SENSOR_ERROR": the provider failed, the classifier was not called
    - "INVALID_READING": the reading had non-finite values and was withheld
    """

    LOG_FILE_NAME = "monitor_log.log"

    def __init__(
        self,
        classifier: Optional[EnvironmentClassifier] = None,
        settings: Optional[MonitorSettings] = None,
    ) -> None:
        """
        Args:
            classifier: Classifier to use; a default one is created if None
            settings: Monitor settings; read from the environment if None
        """
        self.classifier = classifier or EnvironmentClassifier()
        self.settings = settings or MonitorSettings.from_env()
        self.last_entry: Optional[LogEntry] = None

        if self.settings.persistent_log:
            self._ensure_log_file_exists()

    @property
    def log_file(self) -> Path:
        return Path(self.settings.log_dir) / self.LOG_FILE_NAME

    def _ensure_log_file_exists(self) -> None:
        """
        Create log directory and file header if needed.

        A failure is reported and otherwise ignored; each later cycle then
        reports its own write failure from _log_entry.
        """
        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)

            if not self.log_file.exists():
                with open(self.log_file, "w", encoding="utf-8") as f:
                    f.write("# Environment Monitor Log\n")
                    f.write("# Format: [TIMESTAMP] CONDITION | STATUS | DEVIATION | TEMP | HUMIDITY | NOTE\n")
                    f.write("# " + "=" * 80 + "\n\n")
        except OSError as e:
            print(f"EnvironmentMonitor: failed to prepare log file {self.log_file}: {e}")

    def _log_entry(self, entry: LogEntry) -> None:
        """
        Append one cycle to the persistent log file.

        A write failure is reported and otherwise ignored so that logging
        never breaks the poll cycle.
        """
        status = entry.details.get("status", "UNKNOWN")
        condition_str = entry.condition.value.upper() if entry.condition is not None else "-"

        if entry.reading is not None:
            deviation_str = f"{entry.reading.deviation:+.2f}"
            temp_str = f"{entry.reading.temperature_celsius:.2f} C"
            humidity_str = f"{entry.reading.relative_humidity_percent:.2f} %"
        else:
            deviation_str = temp_str = humidity_str = "-"

        note = entry.details.get("error") or f"strength {entry.details.get('winning_strength', '-')}"

        try:
            with open(self.log_file, "a", encoding="utf-8") as f:
                timestamp_str = entry.timestamp.strftime("%Y-%m-%d %H:%M:%S")
                f.write(
                    f"[{timestamp_str}] {condition_str:9s} | "
                    f"{status:15s} | "
                    f"Dev: {deviation_str:>9s} | "
                    f"T: {temp_str:>9s} | "
                    f"H: {humidity_str:>9s} | "
                    f"{note}\n"
                )
        except OSError as e:
            print(f"EnvironmentMonitor: failed to write log file {self.log_file}: {e}")

    def process_reading(self, reading: SensorReading) -> LogEntry:
        """
        Validates and classifies one reading.

        Readings with non-finite values are not passed to the classifier.

        Args:
            reading: The reading to process

        Returns:
            LogEntry describing the outcome
        """
        valid, reason = reading.validate()
        if not valid:
            return LogEntry(
                timestamp=datetime.now(),
                reading=reading,
                condition=None,
                details={
                    "status": "INVALID_READING",
                    "error": reason or "unknown",
                },
            )

        result = self.classifier.classify(reading)

        details = {
            "status": "CLASSIFIED",
            "deviation": f"{result.deviation:.2f}",
            "winning_strength": f"{result.activations.strength(result.condition):.3f}",
        }
        for label, value in result.activations.to_dict().items():
            details[f"activation_{label}"] = f"{value:.3f}"

        return LogEntry(
            timestamp=datetime.now(),
            reading=reading,
            condition=result.condition,
            details=details,
        )

    def poll_once(self, provider: SensorProvider) -> LogEntry:
        """
        Runs one poll cycle against a provider.

        A SensorReadError from the provider is recorded as a "SENSOR_ERROR"
        cycle; the classifier is not called. Other exceptions propagate.

        Args:
            provider: Source of the reading

        Returns:
            LogEntry describing the cycle
        """
        try:
            reading = provider.read()
        except SensorReadError as e:
            entry = LogEntry(
                timestamp=datetime.now(),
                reading=None,
                condition=None,
                details={
                    "status": "SENSOR_ERROR",
                    "error": str(e),
                },
            )
        else:
            entry = self.process_reading(reading)

        self.last_entry = entry

        if self.settings.persistent_log:
            self._log_entry(entry)

        return entry

    def run(
        self,
        provider: SensorProvider,
        max_cycles: Optional[int] = None,
        on_entry: Optional[Callable[[LogEntry], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """
        Polls the provider repeatedly at the configured interval.

        Args:
            provider: Source of the readings
            max_cycles: Number of cycles to run, or None to run until interrupted
            on_entry: Optional callback receiving each cycle's LogEntry
            sleep: Function used to wait between cycles

        Returns:
            Number of cycles that were run
        """
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            if cycles > 0:
                sleep(self.settings.poll_interval_seconds)

            entry = self.poll_once(provider)
            cycles += 1

            if on_entry is not None:
                on_entry(entry)

        return cycles
