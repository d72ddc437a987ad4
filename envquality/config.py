"""
Configuration module for the EnvQuality monitor.

Settings are read from environment variables, optionally loaded from a .env
file. Invalid values fall back to their defaults with a printed notice.

Variables:
    ENVQUALITY_BASELINE: Baseline used when a payload has none (default 200)
    ENVQUALITY_POLL_INTERVAL_SECONDS: Seconds between polls (default 3)
    ENVQUALITY_LOG_DIR: Directory of the persistent log (default "logs")
    ENVQUALITY_PERSISTENT_LOG: "true"/"false", enables the log file (default false)
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_BASELINE = 200.0
DEFAULT_POLL_INTERVAL_SECONDS = 3.0
DEFAULT_LOG_DIR = "logs"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        print(f"MonitorSettings: invalid {name}={raw!r}, using default {default}")
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in ["1", "true", "yes", "on"]:
        return True
    if raw in ["0", "false", "no", "off"]:
        return False
    print(f"MonitorSettings: invalid {name}={raw!r}, using default {default}")
    return default


@dataclass
class MonitorSettings:
    """
    Runtime settings of the EnvironmentMonitor.

    Attributes:
        default_baseline: Baseline used when a sensor payload omits one
        poll_interval_seconds: Delay between two poll cycles (must be > 0)
        log_dir: Directory holding the persistent log file
        persistent_log: Whether each cycle is appended to the log file
    """

    default_baseline: float = DEFAULT_BASELINE
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS
    log_dir: Path = Path(DEFAULT_LOG_DIR)
    persistent_log: bool = False

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "MonitorSettings":
        """
        Builds settings from environment variables.

        Args:
            load_dotenv_file: If True, load a .env file from the working
                directory first (existing environment variables take
                precedence)

        Returns:
            MonitorSettings with defaults for unset or invalid variables
        """
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True))

        interval = _env_float("ENVQUALITY_POLL_INTERVAL_SECONDS", DEFAULT_POLL_INTERVAL_SECONDS)
        if interval <= 0:
            print(f"MonitorSettings: poll interval must be > 0, using default {DEFAULT_POLL_INTERVAL_SECONDS}")
            interval = DEFAULT_POLL_INTERVAL_SECONDS

        return cls(
            default_baseline=_env_float("ENVQUALITY_BASELINE", DEFAULT_BASELINE),
            poll_interval_seconds=interval,
            log_dir=Path(os.getenv("ENVQUALITY_LOG_DIR", "").strip() or DEFAULT_LOG_DIR),
            persistent_log=_env_bool("ENVQUALITY_PERSISTENT_LOG", False),
        )
