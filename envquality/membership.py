"""
Membership module for the EnvQuality classifier.

This module contains the MembershipEvaluator, which converts each raw input
(gas deviation, temperature, humidity) into a fixed vector of fuzzy
membership degrees, and the three dataclasses holding those vectors.

Degrees within one vector overlap on purpose and do not sum to 1. Every
formula is total over the reals and bounded to [0, 1]; NaN input yields NaN
in every degree of the affected vector.
"""

from dataclasses import dataclass

import numpy as np


def _floor0(value: float) -> float:
    """max(0, value), keeping NaN."""
    return float(np.maximum(0.0, value))


def _ceil1(value: float) -> float:
    """min(1, value), keeping NaN."""
    return float(np.minimum(1.0, value))


@dataclass(frozen=True)
class AqiMembership:
    """
    Membership degrees of the gas-sensor deviation.

    Attributes:
        excellent: Deviation close to zero
        good: Small deviation (peaks at 20)
        moderate: Medium deviation (30-80)
        poor: Large deviation (70-150)
        hazardous: Very large deviation (saturates at 200)
    """

    excellent: float
    good: float
    moderate: float
    poor: float
    hazardous: float


@dataclass(frozen=True)
class TemperatureMembership:
    """Membership degrees of the ambient temperature (Celsius)."""

    cold: float
    comfortable: float
    warm: float
    hot: float


@dataclass(frozen=True)
class HumidityMembership:
    """Membership degrees of the relative humidity (percent)."""

    dry: float
    comfortable: float
    humid: float
    very_humid: float


class MembershipEvaluator:
    """
    Stateless fuzzifier for the three classifier inputs.

    Each method maps one crisp value to its membership vector. No input is
    rejected: out-of-range values saturate at the bounds of each set.
    """

    def aqi_membership(self, deviation: float) -> AqiMembership:
        """
        Computes membership of the gas deviation in the five AQI sets.

        Only the magnitude of the deviation matters, so readings below the
        baseline are treated like readings above it.

        Args:
            deviation: Raw gas value minus baseline

        Returns:
            AqiMembership with degrees in [0, 1]
        """
        a = abs(deviation)

        excellent = _floor0(1 - a / 20)

        if a < 20:
            good = _floor0(a / 20)
        else:
            good = _floor0(1 - (a - 20) / 30)

        if 30 <= a < 80:
            moderate = _ceil1((a - 30) / 30)
        else:
            moderate = _floor0(1 - abs(a - 65) / 35)

        if 70 <= a < 150:
            poor = _ceil1((a - 70) / 50)
        else:
            poor = _floor0(1 - abs(a - 120) / 50)

        hazardous = _ceil1(_floor0((a - 130) / 70))

        return AqiMembership(
            excellent=excellent,
            good=good,
            moderate=moderate,
            poor=poor,
            hazardous=hazardous,
        )

    def temperature_membership(self, temperature_celsius: float) -> TemperatureMembership:
        """
        Computes membership of the temperature in the four temperature sets.

        Args:
            temperature_celsius: Ambient temperature in Celsius

        Returns:
            TemperatureMembership with degrees in [0, 1]
        """
        t = temperature_celsius

        # Intentionally bounded at 1; the raw ramp exceeds 1 below 10 C
        cold = _ceil1(_floor0(1 - (t - 10) / 10))

        if 18 <= t <= 26:
            comfortable = 1.0
        elif t < 18:
            comfortable = _floor0((t - 10) / 8)
        else:
            comfortable = _floor0(1 - (t - 26) / 8)

        if 24 <= t <= 32:
            warm = _ceil1((t - 24) / 4)
        else:
            warm = _floor0(1 - abs(t - 28) / 8)

        hot = _ceil1(_floor0((t - 30) / 10))

        return TemperatureMembership(cold=cold, comfortable=comfortable, warm=warm, hot=hot)

    def humidity_membership(self, relative_humidity_percent: float) -> HumidityMembership:
        """
        Computes membership of the relative humidity in the four humidity sets.

        Args:
            relative_humidity_percent: Relative humidity in percent

        Returns:
            HumidityMembership with degrees in [0, 1]
        """
        h = relative_humidity_percent

        # Intentionally bounded at 1; the raw ramp exceeds 1 for negative humidity
        dry = _ceil1(_floor0(1 - h / 30))

        if 30 <= h <= 60:
            comfortable = 1.0
        elif h < 30:
            comfortable = _floor0(h / 30)
        else:
            comfortable = _floor0(1 - (h - 60) / 20)

        if 50 <= h <= 80:
            humid = _ceil1((h - 50) / 15)
        else:
            humid = _floor0(1 - abs(h - 65) / 25)

        very_humid = _ceil1(_floor0((h - 70) / 20))

        return HumidityMembership(dry=dry, comfortable=comfortable, humid=humid, very_humid=very_humid)
