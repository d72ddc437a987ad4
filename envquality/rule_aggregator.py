"""
Rule aggregator module for the EnvQuality classifier.

This module contains the RuleAggregator, which combines the three membership
vectors through a fixed set of fuzzy AND/OR rules into one activation
strength per output condition, and the ActivationVector holding the result.
"""

from dataclasses import dataclass

import numpy as np

from .condition import CANONICAL_ORDER, Condition
from .membership import AqiMembership, HumidityMembership, TemperatureMembership


def fuzzy_and(*degrees: float) -> float:
    """Fuzzy AND: minimum of the operands. NaN in any operand gives NaN."""
    return float(np.min(degrees))


def fuzzy_or(*degrees: float) -> float:
    """Fuzzy OR: maximum of the operands. NaN in any operand gives NaN."""
    return float(np.max(degrees))


@dataclass(frozen=True)
class ActivationVector:
    """
    Activation strength of each output condition, in [0, 1].

    Attributes:
        excellent: Support for "excellent"
        good: Support for "good"
        suitable: Support for "suitable"
        moderate: Support for "moderate"
        poor: Support for "poor"
        hazardous: Support for "hazardous"
    """

    excellent: float
    good: float
    suitable: float
    moderate: float
    poor: float
    hazardous: float

    def strength(self, condition: Condition) -> float:
        """Returns the activation strength of a single condition."""
        return getattr(self, Condition(condition).value)

    def items(self) -> list[tuple[Condition, float]]:
        """Returns (condition, strength) pairs in canonical order."""
        return [(condition, self.strength(condition)) for condition in CANONICAL_ORDER]

    def to_dict(self) -> dict[str, float]:
        """Converts the vector to a plain dict keyed by label, in canonical order."""
        return {condition.value: value for condition, value in self.items()}


class RuleAggregator:
    """
    Fixed rule base mapping membership vectors to condition activations.

    The rules encode the domain policy of the sensor module and are applied
    exactly as written; they are not derived from the membership shapes.
    """

    def aggregate(
        self,
        aqi: AqiMembership,
        temperature: TemperatureMembership,
        humidity: HumidityMembership,
    ) -> ActivationVector:
        """
        Evaluates the rule base.

        Args:
            aqi: Membership of the gas deviation
            temperature: Membership of the temperature
            humidity: Membership of the humidity

        Returns:
            ActivationVector with one strength per condition
        """
        excellent = fuzzy_and(aqi.excellent, temperature.comfortable, humidity.comfortable)

        good = fuzzy_or(
            fuzzy_and(aqi.good, temperature.comfortable),
            fuzzy_and(aqi.excellent, fuzzy_or(temperature.warm, humidity.humid)),
        )

        suitable = fuzzy_or(
            fuzzy_and(aqi.moderate, temperature.comfortable),
            fuzzy_and(aqi.good, fuzzy_or(temperature.warm, temperature.cold)),
        )

        moderate = fuzzy_or(
            aqi.moderate,
            fuzzy_and(aqi.good, fuzzy_or(humidity.humid, humidity.dry)),
            fuzzy_and(temperature.hot, humidity.very_humid),
        )

        poor = fuzzy_or(
            aqi.poor,
            fuzzy_and(aqi.moderate, fuzzy_or(temperature.hot, humidity.very_humid)),
        )

        hazardous = fuzzy_or(
            aqi.hazardous,
            fuzzy_and(aqi.poor, temperature.hot, humidity.very_humid),
        )

        return ActivationVector(
            excellent=excellent,
            good=good,
            suitable=suitable,
            moderate=moderate,
            poor=poor,
            hazardous=hazardous,
        )
